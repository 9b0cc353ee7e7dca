"""Raw input parameters.

``validate()`` accepts any ``Mapping``. Inputs that also implement
``MultiValueMapping`` (query strings, form bodies) expose every value
of a repeated key, which array entries read through ``get_list``.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable
from urllib.parse import parse_qs


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only mapping where keys can have multiple values.

    ``__getitem__`` and ``get`` return the first value for a key.
    ``get_list`` returns all values for a key.
    """

    def __getitem__(self, key: str) -> Any: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: Any = None) -> Any: ...
    def get_list(self, key: str) -> list[Any]: ...


class RawParams(Mapping[str, Any]):
    """Immutable multi-valued parameters.

    Built from a mapping whose values are scalars or lists, or parsed
    from a query string::

        RawParams({"tag": ["a", "b"], "page": "2"})
        RawParams.from_query_string(b"tag=a&tag=b&page=2")
    """

    _data: dict[str, list[Any]]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        normalized: dict[str, list[Any]] = {}
        for key, value in (data or {}).items():
            if value is None:
                # None means absent, same as for a plain dict
                continue
            normalized[str(key)] = list(value) if isinstance(value, list | tuple) else [value]
        object.__setattr__(self, "_data", normalized)

    @classmethod
    def from_query_string(cls, query_string: bytes | str) -> "RawParams":
        """Parse ``a=1&b=2&b=3``. Blank values are kept as ``""``."""
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        return cls(parse_qs(query_string, keep_blank_values=True))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("RawParams is immutable")

    def __getitem__(self, key: str) -> Any:
        values = self._data[key]
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RawParams({self._data!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[Any]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))
