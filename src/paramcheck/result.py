"""Validation result: coerced values plus a per-field error report."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any


def field_name(key: object) -> str:
    """Canonical field identifier for a key or a group of keys.

    Field names are strings; a group (multi-key entry) becomes the
    comma-joined names, e.g. ``("start", "end")`` -> ``"start,end"``.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, Iterable):
        return ",".join(str(k) for k in key)
    return str(key)


class Result:
    """Accumulates the outcome of one ``validate()`` call.

    ``values`` holds fields that passed every rule (or were excluded);
    ``errors`` maps a field name to one message. Recording a second
    error for the same field replaces the first.

    The result is falsy when invalid::

        result = validate(request.query, spec)
        if not result:
            return Response(json.dumps(dict(result.errors)), status=400)
        params = result.snapshot()
    """

    __slots__ = ("_errors", "_error_format", "_values")

    def __init__(self, *, error_format: str = "{field}: {message}") -> None:
        self._values: dict[str, Any] = {}
        self._errors: dict[str, str] = {}
        self._error_format = error_format

    # -- Values --

    def set(self, key: object, value: Any) -> None:
        self._values[field_name(key)] = value

    def get(self, key: object, default: Any = None) -> Any:
        return self._values.get(field_name(key), default)

    def __setitem__(self, key: object, value: Any) -> None:
        self.set(key, value)

    def __getitem__(self, key: object) -> Any:
        return self._values[field_name(key)]

    def __contains__(self, key: object) -> bool:
        return field_name(key) in self._values

    @property
    def values(self) -> Mapping[str, Any]:
        """Read-only view of the validated values."""
        return MappingProxyType(self._values)

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the validated values."""
        return dict(self._values)

    # -- Errors --

    def error(self, key: object, message: str) -> None:
        """Record *message* for *key* (a field name or a group of names)."""
        name = field_name(key)
        self._errors[name] = self._error_format.format(field=name, message=message)

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only view of field name -> error message."""
        return MappingProxyType(self._errors)

    def has_error(self) -> bool:
        return bool(self._errors)

    @property
    def is_valid(self) -> bool:
        """True if no error was recorded."""
        return not self._errors

    def __bool__(self) -> bool:
        """Falsy when invalid, so ``if not result:`` reads naturally."""
        return not self._errors

    def __repr__(self) -> str:
        return f"Result(values={self._values!r}, errors={self._errors!r})"
