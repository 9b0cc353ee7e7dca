"""Validation spec: the caller's declarative mapping, compiled and checked.

A spec maps a key selector to the options for that entry::

    spec = Spec({
        "name": {"rule": make_rule("not_blank")},
        "page": {"rule": make_rule("natural"), "default": "1"},
        "sort": {"rule": make_rule("choice", "asc", "desc"), "excludable": True},
        "tags": {"rule": make_rule("not_blank"), "array": True, "size": range(0, 4)},
        ("start", "end"): {"rule": Rule(lambda s, e: int(s) <= int(e), "start must be before end")},
    })

A ``str`` selector names one field. A tuple (or list) of names makes a
multi-key entry whose rules receive every field value at once.

All structural mistakes raise ``ConfigurationError`` here, before any
input is validated.
"""

from collections.abc import Container, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

from paramcheck.errors import ConfigurationError
from paramcheck.result import field_name
from paramcheck.rule import Rule

Mode: TypeAlias = Literal["single", "array", "multi"]

OPTIONS = frozenset({"rule", "default", "excludable", "array", "size"})


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _flatten_rules(rule: object, key: str) -> tuple[Rule, ...]:
    if rule is None:
        return ()
    if isinstance(rule, Rule):
        return (rule,)
    if isinstance(rule, list | tuple):
        flat: list[Rule] = []
        for item in rule:
            flat.extend(_flatten_rules(item, key))
        return tuple(flat)
    msg = f"{key}: rule must be a Rule or a list of Rules, got {type(rule).__name__}"
    raise ConfigurationError(msg)


def _check_size(size: object, key: str) -> Container[int]:
    if isinstance(size, range):
        return size
    if isinstance(size, set | frozenset | list | tuple):
        if not all(isinstance(n, int) and not isinstance(n, bool) and n >= 0 for n in size):
            msg = f"{key}: size must contain non-negative integers, got {size!r}"
            raise ConfigurationError(msg)
        return frozenset(size)
    msg = f"{key}: size must be a set or range of integers, got {type(size).__name__}"
    raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class SpecEntry:
    """One compiled spec entry.

    ``key`` is a field name, or a tuple of field names for multi-key
    entries. ``default`` is ``MISSING`` when none was declared.
    """

    key: str | tuple[str, ...]
    rules: tuple[Rule, ...] = ()
    default: Any = MISSING
    excludable: bool = False
    array: bool = False
    size: Container[int] | None = None

    @property
    def mode(self) -> Mode:
        if isinstance(self.key, tuple):
            return "multi"
        if self.array:
            return "array"
        return "single"

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def field(self) -> str:
        """Field name used for values and errors (``"start,end"`` for groups)."""
        return field_name(self.key)

    @classmethod
    def build(cls, selector: object, options: Mapping[str, Any]) -> "SpecEntry":
        """Compile one ``selector: options`` pair, rejecting bad combinations."""
        if isinstance(selector, list | tuple):
            key: str | tuple[str, ...] = tuple(str(k) for k in selector)
            if not key:
                raise ConfigurationError("multi key validation spec needs at least one key")
        else:
            key = str(selector)
        name = field_name(key)

        if not isinstance(options, Mapping):
            msg = f"{name}: options must be a mapping, got {type(options).__name__}"
            raise ConfigurationError(msg)
        unknown = set(options) - OPTIONS
        if unknown:
            msg = f"{name}: unknown spec options: {', '.join(sorted(map(str, unknown)))}"
            raise ConfigurationError(msg)

        rules = _flatten_rules(options.get("rule"), name)
        array = bool(options.get("array", False))
        excludable = bool(options.get("excludable", False))
        default = options.get("default", MISSING)

        if isinstance(key, tuple):
            if default is not MISSING:
                raise ConfigurationError("multi key validation spec cannot have :default")
            if array or excludable:
                msg = f"{name}: multi key validation spec cannot be array or excludable"
                raise ConfigurationError(msg)
        elif array and default is not MISSING:
            raise ConfigurationError("array parameter cannot have :default")

        size = options.get("size")
        if size is not None:
            if not array:
                msg = f"{name}: size is only allowed for array parameters"
                raise ConfigurationError(msg)
            size = _check_size(size, name)

        return cls(
            key=key,
            rules=rules,
            default=default,
            excludable=excludable,
            array=array,
            size=size,
        )


class Spec:
    """An ordered, immutable collection of ``SpecEntry`` values.

    Compile once and reuse across calls and threads::

        SEARCH = Spec({"q": {"rule": make_rule("not_blank")}})
        result = validate(request.query, SEARCH)
    """

    __slots__ = ("_entries",)

    def __init__(self, spec: Mapping[Any, Mapping[str, Any]]) -> None:
        if not isinstance(spec, Mapping):
            msg = f"validation spec must be a mapping, got {type(spec).__name__}"
            raise ConfigurationError(msg)
        self._entries = tuple(SpecEntry.build(selector, options) for selector, options in spec.items())

    @property
    def entries(self) -> tuple[SpecEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[SpecEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Spec({[entry.field for entry in self._entries]!r})"
