"""Value formatters applied after a rule's check succeeds.

A formatter is resolved once, when the rule is built::

    None            -> Identity()
    "strip"         -> NamedAccessor("strip")   # value.strip()
    int             -> Transform(int)           # int(value)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from paramcheck.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Identity:
    """Returns the value unchanged."""

    def __call__(self, value: Any) -> Any:
        return value


@dataclass(frozen=True, slots=True)
class NamedAccessor:
    """Calls the zero-argument method *name* on the value."""

    name: str

    def __call__(self, value: Any) -> Any:
        return getattr(value, self.name)()


@dataclass(frozen=True, slots=True)
class Transform:
    """Passes the value through *func*."""

    func: Callable[[Any], Any]

    def __call__(self, value: Any) -> Any:
        return self.func(value)


Formatter: TypeAlias = Identity | NamedAccessor | Transform

IDENTITY = Identity()


def resolve_formatter(formatter: object) -> Formatter:
    """Turn a user-supplied formatter spec into a ``Formatter``.

    Raises ``ConfigurationError`` for anything that is not ``None``,
    a method name, a callable, or an existing formatter.
    """
    if formatter is None:
        return IDENTITY
    if isinstance(formatter, Identity | NamedAccessor | Transform):
        return formatter
    if isinstance(formatter, str):
        if not formatter.isidentifier():
            msg = f"formatter method name must be an identifier, got {formatter!r}"
            raise ConfigurationError(msg)
        return NamedAccessor(formatter)
    if callable(formatter):
        return Transform(formatter)
    msg = f"formatter must be a method name or a callable, got {type(formatter).__name__}"
    raise ConfigurationError(msg)
