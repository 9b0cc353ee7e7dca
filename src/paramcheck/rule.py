"""Rule: a check, its failure message, and an optional formatter."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from paramcheck.errors import ConfigurationError
from paramcheck.formatters import Formatter, resolve_formatter


@dataclass(frozen=True, slots=True, init=False)
class Rule:
    """An immutable validation rule.

    ``check`` receives one value for single and array fields, or every
    field value of a multi-key entry in selector order. ``format`` is
    only applied to values that passed ``check``::

        positive = Rule(lambda v: int(v) > 0, "must be positive", int)
        positive.check("3")    # True
        positive.format("3")   # 3

    Rules hold no mutable state and can be shared between spec entries
    and threads.
    """

    checker: Callable[..., Any]
    message: str
    formatter: Formatter = field(compare=False)

    def __init__(
        self,
        checker: Callable[..., Any],
        message: str,
        formatter: object = None,
    ) -> None:
        if not callable(checker):
            msg = f"rule checker must be callable, got {type(checker).__name__}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "checker", checker)
        object.__setattr__(self, "message", str(message))
        object.__setattr__(self, "formatter", resolve_formatter(formatter))

    def check(self, *values: Any) -> bool:
        return bool(self.checker(*values))

    def format(self, value: Any) -> Any:
        return self.formatter(value)

    def __repr__(self) -> str:
        return f"Rule({self.message!r})"
