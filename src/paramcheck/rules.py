"""Built-in rule catalog.

Each factory returns a ``Rule`` with a fixed check, message and formatter::

    from paramcheck.rules import make_rule

    make_rule("natural")                # "3" -> 3, "0" fails
    make_rule("choice", "asc", "desc")
    make_rule("int_range", range(1, 101))
    make_rule("custom", lambda v: v.isalpha(), "letters only", "lower")

Checks look at the raw value. Strings are checked as-is; ``int`` and
``float`` values (typically a default, or the output of an earlier
rule's formatter) are checked by their decimal text. Anything else,
including ``None``, fails.
"""

import re
from collections.abc import Callable, Container, Iterable
from typing import Any

from paramcheck.errors import ConfigurationError
from paramcheck.rule import Rule

_INT_RE = re.compile(r"-?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"-?([0-9]+\.?[0-9]*|\.[0-9]+)(e[+-][0-9]+)?")
_BOOL_RE = re.compile(r"0|1|true|false", re.IGNORECASE)
_TRUE_RE = re.compile(r"1|true", re.IGNORECASE)


def _text(value: Any) -> str | None:
    """Return the text form of *value* for pattern checks, or None."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            return str(value)
        except ValueError:
            # int too large for str() under the interpreter's digit limit
            return None
    return None


def _fullmatch(pattern: re.Pattern[str]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        text = _text(value)
        return text is not None and pattern.fullmatch(text) is not None

    return check


def _parse_int(pattern: re.Pattern[str]) -> Callable[[Any], int | None]:
    """Return a parser giving the int for *value*, or None if it is not one.

    Digit strings longer than the interpreter's int conversion limit
    count as invalid rather than raising.
    """
    matches = _fullmatch(pattern)

    def parse(value: Any) -> int | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if not matches(value):
            return None
        try:
            return int(value)
        except ValueError:
            return None

    return parse


_to_int = _parse_int(_INT_RE)
_to_uint = _parse_int(_UINT_RE)


def describe_range(values: Container[int]) -> str:
    """Human-readable form of an allowed set of integers.

    ``range(1, 11)`` -> ``"1..10"``; ``range(0, 10, 3)`` -> ``"0..9 step 3"``;
    ``{0, 1, 2}`` -> ``"{0, 1, 2}"``.
    """
    if isinstance(values, range):
        if not values:
            return "{}"
        if values.step == 1:
            return f"{values.start}..{values[-1]}"
        return f"{values.start}..{values[-1]} step {values.step}"
    if isinstance(values, set | frozenset):
        return "{" + ", ".join(str(v) for v in sorted(values)) + "}"
    return str(values)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def not_blank() -> Rule:
    """Present and not just whitespace. Strips surrounding whitespace."""
    return Rule(
        lambda v: isinstance(v, str) and bool(v.strip()),
        "missing or blank",
        "strip",
    )


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def choice(*choices: Any) -> Rule:
    """Value must equal one of *choices*."""
    allowed = tuple(choices)
    return Rule(lambda v: v in allowed, "invalid value")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def integer() -> Rule:
    return Rule(lambda v: _to_int(v) is not None, "invalid integer", _to_int)


def unsigned_integer() -> Rule:
    return Rule(
        lambda v: (n := _to_uint(v)) is not None and n >= 0,
        "invalid integer (>= 0)",
        _to_uint,
    )


def natural() -> Rule:
    """Integer >= 1."""
    return Rule(
        lambda v: (n := _to_uint(v)) is not None and n >= 1,
        "invalid integer (>= 1)",
        _to_uint,
    )


def floating() -> Rule:
    return Rule(_fullmatch(_FLOAT_RE), "invalid floating point num", float)


def int_range(allowed: Container[int]) -> Rule:
    """Integer contained in *allowed* (usually a ``range``)."""
    if not isinstance(allowed, Container) or isinstance(allowed, str):
        msg = f"int_range needs a range or container of ints, got {allowed!r}"
        raise ConfigurationError(msg)
    return Rule(
        lambda v: (n := _to_int(v)) is not None and n in allowed,
        f"invalid number in range {describe_range(allowed)}",
        _to_int,
    )


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def boolean() -> Rule:
    """``0``/``1``/``true``/``false`` (any case), formatted to ``bool``."""
    return Rule(
        _fullmatch(_BOOL_RE),
        "invalid bool value",
        lambda v: _TRUE_RE.fullmatch(str(v)) is not None,
    )


def regexp(pattern: str | re.Pattern[str]) -> Rule:
    """Value must contain a match for *pattern* (use anchors for a full match)."""
    try:
        compiled = re.compile(pattern)
    except (re.error, TypeError) as exc:
        msg = f"invalid pattern {pattern!r}: {exc}"
        raise ConfigurationError(msg) from exc

    def check(value: Any) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None

    return Rule(check, f"invalid input for pattern {compiled.pattern}")


def custom(
    checker: Callable[..., Any],
    message: str,
    formatter: object = None,
) -> Rule:
    """Wrap a caller-supplied check, message and optional formatter."""
    return Rule(checker, message, formatter)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

RULE_KINDS: dict[str, Callable[..., Rule]] = {
    "not_blank": not_blank,
    "choice": choice,
    "int": integer,
    "uint": unsigned_integer,
    "natural": natural,
    "float": floating,
    "double": floating,
    "real": floating,
    "int_range": int_range,
    "bool": boolean,
    "regexp": regexp,
    "custom": custom,
    "lambda": custom,
}


def _flatten(args: Iterable[Any]) -> list[Any]:
    flat: list[Any] = []
    for arg in args:
        if isinstance(arg, list | tuple):
            flat.extend(_flatten(arg))
        else:
            flat.append(arg)
    return flat


def make_rule(kind: str, *args: Any) -> Rule:
    """Build a catalog rule by name.

    List and tuple arguments are flattened, so ``make_rule("choice",
    ["a", "b"])`` equals ``make_rule("choice", "a", "b")``.

    Raises ``ConfigurationError`` for an unknown *kind* or arguments the
    factory does not accept.
    """
    try:
        factory = RULE_KINDS[kind]
    except (KeyError, TypeError):
        msg = f"unknown validator rule: {kind}"
        raise ConfigurationError(msg) from None
    try:
        return factory(*_flatten(args))
    except TypeError as exc:
        msg = f"bad arguments for rule {kind!r}: {exc}"
        raise ConfigurationError(msg) from exc
