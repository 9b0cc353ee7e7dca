"""Validator engine: resolves a spec against raw params into a Result.

Usage::

    from paramcheck import make_rule, validate

    result = validate(request.query, {
        "name": {"rule": make_rule("not_blank")},
        "age": {"rule": make_rule("natural"), "default": "20"},
        "tags": {"rule": make_rule("not_blank"), "array": True, "size": {1, 2, 3}},
    })
    if not result:
        return Response(json.dumps(dict(result.errors)), status=400)
    params = result.snapshot()

Entries are processed in spec order and independently of each other.
Within a rule chain every rule runs, even after a failure. A passing
rule's formatted value is what the next rule sees; a failing rule
leaves the value as it was.
"""

import logging
from collections.abc import Mapping
from typing import Any

from paramcheck.config import ValidatorConfig
from paramcheck.params import MultiValueMapping
from paramcheck.result import Result
from paramcheck.rules import describe_range
from paramcheck.spec import Spec, SpecEntry

logger = logging.getLogger("paramcheck.validator")


class Validator:
    """Stateless engine; a single instance can serve any number of calls."""

    __slots__ = ("config",)

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self.config = config or ValidatorConfig()

    def validate(
        self,
        params: Mapping[str, Any],
        spec: Spec | Mapping[Any, Mapping[str, Any]],
    ) -> Result:
        """Validate *params* against *spec*.

        Raises ``ConfigurationError`` if *spec* is malformed. Invalid
        input never raises; it is reported through ``Result.errors``.
        """
        if not isinstance(spec, Spec):
            spec = Spec(spec)

        result = Result(error_format=self.config.error_format)
        for entry in spec:
            match entry.mode:
                case "multi":
                    self._validate_multi_key(result, params, entry)
                case "array":
                    self._validate_array(result, params, entry)
                case _:
                    self._validate_single(result, params, entry)

        if result.has_error():
            logger.debug("Validation failed for %s", ", ".join(result.errors))
        else:
            logger.debug("Validated %d fields", len(result.values))
        return result

    # -- Strategies --

    def _validate_single(self, result: Result, params: Mapping[str, Any], entry: SpecEntry) -> None:
        key = entry.field
        value = params.get(key)
        if entry.has_default and value is None:
            value = entry.default
        if entry.excludable and value is None:
            result[key] = None
            return

        valid, formatted = self._run_chain(result, entry, value)
        if valid:
            result[key] = formatted

    def _validate_array(self, result: Result, params: Mapping[str, Any], entry: SpecEntry) -> None:
        key = entry.field
        values = _read_list(params, key)
        if entry.excludable and values is None:
            result[key] = []
            return
        if values is None:
            values = []

        if entry.size is not None:
            if not values and 0 not in entry.size:
                self._fail(result, key, self.config.empty_message)
                return
            if len(values) not in entry.size:
                message = self.config.size_message.format(sizes=describe_range(entry.size))
                self._fail(result, key, message)
                return

        valid = True
        formatted_values: list[Any] = []
        for value in values:
            element_valid, formatted = self._run_chain(result, entry, value)
            if not element_valid:
                valid = False
            elif valid:
                formatted_values.append(formatted)

        if valid:
            result[key] = formatted_values

    def _validate_multi_key(self, result: Result, params: Mapping[str, Any], entry: SpecEntry) -> None:
        values = tuple(params.get(key) for key in entry.key)
        for rule in entry.rules:
            passed = rule.check(*values)
            if self.config.debug:
                logger.debug("%s: %r -> %s", entry.field, rule, "ok" if passed else "failed")
            if not passed:
                self._fail(result, entry.field, rule.message)

    # -- Helpers --

    def _run_chain(self, result: Result, entry: SpecEntry, value: Any) -> tuple[bool, Any]:
        """Run every rule of *entry* against *value*, feeding formatted values forward."""
        valid = True
        for rule in entry.rules:
            if rule.check(value):
                value = rule.format(value)
                if self.config.debug:
                    logger.debug("%s: %r -> ok (%r)", entry.field, rule, value)
            else:
                self._fail(result, entry.field, rule.message)
                valid = False
        return valid, value

    def _fail(self, result: Result, key: str, message: str) -> None:
        logger.debug("%s: %s", key, message)
        result.error(key, message)


def _read_list(params: Mapping[str, Any], key: str) -> list[Any] | None:
    """Read an array field; ``None`` when the field is absent."""
    if isinstance(params, MultiValueMapping):
        if key not in params:
            return None
        return params.get_list(key)
    value = params.get(key)
    if value is None:
        return None
    if isinstance(value, list | tuple):
        return list(value)
    return [value]


_default_validator = Validator()


def validate(
    params: Mapping[str, Any],
    spec: Spec | Mapping[Any, Mapping[str, Any]],
    *,
    config: ValidatorConfig | None = None,
) -> Result:
    """Validate *params* against *spec* and return a ``Result``.

    Args:
        params: Any mapping of field names to raw values: a ``dict``,
            ``RawParams``, or a web framework's query/form mapping.
        spec: A compiled ``Spec`` or the mapping to compile.
        config: Messages and diagnostics; defaults to ``ValidatorConfig()``.
    """
    validator = _default_validator if config is None else Validator(config)
    return validator.validate(params, spec)
