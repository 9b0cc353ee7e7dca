"""Paramcheck: declarative validation for flat request parameters.

Describe the expected fields once, get coerced values or a per-field
error report::

    from paramcheck import Rule, make_rule, validate

    result = validate(params, {
        "name": {"rule": make_rule("not_blank")},
        "age": {"rule": make_rule("natural")},
        "tags": {"rule": make_rule("not_blank"), "array": True, "size": range(0, 4)},
        ("start", "end"): {
            "rule": Rule(lambda s, e: int(s) <= int(e), "start must be before end"),
        },
    })
    if result.has_error():
        ...  # result.errors == {"age": "age: invalid integer (>= 1)"}
    clean = result.snapshot()
"""

from paramcheck.config import ValidatorConfig
from paramcheck.errors import ConfigurationError, ParamcheckError
from paramcheck.params import MultiValueMapping, RawParams
from paramcheck.result import Result
from paramcheck.rule import Rule
from paramcheck.rules import make_rule
from paramcheck.spec import Spec, SpecEntry
from paramcheck.validator import Validator, validate

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MultiValueMapping",
    "ParamcheckError",
    "RawParams",
    "Result",
    "Rule",
    "Spec",
    "SpecEntry",
    "Validator",
    "ValidatorConfig",
    "make_rule",
    "validate",
]
