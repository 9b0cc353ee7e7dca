"""Tests for paramcheck.errors: exception hierarchy."""

import pytest

from paramcheck import make_rule, validate
from paramcheck.errors import ConfigurationError, ParamcheckError


class TestHierarchy:
    def test_configuration_error_is_paramcheck_error(self) -> None:
        assert issubclass(ConfigurationError, ParamcheckError)

    def test_configuration_error_is_value_error(self) -> None:
        assert issubclass(ConfigurationError, ValueError)


class TestRaisedEagerly:
    def test_unknown_rule_kind(self) -> None:
        with pytest.raises(ConfigurationError):
            make_rule("email")

    def test_bad_spec_raises_even_without_input(self) -> None:
        with pytest.raises(ConfigurationError):
            validate({}, {("a", "b"): {"default": "x"}})

    def test_invalid_input_never_raises(self) -> None:
        result = validate({"age": object()}, {"age": {"rule": make_rule("natural")}})
        assert result.has_error()

    def test_custom_checker_exception_propagates(self) -> None:
        def boom(value: str) -> bool:
            raise RuntimeError("checker bug")

        with pytest.raises(RuntimeError, match="checker bug"):
            validate({"a": "1"}, {"a": {"rule": make_rule("custom", boom, "never")}})
