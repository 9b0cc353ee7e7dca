"""Tests for paramcheck.result: value and error accumulation."""

import pytest

from paramcheck.result import Result, field_name


class TestFieldName:
    def test_string(self) -> None:
        assert field_name("age") == "age"

    def test_group(self) -> None:
        assert field_name(("start", "end")) == "start,end"

    def test_list_group(self) -> None:
        assert field_name(["a", "b", "c"]) == "a,b,c"

    def test_other_key(self) -> None:
        assert field_name(3) == "3"


class TestValues:
    def test_set_and_get(self) -> None:
        r = Result()
        r.set("age", 30)
        assert r.get("age") == 30
        assert r["age"] == 30
        assert "age" in r

    def test_item_assignment(self) -> None:
        r = Result()
        r["name"] = "bob"
        assert r.values == {"name": "bob"}

    def test_missing_key(self) -> None:
        r = Result()
        assert r.get("nope") is None
        assert r.get("nope", "fallback") == "fallback"
        assert "nope" not in r
        with pytest.raises(KeyError):
            r["nope"]

    def test_explicit_none_is_present(self) -> None:
        r = Result()
        r["sort"] = None
        assert "sort" in r
        assert r.snapshot() == {"sort": None}

    def test_snapshot_is_a_copy(self) -> None:
        r = Result()
        r["a"] = 1
        snap = r.snapshot()
        snap["b"] = 2
        assert r.snapshot() == {"a": 1}

    def test_values_view_is_read_only(self) -> None:
        r = Result()
        with pytest.raises(TypeError):
            r.values["a"] = 1  # type: ignore[index]


class TestErrors:
    def test_error_message_prefixed_with_field(self) -> None:
        r = Result()
        r.error("age", "invalid integer")
        assert r.errors == {"age": "age: invalid integer"}

    def test_group_error(self) -> None:
        r = Result()
        r.error(("start", "end"), "start must be before end")
        assert r.errors == {"start,end": "start,end: start must be before end"}

    def test_last_error_wins(self) -> None:
        r = Result()
        r.error("x", "first")
        r.error("x", "second")
        assert r.errors == {"x": "x: second"}

    def test_custom_error_format(self) -> None:
        r = Result(error_format="{message}")
        r.error("x", "bad")
        assert r.errors["x"] == "bad"

    def test_errors_view_is_read_only(self) -> None:
        r = Result()
        with pytest.raises(TypeError):
            r.errors["x"] = "bad"  # type: ignore[index]

    def test_has_error(self) -> None:
        r = Result()
        assert r.has_error() is False
        r.error("x", "bad")
        assert r.has_error() is True


class TestTruthiness:
    def test_truthy_when_valid(self) -> None:
        r = Result()
        assert r
        assert r.is_valid is True

    def test_falsy_when_invalid(self) -> None:
        r = Result()
        r.error("x", "bad")
        assert not r
        assert r.is_valid is False
