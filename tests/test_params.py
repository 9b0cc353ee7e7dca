"""Tests for paramcheck.params: RawParams and the MultiValueMapping protocol."""

import pytest

from paramcheck import make_rule, validate
from paramcheck.params import MultiValueMapping, RawParams


class TestRawParams:
    def test_scalar_and_list_values(self) -> None:
        params = RawParams({"tag": ["a", "b"], "page": "2"})
        assert params["tag"] == "a"
        assert params.get_list("tag") == ["a", "b"]
        assert params["page"] == "2"
        assert params.get_list("page") == ["2"]

    def test_missing(self) -> None:
        params = RawParams({})
        assert params.get("x") is None
        assert params.get("x", "d") == "d"
        assert params.get_list("x") == []
        assert "x" not in params
        with pytest.raises(KeyError):
            params["x"]

    def test_mapping_protocol(self) -> None:
        params = RawParams({"a": "1", "b": ["2", "3"]})
        assert len(params) == 2
        assert sorted(params) == ["a", "b"]
        assert dict(params) == {"a": "1", "b": "2"}

    def test_get_list_is_a_copy(self) -> None:
        params = RawParams({"tag": ["a"]})
        params.get_list("tag").append("b")
        assert params.get_list("tag") == ["a"]

    def test_immutable(self) -> None:
        params = RawParams({"a": "1"})
        with pytest.raises(AttributeError):
            params._data = {}  # type: ignore[misc]

    def test_is_multi_value_mapping(self) -> None:
        assert isinstance(RawParams(), MultiValueMapping)

    def test_plain_dict_is_not(self) -> None:
        assert not isinstance({}, MultiValueMapping)

    def test_none_value_is_absent(self) -> None:
        params = RawParams({"tags": None, "page": "1"})
        assert "tags" not in params
        assert params.get("tags") is None
        assert params.get_list("tags") == []
        assert len(params) == 1

    def test_none_value_validates_like_plain_dict(self) -> None:
        spec = {"tags": {"rule": make_rule("not_blank"), "array": True, "excludable": True}}
        from_dict = validate({"tags": None}, spec)
        from_params = validate(RawParams({"tags": None}), spec)
        assert from_params.values == from_dict.values == {"tags": []}
        assert from_params.errors == from_dict.errors == {}


class TestFromQueryString:
    def test_bytes(self) -> None:
        params = RawParams.from_query_string(b"tag=a&tag=b&page=2")
        assert params.get_list("tag") == ["a", "b"]
        assert params["page"] == "2"

    def test_str(self) -> None:
        params = RawParams.from_query_string("q=hello+world")
        assert params["q"] == "hello world"

    def test_blank_values_kept(self) -> None:
        params = RawParams.from_query_string(b"name=&page=1")
        assert params["name"] == ""

    def test_empty(self) -> None:
        assert len(RawParams.from_query_string(b"")) == 0
