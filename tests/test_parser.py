"""Unit tests for JSON body helpers."""

import pytest

from discauth.core.parser import parse_body, get_first_node, get_element
from discauth.exceptions import ParseError


class TestParseBody:
    """Test raw body decoding."""

    def test_parses_object(self):
        assert parse_body('{"id": "1"}') == {"id": "1"}

    def test_accepts_bytes(self):
        assert parse_body(b'{"id": "1"}') == {"id": "1"}

    @pytest.mark.parametrize("body", ["", None, b""])
    def test_empty_body_raises(self, body):
        with pytest.raises(ParseError):
            parse_body(body)

    def test_invalid_json_raises(self):
        with pytest.raises(ParseError, match="Invalid JSON"):
            parse_body("{not json")

    def test_deeply_nested_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_body("[" * 100000)


class TestGetFirstNode:
    """Test locating the profile object in a body."""

    def test_bare_object(self):
        assert get_first_node('{"id": "1", "username": "bob"}') == {"id": "1", "username": "bob"}

    def test_array_wrapped_object(self):
        assert get_first_node('[{"id": "1"}, {"id": "2"}]') == {"id": "1"}

    def test_single_key_envelope(self):
        assert get_first_node('{"user": {"id": "1"}}') == {"id": "1"}

    def test_envelope_not_unwrapped_when_id_present(self):
        node = get_first_node('{"id": "1"}')
        assert node == {"id": "1"}

    def test_path_descends_before_unwrapping(self):
        body = '{"data": {"users": [{"id": "7"}]}}'
        assert get_first_node(body, path="data.users") == {"id": "7"}

    @pytest.mark.parametrize("body", ["", "[]", "null", "42", '"text"', "[1, 2]", "{oops"])
    def test_unusable_body_returns_none(self, body):
        assert get_first_node(body) is None

    def test_empty_object_is_returned(self):
        assert get_first_node("{}") == {}


class TestGetElement:
    """Test field lookup on object nodes."""

    def test_top_level_field(self):
        assert get_element({"username": "bob"}, "username") == "bob"

    def test_dotted_path(self):
        assert get_element({"a": {"b": {"c": 3}}}, "a.b.c") == 3

    def test_missing_field(self):
        assert get_element({"a": 1}, "b") is None

    def test_null_field(self):
        assert get_element({"avatar": None}, "avatar") is None

    def test_non_object_intermediate(self):
        assert get_element({"a": [1, 2]}, "a.b") is None

    def test_false_is_preserved(self):
        assert get_element({"bot": False}, "bot") is False
