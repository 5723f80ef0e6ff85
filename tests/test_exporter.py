"""Unit tests for profile serialization - uses JSON fixtures, no internet."""

import json

import pytest
from pydantic import ValidationError

from discauth.core.definition import ProfileDefinition
from discauth.core.exporter import to_json, to_dict, from_json
from discauth.models.profile import DiscordProfile


@pytest.fixture
def alice(alice_body) -> DiscordProfile:
    return ProfileDefinition().extract(alice_body)


class TestToJson:
    """Test JSON string conversion."""

    def test_to_json_is_valid_json(self, alice):
        parsed = json.loads(to_json(alice))
        assert parsed["id"] == "123456789012345678"
        assert parsed["picture_url"].endswith("/abcd1234efgh5678.png")

    def test_absent_attributes_omitted(self):
        parsed = json.loads(to_json(DiscordProfile(id="1")))
        assert parsed == {"id": "1"}

    def test_keep_none(self):
        parsed = json.loads(to_json(DiscordProfile(id="1"), exclude_none=False))
        assert "email" in parsed
        assert parsed["email"] is None


class TestToDict:
    """Test dictionary conversion."""

    def test_to_dict_keys(self, alice):
        d = to_dict(alice)
        assert set(d) == {
            "id", "username", "discriminator", "avatar", "email",
            "bot", "mfa_enabled", "verified", "picture_url",
        }

    def test_picture_url_is_string(self, alice):
        assert isinstance(to_dict(alice)["picture_url"], str)

    def test_empty_profile(self):
        assert to_dict(DiscordProfile()) == {}


class TestFromJson:
    """Test loading serialized profiles."""

    def test_roundtrip_preserves_profile(self, alice):
        assert from_json(to_json(alice)) == alice

    def test_invalid_json_raises(self):
        with pytest.raises(ValidationError):
            from_json('{"id": "1", "picture_url": "not a url"}')
