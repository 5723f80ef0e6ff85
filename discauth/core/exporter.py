"""Serialization helpers for extracted profiles."""

from discauth.models.profile import DiscordProfile


def to_json(profile: DiscordProfile, indent: int | None = 2, exclude_none: bool = True) -> str:
    """
    Convert DiscordProfile to JSON string.

    Args:
        profile: DiscordProfile to serialize
        indent: JSON indentation level
        exclude_none: Drop attributes absent from the original body

    Returns:
        JSON string
    """
    return profile.model_dump_json(indent=indent, exclude_none=exclude_none)


def to_dict(profile: DiscordProfile, exclude_none: bool = True) -> dict:
    """Convert DiscordProfile to a JSON-compatible dictionary."""
    return profile.model_dump(mode="json", exclude_none=exclude_none)


def from_json(data: str | bytes) -> DiscordProfile:
    """
    Load a DiscordProfile previously produced by to_json.

    Unlike ProfileDefinition.extract, this validates strictly and raises
    pydantic.ValidationError on bad input.
    """
    return DiscordProfile.model_validate_json(data)
