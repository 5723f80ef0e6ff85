"""Pydantic models for discauth."""

from discauth.models.profile import DiscordProfile

__all__ = [
    "DiscordProfile",
]
