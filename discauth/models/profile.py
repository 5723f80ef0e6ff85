"""Discord profile data model."""

from datetime import datetime, timedelta, timezone

from pydantic import AnyUrl, BaseModel

# Snowflake timestamps count milliseconds from here.
DISCORD_EPOCH = datetime(2015, 1, 1, tzinfo=timezone.utc)

ATTRIBUTE_FIELDS = (
    "username",
    "discriminator",
    "avatar",
    "email",
    "bot",
    "mfa_enabled",
    "verified",
)


class DiscordProfile(BaseModel):
    """
    Identity of an authenticated Discord user.

    Every field is optional: a profile extracted from an unusable body has no
    id and no attributes, and attributes missing from the body stay None
    rather than being defaulted.

    See https://discord.com/developers/docs/resources/user#user-object
    """

    model_config = {"frozen": True}

    id: str | None = None
    username: str | None = None
    discriminator: str | None = None
    avatar: str | None = None
    email: str | None = None
    bot: bool | None = None
    mfa_enabled: bool | None = None
    verified: bool | None = None
    picture_url: AnyUrl | None = None

    @property
    def is_empty(self) -> bool:
        return self.id is None

    @property
    def attributes(self) -> dict:
        """Attributes that were present in the response body."""
        return {
            name: getattr(self, name)
            for name in ATTRIBUTE_FIELDS
            if getattr(self, name) is not None
        }

    @property
    def creation_time(self) -> datetime | None:
        """Account creation time, decoded from the snowflake id."""
        if self.id is None or not (self.id.isascii() and self.id.isdigit()):
            return None
        try:
            return DISCORD_EPOCH + timedelta(milliseconds=int(self.id) >> 22)
        except OverflowError:
            return None

    @property
    def tag(self) -> str | None:
        """
        Display tag, e.g. "alice#0420".

        Accounts migrated to unique usernames report a "0" discriminator
        and are shown by username alone.
        """
        if self.username is None:
            return None
        if self.discriminator and self.discriminator != "0":
            return f"{self.username}#{self.discriminator}"
        return self.username
