"""Discord user object definition and profile extraction."""

from pydantic import AnyUrl, TypeAdapter, ValidationError

from discauth.core.api import DISCORD_API
from discauth.core.converters import Converter, to_boolean, to_string
from discauth.core.parser import get_element, get_first_node
from discauth.logging import get_logger
from discauth.models.profile import DiscordProfile

# JSON key -> (profile field, converter), applied in order
PRIMARY_ATTRIBUTES: tuple[tuple[str, str, Converter], ...] = (
    ("username", "username", to_string),
    ("discriminator", "discriminator", to_string),
    ("avatar", "avatar", to_string),
    ("email", "email", to_string),
    ("bot", "bot", to_boolean),
    ("mfa_enabled", "mfa_enabled", to_boolean),
    ("verified", "verified", to_boolean),
)

# Number of default avatars served under /embed/avatars/
DEFAULT_AVATAR_COUNT = 5

_any_url = TypeAdapter(AnyUrl)

# Characters that would end or escape a single path segment
_UNSAFE_SEGMENT_CHARS = frozenset("/\\?#%")


def _is_path_segment(value: str) -> bool:
    if value in (".", ".."):
        return False
    return not any(c in _UNSAFE_SEGMENT_CHARS or c.isspace() for c in value)


def _read_id(node: dict) -> str | None:
    value = get_element(node, "id")
    if isinstance(value, str):
        return value or None
    # Snowflakes arrive as strings, but tolerate a bare integer.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


class ProfileDefinition:
    """
    Maps a Discord ``/users/@me`` response body to a DiscordProfile.

    Example:
        definition = ProfileDefinition()
        profile = definition.extract(response.text)
        print(profile.username, profile.picture_url)
    """

    def __init__(self, cdn_base_url: str = DISCORD_API.cdn_base_url):
        self.cdn_base_url = cdn_base_url.rstrip("/")
        self._log = get_logger("profile_definition")

    @property
    def primary_attributes(self) -> list[str]:
        return [key for key, _, _ in PRIMARY_ATTRIBUTES]

    def extract(self, body: str | bytes | None) -> DiscordProfile:
        """
        Build a profile from a raw response body.

        Never raises for body content: an unusable body yields an empty
        profile and unconvertible attributes are skipped.

        Args:
            body: Raw JSON response body

        Returns:
            DiscordProfile, empty if no profile object with an id was found
        """
        node = get_first_node(body)
        if node is None:
            self._log.debug("profile_body_unparseable")
            return DiscordProfile()

        profile_id = _read_id(node)
        if profile_id is None:
            self._log.debug("profile_body_missing_id")
            return DiscordProfile()

        fields: dict = {"id": profile_id}
        for key, field_name, convert in PRIMARY_ATTRIBUTES:
            value = get_element(node, key)
            if value is None:
                continue
            converted = convert(value)
            if converted is not None:
                fields[field_name] = converted

        fields["picture_url"] = self.derive_picture_url(
            profile_id,
            avatar=fields.get("avatar"),
            discriminator=fields.get("discriminator"),
        )

        self._log.debug("profile_extracted", profile_id=profile_id)
        return DiscordProfile(**fields)

    def derive_picture_url(
        self,
        user_id: str,
        avatar: str | None = None,
        discriminator: str | None = None,
    ) -> AnyUrl | None:
        """
        Resolve the user's picture on the CDN.

        A custom avatar wins; otherwise the default avatar selected by the
        discriminator is used.
        See https://discord.com/developers/docs/reference#image-formatting
        """
        if avatar:
            if not (_is_path_segment(user_id) and _is_path_segment(avatar)):
                self._log.warning("picture_url_invalid", user_id=user_id, avatar=avatar)
                return None
            candidate = f"{self.cdn_base_url}/avatars/{user_id}/{avatar}.png"
        elif discriminator is not None:
            if not (discriminator.isascii() and discriminator.isdigit()):
                self._log.warning(
                    "picture_url_invalid_discriminator",
                    user_id=user_id,
                    discriminator=discriminator,
                )
                return None
            index = int(discriminator) % DEFAULT_AVATAR_COUNT
            candidate = f"{self.cdn_base_url}/embed/avatars/{index}.png"
        else:
            return None

        try:
            url = _any_url.validate_python(candidate)
        except ValidationError as e:
            self._log.warning("picture_url_invalid", url=candidate, error=str(e))
            return None

        # The URL parser resolves dot segments and escapes characters, which
        # would address a different resource than the formatted path.
        if str(url) != candidate:
            self._log.warning("picture_url_invalid", url=candidate, normalized=str(url))
            return None
        return url
