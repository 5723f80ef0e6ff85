"""Discord OAuth2 endpoint descriptor."""

from dataclasses import dataclass

from pydantic import HttpUrl, TypeAdapter, ValidationError

from discauth.config import ProviderConfig
from discauth.exceptions import ConfigError

_http_url = TypeAdapter(HttpUrl)


def _base_url(value: str, setting: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError as e:
        raise ConfigError(f"Invalid {setting}: {value!r}") from e
    return value.rstrip("/")


@dataclass(frozen=True)
class DiscordApi:
    """Fixed Discord endpoints used during the OAuth2 flow."""

    authorization_base_url: str = "https://discordapp.com/api/oauth2/authorize"
    access_token_endpoint: str = "https://discordapp.com/api/oauth2/token"
    profile_url: str = "https://discordapp.com/api/users/@me"
    cdn_base_url: str = "https://cdn.discordapp.com"

    @classmethod
    def from_config(cls, config: ProviderConfig | None = None) -> "DiscordApi":
        """
        Build endpoints from configured base URLs.

        Raises:
            ConfigError: If a base URL is not an absolute http(s) URL
        """
        config = config or ProviderConfig()
        api = _base_url(config.api_base_url, "api_base_url")
        return cls(
            authorization_base_url=f"{api}/oauth2/authorize",
            access_token_endpoint=f"{api}/oauth2/token",
            profile_url=f"{api}/users/@me",
            cdn_base_url=_base_url(config.cdn_base_url, "cdn_base_url"),
        )


DISCORD_API = DiscordApi()
