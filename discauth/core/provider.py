"""Provider capability consumed by an external OAuth2 framework."""

from abc import ABC, abstractmethod

from discauth.config import ProviderConfig
from discauth.core.api import DISCORD_API, DiscordApi
from discauth.core.definition import ProfileDefinition
from discauth.models.profile import DiscordProfile


class IdentityProvider(ABC):
    """Endpoints and profile mapping for one OAuth2 identity provider."""

    @abstractmethod
    def authorization_base_url(self) -> str:
        """URL the user agent is redirected to for consent."""
        ...

    @abstractmethod
    def access_token_endpoint(self) -> str:
        """URL the authorization code is exchanged at."""
        ...

    @abstractmethod
    def profile_url(self) -> str:
        """URL returning the authenticated user's profile document."""
        ...

    @abstractmethod
    def extract(self, body: str) -> DiscordProfile:
        """
        Map a profile response body to a profile.

        Args:
            body: Raw response body fetched from profile_url()
        """
        ...


class DiscordProvider(IdentityProvider):
    """
    Discord implementation of IdentityProvider.

    Example:
        provider = DiscordProvider()
        framework.register("discord", provider)
    """

    def __init__(
        self,
        api: DiscordApi = DISCORD_API,
        definition: ProfileDefinition | None = None,
    ):
        self.api = api
        self.definition = definition or ProfileDefinition(api.cdn_base_url)

    @classmethod
    def from_config(cls, config: ProviderConfig | None = None) -> "DiscordProvider":
        return cls(DiscordApi.from_config(config))

    def authorization_base_url(self) -> str:
        return self.api.authorization_base_url

    def access_token_endpoint(self) -> str:
        return self.api.access_token_endpoint

    def profile_url(self) -> str:
        return self.api.profile_url

    def extract(self, body: str) -> DiscordProfile:
        return self.definition.extract(body)
