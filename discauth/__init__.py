"""discauth - Discord OAuth2 identity provider adapter."""

from discauth.models.profile import DiscordProfile
from discauth.config import ProviderConfig
from discauth.core.api import DiscordApi, DISCORD_API
from discauth.core.definition import ProfileDefinition
from discauth.core.provider import IdentityProvider, DiscordProvider
from discauth.core.exporter import to_json, to_dict, from_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "DiscordProvider",
    "IdentityProvider",
    "ProviderConfig",
    # Components
    "DiscordApi",
    "DISCORD_API",
    "ProfileDefinition",
    # Models
    "DiscordProfile",
    # Export utilities
    "to_json",
    "to_dict",
    "from_json",
    "__version__",
]
