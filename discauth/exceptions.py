"""Custom exception hierarchy for discauth."""


class DiscauthError(Exception):
    """Base exception for all discauth errors."""


class ParseError(DiscauthError):
    """Failed to parse a provider response body."""


class ConfigError(DiscauthError):
    """Invalid configuration."""
