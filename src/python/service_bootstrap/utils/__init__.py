"""General utilities for service bootstrap."""

from .env_helpers import get_env
from .error_handling import (
    BootstrapError,
    ConfigurationError,
    CredentialParseError,
    ParseError,
)

__all__ = [
    "BootstrapError",
    "ConfigurationError",
    "CredentialParseError",
    "ParseError",
    "get_env",
]
