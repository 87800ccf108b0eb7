"""Secrets provider backed by process environment variables."""

from .env_secrets import get_secrets, load_secrets_to_env
from .secret_registry import (
    SECRET_DEFINITIONS,
    SECRETS,
    SecretDefinition,
    enabled_secrets,
    secrets_in_group,
)
from .service_account import get_service_account_credentials

__all__ = [
    "SECRETS",
    "SECRET_DEFINITIONS",
    "SecretDefinition",
    "enabled_secrets",
    "get_secrets",
    "get_service_account_credentials",
    "load_secrets_to_env",
    "secrets_in_group",
]
