"""Secrets read directly from environment variables.

The hosting platform injects secrets as environment variables, so no
secret manager is contacted. The ``credentials`` argument is accepted
for call-site compatibility and ignored.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger

from service_bootstrap.secrets_loader.secret_registry import SECRETS
from service_bootstrap.utils.env_helpers import get_env

logger = Logger()


def get_secrets(credentials: Optional[Any] = None, *ids: str) -> Dict[str, str]:
    """Get secrets from environment variables.

    Args:
        credentials: Ignored
        *ids: Secret names to read. Defaults to every enabled secret.

    Returns:
        Mapping of secret name to value for each secret that is set and
        non-empty. Missing secrets are left out; callers check for the
        keys they require.
    """
    secret_ids = ids if ids else SECRETS

    result: Dict[str, str] = {}
    for key in secret_ids:
        value = get_env(key)
        if value is not None:
            result[key] = value

    missing = [key for key in secret_ids if key not in result]
    if missing:
        logger.debug("Secrets not set in environment", extra={"missing": missing})

    return result


def load_secrets_to_env(credentials: Optional[Any] = None) -> None:
    """Load secrets into the environment.

    Nothing to do: the platform has already populated the environment.
    """
    logger.info("Secrets loaded from environment variables")
