"""Service account credentials parsed from JSON environment variables."""

from typing import Any, Dict, Literal, Optional

from aws_lambda_powertools import Logger
from pydantic import TypeAdapter, ValidationError

from service_bootstrap.utils.env_helpers import get_env
from service_bootstrap.utils.error_handling import CredentialParseError

logger = Logger()

Environment = Literal["PROD", "DEV"]

GENERIC_KEY_VAR = "FIREBASE_SERVICE_ACCOUNT_KEY"

_credential_adapter = TypeAdapter(Dict[str, Any])


def credential_variable(env: Environment) -> str:
    """Name of the environment-specific credential variable."""
    if env not in ("PROD", "DEV"):
        raise ValueError(f"Unknown environment: {env!r}")
    return f"{env}_{GENERIC_KEY_VAR}"


def parse_credential(variable: str, raw: str) -> Dict[str, Any]:
    """Parse a credential value as a JSON object.

    Args:
        variable: Environment variable the value came from
        raw: JSON text

    Returns:
        Parsed JSON object

    Raises:
        CredentialParseError: If the value is not valid JSON or not an object
    """
    try:
        return _credential_adapter.validate_json(raw)
    except ValidationError as e:
        raise CredentialParseError(variable) from e


def get_service_account_credentials(env: Environment) -> Optional[Dict[str, Any]]:
    """Get service account credentials for a deployment environment.

    The environment-specific variable is tried first, then the generic
    one. A value that fails to parse is an error; it never falls through
    to the next variable.

    Args:
        env: Deployment environment, "PROD" or "DEV"

    Returns:
        Parsed credential, or None if no credential variable is set

    Raises:
        CredentialParseError: If the selected variable is not a JSON object
        ValueError: If env is not a known environment
    """
    env_specific_var = credential_variable(env)

    env_specific_key = get_env(env_specific_var)
    if env_specific_key:
        return parse_credential(env_specific_var, env_specific_key)

    generic_key = get_env(GENERIC_KEY_VAR)
    if generic_key:
        return parse_credential(GENERIC_KEY_VAR, generic_key)

    logger.warning(
        "No Firebase service account key found. Firebase auth will be disabled."
    )
    return None
