"""Registry of secret names recognized by the service.

Every secret the service has ever used is listed here. Only enabled
entries are read by default; the rest are kept so that turning a feature
back on is a one-flag change.
"""

from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

SecretGroup = Literal[
    "core", "database", "ai", "email", "payments", "phone", "misc", "scheduler"
]


class SecretDefinition(BaseModel):
    """A named secret and whether the deployment reads it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    group: SecretGroup
    enabled: bool = False


SECRET_DEFINITIONS: Tuple[SecretDefinition, ...] = (
    SecretDefinition(name="API_SECRET", group="core", enabled=True),
    # Database access goes through DATABASE_URL
    SecretDefinition(name="SUPABASE_KEY", group="database"),
    SecretDefinition(name="SUPABASE_PASSWORD", group="database"),
    SecretDefinition(name="OPENAI_API_KEY", group="ai"),
    SecretDefinition(name="ANTHROPIC_API_KEY", group="ai"),
    SecretDefinition(name="GEMINI_API_KEY", group="ai"),
    SecretDefinition(name="PERPLEXITY_API_KEY", group="ai"),
    SecretDefinition(name="FIRECRAWL_API_KEY", group="ai"),
    SecretDefinition(name="MAILGUN_KEY", group="email"),
    SecretDefinition(name="STRIPE_APIKEY", group="payments"),
    SecretDefinition(name="STRIPE_WEBHOOKSECRET", group="payments"),
    SecretDefinition(name="TWILIO_AUTH_TOKEN", group="phone"),
    SecretDefinition(name="TWILIO_SID", group="phone"),
    SecretDefinition(name="TWILIO_VERIFY_SID", group="phone"),
    SecretDefinition(name="DREAM_KEY", group="misc"),
    SecretDefinition(name="NEWS_API_KEY", group="misc"),
    SecretDefinition(name="REACT_APP_GIPHY_KEY", group="misc"),
    SecretDefinition(name="TWITTER_API_KEY_JSON", group="misc"),
    SecretDefinition(name="DESTINY_API_KEY", group="misc"),
    SecretDefinition(name="FB_ACCESS_TOKEN", group="misc"),
    SecretDefinition(name="GEODB_API_KEY", group="misc"),
    SecretDefinition(name="SPORTSDB_KEY", group="misc"),
    SecretDefinition(name="SCHEDULER_AUTH_PASSWORD", group="scheduler", enabled=True),
)


def enabled_secrets() -> List[str]:
    """Names of enabled secrets, in declaration order."""
    return [secret.name for secret in SECRET_DEFINITIONS if secret.enabled]


def secrets_in_group(group: SecretGroup, enabled_only: bool = True) -> List[str]:
    """Names of secrets in a group.

    Args:
        group: Secret group to filter on
        enabled_only: Skip disabled secrets when True

    Returns:
        Secret names in declaration order
    """
    return [
        secret.name
        for secret in SECRET_DEFINITIONS
        if secret.group == group and (secret.enabled or not enabled_only)
    ]


SECRETS: Tuple[str, ...] = tuple(enabled_secrets())
