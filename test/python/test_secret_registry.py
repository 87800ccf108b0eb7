"""Unit tests for the secret registry."""

import pytest
from pydantic import ValidationError
from service_bootstrap.secrets_loader.secret_registry import (
    SECRET_DEFINITIONS,
    SECRETS,
    SecretDefinition,
    enabled_secrets,
    secrets_in_group,
)


class TestSecretRegistry:
    """Unit tests for the recognized secret list."""

    def test_enabled_secrets_in_order(self):
        """Test the enabled secrets and their order."""
        assert enabled_secrets() == ["API_SECRET", "SCHEDULER_AUTH_PASSWORD"]
        assert SECRETS == ("API_SECRET", "SCHEDULER_AUTH_PASSWORD")

    def test_names_are_unique(self):
        """Test that no secret is declared twice."""
        names = [secret.name for secret in SECRET_DEFINITIONS]

        assert len(names) == len(set(names))

    def test_disabled_secrets_are_declared(self):
        """Test that disabled secrets are kept in the registry."""
        assert secrets_in_group("ai") == []
        assert "OPENAI_API_KEY" in secrets_in_group("ai", enabled_only=False)
        assert secrets_in_group("payments", enabled_only=False) == [
            "STRIPE_APIKEY",
            "STRIPE_WEBHOOKSECRET",
        ]

    def test_core_group(self):
        """Test that the core group holds the API secret."""
        assert secrets_in_group("core") == ["API_SECRET"]

    def test_definitions_are_frozen(self):
        """Test that definitions cannot be toggled at runtime."""
        with pytest.raises(ValidationError):
            SECRET_DEFINITIONS[0].enabled = False

    def test_unknown_group_rejected(self):
        """Test that a definition needs a known group."""
        with pytest.raises(ValidationError):
            SecretDefinition(name="X", group="unknown")
