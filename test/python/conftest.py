"""Shared test fixtures for all test modules.

Every test starts from an environment with none of the database, secret
or service account variables set, and with a fresh DatabaseConnection.
"""

import pytest
from service_bootstrap.database import DatabaseConnection
from service_bootstrap.database.parameters import ENV_VARS
from service_bootstrap.secrets_loader.secret_registry import SECRET_DEFINITIONS

SERVICE_ACCOUNT_VARS = (
    "PROD_FIREBASE_SERVICE_ACCOUNT_KEY",
    "DEV_FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_KEY",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove every variable read by the package from the environment."""
    names = [
        *ENV_VARS.values(),
        *(secret.name for secret in SECRET_DEFINITIONS),
        *SERVICE_ACCOUNT_VARS,
    ]
    for name in names:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def db_connection():
    """DatabaseConnection that is disposed after the test."""
    connection = DatabaseConnection()
    yield connection
    connection.dispose()


@pytest.fixture
def discrete_environment(monkeypatch):
    """Environment with discrete DATABASE_* variables and no DATABASE_URL."""
    monkeypatch.setenv("DATABASE_HOST", "db.internal")
    monkeypatch.setenv("DATABASE_PORT", "6543")
    monkeypatch.setenv("DATABASE_USER", "app")
    monkeypatch.setenv("DATABASE_PASSWORD", "s3cret")
    monkeypatch.setenv("DATABASE_NAME", "appdb")
    return monkeypatch
