"""Connection parameter models and resolution from environment variables.

Parameters are taken from caller-supplied options first, then from the
DATABASE_* environment variables, then from fixed defaults for port,
user and database. A connection string always wins over discrete
parameters.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from sqlalchemy.engine import URL

from service_bootstrap.utils.env_helpers import get_env
from service_bootstrap.utils.error_handling import ConfigurationError

DRIVER_NAME = "postgresql+psycopg"

DEFAULT_PORT = 5432
DEFAULT_USER = "postgres"
DEFAULT_DATABASE = "railway"

ENV_VARS = {
    "connection_string": "DATABASE_URL",
    "host": "DATABASE_HOST",
    "port": "DATABASE_PORT",
    "user": "DATABASE_USER",
    "password": "DATABASE_PASSWORD",
    "database": "DATABASE_NAME",
}

_SCHEME_PREFIXES = ("postgresql://", "postgres://")


class ConnectionOptions(BaseModel):
    """Caller overrides for connection parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    connection_string: Optional[str] = Field(default=None, repr=False)
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    database: Optional[str] = None


class DiscreteParameters(BaseModel):
    """Resolved host/port/user/password/database parameters."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    user: str = Field(default=DEFAULT_USER, min_length=1)
    password: str = Field(min_length=1, repr=False)
    database: str = Field(default=DEFAULT_DATABASE, min_length=1)

    def to_url(self) -> URL:
        """Build the SQLAlchemy URL for these parameters."""
        return URL.create(
            drivername=DRIVER_NAME,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )


OptionsLike = Union[ConnectionOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> ConnectionOptions:
    """Convert caller options to a ConnectionOptions model.

    Args:
        options: ConnectionOptions, a mapping of the same fields, or None

    Returns:
        Validated ConnectionOptions

    Raises:
        ConfigurationError: If the mapping has unknown fields or bad values
    """
    if options is None:
        return ConnectionOptions()
    if isinstance(options, ConnectionOptions):
        return options

    try:
        return ConnectionOptions.model_validate(dict(options))
    except ValidationError as e:
        field = _first_field(e)
        raise ConfigurationError(
            f"Invalid connection option: {field}", parameter=field
        ) from e


def normalize_connection_string(connection_string: str) -> str:
    """Point a postgres connection string at the psycopg driver.

    ``postgres://`` and ``postgresql://`` become ``postgresql+psycopg://``;
    any other scheme is returned unchanged.
    """
    value = connection_string.strip()
    lowered = value.lower()
    for prefix in _SCHEME_PREFIXES:
        if lowered.startswith(prefix):
            return f"{DRIVER_NAME}://{value[len(prefix):]}"
    return value


def resolve_connection_string(options: ConnectionOptions) -> Optional[str]:
    """Return the connection string from options or DATABASE_URL, if any."""
    return options.connection_string or get_env(ENV_VARS["connection_string"])


def resolve_parameters(options: ConnectionOptions) -> DiscreteParameters:
    """Resolve discrete connection parameters.

    Args:
        options: Caller overrides

    Returns:
        Validated DiscreteParameters

    Raises:
        ConfigurationError: If host or password is missing, or a value is
            invalid (for example a non-numeric DATABASE_PORT)
    """
    host = options.host or get_env(ENV_VARS["host"])
    password = options.password or get_env(ENV_VARS["password"])

    if not host:
        raise ConfigurationError(
            "Can't connect to Postgres: No DATABASE_URL or DATABASE_HOST "
            "configured. Please set DATABASE_URL environment variable.",
            parameter=ENV_VARS["host"],
        )

    if not password:
        raise ConfigurationError(
            "Can't connect to Postgres: No DATABASE_PASSWORD configured.",
            parameter=ENV_VARS["password"],
        )

    try:
        return DiscreteParameters(
            host=host,
            port=options.port or get_env(ENV_VARS["port"]) or DEFAULT_PORT,
            user=options.user or get_env(ENV_VARS["user"]) or DEFAULT_USER,
            password=password,
            database=options.database
            or get_env(ENV_VARS["database"])
            or DEFAULT_DATABASE,
        )
    except ValidationError as e:
        field = _first_field(e)
        variable = ENV_VARS.get(field or "", field)
        raise ConfigurationError(
            f"Can't connect to Postgres: invalid {variable} value.",
            parameter=variable,
        ) from e


def _first_field(error: ValidationError) -> Optional[str]:
    for detail in error.errors():
        if detail.get("loc"):
            return str(detail["loc"][0])
    return None
