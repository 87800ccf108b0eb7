"""Database connection utilities.

A single SQLAlchemy engine is built per DatabaseConnection, from either
DATABASE_URL or the discrete DATABASE_* variables, and reused by every
caller afterwards.
"""

import threading
from typing import Any, Dict, Optional, Union

from aws_lambda_powertools import Logger
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import URL, ExceptionContext, make_url

from service_bootstrap.database.parameters import (
    ConnectionOptions,
    OptionsLike,
    coerce_options,
    normalize_connection_string,
    resolve_connection_string,
    resolve_parameters,
)
from service_bootstrap.database.type_coercion import register_type_loaders
from service_bootstrap.utils.error_handling import ConfigurationError

logger = Logger()

CONNECTION_TIMEOUT_MS = 10_000
IDLE_IN_TRANSACTION_TIMEOUT_MS = 60_000
MAX_POOL_SIZE = 20

IDLE_IN_TRANSACTION_OPTION = (
    f"-c idle_in_transaction_session_timeout={IDLE_IN_TRANSACTION_TIMEOUT_MS}"
)


def engine_settings() -> Dict[str, Any]:
    """Keyword arguments passed to ``create_engine`` for every engine."""
    return {
        "pool_size": MAX_POOL_SIZE,
        "max_overflow": 0,
        "pool_timeout": CONNECTION_TIMEOUT_MS / 1000,
        "pool_pre_ping": True,
    }


def apply_session_settings(url: Union[str, URL]) -> URL:
    """Add the connect timeout and idle-in-transaction timeout to a URL.

    Settings already present in the URL are kept: an existing
    ``connect_timeout`` wins, and the idle timeout flag is appended to an
    existing ``options`` value unless it already sets that timeout.

    Args:
        url: Connection string or SQLAlchemy URL

    Returns:
        URL with the session settings in its query
    """
    url = make_url(url)
    query: Dict[str, Any] = {}

    options = url.query.get("options")
    if isinstance(options, tuple):
        options = " ".join(options)
    if not options:
        query["options"] = IDLE_IN_TRANSACTION_OPTION
    elif "idle_in_transaction_session_timeout" not in options:
        query["options"] = f"{options} {IDLE_IN_TRANSACTION_OPTION}"

    if "connect_timeout" not in url.query:
        query["connect_timeout"] = str(CONNECTION_TIMEOUT_MS // 1000)

    return url.update_query_dict(query)


def log_database_error(context: ExceptionContext) -> None:
    """SQLAlchemy ``handle_error`` listener that logs DBAPI errors.

    The exception still propagates to the caller.
    """
    logger.error(
        "Postgres error",
        extra={
            "error": str(context.original_exception),
            "error_type": type(context.original_exception).__name__,
            "statement": context.statement,
        },
    )


def build_engine(url: Union[str, URL]) -> Engine:
    """Create an engine with the fixed settings and connection hooks.

    Args:
        url: Connection string or SQLAlchemy URL

    Returns:
        SQLAlchemy engine (no connection is opened yet)
    """
    engine = create_engine(apply_session_settings(url), **engine_settings())
    event.listen(engine, "connect", register_type_loaders)
    event.listen(engine, "handle_error", log_database_error)
    return engine


class DatabaseConnection:
    """Database connection manager.

    Owns one engine for its lifetime. The first call to ``get_engine``
    builds it under a lock; later calls return the same engine and ignore
    their options (a warning is logged when they differ).
    """

    def __init__(self):
        self._engine: Optional[Engine] = None
        self._options: Optional[ConnectionOptions] = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        """True once the engine has been built."""
        return self._engine is not None

    def get_engine(self, options: OptionsLike = None) -> Engine:
        """Get database engine (singleton pattern).

        Args:
            options: Optional overrides for connection_string, host, port,
                user, password and database. Only used by the call that
                builds the engine.

        Returns:
            SQLAlchemy engine

        Raises:
            ConfigurationError: If neither a connection string nor a
                complete set of host and password is available
        """
        engine = self._engine
        if engine is not None:
            self._warn_if_options_differ(options)
            return engine

        with self._lock:
            if self._engine is not None:
                self._warn_if_options_differ(options)
                return self._engine

            resolved = coerce_options(options)
            engine = self._create(resolved)
            self._options = resolved
            self._engine = engine
            return engine

    def dispose(self) -> None:
        """Dispose of the connection pool and forget the cached engine."""
        with self._lock:
            if self._engine is not None:
                logger.info("Disposing postgres connection pool")
                self._engine.dispose()
            self._engine = None
            self._options = None

    def _create(self, options: ConnectionOptions) -> Engine:
        connection_string = resolve_connection_string(options)
        if connection_string:
            logger.info("Connecting to postgres via DATABASE_URL")
            return build_engine(normalize_connection_string(connection_string))

        params = resolve_parameters(options)
        logger.info(
            f"Connecting to postgres at {params.host}:{params.port}",
            extra={"host": params.host, "port": params.port},
        )
        return build_engine(params.to_url())

    def _warn_if_options_differ(self, options: OptionsLike) -> None:
        if options is None:
            return

        try:
            requested = coerce_options(options)
        except ConfigurationError:
            requested = None

        if requested != self._options:
            logger.warning(
                "Postgres engine already initialized; ignoring new connection "
                "options"
            )


# Global instance
db_connection = DatabaseConnection()


def get_or_create_engine(options: OptionsLike = None) -> Engine:
    """Return the process-wide engine, building it on first use."""
    return db_connection.get_engine(options)
