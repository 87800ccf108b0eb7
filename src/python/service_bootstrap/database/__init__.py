"""PostgreSQL engine factory and transaction helpers."""

from .connection import (
    CONNECTION_TIMEOUT_MS,
    IDLE_IN_TRANSACTION_TIMEOUT_MS,
    MAX_POOL_SIZE,
    DatabaseConnection,
    db_connection,
    get_or_create_engine,
)
from .parameters import ConnectionOptions, DiscreteParameters
from .transaction import SERIAL_MODE, TransactionMode, transaction

__all__ = [
    "CONNECTION_TIMEOUT_MS",
    "ConnectionOptions",
    "DatabaseConnection",
    "DiscreteParameters",
    "IDLE_IN_TRANSACTION_TIMEOUT_MS",
    "MAX_POOL_SIZE",
    "SERIAL_MODE",
    "TransactionMode",
    "db_connection",
    "get_or_create_engine",
    "transaction",
]
