"""Transaction mode descriptor and transactional connection helper."""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Literal

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Connection, Engine

IsolationLevel = Literal[
    "SERIALIZABLE", "REPEATABLE READ", "READ COMMITTED", "READ UNCOMMITTED"
]


class TransactionMode(BaseModel):
    """Isolation level and access flags applied to a transaction."""

    model_config = ConfigDict(frozen=True)

    isolation_level: IsolationLevel
    read_only: bool = False
    deferrable: bool = False

    def execution_options(self) -> Dict[str, Any]:
        """SQLAlchemy execution options for the psycopg dialect."""
        return {
            "isolation_level": self.isolation_level,
            "postgresql_readonly": self.read_only,
            "postgresql_deferrable": self.deferrable,
        }


SERIAL_MODE = TransactionMode(
    isolation_level="SERIALIZABLE", read_only=False, deferrable=False
)


@contextmanager
def transaction(
    engine: Engine, mode: TransactionMode = SERIAL_MODE
) -> Iterator[Connection]:
    """Open a connection and run a transaction in the given mode.

    Commits when the block exits normally and rolls back if it raises.

    Args:
        engine: Engine to connect with
        mode: Transaction mode, serializable by default

    Yields:
        Connection bound to the open transaction
    """
    with engine.connect() as conn:
        conn = conn.execution_options(**mode.execution_options())
        with conn.begin():
            yield conn
