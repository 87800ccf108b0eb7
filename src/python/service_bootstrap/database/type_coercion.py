"""Result type loaders installed on every new psycopg connection.

int8 columns load as ``int``, numeric columns as ``float`` and date
columns as the raw string sent by the server.
"""

from typing import Any

from psycopg.types.numeric import FloatLoader, IntLoader
from psycopg.types.string import TextLoader

TYPE_LOADERS = {
    "int8": IntLoader,
    "numeric": FloatLoader,
    "date": TextLoader,
}


def register_type_loaders(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLAlchemy ``connect`` listener that registers the result loaders.

    Args:
        dbapi_connection: Raw psycopg connection
        connection_record: Pool record for the connection (unused)
    """
    for type_name, loader in TYPE_LOADERS.items():
        dbapi_connection.adapters.register_loader(type_name, loader)
