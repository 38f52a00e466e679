"""Query executors that feed catalog rows to the introspector."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..errors import ConfigurationError, DriverNotInstalledError

logger = logging.getLogger(__name__)


class DBAPIExecutor:
    """Runs statements on a PEP 249 connection and returns dict rows.

    Row keys are the column labels from ``cursor.description`` exactly as
    the driver reports them. Driver exceptions are not caught.
    """

    def __init__(self, connection: Any, close_connection: bool = True):
        self._connection = connection
        self._close_connection = close_connection

    @property
    def connection(self) -> Any:
        return self._connection

    def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        cursor = self._connection.cursor()
        try:
            cursor.execute(sql, tuple(params))
            names = [column[0] for column in cursor.description or ()]
            rows = [dict(zip(names, row)) for row in cursor.fetchall()]
        finally:
            cursor.close()
        logger.debug("Query returned %d rows", len(rows))
        return rows

    def close(self):
        """Close the underlying connection if this executor owns it."""
        if self._connection is not None and self._close_connection:
            self._connection.close()
        self._connection = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def connect_dm8(
    host: str,
    port: int,
    user: Optional[str],
    password: Optional[str],
) -> DBAPIExecutor:
    """Open a dmPython connection and wrap it in a DBAPIExecutor."""
    if not user:
        raise ConfigurationError("A DM8 user is required (set DM8_USER)")

    try:
        import dmPython
    except ImportError:
        raise DriverNotInstalledError("dmPython")

    logger.debug("Connecting to DM8 at %s:%s as %s", host, port, user)
    connection = dmPython.connect(
        user=user,
        password=password or "",
        server=host,
        port=port,
    )
    return DBAPIExecutor(connection)
