"""DM8 (Dameng) schema introspector."""

import logging
from typing import Any, Dict, List, Optional

from ..errors import ConfigurationError
from .base import QueryExecutor, SchemaIntrospector
from .models import ColumnRecord, IndexRecord, parse_default_value
from .platform import DmPlatform
from .rows import field_value

logger = logging.getLogger(__name__)

COLUMNS_SQL = """
    SELECT
        COLUMN_NAME,
        DATA_TYPE,
        DATA_LENGTH,
        DATA_PRECISION,
        DATA_SCALE,
        NULLABLE,
        DATA_DEFAULT,
        COLUMN_ID
    FROM ALL_TAB_COLUMNS
    WHERE OWNER = UPPER(?)
      AND TABLE_NAME = UPPER(?)
    ORDER BY COLUMN_ID
"""

INDEXES_SQL = """
    SELECT
        i.INDEX_NAME AS index_name,
        i.TABLE_NAME AS table_name,
        i.UNIQUENESS AS uniqueness,
        c.CONSTRAINT_TYPE AS constraint_type,
        ic.COLUMN_NAME AS column_name
    FROM DBA_INDEXES i
    JOIN DBA_IND_COLUMNS ic
      ON i.INDEX_NAME = ic.INDEX_NAME
     AND i.OWNER = ic.INDEX_OWNER
    LEFT JOIN DBA_CONSTRAINTS c
      ON i.INDEX_NAME = c.INDEX_NAME
     AND i.OWNER = c.OWNER
    WHERE i.OWNER = UPPER(?)
      AND i.TABLE_NAME = UPPER(?)
    ORDER BY i.INDEX_NAME, ic.COLUMN_POSITION
"""

TABLES_SQL = """
    SELECT OBJECT_NAME
    FROM DBA_OBJECTS
    WHERE OBJECT_TYPE = 'TABLE'
      AND OWNER = ?
"""


def _to_int(value: Any) -> Optional[int]:
    """Coerce numeric catalog facets (often Decimal) to int."""
    if value is None or value == "":
        return None
    return int(value)


class DmSchemaManager(SchemaIntrospector):
    """Introspects a DM8 schema through an injected query executor.

    The schema owner is fixed at construction: the explicit ``schema`` when
    given, otherwise the configured ``database`` name. Every call queries the
    catalog again; nothing is cached.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        schema: Optional[str] = None,
        database: Optional[str] = None,
        platform: Optional[DmPlatform] = None,
    ):
        owner = schema or database
        if not owner:
            raise ConfigurationError(
                "A schema or database name is required to introspect DM8",
                details={"schema": schema, "database": database},
            )
        self._executor = executor
        self._schema = owner
        self._platform = platform if platform is not None else DmPlatform()

    @property
    def schema(self) -> str:
        return self._schema

    def get_database_platform(self) -> DmPlatform:
        return self._platform

    def list_columns(self, table: str) -> Dict[str, ColumnRecord]:
        table = table.upper()
        logger.debug("Listing columns of %s.%s", self._schema, table)

        rows = self._executor.execute(COLUMNS_SQL, [self._schema.upper(), table])
        columns = self._process_column_rows(rows)

        logger.debug("Found %d columns in %s.%s", len(columns), self._schema, table)
        return columns

    def _process_column_rows(self, rows) -> Dict[str, ColumnRecord]:
        columns: Dict[str, ColumnRecord] = {}

        for row in rows:
            column_name = str(field_value(row, "column_name")).lower()
            columns[column_name] = ColumnRecord(
                name=column_name,
                native_type=str(field_value(row, "data_type")).lower(),
                length=_to_int(field_value(row, "data_length")),
                precision=_to_int(field_value(row, "data_precision")),
                scale=_to_int(field_value(row, "data_scale")),
                nullable=field_value(row, "nullable") == "Y",
                default=parse_default_value(field_value(row, "data_default")),
                position=_to_int(field_value(row, "column_id")),
            )

        return columns

    def list_indexes(self, table: str) -> Dict[str, IndexRecord]:
        table = table.upper()
        logger.debug("Listing indexes of %s.%s", self._schema, table)

        rows = self._executor.execute(INDEXES_SQL, [self._schema.upper(), table])

        indexes: Dict[str, IndexRecord] = {}
        for row in rows:
            index_name = field_value(row, "index_name")
            index = indexes.get(index_name)
            if index is None:
                # Flags come from the first row seen for the index
                uniqueness = field_value(row, "uniqueness")
                constraint_type = field_value(row, "constraint_type")
                index = IndexRecord(
                    name=index_name,
                    is_unique=uniqueness == "UNIQUE",
                    is_primary=constraint_type == "P",
                )
                indexes[index_name] = index
            index.add_column(field_value(row, "column_name"))

        logger.debug("Found %d indexes on %s.%s", len(indexes), self._schema, table)
        return indexes

    def list_tables(self) -> List[str]:
        logger.debug("Listing tables owned by %s", self._schema)
        rows = self._executor.execute(TABLES_SQL, [self._schema.upper()])
        return [field_value(row, "object_name") for row in rows]
