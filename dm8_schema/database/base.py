"""Abstract base class for catalog introspection."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .models import ColumnRecord, IndexRecord
from .platform import DmPlatform


class QueryExecutor(Protocol):
    """Anything able to run a parameterized statement and return its rows.

    Rows must expose their fields by name, either as mapping keys or as
    attributes, in upper or lower case.
    """

    def execute(self, sql: str, params: Sequence[Any] = ()) -> Sequence[Any]:
        ...


class SchemaIntrospector(ABC):
    """Abstract base class for schema introspection.

    Subclasses implement the catalog queries for one engine. Lookups and
    whole-table descriptions are built on top of them here.
    """

    @abstractmethod
    def get_database_platform(self) -> DmPlatform:
        """Return the platform describing this engine."""
        pass

    @abstractmethod
    def list_tables(self) -> List[str]:
        """Get the names of all tables owned by the session schema.

        Returns:
            Table names in catalog order, as the catalog spells them
        """
        pass

    @abstractmethod
    def list_columns(self, table: str) -> Dict[str, ColumnRecord]:
        """Get all columns for a table.

        Args:
            table: Table name, any casing

        Returns:
            Ordered mapping of lower-cased column name to ColumnRecord,
            empty when the table does not exist
        """
        pass

    @abstractmethod
    def list_indexes(self, table: str) -> Dict[str, IndexRecord]:
        """Get all indexes for a table.

        Args:
            table: Table name, any casing

        Returns:
            Mapping of index name to IndexRecord
        """
        pass

    def get_column(self, table: str, column: str) -> Optional[ColumnRecord]:
        """Get a single column, or None when the table has no such column."""
        return self.list_columns(table).get(column.lower())

    def introspect_table(self, table: str) -> Dict[str, Any]:
        """Describe a table's columns and indexes in one structure."""
        return {
            "table": table,
            "columns": list(self.list_columns(table).values()),
            "indexes": list(self.list_indexes(table).values()),
        }
