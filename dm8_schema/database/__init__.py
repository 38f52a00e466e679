"""Catalog introspection for DM8.

Turns rows from the DM8 data dictionary into ColumnRecord and IndexRecord
objects and maps native types onto a portable type vocabulary.
"""

from .models import ColumnRecord, IndexRecord, parse_default_value
from .type_mappers import TypeMapper, TypeRegistry, DM8_DEFAULT_TYPE_MAPPINGS, FALLBACK_TYPE
from .platform import DmPlatform
from .rows import field_value, has_field
from .base import QueryExecutor, SchemaIntrospector
from .dm8 import DmSchemaManager
from .executors import DBAPIExecutor, connect_dm8

__all__ = [
    # Data models
    "ColumnRecord",
    "IndexRecord",
    "parse_default_value",
    # Type mapping
    "TypeMapper",
    "TypeRegistry",
    "DM8_DEFAULT_TYPE_MAPPINGS",
    "FALLBACK_TYPE",
    "DmPlatform",
    # Row access
    "field_value",
    "has_field",
    # Introspectors
    "QueryExecutor",
    "SchemaIntrospector",
    "DmSchemaManager",
    # Executors
    "DBAPIExecutor",
    "connect_dm8",
]
