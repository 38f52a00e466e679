"""Native-to-canonical type mapping strategies."""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

# Canonical type returned for any native type without a mapping
FALLBACK_TYPE = "string"

DM8_DEFAULT_TYPE_MAPPINGS: Dict[str, str] = {
    # Character types
    "char": "string",
    "character": "string",
    "varchar": "string",
    "varchar2": "string",
    "nvarchar": "string",
    "nchar": "string",
    "rowid": "string",
    "text": "text",
    "longvarchar": "text",
    "clob": "text",
    "nclob": "text",
    # Exact numerics
    "number": "decimal",
    "numeric": "decimal",
    "decimal": "decimal",
    "dec": "decimal",
    "int": "integer",
    "integer": "integer",
    "pls_integer": "integer",
    "bigint": "bigint",
    "smallint": "smallint",
    "tinyint": "smallint",
    "byte": "smallint",
    # Approximate numerics
    "float": "float",
    "double": "float",
    "double precision": "float",
    "real": "float",
    "bit": "boolean",
    # Date/Time types
    "date": "date",
    "time": "time",
    "time with time zone": "time",
    "datetime": "datetime",
    "timestamp": "datetime",
    "datetime with time zone": "datetimetz",
    "timestamp with time zone": "datetimetz",
    "timestamp with local time zone": "datetimetz",
    # Binary types
    "blob": "blob",
    "image": "blob",
    "longvarbinary": "blob",
    "bfile": "blob",
    "binary": "binary",
    "varbinary": "binary",
    "raw": "binary",
}


class TypeMapper(ABC):
    """Abstract base class for database type mapping."""

    @abstractmethod
    def to_canonical_type(self, db_type: str) -> str:
        """Convert a native database type to a canonical type."""
        pass


class TypeRegistry(TypeMapper):
    """Case-insensitive registry of native type names to canonical types.

    The registry starts from a seed mapping (DM8 defaults unless told
    otherwise) and can be extended with ``register``. Unknown types fall
    back to ``"string"``.

    Not safe for concurrent mutation; use one registry per introspector.
    """

    def __init__(self, mappings: Optional[Mapping[str, str]] = None):
        seed = DM8_DEFAULT_TYPE_MAPPINGS if mappings is None else mappings
        self._mappings: Dict[str, str] = {}
        for native_type, canonical_type in seed.items():
            self.register(native_type, canonical_type)

    def register(self, native_type: str, canonical_type: str):
        """Map ``native_type`` to ``canonical_type``, replacing any earlier entry."""
        self._mappings[native_type.lower()] = canonical_type

    def lookup(self, native_type: str) -> str:
        return self._mappings.get(native_type.lower(), FALLBACK_TYPE)

    def has(self, native_type: str) -> bool:
        return native_type.lower() in self._mappings

    def all(self) -> Dict[str, str]:
        return dict(self._mappings)

    def to_canonical_type(self, db_type: str) -> str:
        return self.lookup(db_type)

    def __len__(self) -> int:
        return len(self._mappings)
