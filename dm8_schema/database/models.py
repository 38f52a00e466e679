"""Database data models for schema introspection."""

import re
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field, asdict

# A single pair of straight quotes around arbitrary content
_QUOTED_DEFAULT = re.compile(r"^'(.*)'$", re.DOTALL)


def parse_default_value(value: Any) -> Optional[str]:
    """Normalize a catalog DATA_DEFAULT value.

    ``None`` means the column has no declared default and is returned as is,
    so callers can tell it apart from an empty string default. Quoted string
    literals lose their outer quotes; anything else (numbers, expressions
    such as ``SYSDATE``) is returned trimmed.

    Escaped quotes inside a literal are not unescaped.
    """
    if value is None:
        return None

    value = str(value).strip()

    match = _QUOTED_DEFAULT.match(value)
    if match:
        return match.group(1)

    return value


@dataclass(frozen=True)
class ColumnRecord:
    """Represents a normalized table column."""
    name: str
    native_type: str
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    nullable: bool = False
    default: Optional[str] = None
    position: Optional[int] = None

    @property
    def has_default(self) -> bool:
        """Whether the catalog declares a default for this column."""
        return self.default is not None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class IndexRecord:
    """Represents an index folded from one catalog row per indexed column."""
    name: str
    is_unique: bool = False
    is_primary: bool = False
    columns: List[str] = field(default_factory=list)

    def add_column(self, column_name: str):
        """Append the next indexed column in catalog order."""
        self.columns.append(column_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "is_unique": self.is_unique,
            "is_primary": self.is_primary,
            "columns": list(self.columns),
        }
