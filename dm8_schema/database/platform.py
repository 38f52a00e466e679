"""DM8 platform facade used by ORM integrations."""

from typing import Dict, Iterable, List, Optional

from .type_mappers import TypeRegistry


class DmPlatform:
    """Declarative facts about DM8 plus access to its type mappings."""

    NAME = "dm8"

    def __init__(
        self,
        type_registry: Optional[TypeRegistry] = None,
        reserved_keywords: Optional[Iterable[str]] = None,
    ):
        self._type_registry = type_registry if type_registry is not None else TypeRegistry()
        self._reserved_keywords = [kw.upper() for kw in reserved_keywords or ()]

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def type_registry(self) -> TypeRegistry:
        return self._type_registry

    def type_mapping_for(self, db_type: str) -> str:
        """Canonical type for ``db_type``, ``"string"`` if unmapped."""
        return self._type_registry.lookup(db_type)

    def register_type_mapping(self, db_type: str, canonical_type: str):
        self._type_registry.register(db_type, canonical_type)

    def has_type_mapping_for(self, db_type: str) -> bool:
        return self._type_registry.has(db_type)

    def all_type_mappings(self) -> Dict[str, str]:
        return self._type_registry.all()

    def supports_sequences(self) -> bool:
        return True

    def supports_identity_columns(self) -> bool:
        return True

    def reserved_keywords(self) -> List[str]:
        # Empty unless keywords were passed to the constructor
        return list(self._reserved_keywords)
