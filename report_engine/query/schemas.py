"""
Query composition schemas for the report engine.

This module defines the immutable configuration consumed by the QueryBuilder:
per-level column mappings and the table/key/ordering information needed to
compose one SELECT per hierarchy level.
"""

from typing import Dict, Iterable, List, Optional, Tuple, Any
from dataclasses import dataclass
from enum import Enum


class HierarchyLevel(str, Enum):
    """Entity tiers a report walks."""

    ROOT = "root"
    CHILD = "child"
    GRANDCHILD = "grandchild"


@dataclass(frozen=True)
class ColumnMapping:
    """Ordered mapping from a human-readable field name to a qualified column expression."""

    entries: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def of(cls, *entries: Tuple[str, str]) -> "ColumnMapping":
        names = [name for name, _ in entries]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate field names in column mapping: {names}")
        return cls(entries=tuple(entries))

    def column_for(self, field_name: str) -> Optional[str]:
        """Look up the column for a field; None when the field is not mapped here."""
        for name, column in self.entries:
            if name == field_name:
                return column
        return None

    def field_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def map_fields(self, requested_field_names: Iterable[str]) -> List[str]:
        """Columns for the requested fields, in mapping-insertion order.

        Requested names that are not mapped at this level contribute nothing.
        """
        requested = set(requested_field_names)
        return [column for name, column in self.entries if name in requested]

    def as_dict(self) -> Dict[str, str]:
        return dict(self.entries)

    def __contains__(self, field_name: object) -> bool:
        return any(name == field_name for name, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class LevelDefinition:
    """Everything needed to compose the query for one hierarchy level."""

    level: HierarchyLevel
    table_name: str
    alias: str
    mapping: ColumnMapping
    order_by: str  # stable identifier column, always ascending
    parent_key: Optional[str] = None  # column compared against the parent identifier
    fixed_condition: Optional[str] = None  # static SQL predicate always applied at this level

    def __post_init__(self):
        if self.level != HierarchyLevel.ROOT and not self.parent_key:
            raise ValueError(f"{self.level.value} level '{self.alias}' requires a parent key column")
        if self.level == HierarchyLevel.ROOT and self.parent_key:
            raise ValueError("Root level cannot be keyed to a parent")


@dataclass
class QueryResult:
    """Compiled form of a composed query, used for previews and logging."""

    sql: str
    parameters: Dict[str, Any]
    columns: List[str]
