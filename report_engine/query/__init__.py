"""
Query module for the report engine.

This module provides the query composition used by every report
specification:
- ColumnMapping / LevelDefinition: immutable per-level configuration
- CriteriaBuilder: filters to bound SQL criteria
- QueryBuilder: one SELECT per hierarchy level, paginated at the root
- QueryExecutor: runs statements against the reporting data store
"""

from .builder import QueryBuilder, compile_query_to_sql
from .criteria import CriteriaBuilder
from .executor import QueryExecutor
from .schemas import (
    ColumnMapping,
    HierarchyLevel,
    LevelDefinition,
    QueryResult,
)

__all__ = [
    # Main classes
    "QueryBuilder",
    "CriteriaBuilder",
    "QueryExecutor",
    # Configuration types
    "ColumnMapping",
    "LevelDefinition",
    "QueryResult",
    # Enums
    "HierarchyLevel",
    # Helpers
    "compile_query_to_sql",
]
