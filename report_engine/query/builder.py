"""
QueryBuilder composing one SELECT statement per report hierarchy level.

Root and child levels share the same code path: the mapped columns of the
level, its source table, an optional key equality against the parent
identifier, the filters mapped at the level and a stable ordering. Only the
root level is paginated.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import literal_column, select, table, text
from sqlalchemy.engine import Dialect
from sqlalchemy.sql import Select

from report_engine.query.criteria import CriteriaBuilder
from report_engine.query.schemas import HierarchyLevel, LevelDefinition, QueryResult
from report_engine.reporting.schemas import QueryParameter

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Builds the SQLAlchemy statements for the levels of a report."""

    def __init__(self, criteria_builder: Optional[CriteriaBuilder] = None):
        self.criteria_builder = criteria_builder or CriteriaBuilder()

    def build_query(
        self,
        level: LevelDefinition,
        requested_fields: Sequence[str],
        parameters: Sequence[QueryParameter] = (),
        parent_identifier: Any = None,
        page_index: Optional[int] = None,
        size: Optional[int] = None,
    ) -> Optional[Select]:
        """
        Compose the query for one level.

        Returns None when none of the requested fields maps to this level;
        callers skip the level instead of issuing an empty SELECT.
        """
        columns = level.mapping.map_fields(requested_fields)
        if not columns:
            return None

        source = table(level.table_name).alias(level.alias)
        query = select(*[literal_column(column) for column in columns]).select_from(source)

        if level.level != HierarchyLevel.ROOT:
            query = query.where(literal_column(level.parent_key) == parent_identifier)

        if level.fixed_condition:
            query = query.where(text(level.fixed_condition))

        criteria = self._build_level_criteria(level, parameters)
        if criteria:
            query = query.where(*criteria)

        query = query.order_by(literal_column(level.order_by).asc())

        if level.level == HierarchyLevel.ROOT and size is not None:
            page_index = page_index or 0
            query = query.limit(size).offset(size * page_index)

        return query

    def build_preview(
        self,
        level: LevelDefinition,
        requested_fields: Sequence[str],
        parameters: Sequence[QueryParameter] = (),
        page_index: Optional[int] = None,
        size: Optional[int] = None,
        dialect: Optional[Dialect] = None,
    ) -> Optional[QueryResult]:
        """Compile the query of a level to SQL text with its parameters."""
        query = self.build_query(
            level, requested_fields, parameters, page_index=page_index, size=size
        )
        if query is None:
            return None

        compiled = query.compile(dialect=dialect)
        return QueryResult(
            sql=compile_query_to_sql(query, dialect),
            parameters=dict(compiled.params),
            columns=level.mapping.map_fields(requested_fields),
        )

    def _build_level_criteria(
        self, level: LevelDefinition, parameters: Sequence[QueryParameter]
    ) -> List[Any]:
        """Criteria for the parameters mapped at this level; empty filters are dropped."""
        criteria = []
        for parameter in parameters:
            column = level.mapping.column_for(parameter.name)
            if column is None:
                continue
            criterion = self.criteria_builder.build_criteria(column, parameter)
            if criterion is not None:
                criteria.append(criterion)
        return criteria


def compile_query_to_sql(query: Any, dialect: Optional[Dialect] = None) -> str:
    """Compile a statement or clause to SQL text with literal values rendered."""
    return str(query.compile(dialect=dialect, compile_kwargs={"literal_binds": True}))


def describe_parameters(parameters: Sequence[QueryParameter]) -> Dict[str, Any]:
    """Filters as a plain dict for debugging/logging."""
    return {p.name: {"operator": p.operator.value, "value": p.value} for p in parameters}
