"""Row assembly: hierarchical fan-out from root records to child and grandchild queries."""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Any, List, Optional, Sequence, Tuple

from report_engine.query.builder import QueryBuilder
from report_engine.query.executor import QueryExecutor
from report_engine.query.schemas import LevelDefinition
from report_engine.reporting.schemas import ReportRequest, Row, Value

logger = logging.getLogger(__name__)


def as_record(result: Any) -> Tuple[Any, ...]:
    """Normalize a result record; single scalars become one-element tuples."""
    if isinstance(result, SequenceABC) and not isinstance(result, (str, bytes)):
        return tuple(result)
    return (result,)


def to_value(raw: Any) -> Value:
    """One cell from one source value; null becomes the empty set."""
    if raw is None:
        return Value(values=[])
    return Value(values=[str(raw)])


class RowAssembler:
    """
    Turns a page of root records into Rows.

    Child records are flattened into their root's row, not nested: every
    column of every matched child (and grandchild) is appended as its own
    cell. Row widths therefore differ whenever the number of matched children
    differs between root entities.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        query_builder: QueryBuilder,
        levels: Sequence[LevelDefinition],
        summary_columns: Sequence[int] = (),
    ):
        self.executor = executor
        self.query_builder = query_builder
        self.root_level = levels[0]
        self.child_level: Optional[LevelDefinition] = levels[1] if len(levels) > 1 else None
        self.grandchild_level: Optional[LevelDefinition] = levels[2] if len(levels) > 2 else None
        self.summary_columns = tuple(summary_columns)

    def fetch_root(self, request: ReportRequest, page_index: int, size: int) -> List[Tuple[Any, ...]]:
        """Root records of one page; no query when no root column is requested."""
        query = self.query_builder.build_query(
            self.root_level,
            request.field_names(),
            request.query_parameters,
            page_index=page_index,
            size=size,
        )
        if query is None:
            return []
        return [as_record(result) for result in self.executor.execute(query)]

    def assemble(self, request: ReportRequest, root_records: Sequence[Tuple[Any, ...]]) -> List[Row]:
        """Build one Row per root record, preserving root order."""
        rows = []
        for record in root_records:
            row = Row(values=[to_value(raw) for raw in record])
            if self.child_level is not None:
                self._append_children(request, row, record[0])
            rows.append(row)
        return rows

    def _append_children(self, request: ReportRequest, row: Row, root_identifier: Any) -> None:
        child_records = self._fetch_level(self.child_level, request, root_identifier)

        child_identifiers = []
        summaries = []
        for child in child_records:
            row.values.extend(to_value(raw) for raw in child)
            if self.grandchild_level is not None:
                child_identifiers.append(child[0])
                summaries.append(self._summarize(child))

        if self.grandchild_level is None or not child_records:
            return

        for child_identifier in child_identifiers:
            for grandchild in self._fetch_level(self.grandchild_level, request, child_identifier):
                row.values.extend(to_value(raw) for raw in grandchild)

        # Value is a set; repeated summaries collapse, first occurrence wins
        row.values.append(Value(values=list(dict.fromkeys(summaries))))

    def _fetch_level(
        self, level: LevelDefinition, request: ReportRequest, parent_identifier: Any
    ) -> List[Tuple[Any, ...]]:
        if parent_identifier is None:
            return []
        query = self.query_builder.build_query(
            level,
            request.field_names(),
            request.query_parameters,
            parent_identifier=parent_identifier,
        )
        if query is None:
            return []
        return [as_record(result) for result in self.executor.execute(query)]

    def _summarize(self, child: Tuple[Any, ...]) -> str:
        """Child summary: selected child columns joined by single spaces."""
        parts = [
            str(child[index])
            for index in self.summary_columns
            if index < len(child) and child[index] is not None
        ]
        return " ".join(parts)
