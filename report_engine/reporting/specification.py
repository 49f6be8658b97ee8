"""
Generic report specification.

Every report type is a SpecificationConfig (metadata, per-level column
mappings, child-summary rule) consumed by the same ReportSpecification
engine.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from report_engine.core.context import SystemClock, UserContext
from report_engine.query.builder import QueryBuilder
from report_engine.query.executor import QueryExecutor
from report_engine.query.schemas import HierarchyLevel, LevelDefinition, QueryResult
from report_engine.reporting.assembler import RowAssembler
from report_engine.reporting.schemas import (
    DisplayableField,
    Header,
    Operator,
    QueryParameter,
    ReportDefinition,
    ReportPage,
    ReportRequest,
)

logger = logging.getLogger(__name__)


class ReportValidationError(ValueError):
    """A report request references unknown names or carries malformed filter values."""

    def __init__(self, unknown_fields: Sequence[str] = (), malformed_parameters: Sequence[str] = ()):
        self.unknown_fields = list(unknown_fields)
        self.malformed_parameters = list(malformed_parameters)

        messages = []
        if self.unknown_fields:
            messages.append("Unspecified fields requested: " + ", ".join(self.unknown_fields))
        if self.malformed_parameters:
            messages.append(
                "BETWEEN requires exactly two values: " + ", ".join(self.malformed_parameters)
            )
        super().__init__("; ".join(messages))


@dataclass(frozen=True)
class SpecificationConfig:
    """Fixed configuration of one report type."""

    category: str
    identifier: str
    name: str
    description: str
    displayable_fields: Tuple[DisplayableField, ...]
    query_parameters: Tuple[QueryParameter, ...]
    levels: Tuple[LevelDefinition, ...]  # root first, then child, then grandchild
    summary_columns: Tuple[int, ...] = ()  # child columns concatenated into the trailing cell

    def __post_init__(self):
        expected = [HierarchyLevel.ROOT, HierarchyLevel.CHILD, HierarchyLevel.GRANDCHILD]
        actual = [level.level for level in self.levels]
        if not actual or actual != expected[: len(actual)]:
            raise ValueError(
                f"Report '{self.identifier}' levels must be ordered root, child, grandchild; got {actual}"
            )

    @property
    def all_columns(self) -> Dict[str, str]:
        """Union of every level's mapping; used only to validate names."""
        union: Dict[str, str] = {}
        for level in self.levels:
            union.update(level.mapping.as_dict())
        return union


class ReportSpecification:
    """Metadata, validation and page generation for one report type."""

    def __init__(
        self,
        config: SpecificationConfig,
        executor: QueryExecutor,
        user_context: Optional[UserContext] = None,
        clock: Optional[SystemClock] = None,
        query_builder: Optional[QueryBuilder] = None,
    ):
        self.config = config
        self.executor = executor
        self.user_context = user_context or UserContext()
        self.clock = clock or SystemClock()
        self.query_builder = query_builder or QueryBuilder()
        self.assembler = RowAssembler(
            executor, self.query_builder, config.levels, config.summary_columns
        )

    def get_report_definition(self) -> ReportDefinition:
        return ReportDefinition(
            identifier=self.config.identifier,
            name=self.config.name,
            description=self.config.description,
            query_parameters=list(self.config.query_parameters),
            displayable_fields=list(self.config.displayable_fields),
        )

    def validate(self, report_request: ReportRequest) -> None:
        """
        Check every requested field and parameter name against the mapping union.

        All offending names are reported at once, each once. BETWEEN filters
        with a value that does not split into exactly two items are rejected
        in the same pass.
        """
        known = self.config.all_columns
        unknown_fields: List[str] = []
        malformed: List[str] = []

        for parameter in report_request.query_parameters:
            if parameter.name not in known:
                if parameter.name not in unknown_fields:
                    unknown_fields.append(parameter.name)
            elif (
                parameter.operator == Operator.BETWEEN
                and parameter.has_value()
                and len(parameter.split_values()) != 2
            ):
                malformed.append(parameter.name)

        for field in report_request.displayable_fields:
            if field.name not in known and field.name not in unknown_fields:
                unknown_fields.append(field.name)

        if unknown_fields or malformed:
            raise ReportValidationError(unknown_fields, malformed)

    def generate_report(self, report_request: ReportRequest, page_index: int, size: int) -> ReportPage:
        """Generate one page; the request must have passed validate()."""
        report_definition = self.get_report_definition()
        logger.info("Generating report %s.", report_definition.identifier)

        header = Header(column_names=report_request.field_names())

        root_records = self.assembler.fetch_root(report_request, page_index, size)
        has_more = len(self.assembler.fetch_root(report_request, page_index + 1, size)) > 0
        rows = self.assembler.assemble(report_request, root_records)

        return ReportPage(
            name=report_definition.name,
            description=report_definition.description,
            header=header,
            rows=rows,
            has_more=has_more,
            generated_by=self.user_context.current_user(),
            generated_on=self.clock.now().isoformat(),
        )

    def preview(self, report_request: ReportRequest, page_index: int, size: int) -> Optional[QueryResult]:
        """Root query of the page as SQL text."""
        return self.query_builder.build_preview(
            self.config.levels[0],
            report_request.field_names(),
            report_request.query_parameters,
            page_index=page_index,
            size=size,
            dialect=self._dialect(),
        )

    def _dialect(self):
        """Dialect of the reporting store, when the executor is bound to one."""
        session = getattr(self.executor, "dw_session", None)
        bind = getattr(session, "bind", None)
        return bind.dialect if bind is not None else None
