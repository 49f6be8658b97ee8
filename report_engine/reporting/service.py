# report_engine/reporting/service.py - report catalogue and generation

import time
import logging
from typing import List

from report_engine.query.builder import describe_parameters
from report_engine.reporting.registry import ReportSpecificationRegistry
from report_engine.reporting.schemas import ReportDefinition, ReportPage, ReportPreview, ReportRequest
from report_engine.reporting.specification import ReportSpecification, ReportValidationError


logger = logging.getLogger(__name__)


class ReportService:
    """Browses report definitions and generates report pages."""

    def __init__(self, registry: ReportSpecificationRegistry):
        self.registry = registry

    # ===== CATALOGUE =====

    def get_categories(self) -> List[str]:
        return self.registry.get_categories()

    def get_definitions(self, category: str) -> List[ReportDefinition]:
        """All report definitions of a category."""
        return [
            self.registry.lookup(config.category, config.identifier).get_report_definition()
            for config in self.registry.get_configs(category)
        ]

    def get_definition(self, category: str, identifier: str) -> ReportDefinition:
        return self.registry.lookup(category, identifier).get_report_definition()

    # ===== GENERATION =====

    def generate_report(
        self,
        category: str,
        identifier: str,
        report_request: ReportRequest,
        page_index: int,
        size: int,
    ) -> ReportPage:
        """Validate the request, then generate one page. No query runs for an invalid request."""
        specification = self._validated_specification(category, identifier, report_request)

        start_time = time.time()
        report_page = specification.generate_report(report_request, page_index, size)
        execution_time_ms = (time.time() - start_time) * 1000

        logger.info(
            "Report %s/%s page %d (size %d): %d rows, has_more=%s in %.2fms",
            category,
            identifier,
            page_index,
            size,
            len(report_page.rows),
            report_page.has_more,
            execution_time_ms,
        )
        return report_page

    def preview_report(
        self,
        category: str,
        identifier: str,
        report_request: ReportRequest,
        page_index: int,
        size: int,
    ) -> ReportPreview:
        """Root query of a page as SQL, without executing it."""
        specification = self._validated_specification(category, identifier, report_request)
        query_result = specification.preview(report_request, page_index, size)
        if query_result is None:
            return ReportPreview(sql="", parameters={}, columns=[])
        return ReportPreview(
            sql=query_result.sql,
            parameters={str(k): v for k, v in query_result.parameters.items()},
            columns=query_result.columns,
        )

    def _validated_specification(
        self, category: str, identifier: str, report_request: ReportRequest
    ) -> ReportSpecification:
        specification = self.registry.lookup(category, identifier)
        try:
            specification.validate(report_request)
        except ReportValidationError as e:
            logger.warning(
                "Rejected request for report %s/%s: %s (filters: %s)",
                category,
                identifier,
                e,
                describe_parameters(report_request.query_parameters),
            )
            raise
        return specification
