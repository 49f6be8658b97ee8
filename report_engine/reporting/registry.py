"""Registry mapping (category, identifier) to report specifications."""

from typing import Dict, List, Optional, Tuple

from report_engine.core.context import SystemClock, UserContext
from report_engine.query.executor import QueryExecutor
from report_engine.reporting.definitions import BUILTIN_SPECIFICATIONS
from report_engine.reporting.specification import ReportSpecification, SpecificationConfig


class ReportNotFoundError(LookupError):
    """No report is registered under the requested category/identifier."""


# Static registry, populated once at import
REPORT_SPECIFICATIONS: Dict[Tuple[str, str], SpecificationConfig] = {}


def register_specification(config: SpecificationConfig) -> None:
    """Register a report specification configuration."""
    key = (config.category, config.identifier)
    if key in REPORT_SPECIFICATIONS:
        raise ValueError(f"Report {config.category}/{config.identifier} is already registered")
    REPORT_SPECIFICATIONS[key] = config


for _config in BUILTIN_SPECIFICATIONS:
    register_specification(_config)


class ReportSpecificationRegistry:
    """Lookup of specifications, bound to the collaborators of one request."""

    def __init__(
        self,
        executor: QueryExecutor,
        user_context: Optional[UserContext] = None,
        clock: Optional[SystemClock] = None,
        specifications: Optional[Dict[Tuple[str, str], SpecificationConfig]] = None,
    ):
        self.executor = executor
        self.user_context = user_context or UserContext()
        self.clock = clock or SystemClock()
        self.specifications = REPORT_SPECIFICATIONS if specifications is None else specifications

    def get_categories(self) -> List[str]:
        """Distinct categories in registration order."""
        categories: List[str] = []
        for category, _ in self.specifications:
            if category not in categories:
                categories.append(category)
        return categories

    def get_configs(self, category: str) -> List[SpecificationConfig]:
        configs = [
            config for (cat, _), config in self.specifications.items() if cat == category
        ]
        if not configs:
            raise ReportNotFoundError(f"Category {category} not found.")
        return configs

    def lookup(self, category: str, identifier: str) -> ReportSpecification:
        config = self.specifications.get((category, identifier))
        if config is None:
            raise ReportNotFoundError(f"Report {category}/{identifier} not found.")
        return ReportSpecification(config, self.executor, self.user_context, self.clock)
