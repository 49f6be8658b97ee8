"""Execution of composed report queries against the reporting data store."""

import logging
from typing import Any, List, Tuple

from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)


class QueryExecutor:
    """Runs read-only report statements and materializes their results."""

    def __init__(self, dw_session: Session):
        self.dw_session = dw_session

    def execute(self, statement: Select) -> List[Tuple[Any, ...]]:
        """Execute ``statement`` and return all records as tuples.

        Results are fully fetched before returning; no cursor outlives the call.
        Store errors propagate to the caller unchanged.
        """
        logger.debug("Executing report query: %s", statement)
        result = self.dw_session.execute(statement)
        return [tuple(record) for record in result.all()]
