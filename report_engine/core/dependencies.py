# report_engine/core/dependencies.py
"""Dependencies for report generation"""

from typing import Annotated, Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session
from report_engine.core.context import SystemClock, UserContext
from report_engine.core.database import get_dw_db

# Reporting data store session
DWSessionDep = Annotated[Session, Depends(get_dw_db)]


def get_query_executor(dw_db: DWSessionDep):
    """Query executor bound to the reporting data store session"""
    from report_engine.query.executor import QueryExecutor
    return QueryExecutor(dw_db)


def get_user_context(user: Annotated[Optional[str], Header(alias="User")] = None) -> UserContext:
    """Requester identity from the User header"""
    return UserContext(user)


def get_clock() -> SystemClock:
    return SystemClock()


def get_report_registry(
    executor=Depends(get_query_executor),
    user_context: UserContext = Depends(get_user_context),
    clock: SystemClock = Depends(get_clock),
):
    """Report specifications bound to this request's executor, identity and clock"""
    from report_engine.reporting.registry import ReportSpecificationRegistry
    return ReportSpecificationRegistry(executor, user_context, clock)


def get_report_service(registry=Depends(get_report_registry)):
    """Main service dependency for report browsing and generation"""
    from report_engine.reporting.service import ReportService
    return ReportService(registry)
