"""API router for the reporting module."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query

from report_engine.core.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from report_engine.core.dependencies import get_report_service
from report_engine.reporting.registry import ReportNotFoundError
from report_engine.reporting.schemas import ReportDefinition, ReportPage, ReportPreview, ReportRequest
from report_engine.reporting.service import ReportService
from report_engine.reporting.specification import ReportValidationError

router = APIRouter(prefix="/reporting", tags=["reporting"])


# ===== REPORT CATALOGUE ENDPOINTS =====


@router.get("/categories", response_model=List[str])
def get_categories(service: ReportService = Depends(get_report_service)) -> List[str]:
    """Get all report categories."""
    return service.get_categories()


@router.get("/categories/{category}", response_model=List[ReportDefinition])
def get_report_definitions(
    category: str, service: ReportService = Depends(get_report_service)
) -> List[ReportDefinition]:
    """Get all report definitions of a category."""
    try:
        return service.get_definitions(category)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/categories/{category}/definitions/{identifier}", response_model=ReportDefinition)
def get_report_definition(
    category: str, identifier: str, service: ReportService = Depends(get_report_service)
) -> ReportDefinition:
    """Get a single report definition."""
    try:
        return service.get_definition(category, identifier)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ===== REPORT GENERATION ENDPOINTS =====


@router.post("/categories/{category}/reports/{identifier}", response_model=ReportPage)
def generate_report(
    category: str,
    identifier: str,
    report_request: ReportRequest,
    page_index: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Root rows per page"),
    service: ReportService = Depends(get_report_service),
) -> ReportPage:
    """Generate one page of a report."""
    try:
        return service.generate_report(category, identifier, report_request, page_index, size)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReportValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/categories/{category}/reports/{identifier}/preview", response_model=ReportPreview)
def preview_report(
    category: str,
    identifier: str,
    report_request: ReportRequest,
    page_index: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Root rows per page"),
    service: ReportService = Depends(get_report_service),
) -> ReportPreview:
    """Show the root query a report page would run."""
    try:
        return service.preview_report(category, identifier, report_request, page_index, size)
    except ReportNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReportValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
