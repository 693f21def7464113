"""Health and diagnostic endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from app.application.use_cases.diagnostics import diagnostic_report, health_status
from app.interfaces.api.schemas import DiagnosticRead, HealthRead

router = APIRouter(tags=["diagnostics"])


@router.get("/api/health", response_model=HealthRead)
def health() -> HealthRead:
    return HealthRead(**health_status())


@router.get("/api/diagnostic", response_model=DiagnosticRead)
def diagnostic(request: Request) -> DiagnosticRead:
    return DiagnosticRead(**diagnostic_report(method=request.method, url=str(request.url)))


__all__ = ["router"]
