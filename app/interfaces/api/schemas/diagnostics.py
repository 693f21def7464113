"""Schemas for health and diagnostic endpoints."""

from pydantic import BaseModel


class HealthRead(BaseModel):
    status: str
    timestamp: str
    environment: str


class DiagnosticRead(BaseModel):
    status: str
    message: str
    method: str
    url: str
    timestamp: str
