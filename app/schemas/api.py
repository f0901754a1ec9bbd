from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    airtable_configured: bool
    timestamp: datetime


class ErrorResponse(BaseModel):
    error: str
