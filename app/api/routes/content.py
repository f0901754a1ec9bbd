"""Content routes - The single aggregated document the landing page renders."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_settings, get_table_source
from app.core.config import Settings
from app.core.errors import ConfigurationError, ContentError
from app.core.logging import get_logger
from app.ingestion.base import BaseTableSource
from app.schemas.api import ErrorResponse
from app.schemas.content import ContentDocument
from app.services.content_service import ContentService

router = APIRouter(prefix="/api", tags=["content"])
log = get_logger("content_routes")

# Shared caches may serve for 60s, then stale for up to 300s while revalidating.
CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=300"
UNKNOWN_ERROR = "An unknown internal server error occurred."


def _error_response(message: str) -> JSONResponse:
    # No Cache-Control: errors must never be cached
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/airtable",
    response_model=ContentDocument,
    responses={500: {"model": ErrorResponse}},
)
async def get_content(
    settings: Settings = Depends(get_settings),
    source: Optional[BaseTableSource] = Depends(get_table_source),
):
    """
    Get the full landing-page content document.

    Reads SiteSettings, PageContent, PortfolioImages, PricingPlans,
    Testimonials, FAQ and Contact from Airtable concurrently and reshapes
    them into one document. Any failing table fails the whole request with
    a message naming that table.
    """
    try:
        config = settings.airtable_config()
    except ConfigurationError as exc:
        log.error(f"Refusing content request: {exc}")
        return _error_response(str(exc))

    service = ContentService(config, source=source, timeout=settings.HTTP_TIMEOUT_SECONDS)
    try:
        document = await service.build_document()
    except ContentError as exc:
        log.error(f"Content aggregation failed: {exc.to_dict()}")
        return _error_response(str(exc))
    except Exception:  # noqa: BLE001
        log.exception("Content aggregation failed with an unexpected error")
        return _error_response(UNKNOWN_ERROR)

    return JSONResponse(
        status_code=200,
        content=document.to_payload(),
        headers={"Cache-Control": CACHE_CONTROL},
    )
