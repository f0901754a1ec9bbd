from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import content_router, health_router
from app.core.config import settings
from app.core.logging import get_logger

log = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"Starting content proxy in {settings.ENV.upper()} mode")
    if settings.is_production:
        log.info("Production mode: Debug disabled, docs disabled, stricter logging")
    else:
        log.info("Development mode: Debug enabled, docs available")

    if not settings.airtable_configured:
        # Requests will return a configuration error until these are set
        log.warning("AIRTABLE_API_KEY / AIRTABLE_BASE_ID are not set")

    yield

    log.info("Content proxy shutdown complete")


app = FastAPI(
    title="Landing Page Content Proxy",
    description="Aggregates landing-page content from Airtable into one JSON document",
    version="1.0.0",
    lifespan=lifespan,
    # Disable docs in production for security
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    debug=settings.debug_enabled,
)


app.include_router(content_router)
app.include_router(health_router)
