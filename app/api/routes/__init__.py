from app.api.routes.content import router as content_router
from app.api.routes.health import router as health_router

__all__ = ["content_router", "health_router"]
