# Services package
from app.services.content_service import CONTENT_TABLES, ContentService, split_lines

__all__ = [
    "CONTENT_TABLES",
    "ContentService",
    "split_lines",
]
