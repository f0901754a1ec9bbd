"""API dependencies"""

from typing import Optional

from app.core.config import Settings
from app.ingestion.base import BaseTableSource


def get_settings() -> Settings:
    """Settings read fresh from the environment for each request"""
    return Settings()


def get_table_source() -> Optional[BaseTableSource]:
    """Table source override; None lets ContentService talk to Airtable directly"""
    return None
