"""Shared fixtures: canned Airtable tables, a fake table source and an API client."""

import copy
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_settings, get_table_source
from app.core.config import AirtableConfig, Settings
from app.ingestion.base import BaseTableSource
from app.main import app
from app.schemas.raw import RawRecord, TableQuery

API_KEY = "keyTEST123"
BASE_ID = "appTEST123"


CANNED_TABLES: Dict[str, List[RawRecord]] = {
    "SiteSettings": [{"backgroundPattern": "dots", "brandColor": "#ff6600"}],
    "PageContent": [
        {
            "portfolioTitle": "Recent work",
            "pricingTitle": "Pricing",
            "pricingSubtitle": "Pick a plan",
            "testimonialsTitle": "Happy clients",
            "faqTitle": "FAQ",
            "faqSubtitle": "Things people ask",
        }
    ],
    "PortfolioImages": [
        {"url": "https://img.example.com/one.png", "order": 1},
        {"url": "https://img.example.com/two.png", "order": 2},
    ],
    "PricingPlans": [
        {
            "name": "Starter",
            "price": "R4,999",
            "features": "X\nY",
            "notIncluded": "Hosting",
            "isFeatured": True,
            "value": "starter",
            "order": 1,
        }
    ],
    "Testimonials": [{"quote": "Great site!", "author": "Sam", "location": "Cape Town", "order": 1}],
    "FAQ": [{"question": "How long?", "answer": "Two weeks.", "order": 1}],
    "Contact": [
        {
            "title": "Get in touch",
            "subtitle": "We reply within a day",
            "email": "hello@example.com",
            "phone": "+27 73 442 2054",
            "whatsappNumber": "27734422054",
            "whatsappPrefill": "Hi%20there",
            "hoursLine1": "Mon-Fri 9-5",
            "hoursLine2": "Sat 9-12",
            "hoursLine3": "Sun closed",
        }
    ],
}


class FakeTableSource(BaseTableSource):
    """In-memory table source that records every query it receives"""

    name = "fake"

    def __init__(self, tables: Dict[str, List[RawRecord]], failures: Optional[Dict[str, Exception]] = None):
        self.tables = tables
        self.failures = failures or {}
        self.calls: List[TableQuery] = []

    async def fetch(self, query: TableQuery) -> List[RawRecord]:
        self.calls.append(query)
        if query.table in self.failures:
            raise self.failures[query.table]
        return copy.deepcopy(self.tables.get(query.table, []))


@pytest.fixture
def tables() -> Dict[str, List[RawRecord]]:
    """Fresh copy of the canned tables, safe to mutate per test"""
    return copy.deepcopy(CANNED_TABLES)


@pytest.fixture
def airtable_config() -> AirtableConfig:
    return AirtableConfig(api_key=API_KEY, base_id=BASE_ID)


@pytest.fixture
def make_source():
    """Factory for FakeTableSource"""

    def _make(tables: Dict[str, List[RawRecord]], failures: Optional[Dict[str, Exception]] = None) -> FakeTableSource:
        return FakeTableSource(tables, failures)

    return _make


@pytest.fixture
def make_settings():
    """Factory for Settings isolated from the process environment and .env"""

    def _make(**overrides: Any) -> Settings:
        values: Dict[str, Any] = {"AIRTABLE_API_KEY": API_KEY, "AIRTABLE_BASE_ID": BASE_ID}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def api_client():
    """Create test client; returns a function that wires settings and source overrides"""

    def _wire(settings: Settings, source: Optional[BaseTableSource]) -> TestClient:
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_table_source] = lambda: source
        return TestClient(app)

    yield _wire
    app.dependency_overrides.clear()
