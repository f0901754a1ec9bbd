"""Builds the landing-page content document from the Airtable base."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx
from pydantic import ValidationError

from app.core.config import AirtableConfig
from app.core.errors import ShapeError
from app.core.logging import get_logger
from app.ingestion.airtable_source import DEFAULT_TIMEOUT, AirtableSource
from app.ingestion.base import BaseTableSource
from app.ingestion.runner import TableRunner
from app.schemas.content import (
    ContactHours,
    ContactOut,
    ContentDocument,
    FAQSection,
    KNOWN_BACKGROUND_PATTERNS,
    PageTitles,
    PortfolioMarquee,
    PricingSection,
    SiteSettingsOut,
    TestimonialsSection,
)
from app.schemas.raw import RawRecord, TableQuery

log = get_logger("content_service")

T = TypeVar("T")

SITE_SETTINGS = "SiteSettings"
PAGE_CONTENT = "PageContent"
PORTFOLIO_IMAGES = "PortfolioImages"
PRICING_PLANS = "PricingPlans"
TESTIMONIALS = "Testimonials"
FAQ = "FAQ"
CONTACT = "Contact"

# List tables are sorted by their `order` field upstream and never re-sorted here.
CONTENT_TABLES: List[TableQuery] = [
    TableQuery(table=SITE_SETTINGS, sort=False),
    TableQuery(table=PAGE_CONTENT, sort=False),
    TableQuery(table=PORTFOLIO_IMAGES, sort=True),
    TableQuery(table=PRICING_PLANS, sort=True),
    TableQuery(table=TESTIMONIALS, sort=True),
    TableQuery(table=FAQ, sort=True),
    TableQuery(table=CONTACT, sort=False),
]


def split_lines(value: Any) -> List[str]:
    """Split a long-text field into its non-empty lines.

    A missing field gives an empty list. Multi-select style list values keep
    their non-empty entries.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item) for item in value if item not in (None, "")]
    return [line for line in str(value).split("\n") if line]


class ContentService:
    """Fetches every content table and reshapes it into one ContentDocument.

    Responsibilities:
    - Fan out the seven table reads concurrently (all-or-nothing)
    - Take row 0 of the single-row tables, failing if a table is empty
    - Reshape list tables without changing their upstream order
    """

    def __init__(
        self,
        config: AirtableConfig,
        source: Optional[BaseTableSource] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.config = config
        self.source = source
        self.timeout = timeout

    async def build_document(self) -> ContentDocument:
        if self.source is not None:
            tables = await TableRunner(self.source).run(CONTENT_TABLES)
        else:
            # One pooled client for all seven reads
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                source = AirtableSource(self.config, client=client, timeout=self.timeout)
                tables = await TableRunner(source).run(CONTENT_TABLES)

        document = self.reshape(tables)
        log.info(
            f"Content document built | plans={len(document.pricing.plans)} "
            f"faq={len(document.faq.items)} images={len(document.portfolio_marquee.images)}"
        )
        return document

    # -------------------------------------------------------------------------
    # Reshaping
    # -------------------------------------------------------------------------
    def reshape(self, tables: Dict[str, List[RawRecord]]) -> ContentDocument:
        site_settings = self._single_row(tables, SITE_SETTINGS)
        page_content = self._single_row(tables, PAGE_CONTENT)
        contact = self._single_row(tables, CONTACT)

        # Titles are validated against their own table so a bad title is not
        # blamed on the list table whose section it heads
        titles = self._build(PAGE_CONTENT, lambda: PageTitles.model_validate(page_content))

        return ContentDocument(
            site_settings=self._build(SITE_SETTINGS, lambda: self._site_settings(site_settings)),
            portfolio_marquee=self._build(
                PORTFOLIO_IMAGES,
                lambda: PortfolioMarquee(
                    title=titles.portfolio_title,
                    images=[rec.get("url") for rec in tables[PORTFOLIO_IMAGES]],
                ),
            ),
            pricing=self._build(
                PRICING_PLANS,
                lambda: PricingSection(
                    title=titles.pricing_title,
                    subtitle=titles.pricing_subtitle,
                    plans=[self._plan(plan) for plan in tables[PRICING_PLANS]],
                    testimonials=self._build(
                        TESTIMONIALS,
                        lambda: TestimonialsSection(
                            title=titles.testimonials_title,
                            items=tables[TESTIMONIALS],
                        ),
                    ),
                ),
            ),
            faq=self._build(
                FAQ,
                lambda: FAQSection(
                    title=titles.faq_title,
                    subtitle=titles.faq_subtitle,
                    items=tables[FAQ],
                ),
            ),
            contact=self._build(CONTACT, lambda: self._contact(contact)),
        )

    @staticmethod
    def _single_row(tables: Dict[str, List[RawRecord]], table: str) -> RawRecord:
        rows = tables.get(table) or []
        if not rows:
            raise ShapeError(table, "expected at least one row, got none")
        if len(rows) > 1:
            log.warning(f"Table {table} has {len(rows)} rows; using the first")
        return rows[0]

    @staticmethod
    def _build(table: str, factory: Callable[[], T]) -> T:
        try:
            return factory()
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise ShapeError(table, errors) from exc

    @staticmethod
    def _site_settings(row: RawRecord) -> SiteSettingsOut:
        pattern = row.get("backgroundPattern")
        if pattern is not None and pattern not in KNOWN_BACKGROUND_PATTERNS:
            log.bind(table=SITE_SETTINGS).warning(f"Unknown backgroundPattern {pattern!r}; passing it through")
        return SiteSettingsOut(
            background_pattern=pattern,
            brand_color=row.get("brandColor"),
        )

    @staticmethod
    def _plan(plan: RawRecord) -> Dict[str, Any]:
        return {
            **plan,
            "features": split_lines(plan.get("features")),
            "notIncluded": split_lines(plan.get("notIncluded")),
        }

    @staticmethod
    def _contact(row: RawRecord) -> ContactOut:
        return ContactOut(
            title=row.get("title"),
            subtitle=row.get("subtitle"),
            email=row.get("email"),
            secondary_email=row.get("secondaryEmail"),
            phone=row.get("phone"),
            whatsapp_number=row.get("whatsappNumber"),
            whatsapp_prefill=row.get("whatsappPrefill"),
            hours=ContactHours(
                line1=row.get("hoursLine1"),
                line2=row.get("hoursLine2"),
                line3=row.get("hoursLine3"),
            ),
        )
