from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Patterns the UI knows how to draw; anything else is passed through as-is
KNOWN_BACKGROUND_PATTERNS = ("crosses", "dots", "none")


class ContentModel(BaseModel):
    """Base for the public document: camelCase on the wire, immutable once built."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        # Airtable number fields (phone, whatsapp) arrive as ints
        coerce_numbers_to_str=True,
    )


class SiteSettingsOut(ContentModel):
    background_pattern: Optional[str] = None
    brand_color: Optional[str] = None


class PageTitles(ContentModel):
    """Section titles held in the single PageContent row."""

    portfolio_title: Optional[str] = None
    pricing_title: Optional[str] = None
    pricing_subtitle: Optional[str] = None
    testimonials_title: Optional[str] = None
    faq_title: Optional[str] = None
    faq_subtitle: Optional[str] = None


class PortfolioMarquee(ContentModel):
    title: Optional[str] = None
    images: list[Optional[str]] = []


class TestimonialsSection(ContentModel):
    title: Optional[str] = None
    items: list[dict[str, Any]] = []


class PricingSection(ContentModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    plans: list[dict[str, Any]] = []
    testimonials: TestimonialsSection


class FAQSection(ContentModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    items: list[dict[str, Any]] = []


class ContactHours(ContentModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None


class ContactOut(ContentModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    email: Optional[str] = None
    secondary_email: Optional[str] = None
    phone: Optional[str] = None
    whatsapp_number: Optional[str] = None
    whatsapp_prefill: Optional[str] = None
    hours: ContactHours


class ContentDocument(ContentModel):
    """Everything the landing page renders, assembled from seven tables."""

    site_settings: SiteSettingsOut
    portfolio_marquee: PortfolioMarquee
    pricing: PricingSection
    faq: FAQSection
    contact: ContactOut

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
