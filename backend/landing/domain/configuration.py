"""
Landing page configuration document.

Sections form a tagged union keyed by `type`: each known type has its
own section class whose `settings` field is that type's settings
record. Stored sections whose type is not in the catalog are kept
verbatim as `UnrecognizedSection` so saving never destroys tenant
data; composition skips them.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, field_validator

from .registry import DEFAULT_VARIANT, is_known_type, parse_settings, validate_variant
from .settings import (
    CTASettings,
    FooterSettings,
    GallerySettings,
    HeroSettings,
    LocationSettings,
    ReviewsSettings,
    SEOConfig,
    ServicesSettings,
    TeamSettings,
)
from .theme import GlobalStyleTokens

logger = logging.getLogger(__name__)


class BaseSection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    type: str
    variant: str = DEFAULT_VARIANT
    order: int = 0
    enabled: bool = True
    title: Optional[str] = None


class HeroSection(BaseSection):
    type: Literal["hero"] = "hero"
    settings: HeroSettings = Field(default_factory=HeroSettings)


class ServicesSection(BaseSection):
    type: Literal["services"] = "services"
    settings: ServicesSettings = Field(default_factory=ServicesSettings)


class TeamSection(BaseSection):
    type: Literal["team"] = "team"
    settings: TeamSettings = Field(default_factory=TeamSettings)


class GallerySection(BaseSection):
    type: Literal["gallery"] = "gallery"
    settings: GallerySettings = Field(default_factory=GallerySettings)


class ReviewsSection(BaseSection):
    type: Literal["reviews"] = "reviews"
    settings: ReviewsSettings = Field(default_factory=ReviewsSettings)


class LocationSection(BaseSection):
    type: Literal["location"] = "location"
    settings: LocationSettings = Field(default_factory=LocationSettings)


class CTASection(BaseSection):
    type: Literal["cta"] = "cta"
    settings: CTASettings = Field(default_factory=CTASettings)


class UnrecognizedSection(BaseSection):
    """A stored section of a type outside the catalog."""

    model_config = ConfigDict(extra="allow")

    settings: Dict[str, Any] = Field(default_factory=dict)


Section = Union[
    HeroSection,
    ServicesSection,
    TeamSection,
    GallerySection,
    ReviewsSection,
    LocationSection,
    CTASection,
    UnrecognizedSection,
]

SECTION_CLASSES: Dict[str, Type[BaseSection]] = {
    "hero": HeroSection,
    "services": ServicesSection,
    "team": TeamSection,
    "gallery": GallerySection,
    "reviews": ReviewsSection,
    "location": LocationSection,
    "cta": CTASection,
}


def _coerce_order(value: Any, fallback: int) -> int:
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    return fallback


def parse_section(raw: Any, *, index: int = 0) -> Optional[BaseSection]:
    """
    Build a typed section from a stored entry.

    Returns None for entries that are not objects at all. Unknown
    variants become "default"; an unknown type yields an
    UnrecognizedSection holding the raw data.
    """
    if isinstance(raw, BaseSection):
        return raw.model_copy(deep=True)

    if isinstance(raw, BaseModel):
        raw = raw.model_dump()

    if not isinstance(raw, Mapping):
        logger.warning("Dropping non-object section at position %d: %r", index, raw)
        return None

    section_type = raw.get("type")
    section_id = raw.get("id")
    if not isinstance(section_id, str) or not section_id:
        section_id = f"{section_type or 'section'}-{index}"
        logger.warning("Section at position %d has no id, using %r", index, section_id)

    title = raw.get("title")
    enabled = raw.get("enabled", True)

    common = {
        "id": section_id,
        "order": _coerce_order(raw.get("order"), index),
        "enabled": enabled if isinstance(enabled, bool) else True,
        "title": title if isinstance(title, str) else None,
    }

    if not is_known_type(section_type):
        extra = {
            key: value
            for key, value in raw.items()
            if key not in common and key not in ("type", "variant", "settings")
        }
        settings = raw.get("settings")
        return UnrecognizedSection(
            **extra,
            **common,
            type=str(section_type),
            variant=raw.get("variant") if isinstance(raw.get("variant"), str) else DEFAULT_VARIANT,
            settings=dict(settings) if isinstance(settings, Mapping) else {},
        )

    section_cls = SECTION_CLASSES[section_type]
    return section_cls(
        **common,
        variant=validate_variant(section_type, raw.get("variant")),
        settings=parse_settings(section_type, raw.get("settings")),
    )


def _stored_id(entry: Any) -> Optional[str]:
    if isinstance(entry, BaseSection):
        return entry.id
    if isinstance(entry, Mapping):
        section_id = entry.get("id")
        if isinstance(section_id, str) and section_id:
            return section_id
    return None


def _unique_id(candidate: str, taken) -> str:
    suffix = 2
    while f"{candidate}-{suffix}" in taken:
        suffix += 1
    return f"{candidate}-{suffix}"


def parse_sections(raw: Any) -> List[BaseSection]:
    """
    Parse stored sections, guaranteeing unique ids.

    The first section keeps a duplicated id, later ones get a numeric
    suffix. Generated ids never reuse an id stored anywhere in the list.
    """
    if not isinstance(raw, (list, tuple)):
        return []

    stored_ids = {_stored_id(entry) for entry in raw} - {None}
    taken = set()

    sections = []
    for index, entry in enumerate(raw):
        section = parse_section(entry, index=index)
        if section is None:
            continue

        generated = _stored_id(entry) is None
        if section.id in taken or (generated and section.id in stored_ids):
            unique = _unique_id(section.id, taken | stored_ids)
            logger.warning("Section id %r is already used, renaming to %r", section.id, unique)
            section = section.model_copy(update={"id": unique})

        taken.add(section.id)
        sections.append(section)
    return sections


class PageConfiguration(BaseModel):
    model_config = ConfigDict(extra="ignore")

    template_id: str
    sections: List[SerializeAsAny[BaseSection]] = Field(default_factory=list)
    global_styles: GlobalStyleTokens = Field(default_factory=GlobalStyleTokens)
    seo: SEOConfig = Field(default_factory=SEOConfig)
    footer: FooterSettings = Field(default_factory=FooterSettings)
    updated_at: Optional[datetime] = None

    @field_validator("sections", mode="before")
    @classmethod
    def _parse_sections(cls, value):
        return parse_sections(value)

    def find_section(self, section_id: str) -> Optional[BaseSection]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def to_document(self) -> Dict[str, Any]:
        """JSON-ready document, as handed to the persistent store."""
        return self.model_dump(mode="json")
