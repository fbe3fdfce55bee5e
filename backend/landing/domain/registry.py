"""
Section type catalog.

Each of the seven section types lists its variants and the settings
record it uses. Variants only select a presentation; they never change
which settings are valid.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Tuple, Type

from landing.utils.validation import coerce_model

from .exceptions import UnknownSectionType
from .settings import (
    CTASettings,
    GallerySettings,
    HeroSettings,
    LocationSettings,
    ReviewsSettings,
    ServicesSettings,
    SettingsModel,
    TeamSettings,
)

SectionType = Literal["hero", "services", "team", "gallery", "reviews", "location", "cta"]

DEFAULT_VARIANT = "default"


@dataclass(frozen=True)
class VariantDescriptor:
    name: str
    label: str


@dataclass(frozen=True)
class SectionTypeDescriptor:
    type: str
    label: str
    variants: Tuple[VariantDescriptor, ...]
    settings_schema: Type[SettingsModel]

    @property
    def variant_names(self) -> Tuple[str, ...]:
        return tuple(variant.name for variant in self.variants)

    def has_variant(self, name: str) -> bool:
        return name in self.variant_names


def _variants(*pairs: Tuple[str, str]) -> Tuple[VariantDescriptor, ...]:
    return (VariantDescriptor(DEFAULT_VARIANT, "Default"),) + tuple(
        VariantDescriptor(name, label) for name, label in pairs
    )


SECTION_REGISTRY: Dict[str, SectionTypeDescriptor] = {
    "hero": SectionTypeDescriptor(
        type="hero",
        label="Hero",
        variants=_variants(
            ("split-screen", "Split screen"),
            ("video-parallax", "Video parallax"),
            ("animated-text", "Animated text"),
            ("slideshow", "Slideshow"),
            ("minimal", "Minimal"),
        ),
        settings_schema=HeroSettings,
    ),
    "services": SectionTypeDescriptor(
        type="services",
        label="Services",
        variants=_variants(
            ("featured", "Featured"),
            ("minimal", "Minimal"),
            ("hover-cards", "Hover cards"),
            ("pricing-table", "Pricing table"),
        ),
        settings_schema=ServicesSettings,
    ),
    "team": SectionTypeDescriptor(
        type="team",
        label="Team",
        variants=_variants(
            ("featured", "Featured"),
            ("minimal-cards", "Minimal cards"),
            ("overlay", "Overlay"),
            ("cards-horizontal", "Horizontal cards"),
        ),
        settings_schema=TeamSettings,
    ),
    "gallery": SectionTypeDescriptor(
        type="gallery",
        label="Gallery",
        variants=_variants(
            ("featured", "Featured"),
            ("before-after", "Before / after"),
            ("collage", "Collage"),
            ("polaroid", "Polaroid"),
        ),
        settings_schema=GallerySettings,
    ),
    "reviews": SectionTypeDescriptor(
        type="reviews",
        label="Reviews",
        variants=_variants(
            ("featured", "Featured"),
            ("marquee", "Marquee"),
            ("testimonial-wall", "Testimonial wall"),
            ("quote-highlight", "Quote highlight"),
        ),
        settings_schema=ReviewsSettings,
    ),
    "location": SectionTypeDescriptor(
        type="location",
        label="Location",
        variants=_variants(
            ("minimal", "Minimal"),
            ("classic", "Classic"),
            ("urban", "Urban"),
            ("luxury", "Luxury"),
            ("bold", "Bold"),
        ),
        settings_schema=LocationSettings,
    ),
    "cta": SectionTypeDescriptor(
        type="cta",
        label="Call to action",
        variants=_variants(
            ("minimal", "Minimal"),
            ("vintage", "Vintage"),
            ("bold", "Bold"),
            ("luxury", "Luxury"),
            ("impact", "Impact"),
        ),
        settings_schema=CTASettings,
    ),
}

SECTION_TYPES: Tuple[str, ...] = tuple(SECTION_REGISTRY)


def get_descriptor(section_type: str) -> SectionTypeDescriptor:
    try:
        return SECTION_REGISTRY[section_type]
    except (KeyError, TypeError):
        raise UnknownSectionType(section_type) from None


def list_descriptors() -> List[SectionTypeDescriptor]:
    return list(SECTION_REGISTRY.values())


def is_known_type(section_type: Any) -> bool:
    return isinstance(section_type, str) and section_type in SECTION_REGISTRY


def validate_variant(section_type: str, variant: Any) -> str:
    """
    Return `variant` if the type knows it, otherwise "default".

    Legacy and corrupted variant strings are expected in stored
    documents, so this never raises for a bad variant. An unknown
    section type still raises UnknownSectionType.
    """
    descriptor = get_descriptor(section_type)
    if isinstance(variant, str) and descriptor.has_variant(variant):
        return variant
    return DEFAULT_VARIANT


def parse_settings(section_type: str, raw: Any) -> SettingsModel:
    """Typed settings for a section type, tolerating partial input."""
    descriptor = get_descriptor(section_type)
    return coerce_model(
        descriptor.settings_schema,
        raw,
        label=f"{section_type} settings",
    )
