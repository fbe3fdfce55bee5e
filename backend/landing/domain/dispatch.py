"""
Section type to renderer mapping.

The table is closed over the seven catalog types. A type without an
entry is a configuration-integrity problem (typically a template that
still references a retired type); composition reports it and skips
the section instead of failing the whole page.
"""
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .exceptions import UnknownSectionType


@dataclass(frozen=True)
class RendererHandle:
    section_type: str
    component: str
    # External data provider list the renderer consumes, if any
    data_feed: Optional[str] = None


RENDERERS: Dict[str, RendererHandle] = {
    "hero": RendererHandle("hero", "HeroSection"),
    "services": RendererHandle("services", "ServicesSection", data_feed="services"),
    "team": RendererHandle("team", "TeamSection", data_feed="staff"),
    "gallery": RendererHandle("gallery", "GallerySection"),
    "reviews": RendererHandle("reviews", "ReviewsSection", data_feed="reviews"),
    "location": RendererHandle("location", "LocationSection", data_feed="business_hours"),
    "cta": RendererHandle("cta", "CTASection"),
}


class DispatchTable:
    def __init__(self, renderers: Mapping[str, RendererHandle]):
        self._renderers = dict(renderers)

    def resolve(self, section_type: str) -> RendererHandle:
        try:
            return self._renderers[section_type]
        except (KeyError, TypeError):
            raise UnknownSectionType(section_type) from None

    def __contains__(self, section_type) -> bool:
        return section_type in self._renderers


DEFAULT_DISPATCH = DispatchTable(RENDERERS)


def resolve_renderer(section_type: str) -> RendererHandle:
    return DEFAULT_DISPATCH.resolve(section_type)
