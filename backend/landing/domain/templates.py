"""
Starting configurations offered to a tenant before any customization.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from .configuration import PageConfiguration
from .exceptions import TemplateNotFound

TemplateCategory = Literal["modern", "vintage", "urban", "premium", "bold"]


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    description: str
    thumbnail: str
    category: TemplateCategory
    default_config: PageConfiguration

    def new_configuration(self) -> PageConfiguration:
        return self.default_config.model_copy(deep=True)


def _sections(*entries: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Sections in page order; the type doubles as the section id."""
    return [
        {"id": entry["type"], "enabled": True, "order": index, **entry}
        for index, entry in enumerate(entries)
    ]


def _config(template_id: str, global_styles: Dict[str, Any], sections) -> PageConfiguration:
    return PageConfiguration.model_validate(
        {
            "template_id": template_id,
            "global_styles": global_styles,
            "sections": sections,
            "seo": {},
        }
    )


MODERN_MINIMALIST = _config(
    "modern-minimalist",
    {
        "primary_color": "0 0% 9%",
        "secondary_color": "0 0% 96%",
        "accent_color": "142.1 76.2% 36.3%",
        "font_heading": "Inter",
        "font_body": "Inter",
        "border_radius": "lg",
    },
    _sections(
        {
            "type": "hero",
            "variant": "split-screen",
            "settings": {
                "text_position": "left",
                "background_type": "color",
                "background_value": "0 0% 96%",
                "text_color": "dark",
                "height": "75vh",
            },
        },
        {
            "type": "services",
            "variant": "minimal",
            "title": "Our Services",
            "settings": {"layout": "grid", "columns": 3, "card_style": "flat"},
        },
        {
            "type": "team",
            "variant": "minimal-cards",
            "title": "Our Team",
            "settings": {"photo_shape": "rounded", "background_color": "0 0% 96%"},
        },
        {
            "type": "gallery",
            "variant": "default",
            "title": "Our Work",
            "settings": {"layout": "masonry", "columns": 3},
        },
        {
            "type": "reviews",
            "variant": "default",
            "title": "What People Say",
            "settings": {"layout": "slider", "background_color": "0 0% 96%"},
        },
        {
            "type": "location",
            "variant": "minimal",
            "title": "Find Us",
            "settings": {"map_style": "light"},
        },
        {
            "type": "cta",
            "variant": "minimal",
            "settings": {"background_type": "color", "background_value": "0 0% 9%"},
        },
    ),
)

VINTAGE_CLASSIC = _config(
    "vintage-classic",
    {
        "primary_color": "30 41% 14%",
        "secondary_color": "39 77% 83%",
        "accent_color": "36 100% 50%",
        "font_heading": "Playfair Display",
        "font_body": "Lora",
        "border_radius": "none",
    },
    _sections(
        {
            "type": "hero",
            "variant": "default",
            "settings": {
                "background_type": "image",
                "background_value": "",
                "height": "fullscreen",
                "overlay_opacity": 0.6,
            },
        },
        {
            "type": "services",
            "variant": "pricing-table",
            "title": "Services",
            "settings": {"layout": "list", "columns": 2, "card_style": "bordered"},
        },
        {
            "type": "team",
            "variant": "default",
            "title": "Master Barbers",
            "settings": {"photo_shape": "square", "show_bio": True},
        },
        {
            "type": "gallery",
            "variant": "polaroid",
            "title": "Gallery",
            "settings": {"layout": "grid", "columns": 4},
        },
        {
            "type": "reviews",
            "variant": "quote-highlight",
            "title": "Testimonials",
            "settings": {"layout": "cards"},
        },
        {
            "type": "location",
            "variant": "classic",
            "title": "Visit Us",
            "settings": {"map_style": "standard"},
        },
        {
            "type": "cta",
            "variant": "vintage",
            "settings": {
                "title": "Tradition in Every Cut",
                "background_type": "color",
                "background_value": "30 41% 14%",
            },
        },
    ),
)

LIFESTYLE_URBAN = _config(
    "lifestyle-urban",
    {
        "primary_color": "0 0% 0%",
        "secondary_color": "0 0% 98%",
        "accent_color": "47 100% 50%",
        "font_heading": "Bebas Neue",
        "font_body": "Roboto",
        "border_radius": "none",
    },
    _sections(
        {
            "type": "hero",
            "variant": "video-parallax",
            "settings": {
                "title": "URBAN STYLE",
                "subtitle": "More than a haircut, an attitude",
                "text_position": "left",
                "background_type": "video",
                "background_value": "",
                "height": "fullscreen",
                "overlay_opacity": 0.4,
            },
        },
        {
            "type": "services",
            "variant": "hover-cards",
            "title": "WHAT WE DO",
            "settings": {"layout": "carousel", "columns": 4, "show_images": True},
        },
        {
            "type": "team",
            "variant": "overlay",
            "title": "CREW",
            "settings": {"photo_shape": "square", "show_social": True},
        },
        {
            "type": "gallery",
            "variant": "collage",
            "title": "FEED",
            "settings": {"layout": "instagram", "columns": 3},
        },
        {
            "type": "reviews",
            "variant": "marquee",
            "title": "CLIENTS",
            "settings": {"layout": "slider", "show_photos": False},
        },
        {
            "type": "location",
            "variant": "urban",
            "title": "LOCATION",
            "settings": {"map_style": "dark"},
        },
        {
            "type": "cta",
            "variant": "bold",
            "settings": {
                "title": "READY FOR A CUT?",
                "subtitle": "",
                "background_type": "color",
                "background_value": "47 100% 50%",
            },
        },
    ),
)

PREMIUM_LUXURY = _config(
    "premium-luxury",
    {
        "primary_color": "0 0% 7%",
        "secondary_color": "43 74% 49%",
        "accent_color": "43 74% 49%",
        "text_color": "0 0% 95%",
        "font_heading": "Cormorant Garamond",
        "font_body": "Montserrat",
        "border_radius": "sm",
    },
    _sections(
        {
            "type": "hero",
            "variant": "split-screen",
            "settings": {
                "title": "Barbering Excellence",
                "subtitle": "An exclusive experience for the modern gentleman",
                "text_position": "left",
                "background_type": "image",
                "background_value": "",
                "height": "fullscreen",
                "overlay_opacity": 0.3,
            },
        },
        {
            "type": "services",
            "variant": "featured",
            "title": "Experiences",
            "settings": {"card_style": "bordered", "show_images": True},
        },
        {
            "type": "team",
            "variant": "featured",
            "title": "Specialists",
            "settings": {"show_bio": True},
        },
        {
            "type": "gallery",
            "variant": "featured",
            "title": "Portfolio",
            "settings": {"layout": "grid"},
        },
        {
            "type": "reviews",
            "variant": "testimonial-wall",
            "title": "Testimonials",
            "settings": {"min_rating": 5},
        },
        {
            "type": "location",
            "variant": "luxury",
            "title": "Location",
            "settings": {"map_style": "dark"},
        },
        {
            "type": "cta",
            "variant": "luxury",
            "settings": {
                "title": "Reserve Your Experience",
                "subtitle": "Book now and discover a new standard of excellence",
                "background_type": "gradient",
                "background_value": "linear-gradient(135deg, hsl(43 74% 49% / 0.2), hsl(0 0% 7%))",
            },
        },
    ),
)

BOLD_IMPACT = _config(
    "bold-impact",
    {
        "primary_color": "0 0% 100%",
        "secondary_color": "263 70% 50%",
        "accent_color": "142 71% 45%",
        "text_color": "0 0% 100%",
        "font_heading": "Oswald",
        "font_body": "Open Sans",
        "border_radius": "full",
    },
    _sections(
        {
            "type": "hero",
            "variant": "animated-text",
            "settings": {
                "title": "THE PERFECT CUT",
                "subtitle": "Transform your look",
                "background_type": "gradient",
                "background_value": "linear-gradient(135deg, hsl(263 70% 30%), hsl(0 0% 5%))",
                "height": "fullscreen",
            },
        },
        {
            "type": "services",
            "variant": "hover-cards",
            "title": "SERVICES",
            "settings": {"layout": "carousel"},
        },
        {
            "type": "team",
            "variant": "cards-horizontal",
            "title": "OUR TEAM",
            "settings": {"layout": "carousel"},
        },
        {
            "type": "gallery",
            "variant": "before-after",
            "title": "WORK",
            "settings": {"layout": "slider"},
        },
        {
            "type": "reviews",
            "variant": "featured",
            "title": "REVIEWS",
            "settings": {},
        },
        {
            "type": "location",
            "variant": "bold",
            "title": "FIND US",
            "settings": {"map_style": "dark"},
        },
        {
            "type": "cta",
            "variant": "impact",
            "settings": {
                "title": "BOOK NOW",
                "subtitle": "Don't wait any longer",
                "background_type": "gradient",
                "background_value": "linear-gradient(90deg, hsl(263 70% 50%), hsl(142 71% 45%))",
            },
        },
    ),
)


TEMPLATES: List[Template] = [
    Template(
        id="modern-minimalist",
        name="Modern Minimalist",
        description="Clean, elegant design focused on simplicity.",
        thumbnail="/templates/modern-minimalist.jpg",
        category="modern",
        default_config=MODERN_MINIMALIST,
    ),
    Template(
        id="vintage-classic",
        name="Vintage Classic",
        description="Retro style with classic elegance for traditional shops.",
        thumbnail="/templates/vintage-classic.jpg",
        category="vintage",
        default_config=VINTAGE_CLASSIC,
    ),
    Template(
        id="lifestyle-urban",
        name="Lifestyle Urban",
        description="Bold, modern look with urban energy.",
        thumbnail="/templates/lifestyle-urban.jpg",
        category="urban",
        default_config=LIFESTYLE_URBAN,
    ),
    Template(
        id="premium-luxury",
        name="Premium Luxury",
        description="Sophistication in every detail for high-end shops.",
        thumbnail="/templates/premium-luxury.jpg",
        category="premium",
        default_config=PREMIUM_LUXURY,
    ),
    Template(
        id="bold-impact",
        name="Bold Impact",
        description="Vibrant colors and motion for shops that want to stand out.",
        thumbnail="/templates/bold-impact.jpg",
        category="bold",
        default_config=BOLD_IMPACT,
    ),
]

_TEMPLATES_BY_ID: Dict[str, Template] = {template.id: template for template in TEMPLATES}

DEFAULT_TEMPLATE_ID = TEMPLATES[0].id


def list_templates() -> List[Template]:
    return list(TEMPLATES)


def get_template(template_id: str) -> Template:
    try:
        return _TEMPLATES_BY_ID[template_id]
    except (KeyError, TypeError):
        raise TemplateNotFound(template_id) from None


def find_template(template_id: Optional[str]) -> Template:
    """The named template, or the first one when the id is unknown."""
    return _TEMPLATES_BY_ID.get(template_id, TEMPLATES[0])


def default_config(template_id: Optional[str] = None) -> PageConfiguration:
    return find_template(template_id).new_configuration()


def apply_template(template_id: Optional[str]) -> PageConfiguration:
    """
    Replace a configuration with a fresh copy of a template.

    Unknown ids fall back to the first template.
    """
    return find_template(template_id).new_configuration()
