"""
Typed settings bundles, one record per section type.

The settings shape depends only on the section type; every variant
of a type shares the same record.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Columns = Literal[2, 3, 4]


class SettingsModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class FocalPoint(SettingsModel):
    x: float
    y: float


class ImageRef(SettingsModel):
    """Image reference produced by the asset upload, kept verbatim."""

    id: str
    url: str
    alt: str = ""
    optimized_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    focal_point: Optional[FocalPoint] = None
    width: Optional[int] = None
    height: Optional[int] = None


class HeroSettings(SettingsModel):
    title: str = "Your Barbershop"
    subtitle: str = "Style and tradition in every cut"
    background_type: Literal["image", "color", "gradient", "video"] = "color"
    background_value: str = "222.2 47.4% 11.2%"
    background_image: Optional[ImageRef] = None
    background_images: List[ImageRef] = Field(default_factory=list)
    text_position: Literal["left", "center", "right"] = "center"
    text_color: Literal["light", "dark"] = "light"
    height: Literal["fullscreen", "75vh", "50vh"] = "75vh"
    overlay_opacity: float = Field(default=0.5, ge=0, le=1)
    cta_primary_text: str = "Book Now"
    cta_primary_action: str = "booking"
    cta_secondary_text: Optional[str] = None
    cta_secondary_action: Optional[str] = None
    show_logo: bool = True
    show_scroll_indicator: bool = True
    split_image: Optional[ImageRef] = None
    split_position: Optional[Literal["left", "right"]] = None
    slideshow_interval: Optional[int] = Field(default=None, gt=0)
    slideshow_transition: Optional[Literal["fade", "slide", "zoom"]] = None


class ServicesSettings(SettingsModel):
    layout: Literal["grid", "list", "carousel"] = "grid"
    columns: Columns = 3
    show_prices: bool = True
    show_duration: bool = True
    show_description: bool = True
    show_images: bool = False
    categories_filter: List[str] = Field(default_factory=list)
    max_items: int = Field(default=9, ge=1)
    background_color: str = "0 0% 100%"
    card_style: Literal["flat", "elevated", "bordered"] = "elevated"


class TeamSettings(SettingsModel):
    layout: Literal["grid", "carousel", "list"] = "grid"
    columns: Columns = 3
    photo_shape: Literal["circle", "square", "rounded"] = "circle"
    show_specialties: bool = True
    show_bio: bool = False
    show_social: bool = False
    show_rating: bool = True
    background_color: str = "210 40% 96.1%"


class GallerySettings(SettingsModel):
    layout: Literal["masonry", "grid", "slider", "instagram"] = "masonry"
    columns: Columns = 3
    show_categories: bool = True
    show_lightbox: bool = True
    max_images: int = Field(default=12, ge=1)
    images: List[ImageRef] = Field(default_factory=list)
    background_color: str = "0 0% 100%"


class ReviewsSettings(SettingsModel):
    layout: Literal["cards", "slider", "list"] = "cards"
    show_photos: bool = True
    show_date: bool = True
    min_rating: int = Field(default=4, ge=1, le=5)
    max_items: int = Field(default=6, ge=1)
    background_color: str = "210 40% 96.1%"


class LocationSettings(SettingsModel):
    show_map: bool = True
    show_hours: bool = True
    show_contact: bool = True
    show_social: bool = True
    map_style: Literal["standard", "dark", "light"] = "standard"
    background_color: str = "0 0% 100%"


class CTASettings(SettingsModel):
    title: str = "Ready for a new look?"
    subtitle: str = "Book your appointment now and enjoy the best barbershop experience"
    button_text: str = "Book Now"
    button_action: str = "booking"
    background_type: Literal["color", "gradient", "image"] = "gradient"
    background_value: str = (
        "linear-gradient(135deg, hsl(222.2 47.4% 11.2%), hsl(222.2 47.4% 20%))"
    )
    background_image: Optional[ImageRef] = None


class FooterLink(SettingsModel):
    label: str = ""
    url: str = ""


class FooterSettings(SettingsModel):
    variant: Literal["complete", "centered", "minimal"] = "complete"
    show_logo: bool = True
    tagline: str = "Quality and style in every cut."
    show_contact: bool = True
    show_social: bool = True
    show_booking_button: bool = True
    show_privacy_link: bool = True
    show_terms_link: bool = True
    powered_by_text: str = "Barber Smart"
    show_powered_by: bool = True
    custom_links: List[FooterLink] = Field(default_factory=list)
    background_color: Optional[str] = None


class SEOConfig(SettingsModel):
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    og_image: Optional[str] = None
