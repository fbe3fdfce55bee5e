"""
Branding cascade.

Three origins can contribute visual identity fields:

- system: process-wide defaults, always fully populated
- custom: per-account preferences
- tenant: white-label branding bound to the request domain

Sources are folded from lowest to highest priority, one field at a
time. Tenant branding outranks custom branding, which outranks the
system defaults.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from landing.utils.merge import is_present, reduce_overrides

from .exceptions import InvalidColorFormat
from .theme import to_hsl_token

logger = logging.getLogger(__name__)

Origin = Literal["system", "tenant", "custom"]
LogoMode = Literal["light", "dark"]

BRANDING_FIELDS: Tuple[str, ...] = (
    "display_name",
    "tagline",
    "logo_url",
    "logo_light_url",
    "logo_dark_url",
    "logo_icon_url",
    "favicon_url",
    "primary_color",
    "secondary_color",
    "accent_color",
)

BRAND_COLOR_FIELDS: Tuple[str, ...] = ("primary_color", "secondary_color", "accent_color")


class BrandingProfile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    origin: Origin
    display_name: Optional[str] = None
    tagline: Optional[str] = None
    logo_url: Optional[str] = None
    logo_light_url: Optional[str] = None
    logo_dark_url: Optional[str] = None
    logo_icon_url: Optional[str] = None
    favicon_url: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None

    # Only meaningful on the system profile
    allow_tenant_customization: bool = True

    def present_fields(self) -> Dict[str, str]:
        return {
            name: getattr(self, name)
            for name in BRANDING_FIELDS
            if is_present(getattr(self, name))
        }

    def is_empty(self) -> bool:
        return not self.present_fields()


class EffectiveBranding(BrandingProfile):
    """Result of the cascade, with the origin that supplied each field."""

    field_origins: Dict[str, Origin] = Field(default_factory=dict)


def cascade_sources(
    system: BrandingProfile,
    tenant: Optional[BrandingProfile] = None,
    custom: Optional[BrandingProfile] = None,
) -> List[BrandingProfile]:
    """
    Override sources ordered lowest to highest priority.

    Custom branding is skipped when the system profile disallows
    account-level customization; domain white-labeling always applies.
    """
    sources = [system]
    if custom is not None and system.allow_tenant_customization:
        sources.append(custom)
    if tenant is not None:
        sources.append(tenant)
    return sources


def merge_profiles(sources: Sequence[BrandingProfile]) -> EffectiveBranding:
    if not sources:
        raise ValueError("At least the system profile is required")

    values = reduce_overrides(source.present_fields() for source in sources)
    origins = reduce_overrides(
        {name: source.origin for name in source.present_fields()}
        for source in sources
    )

    return EffectiveBranding(
        origin="system",
        allow_tenant_customization=sources[0].allow_tenant_customization,
        field_origins=origins,
        **values,
    )


def resolve(
    system: BrandingProfile,
    tenant: Optional[BrandingProfile] = None,
    custom: Optional[BrandingProfile] = None,
) -> EffectiveBranding:
    """
    Resolve the effective branding for one request.

    Pure and total: missing profiles fall through to the system
    profile, which always carries every mandatory field.
    """
    return merge_profiles(cascade_sources(system, tenant, custom))


def select_logo(profile: BrandingProfile, mode: LogoMode) -> Optional[str]:
    """Mode-specific logo, then the generic logo, then None."""
    specific = profile.logo_dark_url if mode == "dark" else profile.logo_light_url
    for candidate in (specific, profile.logo_url):
        if is_present(candidate):
            return candidate
    return None


def select_icon(profile: BrandingProfile) -> Optional[str]:
    """Icon for favicons and installed apps: icon, favicon, then logo."""
    for candidate in (profile.logo_icon_url, profile.favicon_url, profile.logo_url):
        if is_present(candidate):
            return candidate
    return None


@dataclass(frozen=True)
class ThemeTokens:
    """What the apply step pushes into the live style context."""

    css_variables: Dict[str, str]
    favicon_url: Optional[str]
    title: Optional[str]


def _color_token(profile: BrandingProfile, system: BrandingProfile, field: str) -> Optional[str]:
    value = getattr(profile, field)
    if is_present(value):
        try:
            return to_hsl_token(value)
        except InvalidColorFormat:
            logger.warning(
                "Invalid %s %r, falling back to the system default", field, value
            )

    fallback = getattr(system, field)
    if not is_present(fallback):
        return None
    try:
        return to_hsl_token(fallback)
    except InvalidColorFormat:
        logger.error("System default %s %r is not a valid color", field, fallback)
        return None


def branding_css_variables(
    profile: BrandingProfile,
    system: BrandingProfile,
) -> Dict[str, str]:
    """
    Brand colors as CSS variables holding HSL triples.

    `--brand` mirrors `--primary`.
    """
    variables: Dict[str, str] = {}

    primary = _color_token(profile, system, "primary_color")
    if primary:
        variables["--primary"] = primary
        variables["--brand"] = primary

    secondary = _color_token(profile, system, "secondary_color")
    if secondary:
        variables["--secondary"] = secondary

    accent = _color_token(profile, system, "accent_color")
    if accent:
        variables["--accent"] = accent

    return variables


def theme_tokens(profile: BrandingProfile, system: BrandingProfile) -> ThemeTokens:
    return ThemeTokens(
        css_variables=branding_css_variables(profile, system),
        favicon_url=select_icon(profile),
        title=profile.display_name,
    )
