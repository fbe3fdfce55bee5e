"""
Theme tokens for the landing page.

Colors are stored as HSL triples ("222.2 47.4% 11.2%") so the
presentation layer can compose them as `hsl(var(--token))`.
"""
import re
from typing import Dict, Iterable, Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidColorFormat


BorderRadius = Literal["none", "sm", "md", "lg", "full"]

RADIUS_VALUES: Dict[str, str] = {
    "none": "0",
    "sm": "0.25rem",
    "md": "0.5rem",
    "lg": "1rem",
    "full": "9999px",
}

DEFAULT_RADIUS = "md"

# Served from our own assets, never requested from Google Fonts
LOCAL_FONTS = frozenset({"Posey Textured"})

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_HSL_RE = re.compile(r"^\d+(\.\d+)?\s+\d+(\.\d+)?%\s+\d+(\.\d+)?%$")


class HslTriple(NamedTuple):
    hue: int
    saturation: int
    lightness: int

    def __str__(self) -> str:
        return f"{self.hue} {self.saturation}% {self.lightness}%"


def hex_to_hsl(value: str) -> HslTriple:
    """
    Convert an RGB hex color (#rrggbb, rrggbb or #rgb) to HSL.

    Hue is in degrees (0-360), saturation and lightness in percent
    (0-100), all rounded to integers.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)

    match = _HEX_RE.match(value.strip())
    if not match:
        raise InvalidColorFormat(value)

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return HslTriple(
        round(hue * 360),
        round(saturation * 100),
        round(lightness * 100),
    )


def is_hsl_triple(value: str) -> bool:
    return isinstance(value, str) and bool(_HSL_RE.match(value.strip()))


def to_hsl_token(value: str) -> str:
    """Normalize a hex or HSL-triple color into an HSL token string."""
    if is_hsl_triple(value):
        return value.strip()
    return str(hex_to_hsl(value))


def resolve_radius(radius_class: Optional[str]) -> str:
    if radius_class not in RADIUS_VALUES:
        radius_class = DEFAULT_RADIUS
    return RADIUS_VALUES[radius_class]


class GlobalStyleTokens(BaseModel):
    model_config = ConfigDict(extra="ignore")

    primary_color: str = "222.2 47.4% 11.2%"
    secondary_color: str = "210 40% 96.1%"
    accent_color: str = "210 40% 96.1%"
    background_color: str = "0 0% 100%"
    text_color: str = "222.2 84% 4.9%"
    font_heading: str = "Posey Textured"
    font_body: str = "Outfit"
    border_radius: BorderRadius = "md"


COLOR_TOKENS = (
    ("primary_color", "primary"),
    ("secondary_color", "secondary"),
    ("accent_color", "accent"),
    ("background_color", "background"),
    ("text_color", "text"),
)


def to_css_variables(tokens: GlobalStyleTokens, prefix: str = "landing") -> Dict[str, str]:
    """Flatten style tokens into `--<prefix>-<name>: <value>` pairs."""
    variables = {
        f"--{prefix}-{name}": f"hsl({getattr(tokens, field)})"
        for field, name in COLOR_TOKENS
    }
    variables[f"--{prefix}-font-heading"] = tokens.font_heading
    variables[f"--{prefix}-font-body"] = tokens.font_body
    variables[f"--{prefix}-radius"] = resolve_radius(tokens.border_radius)
    return variables


def font_stylesheet_url(
    tokens: GlobalStyleTokens,
    local_fonts: Iterable[str] = LOCAL_FONTS,
) -> Optional[str]:
    """Google Fonts URL for the heading and body fonts, or None."""
    skip = set(local_fonts)
    families = []
    for font in (tokens.font_heading, tokens.font_body):
        if font and font not in skip and font not in families:
            families.append(font)

    if not families:
        return None

    query = "&".join(
        f"family={family.replace(' ', '+')}:wght@400;500;600;700"
        for family in families
    )
    return f"{GOOGLE_FONTS_URL}?{query}&display=swap"
