import pytest

from landing.domain.exceptions import InvalidColorFormat
from landing.domain.theme import (
    GlobalStyleTokens,
    HslTriple,
    font_stylesheet_url,
    hex_to_hsl,
    resolve_radius,
    to_css_variables,
    to_hsl_token,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#000000", (0, 0, 0)),
        ("#ffffff", (0, 0, 100)),
        ("#ff0000", (0, 100, 50)),
        ("#00ff00", (120, 100, 50)),
        ("#0000ff", (240, 100, 50)),
        ("#fff", (0, 0, 100)),
        ("ff0000", (0, 100, 50)),
        ("#D4A574", (31, 53, 64)),
    ],
)
def test_hex_to_hsl(value, expected):
    assert hex_to_hsl(value) == expected


@pytest.mark.parametrize("value", ["", "#12", "#gggggg", "red", "#1234567", None, 255])
def test_hex_to_hsl_rejects_malformed_input(value):
    with pytest.raises(InvalidColorFormat):
        hex_to_hsl(value)


def test_hsl_triple_formats_as_css_token():
    assert str(HslTriple(200, 80, 50)) == "200 80% 50%"


def test_to_hsl_token_passes_hsl_triples_through():
    assert to_hsl_token("222.2 47.4% 11.2%") == "222.2 47.4% 11.2%"
    assert to_hsl_token("#000000") == "0 0% 0%"


@pytest.mark.parametrize(
    "radius, expected",
    [
        ("none", "0"),
        ("sm", "0.25rem"),
        ("md", "0.5rem"),
        ("lg", "1rem"),
        ("full", "9999px"),
        ("huge", "0.5rem"),
        (None, "0.5rem"),
    ],
)
def test_resolve_radius(radius, expected):
    assert resolve_radius(radius) == expected


def test_global_styles_default_tokens():
    tokens = GlobalStyleTokens()

    assert tokens.font_heading == "Posey Textured"
    assert tokens.font_body == "Outfit"
    assert tokens.border_radius == "md"


def test_to_css_variables():
    tokens = GlobalStyleTokens(primary_color="0 0% 9%", border_radius="lg")

    variables = to_css_variables(tokens)

    assert variables["--landing-primary"] == "hsl(0 0% 9%)"
    assert variables["--landing-background"] == "hsl(0 0% 100%)"
    assert variables["--landing-font-heading"] == "Posey Textured"
    assert variables["--landing-radius"] == "1rem"
    assert set(variables) == {
        "--landing-primary",
        "--landing-secondary",
        "--landing-accent",
        "--landing-background",
        "--landing-text",
        "--landing-font-heading",
        "--landing-font-body",
        "--landing-radius",
    }


def test_font_url_skips_local_fonts():
    url = font_stylesheet_url(GlobalStyleTokens())

    assert url == (
        "https://fonts.googleapis.com/css2"
        "?family=Outfit:wght@400;500;600;700&display=swap"
    )


def test_font_url_lists_each_family_once():
    tokens = GlobalStyleTokens(font_heading="Open Sans", font_body="Open Sans")

    url = font_stylesheet_url(tokens)

    assert url.count("family=") == 1
    assert "family=Open+Sans" in url


def test_font_url_is_none_when_every_font_is_local():
    tokens = GlobalStyleTokens(font_heading="Posey Textured", font_body="Posey Textured")

    assert font_stylesheet_url(tokens) is None
