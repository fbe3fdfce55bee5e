"""
Where resolved branding leaves the pure world.

The resolver only computes values; a sink publishes them to whatever
styling context the host uses. The service ships a single sink that
stores the tokens on the request context, from which the stylesheet
and page metadata endpoints read them.
"""
from abc import ABC, abstractmethod
from typing import Optional

from flask import g

from landing.domain.branding import ThemeTokens


class ThemeSink(ABC):
    @abstractmethod
    def apply(self, tokens: ThemeTokens) -> None:
        ...


class RequestThemeSink(ThemeSink):
    """Publishes theme tokens on `flask.g` for the current request."""

    def apply(self, tokens: ThemeTokens) -> None:
        g.theme_tokens = tokens

    @staticmethod
    def current() -> Optional[ThemeTokens]:
        return getattr(g, "theme_tokens", None)


def render_stylesheet(tokens: ThemeTokens) -> str:
    """`:root` block declaring the brand variables."""
    lines = [f"  {name}: {value};" for name, value in tokens.css_variables.items()]
    return ":root {\n" + "\n".join(lines) + "\n}\n"
