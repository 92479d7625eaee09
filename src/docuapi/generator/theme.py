"""Theme colour tables and stylesheet rendering."""

import logging
from types import MappingProxyType

from docuapi.generator.templating import get_environment

logger = logging.getLogger(__name__)

DEFAULT_THEME = "light"

THEMES = MappingProxyType({
    "light": MappingProxyType({
        "bg": "#ffffff",
        "text": "#333333",
        "sidebar": "#f8f9fa",
        "border": "#e1e4e8",
        "code": "#f6f8fa",
    }),
    "dark": MappingProxyType({
        "bg": "#1a1a1a",
        "text": "#e6e6e6",
        "sidebar": "#242424",
        "border": "#3a3a3a",
        "code": "#2d2d2d",
    }),
    "dracula": MappingProxyType({
        "bg": "#282a36",
        "text": "#f8f8f2",
        "sidebar": "#21222c",
        "border": "#44475a",
        "code": "#44475a",
    }),
    "github": MappingProxyType({
        "bg": "#ffffff",
        "text": "#24292f",
        "sidebar": "#f6f8fa",
        "border": "#d0d7de",
        "code": "#f6f8fa",
    }),
})

# Method badge colours. Fixed, not themeable.
METHOD_COLORS = MappingProxyType({
    "get": "#10b981",
    "post": "#3b82f6",
    "put": "#f59e0b",
    "delete": "#ef4444",
    "patch": "#8b5cf6",
})


def get_theme(name: str | None) -> MappingProxyType:
    """Return the colour table for ``name``, falling back to the default theme."""
    if name not in THEMES:
        logger.debug("Unknown theme %r, using %r", name, DEFAULT_THEME)
        return THEMES[DEFAULT_THEME]
    return THEMES[name]


def render_css(theme: str | None = DEFAULT_THEME) -> str:
    """Render the site stylesheet for a theme."""
    template = get_environment().get_template("style.css.j2")
    return template.render(colors=get_theme(theme), method_colors=METHOD_COLORS)
