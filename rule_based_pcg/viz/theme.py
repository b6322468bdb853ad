"""Visualization theme presets for map renderers.

Themes are frozen dataclasses that group all styling constants together so
renderers take a ``Theme`` instance instead of module-level colors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of map style tokens."""

    occupied_cell_color: str = "#3E3A36"
    empty_cell_color: str = "#F0F0F0"
    agent_color: str = "#FF5722"
    grid_line_color: str = "#CCCCCC"
    title_fontsize: int = 10


DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    occupied_cell_color="#D8D2C4",
    empty_cell_color="#1A1A1A",
    grid_line_color="#333333",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a registered theme by name."""
    try:
        return REGISTERED_THEMES[name]
    except KeyError as exc:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"theme must be one of {valid}") from exc
