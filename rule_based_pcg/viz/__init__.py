"""Rendering: console text dumps and matplotlib PNG output."""

from rule_based_pcg.viz.render import render_filmstrip, render_grid
from rule_based_pcg.viz.text import MAP_FOOTER, MAP_HEADER, format_grid, print_map
from rule_based_pcg.viz.theme import DARK_THEME, DEFAULT_THEME, Theme, get_theme

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "MAP_FOOTER",
    "MAP_HEADER",
    "Theme",
    "format_grid",
    "get_theme",
    "print_map",
    "render_filmstrip",
    "render_grid",
]
