"""Tests for matplotlib PNG rendering of grids and filmstrips."""

from __future__ import annotations

from pathlib import Path

import pytest

from rule_based_pcg.config.types import SimulationConfig
from rule_based_pcg.domain.agent import AgentState
from rule_based_pcg.domain.grid import Grid
from rule_based_pcg.simulation.engine import run_simulation
from rule_based_pcg.viz.render import render_filmstrip, render_grid
from rule_based_pcg.viz.theme import DARK_THEME, DEFAULT_THEME, get_theme

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


class TestRenderGrid:
    def test_writes_png(self, tmp_path: Path) -> None:
        grid = Grid.from_rows([[1, 0, 1], [0, 1, 0]])
        out = render_grid(grid, tmp_path / "map.png", agent=AgentState(0, 1), title="map")
        assert out.exists()
        assert out.read_bytes()[:8] == PNG_MAGIC

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        out = render_grid(Grid.empty(4, 4), tmp_path / "nested" / "deeper" / "map.png")
        assert out.exists()

    def test_base_dir_rejects_escaping_path(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="escapes base_dir"):
            render_grid(Grid.empty(2, 2), Path("../outside.png"), base_dir=tmp_path)

    def test_base_dir_resolves_relative_path(self, tmp_path: Path) -> None:
        out = render_grid(Grid.empty(2, 2), Path("maps/a.png"), base_dir=tmp_path)
        assert out == (tmp_path / "maps" / "a.png").resolve()
        assert out.exists()


class TestRenderFilmstrip:
    def test_writes_png_for_history(self, tmp_path: Path) -> None:
        result = run_simulation(SimulationConfig(seed=3, iterations=4))
        out = render_filmstrip(result.history, tmp_path / "strip.png", columns=2)
        assert out.read_bytes()[:8] == PNG_MAGIC

    def test_dark_theme(self, tmp_path: Path) -> None:
        result = run_simulation(SimulationConfig(seed=3, iterations=1))
        out = render_filmstrip(result.history, tmp_path / "dark.png", theme=DARK_THEME)
        assert out.exists()

    def test_empty_records_raise(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="records must not be empty"):
            render_filmstrip([], tmp_path / "none.png")

    def test_invalid_columns_raise(self, tmp_path: Path) -> None:
        result = run_simulation(SimulationConfig(seed=3, iterations=1))
        with pytest.raises(ValueError, match="columns must be >= 1"):
            render_filmstrip(result.history, tmp_path / "bad.png", columns=0)


class TestThemes:
    def test_lookup(self) -> None:
        assert get_theme("default") is DEFAULT_THEME
        assert get_theme("dark") is DARK_THEME

    def test_unknown_theme_raises(self) -> None:
        with pytest.raises(ValueError, match="theme must be one of dark, default"):
            get_theme("neon")
