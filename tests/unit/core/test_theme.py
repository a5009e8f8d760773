"""Unit tests for theme management."""

from pathlib import Path
from unittest.mock import patch

import pytest
from frontier.core.theme import ThemeColors, get_rich_theme, load_theme
from pydantic import ValidationError


class TestThemeColors:
    """Tests for ThemeColors model."""

    def test_defaults_are_valid(self) -> None:
        """Default colors pass validation."""
        colors = ThemeColors()
        assert colors.accent.startswith("#")

    def test_accepts_short_hex(self) -> None:
        """#RGB colors are accepted."""
        assert ThemeColors(info="#0af").info == "#0af"

    @pytest.mark.parametrize("value", ["red", "#12", "#zzzzzz", 5])
    def test_rejects_invalid_colors(self, value: object) -> None:
        """Non-hex colors are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(info=value)  # type: ignore[arg-type]


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_defaults_without_user_file(self, tmp_path: Path) -> None:
        """Without a user theme file the defaults are used."""
        with patch("frontier.core.theme.get_user_theme_path", return_value=tmp_path / "none"):
            assert load_theme() == ThemeColors()

    def test_applies_user_overrides(self, tmp_path: Path) -> None:
        """User colors override the defaults they name."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\naccent = "#ff00ff"\n', encoding="utf-8")

        with patch("frontier.core.theme.get_user_theme_path", return_value=theme_file):
            colors = load_theme()

        assert colors.accent == "#ff00ff"
        assert colors.info == ThemeColors().info

    def test_invalid_user_theme_falls_back(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the defaults."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\naccent = "purple"\n', encoding="utf-8")

        with patch("frontier.core.theme.get_user_theme_path", return_value=theme_file):
            assert load_theme() == ThemeColors()

    def test_malformed_toml_falls_back(self, tmp_path: Path) -> None:
        """Broken TOML falls back to the defaults."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("[colors\n", encoding="utf-8")

        with patch("frontier.core.theme.get_user_theme_path", return_value=theme_file):
            assert load_theme() == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_defines_cli_styles(self) -> None:
        """The Rich theme defines the styles the CLI prints with."""
        theme = get_rich_theme(ThemeColors())
        for style in ("accent", "info", "warning", "error", "success", "bold_header"):
            assert style in theme.styles
