"""Tests for expense_calc.config."""

import configparser

from expense_calc import config


def _read(path) -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    cfg.read(path, encoding="utf-8")
    return cfg


class TestLoadTheme:
    """Tests for load_theme."""

    def test_missing_file_persists_dark(self, settings_file) -> None:
        assert not settings_file.exists()
        assert config.load_theme() == "dark"
        assert _read(settings_file).get("app", "theme") == "dark"

    def test_saved_value_is_returned(self, settings_file) -> None:
        settings_file.write_text("[app]\ntheme = light\n", encoding="utf-8")
        assert config.load_theme() == "light"

    def test_unknown_value_falls_back_to_dark(self, settings_file) -> None:
        settings_file.write_text("[app]\ntheme = purple\n", encoding="utf-8")
        assert config.load_theme() == "dark"

    def test_corrupt_file_falls_back_to_dark(self, settings_file) -> None:
        settings_file.write_text("theme = light\n", encoding="utf-8")
        assert config.load_theme() == "dark"
        assert _read(settings_file).get("app", "theme") == "dark"

    def test_corrupt_file_does_not_block_later_saves(self, settings_file) -> None:
        settings_file.write_text("theme = light\n", encoding="utf-8")
        config.save_theme("light")
        assert config.load_theme() == "light"

    def test_unwritable_location_is_tolerated(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(config, "CONFIG_FILE", tmp_path / "missing" / "expense_calc.ini")
        assert config.load_theme() == "dark"


class TestSaveTheme:
    """Tests for save_theme."""

    def test_round_trip(self, settings_file) -> None:
        config.save_theme("light")
        assert config.load_theme() == "light"
        config.save_theme("dark")
        assert config.load_theme() == "dark"

    def test_other_sections_are_kept(self, settings_file) -> None:
        settings_file.write_text("[style]\nchart_height = 400\n", encoding="utf-8")
        config.save_theme("light")
        cfg = _read(settings_file)
        assert cfg.get("style", "chart_height") == "400"
        assert cfg.get("app", "theme") == "light"

    def test_write_failure_is_silent(self, tmp_path, monkeypatch) -> None:
        target = tmp_path / "missing" / "expense_calc.ini"
        monkeypatch.setattr(config, "CONFIG_FILE", target)
        config.save_theme("light")
        assert not target.exists()


class TestStyleSettings:
    """Tests for load_style_settings."""

    def test_defaults_are_written(self, settings_file) -> None:
        settings = config.load_style_settings()
        assert settings == config.STYLE_DEFAULTS
        assert _read(settings_file).get("style", "chart_height") == str(config.STYLE_DEFAULTS["chart_height"])

    def test_typed_values(self, settings_file) -> None:
        settings_file.write_text(
            "[style]\nchart_height = 400.0\nwindow_scale_ratio = 0.5\nui_font_family = Arial\n",
            encoding="utf-8",
        )
        settings = config.load_style_settings()
        assert settings["chart_height"] == 400
        assert settings["window_scale_ratio"] == 0.5
        assert settings["ui_font_family"] == "Arial"

    def test_invalid_value_uses_default(self, settings_file) -> None:
        settings_file.write_text("[style]\nchart_height = tall\n", encoding="utf-8")
        settings = config.load_style_settings()
        assert settings["chart_height"] == config.STYLE_DEFAULTS["chart_height"]
        assert _read(settings_file).get("style", "chart_height") == str(config.STYLE_DEFAULTS["chart_height"])
