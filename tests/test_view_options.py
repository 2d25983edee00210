"""Tests for ViewOptions validation and host config parsing."""

import pytest
from pydantic import ValidationError

from cards_preview.core.config import ConfigurationError, settings
from cards_preview.schemas.view_options import ViewOptions


class TestDefaults:
    def test_defaults(self):
        options = ViewOptions()
        assert options.image_property is None
        assert options.card_size == 200
        assert options.preview_lines == 3
        assert options.font_size == 13
        assert options.cover_fit == "cover"
        assert options.cover_ratio == "3/2"


class TestValidation:
    @pytest.mark.parametrize("size", [75, 425, 210])
    def test_invalid_card_size(self, size):
        with pytest.raises(ValidationError):
            ViewOptions(card_size=size)

    @pytest.mark.parametrize("lines, expected", [(0, 3), (11, 10), (-2, 1), ("4", 4)])
    def test_preview_lines_clamped(self, lines, expected):
        assert ViewOptions(preview_lines=lines).preview_lines == expected

    def test_font_size_bounds(self):
        with pytest.raises(ValidationError):
            ViewOptions(font_size=20)

    def test_unknown_cover_fit(self):
        with pytest.raises(ValidationError):
            ViewOptions(cover_fit="stretch")

    def test_unknown_cover_ratio(self):
        with pytest.raises(ValidationError):
            ViewOptions(cover_ratio="5/4")

    def test_blank_image_property_is_none(self):
        assert ViewOptions(image_property="  ").image_property is None


class TestFromConfig:
    def test_reads_kebab_case_keys(self):
        options = ViewOptions.from_config({
            "image-property": "cover",
            "card-size": 250,
            "preview-length": 5,
            "font-size": 15,
            "cover-fit": "contain",
            "cover-ratio": "1/1",
        })
        assert options == ViewOptions(
            image_property="cover",
            card_size=250,
            preview_lines=5,
            font_size=15,
            cover_fit="contain",
            cover_ratio="1/1",
        )

    def test_empty_config_uses_defaults(self):
        assert ViewOptions.from_config({}) == ViewOptions()

    @pytest.mark.parametrize("value", [None, "", "lots", 0])
    def test_lenient_preview_length(self, value):
        assert ViewOptions.from_config({"preview-length": value}).preview_lines == 3

    def test_preview_length_clamped(self):
        assert ViewOptions.from_config({"preview-length": 99}).preview_lines == 10

    def test_invalid_cover_fit_still_rejected(self):
        with pytest.raises(ValidationError):
            ViewOptions.from_config({"cover-fit": "stretch"})


class TestConfiguredLineBounds:
    def test_raised_maximum_accepted(self, monkeypatch):
        monkeypatch.setattr(settings, "max_preview_lines", 20)
        assert ViewOptions.from_config({"preview-length": 15}).preview_lines == 15

    def test_lowered_maximum_clamps(self, monkeypatch):
        monkeypatch.setattr(settings, "max_preview_lines", 4)
        assert ViewOptions(preview_lines=8).preview_lines == 4

    def test_configured_default_used(self, monkeypatch):
        monkeypatch.setattr(settings, "default_preview_lines", 5)
        assert ViewOptions().preview_lines == 5
        assert ViewOptions.from_config({"preview-length": "n/a"}).preview_lines == 5

    def test_inconsistent_bounds_rejected(self, monkeypatch):
        monkeypatch.setattr(settings, "max_preview_lines", 0)
        with pytest.raises(ConfigurationError, match="MAX_PREVIEW_LINES"):
            ViewOptions.from_config({"preview-length": 2})
