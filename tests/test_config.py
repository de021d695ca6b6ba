"""Unit tests for text2svg.config."""

import pytest

from text2svg.config import DEFAULT_FONT_SIZE, Config, RenderOptions


class TestRenderOptions:
    """Tests for RenderOptions defaults and presence semantics."""

    def test_defaults(self):
        options = RenderOptions()
        assert options.resolved_font_size == DEFAULT_FONT_SIZE == 72
        assert options.resolved_kerning is True
        assert options.anchor == ""
        assert dict(options.attributes) == {}

    def test_zero_font_size_falls_back_to_default(self):
        """A zero font size is treated as absent."""
        assert RenderOptions(font_size=0).resolved_font_size == 72

    def test_kerning_is_tri_state(self):
        """Only an explicit False disables kerning."""
        assert RenderOptions(kerning=None).resolved_kerning is True
        assert RenderOptions(kerning=True).resolved_kerning is True
        assert RenderOptions(kerning=False).resolved_kerning is False

    def test_options_are_immutable(self):
        options = RenderOptions(x=1)
        with pytest.raises(AttributeError):
            options.x = 2  # type: ignore[misc]

    def test_replace_returns_new_instance(self):
        options = RenderOptions(x=1, anchor="center")
        moved = options.replace(x=5)
        assert moved.x == 5
        assert moved.anchor == "center"
        assert options.x == 1


class TestFromMapping:
    """Tests for RenderOptions.from_mapping() and coerce()."""

    def test_mapping_keys_map_to_fields(self):
        options = RenderOptions.from_mapping(
            {"font_size": 24, "kerning": False, "anchor": "top", "x": 3, "y": 4}
        )
        assert options == RenderOptions(font_size=24, kerning=False, anchor="top", x=3, y=4)

    def test_absent_kerning_key_stays_unset(self):
        assert RenderOptions.from_mapping({"font_size": 10}).kerning is None

    def test_unknown_keys_raise_type_error(self):
        with pytest.raises(TypeError, match="fontSize"):
            RenderOptions.from_mapping({"fontSize": 10})

    def test_none_anchor_and_attributes_use_defaults(self):
        options = RenderOptions.from_mapping({"anchor": None, "attributes": None})
        assert options.anchor == ""
        assert dict(options.attributes) == {}

    def test_mapping_is_deep_copied(self):
        """Changing the source mapping afterwards does not affect the options."""
        source = {"attributes": {"fill": "red"}}
        options = RenderOptions.from_mapping(source)
        source["attributes"]["fill"] = "blue"
        assert options.attributes["fill"] == "red"

    def test_coerce_passes_instances_through(self):
        options = RenderOptions(font_size=12)
        assert RenderOptions.coerce(options) is options

    def test_coerce_none_gives_defaults(self):
        assert RenderOptions.coerce(None) == RenderOptions()


class TestConfig:
    def test_config_defaults(self):
        config = Config()
        assert config.path_precision == 2
        assert config.fetch_timeout == 30
        assert config.max_download_size == 32 * 1024 * 1024
        assert config.user_agent.startswith("text2svg/")
