from __future__ import annotations

from pathlib import Path

import pytest

from udl_builder.config import BUNDLED_TEMPLATE, BuildConfig


class TestBuildConfig:
    """Tests for BuildConfig."""

    def test_bundled_template_exists(self):
        assert BUNDLED_TEMPLATE.is_file()

    def test_from_root_uses_standard_layout(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)

        assert config.config_dir == tmp_path / "config"
        assert config.udl_dir == tmp_path / "udl"
        assert config.template_path == BUNDLED_TEMPLATE

    def test_from_root_prefers_project_template(self, tmp_path):
        template = tmp_path / "build" / "template.udl.xml.jinja2"
        template.parent.mkdir()
        template.write_text("<x/>")

        config = BuildConfig.from_root(tmp_path)

        assert config.template_path == template

    def test_from_dict_converts_paths_and_ignores_unknown_keys(self):
        config = BuildConfig.from_dict(
            {
                "udl_dir": "out",
                "validate_xml": True,
                "not_an_option": 42,
            }
        )

        assert config.udl_dir == Path("out")
        assert config.validate_xml is True
        assert not hasattr(config, "not_an_option")

    def test_from_dict_overlays_base(self, tmp_path):
        base = BuildConfig.from_root(tmp_path)

        config = BuildConfig.from_dict({"autoescape": False}, base=base)

        assert config.config_dir == tmp_path / "config"
        assert config.autoescape is False

    def test_from_dict_leaves_base_unchanged(self, tmp_path):
        base = BuildConfig.from_root(tmp_path)

        config = BuildConfig.from_dict({"udl_dir": "out", "validate_xml": True}, base=base)

        assert config is not base
        assert base.udl_dir == tmp_path / "udl"
        assert base.validate_xml is False

    @pytest.mark.parametrize("key, value", [("validate_xml", "false"), ("autoescape", 0), ("strict_undefined", None), ("udl_dir", 3)])
    def test_from_dict_rejects_wrong_types(self, key, value):
        with pytest.raises(ValueError, match=key):
            BuildConfig.from_dict({key: value})

    def test_to_dict_roundtrip(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        config.strict_undefined = True

        restored = BuildConfig.from_dict(config.to_dict())

        assert restored == config
