"""
Tests for enumerating theme configs into work items.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from udl_builder.config import BuildConfig
from udl_builder.errors import ConfigDirectoryNotFoundError, ConfigNamingError
from udl_builder.workitems import WorkItem, list_work_items


def _touch_configs(config_dir: Path, *names: str) -> None:
    config_dir.mkdir(parents=True, exist_ok=True)
    for name in names:
        (config_dir / name).write_text("{}")


class TestListWorkItems:
    def test_one_item_per_config(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        _touch_configs(config.config_dir, "markdown.a.config.json", "markdown.b.config.json")

        items = list_work_items(config)

        assert [item.theme_name for item in items] == ["a", "b"]

    def test_paths_are_derived_from_theme_name(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        _touch_configs(config.config_dir, "markdown.solarized-light.config.json")

        (item,) = list_work_items(config)

        assert item == WorkItem(
            config_path=tmp_path / "config" / "markdown.solarized-light.config.json",
            output_path=tmp_path / "udl" / "markdown.solarized-light.udl.xml",
            theme_name="solarized-light",
        )

    def test_output_paths_are_unique(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        _touch_configs(
            config.config_dir,
            "markdown.default.config.json",
            "markdown.zenburn.config.json",
            "markdown.solarized-dark.config.json",
        )

        items = list_work_items(config)

        assert len({item.output_path for item in items}) == len(items)

    def test_empty_directory(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        config.config_dir.mkdir()

        assert list_work_items(config) == []

    def test_missing_directory(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)

        with pytest.raises(ConfigDirectoryNotFoundError):
            list_work_items(config)

    def test_config_dir_is_a_file(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        config.config_dir.write_text("")

        with pytest.raises(ConfigDirectoryNotFoundError):
            list_work_items(config)

    def test_badly_named_file_aborts(self, tmp_path):
        config = BuildConfig.from_root(tmp_path)
        _touch_configs(config.config_dir, "markdown.a.config.json", "theme.json", "markdown.z.config.json")

        with pytest.raises(ConfigNamingError, match="theme.json") as exc_info:
            list_work_items(config)

        assert exc_info.value.filename == "theme.json"
        assert "markdown.[theme-name].config.json" in str(exc_info.value)
        assert not config.udl_dir.exists()

    def test_work_item_is_immutable(self, tmp_path):
        item = WorkItem(tmp_path / "c.json", tmp_path / "o.xml", "c")

        with pytest.raises(AttributeError):
            item.theme_name = "other"
