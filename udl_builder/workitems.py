"""
Enumeration of the themes to build.

Turns the content of the config directory into a fixed list of work items.
Validation is all-or-nothing: nothing is returned, and so nothing is
written, unless every entry follows the naming convention.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import BuildConfig
from .errors import ConfigDirectoryNotFoundError, ConfigNamingError
from .naming import CONFIG_PATTERN, build_output_filename, extract_theme_name, matches_conventions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkItem:
    """One theme to build.

    Attributes:
        config_path: Path of the theme config file
        output_path: Path of the UDL file to generate
        theme_name: Theme name derived from the config filename
    """

    config_path: Path
    output_path: Path
    theme_name: str


def list_work_items(config: BuildConfig) -> list[WorkItem]:
    """
    Create one work item per config file in ``config.config_dir``.

    Args:
        config: Build configuration

    Returns:
        Work items in filename order

    Raises:
        ConfigDirectoryNotFoundError: If the config directory does not exist
        ConfigNamingError: On the first entry not named markdown.[theme-name].config.json
    """
    config_dir = Path(config.config_dir)
    if not config_dir.is_dir():
        raise ConfigDirectoryNotFoundError(f"Config directory not found: {config_dir}")

    items = []
    for entry in sorted(config_dir.iterdir(), key=lambda p: p.name):
        filename = entry.name
        if not matches_conventions(filename):
            raise ConfigNamingError(filename, CONFIG_PATTERN)

        theme_name = extract_theme_name(filename)
        items.append(
            WorkItem(
                config_path=entry,
                output_path=Path(config.udl_dir) / build_output_filename(theme_name),
                theme_name=theme_name,
            )
        )

    logger.debug("Found %d theme config(s) in %s", len(items), config_dir)
    return items
