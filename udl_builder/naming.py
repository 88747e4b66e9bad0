"""
Naming convention for theme config files and generated UDL files.

Config files are named ``markdown.<theme-name>.config.json`` and produce
``markdown.<theme-name>.udl.xml``.
"""

from __future__ import annotations

import re

CONFIG_PREFIX = "markdown."
CONFIG_SUFFIX = ".config.json"
UDL_SUFFIX = ".udl.xml"

CONFIG_PATTERN = "markdown.[theme-name].config.json"

_CONFIG_NAME_RE = re.compile(r"markdown\.\S+\.config\.json")


def matches_conventions(filename: str) -> bool:
    """Check whether a config filename is in the expected format."""
    return _CONFIG_NAME_RE.fullmatch(filename) is not None


def extract_theme_name(filename: str) -> str:
    """
    Get the theme name from a config filename.

    Assumes the filename passed ``matches_conventions``; the result is
    meaningless otherwise.

    Args:
        filename: e.g. 'markdown.solarized-light.config.json'

    Returns:
        The theme name, e.g. 'solarized-light'
    """
    return filename.removeprefix(CONFIG_PREFIX).removesuffix(CONFIG_SUFFIX)


def build_output_filename(theme_name: str) -> str:
    """Create the UDL filename for a theme, e.g. 'markdown.zenburn.udl.xml'."""
    return f"{CONFIG_PREFIX}{theme_name}{UDL_SUFFIX}"
