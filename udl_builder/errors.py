"""
Errors raised while building UDL files.

Validation errors (directory, naming, template) abort the run before any
output is written. Per-theme errors are raised after the theme has been
reported and carry the theme name.
"""

from __future__ import annotations


class UdlBuildError(Exception):
    """Base class for all build failures."""

    pass


class ConfigDirectoryNotFoundError(UdlBuildError):
    """Raised when the config directory does not exist."""

    pass


class ConfigNamingError(UdlBuildError):
    """Raised when a file in the config directory breaks the naming convention.

    The whole enumeration is aborted: a single badly named file stops the
    build instead of silently skipping one theme.
    """

    def __init__(self, filename: str, pattern: str):
        self.filename = filename
        super().__init__(f"Config file {filename!r} is not named correctly. Expected pattern: {pattern}")


class TemplateCompileError(UdlBuildError):
    """Raised when the template file is missing or cannot be compiled."""

    pass


class ThemeError(UdlBuildError):
    """Base class for failures tied to a single theme."""

    def __init__(self, theme_name: str, message: str):
        self.theme_name = theme_name
        super().__init__(f"[{theme_name}] {message}")


class ConfigParseError(ThemeError):
    """Raised when a config file cannot be read or is not a JSON object."""

    pass


class ThemeRenderError(ThemeError):
    """Raised when the template fails to render a theme's data."""

    pass


class OutputWriteError(ThemeError):
    """Raised when the UDL file of a theme cannot be written."""

    pass
