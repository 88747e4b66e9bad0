"""Markdown UDL Builder

Builds Notepad++ User Defined Language files for Markdown, one per theme,
by rendering JSON theme configs through a Jinja2 template.
"""

import logging

__version__ = "2.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import BuildConfig  # noqa: E402
from .driver import RenderResult, run, run_async  # noqa: E402
from .errors import (  # noqa: E402
    ConfigDirectoryNotFoundError,
    ConfigNamingError,
    ConfigParseError,
    OutputWriteError,
    TemplateCompileError,
    ThemeError,
    ThemeRenderError,
    UdlBuildError,
)
from .workitems import WorkItem, list_work_items  # noqa: E402

__all__ = [
    "BuildConfig",
    "WorkItem",
    "RenderResult",
    "list_work_items",
    "run",
    "run_async",
    "UdlBuildError",
    "ConfigDirectoryNotFoundError",
    "ConfigNamingError",
    "TemplateCompileError",
    "ThemeError",
    "ConfigParseError",
    "ThemeRenderError",
    "OutputWriteError",
]
