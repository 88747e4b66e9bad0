"""
Build driver: enumerate themes, compile the template, render every theme.

All themes are dispatched at once. A failing theme is reported and does not
stop or roll back the others; the first failure is raised once every theme
has finished.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

import jinja2

from .atomic_writer import AtomicWriter
from .config import BuildConfig
from .errors import ConfigParseError, OutputWriteError, ThemeRenderError
from .renderer import compile_template, render_work_item
from .workitems import WorkItem, list_work_items

logger = logging.getLogger(__name__)

_FAILURE_MESSAGES = {
    ConfigParseError: "Error in loading config data",
    ThemeRenderError: "Error in rendering template",
    OutputWriteError: "Error in saving UDL file",
}


@dataclass(frozen=True)
class RenderResult:
    """Outcome of building one theme."""

    theme_name: str
    output_path: Path
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _report(result: RenderResult) -> None:
    if result.ok:
        logger.info("[%s] UDL file is created successfully", result.theme_name)
        return
    message = _FAILURE_MESSAGES.get(type(result.error), "Error in building UDL file")
    logger.error("[%s] %s: %s", result.theme_name, message, result.error)


async def _build(item: WorkItem, template: jinja2.Template, writer: AtomicWriter) -> RenderResult:
    try:
        await render_work_item(item, template, writer)
    except Exception as e:
        result = RenderResult(item.theme_name, item.output_path, e)
    else:
        result = RenderResult(item.theme_name, item.output_path)
    _report(result)
    return result


async def run_async(config: BuildConfig, writer: AtomicWriter | None = None) -> list[RenderResult]:
    """
    Build the UDL file of every theme in the config directory.

    Args:
        config: Build configuration
        writer: Writer for the UDL files (built from config.validate_xml if None)

    Returns:
        One result per theme, in work item order

    Raises:
        ConfigDirectoryNotFoundError, ConfigNamingError: Before anything is rendered
        TemplateCompileError: Before anything is rendered
        ThemeError: The first per-theme failure, after all themes have finished
    """
    items = list_work_items(config)
    template = compile_template(
        config.template_path,
        autoescape=config.autoescape,
        strict_undefined=config.strict_undefined,
    )
    writer = writer or AtomicWriter(validate_xml=config.validate_xml)

    logger.debug("Building %d theme(s) with %s", len(items), config.template_path)

    # gather() keeps running the other themes when one fails
    results = await asyncio.gather(*(_build(item, template, writer) for item in items))

    for result in results:
        if not result.ok:
            raise result.error

    return list(results)


def run(config: BuildConfig, writer: AtomicWriter | None = None) -> list[RenderResult]:
    """Synchronous entry point for ``run_async``."""
    return asyncio.run(run_async(config, writer))
