"""
Jinja2 rendering of theme configs into UDL files.

The template is compiled once per run and shared read-only by every theme.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import jinja2

from .atomic_writer import AtomicWriter
from .errors import ConfigParseError, OutputWriteError, TemplateCompileError, ThemeRenderError
from .workitems import WorkItem

logger = logging.getLogger(__name__)


def compile_template(template_path: Path, *, autoescape: bool = True, strict_undefined: bool = False) -> jinja2.Template:
    """
    Read and compile the UDL template.

    Args:
        template_path: Path of the Jinja2 template file
        autoescape: Escape substituted values for XML
        strict_undefined: Raise on variables missing from a theme config; otherwise
            missing names and attributes of missing objects render empty

    Returns:
        Compiled Jinja2 template

    Raises:
        TemplateCompileError: If the file is missing, unreadable or not a valid template
    """
    template_path = Path(template_path)
    try:
        source = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateCompileError(f"Cannot read template {template_path}: {e}") from e

    env = jinja2.Environment(
        autoescape=autoescape,
        undefined=jinja2.StrictUndefined if strict_undefined else jinja2.ChainableUndefined,
        lstrip_blocks=True,
        trim_blocks=True,
        keep_trailing_newline=True,
    )
    try:
        template = env.from_string(source)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateCompileError(f"Invalid template {template_path}, line {e.lineno}: {e.message}") from e

    logger.debug("Compiled template %s", template_path)
    return template


def load_theme_config(path: Path, theme_name: str = "") -> dict:
    """
    Read a theme config file as a JSON object.

    Raises:
        ConfigParseError: If the file cannot be read, is not valid JSON, or is not an object
    """
    theme_name = theme_name or path.name
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(theme_name, f"Cannot read config file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(theme_name, f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(theme_name, f"Config file {path} must contain a JSON object, got {type(data).__name__}")
    return data


async def render_work_item(item: WorkItem, template: jinja2.Template, writer: AtomicWriter | None = None) -> str:
    """
    Render one theme and write its UDL file.

    File reads and writes run in worker threads so several themes can be
    in flight at once.

    Args:
        item: Theme to build
        template: Compiled template shared by all themes
        writer: Writer for the output file (plain atomic writer if None)

    Returns:
        The theme name

    Raises:
        ConfigParseError: If the config file cannot be loaded
        ThemeRenderError: If the template fails on this theme's data
        OutputWriteError: If the UDL file cannot be written
    """
    writer = writer or AtomicWriter()

    data = await asyncio.to_thread(load_theme_config, item.config_path, item.theme_name)

    try:
        output = template.render(data)
    except Exception as e:
        # Expressions can raise plain Python errors on bad data, e.g. `name + 1`
        raise ThemeRenderError(item.theme_name, f"Template rendering failed: {e}") from e

    try:
        await asyncio.to_thread(writer.write, item.output_path, output, item.theme_name)
    except OSError as e:
        raise OutputWriteError(item.theme_name, f"Cannot write {item.output_path}: {e}") from e

    return item.theme_name
