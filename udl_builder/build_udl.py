import json
import logging
from pathlib import Path

import click

from .config import BuildConfig
from .driver import run
from .errors import UdlBuildError


@click.command()
@click.option("--root", "-r", default=".", type=click.Path(exists=True, file_okay=False, resolve_path=True), help="Project root holding config/ and udl/")
@click.option("--config-dir", default=None, type=click.Path(resolve_path=True), help="Directory of markdown.[theme-name].config.json files")
@click.option("--udl-dir", default=None, type=click.Path(resolve_path=True), help="Directory receiving the generated UDL files")
@click.option("--template", "-t", default=None, type=click.Path(resolve_path=True), help="Jinja2 template of a UDL file")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON file of build options")
@click.option("--no-autoescape", is_flag=True, default=False, help="Do not XML-escape substituted values")
@click.option("--strict", is_flag=True, default=False, help="Fail on template variables missing from a theme config")
@click.option("--validate-xml", is_flag=True, default=False, help="Check every UDL file is well-formed XML before writing it")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose logging")
def build_udl(root, config_dir, udl_dir, template, config, no_autoescape, strict, validate_xml, verbose):
    """Build the UDL XML files in udl/ from the theme configs in config/."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    build_config = BuildConfig.from_root(root)

    if config is not None:
        with open(config) as f:
            try:
                build_config = BuildConfig.from_dict(json.load(f), base=build_config)
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--config") from e

    # CLI flags override the config file
    if config_dir is not None:
        build_config.config_dir = Path(config_dir)
    if udl_dir is not None:
        build_config.udl_dir = Path(udl_dir)
    if template is not None:
        build_config.template_path = Path(template)
    if no_autoescape:
        build_config.autoescape = False
    if strict:
        build_config.strict_undefined = True
    if validate_xml:
        build_config.validate_xml = True

    try:
        results = run(build_config)
    except UdlBuildError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Built {len(results)} UDL file(s) in {build_config.udl_dir}")


if __name__ == "__main__":
    build_udl()
