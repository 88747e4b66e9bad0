"""
Configuration for a UDL build.

Holds every path and option of a run. It is passed explicitly to the
enumerator and the driver; nothing is read from process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

# Template shipped with the package, used when the project has none
BUNDLED_TEMPLATE = Path(__file__).parent / "templates" / "markdown.udl.xml.jinja2"

# Project-relative defaults
CONFIG_DIRNAME = "config"
UDL_DIRNAME = "udl"
TEMPLATE_RELPATH = Path("build") / "template.udl.xml.jinja2"

_PATH_FIELDS = ("config_dir", "udl_dir", "template_path")
_BOOL_FIELDS = ("autoescape", "strict_undefined", "validate_xml")


@dataclass
class BuildConfig:
    """Configuration options for building UDL files."""

    # Directory holding markdown.<theme>.config.json files
    config_dir: Path = field(default_factory=lambda: Path.cwd() / CONFIG_DIRNAME)

    # Directory receiving markdown.<theme>.udl.xml files
    udl_dir: Path = field(default_factory=lambda: Path.cwd() / UDL_DIRNAME)

    # Jinja2 template rendered once per theme
    template_path: Path = BUNDLED_TEMPLATE

    # Escape substituted values for XML/HTML
    autoescape: bool = True

    # Fail on variables missing from a theme config instead of rendering them empty
    strict_undefined: bool = False

    # Check that each output is well-formed XML before replacing the target
    validate_xml: bool = False

    @staticmethod
    def from_root(root: Path | str) -> BuildConfig:
        """Create a config for the standard layout of a project root."""
        root = Path(root)
        template_path = root / TEMPLATE_RELPATH
        if not template_path.exists():
            template_path = BUNDLED_TEMPLATE
        return BuildConfig(
            config_dir=root / CONFIG_DIRNAME,
            udl_dir=root / UDL_DIRNAME,
            template_path=template_path,
        )

    @staticmethod
    def from_dict(d: dict, base: BuildConfig | None = None) -> BuildConfig:
        """Create a config from a dictionary, on top of ``base`` if given.

        Unknown keys are ignored. Relative paths are kept as given. ``base``
        itself is left unchanged.

        Raises:
            ValueError: If an option has the wrong type, e.g. "false" for a flag
        """
        config = replace(base) if base is not None else BuildConfig()
        for k, v in d.items():
            if not hasattr(config, k):
                continue
            if k in _PATH_FIELDS:
                if not isinstance(v, (str, Path)):
                    raise ValueError(f"Option {k!r} must be a path string, got {v!r}")
                v = Path(v)
            elif k in _BOOL_FIELDS and not isinstance(v, bool):
                raise ValueError(f"Option {k!r} must be true or false, got {v!r}")
            setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "config_dir": str(self.config_dir),
            "udl_dir": str(self.udl_dir),
            "template_path": str(self.template_path),
            "autoescape": self.autoescape,
            "strict_undefined": self.strict_undefined,
            "validate_xml": self.validate_xml,
        }
