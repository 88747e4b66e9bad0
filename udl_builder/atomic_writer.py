"""
Atomic file writer for generated UDL files.

An interrupted or rejected write never leaves a truncated or garbage UDL
file behind.
"""

from __future__ import annotations

import os
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import OutputWriteError


class AtomicWriter:
    """Writes UDL files through a sibling temporary file.

    Content is checked first, staged next to the target, then renamed over
    it. The target is either the previous file or the complete new one.
    """

    def __init__(self, validate_xml: bool = False):
        """Initialize the atomic writer.

        Args:
            validate_xml: Whether to require well-formed XML before touching the target
        """
        self.validate_xml = validate_xml

    def write(self, path: Path, content: str, theme_name: str = "") -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            theme_name: Theme reported in validation errors

        Raises:
            OutputWriteError: If XML validation fails
            OSError: If file operations fail
        """
        if self.validate_xml:
            self.check_xml(content, theme_name or path.name)

        path.parent.mkdir(parents=True, exist_ok=True)
        staged = self._stage(path, content)
        try:
            os.replace(staged, path)
        except OSError:
            staged.unlink(missing_ok=True)
            raise

    @staticmethod
    def check_xml(content: str, theme_name: str) -> None:
        """Raise OutputWriteError unless content is a well-formed XML document."""
        try:
            ET.fromstring(content.encode("utf-8"))
        except ET.ParseError as e:
            raise OutputWriteError(theme_name, f"Generated UDL file is not well-formed XML: {e}") from e

    @staticmethod
    def _stage(path: Path, content: str) -> Path:
        # Same directory as the target so the rename stays on one filesystem
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            staged = Path(f.name)
            try:
                f.write(content)
            except OSError:
                f.close()
                staged.unlink(missing_ok=True)
                raise
        return staged
