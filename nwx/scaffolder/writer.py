"""Writes rendered artifacts to the scaffold output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from nwx.errors import ArtifactWriteError, DirectoryCreationError
from nwx.utils import console as default_console

from .catalog import Artifact

logger = logging.getLogger(__name__)

CONFIG_SUBDIR = "config"


class ScaffoldWriter:
    """Persists an artifact list under an output directory.

    Directories are created idempotently and existing files are overwritten.
    Writing stops at the first failure; artifacts written before it stay on
    disk.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def write(self, output_dir: str | Path, artifacts: list[Artifact]) -> list[Path]:
        """Create ``output_dir`` and ``output_dir/config``, then write each artifact in order.

        Returns:
            The written file paths, in artifact order.

        Raises:
            DirectoryCreationError: If either directory cannot be created.
            ArtifactWriteError: If an artifact cannot be written.
        """
        root = Path(output_dir)
        for directory in (root, root / CONFIG_SUBDIR):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryCreationError(directory, exc) from exc

        written: list[Path] = []
        for artifact in artifacts:
            target = root / artifact.path
            try:
                target.write_text(artifact.content, encoding="utf-8", newline="\n")
            except OSError as exc:
                raise ArtifactWriteError(artifact, exc) from exc
            logger.debug("Wrote %d bytes to %s", len(artifact.content), target)
            self.console.print(f"  [green]✅ Created[/green] {escape(artifact.path)}")
            written.append(target)

        return written
