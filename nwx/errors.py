"""Exception hierarchy for the nwx CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from nwx.scaffolder.catalog import Artifact


class NwxError(Exception):
    """Base exception for all nwx errors."""


class ValidationError(NwxError):
    """A collected wizard value violates the rules of its step."""


class CancellationError(NwxError):
    """The user closed the input stream, interrupted, or declined to confirm."""


class ExternalLookupError(NwxError):
    """The Access Analyzer API could not be queried."""


class ConfigError(NwxError):
    """The on-disk endpoint configuration could not be read or written."""


class ScaffoldWriteError(NwxError):
    """Base class for failures while writing the scaffold to disk."""


class DirectoryCreationError(ScaffoldWriteError):
    """The output directory (or its ``config/`` subdirectory) could not be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to create directory {path}: {cause}")


class ArtifactWriteError(ScaffoldWriteError):
    """A single artifact could not be written."""

    def __init__(self, artifact: Artifact, cause: OSError) -> None:
        self.artifact = artifact
        self.cause = cause
        super().__init__(f"failed to write {artifact.path}: {cause}")
