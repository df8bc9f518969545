"""Shared pytest fixtures for the nwx test suite.

Provides reusable fixtures for:
- Isolated configuration directories
- Fully populated scanner records
- A scripted prompter that replays canned wizard answers
- A recording Rich console for asserting on user-facing output
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from nwx.config import Config, EndpointStore
from nwx.errors import CancellationError
from nwx.models import AuthMethod, Icon, Language, ScannerCreationData, ScanType


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Replays a fixed list of answers, one per prompt, in order.

    An answer of ``None`` means "use the prompt's default".  Running out of
    answers behaves like a closed input stream and raises
    :class:`CancellationError`.  Every prompt is recorded in ``asked`` as a
    ``(kind, message, default)`` tuple.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, str, Any]] = []

    def _next(self, kind: str, message: str, default: Any) -> Any:
        self.asked.append((kind, message, default))
        if not self.answers:
            raise CancellationError("input closed")
        answer = self.answers.pop(0)
        return default if answer is None else answer

    def text(self, message: str, default: str = "", help: str | None = None) -> str:
        return self._next("text", message, default)

    def select(
        self, message: str, choices: Sequence[str], default: str, help: str | None = None
    ) -> str:
        answer = self._next("select", message, default)
        assert answer in choices, f"{answer!r} is not one of {list(choices)!r}"
        return answer

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        default: Sequence[str],
        help: str | None = None,
    ) -> list[str]:
        answer = self._next("checkbox", message, list(default))
        return list(answer)

    def confirm(self, message: str, default: bool = True, help: str | None = None) -> bool:
        return self._next("confirm", message, default)


def wizard_answers(
    name: str = "aws-s3",
    *,
    display_name: str | None = None,
    description: str = "Scans S3 buckets",
    version: str | None = None,
    icon: str | None = "cloud",
    language: str = "go",
    scan_types: list[str] | None = None,
    auth_methods: list[str] | None = None,
    generate_files: bool = True,
    output_dir: str | None = None,
    confirm: bool = True,
) -> list[Any]:
    """Answer list for one straight pass through the wizard (``None`` = default)."""
    answers: list[Any] = [
        name,
        display_name,
        description,
        version,
        icon,
        language,
        scan_types,
        auth_methods,
        generate_files,
    ]
    if generate_files:
        answers.append(output_dir)
    answers.append(confirm)
    return answers


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config rooted in a throwaway directory instead of ``~/.nwx``."""
    return Config(config_dir=tmp_path / ".nwx", api_timeout=5.0)


@pytest.fixture
def store(config: Config) -> EndpointStore:
    return EndpointStore(config)


@pytest.fixture
def recording_console() -> Console:
    """A Rich console writing to memory; read it back with ``export_text()``."""
    return Console(file=io.StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def make_record(tmp_path: Path):
    """Factory for complete scanner records with sensible defaults."""

    def _make(**overrides: Any) -> ScannerCreationData:
        values: dict[str, Any] = {
            "name": "aws-s3",
            "display_name": "Aws S3",
            "description": "Scans S3 buckets",
            "version": "1.0.0",
            "icon": Icon.CLOUD,
            "language": Language.GO,
            "supported_scan_types": [ScanType.ACCESS],
            "auth_methods": [AuthMethod.API_KEY],
            "generate_files": True,
            "output_dir": str(tmp_path / "aws-s3"),
        }
        values.update(overrides)
        return ScannerCreationData(**values)

    return _make


@pytest.fixture
def record(make_record) -> ScannerCreationData:
    return make_record()


@pytest.fixture
def scripted():
    """Build a :class:`ScriptedPrompter` from an answer list."""
    return ScriptedPrompter


@pytest.fixture
def answers():
    """The :func:`wizard_answers` helper, for building answer lists in tests."""
    return wizard_answers
