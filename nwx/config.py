"""nwx CLI configuration.

Runtime settings live in a Pydantic v2 model so they are validated at
construction time and can be overridden from environment variables.  The
API endpoints themselves are persisted as single-value files under the
configuration directory::

    ~/.nwx/config                       general endpoint
    ~/.nwx/access-analyzer/endpoint     Access Analyzer endpoint
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from nwx.errors import ConfigError


class Config(BaseModel):
    """Global nwx configuration.

    Created once by the CLI entry point and passed to the endpoint store,
    the API client and the scanner creation workflow.
    """

    config_dir: Path = Field(default_factory=lambda: Path.home() / ".nwx")
    api_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    page_size: int = Field(
        default=100, ge=1, description="Source types fetched for the name uniqueness check"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def general_config_path(self) -> Path:
        """File holding the general endpoint."""
        return self.config_dir / "config"

    @property
    def aa_config_dir(self) -> Path:
        """Directory for Access Analyzer settings."""
        return self.config_dir / "access-analyzer"

    @property
    def aa_endpoint_path(self) -> Path:
        """File holding the Access Analyzer endpoint."""
        return self.aa_config_dir / "endpoint"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NWX_CONFIG_DIR, NWX_API_TIMEOUT, NWX_PAGE_SIZE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NWX_CONFIG_DIR"):
            kwargs["config_dir"] = Path(os.environ["NWX_CONFIG_DIR"]).expanduser()
        if os.environ.get("NWX_API_TIMEOUT"):
            kwargs["api_timeout"] = float(os.environ["NWX_API_TIMEOUT"])
        if os.environ.get("NWX_PAGE_SIZE"):
            kwargs["page_size"] = int(os.environ["NWX_PAGE_SIZE"])
        return cls(**kwargs)


class EndpointStore:
    """Reads and writes the single-value endpoint files."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def get_endpoint(self) -> str:
        """Return the general endpoint, or ``""`` when none is configured."""
        return _read_value(self.config.general_config_path)

    def set_endpoint(self, endpoint: str) -> Path:
        return _write_value(self.config.general_config_path, endpoint)

    def get_aa_endpoint(self) -> str:
        """Return the Access Analyzer endpoint, or ``""`` when none is configured."""
        return _read_value(self.config.aa_endpoint_path)

    def set_aa_endpoint(self, endpoint: str) -> Path:
        return _write_value(self.config.aa_endpoint_path, endpoint)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_value(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return ""
    except OSError as exc:
        raise ConfigError(f"could not read {path}: {exc}") from exc


def _write_value(path: Path, value: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value.strip(), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"could not write {path}: {exc}") from exc
    return path
