"""Unit tests for output helpers and logging setup (nwx.utils, nwx.log_config).

Tests cover:
- Rich output helpers (print_step_header, print_summary_table, etc.)
- setup_logging levels and handler replacement
"""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from nwx.log_config import setup_logging
from nwx.utils import (
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_step_header_with_icon(self, recording_console):
        print_step_header(3, "Scan Types", "🔍", out=recording_console)
        assert "🔍 Step 3: Scan Types" in recording_console.export_text()

    @pytest.mark.unit
    def test_step_header_without_icon(self, recording_console):
        print_step_header(1, "Basic Information", out=recording_console)
        assert "Step 1: Basic Information" in recording_console.export_text()

    @pytest.mark.unit
    def test_summary_table(self, recording_console):
        print_summary_table(
            {"Name": "aws-s3", "Version": "1.0.0"}, title="Scanner", out=recording_console
        )
        output = recording_console.export_text()
        assert "Scanner" in output
        assert "aws-s3" in output
        assert "1.0.0" in output

    @pytest.mark.unit
    def test_summary_table_cells_are_literal(self, recording_console):
        print_summary_table({"Description": "Scans [/] buckets [red]x"}, out=recording_console)
        assert "Scans [/] buckets [red]x" in recording_console.export_text()

    @pytest.mark.unit
    def test_messages(self, recording_console):
        print_success("done", out=recording_console)
        print_warning("careful", out=recording_console)
        print_error("broken", out=recording_console)
        assert recording_console.export_text().splitlines() == ["done", "careful", "broken"]


# ---------------------------------------------------------------------------
# setup_logging
# ---------------------------------------------------------------------------


class TestSetupLogging:
    @pytest.mark.unit
    def test_quiet_by_default(self):
        logger = setup_logging()
        assert logger.name == "nwx"
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    @pytest.mark.unit
    def test_verbose(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    @pytest.mark.unit
    def test_single_rich_handler_after_repeated_calls(self):
        setup_logging()
        logger = setup_logging(verbose=True)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    @pytest.mark.unit
    def test_child_loggers_inherit_level(self):
        setup_logging(verbose=True)
        assert logging.getLogger("nwx.api_client").getEffectiveLevel() == logging.DEBUG
