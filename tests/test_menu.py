"""Tests for the intro screen and interactive menu (nwx.menu).

Covers:
- show_intro_screen content
- Main menu navigation (help, exit, closed input)
- Endpoint editing from the configuration menus
- Scanner creation and status from the Access Analyzer menu
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from nwx.menu import BACK, EXIT, InteractiveMenu, show_intro_screen

pytestmark = pytest.mark.unit


def _answers(*values) -> MagicMock:
    """A stand-in for a questionary prompt factory whose ``.ask()`` replays *values*."""
    question = MagicMock()
    question.ask.side_effect = list(values)
    return MagicMock(return_value=question)


def test_intro_screen(recording_console):
    show_intro_screen(recording_console)
    output = recording_console.export_text()
    assert "Under Construction" in output
    assert "Reach out: ai@netwrix.com" in output
    assert "The Netwrix AI Team" in output


class TestInteractiveMenu:
    def test_help_then_exit(self, config, recording_console):
        with patch("nwx.menu.questionary.select", _answers("Help", EXIT)):
            InteractiveMenu(config, console=recording_console).run()
        output = recording_console.export_text()
        assert "Welcome to NWX CLI - Interactive Mode!" in output
        assert "Goodbye!" in output

    def test_closed_input_leaves_menu(self, config, recording_console):
        with patch("nwx.menu.questionary.select", _answers(None)):
            InteractiveMenu(config, console=recording_console).run()
        assert "Goodbye!" in recording_console.export_text()

    def test_set_aa_endpoint(self, config, recording_console):
        select = _answers("Configuration", "Access Analyzer endpoint", BACK, EXIT)
        text = _answers(" http://localhost:3020 ")
        with (
            patch("nwx.menu.questionary.select", select),
            patch("nwx.menu.questionary.text", text),
        ):
            InteractiveMenu(config, console=recording_console).run()

        assert config.aa_endpoint_path.read_text(encoding="utf-8") == "http://localhost:3020"
        assert "Endpoint updated successfully" in recording_console.export_text()

    def test_blank_answer_keeps_endpoint(self, config, store, recording_console):
        store.set_endpoint("https://keep.example.com")
        select = _answers("Configuration", "General endpoint", BACK, EXIT)
        text = _answers("")
        with (
            patch("nwx.menu.questionary.select", select),
            patch("nwx.menu.questionary.text", text),
        ):
            InteractiveMenu(config, console=recording_console).run()

        assert store.get_endpoint() == "https://keep.example.com"
        assert "Current endpoint: https://keep.example.com" in recording_console.export_text()

    def test_status_without_endpoint(self, config, recording_console):
        select = _answers("Access Analyzer", "Status", BACK, EXIT)
        with patch("nwx.menu.questionary.select", select):
            InteractiveMenu(config, console=recording_console).run()
        assert "no endpoint configured" in recording_console.export_text()

    def test_create_scanner_reports_cancellation(
        self, config, recording_console, scripted, answers, monkeypatch
    ):
        prompter = scripted(answers(confirm=False))
        monkeypatch.setattr("nwx.wizard.engine.QuestionaryPrompter", lambda: prompter)
        select = _answers(
            "Access Analyzer", "Scanner Management", "Create Scanner", BACK, BACK, EXIT
        )
        with patch("nwx.menu.questionary.select", select):
            InteractiveMenu(config, console=recording_console).run()

        output = recording_console.export_text()
        assert "Scanner creation cancelled by user" in output
        assert "Goodbye!" in output
