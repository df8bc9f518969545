"""Intro screen and the interactive menu mode (``nwx interactive``).

Menus are questionary selects; each entry maps to a handler that returns
when the user picks an item that leaves the current menu.  Scanner creation
from the menu reuses :class:`~nwx.workflow.ScannerCreationWorkflow`, so the
wizard behaves exactly as it does under ``nwx aa scanner create``.
"""

from __future__ import annotations

from collections.abc import Callable

import questionary
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from nwx.config import Config, EndpointStore
from nwx.errors import CancellationError, ConfigError, NwxError
from nwx.utils import console as default_console
from nwx.utils import print_error, print_success, print_warning
from nwx.workflow import ScannerCreationWorkflow, report_status

VIGILANT_BLUE = "#5C33FF"
SIGNAL_YELLOW = "#FFC61A"
ACCESS_WHITE = "#FCFAF5"
BEACON_GREEN = "#41F27C"

LOGO = """\
███╗   ██╗ ███████╗ ████████╗ ██╗    ██╗ ██████╗  ██╗ ██╗  ██╗
████╗  ██║ ██╔════╝ ╚══██╔══╝ ██║    ██║ ██╔══██╗ ██║ ╚██╗██╔╝
██╔██╗ ██║ █████╗      ██║    ██║ █╗ ██║ ██████╔╝ ██║  ╚███╔╝
██║╚██╗██║ ██╔══╝      ██║    ██║███╗██║ ██╔══██╗ ██║  ██╔██╗
██║ ╚████║ ███████╗    ██║    ╚███╔███╔╝ ██║  ██║ ██║ ██╔╝ ██╗
╚═╝  ╚═══╝ ╚══════╝    ╚═╝     ╚══╝╚══╝  ╚═╝  ╚═╝ ╚═╝ ╚═╝  ╚═╝

███████╗ ██╗      ██╗
██╔════╝ ██║      ██║
██║      ██║      ██║
██║      ██║      ██║
███████╗ ███████╗ ██║
╚══════╝ ╚══════╝ ╚═╝"""

HELP_TEXT = """\
Welcome to NWX CLI - Interactive Mode!

This CLI provides tools for managing Access Analyzer scanners and configuration.

Main Features:
  • 🔍 Access Analyzer - Scanner management and configuration
  • ⚙️  Configuration - CLI settings and endpoints
  • 📋 Interactive workflows - Guided scanner creation

Navigation:
  • Use the arrow keys to move through a menu
  • Press Enter to select an item
  • Press Ctrl-C to quit at any time"""

BACK = "← Back"
EXIT = "Exit"


def show_intro_screen(out: Console | None = None) -> None:
    """Print the logo and the under-construction notice shown by bare ``nwx``."""
    out = out or default_console
    out.print()
    out.print(LOGO, style=VIGILANT_BLUE, highlight=False)
    out.print()
    out.print("🚧 Under Construction 🚧", style=SIGNAL_YELLOW)
    out.print()
    out.print("You've stumbled upon something that doesn't exist yet.", style=ACCESS_WHITE)
    out.print(
        "If you're curious about what we're building, we'd love to hear from you.",
        style=ACCESS_WHITE,
    )
    out.print()
    out.print(f"[{BEACON_GREEN}]Reach out: [underline]ai@netwrix.com[/underline][/]")
    out.print()
    out.print("-- The Netwrix AI Team", style="dim")
    out.print()


class InteractiveMenu:
    """Menu-driven front end over the same operations as the command tree."""

    def __init__(self, config: Config, console: Console | None = None) -> None:
        self.config = config
        self.store = EndpointStore(config)
        self.console = console or default_console

    def run(self) -> None:
        """Show the banner and loop on the main menu until the user exits."""
        self.console.print(LOGO, style=f"bold {VIGILANT_BLUE}", highlight=False)
        self.console.print()
        self.console.print("Interactive Command Line Interface", style="italic dim")
        self.console.print("🚀 Access Analyzer Scanner Management", style="bold green")
        self.console.print()
        self._loop(
            "Main Menu",
            {
                "Access Analyzer": self.access_analyzer_menu,
                "Configuration": self.configuration_menu,
                "Help": self.show_help,
            },
            leave=EXIT,
        )
        self.console.print("Goodbye!")

    # -- Menus -------------------------------------------------------------

    def access_analyzer_menu(self) -> None:
        self._loop(
            "Access Analyzer",
            {
                "Scanner Management": self.scanner_menu,
                "Configuration": self.aa_configuration,
                "Status": self.status,
            },
        )

    def scanner_menu(self) -> None:
        self._loop("Scanner Management", {"Create Scanner": self.create_scanner})

    def configuration_menu(self) -> None:
        self._loop(
            "Configuration",
            {
                "General endpoint": self.general_configuration,
                "Access Analyzer endpoint": self.aa_configuration,
            },
        )

    # -- Actions -----------------------------------------------------------

    def create_scanner(self) -> None:
        self._banner("🚀 Scanner Creation")
        try:
            ScannerCreationWorkflow(self.config, self.store, console=self.console).run()
        except CancellationError:
            print_error("❌ Scanner creation cancelled by user", out=self.console)
        except NwxError as exc:
            print_error(f"❌ Scanner creation failed: {escape(str(exc))}", out=self.console)

    def status(self) -> None:
        self._banner("🔍 Access Analyzer Status")
        report_status(self.config, self.store, console=self.console)

    def general_configuration(self) -> None:
        self._edit_endpoint("📋 Configuration", self.store.get_endpoint, self.store.set_endpoint)

    def aa_configuration(self) -> None:
        self._edit_endpoint(
            "⚙️  Access Analyzer Configuration",
            self.store.get_aa_endpoint,
            self.store.set_aa_endpoint,
        )

    def show_help(self) -> None:
        self._banner("📚 Help")
        self.console.print(HELP_TEXT)

    # -- Helpers -----------------------------------------------------------

    def _loop(
        self, title: str, items: dict[str, Callable[[], None]], leave: str = BACK
    ) -> None:
        while True:
            choice = questionary.select(title, choices=[*items, leave]).ask()
            if choice is None or choice == leave:
                return
            items[choice]()

    def _edit_endpoint(
        self, title: str, read: Callable[[], str], write: Callable[[str], object]
    ) -> None:
        self._banner(title)
        try:
            current = read()
        except ConfigError as exc:
            print_error(escape(str(exc)), out=self.console)
            return
        if current:
            self.console.print(f"Current endpoint: [green]{escape(current)}[/green]")
        else:
            print_warning("No endpoint configured", out=self.console)

        answer = questionary.text("Enter new endpoint (or press Enter to keep current):").ask()
        if not answer or not answer.strip():
            return
        try:
            write(answer)
        except ConfigError as exc:
            print_error(f"Error setting endpoint: {escape(str(exc))}", out=self.console)
        else:
            print_success("✅ Endpoint updated successfully", out=self.console)

    def _banner(self, title: str) -> None:
        self.console.print(Panel.fit(title, style=f"bold {VIGILANT_BLUE}"))
