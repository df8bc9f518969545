"""Interactive scanner creation wizard.

The wizard is a fixed sequence of steps, each filling in part of a single
:class:`~nwx.models.ScannerCreationData` record:

1. Basic Information      name, display name, description, version, icon
2. Programming Language   one of the supported target languages
3. Scan Types             at least one of access / sensitive_data
4. Authentication Methods at least one method
5. File Generation        whether to write files, and where
6. Summary                review and confirm

There is no branching and no going back.  A rejected value re-prompts the
same question; an unanswered prompt or a declined confirmation raises
:class:`~nwx.errors.CancellationError` and no further step runs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from rich.console import Console
from rich.markup import escape

from nwx import naming
from nwx.errors import CancellationError, ValidationError
from nwx.models import (
    DEFAULT_VERSION,
    AuthMethod,
    Icon,
    Language,
    ScannerCreationData,
    ScanType,
)
from nwx.utils import console as default_console
from nwx.utils import print_error, print_step_header, print_summary_table

from .prompts import Prompter, QuestionaryPrompter

T = TypeVar("T")

Step = Callable[[ScannerCreationData], None]

MULTI_SELECT_HELP = "Use space to select/deselect, enter to confirm"


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_scanner_name(value: str, existing_names: Iterable[str]) -> str:
    """Check a proposed scanner name and return it unchanged.

    Raises:
        ValidationError: If the name is empty, lacks a ``-`` separator, or is
            already registered.
    """
    if not value:
        raise ValidationError("scanner name is required")
    if value in set(existing_names):
        raise ValidationError(f"scanner name '{value}' already exists")
    if naming.SEPARATOR not in value:
        raise ValidationError("scanner name should be kebab-case (e.g., 'my-scanner')")
    return value


def validate_selection(values: list[str], what: str) -> list[str]:
    """Reject an empty multi-select answer."""
    if not values:
        raise ValidationError(f"select at least one {what}")
    return values


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class WizardEngine:
    """Runs the scanner creation steps in order against one record."""

    def __init__(
        self,
        existing_names: Iterable[str] = (),
        prompter: Prompter | None = None,
        console: Console | None = None,
    ) -> None:
        self.existing_names = frozenset(existing_names)
        self.prompter = prompter or QuestionaryPrompter()
        self.console = console or default_console
        self.steps: list[tuple[str, str, Step]] = [
            ("Basic Information", "📋", self.collect_basic_info),
            ("Programming Language", "💻", self.collect_language),
            ("Scan Types", "🔍", self.collect_scan_types),
            ("Authentication Methods", "🔐", self.collect_auth_methods),
            ("File Generation", "📁", self.collect_file_generation),
            ("Summary", "📊", self.confirm_summary),
        ]

    def run(self) -> ScannerCreationData:
        """Run every step and return the confirmed record.

        Raises:
            CancellationError: If any prompt goes unanswered or the summary is
                not confirmed.
        """
        record = ScannerCreationData()
        for number, (title, icon, step) in enumerate(self.steps, start=1):
            print_step_header(number, title, icon, out=self.console)
            step(record)
        return record

    # -- Steps -------------------------------------------------------------

    def collect_basic_info(self, record: ScannerCreationData) -> None:
        record.name = self._ask_until_valid(
            lambda: self.prompter.text(
                "Scanner name (kebab-case, e.g., 'my-scanner'):",
                help="This will be used as the technical identifier",
            ).strip(),
            lambda value: validate_scanner_name(value, self.existing_names),
        )
        record.display_name = self._text_or_default(
            "Display name:",
            default=naming.displayify(record.name),
            help="Human-readable name shown in the UI",
        )
        record.description = self.prompter.text(
            "Description:", help="Brief description of what this scanner does"
        )
        record.version = self._text_or_default(
            "Version:", default=DEFAULT_VERSION, help="Semantic version (e.g., 1.0.0)"
        )
        record.icon = Icon(
            self.prompter.select(
                "Choose an icon:", [i.value for i in Icon], default=Icon.FOLDER.value
            )
        )

    def collect_language(self, record: ScannerCreationData) -> None:
        record.language = Language(
            self.prompter.select(
                "Select programming language:",
                [lang.value for lang in Language],
                default=Language.PYTHON.value,
                help="Choose the programming language for your scanner implementation",
            )
        )

    def collect_scan_types(self, record: ScannerCreationData) -> None:
        selected = self._ask_until_valid(
            lambda: self.prompter.checkbox(
                "Select supported scan types:",
                [s.value for s in ScanType],
                default=[ScanType.ACCESS.value],
                help=MULTI_SELECT_HELP,
            ),
            lambda values: validate_selection(values, "scan type"),
        )
        record.supported_scan_types = [s for s in ScanType if s.value in selected]

    def collect_auth_methods(self, record: ScannerCreationData) -> None:
        selected = self._ask_until_valid(
            lambda: self.prompter.checkbox(
                "Select authentication methods:",
                [a.value for a in AuthMethod],
                default=[AuthMethod.USERNAME_PASSWORD.value],
                help=MULTI_SELECT_HELP,
            ),
            lambda values: validate_selection(values, "authentication method"),
        )
        record.auth_methods = [a for a in AuthMethod if a.value in selected]

    def collect_file_generation(self, record: ScannerCreationData) -> None:
        record.generate_files = self.prompter.confirm(
            "Generate scanner files in current directory?",
            default=True,
            help="This will create the scanner structure, Dockerfile, and example code",
        )
        if record.generate_files:
            record.output_dir = self._text_or_default(
                "Output directory:",
                default=f"./{record.name}",
                help="Directory where scanner files will be generated",
            )

    def confirm_summary(self, record: ScannerCreationData) -> None:
        print_summary_table(record.summary(), title="Scanner Summary", out=self.console)
        if not self.prompter.confirm("Create scanner with these settings?", default=True):
            raise CancellationError("scanner creation cancelled")

    # -- Helpers -----------------------------------------------------------

    def _text_or_default(self, message: str, default: str, help: str | None = None) -> str:
        """Ask for free text; a blank answer means *default*.

        The pre-filled default can be erased at the prompt, so an empty
        answer is mapped back rather than stored.
        """
        answer = self.prompter.text(message, default=default, help=help).strip()
        return answer or default

    def _ask_until_valid(self, ask: Callable[[], T], validate: Callable[[T], T]) -> T:
        """Repeat *ask* until *validate* accepts the answer, reporting each rejection."""
        while True:
            answer = ask()
            try:
                return validate(answer)
            except ValidationError as exc:
                print_error(f"✗ {escape(str(exc))}", out=self.console)
