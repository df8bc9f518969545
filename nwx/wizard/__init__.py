"""Interactive scanner creation wizard."""

from nwx.wizard.engine import WizardEngine, validate_scanner_name
from nwx.wizard.prompts import Prompter, QuestionaryPrompter

__all__ = [
    "Prompter",
    "QuestionaryPrompter",
    "WizardEngine",
    "validate_scanner_name",
]
