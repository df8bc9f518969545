"""Prompt adapters used by the wizard.

The wizard only talks to a :class:`Prompter`; the default implementation
wraps questionary.  Every prompt either returns an answer or raises
:class:`~nwx.errors.CancellationError` -- a closed input stream, Ctrl-C and
Ctrl-D all end the wizard the same way.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

import questionary

from nwx.errors import CancellationError


class Prompter(Protocol):
    """The four prompt shapes the wizard needs."""

    def text(self, message: str, default: str = "", help: str | None = None) -> str: ...

    def select(
        self, message: str, choices: Sequence[str], default: str, help: str | None = None
    ) -> str: ...

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        default: Sequence[str],
        help: str | None = None,
    ) -> list[str]: ...

    def confirm(self, message: str, default: bool = True, help: str | None = None) -> bool: ...


class QuestionaryPrompter:
    """Interactive terminal prompts backed by questionary."""

    def text(self, message: str, default: str = "", help: str | None = None) -> str:
        return _ask(questionary.text(message, default=default, instruction=help))

    def select(
        self, message: str, choices: Sequence[str], default: str, help: str | None = None
    ) -> str:
        return _ask(
            questionary.select(message, choices=list(choices), default=default, instruction=help)
        )

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        default: Sequence[str],
        help: str | None = None,
    ) -> list[str]:
        options = [questionary.Choice(choice, checked=choice in default) for choice in choices]
        return _ask(questionary.checkbox(message, choices=options, instruction=help))

    def confirm(self, message: str, default: bool = True, help: str | None = None) -> bool:
        return _ask(questionary.confirm(message, default=default, instruction=help))


def _ask(question: questionary.Question) -> Any:
    """Run *question*, turning every way of not answering into a cancellation."""
    try:
        answer = question.unsafe_ask()
    except (KeyboardInterrupt, EOFError) as exc:
        raise CancellationError("input closed") from exc
    if answer is None:
        raise CancellationError("input closed")
    return answer
