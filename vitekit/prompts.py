"""Interactive questions asked during a scaffolding run.

Thin wrappers over ``rich.prompt`` that turn an interrupted prompt
(Ctrl+C or a closed stdin) into ``PromptAbortedError`` so the orchestrator
can stop before anything is installed.
"""

from __future__ import annotations

from rich.prompt import Confirm, Prompt

from .utils import console


class PromptAbortedError(Exception):
    """Raised when the user interrupts an interactive prompt."""


def ask_text(question: str, default: str = "") -> str:
    """Ask a free-text question; an empty answer falls back to *default*."""
    try:
        answer = Prompt.ask(question, default=default, console=console)
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptAbortedError(f"Prompt aborted: {question}") from exc
    return (answer or default).strip()


def ask_confirm(question: str, default: bool = True) -> bool:
    """Ask a yes/no question (default: yes)."""
    try:
        return Confirm.ask(question, default=default, console=console)
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptAbortedError(f"Prompt aborted: {question}") from exc
