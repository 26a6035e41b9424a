"""Shared utility functions for vitekit.

Provides async command execution, the project-root path guard and
Rich-based progress reporting.  External processes inherit the terminal so
the user sees the project generator and the package manager live.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Raised when an external command cannot be spawned or exits non-zero."""

    def __init__(self, cmd: list[str], returncode: int | None, message: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        if not message:
            message = f"Command failed with exit code {returncode}: {' '.join(self.cmd)}"
        super().__init__(message)


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> None:
    """Run *cmd* with inherited stdio and wait for it to exit.

    There is no timeout: a hung process stalls the caller.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.

    Raises:
        CommandError: If the program cannot be started or exits non-zero.
    """
    if not cmd:
        raise ValueError("run_command() requires a non-empty command")

    console.print(f"[dim]$ {' '.join(cmd)}[/dim]")
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        raise CommandError(cmd, None, f"Could not start {cmd[0]!r}: {exc}") from exc

    returncode = await process.wait()
    if returncode != 0:
        raise CommandError(cmd, returncode)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_inside(root: str | Path, relative: str | Path) -> Path:
    """Resolve *relative* beneath *root*, refusing paths that escape it.

    Examples::

        ensure_inside("/tmp/demo", "src/App.tsx")  -> Path("/tmp/demo/src/App.tsx")
        ensure_inside("/tmp/demo", "../etc/passwd") -> ValueError
    """
    base = Path(root).resolve()
    target = (base / relative).resolve()
    if target != base and base not in target.parents:
        raise ValueError(f"Refusing to write outside the project directory: {relative}")
    return target


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(step: int, name: str) -> None:
    """Print a full-width rule announcing a scaffolding step."""
    console.print()
    console.print(Rule(f"[bold bright_cyan] Step {step}: {name} [/bold bright_cyan]", style="bright_cyan"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
