"""Unit tests for utility functions (vitekit.utils).

Tests cover:
- run_command (success, non-zero exit, missing program, cwd, empty command)
- CommandError message and attributes
- ensure_inside (nested paths, escapes)
- format_duration
- Rich output helpers
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from vitekit.utils import (
    CommandError,
    ensure_inside,
    format_duration,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        await run_command([sys.executable, "-c", "pass"])

    @pytest.mark.unit
    async def test_non_zero_exit_raises(self):
        with pytest.raises(CommandError) as exc_info:
            await run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert exc_info.value.returncode == 3
        assert "exit code 3" in str(exc_info.value)

    @pytest.mark.unit
    async def test_missing_program_raises(self):
        with pytest.raises(CommandError) as exc_info:
            await run_command(["vitekit-no-such-program-xyz"])
        assert exc_info.value.returncode is None
        assert "Could not start" in str(exc_info.value)

    @pytest.mark.unit
    async def test_command_runs_in_cwd(self, tmp_path: Path):
        await run_command(
            [sys.executable, "-c", "open('marker.txt', 'w').write('x')"],
            cwd=tmp_path,
        )
        assert (tmp_path / "marker.txt").read_text() == "x"

    @pytest.mark.unit
    async def test_empty_command_rejected(self):
        with pytest.raises(ValueError):
            await run_command([])


class TestCommandError:
    @pytest.mark.unit
    def test_default_message(self):
        err = CommandError(["pnpm", "install", "axios"], 1)
        assert err.cmd == ["pnpm", "install", "axios"]
        assert err.returncode == 1
        assert "pnpm install axios" in str(err)

    @pytest.mark.unit
    def test_custom_message(self):
        err = CommandError(["pnpm"], None, "Could not start 'pnpm'")
        assert str(err) == "Could not start 'pnpm'"


# ---------------------------------------------------------------------------
# ensure_inside
# ---------------------------------------------------------------------------


class TestEnsureInside:
    @pytest.mark.unit
    def test_nested_path(self, tmp_path: Path):
        assert ensure_inside(tmp_path, "src/App.tsx") == (tmp_path / "src" / "App.tsx").resolve()

    @pytest.mark.unit
    def test_dotfile(self, tmp_path: Path):
        assert ensure_inside(tmp_path, ".prettierrc").name == ".prettierrc"

    @pytest.mark.unit
    def test_parent_escape_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError):
            ensure_inside(tmp_path / "demo", "../other/file.ts")

    @pytest.mark.unit
    def test_absolute_path_outside_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError):
            ensure_inside(tmp_path / "demo", "/etc/passwd")


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "seconds, expected",
        [(3.7, "3.7s"), (65.2, "1m 5s"), (3661.0, "1h 1m 1s"), (-1, "0.0s")],
    )
    def test_formats(self, seconds, expected):
        assert format_duration(seconds) == expected


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_helpers_print_to_console(self):
        with patch("vitekit.utils.console") as mock_console:
            print_success("done")
            print_error("broken")
            print_warning("careful")
            print_step_header(1, "CREATE PROJECT")
            print_summary_table({"Tailwind CSS": "yes"}, title="Selected features")
        assert mock_console.print.call_count >= 5
        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "done" in printed
        assert "broken" in printed
        assert "careful" in printed
