"""vitekit scaffolding orchestrator.

Implements the five-step scaffolding run:

Step 1: CREATE PROJECT    -- Ask for the project name, run ``create vite``.
Step 2: RESOLVE FEATURES  -- Flags, ``--all`` or one yes/no prompt per feature.
Step 3: INSTALL PACKAGES  -- One production and one development install, at most.
Step 4: APPLY TEMPLATES   -- Template routines of the selected features.
Step 5: CONFIGURE ALIAS   -- Vite and TypeScript path alias, always.

Each step needs the previous one to succeed; the first failure ends the
run and nothing already written is undone.

Usage::

    vitekit --tailwind --react-router
    vitekit --all --project-name full-app -o ./projects
"""

from __future__ import annotations

import asyncio
import sys
import time
import traceback
from pathlib import Path
from typing import Any, Awaitable, Callable

from rich.panel import Panel

from vitekit.config import ScaffoldConfig
from vitekit.installer import execute, plan
from vitekit.prompts import PromptAbortedError, ask_confirm, ask_text
from vitekit.resolver import FeatureFlags, Selection, resolve
from vitekit.scaffolder.alias_gen import AliasConfigurator, ConfigParseError
from vitekit.scaffolder.catalog import CATALOG, Feature
from vitekit.scaffolder.generator import ProjectContext, TemplateApplier, create_base_project
from vitekit.scaffolder.templates import TemplateRenderer
from vitekit.utils import (
    CommandError,
    console,
    format_duration,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    run_command,
)

STEP_NAMES: dict[int, str] = {
    1: "CREATE PROJECT",
    2: "RESOLVE FEATURES",
    3: "INSTALL PACKAGES",
    4: "APPLY TEMPLATES",
    5: "CONFIGURE ALIAS",
}

# Exit code for an interrupted prompt, as for SIGINT
PROMPT_ABORTED_EXIT_CODE = 130

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails."""

    def __init__(self, step: int, message: str, returncode: int = 1) -> None:
        self.step = step
        self.returncode = returncode
        super().__init__(f"Step {step} ({STEP_NAMES.get(step, '?')}): {message}")


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class Scaffolder:
    """Drives one scaffolding run.

    Collaborators are injectable so a run can be driven without spawning
    processes or reading a terminal.

    Attributes:
        config: Run configuration.
        state: Results accumulated by each step, returned by ``run``.
        project: The project being scaffolded, set by step 1.
        selection: The resolved features, set by step 2.
    """

    _STEP_METHODS: dict[int, str] = {
        1: "step1_create_project",
        2: "step2_resolve_features",
        3: "step3_install_packages",
        4: "step4_apply_templates",
        5: "step5_configure_alias",
    }

    def __init__(
        self,
        config: ScaffoldConfig,
        *,
        runner: Callable[..., Awaitable[None]] = run_command,
        ask_text_fn: Callable[..., str] = ask_text,
        ask_confirm_fn: Callable[[str], bool] = ask_confirm,
        catalog: tuple[Feature, ...] = CATALOG,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.ask_text_fn = ask_text_fn
        self.ask_confirm_fn = ask_confirm_fn
        self.catalog = catalog
        self.renderer = renderer or TemplateRenderer()
        self.flags = FeatureFlags()
        self.project_name: str | None = None
        self.project: ProjectContext | None = None
        self.selection: Selection | None = None
        self.state: dict[str, Any] = {
            "steps_completed": [],
            "failed_step": None,
            "error": None,
            "returncode": 0,
            "success": False,
        }

    async def run(self, flags: FeatureFlags, project_name: str | None = None) -> dict[str, Any]:
        """Execute every step in order, stopping at the first failure.

        Args:
            flags: Feature flags from the command line.
            project_name: Skips the name prompt when given.

        Returns:
            The final state dictionary, including a top-level ``success``
            boolean and the ``returncode`` the process should exit with.
        """
        self.flags = flags
        self.project_name = project_name
        run_start = time.monotonic()

        console.print(
            Panel(
                f"[bold bright_cyan]vitekit[/bold bright_cyan]\n"
                f"Template : {self.config.vite_template}\n"
                f"Output   : {self.config.output_dir.resolve()}\n"
                f"Manager  : {self.config.package_manager}",
                title="[bold]Scaffold Start[/bold]",
                border_style="bright_cyan",
            )
        )

        for step_num in sorted(self._STEP_METHODS):
            step_name = STEP_NAMES[step_num]
            print_step_header(step_num, step_name)
            step_start = time.monotonic()
            try:
                result = await getattr(self, self._STEP_METHODS[step_num])()
            except Exception as exc:
                self._fail(step_num, exc)
                break

            self.state[f"step{step_num}"] = result
            self.state["steps_completed"].append(step_num)
            print_success(
                f"Step {step_num} ({step_name}) completed in "
                f"{format_duration(time.monotonic() - step_start)}"
            )
        else:
            self.state["success"] = True

        self.state["total_duration"] = format_duration(time.monotonic() - run_start)
        if self.state["success"]:
            print_success("Project setup complete!")
        return self.state

    def _fail(self, step: int, exc: Exception) -> None:
        """Record a failed step and report it to the user."""
        if isinstance(exc, CommandError) and exc.returncode is not None:
            returncode = exc.returncode
        elif isinstance(exc, PromptAbortedError):
            returncode = PROMPT_ABORTED_EXIT_CODE
        else:
            returncode = 1

        error = ScaffoldError(step, str(exc), returncode)
        self.state["failed_step"] = step
        self.state["error"] = str(error)
        self.state["returncode"] = returncode
        print_error(f"FAILED: {error}")

        if not isinstance(exc, (CommandError, PromptAbortedError, ConfigParseError, OSError, ValueError)):
            console.print(f"[dim]{traceback.format_exc()}[/dim]")

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def step1_create_project(self) -> dict[str, Any]:
        """Ask for the project name and materialise the base project."""
        name = self.project_name or self.ask_text_fn(
            "What is the project name?", default=self.config.default_project_name
        )
        self.project = ProjectContext.from_config(self.config, name)
        root = await create_base_project(self.config, self.project, self.runner)
        return {"project_name": self.project.name, "project_path": str(root)}

    async def step2_resolve_features(self) -> dict[str, Any]:
        """Decide every feature before anything is installed."""
        self.selection = resolve(self.flags, self.catalog, self.ask_confirm_fn)
        choices = self.selection.as_dict()
        print_summary_table(
            {f.label: "yes" if choices[f.name] else "no" for f in self.catalog},
            title="Selected features",
        )
        return {"selection": choices}

    async def step3_install_packages(self) -> dict[str, Any]:
        """Install the merged packages of the selected features."""
        batch = plan(self._require_selection(), self.catalog)
        if batch.is_empty:
            console.print("  [dim]No packages to install[/dim]")
        commands = await execute(batch, self._require_project(), self.config, self.runner)
        return {
            "production": list(batch.production),
            "development": list(batch.development),
            "commands": commands,
        }

    async def step4_apply_templates(self) -> dict[str, Any]:
        """Write the template files of the selected features."""
        applier = TemplateApplier(self.renderer, self.runner, self.catalog)
        written = await applier.apply(self._require_project(), self._require_selection())
        return {name: [str(p) for p in paths] for name, paths in written.items()}

    async def step5_configure_alias(self) -> dict[str, Any]:
        """Register the source-root alias in the Vite and TypeScript configs."""
        configurator = AliasConfigurator(
            self.renderer,
            vite_config_file=self.config.vite_config_file,
            tsconfig_file=self.config.tsconfig_file,
        )
        written = await configurator.configure(self._require_project())
        return {"files": [str(p) for p in written]}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_project(self) -> ProjectContext:
        if self.project is None:
            raise ScaffoldError(1, "project has not been created")
        return self.project

    def _require_selection(self) -> Selection:
        if self.selection is None:
            raise ScaffoldError(2, "features have not been resolved")
        return self.selection


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser(catalog: tuple[Feature, ...] = CATALOG):
    """Argument parser with one boolean flag per catalog feature."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="vitekit",
        description="Create a Vite + React + TypeScript project with optional libraries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  vitekit --tailwind --react-router\n"
            "  vitekit --all --project-name full-app\n"
        ),
    )
    for feature in catalog:
        parser.add_argument(feature.flag, action="store_true", help=f"Include {feature.label}")
    parser.add_argument("--all", action="store_true", help="Include All")
    parser.add_argument(
        "--project-name",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project is created in (default: current directory)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``vitekit``."""
    args = build_parser().parse_args(argv)

    config = ScaffoldConfig.from_env()
    if args.output:
        config.output_dir = Path(args.output)

    scaffolder = Scaffolder(config)
    result = asyncio.run(scaffolder.run(FeatureFlags.from_namespace(args), project_name=args.project_name))

    if not result.get("success"):
        sys.exit(result.get("returncode") or 1)


if __name__ == "__main__":
    main()
