"""Base project creation and per-feature template application.

Creates the Vite project through the package manager, then runs the
template routine of every selected feature against the new directory tree.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import ScaffoldConfig
from ..utils import console, ensure_inside, run_command
from .catalog import CATALOG, Feature
from .templates import TemplateRenderer

if TYPE_CHECKING:
    from ..resolver import Selection

CommandRunner = Callable[..., Awaitable[None]]

_INVALID_NAME = re.compile(r"[\\/]|^\.{1,2}$")


# ---------------------------------------------------------------------------
# Project context
# ---------------------------------------------------------------------------


class ProjectContext(BaseModel):
    """The project being scaffolded: its name and directory.

    Every write of a run is scoped beneath ``root``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    root: Path
    alias: str = Field(default="@")
    source_dir: str = Field(default="src")

    @field_validator("name")
    @classmethod
    def _single_path_component(cls, value: str) -> str:
        if _INVALID_NAME.search(value):
            raise ValueError(f"Project name must be a single directory name, got {value!r}")
        return value

    @classmethod
    def from_config(cls, config: ScaffoldConfig, name: str) -> "ProjectContext":
        return cls(
            name=name,
            root=config.output_dir / name,
            alias=config.alias,
            source_dir=config.source_dir,
        )

    def path_for(self, relative: str | Path) -> Path:
        """Absolute path of *relative* inside the project directory."""
        return ensure_inside(self.root, relative)

    def template_context(self) -> dict[str, Any]:
        return {
            "project_name": self.name,
            "alias": self.alias,
            "source_dir": self.source_dir,
        }


# ---------------------------------------------------------------------------
# Base project
# ---------------------------------------------------------------------------


async def create_base_project(
    config: ScaffoldConfig,
    project: ProjectContext,
    runner: CommandRunner = run_command,
) -> Path:
    """Run the project generator in ``config.output_dir``.

    Raises:
        CommandError: If the generator fails.
        FileNotFoundError: If the generator exited cleanly without
            producing the project directory.
    """
    await runner(config.create_command(project.name), config.output_dir)
    if not project.root.is_dir():
        raise FileNotFoundError(f"Project directory was not created: {project.root}")
    return project.root


# ---------------------------------------------------------------------------
# Template applier
# ---------------------------------------------------------------------------


class TemplateApplier:
    """Runs the template routines of selected features in catalog order.

    Routines write disjoint paths; if two ever overlap the later feature's
    write wins.  A failing routine stops the run and leaves whatever it
    already wrote in place.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        runner: CommandRunner = run_command,
        catalog: tuple[Feature, ...] = CATALOG,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.runner = runner
        self.catalog = catalog

    async def apply(self, project: ProjectContext, selection: "Selection") -> dict[str, list[Path]]:
        """Apply every selected feature's routine.

        Returns:
            Mapping of feature name to the files its routine wrote.
        """
        written: dict[str, list[Path]] = {}
        for feature in self.catalog:
            if feature.apply is None or not selection.is_selected(feature.name):
                continue
            console.print(f"  [cyan]>[/cyan] Applying {feature.label} templates")
            written[feature.name] = await feature.apply(project, self.renderer, self.runner)
        return written
