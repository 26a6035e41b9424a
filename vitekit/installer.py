"""Package installation for the selected features.

The packages of all selected features are merged into at most two batches,
production and development, and each non-empty batch is installed with a
single package-manager command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable

from .config import ScaffoldConfig
from .resolver import Selection
from .scaffolder.catalog import CATALOG, Feature
from .scaffolder.generator import ProjectContext
from .utils import run_command


@dataclass(frozen=True)
class InstallBatch:
    """Production and development packages for one run."""

    production: tuple[str, ...] = ()
    development: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.production and not self.development


def _unique(names: list[str]) -> tuple[str, ...]:
    """De-duplicate *names* keeping the first occurrence."""
    return tuple(dict.fromkeys(names))


def plan(selection: Selection, catalog: tuple[Feature, ...] = CATALOG) -> InstallBatch:
    """Build the install batch for *selection* in catalog order."""
    production: list[str] = []
    development: list[str] = []
    for feature in selection.selected_features(catalog):
        for package in feature.packages:
            (development if package.dev_only else production).append(package.name)
    return InstallBatch(production=_unique(production), development=_unique(development))


async def execute(
    batch: InstallBatch,
    project: ProjectContext,
    config: ScaffoldConfig,
    runner: Callable[..., Awaitable[None]] = run_command,
) -> list[list[str]]:
    """Install *batch* inside the project directory, production first.

    Empty partitions issue no command.  A failing command stops before the
    next one.

    Returns:
        The commands that were run.
    """
    issued: list[list[str]] = []
    if batch.production:
        cmd = config.install_command(batch.production)
        await runner(cmd, project.root)
        issued.append(cmd)
    if batch.development:
        cmd = config.install_command(batch.development, dev=True)
        await runner(cmd, project.root)
        issued.append(cmd)
    return issued
