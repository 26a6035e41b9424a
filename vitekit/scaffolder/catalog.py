"""Static catalog of optional features.

One declarative table shared by the resolver, the install planner and the
template applier.  Catalog order is the order prompts are shown, packages
are installed and template routines run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional

from .router_gen import apply_react_router
from .tailwind_gen import apply_tailwind

# (project, renderer, runner) -> written paths
TemplateRoutine = Callable[..., Awaitable[list[Path]]]


@dataclass(frozen=True)
class Package:
    """A package identifier and whether it is a development dependency."""

    name: str
    dev_only: bool = False


@dataclass(frozen=True)
class Feature:
    """One optional capability the user may opt into."""

    name: str
    flag: str
    label: str
    packages: tuple[Package, ...]
    apply: Optional[TemplateRoutine] = None

    def __post_init__(self) -> None:
        if not self.packages:
            raise ValueError(f"Feature {self.name!r} must declare at least one package")

    @property
    def question(self) -> str:
        """Yes/no question asked when neither the flag nor ``--all`` decides."""
        return f"Do you want to add {self.label}?"

    @property
    def dest(self) -> str:
        """Attribute name argparse stores the flag under (``--react-router`` -> ``react_router``)."""
        return self.flag.lstrip("-").replace("-", "_")


CATALOG: tuple[Feature, ...] = (
    Feature(
        name="tailwind",
        flag="--tailwind",
        label="Tailwind CSS",
        packages=(
            Package("tailwindcss", dev_only=True),
            Package("postcss", dev_only=True),
            Package("autoprefixer", dev_only=True),
            Package("class-variance-authority"),
            Package("clsx"),
            Package("tailwind-merge"),
            Package("prettier", dev_only=True),
            Package("prettier-plugin-tailwindcss", dev_only=True),
            Package("@types/node", dev_only=True),
        ),
        apply=apply_tailwind,
    ),
    Feature(
        name="react-router",
        flag="--react-router",
        label="React Router",
        packages=(Package("react-router-dom"),),
        apply=apply_react_router,
    ),
    Feature(
        name="mantine",
        flag="--mantine",
        label="Mantine UI Library",
        packages=(Package("@mantine/core"), Package("@mantine/hooks")),
    ),
    Feature(
        name="react-toastify",
        flag="--react-toastify",
        label="React Toastify",
        packages=(Package("react-toastify"),),
    ),
    Feature(
        name="axios",
        flag="--axios",
        label="Axios",
        packages=(Package("axios"),),
    ),
    Feature(
        name="zustand",
        flag="--zustand",
        label="Zustand",
        packages=(Package("zustand"),),
    ),
    Feature(
        name="tanstack-query",
        flag="--tanstack-query",
        label="TanStack Query",
        packages=(Package("@tanstack/react-query"),),
    ),
    Feature(
        name="react-icons",
        flag="--react-icons",
        label="React Icons",
        packages=(Package("react-icons"),),
    ),
)


def get_feature(name: str, catalog: tuple[Feature, ...] = CATALOG) -> Feature:
    """Look up a feature by name; raises ``KeyError`` for unknown names."""
    for feature in catalog:
        if feature.name == name:
            return feature
    raise KeyError(name)
