"""Feature resolution: which catalog features a run applies.

A feature is selected when ``--all`` is given, when its own flag is given,
or when the user answers yes to its question.  Questions are asked in
catalog order and every answer stands on its own.
"""

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass
from typing import Callable

from .prompts import ask_confirm
from .scaffolder.catalog import CATALOG, Feature


@dataclass(frozen=True)
class FeatureFlags:
    """Feature flags given on the command line."""

    apply_all: bool = False
    enabled: frozenset[str] = frozenset()

    @classmethod
    def from_namespace(cls, args: Namespace, catalog: tuple[Feature, ...] = CATALOG) -> "FeatureFlags":
        """Collect the flags argparse stored on *args*."""
        enabled = frozenset(f.name for f in catalog if getattr(args, f.dest, False))
        return cls(apply_all=bool(getattr(args, "all", False)), enabled=enabled)


@dataclass(frozen=True)
class Selection:
    """Resolved yes/no decision for every catalog feature."""

    choices: tuple[tuple[str, bool], ...]

    def is_selected(self, name: str) -> bool:
        return dict(self.choices).get(name, False)

    def selected_features(self, catalog: tuple[Feature, ...] = CATALOG) -> list[Feature]:
        """Selected features, in catalog order."""
        return [f for f in catalog if self.is_selected(f.name)]

    def as_dict(self) -> dict[str, bool]:
        return dict(self.choices)


def resolve(
    flags: FeatureFlags,
    catalog: tuple[Feature, ...] = CATALOG,
    prompt_fn: Callable[[str], bool] = ask_confirm,
) -> Selection:
    """Decide every feature of *catalog*.

    May block on *prompt_fn* once per feature not decided by a flag.

    Raises:
        PromptAbortedError: If the user interrupts a prompt.
    """
    choices: list[tuple[str, bool]] = []
    for feature in catalog:
        if flags.apply_all or feature.name in flags.enabled:
            selected = True
        else:
            selected = bool(prompt_fn(feature.question))
        choices.append((feature.name, selected))
    return Selection(choices=tuple(choices))
