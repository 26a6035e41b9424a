"""vitekit scaffolder -- feature catalog and file generation.

This module owns everything that touches the new project's directory tree:
the static feature catalog, the per-feature template routines and the alias
setup that runs on every project.

Quick usage::

    from vitekit.scaffolder import AliasConfigurator, ProjectContext, TemplateApplier

    project = ProjectContext(name="demo", root=Path("demo"))
    await TemplateApplier().apply(project, selection)
    await AliasConfigurator().configure(project)
"""

from vitekit.scaffolder.alias_gen import AliasConfigurator, ConfigParseError
from vitekit.scaffolder.catalog import CATALOG, Feature, Package, get_feature
from vitekit.scaffolder.generator import ProjectContext, TemplateApplier, create_base_project
from vitekit.scaffolder.templates import TemplateRenderer

__all__ = [
    "AliasConfigurator",
    "CATALOG",
    "ConfigParseError",
    "Feature",
    "Package",
    "ProjectContext",
    "TemplateApplier",
    "TemplateRenderer",
    "create_base_project",
    "get_feature",
]
