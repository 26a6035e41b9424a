"""React Router template routine.

Replaces ``App.tsx`` with a browser router and adds the components it
imports: the scroll-to-top helper, the error page and the button with its
variant types and class-name utilities.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Awaitable, Callable

from ..utils import run_command

if TYPE_CHECKING:
    from .generator import ProjectContext
    from .templates import TemplateRenderer

# Template -> output path relative to the source directory, in write order
ROUTER_FILES: tuple[tuple[str, str], ...] = (
    ("react-router/App.tsx.j2", "App.tsx"),
    ("react-router/ScrollToTop.tsx.j2", "helpers/ScrollToTop.tsx"),
    ("react-router/Error.tsx.j2", "components/ui/Error.tsx"),
    ("react-router/Button.tsx.j2", "components/ui/Button.tsx"),
    ("react-router/types.ts.j2", "lib/types.ts"),
    ("react-router/utils.ts.j2", "lib/utils.ts"),
)


async def apply_react_router(
    project: "ProjectContext",
    renderer: "TemplateRenderer",
    runner: Callable[..., Awaitable[None]] = run_command,
) -> list[Path]:
    """Write the router entry component and its helpers into *project*."""
    ctx = project.template_context()
    written: list[Path] = []
    for template_name, relative in ROUTER_FILES:
        out = project.path_for(f"{project.source_dir}/{relative}")
        written.append(await renderer.render_to_file(template_name, out, ctx))
    return written
