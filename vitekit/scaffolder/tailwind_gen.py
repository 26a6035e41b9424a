"""Tailwind CSS template routine.

Initialises Tailwind through its own CLI, converts the generated
``tailwind.config.js`` into a TypeScript config, and writes the global
stylesheet and the Prettier config that sorts Tailwind classes.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Awaitable, Callable

from ..utils import run_command

if TYPE_CHECKING:
    from .generator import ProjectContext
    from .templates import TemplateRenderer

TAILWIND_INIT_COMMAND: list[str] = ["npx", "tailwindcss", "init", "-p"]


async def apply_tailwind(
    project: "ProjectContext",
    renderer: "TemplateRenderer",
    runner: Callable[..., Awaitable[None]] = run_command,
) -> list[Path]:
    """Write the Tailwind files into *project*.

    Returns:
        The written paths, in write order.

    Raises:
        CommandError: If ``tailwindcss init`` fails.
        FileNotFoundError: If ``tailwindcss init`` did not produce
            ``tailwind.config.js``.
    """
    ctx = project.template_context()
    await runner(list(TAILWIND_INIT_COMMAND), project.root)

    js_config = project.path_for("tailwind.config.js")
    ts_config = project.path_for("tailwind.config.ts")
    await asyncio.to_thread(js_config.replace, ts_config)

    written = [
        await renderer.render_to_file("tailwind/tailwind.config.ts.j2", ts_config, ctx),
        await renderer.render_to_file(
            "tailwind/index.css.j2", project.path_for(f"{project.source_dir}/index.css"), ctx
        ),
        await renderer.render_to_file("tailwind/prettierrc.j2", project.path_for(".prettierrc"), ctx),
    ]
    return written
