"""Import alias configuration for the generated project.

Registers one path alias (``@`` by default) pointing at the source root in
both the Vite config and the TypeScript config.  The generated
``tsconfig.app.json`` contains comments and trailing commas, so it is read
with ``json5`` and written back as strict JSON.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import json5

from .generator import ProjectContext
from .templates import TemplateRenderer


class ConfigParseError(Exception):
    """Raised when the TypeScript config is missing or cannot be parsed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class AliasConfigurator:
    """Writes the Vite config and patches the TypeScript config."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        vite_config_file: str = "vite.config.ts",
        tsconfig_file: str = "tsconfig.app.json",
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.vite_config_file = vite_config_file
        self.tsconfig_file = tsconfig_file

    async def configure(self, project: ProjectContext) -> list[Path]:
        """Register the alias in both configs.

        Returns:
            ``[vite_config_path, tsconfig_path]``.

        Raises:
            ConfigParseError: If the TypeScript config is missing or invalid.
        """
        vite_config = await self.renderer.render_to_file(
            "alias/vite.config.ts.j2",
            project.path_for(self.vite_config_file),
            project.template_context(),
        )

        tsconfig_path = project.path_for(self.tsconfig_file)
        try:
            raw = await asyncio.to_thread(tsconfig_path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise ConfigParseError(tsconfig_path, "file not found") from exc

        patched = patch_tsconfig(raw, project.alias, project.source_dir, path=tsconfig_path)
        await asyncio.to_thread(tsconfig_path.write_text, patched, encoding="utf-8")
        return [vite_config, tsconfig_path]


def patch_tsconfig(raw: str, alias: str, source_dir: str, path: Path = Path("tsconfig.json")) -> str:
    """Return *raw* with ``baseUrl`` and a single-entry ``paths`` map set.

    Examples::

        patch_tsconfig('{"compilerOptions": {},}', "@", "src")
        -> '{"compilerOptions": {"baseUrl": ".", "paths": {"@/*": ["src/*"]}}}' (indented)
    """
    try:
        data: Any = json5.loads(raw)
    except ValueError as exc:
        raise ConfigParseError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value is not an object")

    compiler_options = data.setdefault("compilerOptions", {})
    if not isinstance(compiler_options, dict):
        raise ConfigParseError(path, "compilerOptions is not an object")

    compiler_options["baseUrl"] = "."
    compiler_options["paths"] = {f"{alias}/*": [f"{source_dir}/*"]}

    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
