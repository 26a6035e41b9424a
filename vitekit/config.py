"""vitekit configuration.

Centralised, typed configuration for a scaffolding run. Settings use a
Pydantic v2 model so they can be validated at construction time and
overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Global vitekit configuration.

    Holds the external tool names, the base project template and the alias
    convention shared by every step.  Instances are created once by the CLI
    entry point and passed to ``Scaffolder``.
    """

    package_manager: str = Field(default="pnpm", min_length=1)
    vite_template: str = Field(default="react-ts", min_length=1)
    default_project_name: str = Field(default="my-vite-app", min_length=1)
    output_dir: Path = Field(default=Path("."))
    dev_flag: str = Field(default="--save-dev", description="Dev-dependency flag of the package manager")

    # Alias convention
    alias: str = Field(default="@", min_length=1)
    source_dir: str = Field(default="src", min_length=1)
    vite_config_file: str = Field(default="vite.config.ts")
    tsconfig_file: str = Field(default="tsconfig.app.json")

    # ------------------------------------------------------------------
    # Command builders
    # ------------------------------------------------------------------

    def create_command(self, project_name: str) -> list[str]:
        """Command that materialises the base project named *project_name*."""
        return [
            self.package_manager,
            "create",
            "vite",
            project_name,
            "--template",
            self.vite_template,
        ]

    def install_command(self, packages: list[str] | tuple[str, ...], dev: bool = False) -> list[str]:
        """Command that installs *packages* in one batch."""
        cmd = [self.package_manager, "install"]
        if dev:
            cmd.append(self.dev_flag)
        cmd.extend(packages)
        return cmd

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            VITEKIT_PACKAGE_MANAGER, VITEKIT_TEMPLATE, VITEKIT_OUTPUT_DIR,
            VITEKIT_DEFAULT_NAME, VITEKIT_ALIAS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("VITEKIT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["VITEKIT_PACKAGE_MANAGER"]
        if os.environ.get("VITEKIT_TEMPLATE"):
            kwargs["vite_template"] = os.environ["VITEKIT_TEMPLATE"]
        if os.environ.get("VITEKIT_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["VITEKIT_OUTPUT_DIR"])
        if os.environ.get("VITEKIT_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["VITEKIT_DEFAULT_NAME"]
        if os.environ.get("VITEKIT_ALIAS"):
            kwargs["alias"] = os.environ["VITEKIT_ALIAS"]
        return cls(**kwargs)
