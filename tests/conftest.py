"""Shared pytest fixtures for the vitekit test suite.

Provides reusable fixtures for:
- A configuration pointing at a temporary output directory
- A fake base project as ``create vite`` leaves it
- A recording command runner that simulates the external tools
- Scripted answers for the yes/no prompts
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from vitekit.config import ScaffoldConfig
from vitekit.scaffolder.generator import ProjectContext
from vitekit.utils import CommandError


# ---------------------------------------------------------------------------
# Base project
# ---------------------------------------------------------------------------

TSCONFIG_APP = textwrap.dedent("""\
    {
      "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": true,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],

        /* Bundler mode */
        "moduleResolution": "bundler",
        "jsx": "react-jsx",

        // Linting
        "strict": true,
        "noUnusedLocals": true,
      },
      "include": ["src"],
    }
""")


def make_base_project(root: Path) -> Path:
    """Lay out the files ``create vite --template react-ts`` produces."""
    (root / "src").mkdir(parents=True, exist_ok=True)
    (root / "src" / "App.tsx").write_text("export default function App() { return null; }\n")
    (root / "src" / "index.css").write_text(":root { color: black; }\n")
    (root / "vite.config.ts").write_text("export default {};\n")
    (root / "tsconfig.app.json").write_text(TSCONFIG_APP)
    (root / "package.json").write_text('{"name": "%s"}\n' % root.name)
    return root


@pytest.fixture
def config(tmp_path: Path) -> ScaffoldConfig:
    """Default configuration creating projects under tmp_path."""
    return ScaffoldConfig(output_dir=tmp_path.resolve())


@pytest.fixture
def base_project(tmp_path: Path) -> ProjectContext:
    """A project context whose directory already holds a base project."""
    root = make_base_project(tmp_path.resolve() / "demo")
    return ProjectContext(name="demo", root=root)


# ---------------------------------------------------------------------------
# Command runner
# ---------------------------------------------------------------------------


class RecordingRunner:
    """Async stand-in for ``run_command`` that records every call.

    Simulates the side effects the real tools have on disk: ``create vite``
    lays out a base project and ``tailwindcss init -p`` writes the JS
    configs.  Commands whose joined text contains *fail_on* exit with
    *fail_code*.
    """

    def __init__(self, fail_on: str | None = None, fail_code: int = 1) -> None:
        self.calls: list[tuple[list[str], Path | None]] = []
        self.fail_on = fail_on
        self.fail_code = fail_code

    async def __call__(self, cmd: list[str], cwd: str | Path | None = None) -> None:
        cwd_path = Path(cwd) if cwd is not None else None
        self.calls.append((list(cmd), cwd_path))

        if self.fail_on and self.fail_on in " ".join(cmd):
            raise CommandError(cmd, self.fail_code)

        if cmd[1:3] == ["create", "vite"] and cwd_path is not None:
            make_base_project(cwd_path / cmd[3])
        elif cmd[:3] == ["npx", "tailwindcss", "init"] and cwd_path is not None:
            (cwd_path / "tailwind.config.js").write_text("module.exports = {};\n")
            (cwd_path / "postcss.config.js").write_text("export default {};\n")

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    def install_commands(self) -> list[list[str]]:
        return [cmd for cmd in self.commands if cmd[1:2] == ["install"]]


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


class ScriptedConfirm:
    """Answers yes/no questions from a fixed script and records them."""

    def __init__(self, answers: dict[str, bool] | None = None, default: bool = False) -> None:
        self.answers = answers or {}
        self.default = default
        self.asked: list[str] = []

    def __call__(self, question: str) -> bool:
        self.asked.append(question)
        return self.answers.get(question, self.default)


@pytest.fixture
def answer_no() -> ScriptedConfirm:
    return ScriptedConfirm(default=False)


@pytest.fixture
def answer_yes() -> ScriptedConfirm:
    return ScriptedConfirm(default=True)


@pytest.fixture
def make_runner():
    """Factory for runners that fail on a given command."""
    return RecordingRunner


@pytest.fixture
def make_confirm():
    """Factory for scripted yes/no answers."""
    return ScriptedConfirm
