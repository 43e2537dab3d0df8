"""Shared pytest fixtures for the nuxtgen test suite.

Provides reusable fixtures for:
- Answer factories
- A scripted prompt surface
- A recording command runner
- Mock subprocess helpers
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from nuxtgen.collector.models import Answers
from nuxtgen.collector.prompts import PromptSpec
from nuxtgen.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def make_answers():
    """Factory for ``Answers`` with sensible defaults.

    Usage:
        def test_x(make_answers):
            answers = make_answers(nuxt_modules=["Strapi"])
    """
    def factory(**overrides: Any) -> Answers:
        values: dict[str, Any] = {
            "name": "demo",
            "port": 3000,
            "ui_frameworks": [],
            "use_state": False,
            "nuxt_modules": [],
            "target": "node-server",
        }
        values.update(overrides)
        return Answers(**values)

    return factory


@pytest.fixture
def demo_answers(make_answers) -> Answers:
    """The worked example: tailwind + Pinia + Strapi on port 4000."""
    return make_answers(
        name="demo",
        port=4000,
        ui_frameworks=["tailwindcss"],
        use_state=True,
        nuxt_modules=["Strapi"],
        target="node-server",
    )


# ---------------------------------------------------------------------------
# Prompt surface
# ---------------------------------------------------------------------------

class ScriptedSurface:
    """Prompt surface that answers from a ``{prompt name: answer}`` mapping.

    Prompts missing from the script receive their declared default.  Every
    asked spec is recorded in ``asked``.
    """

    def __init__(self, script: dict[str, Any] | None = None) -> None:
        self.script = dict(script or {})
        self.asked: list[PromptSpec] = []

    def ask(self, spec: PromptSpec) -> Any:
        self.asked.append(spec)
        if spec.name in self.script:
            return self.script[spec.name]
        return spec.default


@pytest.fixture
def scripted_surface():
    """Factory for ``ScriptedSurface`` instances."""
    return ScriptedSurface


# ---------------------------------------------------------------------------
# Command runner
# ---------------------------------------------------------------------------

class RecordingRunner:
    """Async stand-in for ``run_command`` that records every call.

    Commands listed in ``failures`` return the mapped ``(returncode, stderr)``.
    ``delays`` lets a command sleep first, to exercise concurrency.
    """

    def __init__(
        self,
        failures: dict[str, tuple[int, str]] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.failures = failures or {}
        self.delays = delays or {}
        self.calls: list[tuple[str, Path]] = []
        self.events: list[tuple[str, str]] = []

    async def __call__(
        self, cmd: str, cwd: Path | None = None, timeout: int = 600, **kwargs: Any
    ) -> tuple[int, str, str]:
        self.events.append(("start", cmd))
        self.calls.append((cmd, Path(cwd) if cwd else Path(".")))
        await asyncio.sleep(self.delays.get(cmd, 0))
        self.events.append(("end", cmd))
        if cmd in self.failures:
            returncode, stderr = self.failures[cmd]
            return (returncode, "", stderr)
        return (0, "", "")

    @property
    def commands(self) -> list[str]:
        return [c for c, _ in self.calls]


@pytest.fixture
def recording_runner():
    """Factory for ``RecordingRunner`` instances."""
    return RecordingRunner


@pytest.fixture
def scaffold_config(tmp_path: Path) -> ScaffoldConfig:
    """Config pointing at a temporary output directory."""
    return ScaffoldConfig(output_dir=tmp_path / "out")


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_shell", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
