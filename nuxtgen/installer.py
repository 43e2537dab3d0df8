"""Executes a compiled plan against the filesystem and the package manager.

Creates the Nuxt 3 project, installs the selected packages, and writes the
generated ``nuxt.config.ts``.  Every command runs with an explicit working
directory; the process-wide current directory is never changed.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path

from rich.markup import escape
from rich.progress import Progress

from nuxtgen.collector.models import Answers
from nuxtgen.compiler.compiler import CompiledPlan, InstallAction, Stage
from nuxtgen.config import ScaffoldConfig
from nuxtgen.errors import ExternalCommandFailure, FileWriteFailure
from nuxtgen.utils import (
    console,
    create_progress,
    print_success,
    run_command,
    write_text_atomic,
)

Runner = Callable[..., Awaitable[tuple[int, str, str]]]


class ProjectInstaller:
    """Runs the install steps for one confirmed set of answers.

    Steps, in order:
    - ``nuxi init`` the project and install its base dependencies
    - create the conventional folders
    - install the UI frameworks concurrently and wait for all of them
    - install Pinia and the Nuxt modules one at a time
    - write ``nuxt.config.ts``

    The first failing command aborts the run with ``ExternalCommandFailure``.
    Nothing already installed is rolled back.
    """

    def __init__(self, config: ScaffoldConfig, runner: Runner = run_command) -> None:
        self.config = config
        self.runner = runner

    # -- Public API --------------------------------------------------------

    async def install(self, answers: Answers, plan: CompiledPlan) -> Path:
        """Scaffold the project described by *answers* and *plan*.

        Returns:
            Path to the generated project root.
        """
        project_root = self.config.project_path(answers.name)
        self._check_destination(project_root)

        with create_progress() as progress:
            # 1. Nuxt 3 skeleton
            async with self._step(progress, "Installing Nuxt 3", "Nuxt 3 added"):
                await self._run(
                    self.config.init_command(answers.name), cwd=self.config.output_dir
                )
                await self._run(self.config.install_all_command(), cwd=project_root)

            # 2. Folders
            async with self._step(progress, "Creating folders", "Folders created"):
                await self._create_folders(project_root)

            # 3. UI frameworks (fan-out, then join)
            ui_actions = plan.actions_for(Stage.UI)
            if ui_actions:
                labels = ", ".join(a.label for a in ui_actions)
                async with self._step(progress, f"Installing {labels}", f"{labels} added"):
                    await self._install_concurrently(ui_actions, project_root)

            # 4. State management and Nuxt modules, in plan order
            for action in plan.actions_for(Stage.STATE) + plan.actions_for(Stage.MODULE):
                async with self._step(
                    progress, f"Installing {action.label}", f"{action.label} added"
                ):
                    await self._run(action.command, cwd=project_root)

            # 5. nuxt.config.ts
            config_path = self.config.config_path(answers.name)
            async with self._step(
                progress, f"Writing {config_path.name}", f"{config_path.name} written"
            ):
                await self._write_config(config_path, plan.document.content)

        return project_root

    # -- Steps -------------------------------------------------------------

    def _check_destination(self, project_root: Path) -> None:
        """Refuse to scaffold into a non-empty directory."""
        if project_root.is_dir() and any(project_root.iterdir()):
            raise FileWriteFailure(project_root, "directory already exists and is not empty")
        try:
            self.config.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileWriteFailure(self.config.output_dir, str(exc)) from exc

    async def _create_folders(self, project_root: Path) -> None:
        await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=True)

        async def _mkdir(name: str) -> None:
            await asyncio.to_thread((project_root / name).mkdir, parents=True, exist_ok=True)

        await asyncio.gather(*[_mkdir(f) for f in self.config.folders])

    async def _install_concurrently(
        self, actions: tuple[InstallAction, ...], project_root: Path
    ) -> None:
        """Start every install at once and wait for all before reporting."""
        results = await asyncio.gather(
            *(self._run(a.command, cwd=project_root) for a in actions),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

    async def _write_config(self, path: Path, content: str) -> None:
        try:
            await asyncio.to_thread(write_text_atomic, path, content)
        except OSError as exc:
            raise FileWriteFailure(path, exc.strerror or str(exc)) from exc

    # -- Helpers -----------------------------------------------------------

    async def _run(self, cmd: str, cwd: Path) -> str:
        if self.config.verbose:
            console.print(f"[dim]$ {escape(cmd)}  (in {escape(str(cwd))})[/dim]")
        returncode, stdout, stderr = await self.runner(
            cmd, cwd=cwd, timeout=self.config.command_timeout
        )
        if self.config.verbose and stdout:
            console.print(f"[dim]{escape(stdout)}[/dim]")
        if returncode != 0:
            raise ExternalCommandFailure(cmd, returncode, stderr or stdout)
        return stdout

    @asynccontextmanager
    async def _step(
        self, progress: Progress, description: str, done: str
    ) -> AsyncIterator[None]:
        task_id = progress.add_task(description, total=None)
        try:
            yield
        finally:
            progress.remove_task(task_id)
        print_success(done)
