"""nuxtgen command-line entry point.

Asks the setup questions, compiles the answers, then scaffolds the project.

Usage::

    nuxtgen
    nuxtgen --output ./apps --package-manager pnpm
    nuxtgen --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from nuxtgen import __version__
from nuxtgen.collector import AnswerCollector, Answers
from nuxtgen.compiler import CompiledPlan, SelectionCompiler
from nuxtgen.config import ScaffoldConfig
from nuxtgen.errors import ScaffoldError
from nuxtgen.installer import ProjectInstaller
from nuxtgen.utils import (
    console,
    format_duration,
    print_banner,
    print_error,
    print_success,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuxtgen",
        description="Create an opinionated TypeScript Nuxt 3 project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nuxtgen\n"
            "  nuxtgen --output ./apps --package-manager pnpm\n"
            "  nuxtgen --dry-run\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--package-manager",
        choices=["npm", "pnpm", "yarn"],
        default=None,
        help="Package manager used for installs (default: npm)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the install commands and nuxt.config.ts without running anything",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Echo every command and its output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _config_from_args(args: argparse.Namespace) -> ScaffoldConfig:
    config = ScaffoldConfig.from_env()
    overrides: dict[str, object] = {}
    if args.output:
        overrides["output_dir"] = Path(args.output)
    if args.package_manager:
        overrides["package_manager"] = args.package_manager
    if args.verbose:
        overrides["verbose"] = True
    if overrides:
        config = ScaffoldConfig(**{**config.model_dump(), **overrides})
    return config


def print_plan(config: ScaffoldConfig, answers: Answers, plan: CompiledPlan) -> None:
    """Print the commands a real run would execute and the generated config."""
    table = Table(title="Install plan", show_header=True, header_style="bold cyan")
    table.add_column("Step", style="dim", no_wrap=True)
    table.add_column("Command")
    table.add_row("init", escape(config.init_command(answers.name)))
    table.add_row("init", escape(config.install_all_command()))
    for action in plan.actions:
        table.add_row(action.stage.value, escape(action.command))
    console.print(table)
    console.print()
    console.print(f"[bold]{escape(str(config.config_path(answers.name)))}[/bold]")
    console.print(Syntax(plan.document.content, "typescript"))


def run(
    config: ScaffoldConfig,
    dry_run: bool = False,
    collector: AnswerCollector | None = None,
    installer: ProjectInstaller | None = None,
) -> int:
    """Collect, compile and install.  Returns the process exit code."""
    collector = collector or AnswerCollector()
    answers = collector.collect()
    if answers is None:
        console.print("Please run the command again.")
        return 0

    plan = SelectionCompiler(package_manager=config.package_manager).compile(answers)
    for framework in plan.unsupported:
        print_warning(f"{framework} is not supported yet; it will not be installed.")

    if dry_run:
        print_plan(config, answers, plan)
        return 0

    installer = installer or ProjectInstaller(config)
    started = time.monotonic()
    asyncio.run(installer.install(answers, plan))

    print_success("Completed. Happy coding!")
    console.print(f"To start: cd {escape(answers.name)} && {config.dev_command()}")
    console.print(f"[dim]Finished in {format_duration(time.monotonic() - started)}[/dim]")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``nuxtgen`` and ``python -m nuxtgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = _config_from_args(args)
    except ValidationError as exc:
        print_error(f"Invalid configuration:\n{exc}")
        return 1

    print_banner(
        "nuxtgen",
        "Creating an opinionated TypeScript Nuxt 3 project...\n"
        f"Output          : {config.output_dir.resolve()}\n"
        f"Package manager : {config.package_manager}",
    )

    try:
        return run(config, dry_run=args.dry_run)
    except ScaffoldError as exc:
        print_error(str(exc))
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())
