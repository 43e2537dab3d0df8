"""nuxtgen run configuration.

Typed settings for a scaffolding run.  Uses a Pydantic v2 model so values are
validated at construction time and can be read from environment variables
without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

PackageManager = Literal["npm", "pnpm", "yarn"]

DEFAULT_FOLDERS: list[str] = [
    "content",
    "composables",
    "layouts",
    "middleware",
    "plugins",
]


class ScaffoldConfig(BaseModel):
    """Global nuxtgen configuration.

    Created once by the CLI entry point and passed to the compiler and the
    installer.  Nothing here comes from the interactive prompts; those land in
    ``Answers``.
    """

    output_dir: Path = Field(default=Path("."))
    package_manager: PackageManager = Field(default="npm")
    npx: str = Field(default="npx", min_length=1)
    command_timeout: int = Field(
        default=600, ge=10, description="Per-command timeout in seconds"
    )
    config_filename: str = Field(default="nuxt.config.ts", min_length=1)
    folders: list[str] = Field(default_factory=lambda: list(DEFAULT_FOLDERS))
    verbose: bool = Field(default=False)

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def project_path(self, name: str) -> Path:
        """Directory the new project is created in."""
        return self.output_dir / name

    def config_path(self, name: str) -> Path:
        """Path of the generated Nuxt configuration file."""
        return self.project_path(name) / self.config_filename

    # ------------------------------------------------------------------
    # Command helpers
    # ------------------------------------------------------------------

    def init_command(self, name: str) -> str:
        """Command that bootstraps a TypeScript Nuxt 3 project."""
        return f"{self.npx} nuxi init {name} --ts"

    def install_all_command(self) -> str:
        """Command that installs the dependencies already in package.json."""
        return f"{self.package_manager} install"

    def dev_command(self) -> str:
        if self.package_manager == "npm":
            return "npm run dev"
        return f"{self.package_manager} dev"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            NUXTGEN_OUTPUT_DIR, NUXTGEN_PACKAGE_MANAGER, NUXTGEN_NPX,
            NUXTGEN_COMMAND_TIMEOUT, NUXTGEN_CONFIG_FILENAME, NUXTGEN_FOLDERS,
            NUXTGEN_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NUXTGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["NUXTGEN_OUTPUT_DIR"])
        if os.environ.get("NUXTGEN_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["NUXTGEN_PACKAGE_MANAGER"]
        if os.environ.get("NUXTGEN_NPX"):
            kwargs["npx"] = os.environ["NUXTGEN_NPX"]
        if os.environ.get("NUXTGEN_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = os.environ["NUXTGEN_COMMAND_TIMEOUT"]
        if os.environ.get("NUXTGEN_CONFIG_FILENAME"):
            kwargs["config_filename"] = os.environ["NUXTGEN_CONFIG_FILENAME"]
        if "NUXTGEN_FOLDERS" in os.environ:
            folders_str = os.environ["NUXTGEN_FOLDERS"]
            kwargs["folders"] = [f.strip() for f in folders_str.split(",") if f.strip()]
        if os.environ.get("NUXTGEN_VERBOSE"):
            kwargs["verbose"] = os.environ["NUXTGEN_VERBOSE"].lower() in ("1", "true", "yes")

        return cls(**kwargs)
