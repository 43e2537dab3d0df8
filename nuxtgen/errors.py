"""Exception hierarchy for nuxtgen.

Every failure that ends a scaffolding run derives from ``ScaffoldError`` so the
CLI can map it to an exit code in one place.  Invalid answers are reported by
pydantic's own ``ValidationError`` when an ``Answers`` model is built.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all terminal scaffolding failures."""

    exit_code: int = 1


class NonInteractiveEnvironment(ScaffoldError):
    """Raised when prompts cannot be rendered (stdin is not a terminal)."""

    exit_code = 2

    def __init__(self, message: str = "") -> None:
        super().__init__(
            message
            or "nuxtgen needs an interactive terminal; stdin is not a TTY."
        )


class PromptCancelled(ScaffoldError):
    """Raised when the operator aborts a prompt with Ctrl+C."""

    exit_code = 130

    def __init__(self, message: str = "Cancelled by user.") -> None:
        super().__init__(message)


class ExternalCommandFailure(ScaffoldError):
    """Raised when an install or init command exits non-zero."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed (exit {returncode}): {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class FileWriteFailure(ScaffoldError):
    """Raised when the generated configuration cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write {self.path}: {reason}")


class UnknownModule(ScaffoldError):
    """Raised when a selected module has no row in the module catalog."""

    def __init__(self, module: str) -> None:
        self.module = module
        super().__init__(f"No catalog entry for module '{module}'")
