"""Prompt surface used by the answer collector.

``PromptSpec`` describes one question; a ``PromptSurface`` turns it into an
answer.  ``RichPromptSurface`` is the terminal implementation built on
``rich.prompt``.  Tests substitute a scripted surface.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from nuxtgen.errors import NonInteractiveEnvironment, PromptCancelled
from nuxtgen.utils import console as default_console

Validator = Callable[[str], "bool | str"]

NONE_KEYWORD = "none"


class PromptKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    CONFIRM = "confirm"
    SELECT = "select"
    MULTISELECT = "multiselect"


@dataclass(frozen=True)
class PromptSpec:
    """A single question.

    ``validate`` receives the raw answer as a string and returns ``True`` or
    an error message; the surface re-asks until it gets ``True``.
    """

    kind: PromptKind
    name: str
    message: str
    default: Any = None
    choices: tuple[str, ...] = field(default=())
    validate: Validator | None = None


class PromptSurface(Protocol):
    def ask(self, spec: PromptSpec) -> Any: ...


def parse_multiselect(raw: str, choices: Sequence[str]) -> list[str]:
    """Parse a multi-select answer into choice names, in the order typed.

    Entries are separated by commas or whitespace and may be 1-based choice
    numbers or choice names (case-insensitive).  ``none`` selects nothing.
    Duplicates are dropped.

    Raises:
        ValueError: If an entry matches no choice.
    """
    tokens = [t for t in re.split(r"[,\s]+", raw.strip()) if t]
    if len(tokens) == 1 and tokens[0].lower() == NONE_KEYWORD:
        return []

    by_name = {choice.lower(): choice for choice in choices}
    selected: list[str] = []
    for token in tokens:
        if token.isdigit() and 1 <= int(token) <= len(choices):
            choice = choices[int(token) - 1]
        elif token.lower() in by_name:
            choice = by_name[token.lower()]
        else:
            raise ValueError(f"Unknown choice: {token}")
        if choice not in selected:
            selected.append(choice)
    return selected


class _EOFAwareStream:
    """Wrap a text stream so it reads like ``input()``.

    End of input raises ``EOFError`` and the line terminator is dropped, so a
    blank line reaches rich as ``""`` and selects the default.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")


class RichPromptSurface:
    """Terminal prompts rendered with ``rich.prompt``.

    Args:
        console: Console to render on.  Defaults to the shared nuxtgen console.
        stream: Optional input stream.  When given, answers are read from it
            instead of stdin and the TTY check is skipped.
    """

    def __init__(
        self,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.console = console or default_console
        self._stream = _EOFAwareStream(stream) if stream is not None else None

    # -- Public API --------------------------------------------------------

    def ensure_interactive(self) -> None:
        """Raise ``NonInteractiveEnvironment`` unless prompts can be answered."""
        if self._stream is None and not sys.stdin.isatty():
            raise NonInteractiveEnvironment()

    def ask(self, spec: PromptSpec) -> Any:
        self.ensure_interactive()
        handlers = {
            PromptKind.TEXT: self._ask_text,
            PromptKind.INTEGER: self._ask_integer,
            PromptKind.CONFIRM: self._ask_confirm,
            PromptKind.SELECT: self._ask_select,
            PromptKind.MULTISELECT: self._ask_multiselect,
        }
        try:
            return handlers[spec.kind](spec)
        except KeyboardInterrupt as exc:
            raise PromptCancelled() from exc
        except EOFError as exc:
            raise NonInteractiveEnvironment(
                "Input closed before all questions were answered."
            ) from exc

    # -- Handlers ----------------------------------------------------------

    def _common(self, spec: PromptSpec) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"console": self.console, "stream": self._stream}
        if spec.default is not None:
            kwargs["default"] = spec.default
        return kwargs

    def _invalid(self, message: str) -> None:
        self.console.print(f"[prompt.invalid]{escape(message)}")

    def _ask_text(self, spec: PromptSpec) -> str:
        while True:
            value = Prompt.ask(spec.message, **self._common(spec))
            value = "" if value is None else str(value).strip()
            if spec.validate is not None:
                result = spec.validate(value)
                if result is not True:
                    self._invalid(str(result))
                    continue
            return value

    def _ask_integer(self, spec: PromptSpec) -> int:
        while True:
            value = IntPrompt.ask(spec.message, **self._common(spec))
            if spec.validate is not None:
                result = spec.validate(str(value))
                if result is not True:
                    self._invalid(str(result))
                    continue
            return int(value)

    def _ask_confirm(self, spec: PromptSpec) -> bool:
        return bool(Confirm.ask(spec.message, **self._common(spec)))

    def _ask_select(self, spec: PromptSpec) -> str:
        return Prompt.ask(spec.message, choices=list(spec.choices), **self._common(spec))

    def _ask_multiselect(self, spec: PromptSpec) -> list[str]:
        self.console.print(f"\n[bold blue]{escape(spec.message)}[/bold blue]")
        table = Table(show_header=False, box=None)
        for i, choice in enumerate(spec.choices, 1):
            table.add_row(f"[cyan]{i})[/cyan]", choice)
        self.console.print(table)

        default = list(spec.default or [])
        kwargs = self._common(spec)
        kwargs["default"] = ", ".join(default) if default else NONE_KEYWORD
        while True:
            raw = Prompt.ask(
                "Select (numbers or names, comma separated)", **kwargs
            )
            try:
                return parse_multiselect(str(raw), spec.choices)
            except ValueError as exc:
                self._invalid(str(exc))
