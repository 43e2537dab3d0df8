"""Interactive questionnaire that produces a confirmed ``Answers`` value."""

from __future__ import annotations

from nuxtgen.utils import console, print_summary_table

from .models import (
    DEFAULT_PORT,
    DEFAULT_PROJECT_NAME,
    Answers,
    DeployTarget,
    NuxtModule,
    UIFramework,
    validate_project_name,
)
from .prompts import PromptKind, PromptSpec, PromptSurface, RichPromptSurface


def validate_port(value: str) -> bool | str:
    """Return ``True`` for a TCP port in 1..65535, else the error message."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        return "Please enter a number"
    if 0 < port <= 65535:
        return True
    return "Please enter a port between 1 and 65535"


QUESTIONS: tuple[PromptSpec, ...] = (
    PromptSpec(
        kind=PromptKind.TEXT,
        name="name",
        message="What is the name of your app?",
        default=DEFAULT_PROJECT_NAME,
        validate=validate_project_name,
    ),
    PromptSpec(
        kind=PromptKind.INTEGER,
        name="port",
        message="Which localhost port do you want to use?",
        default=DEFAULT_PORT,
        validate=validate_port,
    ),
    PromptSpec(
        kind=PromptKind.MULTISELECT,
        name="ui_frameworks",
        message="Which UI/CSS framework do you want to use?",
        default=(UIFramework.TAILWINDCSS.value,),
        choices=tuple(f.value for f in UIFramework),
    ),
    PromptSpec(
        kind=PromptKind.CONFIRM,
        name="use_state",
        message="Do you want to use a Pinia state management?",
        default=False,
    ),
    PromptSpec(
        kind=PromptKind.MULTISELECT,
        name="nuxt_modules",
        message="Which Nuxt modules do you want to use?",
        default=(),
        choices=tuple(m.value for m in NuxtModule),
    ),
    PromptSpec(
        kind=PromptKind.SELECT,
        name="target",
        message="Where will you deploy your app?",
        default=DeployTarget.NODE_SERVER.value,
        choices=tuple(t.value for t in DeployTarget),
    ),
)

CONFIRMATION = PromptSpec(
    kind=PromptKind.CONFIRM,
    name="confirm",
    message="Is this correct?",
    default=True,
)


class AnswerCollector:
    """Asks the six setup questions, then asks the operator to confirm them.

    Errors from the surface (``NonInteractiveEnvironment``,
    ``PromptCancelled``) propagate unchanged.
    """

    def __init__(self, surface: PromptSurface | None = None) -> None:
        self.surface = surface if surface is not None else RichPromptSurface()

    def collect(self) -> Answers | None:
        """Run the questionnaire.

        Returns:
            The confirmed ``Answers``, or ``None`` if the operator declined
            the summary.
        """
        raw = {spec.name: self.surface.ask(spec) for spec in QUESTIONS}
        answers = Answers(
            name=raw["name"],
            port=int(raw["port"]),
            ui_frameworks=tuple(raw["ui_frameworks"] or ()),
            use_state=bool(raw["use_state"]),
            nuxt_modules=tuple(raw["nuxt_modules"] or ()),
            target=raw["target"],
        )

        console.print("Your selected configuration is:")
        print_summary_table(answers.summary(), title="Selected configuration")

        if not self.surface.ask(CONFIRMATION):
            return None
        return answers
