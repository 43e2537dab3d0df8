"""nuxtgen answer collector -- the interactive questionnaire.

Quick usage::

    from nuxtgen.collector import AnswerCollector

    answers = AnswerCollector().collect()
    if answers is None:
        ...  # operator declined
"""

from nuxtgen.collector.collector import CONFIRMATION, QUESTIONS, AnswerCollector, validate_port
from nuxtgen.collector.models import (
    Answers,
    DeployTarget,
    NuxtModule,
    UIFramework,
    validate_project_name,
)
from nuxtgen.collector.prompts import (
    PromptKind,
    PromptSpec,
    PromptSurface,
    RichPromptSurface,
    parse_multiselect,
)

__all__ = [
    "AnswerCollector",
    "Answers",
    "CONFIRMATION",
    "DeployTarget",
    "NuxtModule",
    "PromptKind",
    "PromptSpec",
    "PromptSurface",
    "QUESTIONS",
    "RichPromptSurface",
    "UIFramework",
    "parse_multiselect",
    "validate_port",
    "validate_project_name",
]
