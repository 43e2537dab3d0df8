"""Answer model and choice catalogs for the interactive questionnaire.

The enums double as the closed catalogs offered by the prompts: their
declaration order is the order shown to the operator and, for UI frameworks,
the order in which the compiler processes them.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]+$")
INVALID_NAME_MESSAGE = "Please enter a valid name"

DEFAULT_PROJECT_NAME = "my-nuxt3-app"
DEFAULT_PORT = 3000


class UIFramework(str, Enum):
    TAILWINDCSS = "tailwindcss"
    TAILWINDUI = "tailwindui"
    ELEMENT_UI = "element-ui"
    DAISYUI = "daisyui"


class NuxtModule(str, Enum):
    ROBOTS = "Robots"
    IMAGE = "Image"
    STRAPI = "Strapi"
    DIRECTUS = "Directus"
    SUPABASE = "Supabase"
    APOLLO = "Apollo"
    I18N = "i18n"
    CONTENT = "Content"


class DeployTarget(str, Enum):
    NODE_SERVER = "node-server"
    VERCEL = "vercel"
    NETLIFY = "netlify"
    CLOUDFLARE = "cloudflare"
    AWS_LAMBDA = "aws-lambda"


def validate_project_name(value: str) -> bool | str:
    """Return ``True`` for a usable project name, else the error message.

    Only ASCII letters, digits and hyphens are accepted, since the name
    becomes both a directory and a shell argument.
    """
    if PROJECT_NAME_PATTERN.fullmatch(value or ""):
        return True
    return INVALID_NAME_MESSAGE


def _dedupe(values: list[Any]) -> list[Any]:
    seen: set[Any] = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class Answers(BaseModel):
    """The operator's confirmed selections.

    Frozen after construction.  ``nuxt_modules`` keeps the order in which the
    operator picked the modules; that order decides the layout of the
    generated configuration.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    port: int = Field(default=DEFAULT_PORT, gt=0, le=65535)
    ui_frameworks: tuple[UIFramework, ...] = Field(default=())
    use_state: bool = Field(default=False)
    nuxt_modules: tuple[NuxtModule, ...] = Field(default=())
    target: DeployTarget = Field(default=DeployTarget.NODE_SERVER)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        result = validate_project_name(value)
        if result is not True:
            raise ValueError(result)
        return value

    @field_validator("ui_frameworks", "nuxt_modules", mode="after")
    @classmethod
    def _drop_duplicates(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(_dedupe(list(value)))

    def summary(self) -> dict[str, str]:
        """Human-readable ``{label: value}`` view used by the confirmation step."""
        return {
            "Name": self.name,
            "Port": str(self.port),
            "UI framework": ", ".join(f.value for f in self.ui_frameworks) or "(none)",
            "Pinia state": "yes" if self.use_state else "no",
            "Nuxt modules": ", ".join(m.value for m in self.nuxt_modules) or "(none)",
            "Deploy target": self.target.value,
        }
