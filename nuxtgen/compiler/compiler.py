"""Selection compiler: confirmed answers in, install plan and config out.

The compiler is a pure function of its input.  It runs nothing and writes
nothing; the installer executes the returned plan.

Processing order is part of the output contract because it decides the order
of the ``modules`` array and of the trailing config blocks:

1. UI frameworks, in catalog order.
2. Pinia, when state management was requested.
3. Nuxt modules, in the order the operator selected them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from nuxtgen.collector.models import Answers, NuxtModule, UIFramework
from nuxtgen.errors import UnknownModule

from .catalog import MODULE_CATALOG, STATE_MODULE, UI_FRAMEWORK_CATALOG, ModuleSpec
from .templates import NUXT_CONFIG_TEMPLATE, TemplateRenderer


class Stage(str, Enum):
    UI = "ui"
    STATE = "state"
    MODULE = "module"


@dataclass(frozen=True)
class InstallAction:
    """One package install plus what it contributes to ``nuxt.config.ts``."""

    label: str
    stage: Stage
    command: str
    module_entry: str
    config_block: str | None = None


@dataclass(frozen=True)
class ConfigDocument:
    """The generated ``nuxt.config.ts``, both structured and rendered."""

    preset: str
    port: int
    modules: tuple[str, ...]
    build_modules: tuple[str, ...]
    blocks: tuple[str, ...]
    content: str


@dataclass(frozen=True)
class CompiledPlan:
    """Everything the installer needs for one run.

    Attributes:
        actions: Install actions in processing order.
        document: The configuration document to write.
        unsupported: UI frameworks that were selected but have no installer.
    """

    actions: tuple[InstallAction, ...]
    document: ConfigDocument
    unsupported: tuple[str, ...] = ()

    def actions_for(self, stage: Stage) -> tuple[InstallAction, ...]:
        return tuple(a for a in self.actions if a.stage == stage)

    @property
    def commands(self) -> list[str]:
        return [a.command for a in self.actions]


class SelectionCompiler:
    """Maps an ``Answers`` value to a ``CompiledPlan``.

    Args:
        package_manager: ``npm``, ``pnpm`` or ``yarn``; decides the install
            command syntax.
        renderer: Template renderer for the config document.
        module_catalog: Nuxt module table.  Every selectable module must have
            a row, otherwise ``compile`` raises ``UnknownModule``.
        ui_catalog: UI framework table.  ``None`` rows are accepted but
            produce no action.
    """

    def __init__(
        self,
        package_manager: str = "npm",
        renderer: TemplateRenderer | None = None,
        module_catalog: Mapping[NuxtModule, ModuleSpec] = MODULE_CATALOG,
        ui_catalog: Mapping[UIFramework, ModuleSpec | None] = UI_FRAMEWORK_CATALOG,
    ) -> None:
        self.package_manager = package_manager
        self.renderer = renderer or TemplateRenderer()
        self.module_catalog = module_catalog
        self.ui_catalog = ui_catalog

    # -- Public API --------------------------------------------------------

    def compile(self, answers: Answers) -> CompiledPlan:
        ui_actions, unsupported = self._ui_actions(answers)
        actions = (
            ui_actions
            + self._state_actions(answers)
            + self._module_actions(answers)
        )
        document = self._assemble(answers, actions)
        return CompiledPlan(
            actions=tuple(actions),
            document=document,
            unsupported=tuple(unsupported),
        )

    # -- Stages ------------------------------------------------------------

    def _action(self, spec: ModuleSpec, stage: Stage) -> InstallAction:
        return InstallAction(
            label=spec.label,
            stage=stage,
            command=spec.install_command(self.package_manager),
            module_entry=spec.module_entry,
            config_block=spec.config_block,
        )

    def _ui_actions(self, answers: Answers) -> tuple[list[InstallAction], list[str]]:
        actions: list[InstallAction] = []
        unsupported: list[str] = []
        selected = set(answers.ui_frameworks)
        for framework in UIFramework:
            if framework not in selected:
                continue
            if framework not in self.ui_catalog:
                raise UnknownModule(framework.value)
            spec = self.ui_catalog[framework]
            if spec is None:
                unsupported.append(framework.value)
                continue
            actions.append(self._action(spec, Stage.UI))
        return actions, unsupported

    def _state_actions(self, answers: Answers) -> list[InstallAction]:
        if not answers.use_state:
            return []
        return [self._action(STATE_MODULE, Stage.STATE)]

    def _module_actions(self, answers: Answers) -> list[InstallAction]:
        actions: list[InstallAction] = []
        for module in answers.nuxt_modules:
            spec = self.module_catalog.get(module)
            if spec is None:
                raise UnknownModule(getattr(module, "value", str(module)))
            actions.append(self._action(spec, Stage.MODULE))
        return actions

    # -- Document ----------------------------------------------------------

    def _assemble(self, answers: Answers, actions: list[InstallAction]) -> ConfigDocument:
        modules = tuple(a.module_entry for a in actions)
        blocks = tuple(a.config_block for a in actions if a.config_block)
        build_modules: tuple[str, ...] = ()
        context = {
            "preset": answers.target.value,
            "port": answers.port,
            "modules": modules,
            "build_modules": build_modules,
            "blocks": blocks,
        }
        content = self.renderer.render(NUXT_CONFIG_TEMPLATE, context)
        return ConfigDocument(
            preset=answers.target.value,
            port=answers.port,
            modules=modules,
            build_modules=build_modules,
            blocks=blocks,
            content=content,
        )


def compile_answers(answers: Answers, package_manager: str = "npm") -> CompiledPlan:
    """Compile *answers* with the default catalogs and templates."""
    return SelectionCompiler(package_manager=package_manager).compile(answers)
