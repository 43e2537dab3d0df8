"""nuxtgen selection compiler -- answers to install plan and nuxt.config.ts.

Quick usage::

    from nuxtgen.compiler import compile_answers

    plan = compile_answers(answers)
    for action in plan.actions:
        print(action.command)
    print(plan.document.content)
"""

from nuxtgen.compiler.catalog import (
    MODULE_CATALOG,
    STATE_MODULE,
    UI_FRAMEWORK_CATALOG,
    ModuleSpec,
)
from nuxtgen.compiler.compiler import (
    CompiledPlan,
    ConfigDocument,
    InstallAction,
    SelectionCompiler,
    Stage,
    compile_answers,
)
from nuxtgen.compiler.templates import TemplateRenderer

__all__ = [
    "CompiledPlan",
    "ConfigDocument",
    "InstallAction",
    "MODULE_CATALOG",
    "ModuleSpec",
    "STATE_MODULE",
    "SelectionCompiler",
    "Stage",
    "TemplateRenderer",
    "UI_FRAMEWORK_CATALOG",
    "compile_answers",
]
