"""Tests for the Answers model and choice catalogs (nuxtgen.collector.models)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nuxtgen.collector.models import (
    INVALID_NAME_MESSAGE,
    Answers,
    DeployTarget,
    NuxtModule,
    UIFramework,
    validate_project_name,
)

pytestmark = pytest.mark.unit


class TestValidateProjectName:
    @pytest.mark.parametrize("name", ["demo", "my-nuxt3-app", "App-2", "a", "---", "ABC123"])
    def test_valid_names(self, name):
        assert validate_project_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", "my app", "my/app", "my_app", "app!", "app.name", "über", "a\tb", "../x"],
    )
    def test_invalid_names(self, name):
        assert validate_project_name(name) == INVALID_NAME_MESSAGE

    def test_trailing_newline_rejected(self):
        assert validate_project_name("demo\n") == INVALID_NAME_MESSAGE


class TestCatalogs:
    def test_ui_framework_order(self):
        assert [f.value for f in UIFramework] == [
            "tailwindcss",
            "tailwindui",
            "element-ui",
            "daisyui",
        ]

    def test_module_order(self):
        assert [m.value for m in NuxtModule] == [
            "Robots",
            "Image",
            "Strapi",
            "Directus",
            "Supabase",
            "Apollo",
            "i18n",
            "Content",
        ]

    def test_targets(self):
        assert [t.value for t in DeployTarget] == [
            "node-server",
            "vercel",
            "netlify",
            "cloudflare",
            "aws-lambda",
        ]


class TestAnswers:
    def test_defaults(self):
        answers = Answers(name="demo")
        assert answers.port == 3000
        assert answers.ui_frameworks == ()
        assert answers.use_state is False
        assert answers.nuxt_modules == ()
        assert answers.target is DeployTarget.NODE_SERVER

    def test_string_values_coerced_to_enums(self):
        answers = Answers(
            name="demo",
            ui_frameworks=["tailwindcss"],
            nuxt_modules=["Strapi", "i18n"],
            target="vercel",
        )
        assert answers.ui_frameworks == (UIFramework.TAILWINDCSS,)
        assert answers.nuxt_modules == (NuxtModule.STRAPI, NuxtModule.I18N)
        assert answers.target is DeployTarget.VERCEL

    def test_invalid_name_raises_validation_error(self):
        with pytest.raises(ValidationError) as excinfo:
            Answers(name="my app")
        assert INVALID_NAME_MESSAGE in str(excinfo.value)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Answers(name="")

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_out_of_range_port_rejected(self, port):
        with pytest.raises(ValidationError):
            Answers(name="demo", port=port)

    def test_unknown_module_rejected(self):
        with pytest.raises(ValidationError):
            Answers(name="demo", nuxt_modules=["Sanity"])

    def test_unknown_target_rejected(self):
        with pytest.raises(ValidationError):
            Answers(name="demo", target="heroku")

    def test_module_selection_order_preserved(self):
        answers = Answers(name="demo", nuxt_modules=["Content", "Robots", "Apollo"])
        assert [m.value for m in answers.nuxt_modules] == ["Content", "Robots", "Apollo"]

    def test_duplicates_removed_keeping_first(self):
        answers = Answers(name="demo", nuxt_modules=["Image", "Strapi", "Image"])
        assert [m.value for m in answers.nuxt_modules] == ["Image", "Strapi"]

    def test_frozen(self):
        answers = Answers(name="demo")
        with pytest.raises(ValidationError):
            answers.port = 4000

    def test_equal_answers_are_equal(self):
        assert Answers(name="demo", port=4000) == Answers(name="demo", port=4000)

    def test_summary(self):
        answers = Answers(
            name="demo",
            port=4000,
            ui_frameworks=["tailwindcss"],
            use_state=True,
            nuxt_modules=["Strapi", "i18n"],
            target="netlify",
        )
        assert answers.summary() == {
            "Name": "demo",
            "Port": "4000",
            "UI framework": "tailwindcss",
            "Pinia state": "yes",
            "Nuxt modules": "Strapi, i18n",
            "Deploy target": "netlify",
        }

    def test_summary_empty_selections(self):
        summary = Answers(name="demo").summary()
        assert summary["UI framework"] == "(none)"
        assert summary["Nuxt modules"] == "(none)"
        assert summary["Pinia state"] == "no"
