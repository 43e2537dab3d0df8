"""Package catalog: what each selectable option installs and contributes.

Each row is a ``ModuleSpec``.  Supporting a new Nuxt module means adding one
row to ``MODULE_CATALOG`` (and a member to ``NuxtModule``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nuxtgen.collector.models import NuxtModule, UIFramework

INSTALL_VERBS: dict[str, str] = {
    "npm": "npm i",
    "pnpm": "pnpm add",
    "yarn": "yarn add",
}


@dataclass(frozen=True)
class ModuleSpec:
    """One installable Nuxt module.

    Attributes:
        label: Display name used in progress output.
        package: npm package name, also the module-list entry.
        dev: Install as a development dependency.
        options: Inline module options, rendered as an object literal next to
            the package name in the ``modules`` array.
        config_block: Optional top-level ``nuxt.config.ts`` section owned by
            this module, written without indentation or trailing comma.
    """

    label: str
    package: str
    dev: bool = True
    options: tuple[tuple[str, str], ...] = field(default=())
    config_block: str | None = None

    @property
    def module_entry(self) -> str:
        """The literal placed in the ``modules`` array."""
        if not self.options:
            return f'"{self.package}"'
        opts = ", ".join(f'{key}: "{value}"' for key, value in self.options)
        return f'["{self.package}", {{ {opts} }}]'

    def install_command(self, package_manager: str = "npm") -> str:
        """Shell command that adds this package to the project."""
        try:
            verb = INSTALL_VERBS[package_manager]
        except KeyError:
            raise ValueError(f"Unsupported package manager: {package_manager}") from None
        if self.dev:
            return f"{verb} -D {self.package}"
        return f"{verb} {self.package}"


# ---------------------------------------------------------------------------
# UI frameworks
# ---------------------------------------------------------------------------

# ``None`` marks a framework that is offered but has no installer yet.
UI_FRAMEWORK_CATALOG: dict[UIFramework, ModuleSpec | None] = {
    UIFramework.TAILWINDCSS: ModuleSpec(label="TailwindCSS", package="@nuxtjs/tailwindcss"),
    UIFramework.TAILWINDUI: None,
    UIFramework.ELEMENT_UI: None,
    UIFramework.DAISYUI: None,
}


# ---------------------------------------------------------------------------
# State management
# ---------------------------------------------------------------------------

STATE_MODULE = ModuleSpec(label="Pinia", package="@pinia/nuxt")


# ---------------------------------------------------------------------------
# Nuxt feature modules
# ---------------------------------------------------------------------------

_STRAPI_BLOCK = """\
strapi: {
  url: process.env.STRAPI_URL || "http://localhost:1337",
  prefix: "/api",
}"""

_DIRECTUS_BLOCK = """\
directus: {
  url: process.env.DIRECTUS_URL || "http://localhost:8055",
}"""

_SUPABASE_BLOCK = """\
supabase: {
  url: process.env.SUPABASE_URL || "https://your-project.supabase.co",
  key: process.env.SUPABASE_KEY || "<public-anon-key>",
}"""

_APOLLO_BLOCK = """\
apollo: {
  clientConfigs: {
    default: {
      httpEndpoint: "http://localhost:1337/graphql",
    },
  },
}"""

MODULE_CATALOG: dict[NuxtModule, ModuleSpec] = {
    NuxtModule.ROBOTS: ModuleSpec(
        label="Robots",
        package="@nuxtjs/robots",
        dev=False,
        options=(("UserAgent", "*"), ("Disallow", "/")),
    ),
    NuxtModule.IMAGE: ModuleSpec(label="Image", package="@nuxt/image-edge"),
    NuxtModule.STRAPI: ModuleSpec(
        label="Strapi", package="@nuxtjs/strapi", config_block=_STRAPI_BLOCK
    ),
    NuxtModule.DIRECTUS: ModuleSpec(
        label="Directus", package="nuxt-directus", config_block=_DIRECTUS_BLOCK
    ),
    NuxtModule.SUPABASE: ModuleSpec(
        label="Supabase", package="@nuxtjs/supabase", config_block=_SUPABASE_BLOCK
    ),
    NuxtModule.APOLLO: ModuleSpec(
        label="Apollo", package="@nuxtjs/apollo", config_block=_APOLLO_BLOCK
    ),
    NuxtModule.I18N: ModuleSpec(label="i18n", package="@nuxtjs/i18n"),
    NuxtModule.CONTENT: ModuleSpec(label="Content", package="@nuxt/content"),
}
