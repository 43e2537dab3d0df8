"""nuxtgen -- interactive scaffolder for opinionated TypeScript Nuxt 3 projects."""

__version__ = "0.1.0"
