"""Typed dataclasses describing the portfolio site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class EntryConfig:
    """A project, education, or experience entry.

    ``has_link`` separates an explicit ``link: ''`` from an absent key so the
    entry serializes back to the shape it was declared in.
    """

    name: str
    description: str
    link: str = ""
    has_link: bool = False

    @property
    def href(self) -> str | None:
        """Return the link target, or None when the entry has no link."""
        return self.link.strip() or None


@dc.dataclass(slots=True)
class SkillConfig:
    """A named group of skills."""

    name: str
    description: str


@dc.dataclass(slots=True)
class PluginSpec:
    """A build plugin identifier with its opaque options."""

    resolve: str
    options: dict[str, typ.Any] = dc.field(default_factory=dict)
    bare: bool = False
    subplugins: list[PluginSpec] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class SiteMetadata:
    """Descriptive data injected into the homepage template."""

    site_url: str
    name: str
    title: str
    description: str = ""
    author: str = ""
    github: str = ""
    linkedin: str = ""
    about: str = ""
    projects: list[EntryConfig] = dc.field(default_factory=list)
    education: list[EntryConfig] = dc.field(default_factory=list)
    experience: list[EntryConfig] = dc.field(default_factory=list)
    skills: list[SkillConfig] = dc.field(default_factory=list)

    @property
    def twitter_url(self) -> str | None:
        """Return the Twitter profile URL for ``author``, if one is set."""
        handle = self.author.strip().lstrip("@")
        if not handle:
            return None
        return f"https://twitter.com/{handle}"


@dc.dataclass(slots=True)
class SiteConfig:
    """Site metadata alongside the ordered plugin pipeline."""

    metadata: SiteMetadata
    plugins: list[PluginSpec] = dc.field(default_factory=list)

    def find_plugins(self, resolve: str) -> list[PluginSpec]:
        """Return every plugin, nested ones included, declared as ``resolve``."""
        return [plugin for plugin in _walk(self.plugins) if plugin.resolve == resolve]

    def plugin_options(self, resolve: str) -> dict[str, typ.Any]:
        """Return the options of the first ``resolve`` plugin, or an empty dict."""
        matches = self.find_plugins(resolve)
        if not matches:
            return {}
        return matches[0].options

    def has_plugin(self, resolve: str) -> bool:
        """Return True when the pipeline declares ``resolve`` anywhere."""
        return bool(self.find_plugins(resolve))


def _walk(plugins: list[PluginSpec]) -> typ.Iterator[PluginSpec]:
    for plugin in plugins:
        yield plugin
        yield from _walk(plugin.subplugins)


__all__ = [
    "EntryConfig",
    "PluginSpec",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "SkillConfig",
]
