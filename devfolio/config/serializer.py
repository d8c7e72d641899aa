"""Re-emit a :class:`SiteConfig` as the mapping it was loaded from.

``dump_site_config`` is the inverse of
:func:`devfolio.config.parse_site_config`: parsing its output yields an equal
``SiteConfig``, and dumping that again yields an identical mapping. The
writers on top of it produce YAML (via the ruamel round-trip dumper) or JSON.

Examples
--------
>>> from devfolio.config import dump_site_config, parse_site_config
>>> raw = {
...     "siteMetadata": {"siteUrl": "https://example.com", "name": "A", "title": "a"},
...     "plugins": ["gatsby-plugin-react-helmet"],
... }
>>> config = parse_site_config(raw)
>>> parse_site_config(dump_site_config(config)) == config
True
"""

from __future__ import annotations

import copy
import io
import json
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.scalarstring import DoubleQuotedScalarString, LiteralScalarString

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import EntryConfig, PluginSpec, SiteConfig, SiteMetadata

EXPORT_FORMATS = ("yaml", "json")
# YAML treats these as line breaks too; strings holding them are emitted escaped.
_EXTRA_LINE_BREAKS = "\r\x85\u2028\u2029"


def dump_site_config(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the canonical ``{"siteMetadata": ..., "plugins": ...}`` mapping."""
    return {
        "siteMetadata": _dump_metadata(config.metadata),
        "plugins": [_dump_plugin(plugin) for plugin in config.plugins],
    }


def render_site_config(config: SiteConfig, fmt: str = "yaml") -> str:
    """Serialize ``config`` to YAML or JSON text.

    Raises
    ------
    ValueError
        If ``fmt`` is not one of :data:`EXPORT_FORMATS`.
    """
    payload = dump_site_config(config)
    match fmt.lower():
        case "yaml":
            yaml = _build_roundtrip_yaml()
            buffer = io.StringIO()
            yaml.dump(_literal_blocks(payload), buffer)
            return buffer.getvalue()
        case "json":
            return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
        case _:
            msg = f"Unsupported export format '{fmt}'. Expected one of: yaml, json."
            raise ValueError(msg)


def write_site_config(config: SiteConfig, path: Path, *, fmt: str = "yaml") -> Path:
    """Write ``config`` to ``path`` in the requested format and return the path."""
    text = render_site_config(config, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _dump_metadata(metadata: SiteMetadata) -> dict[str, typ.Any]:
    return {
        "siteUrl": metadata.site_url,
        "name": metadata.name,
        "title": metadata.title,
        "description": metadata.description,
        "author": metadata.author,
        "github": metadata.github,
        "linkedin": metadata.linkedin,
        "about": metadata.about,
        "projects": [_dump_entry(entry) for entry in metadata.projects],
        "education": [_dump_entry(entry) for entry in metadata.education],
        "experience": [_dump_entry(entry) for entry in metadata.experience],
        "skills": [
            {"name": skill.name, "description": skill.description}
            for skill in metadata.skills
        ],
    }


def _dump_entry(entry: EntryConfig) -> dict[str, str]:
    payload = {"name": entry.name, "description": entry.description}
    if entry.has_link:
        payload["link"] = entry.link
    return payload


def _dump_plugin(plugin: PluginSpec) -> str | dict[str, typ.Any]:
    if plugin.bare:
        return plugin.resolve
    payload: dict[str, typ.Any] = {"resolve": plugin.resolve}
    if plugin.options:
        payload["options"] = copy.deepcopy(plugin.options)
    return payload


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _literal_blocks(value: typ.Any) -> typ.Any:
    """Mark multi-line strings for block-literal output where that is lossless."""
    match value:
        case dict():
            return {key: _literal_blocks(item) for key, item in value.items()}
        case list():
            return [_literal_blocks(item) for item in value]
        case str() if any(char in value for char in _EXTRA_LINE_BREAKS):
            # Only escapes keep these intact; plain and single-quoted styles fold them.
            return DoubleQuotedScalarString(value)
        case str() if "\n" in value and _literal_safe(value):
            return LiteralScalarString(value)
        case _:
            return value


def _literal_safe(text: str) -> bool:
    lines = text.split("\n")
    return all(line == line.rstrip() for line in lines) and not text.endswith("\n")


__all__ = [
    "EXPORT_FORMATS",
    "dump_site_config",
    "render_site_config",
    "write_site_config",
]
