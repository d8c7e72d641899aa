"""Builders for the ordered ``plugins`` pipeline."""

from __future__ import annotations

from .helpers import _plain, _require_text
from .models import PluginSpec, SiteConfigError

NESTED_PLUGINS_KEY = "plugins"


def _build_plugins(value: object, *, where: str = "plugins") -> list[PluginSpec]:
    """Build plugin specs from a list of identifiers or ``resolve`` records."""
    match value:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = f"'{where}' must be a list."
            raise SiteConfigError(msg)
    return [
        _build_plugin(entry, f"{where}[{index}]")
        for index, entry in enumerate(items, start=1)
    ]


def _build_plugin(entry: object, where: str) -> PluginSpec:
    """Build a single plugin spec from a bare identifier or a mapping."""
    match entry:
        case str() as name:
            if not name.strip():
                msg = f"{where} must not be an empty plugin identifier."
                raise SiteConfigError(msg)
            return PluginSpec(resolve=name, bare=True)
        case dict() as data:
            resolve = _require_text(data, "resolve", where)
        case _:
            msg = f"{where} must be a plugin identifier or a mapping with 'resolve'."
            raise SiteConfigError(msg)

    options = data.get("options")
    match options:
        case None:
            options = {}
        case dict():
            options = _plain(options)
        case _:
            msg = f"{where} 'options' must be a mapping."
            raise SiteConfigError(msg)

    subplugins = _build_plugins(
        options.get(NESTED_PLUGINS_KEY), where=f"{where}.options.{NESTED_PLUGINS_KEY}"
    )
    return PluginSpec(resolve=resolve, options=options, subplugins=subplugins)


__all__ = ["NESTED_PLUGINS_KEY", "_build_plugin", "_build_plugins"]
