"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .metadata import _build_site_metadata
from .models import SiteConfig, SiteConfigError
from .plugins import _build_plugins

if typ.TYPE_CHECKING:
    from pathlib import Path

TOP_LEVEL_KEYS = ("siteMetadata", "plugins")


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing site metadata and the plugin pipeline.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with validated metadata and plugin specs.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing, empty, or malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from devfolio.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.metadata.title  # doctest: +SKIP
    'madhav.me'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return parse_site_config(loaded)


def parse_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Validate an already-decoded configuration mapping.

    This is the inverse of :func:`devfolio.config.dump_site_config`.
    """
    unknown = sorted(str(key) for key in raw if key not in TOP_LEVEL_KEYS)
    if unknown:
        msg = f"Unknown top-level keys: {', '.join(unknown)}."
        raise SiteConfigError(msg)
    return SiteConfig(
        metadata=_build_site_metadata(raw.get("siteMetadata")),
        plugins=_build_plugins(raw.get("plugins")),
    )


__all__ = ["TOP_LEVEL_KEYS", "load_site_config", "parse_site_config"]
