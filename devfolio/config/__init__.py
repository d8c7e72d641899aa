"""Load, validate, and re-emit the portfolio site configuration.

This subpackage parses ``config/site.yaml``, which holds a ``siteMetadata``
block (name, bio, contact links, projects/education/experience/skills lists)
and an ordered ``plugins`` pipeline, into strongly typed dataclasses
(:class:`SiteConfig`, :class:`SiteMetadata`, :class:`PluginSpec`). The primary
entry point is :func:`load_site_config`; :func:`dump_site_config` and
:func:`write_site_config` emit the same shape back out.

Examples
--------
>>> from pathlib import Path
>>> from devfolio.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.metadata.projects[0].name  # doctest: +SKIP
'NHL Scores App'
"""

from .loader import load_site_config, parse_site_config
from .models import (
    EntryConfig,
    PluginSpec,
    SiteConfig,
    SiteConfigError,
    SiteMetadata,
    SkillConfig,
)
from .serializer import (
    EXPORT_FORMATS,
    dump_site_config,
    render_site_config,
    write_site_config,
)

__all__ = [
    "EXPORT_FORMATS",
    "EntryConfig",
    "PluginSpec",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "SkillConfig",
    "dump_site_config",
    "load_site_config",
    "parse_site_config",
    "render_site_config",
    "write_site_config",
]
