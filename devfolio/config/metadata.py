"""Builders for the ``siteMetadata`` block."""

from __future__ import annotations

import typing as typ

from .helpers import _optional_text, _optional_url, _require_text
from .models import EntryConfig, SiteConfigError, SiteMetadata, SkillConfig

ENTRY_SECTIONS = ("projects", "education", "experience")


def _build_site_metadata(payload: object) -> SiteMetadata:
    """Build the site metadata from the ``siteMetadata`` mapping."""
    match payload:
        case dict() as data:
            pass
        case None:
            msg = "Configuration requires a 'siteMetadata' block."
            raise SiteConfigError(msg)
        case _:
            msg = "'siteMetadata' must be a mapping."
            raise SiteConfigError(msg)

    where = "siteMetadata"
    _require_text(data, "siteUrl", where)
    site_url = _optional_url(data, "siteUrl", where)

    entries = {
        section: _build_entries(data.get(section), section) for section in ENTRY_SECTIONS
    }
    return SiteMetadata(
        site_url=site_url,
        name=_require_text(data, "name", where),
        title=_require_text(data, "title", where),
        description=_optional_text(data, "description", where),
        author=_optional_text(data, "author", where),
        github=_optional_url(data, "github", where),
        linkedin=_optional_url(data, "linkedin", where),
        about=_optional_text(data, "about", where),
        projects=entries["projects"],
        education=entries["education"],
        experience=entries["experience"],
        skills=_build_skills(data.get("skills")),
    )


def _section_items(value: object, section: str) -> list[typ.Any]:
    """Return the list stored for ``section``; a missing section is empty."""
    match value:
        case None:
            return []
        case list() as items:
            return items
        case _:
            msg = f"siteMetadata '{section}' must be a list."
            raise SiteConfigError(msg)


def _build_entries(value: object, section: str) -> list[EntryConfig]:
    """Build project, education, or experience entries for ``section``."""
    entries: list[EntryConfig] = []
    for index, entry in enumerate(_section_items(value, section), start=1):
        where = f"{section}[{index}]"
        if not isinstance(entry, dict):
            msg = f"{where} must be a mapping with 'name' and 'description'."
            raise SiteConfigError(msg)
        entries.append(
            EntryConfig(
                name=_require_text(entry, "name", where),
                description=_require_text(entry, "description", where),
                link=_optional_url(entry, "link", where),
                has_link="link" in entry,
            )
        )
    return entries


def _build_skills(value: object) -> list[SkillConfig]:
    """Build skill groups from the ``skills`` list."""
    skills: list[SkillConfig] = []
    for index, entry in enumerate(_section_items(value, "skills"), start=1):
        where = f"skills[{index}]"
        if not isinstance(entry, dict):
            msg = f"{where} must be a mapping with 'name' and 'description'."
            raise SiteConfigError(msg)
        skills.append(
            SkillConfig(
                name=_require_text(entry, "name", where),
                description=_require_text(entry, "description", where),
            )
        )
    return skills


__all__ = ["ENTRY_SECTIONS", "_build_entries", "_build_site_metadata", "_build_skills"]
