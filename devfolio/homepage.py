"""Portfolio homepage rendering pipeline.

This module turns a loaded :class:`~devfolio.config.SiteConfig` into the static
``public/index.html`` artefact. It wires the configuration model, the Jinja
environment, and the filesystem writes required to render the single-page
portfolio: header and contact links, the markdown "about" blurb, and the
projects, experience, education, and skills sections. The main entry point is
``HomePageBuilder``.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from devfolio.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> output_path = builder.run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
public/index.html

Plugin options are read, never executed: the analytics tracking ID and the
manifest theme colour only feed markup in the page head.
"""

from __future__ import annotations

import datetime as dt
import inspect
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markdown import markdown

from ._constants import (
    ANALYTICS_PLUGIN,
    DEFAULT_OUTPUT_DIR,
    HOMEPAGE_FILENAME,
    MANIFEST_HREF,
    MANIFEST_PLUGIN,
    TRACKING_ID_PLACEHOLDER,
)

if typ.TYPE_CHECKING:
    from .config import EntryConfig, SiteConfig, SkillConfig

MARKDOWN_EXTENSIONS = ["sane_lists", "smarty"]


class HomePageBuilder:
    """Render the portfolio homepage from structured config data."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        output_dir: Path = DEFAULT_OUTPUT_DIR,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : SiteConfig
            Parsed ``config/site.yaml``; provides the metadata rendered on the
            page and the plugin options consulted for the page head.
        output_dir : Path, optional
            Directory receiving ``index.html``. Defaults to ``public``.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``devfolio/templates`` when not supplied.
        """
        self.config = config
        self.output_dir = output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["skill_items"] = skill_items
        self.template = self.env.get_template("home_page.jinja")

    @property
    def output_path(self) -> Path:
        """Return the path the homepage is written to."""
        return self.output_dir / HOMEPAGE_FILENAME

    def run(self) -> Path:
        """Render and write the homepage HTML, returning the output path.

        Notes
        -----
        Parent directories are created as needed, the rendered HTML always ends
        with a newline, and filesystem errors propagate to the caller.
        """
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        html = self.render()
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def render(self) -> str:
        """Return the rendered homepage HTML without touching the filesystem."""
        return self.template.render(**self._context())

    def _context(self) -> dict[str, typ.Any]:
        metadata = self.config.metadata
        return {
            "site": metadata,
            "about_html": _render_about(metadata.about),
            "contact_links": self._contact_links(),
            "sections": self._sections(),
            "skills": metadata.skills,
            "tracking_id": self._tracking_id(),
            "manifest_href": MANIFEST_HREF
            if self.config.has_plugin(MANIFEST_PLUGIN)
            else None,
            "theme_color": self._theme_color(),
            "generated_at": dt.datetime.now(dt.UTC),
        }

    def _contact_links(self) -> list[dict[str, str]]:
        metadata = self.config.metadata
        candidates = [
            ("GitHub", metadata.github.strip()),
            ("LinkedIn", metadata.linkedin.strip()),
            ("Twitter", metadata.twitter_url or ""),
        ]
        return [{"label": label, "href": href} for label, href in candidates if href]

    def _sections(self) -> list[dict[str, typ.Any]]:
        metadata = self.config.metadata
        candidates: list[tuple[str, str, list[EntryConfig]]] = [
            ("projects", "Projects", metadata.projects),
            ("experience", "Experience", metadata.experience),
            ("education", "Education", metadata.education),
        ]
        return [
            {"slug": slug, "heading": heading, "entries": entries}
            for slug, heading, entries in candidates
            if entries
        ]

    def _tracking_id(self) -> str | None:
        for plugin in self.config.find_plugins(ANALYTICS_PLUGIN):
            value = plugin.options.get("trackingId")
            if not isinstance(value, str):
                continue
            tracking_id = value.strip()
            if tracking_id and tracking_id != TRACKING_ID_PLACEHOLDER:
                return tracking_id
        return None

    def _theme_color(self) -> str | None:
        value = self.config.plugin_options(MANIFEST_PLUGIN).get("theme_color")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None


def _render_about(text: str) -> str:
    # Continuation lines of the bio are commonly indented in the YAML source.
    normalized = inspect.cleandoc(text or "")
    if not normalized:
        return ""
    return markdown(normalized, extensions=MARKDOWN_EXTENSIONS, output_format="html")


def skill_items(skill: SkillConfig) -> list[str]:
    """Split a bullet-separated skill description into individual items."""
    return [item.strip() for item in skill.description.split("•") if item.strip()]


__all__ = ["HomePageBuilder", "skill_items"]
