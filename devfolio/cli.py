"""Cyclopts CLI entrypoint for building and inspecting the portfolio site.

The ``devfolio`` console script defined here renders the homepage from
``config/site.yaml``, validates the configuration (optionally probing every
declared link), and re-emits the normalized configuration as YAML or JSON.
Every parameter can also be supplied through an ``INPUT_*`` environment
variable so the same commands run unchanged in CI.

Examples
--------
Render the homepage for the default configuration:

>>> from devfolio.cli import main
>>> main()  # doctest: +SKIP

Export the normalized configuration as JSON:

>>> from devfolio.cli import app
>>> app(["export", "--format", "json", "--output", "site.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG, DEFAULT_OUTPUT_DIR
from .config import load_site_config, render_site_config, write_site_config
from .homepage import HomePageBuilder
from .links import LinkChecker, LinkCheckError

app = App(name="devfolio", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the portfolio homepage from the site config.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path,
        Parameter(help="Folder receiving index.html", env_var="INPUT_OUTPUT_DIR"),
    ] = DEFAULT_OUTPUT_DIR,
) -> None:
    """Render ``index.html`` for the configured site.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path, optional
        Directory receiving the rendered homepage (overridable via
        ``INPUT_OUTPUT_DIR``).
    """
    site_config = load_site_config(config)
    homepage_path = HomePageBuilder(site_config, output_dir=output_dir).run()
    print(f"wrote {_format_path(homepage_path)}")


@app.command(help="Validate the site config and summarise its contents.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    online: typ.Annotated[
        bool,
        Parameter(help="Also request every declared link", env_var="INPUT_ONLINE"),
    ] = False,
) -> None:
    """Load the configuration and print a summary of what it declares.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    online : bool, optional
        When true, probe every declared link over HTTP.

    Raises
    ------
    LinkCheckError
        If ``online`` is set and at least one link is broken.
    """
    site_config = load_site_config(config)
    metadata = site_config.metadata
    print(f"site: {metadata.title} ({metadata.site_url})")
    for label in ("projects", "education", "experience", "skills"):
        print(f"{label}: {len(getattr(metadata, label))}")
    plugin_names = ", ".join(plugin.resolve for plugin in site_config.plugins)
    print(f"plugins: {plugin_names or 'none'}")

    if not online:
        return
    results = LinkChecker().check(site_config)
    broken = [result for result in results if not result.ok]
    for result in broken:
        reason = result.error or f"HTTP {result.status}"
        print(f"broken link {result.label}: {result.url} ({reason})")
    if broken:
        labels = ", ".join(result.label for result in broken)
        msg = f"{len(broken)} of {len(results)} links are broken: {labels}"
        raise LinkCheckError(msg)
    print(f"links: {len(results)} ok")


@app.command(help="Re-emit the normalized site config as YAML or JSON.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    format: typ.Annotated[  # noqa: A002 - mirrors the CLI flag name
        str, Parameter(help="Output format (yaml or json)", env_var="INPUT_FORMAT")
    ] = "yaml",
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write to this file instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Serialize the validated configuration back out.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    format : str, optional
        One of ``yaml`` or ``json``.
    output : Path or None, optional
        Destination file; when ``None`` the text is printed to stdout.

    Raises
    ------
    ValueError
        If ``format`` is not a supported export format.
    """
    site_config = load_site_config(config)
    if output is None:
        print(render_site_config(site_config, format), end="")
        return
    write_site_config(site_config, output, fmt=format)
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``devfolio`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
