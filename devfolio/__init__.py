"""Build a single-page developer portfolio from a YAML site config.

This package exposes the CLI entry points used by ``uv run devfolio`` to
render the homepage, validate the configuration, and export it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from devfolio import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
