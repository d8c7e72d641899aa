"""Common literal values used across devfolio.

Plugin identifiers and file locations live here so the homepage builder, CLI,
and tests import the same values. Intended for internal use within the
devfolio package.

Examples
--------
>>> from devfolio import _constants
>>> _constants.MANIFEST_HREF
'/manifest.webmanifest'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_OUTPUT_DIR = Path("public")
HOMEPAGE_FILENAME = "index.html"

ANALYTICS_PLUGIN = "gatsby-plugin-google-analytics"
MANIFEST_PLUGIN = "gatsby-plugin-manifest"
TRACKING_ID_PLACEHOLDER = "ADD YOUR TRACKING ID HERE"
MANIFEST_HREF = "/manifest.webmanifest"
