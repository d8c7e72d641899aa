"""Round-trip tests for re-emitting the site configuration."""

from __future__ import annotations

from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from ruamel.yaml import YAML

from devfolio.config import (
    dump_site_config,
    load_site_config,
    parse_site_config,
    render_site_config,
    write_site_config,
)

SITE_CONFIG = Path(__file__).resolve().parents[1] / "config" / "site.yaml"


@pytest.fixture
def site_config():
    """Load a fresh copy of the checked-in site configuration."""
    return load_site_config(SITE_CONFIG)


def test_dump_then_parse_is_stable(site_config) -> None:
    """Parsing the dumped mapping yields an equal configuration."""
    dumped = dump_site_config(site_config)
    reparsed = parse_site_config(dumped)

    assert reparsed == site_config, "expected parse(dump(config)) == config"
    assert dump_site_config(reparsed) == dumped, "expected dump to be idempotent"


def test_dump_keeps_declared_shapes(site_config) -> None:
    """Bare plugins stay strings and entry links appear only when declared."""
    dumped = dump_site_config(site_config)

    assert dumped["plugins"][0] == "gatsby-plugin-react-helmet"
    assert dumped["plugins"][1] == {
        "resolve": "gatsby-source-filesystem",
        "options": {"name": "images", "path": "src/images"},
    }
    education = dumped["siteMetadata"]["education"][0]
    assert education["link"] == "", "expected the explicit empty link to survive"
    assert "link" not in dumped["siteMetadata"]["skills"][0]


def test_entry_without_link_key_is_not_given_one() -> None:
    """An entry declared without ``link`` is emitted without one."""
    raw = {
        "siteMetadata": {
            "siteUrl": "https://example.com",
            "name": "Ada",
            "title": "ada.dev",
            "projects": [{"name": "Engine", "description": "Analytical"}],
        },
        "plugins": [{"resolve": "gatsby-plugin-feed"}],
    }
    dumped = dump_site_config(parse_site_config(raw))

    assert dumped["siteMetadata"]["projects"] == [
        {"name": "Engine", "description": "Analytical"}
    ]
    assert dumped["plugins"] == [{"resolve": "gatsby-plugin-feed"}]


def test_yaml_export_reloads_identically(site_config, tmp_path: Path) -> None:
    """Writing YAML and loading it back reproduces the configuration."""
    target = write_site_config(site_config, tmp_path / "out" / "site.yaml")

    assert target.exists(), "expected the YAML export to be written"
    assert load_site_config(target) == site_config
    text = target.read_text(encoding="utf-8")
    assert "about: |-" in text, "expected the multi-line bio as a literal block"


def test_yaml_export_is_idempotent(site_config, tmp_path: Path) -> None:
    """Exporting an exported file produces byte-identical YAML."""
    first = write_site_config(site_config, tmp_path / "first.yaml")
    second = write_site_config(load_site_config(first), tmp_path / "second.yaml")

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_yaml_export_is_plain_yaml(site_config) -> None:
    """The YAML text parses with the safe loader into the dumped mapping."""
    text = render_site_config(site_config, "yaml")
    parsed = YAML(typ="safe").load(text)

    assert parsed == dump_site_config(site_config)


def test_json_export(site_config, tmp_path: Path) -> None:
    """JSON export decodes back into the canonical mapping."""
    target = write_site_config(site_config, tmp_path / "site.json", fmt="json")
    decoded = msgspec_json.decode(target.read_bytes())

    assert decoded == dump_site_config(site_config)
    assert parse_site_config(decoded) == site_config
    assert "•" in target.read_text(encoding="utf-8"), "expected unescaped unicode"


def test_unknown_format_is_rejected(site_config) -> None:
    """Only yaml and json exports are supported."""
    with pytest.raises(ValueError, match="Unsupported export format 'toml'"):
        render_site_config(site_config, "toml")


def test_date_options_export_to_json(tmp_path: Path) -> None:
    """Unquoted YAML dates in plugin options survive a JSON export."""
    source = tmp_path / "site.yaml"
    source.write_text(
        "siteMetadata:\n"
        "  siteUrl: https://example.com\n"
        "  name: Ada\n"
        "  title: ada.dev\n"
        "plugins:\n"
        "  - resolve: gatsby-plugin-feed\n"
        "    options:\n"
        "      since: 2021-01-01\n"
        "      windows: [2021-01-01T08:30:00]\n",
        encoding="utf-8",
    )
    config = load_site_config(source)
    options = config.plugin_options("gatsby-plugin-feed")
    assert options["since"] == "2021-01-01", (
        f"expected an ISO date string, got {options['since']!r}"
    )
    assert options["windows"] == ["2021-01-01T08:30:00"]

    target = write_site_config(config, tmp_path / "site.json", fmt="json")
    decoded = msgspec_json.decode(target.read_bytes())
    assert parse_site_config(decoded) == config

    yaml_target = write_site_config(config, tmp_path / "again.yaml")
    assert load_site_config(yaml_target) == config


@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85", "\r"])
def test_unicode_line_breaks_survive_yaml_export(
    site_config, separator: str, tmp_path: Path
) -> None:
    """Strings holding non-newline YAML line breaks reload intact."""
    site_config.metadata.about = f"a{separator}b\nc"
    site_config.metadata.description = f"one{separator}line"
    text = render_site_config(site_config, "yaml")
    parsed = YAML(typ="safe").load(text)

    assert "about: |-" not in text, "expected an escaped scalar, not a literal block"
    assert parsed["siteMetadata"]["about"] == f"a{separator}b\nc"
    assert parsed["siteMetadata"]["description"] == f"one{separator}line"
    assert parse_site_config(parsed) == site_config

    target = write_site_config(site_config, tmp_path / "site.yaml")
    assert load_site_config(target) == site_config
