"""Unit tests for the declared-link checker."""

from __future__ import annotations

import typing as typ

import pytest
import requests

from devfolio.config import parse_site_config
from devfolio.links import LinkChecker, LinkResult, collect_links

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

    from devfolio.config import SiteConfig


def _config() -> SiteConfig:
    return parse_site_config(
        {
            "siteMetadata": {
                "siteUrl": "https://example.com",
                "name": "Ada",
                "title": "ada.dev",
                "github": "https://github.com/ada",
                "linkedin": "",
                "projects": [
                    {"name": "Engine", "description": "d", "link": "https://engine.test/"},
                    {"name": "Notes", "description": "d", "link": ""},
                ],
                "experience": [
                    {"name": "Dup", "description": "d", "link": "https://github.com/ada"},
                ],
            }
        }
    )


def _response(mocker: MockerFixture, status: int) -> typ.Any:
    response = mocker.Mock()
    response.status_code = status
    return response


def test_collect_links_skips_empty_and_duplicates() -> None:
    """Links are collected in document order without blanks or repeats."""
    assert collect_links(_config()) == [
        ("siteUrl", "https://example.com"),
        ("github", "https://github.com/ada"),
        ("projects[1]", "https://engine.test/"),
    ]


def test_check_reports_status_per_link(mocker: MockerFixture) -> None:
    """Each link is probed with HEAD and its status recorded."""
    session = mocker.Mock(spec=requests.Session)
    session.head.side_effect = [
        _response(mocker, 200),
        _response(mocker, 301),
        _response(mocker, 404),
    ]

    results = LinkChecker(session=session, timeout=3.0).check(_config())

    assert [result.status for result in results] == [200, 301, 404]
    assert [result.ok for result in results] == [True, True, False]
    first_call = session.head.call_args_list[0]
    assert first_call.args[0] == "https://example.com"
    assert first_call.kwargs["timeout"] == 3.0
    assert "User-Agent" in first_call.kwargs["headers"]
    session.get.assert_not_called()


@pytest.mark.parametrize("head_status", [405, 501])
def test_head_rejection_falls_back_to_get(
    mocker: MockerFixture, head_status: int
) -> None:
    """Servers that refuse or do not implement HEAD are retried with GET."""
    session = mocker.Mock(spec=requests.Session)
    session.head.return_value = _response(mocker, head_status)
    session.get.return_value = _response(mocker, 200)

    result = LinkChecker(session=session).probe("github", "https://github.com/ada")

    assert result == LinkResult(label="github", url="https://github.com/ada", status=200)
    session.head.assert_called_once()
    session.get.assert_called_once()
    assert session.get.call_args.args[0] == "https://github.com/ada"


def test_other_head_failures_do_not_retry_with_get(mocker: MockerFixture) -> None:
    """Only HEAD-specific rejections trigger the GET retry."""
    session = mocker.Mock(spec=requests.Session)
    session.head.return_value = _response(mocker, 500)

    result = LinkChecker(session=session).probe("github", "https://github.com/ada")

    assert result.status == 500
    assert not result.ok
    session.get.assert_not_called()


def test_transport_error_marks_link_broken(mocker: MockerFixture) -> None:
    """Connection failures are captured rather than raised."""
    session = mocker.Mock(spec=requests.Session)
    session.head.side_effect = requests.ConnectionError("connection refused")

    result = LinkChecker(session=session).probe("siteUrl", "https://example.com")

    assert not result.ok
    assert result.status is None
    assert result.error == "connection refused"
