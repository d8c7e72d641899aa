r"""Probe the external links declared in the site metadata.

The portfolio lists a site URL, profile links, and per-entry links. This
module collects them in document order and issues lightweight HTTP requests
so broken links surface before a deploy. Requests go through a
``requests.Session`` mounted with a urllib3 ``Retry`` adapter; ``HEAD`` is
tried first and servers that refuse it are retried with ``GET``.

Example
-------
>>> from pathlib import Path
>>> from devfolio.config import load_site_config
>>> from devfolio.links import LinkChecker
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> broken = [r for r in LinkChecker().check(config) if not r.ok]  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from http import HTTPStatus

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config.metadata import ENTRY_SECTIONS

if typ.TYPE_CHECKING:
    from .config import SiteConfig

_USER_AGENT = "devfolio-link-check/0.1"
_HEAD_REJECTED = frozenset({HTTPStatus.METHOD_NOT_ALLOWED, HTTPStatus.NOT_IMPLEMENTED})


class LinkCheckError(RuntimeError):
    """Raised when one or more declared links are broken."""


@dc.dataclass(slots=True)
class LinkResult:
    """Outcome of probing a single link.

    Attributes
    ----------
    label : str
        Where the link was declared, e.g. ``"projects[1]"`` or ``"github"``.
    url : str
        The probed URL.
    status : int | None
        Final HTTP status code, or ``None`` when the request failed.
    error : str | None
        Transport error text when no response was received.
    """

    label: str
    url: str
    status: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return True when the link answered with a non-error status."""
        return (
            self.error is None
            and self.status is not None
            and self.status < HTTPStatus.BAD_REQUEST
        )


def collect_links(config: SiteConfig) -> list[tuple[str, str]]:
    """Return ``(label, url)`` pairs for every declared link, without duplicates."""
    metadata = config.metadata
    candidates: list[tuple[str, str]] = [
        ("siteUrl", metadata.site_url),
        ("github", metadata.github),
        ("linkedin", metadata.linkedin),
    ]
    for section in ENTRY_SECTIONS:
        entries = getattr(metadata, section)
        for index, entry in enumerate(entries, start=1):
            candidates.append((f"{section}[{index}]", entry.link))

    links: list[tuple[str, str]] = []
    seen: set[str] = set()
    for label, url in candidates:
        normalized = url.strip()
        if not normalized or normalized in seen:
            continue
        seen.add(normalized)
        links.append((label, normalized))
    return links


class LinkChecker:
    """Issue HEAD/GET requests against declared links."""

    def __init__(
        self, *, session: requests.Session | None = None, timeout: float = 10.0
    ) -> None:
        """Initialise the checker with an optional preconfigured session.

        Parameters
        ----------
        session : requests.Session, optional
            Session used for every request. Defaults to a new session mounted
            with a retrying adapter.
        timeout : float, optional
            Per-request timeout in seconds. Defaults to ``10.0``.
        """
        self._session = session or _build_session()
        self.timeout = timeout
        self._headers = {"User-Agent": _USER_AGENT}

    def check(self, config: SiteConfig) -> list[LinkResult]:
        """Probe every link in ``config`` and return the results in order."""
        return [self.probe(label, url) for label, url in collect_links(config)]

    def probe(self, label: str, url: str) -> LinkResult:
        """Return the result of requesting ``url``."""
        try:
            response = self._session.head(
                url, headers=self._headers, timeout=self.timeout, allow_redirects=True
            )
            if response.status_code in _HEAD_REJECTED:
                response = self._session.get(
                    url,
                    headers=self._headers,
                    timeout=self.timeout,
                    allow_redirects=True,
                )
        except requests.RequestException as exc:
            return LinkResult(label=label, url=url, error=str(exc))
        return LinkResult(label=label, url=url, status=response.status_code)


def _build_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


__all__ = ["LinkCheckError", "LinkChecker", "LinkResult", "collect_links"]
