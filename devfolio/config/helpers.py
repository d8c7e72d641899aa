"""Utility helpers shared by the site configuration builders."""

from __future__ import annotations

import datetime as dt
import typing as typ
from urllib.parse import urlsplit

from .models import SiteConfigError

URL_SCHEMES = frozenset({"http", "https"})


def _is_absolute_url(value: str) -> bool:
    """Return True when ``value`` is an absolute http(s) URL with a host."""
    if not value or value != value.strip():
        return False
    try:
        parsed = urlsplit(value)
    except ValueError:
        return False
    return parsed.scheme.lower() in URL_SCHEMES and bool(parsed.netloc)


def _require_text(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return the non-empty string stored under ``key`` or raise."""
    value = payload.get(key)
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise SiteConfigError(msg)
    if not isinstance(value, str):
        msg = f"{where} '{key}' must be a string, got {type(value).__name__}."
        raise SiteConfigError(msg)
    if not value.strip():
        msg = f"{where} '{key}' must not be empty."
        raise SiteConfigError(msg)
    return value


def _optional_text(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return the string stored under ``key``, defaulting to an empty string."""
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{where} '{key}' must be a string, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return value


def _optional_url(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return an optional URL string, validating it when non-empty."""
    value = _optional_text(payload, key, where)
    if value.strip() and not _is_absolute_url(value):
        msg = f"{where} '{key}' must be an absolute http(s) URL, got {value!r}."
        raise SiteConfigError(msg)
    return value


def _plain(value: object) -> typ.Any:
    """Copy YAML containers into plain dicts and lists.

    Timestamps are kept as ISO 8601 strings so options stay JSON-serializable.
    """
    match value:
        case dt.date():
            return value.isoformat()
        case dict():
            return {str(key): _plain(item) for key, item in value.items()}
        case list() | tuple():
            return [_plain(item) for item in value]
        case set() | frozenset():
            return [_plain(item) for item in sorted(value, key=str)]
        case _:
            return value


__all__ = [
    "URL_SCHEMES",
    "_is_absolute_url",
    "_optional_text",
    "_optional_url",
    "_plain",
    "_require_text",
]
