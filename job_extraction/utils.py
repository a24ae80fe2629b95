"""Utility helpers shared across the engine."""

from __future__ import annotations

import hashlib
from typing import Iterable, List, Optional
from urllib.parse import parse_qs, urlparse


def stable_id(*parts: Optional[str]) -> str:
    """Hash lower-cased, trimmed parts into a deterministic hex identifier."""
    joined = "|".join((p or "").strip().lower() for p in parts)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


def uniq_preserve_order(items: Iterable[str]) -> List[str]:
    """Drop case-insensitive duplicates and empties, keeping first-seen order."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it:
            continue
        key = it.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(it)
    return out


def hostname_of(address: Optional[str]) -> Optional[str]:
    if not address:
        return None
    try:
        host = urlparse(address).hostname
    except ValueError:
        return None
    return host.lower() if host else None


def host_matches(hostname: Optional[str], domain: str) -> bool:
    """True for the domain itself and any of its subdomains."""
    if not hostname:
        return False
    return hostname == domain or hostname.endswith("." + domain)


def query_param(address: Optional[str], name: str) -> Optional[str]:
    """First value of a query parameter in `address`, if present and non-empty."""
    if not address:
        return None
    try:
        values = parse_qs(urlparse(address).query).get(name)
    except ValueError:
        return None
    if not values or not values[0].strip():
        return None
    return values[0].strip()
