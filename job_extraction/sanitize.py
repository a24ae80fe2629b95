"""Sanitization of raw values pulled out of job pages.

Everything here is a pure function of its inputs (plus an explicit `now` for
dates). Nothing knows which job board a value came from; adapters feed raw
strings in and get cleaned text or typed values back:

- text/url/description cleanup
- location splitting into city/state/country
- salary range parsing (K/M suffixes, pay period, estimates)
- relative ("3 days ago") and absolute posting dates
- skill tagging against a fixed vocabulary

Keeping these rules in one place makes every adapter behave the same way and
keeps the quirks testable without any HTML around.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional
from urllib.parse import urljoin

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta
from pydantic import HttpUrl, TypeAdapter, ValidationError

from .config import DEFAULT_COUNTRY, DEFAULT_CURRENCY, DEFAULT_SKILLS, DESCRIPTION_MAX_LENGTH
from .models import Location, Salary
from .utils import uniq_preserve_order


REMOTE_KEYWORDS = ["remote", "work from home", "wfh", "anywhere", "distributed"]

# Non-breaking and typographic spaces; U+200B is not matched by \s.
_SPACE_VARIANTS_RE = re.compile("[\u00a0\u2000-\u200b]")
_WHITESPACE_RE = re.compile(r"\s+")
_TEXT_DISALLOWED_RE = re.compile(r"[^\w\s\-.,'()&]")
_DESCRIPTION_DISALLOWED_RE = re.compile(r"[^\w\s\-.,'()&:;]")
_TAG_RE = re.compile(r"<[^>]*>")
_PARENS_RE = re.compile(r"\([^()]*\)")
_SEPARATOR_RE = re.compile(r"\s*[,;]\s*")
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")

# A K/M suffix only counts when no other letter follows it ("5000mo" is not 5000M).
_SALARY_TOKEN_RE = re.compile(r"\d[\d,]*(?:\.\d+)?(?:[KkMm](?![A-Za-z]))?")

_DIGITS_RE = re.compile(r"\d+")
_MINUTES_RE = re.compile(r"\b(?:minutes?|mins?)\b")
_HOURS_RE = re.compile(r"\b(?:hours?|hrs?)\b")
_DAYS_AGO_RE = re.compile(r"\bdays?\s+ago\b")
_WEEKS_RE = re.compile(r"(\d+)\s*weeks?")
_MONTHS_RE = re.compile(r"(\d+)\s*months?")

_HTTP_URL = TypeAdapter(HttpUrl)


def clean_text(text: Any) -> Optional[str]:
    """Normalize whitespace and drop characters outside a conservative allow-list.

    Returns None for non-strings and for values that end up empty, which makes
    the function idempotent: clean_text(clean_text(x)) == clean_text(x).
    """
    if not isinstance(text, str):
        return None
    out = _SPACE_VARIANTS_RE.sub(" ", text)
    out = _TEXT_DISALLOWED_RE.sub("", out)
    out = _WHITESPACE_RE.sub(" ", out).strip()
    return out or None


def clean_url(url: Any, base_url: Optional[str] = None) -> Optional[str]:
    """Return an absolute, canonical http(s) URL or None.

    Root-relative paths are resolved against `base_url` (usually the address
    of the page being extracted); scheme-less values get ``https://``.
    """
    if not isinstance(url, str):
        return None
    url = url.strip()
    if not url:
        return None

    if url.startswith("//"):
        url = "https:" + url
    elif url.startswith("/"):
        if not base_url:
            return None
        url = urljoin(base_url, url)
    elif not _SCHEME_RE.match(url):
        url = "https://" + url

    try:
        return str(_HTTP_URL.validate_python(url))
    except ValidationError:
        return None


def clean_location(location: Any) -> Optional[str]:
    """Clean a location string: no parentheticals, uniform ", " separators."""
    if not isinstance(location, str):
        return None
    # ';' is outside clean_text's allow-list, so turn it into ',' first
    cleaned = clean_text(_SEPARATOR_RE.sub(", ", location))
    if not cleaned:
        return None

    while True:
        cleaned, n = _PARENS_RE.subn("", cleaned)
        if not n:
            break
    cleaned = _SEPARATOR_RE.sub(", ", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip(" ,")
    return cleaned or None


def parse_location(location: Optional[Location], default_country: str = DEFAULT_COUNTRY) -> Optional[Location]:
    """Fill formatted/city/state/country from `location.raw`.

    The cleaned text is split on commas; the first three parts become city,
    state and country. Country falls back to `default_country`. A location
    without raw text is returned unchanged.
    """
    if location is None or not location.raw:
        return location

    cleaned = clean_location(location.raw)
    if not cleaned:
        return location.model_copy(
            update={"formatted": None, "country": location.country or default_country}
        )

    parts = [p.strip() for p in cleaned.split(",")]
    return location.model_copy(
        update={
            "formatted": cleaned,
            "city": parts[0] or None,
            "state": (parts[1] or None) if len(parts) > 1 else None,
            "country": (parts[2] or default_country) if len(parts) > 2 else default_country,
        }
    )


def is_remote_location(raw_location: Optional[str]) -> bool:
    """Keyword test on the raw location text, independent of the parsed parts."""
    text = (raw_location or "").lower()
    return any(kw in text for kw in REMOTE_KEYWORDS)


def _parse_amount(token: str) -> float:
    amount = float(token.rstrip("KkMm").replace(",", ""))
    lowered = token.lower()
    if "k" in lowered:
        amount *= 1_000
    elif "m" in lowered:
        amount *= 1_000_000
    return round(amount, 2)


def parse_salary(text: Any, currency: str = DEFAULT_CURRENCY) -> Optional[Salary]:
    """Parse free-text compensation like "$80,000 - $120,000 a year" or "$50k".

    Only the first two amounts are used; anything after them is ignored.
    A K/M suffix scales the amount it is attached to. Text without any amount
    still yields a Salary carrying the raw text, with no bounds or period.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    lowered = text.lower()
    is_estimated = "estimate" in lowered

    tokens = _SALARY_TOKEN_RE.findall(text)
    if not tokens:
        return Salary(raw=text, min=None, max=None, currency=currency, period=None, is_estimated=is_estimated)

    low = _parse_amount(tokens[0])
    high = _parse_amount(tokens[1]) if len(tokens) > 1 else low
    if low > high:
        low, high = high, low

    if "hour" in lowered:
        period = "hourly"
    elif "month" in lowered:
        period = "monthly"
    else:
        period = "yearly"

    return Salary(
        raw=text,
        min=low,
        max=high,
        currency=currency,
        period=period,
        is_estimated=is_estimated,
    )


def clean_description(text: Any, max_length: int = DESCRIPTION_MAX_LENGTH) -> Optional[str]:
    """Strip markup and odd characters from a description and cap its length."""
    if not isinstance(text, str):
        return None
    out = _TAG_RE.sub(" ", text)
    out = _SPACE_VARIANTS_RE.sub(" ", out)
    out = _DESCRIPTION_DISALLOWED_RE.sub("", out)
    out = _WHITESPACE_RE.sub(" ", out).strip()
    return out[:max_length].rstrip() or None


def _first_int(pattern: re.Pattern, text: str, default: int) -> int:
    match = pattern.search(text)
    return int(match.group(1) if match.groups() else match.group(0)) if match else default


def parse_date(text: Any, now: Optional[datetime] = None) -> Optional[datetime]:
    """Resolve a posting date relative to `now`.

    Handles "today", "yesterday", "N minutes/hours ago", "N days ago",
    "N weeks" and "N months" (calendar months, not 30-day blocks). Anything
    else goes through dateutil's parser; unparseable text gives None.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    now = now or datetime.now(timezone.utc)
    cleaned = text.lower().strip()

    if "today" in cleaned:
        return now
    if "yesterday" in cleaned:
        return now - timedelta(days=1)
    if _MINUTES_RE.search(cleaned):
        return now - timedelta(minutes=_first_int(_DIGITS_RE, cleaned, 1))
    if _HOURS_RE.search(cleaned):
        return now - timedelta(hours=_first_int(_DIGITS_RE, cleaned, 1))
    if _DAYS_AGO_RE.search(cleaned):
        return now - timedelta(days=_first_int(_DIGITS_RE, cleaned, 0))
    if "week" in cleaned:
        return now - timedelta(weeks=_first_int(_WEEKS_RE, cleaned, 1))
    if "month" in cleaned:
        return now - relativedelta(months=_first_int(_MONTHS_RE, cleaned, 1))

    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        parsed = date_parser.parse(text.strip(), default=midnight)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None and now.tzinfo is not None:
        parsed = parsed.replace(tzinfo=now.tzinfo)
    return parsed


def parse_number(text: Any) -> Optional[int]:
    """First run of digits in `text` as an int ("142 applicants" -> 142)."""
    if not isinstance(text, str):
        return None
    match = _DIGITS_RE.search(text)
    return int(match.group(0)) if match else None


def extract_skills(description: Any, vocabulary: Iterable[str] = DEFAULT_SKILLS) -> List[str]:
    """Return vocabulary entries found in the description (substring match)."""
    if not isinstance(description, str) or not description:
        return []
    blob = description.lower()
    return uniq_preserve_order(skill for skill in vocabulary if skill.lower() in blob)
