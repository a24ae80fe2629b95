"""
Unit tests for the sanitizer: text, urls, locations, salaries, dates, skills.

Run: python -m pytest tests/test_sanitize.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from job_extraction.config import ExtractionSettings
from job_extraction.models import Location, Salary
from job_extraction.sanitize import (
    clean_description,
    clean_location,
    clean_text,
    clean_url,
    extract_skills,
    is_remote_location,
    parse_date,
    parse_location,
    parse_number,
    parse_salary,
)

from .conftest import NOW


# =============================================================================
# Text
# =============================================================================

def test_clean_text_normalizes_whitespace_and_punctuation():
    assert clean_text("  Senior Software   Engineer!!!  ") == "Senior Software Engineer"
    assert clean_text("R&D Lead (Contract), O'Brien-Smith") == "R&D Lead (Contract), O'Brien-Smith"
    assert clean_text("Zero\u200bWidth") == "Zero Width"


@pytest.mark.parametrize("value", [None, 123, "", "   ", "!!!"])
def test_clean_text_returns_none_for_empty_or_non_string(value):
    assert clean_text(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "  Senior Software   Engineer!!!  ",
        "a ! b",
        "Café — Barista (part-time)",
        "\t\n",
        "#1 @ Tech*Co",
    ],
)
def test_clean_text_is_idempotent(value):
    once = clean_text(value)
    assert clean_text(once) == once


def test_clean_url():
    base = "https://www.linkedin.com/jobs/view/123/"
    assert clean_url("/company/acme", base_url=base) == "https://www.linkedin.com/company/acme"
    assert clean_url("example.com/jobs") == "https://example.com/jobs"
    assert clean_url("https://example.com") == "https://example.com/"
    assert clean_url("//cdn.example.com/a") == "https://cdn.example.com/a"


@pytest.mark.parametrize("value", [None, "", "/relative/without/base", "http://", 42])
def test_clean_url_rejects_unresolvable(value):
    assert clean_url(value) is None


def test_clean_description_strips_markup_and_truncates():
    html = "<p>Hello <b>world</b>!</p><p>Requirements: Python; SQL</p>"
    assert clean_description(html) == "Hello world Requirements: Python; SQL"
    assert len(clean_description("a" * 6000)) == 5000
    assert clean_description("abcdefghij klm", max_length=10) == "abcdefghij"
    assert clean_description(None) is None


# =============================================================================
# Location
# =============================================================================

def test_clean_location():
    assert clean_location("San Francisco; CA") == "San Francisco, CA"
    assert clean_location("Austin ,TX (Hybrid)") == "Austin, TX"
    assert clean_location("(Remote)") is None
    assert clean_location(None) is None


def test_parse_location_splits_parts():
    loc = parse_location(Location(raw="San Francisco, CA (Remote)"))

    assert loc.raw == "San Francisco, CA (Remote)"
    assert loc.formatted == "San Francisco, CA"
    assert loc.city == "San Francisco"
    assert loc.state == "CA"
    assert loc.country == "US"


def test_parse_location_uses_third_part_as_country():
    loc = parse_location(Location(raw="Berlin, BE, Germany, Europe"))
    assert (loc.city, loc.state, loc.country) == ("Berlin", "BE", "Germany")


def test_parse_location_single_part():
    loc = parse_location(Location(raw="Remote"))
    assert (loc.city, loc.state, loc.country) == ("Remote", None, "US")


def test_parse_location_without_raw_is_unchanged():
    loc = Location()
    assert parse_location(loc) is loc
    assert parse_location(None) is None


def test_parse_location_unparseable_raw_gets_default_country():
    loc = parse_location(Location(raw="(TBD)"), default_country="CA")
    assert loc.formatted is None
    assert loc.country == "CA"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Remote (US)", True),
        ("Work From Home", True),
        ("Anywhere in Europe", True),
        ("Austin, TX", False),
        (None, False),
    ],
)
def test_is_remote_location(raw, expected):
    assert is_remote_location(raw) is expected


# =============================================================================
# Salary
# =============================================================================

def test_parse_salary_range():
    salary = parse_salary("$80,000 - $120,000 a year")

    assert salary.raw == "$80,000 - $120,000 a year"
    assert salary.min == 80000
    assert salary.max == 120000
    assert salary.currency == "USD"
    assert salary.period == "yearly"
    assert salary.is_estimated is False


@pytest.mark.parametrize(
    "text,amount",
    [
        ("$50k", 50000),
        ("$1.2M", 1200000),
        ("$95,500.50", 95500.5),
    ],
)
def test_parse_salary_single_amount(text, amount):
    salary = parse_salary(text)
    assert salary.min == amount
    assert salary.max == amount


@pytest.mark.parametrize(
    "text,period,low,high",
    [
        ("$25 - $35 an hour", "hourly", 25, 35),
        ("$5,000 per month", "monthly", 5000, 5000),
        ("$5,000/month", "monthly", 5000, 5000),
        ("$50K/yr - $70K/yr", "yearly", 50000, 70000),
    ],
)
def test_parse_salary_period(text, period, low, high):
    salary = parse_salary(text)
    assert (salary.period, salary.min, salary.max) == (period, low, high)


def test_parse_salary_ignores_amounts_after_the_second():
    salary = parse_salary("$100,000 - $120,000 - $150,000")
    assert (salary.min, salary.max) == (100000, 120000)


def test_parse_salary_orders_bounds():
    salary = parse_salary("$120k - $90k")
    assert (salary.min, salary.max) == (90000, 120000)


def test_parse_salary_estimate_and_currency():
    salary = parse_salary("$90K - $110K (Employer Estimate)", currency="EUR")
    assert salary.is_estimated is True
    assert salary.currency == "EUR"


@pytest.mark.parametrize(
    "text,amount",
    [
        ("$5000mo", 5000),
        ("$4,500 mo", 4500),
        ("$60Kyr", 60),
        ("$60K yr", 60000),
    ],
)
def test_parse_salary_suffix_must_stand_alone(text, amount):
    salary = parse_salary(text)
    assert (salary.min, salary.max) == (amount, amount)


def test_parse_salary_without_amounts_keeps_raw():
    salary = parse_salary("Competitive")
    assert salary.raw == "Competitive"
    assert salary.min is None
    assert salary.max is None
    assert salary.period is None


@pytest.mark.parametrize("value", [None, "", "   ", 80000])
def test_parse_salary_empty(value):
    assert parse_salary(value) is None


# =============================================================================
# Dates and numbers
# =============================================================================

@pytest.mark.parametrize(
    "text,expected",
    [
        ("today", NOW),
        ("Posted Today", NOW),
        ("Yesterday", NOW - timedelta(days=1)),
        ("2 days ago", NOW - timedelta(days=2)),
        ("Posted 30+ days ago", NOW - timedelta(days=30)),
        ("1 day ago", NOW - timedelta(days=1)),
        ("3 weeks", NOW - timedelta(days=21)),
        ("Posted a week ago", NOW - timedelta(days=7)),
        ("2 months ago", datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)),
        ("1 month ago", datetime(2024, 2, 29, 12, 0, tzinfo=timezone.utc)),
        ("a month ago", datetime(2024, 2, 29, 12, 0, tzinfo=timezone.utc)),
        ("10 hours ago", NOW - timedelta(hours=10)),
        ("5 hours", NOW - timedelta(hours=5)),
        ("Posted an hour ago", NOW - timedelta(hours=1)),
        ("30 minutes ago", NOW - timedelta(minutes=30)),
        ("45 mins ago", NOW - timedelta(minutes=45)),
    ],
)
def test_parse_date_relative(text, expected):
    assert parse_date(text, now=NOW) == expected


def test_parse_date_absolute():
    assert parse_date("2024-01-15", now=NOW) == datetime(2024, 1, 15, tzinfo=timezone.utc)
    assert parse_date("March 3, 2023", now=NOW) == datetime(2023, 3, 3, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "not a date at all", 20240101])
def test_parse_date_unparseable(value):
    assert parse_date(value, now=NOW) is None


def test_parse_date_defaults_to_current_time():
    before = datetime.now(timezone.utc)
    result = parse_date("today")
    assert result.tzinfo is not None
    assert result >= before


@pytest.mark.parametrize(
    "text,expected",
    [
        ("142 applicants", 142),
        ("Over 200 applicants", 200),
        ("Be an early applicant", None),
        (None, None),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


# =============================================================================
# Skills
# =============================================================================

def test_extract_skills():
    skills = extract_skills("Python, Django and PostgreSQL; some DOCKER. Python again.")

    assert {"python", "django", "postgresql", "docker", "sql"} <= set(skills)
    assert len(skills) == len(set(skills))
    assert "rust" not in skills


def test_extract_skills_custom_vocabulary():
    assert extract_skills("Verilog and VHDL", vocabulary=["verilog", "vhdl", "spice"]) == ["verilog", "vhdl"]
    assert extract_skills("") == []
    assert extract_skills(None) == []


# =============================================================================
# Defaults
# =============================================================================

def test_sanitizer_defaults_match_settings_defaults():
    fields = ExtractionSettings.model_fields

    assert parse_salary("$50k").currency == fields["default_currency"].default
    assert Salary().currency == fields["default_currency"].default
    assert parse_location(Location(raw="Austin")).country == fields["default_country"].default
    assert len(clean_description("a" * 9000)) == fields["description_max_length"].default
