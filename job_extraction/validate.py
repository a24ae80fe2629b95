"""Record validation.

Predicates here never raise: anything unexpected (wrong type, missing
attribute) simply fails the rule. Optional fields pass when absent.
`validate_job_data` checks every rule independently so a record with several
problems reports all of them.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, List

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .models import SALARY_PERIODS, ValidationResult

logger = logging.getLogger(__name__)


_NAME_RE = re.compile(r"^[a-zA-Z0-9\s\-.,()&]+$")
_JOB_ID_RE = re.compile(r"^[a-zA-Z0-9\-_]+$")

_ANY_URL = TypeAdapter(AnyUrl)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == value


def is_valid_title(title: Any) -> bool:
    if not isinstance(title, str):
        return False
    cleaned = title.strip()
    return 3 <= len(cleaned) <= 200 and bool(_NAME_RE.match(cleaned))


def is_valid_company(name: Any) -> bool:
    if not isinstance(name, str):
        return False
    cleaned = name.strip()
    return 1 <= len(cleaned) <= 100 and bool(_NAME_RE.match(cleaned))


def is_valid_location(location: Any) -> bool:
    if not isinstance(location, str):
        return False
    return 2 <= len(location.strip()) <= 100


def is_valid_salary(salary: Any) -> bool:
    """Salary is optional; when present its bounds, currency and period must make sense."""
    if salary is None:
        return True

    low = getattr(salary, "min", None)
    high = getattr(salary, "max", None)
    currency = getattr(salary, "currency", None)
    period = getattr(salary, "period", None)

    if low is not None and (not _is_number(low) or low < 0):
        return False
    if high is not None and (not _is_number(high) or high < 0):
        return False
    if low is not None and high is not None and low > high:
        return False
    if currency is not None and not isinstance(currency, str):
        return False
    if period is not None and period not in SALARY_PERIODS:
        return False
    return True


def is_valid_description(description: Any) -> bool:
    if description is None:
        return True
    return isinstance(description, str) and len(description) <= 10000


def is_valid_url(url: Any) -> bool:
    if url is None or url == "":
        return True
    if not isinstance(url, str):
        return False
    try:
        _ANY_URL.validate_python(url)
    except ValidationError:
        return False
    return True


def is_valid_date(value: Any) -> bool:
    if value is None:
        return True
    if not isinstance(value, datetime):
        return False
    try:
        value.timestamp()
    except (OverflowError, OSError, ValueError):
        return False
    return True


def is_valid_job_id(job_id: Any) -> bool:
    if job_id is None or job_id == "":
        return True
    return isinstance(job_id, str) and len(job_id) <= 50 and bool(_JOB_ID_RE.match(job_id))


def validate_job_data(record: Any) -> ValidationResult:
    """Run every rule against a (possibly partial) record and collect failures."""
    company = getattr(record, "company", None)
    location = getattr(record, "location", None)
    metadata = getattr(record, "metadata", None)

    checks = [
        (is_valid_title(getattr(record, "title", None)), "Invalid job title"),
        (is_valid_company(getattr(company, "name", None)), "Invalid company name"),
        (is_valid_location(getattr(location, "formatted", None)), "Invalid location"),
        (is_valid_salary(getattr(record, "salary", None)), "Invalid salary data"),
        (is_valid_description(getattr(record, "description", None)), "Invalid description"),
        (is_valid_url(getattr(company, "link", None)), "Invalid company URL"),
        (is_valid_url(getattr(record, "url", None)), "Invalid job URL"),
        (is_valid_date(getattr(metadata, "posted_date", None)), "Invalid posted date"),
        (is_valid_job_id(getattr(metadata, "job_id", None)), "Invalid job ID"),
    ]
    errors: List[str] = [message for ok, message in checks if not ok]

    if errors:
        logger.debug("Validation failed: %s", ", ".join(errors))
    return ValidationResult(is_valid=not errors, errors=tuple(errors))
