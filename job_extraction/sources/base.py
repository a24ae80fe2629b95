"""Source profiles and the generic adapter that consumes them.

A job board is described entirely by data: which locators to try for each
field (in order) and how its addresses encode a job id. `JobAdapter` is the
single extraction routine shared by every board:

1. raw phase: walk each field's locator chain, first non-empty value wins
2. sanitize phase: hand the raw strings to `job_extraction.sanitize`
3. validate phase: attach `validate_job_data` errors to the record

An invalid locator only costs that locator (it is logged and skipped). Any
other failure while reading the document is raised as `ExtractionError`;
the engine turns it into a missing record.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Callable, Optional, Pattern, Tuple

from ..config import ExtractionSettings
from ..document import Document, Node
from ..errors import ExtractionError, InvalidLocatorError
from ..models import Company, JobMetadata, JobRecord, Location
from ..sanitize import (
    clean_description,
    clean_text,
    clean_url,
    extract_skills,
    is_remote_location,
    parse_date,
    parse_location,
    parse_number,
    parse_salary,
)
from ..utils import query_param, uniq_preserve_order
from ..validate import validate_job_data

logger = logging.getLogger(__name__)


Locators = Tuple[str, ...]

# Fallbacks shared by every board, tried after the profile's own rules.
GENERIC_JOB_ID_RE = re.compile(r"(?:jobs?/(?:view/)?|jk=)([a-zA-Z0-9]*\d[a-zA-Z0-9]*)")
JOB_ID_ATTRIBUTES: Tuple[str, ...] = ("data-job-id", "data-jk", "data-listing-id")


@dataclass(frozen=True)
class FieldLocators:
    """Ordered locator chains per field; the first non-empty match wins."""

    title: Locators = ()
    company_name: Locators = ()
    company_link: Locators = ()
    company_size: Locators = ()
    company_industry: Locators = ()
    location: Locators = ()
    salary: Locators = ()
    description: Locators = ()
    posted_date: Locators = ()
    job_type: Locators = ()
    applicant_count: Locators = ()
    experience_level: Locators = ()


@dataclass(frozen=True)
class SourceProfile:
    """Everything that distinguishes one job board from another."""

    name: str
    hostnames: Tuple[str, ...]
    locators: FieldLocators
    job_id_patterns: Tuple[Pattern[str], ...] = ()  # group 1 is the id
    job_id_params: Tuple[str, ...] = ()
    job_id_attributes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RawPosting:
    """Untouched strings read from a document, before any sanitizing."""

    title: Optional[str] = None
    company_name: Optional[str] = None
    company_link: Optional[str] = None
    company_size: Optional[str] = None
    company_industry: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    description: Optional[str] = None
    posted_date: Optional[str] = None
    job_type: Optional[str] = None
    applicant_count: Optional[str] = None
    experience_level: Optional[str] = None
    job_id: Optional[str] = None
    address: Optional[str] = None


def _node_text(node: Node) -> Optional[str]:
    return node.get_text(" ", strip=True) or None


def _node_attribute(name: str) -> Callable[[Node], Optional[str]]:
    def read(node: Node) -> Optional[str]:
        value = node.get(name)
        if isinstance(value, list):  # bs4 returns multi-valued attributes as lists
            value = " ".join(value)
        if not isinstance(value, str):
            return None
        return value.strip() or None

    return read


class JobAdapter:
    """Extract a `JobRecord` from one document using a `SourceProfile`."""

    def __init__(self, profile: SourceProfile, settings: Optional[ExtractionSettings] = None) -> None:
        self.profile = profile
        self.settings = settings or ExtractionSettings()

    @property
    def name(self) -> str:
        return self.profile.name

    def extract(self, document: Document, now: Optional[datetime] = None) -> JobRecord:
        raw = self.extract_raw(document)
        record = self.sanitize(raw, base_url=getattr(document, "base_url", None) or raw.address, now=now)
        return self.validate(record)

    # -- raw phase -----------------------------------------------------------------

    def extract_raw(self, document: Document) -> RawPosting:
        values = {}
        for f in fields(FieldLocators):
            locators = getattr(self.profile.locators, f.name)
            read = _node_attribute("href") if f.name == "company_link" else _node_text
            values[f.name] = self._first_match(document, f.name, locators, read)

        return RawPosting(
            **values,
            job_id=self.derive_job_id(document),
            address=getattr(document, "address", None),
        )

    def _first_match(
        self,
        document: Document,
        field: str,
        locators: Locators,
        read: Callable[[Node], Optional[str]],
    ) -> Optional[str]:
        """Try each locator in order and return the first non-empty value."""
        for locator in locators:
            try:
                node = document.select_one(locator)
                value = read(node) if node is not None else None
            except InvalidLocatorError as exc:
                logger.warning("%s: skipping locator for '%s': %s", self.name, field, exc)
                continue
            except Exception as exc:
                raise ExtractionError(field, locator, str(exc)) from exc
            if value:
                return value
        return None

    def derive_job_id(self, document: Document) -> Optional[str]:
        """Job id from the page address first, then from identifying attributes."""
        address = getattr(document, "address", None) or ""

        for pattern in self.profile.job_id_patterns:
            match = pattern.search(address)
            if match:
                return match.group(1)
        for param in self.profile.job_id_params:
            value = query_param(address, param)
            if value:
                return value
        match = GENERIC_JOB_ID_RE.search(address)
        if match:
            return match.group(1)

        for attr in uniq_preserve_order(self.profile.job_id_attributes + JOB_ID_ATTRIBUTES):
            value = self._first_match(document, "job_id", (f"[{attr}]",), _node_attribute(attr))
            if value:
                return value
        return None

    # -- sanitize phase ------------------------------------------------------------

    def sanitize(self, raw: RawPosting, base_url: Optional[str] = None, now: Optional[datetime] = None) -> JobRecord:
        settings = self.settings

        location = parse_location(
            Location(
                raw=raw.location,
                is_remote=is_remote_location(raw.location),
                country=settings.default_country,
            ),
            default_country=settings.default_country,
        )
        description = clean_description(raw.description, max_length=settings.description_max_length)

        return JobRecord(
            source=self.name,
            url=clean_url(raw.address),
            title=clean_text(raw.title),
            company=Company(
                name=clean_text(raw.company_name),
                link=clean_url(raw.company_link, base_url=base_url),
                size=clean_text(raw.company_size),
                industry=clean_text(raw.company_industry),
            ),
            location=location,
            salary=parse_salary(raw.salary, currency=settings.default_currency),
            description=description,
            metadata=JobMetadata(
                job_id=raw.job_id,
                posted_date=parse_date(raw.posted_date, now=now),
                applicant_count=parse_number(raw.applicant_count),
                job_type=clean_text(raw.job_type),
                experience_level=clean_text(raw.experience_level),
                skills=tuple(extract_skills(description, vocabulary=settings.skills)),
            ),
        )

    # -- validate phase ------------------------------------------------------------

    def validate(self, record: JobRecord) -> JobRecord:
        result = validate_job_data(record)
        if not result.is_valid:
            logger.info("%s: record %s failed validation: %s", self.name, record.metadata.job_id, list(result.errors))
        return record.model_copy(update={"validation_errors": result.errors})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source={self.name!r})"
