"""Data models for the extraction engine.

The key idea: downstream consumers (deduplication, storage, auto-apply) should
see one *stable* record shape regardless of which job board a page came from.
Raw values are kept next to their normalized counterparts so a record can be
audited or re-parsed later without re-fetching the page.

All models are frozen: a record is a snapshot of one extraction. Callers that
need a fresher view run a new extraction.

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .config import DEFAULT_CURRENCY
from .utils import stable_id


SalaryPeriod = Literal["hourly", "daily", "monthly", "yearly"]

SALARY_PERIODS: Tuple[str, ...] = ("hourly", "daily", "monthly", "yearly")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Company(_Frozen):
    name: Optional[str] = None
    link: Optional[str] = None
    size: Optional[str] = None
    industry: Optional[str] = None


class Location(_Frozen):
    """Location as shown on the posting plus its best-effort structured parse."""

    raw: Optional[str] = Field(default=None, description="Location text as found on the page.")
    formatted: Optional[str] = None
    is_remote: bool = False
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class Salary(_Frozen):
    raw: Optional[str] = Field(default=None, description="Salary text as found on the page.")
    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = DEFAULT_CURRENCY
    period: Optional[SalaryPeriod] = None
    is_estimated: bool = False


class JobMetadata(_Frozen):
    job_id: Optional[str] = None
    posted_date: Optional[datetime] = None
    applicant_count: Optional[int] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None
    skills: Tuple[str, ...] = ()


class JobRecord(_Frozen):
    """The canonical output of one extraction.

    An invalid record is still a full record: `validation_errors` lists what
    failed, and every field that could be extracted is kept.
    """

    source: Optional[str] = Field(default=None, description="Adapter id, e.g. 'linkedin'.")
    url: Optional[str] = Field(default=None, description="Address of the extracted document.")

    title: Optional[str] = None
    company: Company = Field(default_factory=Company)
    location: Location = Field(default_factory=Location)
    salary: Optional[Salary] = None
    description: Optional[str] = None
    metadata: JobMetadata = Field(default_factory=JobMetadata)

    validation_errors: Tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.validation_errors

    def dedupe_key(self) -> str:
        """Deterministic key for spotting the same posting across sources."""
        return stable_id(self.company.name, self.title, self.location.formatted)


class ValidationResult(_Frozen):
    is_valid: bool
    errors: Tuple[str, ...] = ()
