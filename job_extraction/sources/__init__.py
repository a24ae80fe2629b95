"""Per-source profiles and the generic adapter that runs them."""

from .base import FieldLocators, JobAdapter, RawPosting, SourceProfile
from .glassdoor import GLASSDOOR
from .indeed import INDEED
from .linkedin import LINKEDIN

DEFAULT_PROFILES = (LINKEDIN, INDEED, GLASSDOOR)

__all__ = [
    "DEFAULT_PROFILES",
    "FieldLocators",
    "GLASSDOOR",
    "INDEED",
    "JobAdapter",
    "LINKEDIN",
    "RawPosting",
    "SourceProfile",
]
