"""Runtime settings for the extraction engine.

Every value has a sensible default; any of them can be overridden through
environment variables prefixed with ``JOB_EXTRACTION_`` (for example
``JOB_EXTRACTION_DEFAULT_CURRENCY=EUR``) or by passing an explicit
``ExtractionSettings`` to the engine.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CURRENCY = "USD"
DEFAULT_COUNTRY = "US"
DESCRIPTION_MAX_LENGTH = 5000

# Vocabulary used for skill tagging of descriptions. Matching is a plain
# case-insensitive substring test, so short entries like "go" over-match.
DEFAULT_SKILLS: Tuple[str, ...] = (
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "sql",
    "aws",
    "html",
    "css",
    "angular",
    "vue",
    "docker",
    "kubernetes",
    "git",
    "mongodb",
    "postgresql",
    "redis",
    "graphql",
    "typescript",
    "go",
    "rust",
    "swift",
    "kotlin",
    "flutter",
    "react native",
    "django",
    "flask",
    "spring",
    "express",
    "fastapi",
    "tensorflow",
    "pytorch",
)


class ExtractionSettings(BaseSettings):
    """Extraction settings"""

    model_config = SettingsConfigDict(env_prefix="JOB_EXTRACTION_", extra="ignore", frozen=True)

    # Normalization defaults
    default_currency: str = DEFAULT_CURRENCY
    default_country: str = DEFAULT_COUNTRY
    description_max_length: int = Field(default=DESCRIPTION_MAX_LENGTH, gt=0)
    skills: Tuple[str, ...] = DEFAULT_SKILLS

    # Used by the CLI when it fetches pages itself
    http_timeout_s: float = 20.0
    http_max_retries: int = 3
    http_backoff_s: float = 2.0
