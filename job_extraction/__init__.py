"""Job posting extraction package.

The package turns rendered job pages from different boards into one stable,
validated record shape:
- `models.py` defines the record schema consumers can rely on.
- `sources/` describes each board (locators, job id rules) and holds the
  generic adapter that reads a page with them.
- `sanitize.py` and `validate.py` contain the deterministic cleanup and rules.
- `engine.py` dispatches a page to the right adapter and isolates failures.
"""

from .config import ExtractionSettings
from .document import Document, HtmlDocument
from .engine import AdapterRegistry, ExtractionEngine
from .errors import AdapterNotFoundError, ExtractionError, InvalidLocatorError, JobExtractionError
from .models import Company, JobMetadata, JobRecord, Location, Salary, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "AdapterNotFoundError",
    "AdapterRegistry",
    "Company",
    "Document",
    "ExtractionEngine",
    "ExtractionError",
    "ExtractionSettings",
    "HtmlDocument",
    "InvalidLocatorError",
    "JobExtractionError",
    "JobMetadata",
    "JobRecord",
    "Location",
    "Salary",
    "ValidationResult",
]
