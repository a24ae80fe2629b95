"""Extraction engine: source id -> adapter dispatch.

The engine owns an `AdapterRegistry` populated once at construction with the
built-in boards. `extract` is safe to call concurrently for different
documents (adapters keep no per-call state). `register_adapter` takes the
registry's write lock, but callers should still register at startup rather
than while extractions are running.

Usage:
    engine = ExtractionEngine()
    doc = HtmlDocument.from_html(html, address="https://www.indeed.com/viewjob?jk=abc123")
    record = engine.extract_from_address(doc)
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, Iterator, List, Mapping, Optional, Protocol, Tuple

from .config import ExtractionSettings
from .document import Document, HtmlDocument
from .errors import AdapterNotFoundError, InvalidLocatorError
from .models import JobRecord
from .sources import DEFAULT_PROFILES, JobAdapter
from .utils import host_matches, hostname_of

logger = logging.getLogger(__name__)


class Extractor(Protocol):
    """Anything the engine can dispatch to; `JobAdapter` is the built-in one.

    Only `extract(document)` is required. The engine passes `now=` only when
    the caller pinned a reference time.
    """

    def extract(self, document: Document) -> JobRecord: ...


def _run_extractor(adapter: Extractor, document: Document, now: Optional[datetime]) -> JobRecord:
    if now is None:
        return adapter.extract(document)
    return adapter.extract(document, now=now)  # type: ignore[call-arg]


# Hostname (subdomains included) -> source id
HOSTNAME_SOURCES: Tuple[Tuple[str, str], ...] = tuple(
    (hostname, profile.name) for profile in DEFAULT_PROFILES for hostname in profile.hostnames
)


class AdapterRegistry:
    """Source id -> adapter map with serialized writes."""

    def __init__(self, adapters: Optional[Mapping[str, Extractor]] = None) -> None:
        self._adapters: Dict[str, Extractor] = {}
        self._lock = threading.Lock()
        for source_id, adapter in (adapters or {}).items():
            self.register(source_id, adapter)

    def register(self, source_id: str, adapter: Extractor) -> None:
        """Insert or replace the adapter for `source_id`."""
        if not callable(getattr(adapter, "extract", None)):
            raise TypeError(f"Adapter for '{source_id}' must provide an extract(document) method")
        with self._lock:
            # copy-on-write; lookups read without the lock
            adapters = dict(self._adapters)
            adapters[source_id] = adapter
            self._adapters = adapters

    def get(self, source_id: str) -> Extractor:
        adapter = self._adapters.get(source_id)
        if adapter is None:
            raise AdapterNotFoundError(source_id, available=list(self._adapters))
        return adapter

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._adapters

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._adapters))

    def __len__(self) -> int:
        return len(self._adapters)


class ExtractionEngine:
    """Dispatch documents to the adapter registered for their source."""

    def __init__(
        self,
        settings: Optional[ExtractionSettings] = None,
        registry: Optional[AdapterRegistry] = None,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.registry = registry if registry is not None else AdapterRegistry()
        for profile in DEFAULT_PROFILES:
            if profile.name not in self.registry:
                self.registry.register(profile.name, JobAdapter(profile, self.settings))

    def register_adapter(self, source_id: str, adapter: Extractor) -> None:
        self.registry.register(source_id, adapter)
        logger.info("Registered adapter for source '%s': %r", source_id, adapter)

    def supported_sources(self) -> List[str]:
        return sorted(self.registry)

    def extract(self, source_id: str, document: Document, now: Optional[datetime] = None) -> Optional[JobRecord]:
        """Extract one record with the adapter registered for `source_id`.

        Raises:
            AdapterNotFoundError: no adapter is registered for `source_id`.

        Returns:
            The record (check `is_valid`), or None when the adapter failed.
        """
        adapter = self.registry.get(source_id)
        try:
            return _run_extractor(adapter, document, now)
        except Exception:
            logger.exception("Failed to extract job data for source '%s' (%r)", source_id, document)
            return None

    def resolve_source(self, address: Optional[str]) -> Optional[str]:
        """Map an address to a source id using the fixed hostname table."""
        hostname = hostname_of(address)
        for domain, source_id in HOSTNAME_SOURCES:
            if host_matches(hostname, domain):
                return source_id
        return None

    def extract_from_address(
        self,
        document: Document,
        address: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Optional[JobRecord]:
        """Extract using the source implied by `address` (default: the document's own)."""
        address = address or getattr(document, "address", None)
        source_id = self.resolve_source(address)
        if source_id is None:
            logger.debug("No source matches address %r", address)
            return None
        return self.extract(source_id, document, now=now)

    def extract_all(
        self,
        source_id: str,
        document: HtmlDocument,
        card_locator: str,
        now: Optional[datetime] = None,
    ) -> List[JobRecord]:
        """Extract every job card on a listing page.

        Each node matching `card_locator` is extracted as its own document.
        Cards whose extraction fails are skipped; invalid records are kept.
        """
        adapter = self.registry.get(source_id)
        try:
            cards = document.select(card_locator)
        except InvalidLocatorError as exc:
            logger.warning("Invalid card locator for '%s': %s", source_id, exc)
            return []
        except Exception:
            logger.exception("Failed to list '%s' job cards with %r", source_id, card_locator)
            return []

        records: List[JobRecord] = []
        for card in cards:
            try:
                records.append(_run_extractor(adapter, document.scoped(card), now))
            except Exception:
                logger.exception("Failed to extract a '%s' job card", source_id)
        logger.info("Extracted %d of %d '%s' job cards", len(records), len(cards), source_id)
        return records
