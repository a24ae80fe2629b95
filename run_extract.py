"""CLI entry point.

This script extracts job records from saved job pages (or a fetched URL) and
writes them to disk as a JSON list.

Examples:
    python run_extract.py page.html --url "https://www.linkedin.com/jobs/view/3456789" --out jobs.json
    python run_extract.py indeed.html --site indeed
    python run_extract.py --fetch "https://www.indeed.com/viewjob?jk=abc123def456"
    python run_extract.py search.html --site linkedin --cards "[data-job-id]"

The output is a list of dicts (serialized Pydantic models). Pages that cannot
be matched to a source or fail to extract are reported and skipped.
"""

from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import List, Optional

import httpx

from job_extraction import ExtractionEngine, ExtractionSettings, HtmlDocument, JobRecord
from job_extraction.errors import AdapterNotFoundError

logger = logging.getLogger("run_extract")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Extract normalized job records from job posting pages.")
    p.add_argument("pages", nargs="*", help="Saved HTML pages to extract.")
    p.add_argument("--url", type=str, default=None, help="Address the saved pages were captured from.")
    p.add_argument("--fetch", type=str, default=None, help="Fetch and extract this URL instead of local files.")
    p.add_argument("--site", type=str, default=None, help="Source id (linkedin, indeed, glassdoor). Inferred from the URL when omitted.")
    p.add_argument("--cards", type=str, default=None, help="CSS selector of job cards on a listing page.")
    p.add_argument("--out", type=str, default="jobs.json", help="Output JSON file path.")
    p.add_argument("--valid-only", action="store_true", help="Drop records that fail validation.")
    p.add_argument("--log-level", type=str, default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    return p.parse_args()


def fetch_page(url: str, settings: ExtractionSettings) -> str:
    """GET a page, backing off on 429 responses."""
    retries = 0
    with httpx.Client(timeout=settings.http_timeout_s, follow_redirects=True) as client:
        while True:
            try:
                resp = client.get(url, headers={"User-Agent": "Mozilla/5.0 (job-extraction)"})
                resp.raise_for_status()
                return resp.text
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code == 429 and retries < settings.http_max_retries:
                    sleep_s = settings.http_backoff_s * (2**retries)
                    logger.warning("Rate limited by %s, retrying in %.1fs", url, sleep_s)
                    time.sleep(sleep_s)
                    retries += 1
                    continue
                raise


def extract_page(engine: ExtractionEngine, document: HtmlDocument, site: Optional[str], cards: Optional[str]) -> List[JobRecord]:
    source_id = site or engine.resolve_source(document.address)
    if source_id is None:
        logger.warning("Cannot tell which source %r belongs to; pass --site", document.address)
        return []

    if cards:
        return engine.extract_all(source_id, document, cards)

    record = engine.extract(source_id, document)
    return [record] if record is not None else []


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = ExtractionSettings()
    engine = ExtractionEngine(settings=settings)

    documents: List[HtmlDocument] = []
    if args.fetch:
        try:
            html = fetch_page(args.fetch, settings)
        except httpx.HTTPError as exc:
            raise SystemExit(f"Failed to fetch {args.fetch}: {exc}")
        documents.append(HtmlDocument.from_html(html, address=args.fetch))
    for page in args.pages:
        path = Path(page).expanduser()
        documents.append(HtmlDocument.from_html(path.read_text(encoding="utf-8"), address=args.url))

    if not documents:
        raise SystemExit("Nothing to extract: pass HTML files or --fetch URL.")

    records: List[JobRecord] = []
    for document in documents:
        try:
            records.extend(extract_page(engine, document, args.site, args.cards))
        except AdapterNotFoundError as exc:
            raise SystemExit(f"{exc}")

    if args.valid_only:
        records = [r for r in records if r.is_valid]

    # Same posting seen twice (e.g. overlapping listing pages) is kept once.
    seen = set()
    unique: List[JobRecord] = []
    for record in records:
        if record.title or record.company.name:
            key = record.dedupe_key()
            if key in seen:
                continue
            seen.add(key)
        unique.append(record)

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    data = [r.model_dump(mode="json") for r in unique]
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    invalid = sum(1 for r in unique if not r.is_valid)
    print(f"Wrote {len(data)} jobs ({invalid} with validation errors) to: {out_path}")


if __name__ == "__main__":
    main()
