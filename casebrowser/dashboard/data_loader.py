"""Baseline dataset loading for the catalog dashboard.

This module is streamlit-free; the app wraps ``load_baseline`` in
``st.cache_data``. Every failure degrades to fewer records plus a warning.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import httpx
from pydantic import ValidationError

from casebrowser.catalog.records import Record
from casebrowser.search.schema import CasePayload
from casebrowser.utils.logger import setup_logger

log = setup_logger(__name__)


@dataclass
class BaselineLoad:
    records: list[Record] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def warnings_count(self) -> int:
        return len(self.warnings)


def _warn(warnings: list[str], message: str) -> None:
    warnings.append(message[:300])
    log.warning(message[:300])


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_json(source: str, *, timeout: float | None) -> object:
    if _is_url(source):
        response = httpx.get(source, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    path = Path(source).expanduser()
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def parse_records(payload: object, warnings: list[str]) -> list[Record]:
    """Convert a decoded JSON array into records, skipping malformed rows."""
    if not isinstance(payload, list):
        _warn(warnings, f"baseline is not a JSON array (got {type(payload).__name__}); using empty dataset")
        return []
    records: list[Record] = []
    for row_no, row in enumerate(payload, start=1):
        if not isinstance(row, dict):
            _warn(warnings, f"baseline row {row_no}: not an object; skipped")
            continue
        try:
            records.append(CasePayload.model_validate(row).to_record())
        except ValidationError as exc:
            _warn(warnings, f"baseline row {row_no}: invalid record ({str(exc)[:120]}); skipped")
    return records


def load_baseline(source: str | Path, *, timeout: float | None = 30.0) -> BaselineLoad:
    """Load the baseline dataset from a local JSON file or an http(s) URL."""
    result = BaselineLoad()
    text_source = str(source)
    try:
        payload = _fetch_json(text_source, timeout=timeout)
    except FileNotFoundError:
        _warn(result.warnings, f"{text_source}: baseline not found; using empty dataset")
        return result
    except (OSError, ValueError, httpx.HTTPError) as exc:
        _warn(result.warnings, f"{text_source}: failed to load baseline ({str(exc)[:120]})")
        return result

    result.records = parse_records(payload, result.warnings)
    log.debug("Loaded %d baseline records from %s", len(result.records), text_source)
    return result
