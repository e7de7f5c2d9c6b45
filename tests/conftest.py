from __future__ import annotations

import json
from pathlib import Path

import pytest

from casebrowser.catalog.records import Record
from casebrowser.search.schema import CasePayload


def _write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


@pytest.fixture()
def baseline_rows() -> list[dict]:
    """25 cases spanning 2016-2024, alternating policy areas."""
    rows = []
    for i in range(25):
        rows.append(
            {
                "case_number": f"M.{9000 + i}",
                "year": str(2016 + (i % 9)),
                "policy_area": "Merger" if i % 2 == 0 else "Antitrust",
                "topic": f"Relevant market {i}",
                "text": f"The relevant product market for case {i} covers merger remedies in the EU.",
                "link": f"https://example.org/decisions/{i}.pdf",
            }
        )
    return rows


@pytest.fixture()
def baseline_records(baseline_rows: list[dict]) -> list[Record]:
    return [CasePayload.model_validate(row).to_record() for row in baseline_rows]


@pytest.fixture()
def baseline_file(tmp_path: Path, baseline_rows: list[dict]) -> Path:
    path = tmp_path / "data" / "database.json"
    _write_json(path, baseline_rows)
    return path
