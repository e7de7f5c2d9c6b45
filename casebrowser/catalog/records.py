"""Immutable case record types shared by the loader, search client and core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Record:
    """A single case entry from the baseline dataset or the search backend."""

    case_number: str
    year: str
    policy_area: str
    topic: str
    text: str
    link: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "case_number": self.case_number,
            "year": self.year,
            "policy_area": self.policy_area,
            "topic": self.topic,
            "text": self.text,
            "link": self.link,
        }


@dataclass(frozen=True)
class ScoredRecord(Record):
    """A record returned by semantic search, carrying its relevance score."""

    score: float | None = None

    @classmethod
    def from_record(cls, record: Record, score: float | None) -> ScoredRecord:
        return cls(
            case_number=record.case_number,
            year=record.year,
            policy_area=record.policy_area,
            topic=record.topic,
            text=record.text,
            link=record.link,
            score=score,
        )

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["score"] = self.score
        return out
