"""Pydantic schemas for case payloads and semantic-search responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from casebrowser.catalog.records import Record, ScoredRecord


class CasePayload(BaseModel):
    """A case record as stored in the baseline JSON and search metadata.

    JSON ``null`` in any field is read as "", so an absent year sorts
    lowest and absent text is simply not highlighted.
    """
    model_config = ConfigDict(extra="ignore")

    case_number: str = Field(default="", description="Stable case identifier")
    year: str = Field(default="", description="Decision year")
    policy_area: str = Field(default="", description="Policy area label, e.g. 'Merger'")
    topic: str = Field(default="", description="Market or topic summary")
    text: str = Field(default="", description="Market definition prose")
    link: str = Field(default="", description="URI of the source decision")

    @field_validator("case_number", "policy_area", "topic", "text", "link", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def to_record(self) -> Record:
        return Record(
            case_number=self.case_number,
            year=self.year,
            policy_area=self.policy_area,
            topic=self.topic,
            text=self.text,
            link=self.link,
        )


class SearchMatch(BaseModel):
    """One ranked match returned by the search service."""
    model_config = ConfigDict(extra="ignore")

    score: float | None = Field(default=None, description="Relevance score; higher is better")
    metadata: CasePayload = Field(default_factory=CasePayload)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_scored_record(self) -> ScoredRecord:
        return ScoredRecord.from_record(self.metadata.to_record(), self.score)


class SearchResponse(BaseModel):
    """Full response body of ``GET /api/search``.

    Matches are validated one at a time so a single malformed match does
    not cost the rest of the result set.
    """
    model_config = ConfigDict(extra="ignore")

    matches: list[Any] = Field(default_factory=list)

    @field_validator("matches", mode="before")
    @classmethod
    def _null_matches(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_scored_records(self, warnings: list[str] | None = None) -> list[ScoredRecord]:
        records: list[ScoredRecord] = []
        for match_no, raw in enumerate(self.matches, start=1):
            try:
                records.append(SearchMatch.model_validate(raw).to_scored_record())
            except ValidationError as exc:
                if warnings is not None:
                    warnings.append(f"search match {match_no}: invalid ({str(exc)[:120]}); skipped")
        return records
