"""Tests for the semantic-search client (httpx mock transport, no network)."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from omegaconf import OmegaConf

from casebrowser.catalog.records import ScoredRecord
from casebrowser.search.client import SearchError, SemanticSearchClient


def _run_search(handler, query: str = "merger remedies", limit: int = 20) -> list[ScoredRecord]:
    async def scenario() -> list[ScoredRecord]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            client = SemanticSearchClient("http://search.test/", http=http)
            return await client.search(query, limit)

    return asyncio.run(scenario())


def test_search_sends_query_and_limit_and_maps_matches() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "matches": [
                    {
                        "score": 0.91,
                        "metadata": {
                            "case_number": "M.9000",
                            "year": 2021,
                            "policy_area": "Merger",
                            "topic": "Retail fuel",
                            "text": "Merger remedies were accepted.",
                            "link": "https://example.org/m9000.pdf",
                            "chunk_id": "ignored",
                        },
                    },
                    {"score": 0.5, "metadata": {"case_number": "AT.4000"}},
                ]
            },
        )

    results = _run_search(handler, query="merger remedies & M&A", limit=7)

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/search"
    assert request.url.params["q"] == "merger remedies & M&A"
    assert request.url.params["limit"] == "7"

    assert results[0] == ScoredRecord(
        case_number="M.9000",
        year="2021",
        policy_area="Merger",
        topic="Retail fuel",
        text="Merger remedies were accepted.",
        link="https://example.org/m9000.pdf",
        score=0.91,
    )
    assert results[1].case_number == "AT.4000"
    assert results[1].text == ""


def test_missing_score_becomes_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"matches": [{"metadata": {"case_number": "M.1"}}]})

    assert _run_search(handler)[0].score is None


def test_empty_body_yields_no_matches() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    assert _run_search(handler) == []


def test_http_error_status_raises_search_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "index unavailable"})

    with pytest.raises(SearchError, match="503"):
        _run_search(handler)


def test_non_json_body_raises_search_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(SearchError):
        _run_search(handler)


def test_invalid_payload_raises_search_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"matches": "not-a-list"})

    with pytest.raises(SearchError, match="invalid search response"):
        _run_search(handler)


def test_transport_error_raises_search_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SearchError, match="request failed"):
        _run_search(handler)


def test_from_config_reads_search_section() -> None:
    cfg = OmegaConf.create(
        {"search": {"base_url": "http://example.test/", "endpoint": "api/v2/search", "timeout_sec": 5.0}}
    )
    client = SemanticSearchClient.from_config(cfg)
    assert client.url == "http://example.test/api/v2/search"
    assert client.timeout == 5.0


def test_null_fields_do_not_drop_matches() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "matches": [
                    {"score": 0.9, "metadata": {"case_number": "M.1", "year": 2021.0, "text": "Merger remedies."}},
                    {
                        "score": 0.8,
                        "metadata": {
                            "case_number": "M.2",
                            "year": None,
                            "policy_area": None,
                            "topic": None,
                            "text": None,
                            "link": None,
                        },
                    },
                    {"score": None, "metadata": None},
                ]
            },
        )

    results = _run_search(handler)

    assert [r.case_number for r in results] == ["M.1", "M.2", ""]
    assert results[0].year == "2021"
    assert results[1].year == ""
    assert results[1].text == ""
    assert results[1].link == ""
    assert results[2].score is None


def test_malformed_match_is_skipped_and_rest_kept() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "matches": [
                    {"score": 0.9, "metadata": {"case_number": "M.1"}},
                    {"score": "not-a-number", "metadata": {"case_number": "M.2"}},
                    {"score": 0.7, "metadata": "not-an-object"},
                    {"score": 0.6, "metadata": {"case_number": "M.4", "year": True}},
                    {"score": 0.5, "metadata": {"case_number": "M.5"}},
                ]
            },
        )

    assert [r.case_number for r in _run_search(handler)] == ["M.1", "M.5"]


def test_null_matches_yields_empty_result() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"matches": None})

    assert _run_search(handler) == []
