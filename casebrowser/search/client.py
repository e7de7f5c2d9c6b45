"""HTTP client for the semantic-search service."""

from __future__ import annotations

import httpx
from omegaconf import DictConfig
from pydantic import ValidationError

from casebrowser.catalog.records import ScoredRecord
from casebrowser.search.schema import SearchResponse
from casebrowser.utils.logger import setup_logger

log = setup_logger(__name__)


class SearchError(RuntimeError):
    """Raised when the search service cannot produce a usable response."""


class SemanticSearchClient:
    """Async client for ``GET {base_url}{endpoint}?q=...&limit=...``.

    A shared ``httpx.AsyncClient`` may be injected (tests use one backed by
    ``httpx.MockTransport``); otherwise a short-lived client is opened per
    request so the instance is safe to reuse across event loops.
    """

    def __init__(
        self,
        base_url: str,
        endpoint: str = "/api/search",
        timeout: float | None = 30.0,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = str(base_url).rstrip("/")
        self.endpoint = "/" + str(endpoint).lstrip("/")
        self.timeout = timeout
        self._http = http

    @classmethod
    def from_config(cls, cfg: DictConfig, http: httpx.AsyncClient | None = None) -> SemanticSearchClient:
        search_cfg = cfg.search
        return cls(
            base_url=search_cfg.base_url,
            endpoint=search_cfg.get("endpoint", "/api/search"),
            timeout=search_cfg.get("timeout_sec", 30.0),
            http=http,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.endpoint}"

    async def search(self, query: str, limit: int) -> list[ScoredRecord]:
        """Return ranked matches for ``query``.

        Individual malformed matches are logged and skipped.

        Raises:
            SearchError: on transport failure, non-success status, or a body
                that is not a valid search response.
        """
        params = {"q": query, "limit": int(limit)}
        log.debug("GET %s q=%r limit=%d", self.url, query, int(limit))
        try:
            if self._http is not None:
                response = await self._http.get(self.url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as http:
                    response = await http.get(self.url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SearchError(f"search returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise SearchError(f"search request failed: {exc}") from exc
        except ValueError as exc:
            raise SearchError(f"search response is not JSON: {exc}") from exc

        try:
            parsed = SearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise SearchError(f"invalid search response: {str(exc)[:200]}") from exc

        warnings: list[str] = []
        records = parsed.to_scored_records(warnings)
        for msg in warnings:
            log.warning(msg)
        return records
