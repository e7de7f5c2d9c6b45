"""Search session state: baseline browsing versus semantic-search results.

The controller owns every mutable input of the view (active source,
filters, sort mode, page index) and is driven by discrete events: submit,
clear, facet changes, page changes and search resolution. All events run
on one event loop; ``submit`` is the only coroutine.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Sequence

from casebrowser.catalog.compose import (
    Baseline,
    Filters,
    ResultSource,
    SearchResults,
    SortMode,
    compose,
    is_search_mode,
)
from casebrowser.catalog.paginate import (
    DEFAULT_PAGE_SIZE,
    Page,
    is_valid_page,
    next_page,
    paginate,
    previous_page,
    total_pages,
)
from casebrowser.catalog.records import Record, ScoredRecord
from casebrowser.utils.logger import setup_logger

log = setup_logger(__name__)

SearchFn = Callable[[str, int], Awaitable[Sequence[ScoredRecord]]]

DEFAULT_RESULT_LIMIT = 20


class SearchSessionController:
    """Coordinates semantic search with filtering, sorting and pagination.

    Overlapping searches are resolved by request token: each submit takes
    the next token, and a response is applied only if its token is still
    the latest issued. An empty submit or ``clear()`` also retires any
    in-flight request.
    """

    def __init__(
        self,
        search: SearchFn,
        baseline: Sequence[Record] = (),
        *,
        result_limit: int = DEFAULT_RESULT_LIMIT,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._search = search
        self.result_limit = int(result_limit)
        self.page_size = int(page_size)

        self._baseline = Baseline(tuple(baseline))
        self._source: ResultSource = self._baseline
        self._filters = Filters()
        self._sort_mode = SortMode.NEWEST
        self._page_index = 1
        self._search_term = ""

        self._last_token = 0
        self._in_flight_token: int | None = None

    # --- read-only state ---

    @property
    def source(self) -> ResultSource:
        return self._source

    @property
    def filters(self) -> Filters:
        return self._filters

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def search_term(self) -> str:
        """Last successfully submitted query; used for highlighting."""
        return self._search_term

    @property
    def in_flight(self) -> bool:
        return self._in_flight_token is not None

    @property
    def is_search_mode(self) -> bool:
        return is_search_mode(self._source)

    def view(self) -> list[Record]:
        return compose(self._source, self._filters, self._sort_mode)

    def page(self) -> Page[Record]:
        view = self.view()
        # The view may have shrunk under a stale index when the baseline was swapped.
        if not is_valid_page(self._page_index, total_pages(len(view), self.page_size)):
            self._page_index = 1
        return paginate(view, self._page_index, self.page_size)

    # --- transitions ---

    async def submit(self, query: str | None) -> bool:
        """Run a semantic search, or return to the baseline for an empty query.

        Returns True if the session state changed as a result of this call.
        A failed or superseded search leaves the state untouched.
        """
        q = str(query or "").strip()
        self._last_token += 1
        token = self._last_token

        if not q:
            self._in_flight_token = None
            self._search_term = ""
            self._set_source(self._baseline)
            return True

        self._in_flight_token = token
        try:
            matches = await self._search(q, self.result_limit)
        except Exception as exc:
            log.warning("Search failed for %r: %s", q, str(exc)[:200])
            return False
        finally:
            if self._in_flight_token == token:
                self._in_flight_token = None

        if token != self._last_token:
            log.debug("Discarding stale search response for %r (token %d < %d)", q, token, self._last_token)
            return False

        self._search_term = q
        self._set_source(SearchResults(tuple(matches), q))
        log.debug("Search %r returned %d matches", q, len(matches))
        return True

    def clear(self) -> None:
        """Return to the baseline and reset every filter, sort and page input."""
        self._last_token += 1
        self._in_flight_token = None
        self._search_term = ""
        self._source = self._baseline
        self._filters = Filters()
        self._sort_mode = SortMode.NEWEST
        self._page_index = 1

    def set_baseline(self, records: Sequence[Record]) -> None:
        self._baseline = Baseline(tuple(records))
        if not self.is_search_mode:
            self._set_source(self._baseline)

    def set_year(self, year: str | int | None) -> None:
        value = str(year) if year not in (None, "") else None
        self._set_filters(Filters(year=value, policy_area=self._filters.policy_area))

    def set_policy_area(self, policy_area: str | None) -> None:
        value = policy_area or None
        self._set_filters(Filters(year=self._filters.year, policy_area=value))

    def set_sort_mode(self, sort_mode: SortMode | str) -> None:
        mode = SortMode(sort_mode)
        if mode is not self._sort_mode:
            self._sort_mode = mode
            self._page_index = 1

    def next_page(self) -> int:
        total = total_pages(len(self.view()), self.page_size)
        self._page_index = next_page(self._page_index, total)
        return self._page_index

    def previous_page(self) -> int:
        self._page_index = previous_page(self._page_index)
        return self._page_index

    def go_to_page(self, page_index: int) -> bool:
        """Jump to a page; out-of-range requests are ignored."""
        total = total_pages(len(self.view()), self.page_size)
        if not 1 <= page_index <= total:
            log.debug("Ignoring page request %d (total %d)", page_index, total)
            return False
        self._page_index = page_index
        return True

    # --- internals ---

    def _set_source(self, source: ResultSource) -> None:
        self._source = source
        self._page_index = 1

    def _set_filters(self, filters: Filters) -> None:
        if filters != self._filters:
            self._filters = filters
            self._page_index = 1
