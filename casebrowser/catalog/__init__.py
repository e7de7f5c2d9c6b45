"""Result composition and presentation core for the case catalog."""

from casebrowser.catalog.compose import Baseline, Filters, ResultSource, SearchResults, SortMode, compose
from casebrowser.catalog.facets import POLICY_AREAS, normalize_label, year_options
from casebrowser.catalog.highlight import Segment, highlight, highlight_segments, render_html
from casebrowser.catalog.paginate import InvalidPageError, Page, paginate
from casebrowser.catalog.records import Record, ScoredRecord
from casebrowser.catalog.session import SearchSessionController

__all__ = [
    "Baseline",
    "Filters",
    "InvalidPageError",
    "POLICY_AREAS",
    "Page",
    "Record",
    "ResultSource",
    "ScoredRecord",
    "SearchResults",
    "SearchSessionController",
    "Segment",
    "SortMode",
    "compose",
    "highlight",
    "highlight_segments",
    "normalize_label",
    "paginate",
    "render_html",
    "year_options",
]
