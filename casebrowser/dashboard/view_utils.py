"""Display helpers for the catalog page.

Kept streamlit-free so the wording, link and escaping rules can be
unit-tested. Every record field that reaches HTML passes through
``html.escape`` here; the page only forwards the finished markup.
"""

from __future__ import annotations

import html
from urllib.parse import quote, urlsplit

from casebrowser.catalog.highlight import render_html
from casebrowser.catalog.paginate import Page
from casebrowser.catalog.records import Record

DEFAULT_CASE_URL_TEMPLATE = "https://competition-cases.ec.europa.eu/cases/{case_number}"

POLICY_COLORS: dict[str, tuple[str, str]] = {
    "antitrust": ("#DBEAFE", "#1E40AF"),
    "merger": ("#FEE2E2", "#B91C1C"),
}


def result_message(count: int, search_term: str = "", search_mode: bool = False) -> str:
    """Headline above the result list."""
    if search_mode and search_term:
        plural = "result" if count == 1 else "results"
        return f'Top {count} {plural} found for the search "{search_term}"'
    plural = "result found" if count == 1 else "total results found"
    return f"{count} {plural}"


def case_url(record: Record, template: str = DEFAULT_CASE_URL_TEMPLATE) -> str:
    return template.format(case_number=quote(record.case_number, safe="."))


def safe_href(url: str | None) -> str | None:
    """Return url if it is an http(s) link, else None."""
    text = str(url or "").strip()
    if urlsplit(text).scheme.lower() not in ("http", "https"):
        return None
    return text


def format_score(score: float | None) -> str:
    if score is None:
        return ""
    return f"{float(score):.3f}"


def page_label(page: Page) -> str:
    return f"Page {page.page_index} of {page.total_pages}"


def _link(url: str | None, label: str) -> str:
    href = safe_href(url)
    if href is None:
        return ""
    return f"<p><a href=\"{html.escape(href)}\" target=\"_blank\" rel=\"noopener\">{label}</a></p>"


def card_html(record: Record, term: str = "", template: str = DEFAULT_CASE_URL_TEMPLATE) -> str:
    """Markup for one result card; record fields are always escaped."""
    background, foreground = POLICY_COLORS.get(record.policy_area.strip().lower(), POLICY_COLORS["merger"])
    score = format_score(getattr(record, "score", None))
    score_badge = f" <code>Score: {score}</code>" if score else ""
    parts = [
        f"<span style='float:right; background:{background}; color:{foreground}; "
        f"padding:2px 10px; border-radius:12px; font-weight:600;'>{html.escape(record.policy_area)}</span>",
        f"<p><strong>Case Number:</strong> {html.escape(record.case_number)}{score_badge}</p>",
        f"<p>Year: {html.escape(record.year)}</p>",
        _link(case_url(record, template), "Link to Case"),
        _link(record.link, "Link to Decision Text"),
        f"<p><strong>Topic:</strong> {html.escape(record.topic)}</p>",
        f"<div>{render_html(record.text, term)}</div>",
    ]
    return "\n".join(part for part in parts if part)
