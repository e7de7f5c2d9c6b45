"""Facet values and label normalization for catalog filters."""

from __future__ import annotations

from datetime import date

POLICY_AREAS: tuple[str, ...] = ("Merger", "Antitrust")
FIRST_DECISION_YEAR = 2016


def normalize_label(label: str | None) -> str:
    """Canonicalize a category label for equality comparison.

    Lower-cases, drops every character other than letters, digits,
    whitespace and ``&``, then trims surrounding whitespace.
    """
    if not label:
        return ""
    kept = (ch for ch in str(label).lower() if ch.isalnum() or ch.isspace() or ch == "&")
    return "".join(kept).strip()


def labels_match(left: str | None, right: str | None) -> bool:
    return normalize_label(left) == normalize_label(right)


def year_options(current_year: int | None = None, first_year: int = FIRST_DECISION_YEAR) -> list[str]:
    """Years offered by the year facet, newest first."""
    last = date.today().year if current_year is None else int(current_year)
    return [str(y) for y in range(last, int(first_year) - 1, -1)]
