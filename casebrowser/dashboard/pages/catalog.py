"""Catalog page: facets, semantic search, paginated result cards."""

from __future__ import annotations

import asyncio

import streamlit as st
from omegaconf import DictConfig

from casebrowser.catalog.compose import SortMode
from casebrowser.catalog.facets import year_options
from casebrowser.catalog.paginate import parse_page_request
from casebrowser.catalog.records import Record
from casebrowser.catalog.session import SearchSessionController
from casebrowser.dashboard.view_utils import card_html, page_label, result_message

_YEAR_KEY = "catalog_year"
_SORT_KEY = "catalog_sort"
_QUERY_KEY = "catalog_query"
_JUMP_KEY = "catalog_jump"

_SORT_LABELS = {SortMode.NEWEST.value: "Newest First", SortMode.OLDEST.value: "Oldest First"}


def _on_year_change(controller: SearchSessionController) -> None:
    controller.set_year(st.session_state.get(_YEAR_KEY) or None)


def _on_sort_change(controller: SearchSessionController) -> None:
    controller.set_sort_mode(st.session_state.get(_SORT_KEY, SortMode.NEWEST.value))


def _on_clear(controller: SearchSessionController) -> None:
    controller.clear()
    st.session_state[_YEAR_KEY] = ""
    st.session_state[_SORT_KEY] = SortMode.NEWEST.value
    st.session_state[_QUERY_KEY] = ""


def _on_jump(controller: SearchSessionController, total: int) -> None:
    target = parse_page_request(st.session_state.get(_JUMP_KEY, ""), total)
    if target is not None:
        controller.go_to_page(target)


def _render_sidebar(controller: SearchSessionController, cfg: DictConfig) -> None:
    with st.sidebar:
        st.markdown("**Semantic Search:**")
        with st.form("semantic_search", clear_on_submit=False):
            query = st.text_input(
                "Search query",
                key=_QUERY_KEY,
                placeholder="Search anything...",
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button("Search")
        if submitted:
            with st.spinner("Searching..."):
                asyncio.run(controller.submit(query))

        st.markdown("**Policy Area:**")
        areas = [""] + list(cfg.catalog.policy_areas)
        cols = st.columns(len(areas))
        for col, area in zip(cols, areas):
            selected = (controller.filters.policy_area or "") == area
            col.button(
                area or "All",
                key=f"policy_{area or 'all'}",
                type="primary" if selected else "secondary",
                on_click=controller.set_policy_area,
                args=(area or None,),
            )

        years = [""] + year_options(first_year=int(cfg.catalog.first_year))
        st.selectbox(
            "Decision Year:",
            years,
            key=_YEAR_KEY,
            format_func=lambda y: y or "All Years",
            on_change=_on_year_change,
            args=(controller,),
        )

        st.radio(
            "Sort By:",
            list(_SORT_LABELS),
            key=_SORT_KEY,
            format_func=_SORT_LABELS.get,
            horizontal=True,
            on_change=_on_sort_change,
            args=(controller,),
            disabled=controller.is_search_mode,
        )


def _render_card(record: Record, term: str, cfg: DictConfig) -> None:
    with st.container(border=True):
        st.markdown(card_html(record, term, cfg.links.case_url_template), unsafe_allow_html=True)


def render(controller: SearchSessionController, cfg: DictConfig) -> None:
    """Render the catalog page for the current session state."""
    _render_sidebar(controller, cfg)

    view = controller.view()
    page = controller.page()

    st.markdown(f"### {result_message(len(view), controller.search_term, controller.is_search_mode)}")

    nav = st.columns([1, 1, 2, 2, 2])
    if view:
        nav[0].button(
            "« Prev",
            disabled=not page.has_previous,
            on_click=controller.previous_page,
        )
        nav[1].button(
            "Next »",
            disabled=not page.has_next,
            on_click=controller.next_page,
        )
        nav[2].text_input(
            "Page #",
            key=_JUMP_KEY,
            placeholder="Page #",
            label_visibility="collapsed",
            on_change=_on_jump,
            args=(controller, page.total_pages),
        )
        nav[3].markdown(page_label(page))
    nav[4].button("Clear Search", on_click=_on_clear, args=(controller,))

    if not page.items:
        st.info("No cases match the current filters.")
        return

    for record in page.items:
        _render_card(record, controller.search_term, cfg)
