"""Case catalog dashboard.

Launch with:
    streamlit run casebrowser/dashboard/app.py
or:
    casebrowser dashboard
"""

from __future__ import annotations

import os

import streamlit as st

from casebrowser.catalog.session import SearchSessionController
from casebrowser.dashboard.data_loader import BaselineLoad, load_baseline
from casebrowser.dashboard.pages import catalog
from casebrowser.search.client import SemanticSearchClient
from casebrowser.utils.config import load_config

# --- Page Config ---
st.set_page_config(
    page_title="Case Catalog",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
    .block-container { padding-top: 1.5rem; }
    mark { background-color: #FDE68A; padding: 0 2px; border-radius: 2px; }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def _config():
    return load_config(config_path=os.environ.get("CASEBROWSER_CONFIG") or None)


@st.cache_data
def _baseline(source: str, timeout: float) -> BaselineLoad:
    return load_baseline(source, timeout=timeout)


cfg = _config()
loaded = _baseline(str(cfg.catalog.baseline_source), float(cfg.search.timeout_sec))

if "controller" not in st.session_state:
    client = SemanticSearchClient.from_config(cfg)
    st.session_state["controller"] = SearchSessionController(
        client.search,
        loaded.records,
        result_limit=int(cfg.search.result_limit),
        page_size=int(cfg.catalog.page_size),
    )
controller: SearchSessionController = st.session_state["controller"]

# --- Sidebar ---
with st.sidebar:
    st.markdown(
        "Data from [competition-cases.ec.europa.eu](https://competition-cases.ec.europa.eu/)"
    )
    st.divider()

if loaded.warnings:
    with st.expander(f"Baseline loaded with {loaded.warnings_count} warning(s)"):
        for msg in loaded.warnings[:100]:
            st.text(f"- {msg}")
        if loaded.warnings_count > 100:
            st.text(f"... ({loaded.warnings_count - 100} more)")

catalog.render(controller, cfg)
