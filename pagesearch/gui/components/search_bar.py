"""
Search bar component for the page search interface.

Provides the main search input and submit functionality.
"""

import streamlit as st
from typing import Tuple

from ..state import get_state, set_state, clear_search_state


def render_search_bar() -> Tuple[str, bool]:
    """
    Render the search input bar.

    Returns:
        Tuple of (query_text, was_submitted).
    """
    col1, col2 = st.columns([5, 1])

    with col1:
        query = st.text_input(
            "Search",
            value=get_state("search_query", ""),
            placeholder="Type a phrase to find...",
            key="search_input",
            label_visibility="collapsed"
        )

    with col2:
        submitted = st.button(
            "Search",
            type="primary",
            use_container_width=True
        )

    previous_query = get_state("search_query", "")
    query_changed = query != previous_query and query.strip() != ""

    if query_changed:
        clear_search_state()
        set_state("search_query", query)

    return query, submitted or query_changed


def render_search_header(stats) -> None:
    """
    Render search results header with stats.

    Args:
        stats: SearchStats for the last search.
    """
    if not stats:
        return

    col1, col2, col3 = st.columns([2, 2, 1])

    with col1:
        st.markdown(f"**{stats.total_results:,}** pages found")

    with col2:
        st.caption(f"Query: \"{stats.query}\" in {stats.filepath}")

    with col3:
        st.caption(f"{stats.execution_time_ms:.0f} ms")


def render_no_results(stats) -> None:
    """Display no results message with suggestions."""
    if not stats.canonical_query:
        st.warning("The query has no letters or digits to search for.")
        return

    st.info(f"No page of {stats.filepath} contains \"{stats.query}\"")
