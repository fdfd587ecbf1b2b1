"""
Sidebar component for the page search interface.

Displays index statistics and the file selector that scopes every search.
"""

import streamlit as st
from typing import List, Optional

from ...database import DatabaseManager, get_statistics
from ..state import get_state, set_state, clear_search_state


def render_sidebar(manager: DatabaseManager, files: List[str]) -> Optional[str]:
    """
    Render the sidebar with stats and the file selector.

    Args:
        manager: Database to read statistics from.
        files: Indexed file keys to choose from.

    Returns:
        The selected file key, or None when nothing is indexed.
    """
    with st.sidebar:
        st.title("Page Search")

        st.subheader("Statistics")
        _render_statistics(manager)

        st.divider()

        st.subheader("Document")
        selected = _render_file_selector(files)

        st.divider()

        _render_help()

    return selected


def _render_statistics(manager: DatabaseManager) -> None:
    """Display database statistics."""
    stats = get_statistics(manager)

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Files", f"{stats['total_files']:,}")

    with col2:
        st.metric("Pages", f"{stats['total_pages']:,}")

    st.caption(f"Index size: {stats['total_content_mb']:.1f} MB")


def _render_file_selector(files: List[str]) -> Optional[str]:
    """Render the indexed file picker."""
    if not files:
        st.info("No files indexed yet. Run scripts/run_indexer.py first.")
        return None

    current = get_state("selected_file")
    index = files.index(current) if current in files else 0

    selected = st.selectbox(
        "Search in",
        options=files,
        index=index,
        key="file_select"
    )

    if selected != current:
        clear_search_state()
        set_state("selected_file", selected)

    return selected


def _render_help() -> None:
    """Display search help text."""
    with st.expander("Search help"):
        st.markdown("""
        - Matching ignores case, accents, punctuation and spaces
        - `all of` finds "All of the things..." and "ALL-OF"
        - Results are the pages of the selected document, in page order
        """)
