"""
Main Streamlit application for the page search engine.

Entry point that assembles the sidebar, search bar and results list.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from pagesearch.core import get_config, get_logger, LoggingObserver, PageSearchError  # noqa: E402
from pagesearch.searcher import PageSearcher  # noqa: E402

from pagesearch.gui.state import init_state, get_state, set_state  # noqa: E402
from pagesearch.gui.components import (  # noqa: E402
    render_sidebar,
    render_search_bar,
    render_search_header,
    render_no_results,
    render_results,
)

logger = get_logger(__name__)


@st.cache_resource
def get_searcher() -> PageSearcher:
    """One searcher, and so one database connection, per server process."""
    return PageSearcher(config=get_config(), observer=LoggingObserver())


def main():
    """Main application entry point."""
    config = get_config()

    st.set_page_config(
        page_title=config.gui.page_title,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    init_state()

    searcher = get_searcher()

    selected_file = render_sidebar(searcher.manager, searcher.get_indexed_files())

    st.title(config.gui.page_title)

    query_text, submitted = render_search_bar()

    if selected_file and submitted and query_text.strip():
        _execute_search(searcher, query_text, selected_file)

    _render_results_section(config.search.snippet_length, config.gui.results_per_page)


def _execute_search(searcher: PageSearcher, query_text: str, filepath: str) -> None:
    """
    Execute search and store results in state.

    Args:
        searcher: Searcher owning the index.
        query_text: The search query string.
        filepath: File key to search in.
    """
    with st.spinner("Searching..."):
        try:
            results, stats = searcher.engine.search_with_stats(query_text, filepath)
        except PageSearchError as e:
            st.error(f"Search failed: {e.message}")
            logger.error(f"Search error: {e.message}")
            return

    set_state("search_results", results)
    set_state("search_stats", stats)
    set_state("results_screen", 1)


def _render_results_section(snippet_length: int, results_per_page: int) -> None:
    """Render the search results section."""
    results = get_state("search_results", [])
    stats = get_state("search_stats")

    if not stats:
        st.markdown("Pick a document in the sidebar and type a phrase to find the pages containing it.")
        return

    render_search_header(stats)

    if not results:
        render_no_results(stats)
        return

    st.divider()

    render_results(results, snippet_length, results_per_page)


if __name__ == "__main__":
    main()
