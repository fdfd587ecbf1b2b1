"""
Results list component for displaying matching pages.
"""

import math

import streamlit as st
from typing import List

from ...database import PageRecord
from ...utils import truncate_text
from ..state import get_state, set_state


def render_results(
    results: List[PageRecord],
    snippet_length: int = 300,
    results_per_page: int = 20
) -> None:
    """
    Render the list of matching pages, a screenful at a time.

    Args:
        results: PageRecord objects to display, in page order.
        snippet_length: Characters of original text shown before expanding.
        results_per_page: Cards shown per screen.
    """
    total_screens = max(1, math.ceil(len(results) / results_per_page))

    screen = 1
    if total_screens > 1:
        screen = st.number_input(
            f"Results screen (of {total_screens})",
            min_value=1,
            max_value=total_screens,
            value=min(get_state("results_screen", 1), total_screens),
            step=1
        )
        set_state("results_screen", screen)

    start = (screen - 1) * results_per_page
    for result in results[start:start + results_per_page]:
        _render_result_card(result, snippet_length)


def _render_result_card(result: PageRecord, snippet_length: int) -> None:
    """Render a single page with a toggle for its full text."""
    with st.expander(f"**Page {result.page}**", expanded=True):
        st.text(truncate_text(result.original_content, snippet_length))

        result_id = f"{result.id}_{result.page}"

        if st.button("Full text", key=f"text_btn_{result_id}"):
            current = get_state("show_content", {})
            current[result_id] = not current.get(result_id, False)
            set_state("show_content", current)

        if get_state("show_content", {}).get(result_id, False):
            st.text_area(
                f"Page {result.page}",
                value=result.original_content,
                height=300,
                key=f"content_area_{result_id}"
            )
