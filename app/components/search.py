"""Location search box.

Streamlit hands the script committed input only (Enter or the Search
button), never individual keystrokes, so the form always takes
``ListingBrowser.submit_search``. Callers that do see raw keystrokes use
``ListingBrowser.type_search``, which waits ``SEARCH_DEBOUNCE_MS`` before
searching.
"""

from __future__ import annotations

import streamlit as st

from pawsplace.services.browse import ListingBrowser

PLACEHOLDER = "Search by postcode or area (e.g., SW1, Camden, Islington...)"


def render_search_bar(browser: ListingBrowser) -> None:
    with st.form("search", clear_on_submit=False, border=False):
        term_col, go_col, clear_col = st.columns([6, 1, 1])
        with term_col:
            term = st.text_input("Search", value=browser.search_term, placeholder=PLACEHOLDER, label_visibility="collapsed")
        with go_col:
            submitted = st.form_submit_button("Search")
        with clear_col:
            cleared = st.form_submit_button("Clear")
    if cleared:
        with st.spinner("Loading..."):
            browser.submit_search("")
    elif submitted:
        with st.spinner("Finding your perfect pet-friendly home..."):
            browser.submit_search(term)
