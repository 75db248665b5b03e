"""Property type, sort and pet-friendly controls feeding the pipeline."""

from __future__ import annotations

import streamlit as st

from pawsplace.services.browse import ListingBrowser
from pawsplace.services.pipeline import PROPERTY_TYPE_LABELS, SORT_LABELS


def render_filters(browser: ListingBrowser) -> None:
    type_col, sort_col, pet_col = st.columns([2, 2, 1])
    type_options = list(PROPERTY_TYPE_LABELS)
    sort_options = list(SORT_LABELS)
    with type_col:
        property_type = st.selectbox(
            "Property Type",
            type_options,
            index=type_options.index(browser.property_type) if browser.property_type in type_options else 0,
            format_func=PROPERTY_TYPE_LABELS.get,
        )
    with sort_col:
        sort_key = st.selectbox(
            "Sort By",
            sort_options,
            index=sort_options.index(browser.sort_key) if browser.sort_key in sort_options else 0,
            format_func=SORT_LABELS.get,
        )
    with pet_col:
        pet_friendly = st.checkbox("Pet-Friendly Only 🐾", value=browser.pet_friendly_only)
    browser.set_filters(property_type=property_type, pet_friendly_only=pet_friendly, sort_key=sort_key)
