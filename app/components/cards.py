"""Streamlit components for listing cards."""

from __future__ import annotations

from html import escape
from typing import Callable, Optional

import streamlit as st

from pawsplace.models.listing import Listing
from pawsplace.services.formatting import (
    DEFAULT_LOCATION,
    DEFAULT_TITLE,
    format_count,
    format_listed_date,
    format_rent,
    furnishing_label,
    listing_features,
)


def feature_tag(feature: str) -> str:
    tone = " pet-friendly-tag" if "Garden" in feature or "Pet" in feature else ""
    return f"<span class='feature-tag{tone}'>{escape(feature)}</span>"


def render_listing_card(
    listing: Listing,
    on_enquire: Callable[[Listing], None],
    key: Optional[str] = None,
) -> None:
    key = key or str(listing.id)
    size = (
        f"<div class='listing-detail'><strong>Size:</strong> {listing.square_footage} sq ft</div>"
        if listing.square_footage
        else ""
    )
    description = (
        f"<p class='listing-description'>{escape(listing.description)}</p>" if listing.description else ""
    )
    features = "".join(feature_tag(feature) for feature in listing_features(listing))
    pet_badge = (
        "<span class='pet-friendly-indicator'>🐾 Pet-Friendly</span>"
        if (listing.pet_parking_costs or 0) > 0
        else ""
    )

    card_html = f"""
        <div class="listing-card">
            <h3 class="listing-title">{escape(listing.title or DEFAULT_TITLE)}</h3>
            <div class="listing-rent">{format_rent(listing.rent)} pcm</div>
            <div class="listing-location">{escape(listing.location or DEFAULT_LOCATION)}</div>
            <div class="listing-details">
                <div class="listing-detail"><strong>Bedrooms:</strong> {format_count(listing.bedrooms)}</div>
                <div class="listing-detail"><strong>Bathrooms:</strong> {format_count(listing.baths)}</div>
                {size}
                <div class="listing-detail"><strong>Type:</strong> {furnishing_label(listing)}</div>
            </div>
            {description}
            <div class="listing-features">{features}</div>
            <div class="listing-meta">
                <span>Listed: {format_listed_date(listing)}</span>
                {pet_badge}
            </div>
        </div>
    """
    with st.container():
        st.markdown(card_html, unsafe_allow_html=True)
        st.button("Enquire", key=f"enquire-{key}", on_click=on_enquire, args=(listing,))
