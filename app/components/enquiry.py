"""Enquiry dialog opened from a listing card."""

from __future__ import annotations

import streamlit as st

from app.backend_client import BackendClient
from pawsplace.models.listing import Listing
from pawsplace.services.enquiries import build_enquiry
from pawsplace.services.forms import validate_enquiry
from pawsplace.services.formatting import DEFAULT_LOCATION, DEFAULT_TITLE, format_rent
from pawsplace.utils.logging import get_logger

LOGGER = get_logger("app.enquiry")


@st.dialog("Enquire About Property")
def enquiry_dialog(listing: Listing, backend: BackendClient) -> None:
    st.markdown(f"### {listing.title or DEFAULT_TITLE}")
    st.caption(listing.location or DEFAULT_LOCATION)
    st.markdown(f"**{format_rent(listing.rent)} pcm**")

    with st.form(f"enquiry-{listing.id}"):
        name = st.text_input("Name *", placeholder="Your full name")
        email = st.text_input("Email *", placeholder="your.email@example.com")
        message = st.text_area(
            "Message *",
            placeholder="Tell us about your interest in this property, any questions you have, or requirements for your pets...",
        )
        submitted = st.form_submit_button("Send Enquiry")

    if not submitted:
        return
    errors = validate_enquiry(name, email, message)
    if errors:
        for text in errors.values():
            st.error(text)
        return
    try:
        backend.submit_enquiry(build_enquiry(listing.id, name, email, message))
    except Exception as exc:
        LOGGER.error("Error submitting enquiry: %s", exc)
        st.error("Failed to submit enquiry. Please try again.")
        return
    st.success("Thanks! Your enquiry has been sent.")
