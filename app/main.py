"""Streamlit home page: pet-friendly listings with search, filters and enquiries."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)

from app.components.cards import render_listing_card
from app.components.enquiry import enquiry_dialog
from app.components.filters import render_filters
from app.components.header import render_header
from app.components.search import render_search_bar
from app.state import get_backend_client, get_browser, get_session
from pawsplace.models.listing import Listing

st.set_page_config(page_title="PawsPlace - Pet-Friendly Rentals in London", layout="wide", page_icon="🐾")

FOOTER_HTML = (
    "<div class='footer'><p>Made with ❤️ by pet lovers, for pet lovers.</p></div>"
)


def load_styles() -> None:
    css_path = Path(__file__).resolve().parent / "assets" / "styles.css"
    if css_path.exists():
        st.markdown(f"<style>{css_path.read_text()}</style>", unsafe_allow_html=True)


def open_enquiry(listing: Listing) -> None:
    st.session_state["enquiry_listing"] = listing


def render_listing_page() -> None:
    session = get_session()
    browser = get_browser()
    render_header(session)
    if get_backend_client().mode == "mock":
        st.info("Demo mode: showing sample listings. Set SUPABASE_URL and SUPABASE_ANON_KEY for live data.")

    render_search_bar(browser)
    render_filters(browser)

    listings = browser.displayed
    title = f'Properties in "{browser.search_term}"' if browser.search_term else "Available Properties"
    st.markdown(f"## {title}")
    st.caption(f"{len(listings)} properties found")

    if not listings:
        st.markdown("### No properties found")
        st.write("Try adjusting your search criteria or check back later for new listings.")
        if browser.search_term and st.button("Show All Properties"):
            browser.submit_search("")
            st.rerun()
    else:
        columns = st.columns(3)
        for idx, listing in enumerate(listings):
            with columns[idx % 3]:
                render_listing_card(listing, on_enquire=open_enquiry, key=str(listing.id))

    selected = st.session_state.pop("enquiry_listing", None)
    if selected is not None:
        enquiry_dialog(selected, get_backend_client())

    st.markdown(FOOTER_HTML, unsafe_allow_html=True)


load_styles()
render_listing_page()
