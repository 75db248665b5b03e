"""Per-browser-session objects kept in ``st.session_state``."""

from __future__ import annotations

import streamlit as st

from app.backend_client import BackendClient
from pawsplace.services.browse import ListingBrowser
from pawsplace.services.container import get_services
from pawsplace.services.session import SessionState

SESSION_KEY = "pawsplace_session"
UNSUBSCRIBE_KEY = "pawsplace_unsubscribe"
BROWSER_KEY = "pawsplace_browser"


@st.cache_resource(show_spinner=False)
def get_backend_client() -> BackendClient:
    return BackendClient()


def get_session() -> SessionState:
    if SESSION_KEY not in st.session_state:
        session = get_services().new_session()
        st.session_state[UNSUBSCRIBE_KEY] = session.start()
        st.session_state[SESSION_KEY] = session
    return st.session_state[SESSION_KEY]


def get_browser() -> ListingBrowser:
    if BROWSER_KEY not in st.session_state:
        settings = get_services().settings
        browser = ListingBrowser(get_backend_client(), debounce_seconds=settings.search_debounce_ms / 1000)
        browser.load()
        st.session_state[BROWSER_KEY] = browser
    return st.session_state[BROWSER_KEY]
