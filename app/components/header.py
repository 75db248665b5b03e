"""Page header with brand and auth status."""

from __future__ import annotations

import streamlit as st

from pawsplace.services.session import SessionState


def render_header(session: SessionState) -> None:
    brand_col, tagline_col, auth_col = st.columns([2, 3, 2])
    with brand_col:
        st.markdown("<div class='brand-text'>PawsPlace</div>", unsafe_allow_html=True)
    with tagline_col:
        st.caption("Pet-friendly rentals in London 🐾")
    with auth_col:
        if session.loading:
            st.caption("Loading...")
        elif session.is_authenticated:
            profile = session.profile
            label = (profile.full_name or profile.company) if profile else None
            label = label or (session.user.email if session.user else "")
            role = f" ({session.role})" if session.role else ""
            st.caption(f"{label}{role}")
            if st.button("Logout", key="logout"):
                session.logout()
                st.rerun()
        else:
            st.page_link("pages/1_Login.py", label="Login")
            st.page_link("pages/2_Sign_Up.py", label="Sign Up")
