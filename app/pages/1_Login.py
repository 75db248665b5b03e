"""Sign-in page for tenants, agents and admins."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.state import get_session
from pawsplace.services.forms import friendly_auth_error, validate_login

st.set_page_config(page_title="Sign In - PawsPlace", page_icon="🐾")

session = get_session()
if session.is_authenticated:
    st.switch_page("main.py")

st.title("Welcome Back")
st.caption("Sign in to your PawsPlace account")

message = st.session_state.pop("login_message", None)
if message:
    st.success(message)

with st.form("login"):
    email = st.text_input("Email Address", placeholder="your.email@example.com")
    password = st.text_input("Password", type="password", placeholder="Enter your password")
    submitted = st.form_submit_button("Sign In", use_container_width=True)

if submitted:
    errors = validate_login(email, password)
    if errors:
        for text in errors.values():
            st.error(text)
    else:
        with st.spinner("Signing In..."):
            result = session.login(email.strip(), password)
        if result.error:
            st.error(friendly_auth_error(result.error))
        else:
            st.switch_page("main.py")

st.page_link("pages/2_Sign_Up.py", label="Don't have an account? Sign up")
st.page_link("main.py", label="← Back to PawsPlace")
