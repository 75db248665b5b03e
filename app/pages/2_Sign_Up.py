"""Account creation with a role choice."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.state import get_session
from pawsplace.models.user import Role
from pawsplace.services.forms import ROLE_LABELS, validate_signup

st.set_page_config(page_title="Sign Up - PawsPlace", page_icon="🐾")

session = get_session()
if session.is_authenticated:
    st.switch_page("main.py")

st.title("Create Your Account")
st.caption("Join the PawsPlace community")

with st.form("signup"):
    email = st.text_input("Email Address", placeholder="your@email.com")
    role = st.selectbox("I am a...", list(ROLE_LABELS), index=0, format_func=ROLE_LABELS.get)
    password = st.text_input("Password", type="password")
    confirm_password = st.text_input("Confirm Password", type="password")
    submitted = st.form_submit_button("Create Account", use_container_width=True)

if submitted:
    errors = validate_signup(email, password, confirm_password, role or Role.TENANT.value)
    if errors:
        for text in errors.values():
            st.error(text)
    else:
        with st.spinner("Creating account..."):
            result = session.auth.sign_up(email.strip(), password, role)
        if result.error:
            st.error(result.error)
        elif result.mock_mode:
            st.success("Account created successfully! (Mock mode)")
            st.page_link("pages/1_Login.py", label="Continue to sign in")
        else:
            st.success("Account created successfully! Please check your email to verify your account.")
            st.page_link("pages/1_Login.py", label="Continue to sign in")

st.page_link("pages/3_Agent_Sign_Up.py", label="Letting agent? Use the agent sign-up")
st.page_link("main.py", label="← Back to PawsPlace")
