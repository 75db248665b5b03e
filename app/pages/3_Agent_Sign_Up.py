"""Registration for letting agents, with profile details."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.state import get_session
from pawsplace.models.user import Role
from pawsplace.services.forms import validate_agent_signup

st.set_page_config(page_title="Agent Sign Up - PawsPlace", page_icon="🐾")

session = get_session()
if session.is_authenticated:
    st.switch_page("main.py")

st.title("Join as an Agent")
st.caption("List pet-friendly properties on PawsPlace")

with st.form("agent-signup"):
    name = st.text_input("Full Name *")
    email = st.text_input("Email Address *", placeholder="your.email@example.com")
    company = st.text_input("Company / Agency")
    phone = st.text_input("Phone Number *")
    password = st.text_input("Password *", type="password")
    confirm_password = st.text_input("Confirm Password *", type="password")
    submitted = st.form_submit_button("Create Agent Account", use_container_width=True)

if submitted:
    errors = validate_agent_signup(name, email, password, confirm_password, phone)
    if errors:
        for text in errors.values():
            st.error(text)
    else:
        metadata = {"name": name.strip(), "company": company.strip(), "phone": phone.strip()}
        with st.spinner("Creating account..."):
            result = session.auth.sign_up(email.strip(), password, Role.AGENT.value, metadata)
        if result.error:
            st.error(result.error)
        else:
            st.session_state["login_message"] = "Account created successfully! Please log in."
            st.switch_page("pages/1_Login.py")

st.page_link("pages/1_Login.py", label="Already registered? Sign in")
st.page_link("main.py", label="← Back to PawsPlace")
