"""Form validation shared by the Streamlit pages and the HTTP API.

Each validator returns a mapping of field name to error message; an empty
mapping means the form is valid.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from ..models.user import Role

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_PASSWORD_LENGTH = 6

ROLE_LABELS: Dict[str, str] = {
    Role.TENANT.value: "Tenant looking for a home",
    Role.AGENT.value: "Letting agent",
    Role.ADMIN.value: "Administrator",
}


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def is_valid_email(value: Optional[str]) -> bool:
    return bool(EMAIL_PATTERN.search((value or "").strip()))


def _check_email(errors: Dict[str, str], email: Optional[str]) -> None:
    if _blank(email):
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"


def validate_enquiry(name: Optional[str], email: Optional[str], message: Optional[str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if _blank(name):
        errors["name"] = "Name is required"
    _check_email(errors, email)
    if _blank(message):
        errors["message"] = "Message is required"
    return errors


def validate_login(email: Optional[str], password: Optional[str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _check_email(errors, email)
    if not password:
        errors["password"] = "Password is required"
    return errors


def validate_signup(
    email: Optional[str],
    password: Optional[str],
    confirm_password: Optional[str],
    role: Optional[str] = Role.TENANT.value,
) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _check_email(errors, email)
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if not confirm_password:
        errors["confirm_password"] = "Please confirm your password"
    elif password != confirm_password:
        errors["confirm_password"] = "Passwords do not match"
    if role not in ROLE_LABELS:
        errors["role"] = "Please choose a valid role"
    return errors


def validate_agent_signup(
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
    confirm_password: Optional[str],
    phone: Optional[str],
) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if _blank(name):
        errors["name"] = "Name is required"
    errors.update(validate_signup(email, password, confirm_password, Role.AGENT.value))
    if _blank(phone):
        errors["phone"] = "Phone number is required"
    return errors


def friendly_auth_error(message: Optional[str]) -> str:
    """Map backend auth messages to text shown on the login form."""
    text = message or ""
    if "Invalid login credentials" in text:
        return "Invalid email or password. Please try again."
    if "Email not confirmed" in text:
        return "Please check your email and confirm your account before logging in."
    return text or "An unexpected error occurred. Please try again."
