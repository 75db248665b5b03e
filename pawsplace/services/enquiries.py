"""Enquiry construction and hand-off to an external submitter."""

from __future__ import annotations

from typing import Callable, Optional, Union

from ..models.enquiry import Enquiry
from ..utils.errors import EnquiryValidationError
from ..utils.logging import get_logger
from .forms import validate_enquiry

LOGGER = get_logger("services.enquiries")

Submitter = Callable[[Enquiry], None]


def log_enquiry(enquiry: Enquiry) -> None:
    LOGGER.info(
        "enquiry listing_id=%s name=%s email=%s message=%r",
        enquiry.listing_id,
        enquiry.name,
        enquiry.email,
        enquiry.message,
    )


def build_enquiry(listing_id: Union[int, str], name: str, email: str, message: str) -> Enquiry:
    errors = validate_enquiry(name, email, message)
    if errors:
        raise EnquiryValidationError(errors)
    return Enquiry(listing_id=listing_id, name=name.strip(), email=email.strip(), message=message.strip())


def submit_enquiry(enquiry: Enquiry, submitter: Optional[Submitter] = None) -> Enquiry:
    """Pass ``enquiry`` to ``submitter`` once; failures propagate to the caller."""
    (submitter or log_enquiry)(enquiry)
    return enquiry
