"""Helper client used by the Streamlit app to talk to the API or fall back to local services."""

from __future__ import annotations

from typing import List, Optional

import requests
from requests import Response

from pawsplace.db.mappers import rows_to_listings
from pawsplace.models.enquiry import Enquiry
from pawsplace.models.listing import Listing
from pawsplace.services.container import Services, get_services
from pawsplace.services.enquiries import submit_enquiry
from pawsplace.utils.logging import get_logger

LOGGER = get_logger("app.backend_client")

# transport failures plus 200 responses whose body is not a listing page
API_ERRORS = (requests.RequestException, KeyError, TypeError, ValueError)


class BackendClient:
    """Listing reads and enquiry hand-off for the pages.

    When ``API_BASE_URL`` points at a running PawsPlace API the reads go over
    HTTP; otherwise, or after the first failed request, the in-process
    services are used. Auth always runs in-process because the session lives
    with the page.
    """

    def __init__(self, services: Optional[Services] = None, session: Optional[requests.Session] = None) -> None:
        self.services = services or get_services()
        self.base_url = (self.services.settings.api_base_url or "").rstrip("/")
        self.session = session or requests.Session()
        self.use_api = bool(self.base_url) and self._ping_api()

    @property
    def mode(self) -> str:
        return self.services.settings.mode

    def _ping_api(self) -> bool:
        try:
            resp = self.session.get(f"{self.base_url}/api/health", timeout=2)
            return resp.status_code == 200
        except requests.RequestException:
            return False

    def fetch_listings(self) -> List[Listing]:
        if self.use_api:
            try:
                return self._get_listings({})
            except API_ERRORS as exc:
                self._enable_local_mode(exc)
        return self.services.listings.fetch_listings()

    def search_listings_by_location(self, term: str) -> List[Listing]:
        if self.use_api:
            try:
                return self._get_listings({"search": term})
            except API_ERRORS as exc:
                self._enable_local_mode(exc)
        return self.services.listings.search_listings_by_location(term)

    def submit_enquiry(self, enquiry: Enquiry) -> Enquiry:
        if self.use_api:
            try:
                resp = self.session.post(f"{self.base_url}/api/enquiries", json=enquiry.model_dump(), timeout=10)
                self._raise_for_status(resp)
                return enquiry
            except API_ERRORS as exc:
                self._enable_local_mode(exc)
        return submit_enquiry(enquiry)

    def _get_listings(self, params: dict) -> List[Listing]:
        resp = self.session.get(f"{self.base_url}/api/listings", params=params, timeout=10)
        self._raise_for_status(resp)
        return rows_to_listings(resp.json()["items"])

    def _enable_local_mode(self, exc: Optional[Exception] = None) -> None:
        if self.use_api:
            LOGGER.warning("API unavailable (%s); using local services", exc)
        self.use_api = False

    def _raise_for_status(self, response: Response) -> None:
        try:
            response.raise_for_status()
        except requests.RequestException as exc:
            self._enable_local_mode(exc)
            raise
