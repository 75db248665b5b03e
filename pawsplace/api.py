"""HTTP API over the listing and auth services."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from .models.user import DEFAULT_ROLE, Role
from .services.container import Services, get_services
from .services.enquiries import build_enquiry, submit_enquiry
from .services.forms import validate_enquiry
from .services.pipeline import DEFAULT_SORT, apply_pipeline
from .utils.logging import get_logger

LOGGER = get_logger("api")

app = FastAPI(title="PawsPlace")
router = APIRouter(prefix="/api")


class SignInRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SignUpRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: str = DEFAULT_ROLE
    user_data: Dict[str, Any] = Field(default_factory=dict)


class EnquiryRequest(BaseModel):
    listing_id: Union[int, str]
    name: str = ""
    email: str = ""
    message: str = ""


@router.get("/health")
def health(services: Services = Depends(get_services)):
    return {"status": "ok", "mode": services.settings.mode}


@router.get("/listings")
def list_listings(
    search: str = Query(""),
    property_type: str = Query(""),
    sort: str = Query(DEFAULT_SORT),
    pet_friendly: bool = Query(False),
    services: Services = Depends(get_services),
):
    if search.strip():
        raw = services.listings.search_listings_by_location(search)
    else:
        raw = services.listings.fetch_listings()
    items = apply_pipeline(raw, property_type, pet_friendly, sort)
    return jsonable_encoder({"items": [item.to_row() for item in items], "total": len(items)})


@router.post("/auth/signin")
def sign_in(req: SignInRequest, services: Services = Depends(get_services)):
    if not req.email or not req.password:
        raise HTTPException(400, detail="Email and password are required")
    result = services.auth.sign_in(req.email, req.password)
    if result.error:
        raise HTTPException(401, detail=result.error)
    return {
        "success": True,
        "user": result.user.model_dump() if result.user else None,
        "mock_mode": result.mock_mode,
        "message": "Login successful",
    }


@router.post("/auth/signup")
def sign_up(req: SignUpRequest, services: Services = Depends(get_services)):
    if not req.email or not req.password:
        raise HTTPException(400, detail="Email and password are required")
    if req.role not in {role.value for role in Role}:
        raise HTTPException(400, detail=f"Unknown role '{req.role}'")
    result = services.auth.sign_up(req.email, req.password, req.role, req.user_data)
    if result.error:
        raise HTTPException(400, detail=result.error)
    return {
        "success": True,
        "user": result.user.model_dump() if result.user else None,
        "mock_mode": result.mock_mode,
        "message": "Account created successfully",
    }


@router.post("/enquiries")
def create_enquiry(req: EnquiryRequest):
    errors = validate_enquiry(req.name, req.email, req.message)
    if errors:
        raise HTTPException(400, detail={"errors": errors})
    enquiry = submit_enquiry(build_enquiry(req.listing_id, req.name, req.email, req.message))
    return {"success": True, "enquiry": enquiry.model_dump()}


app.include_router(router)
