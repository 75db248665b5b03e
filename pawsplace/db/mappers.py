from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from ..models.listing import Listing
from ..models.user import User, UserMetadata
from ..utils.coerce import to_bool, to_datetime, to_int, to_optional_str
from ..utils.logging import get_logger

LOGGER = get_logger("db.mappers")


def _identifier(v: Any) -> Optional[Union[int, str]]:
    if v is None:
        return None
    if isinstance(v, bool):
        return str(v)
    if isinstance(v, int):
        return v
    as_int = to_int(v)
    if as_int is not None and str(v).strip() == str(as_int):
        return as_int
    text = str(v).strip()
    return text or None


def map_listing_row(r: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": _identifier(r.get("id")),
        "Title": to_optional_str(r.get("Title")),
        "Rent": to_int(r.get("Rent")),
        "Listed": to_datetime(r.get("Listed")),
        "Bedrooms": to_int(r.get("Bedrooms")),
        "Baths": to_int(r.get("Baths")),
        "Location": to_optional_str(r.get("Location")),
        "Description": to_optional_str(r.get("Description")),
        "Furnished": to_bool(r.get("Furnished")),
        "Garden": to_bool(r.get("Garden")),
        "SquareFootage": to_int(r.get("SquareFootage")),
        "PetParkingCosts": to_int(r.get("PetParkingCosts")),
        "StairFreeAccess": to_bool(r.get("StairFreeAccess")),
        "HouseShare": to_bool(r.get("HouseShare")),
    }


def rows_to_listings(rows: Iterable[Dict[str, Any]]) -> List[Listing]:
    listings: List[Listing] = []
    for row in rows or []:
        mapped = map_listing_row(row)
        if mapped["id"] is None:
            LOGGER.warning("skipping listing row without id title=%s", mapped["Title"])
            continue
        try:
            listings.append(Listing.model_validate(mapped))
        except ValidationError as exc:
            LOGGER.warning("skipping malformed listing id=%s: %s", mapped["id"], exc)
    return listings


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def map_backend_user(raw: Any) -> Optional[User]:
    """Build a :class:`User` from a Supabase auth user (object or dict)."""
    if raw is None:
        return None
    user_id = _field(raw, "id")
    if not user_id:
        return None
    metadata = _field(raw, "user_metadata") or _field(raw, "metadata") or {}
    if isinstance(metadata, UserMetadata):
        meta = metadata
    else:
        meta = UserMetadata.model_validate(dict(metadata))
    return User(id=str(user_id), email=_field(raw, "email"), metadata=meta)


def session_user(session: Any) -> Optional[User]:
    return map_backend_user(_field(session, "user"))
