"""Pydantic model for rental listings as stored in the ``listings`` table."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.coerce import to_datetime


class Listing(BaseModel):
    """One rental unit. Column names of the row-store are kept as aliases."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Union[int, str]
    title: Optional[str] = Field(None, alias="Title")
    rent: Optional[int] = Field(None, alias="Rent", description="GBP per month")
    listed: Optional[datetime] = Field(None, alias="Listed")
    bedrooms: Optional[int] = Field(None, alias="Bedrooms", description="0 means studio")
    baths: Optional[int] = Field(None, alias="Baths")
    location: Optional[str] = Field(None, alias="Location")
    description: Optional[str] = Field(None, alias="Description")
    furnished: Optional[bool] = Field(None, alias="Furnished")
    garden: Optional[bool] = Field(None, alias="Garden")
    square_footage: Optional[int] = Field(None, alias="SquareFootage")
    pet_parking_costs: Optional[int] = Field(None, alias="PetParkingCosts", description="GBP per month")
    stair_free_access: Optional[bool] = Field(None, alias="StairFreeAccess")
    house_share: Optional[bool] = Field(None, alias="HouseShare")

    @field_validator("listed", mode="before")
    @classmethod
    def _listed_as_utc(cls, value: Any) -> Optional[datetime]:
        return to_datetime(value)

    def to_row(self) -> Dict[str, Any]:
        """Serialise back to the row-store shape (column names, ISO dates)."""
        return self.model_dump(mode="json", by_alias=True)
