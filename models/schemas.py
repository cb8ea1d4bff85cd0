# models/schemas.py
from __future__ import annotations
from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator, model_validator

from utils.date_parser import parse_date


class MalformedHotelPayload(ValueError):
    """Raised when a payload from the API does not have the hotel shape."""


class HotelRecordSchema(BaseModel):
    """Hotel record as the REST service sends it. Types are not coerced."""

    # document stores name the key `_id`
    mongo_id: Optional[Union[StrictStr, StrictInt]] = Field(default=None, alias="_id")
    id: Optional[Union[StrictStr, StrictInt]] = None
    name: StrictStr
    location: StrictStr
    room_type: StrictStr = Field(..., alias="roomType")
    price_per_night: float = Field(..., alias="pricePerNight", strict=True)
    available_rooms: StrictInt = Field(..., alias="availableRooms")
    rating: float = Field(..., strict=True)
    check_in_date: date = Field(..., alias="checkInDate")
    is_pet_friendly: StrictBool = Field(default=False, alias="isPetFriendly")
    amenities: Optional[List[StrictStr]] = None

    @field_validator("check_in_date", mode="before")
    @classmethod
    def parse_check_in(cls, v: object) -> date:
        if isinstance(v, date):
            return v
        if not isinstance(v, str):
            raise ValueError("checkInDate must be a date string")
        parsed = parse_date(v)
        if parsed is None:
            raise ValueError(f"checkInDate is not a date: {v!r}")
        return parsed

    @model_validator(mode="after")
    def require_id(self) -> "HotelRecordSchema":
        if self.record_id is None:
            raise ValueError("hotel payload has no id")
        return self

    @property
    def record_id(self) -> Optional[str]:
        for value in (self.mongo_id, self.id):
            if value is not None and value != "":
                return str(value)
        return None


class RoomTypeCountSchema(BaseModel):
    room_type: StrictStr = Field(..., alias="_id")
    count: StrictInt


class HotelStatsSchema(BaseModel):
    total_hotels: StrictInt = Field(..., alias="totalHotels")
    total_available_rooms: StrictInt = Field(..., alias="totalAvailableRooms")
    # null when the collection is empty
    average_rating: Optional[float] = Field(default=None, alias="averageRating", strict=True)
    room_type_distribution: List[RoomTypeCountSchema] = Field(default_factory=list, alias="roomTypeDistribution")
