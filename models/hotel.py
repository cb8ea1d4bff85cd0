# models/hotel.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from pydantic import ValidationError

from models.schemas import HotelRecordSchema, MalformedHotelPayload
from utils.date_parser import format_display_date

ROOM_TYPES = ("Single", "Double", "Suite", "Deluxe", "Presidential")
AMENITY_OPTIONS = ("WiFi", "Pool", "Gym", "Spa", "Restaurant", "Parking", "Room Service")


@dataclass
class HotelData:
    """A hotel record before the persistence layer assigns it an id."""
    name: str
    location: str
    room_type: str
    price_per_night: float
    available_rooms: int
    rating: float
    check_in_date: date
    is_pet_friendly: bool = False
    amenities: List[str] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "location": self.location,
            "roomType": self.room_type,
            "pricePerNight": self.price_per_night,
            "availableRooms": self.available_rooms,
            "rating": self.rating,
            "checkInDate": self.check_in_date.isoformat(),
            "isPetFriendly": self.is_pet_friendly,
            "amenities": list(self.amenities),
        }


@dataclass
class Hotel:
    id: str
    name: str
    location: str
    room_type: str
    price_per_night: float
    available_rooms: int
    rating: float
    check_in_date: date
    is_pet_friendly: bool = False
    amenities: List[str] = field(default_factory=list)

    @classmethod
    def from_data(cls, hotel_id: str, data: HotelData) -> "Hotel":
        return cls(
            id=hotel_id,
            name=data.name,
            location=data.location,
            room_type=data.room_type,
            price_per_night=data.price_per_night,
            available_rooms=data.available_rooms,
            rating=data.rating,
            check_in_date=data.check_in_date,
            is_pet_friendly=data.is_pet_friendly,
            amenities=list(data.amenities),
        )

    @classmethod
    def from_payload(cls, payload: Any) -> "Hotel":
        """
        Build a Hotel from an API record. The backend may name the id `_id`
        (document store) or `id`; both are accepted.
        Raises MalformedHotelPayload when a field is missing or mistyped.
        """
        try:
            record = HotelRecordSchema.model_validate(payload)
        except ValidationError as e:
            raise MalformedHotelPayload(f"hotel payload is malformed: {e}") from e

        return cls(
            id=record.record_id,
            name=record.name,
            location=record.location,
            room_type=record.room_type,
            price_per_night=float(record.price_per_night),
            available_rooms=record.available_rooms,
            rating=float(record.rating),
            check_in_date=record.check_in_date,
            is_pet_friendly=record.is_pet_friendly,
            amenities=list(record.amenities or []),
        )

    def to_data(self) -> HotelData:
        return HotelData(
            name=self.name,
            location=self.location,
            room_type=self.room_type,
            price_per_night=self.price_per_night,
            available_rooms=self.available_rooms,
            rating=self.rating,
            check_in_date=self.check_in_date,
            is_pet_friendly=self.is_pet_friendly,
            amenities=list(self.amenities),
        )

    def to_payload(self) -> Dict[str, Any]:
        payload = self.to_data().to_payload()
        payload["id"] = self.id
        return payload

    def __str__(self) -> str:
        lines: List[str] = [
            f"{self.name} — {self.location} (⭐ {self.rating:.1f})",
            f"  {self.room_type} · {self.available_rooms} rooms · ${self.price_per_night:.2f} per night",
            f"  Check-in: {format_display_date(self.check_in_date)}",
        ]
        if self.is_pet_friendly:
            lines.append("  🐾 Pet Friendly")
        if self.amenities:
            lines.append(f"  Amenities: {', '.join(self.amenities)}")
        return "\n".join(lines)

