# models/hotel_form.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List

from models.hotel import ROOM_TYPES, Hotel


@dataclass
class HotelFormData:
    """
    Draft hotel as typed into the form. Numeric and date fields stay raw text
    until the validator converts them.
    """
    name: str = ""
    location: str = ""
    room_type: str = ROOM_TYPES[0]
    price_per_night: str = ""
    available_rooms: str = ""
    rating: str = ""
    check_in_date: str = ""
    is_pet_friendly: bool = False
    amenities: List[str] = field(default_factory=list)

    @classmethod
    def from_hotel(cls, hotel: Hotel) -> "HotelFormData":
        return cls(
            name=hotel.name,
            location=hotel.location,
            room_type=hotel.room_type,
            price_per_night=str(hotel.price_per_night),
            available_rooms=str(hotel.available_rooms),
            rating=str(hotel.rating),
            check_in_date=hotel.check_in_date.isoformat(),
            is_pet_friendly=hotel.is_pet_friendly,
            amenities=list(hotel.amenities),
        )

    def toggle_amenity(self, amenity: str) -> "HotelFormData":
        if amenity in self.amenities:
            amenities = [a for a in self.amenities if a != amenity]
        else:
            amenities = self.amenities + [amenity]
        return replace(self, amenities=amenities)
