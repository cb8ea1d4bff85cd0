# services/hotel_filter.py
from __future__ import annotations
from typing import Iterable, List

from models.api_result import ALL_ROOM_TYPES
from models.hotel import Hotel


def matches_search(hotel: Hotel, search_term: str) -> bool:
    term = (search_term or "").lower()
    return term in hotel.name.lower() or term in hotel.location.lower()


def matches_room_type(hotel: Hotel, room_type: str) -> bool:
    return room_type == ALL_ROOM_TYPES or hotel.room_type == room_type


def filter_hotels(
    hotels: Iterable[Hotel], search_term: str = "", room_type: str = ALL_ROOM_TYPES
) -> List[Hotel]:
    """Hotels matching both the search term (name or location) and the room type, in input order."""
    return [h for h in hotels if matches_search(h, search_term) and matches_room_type(h, room_type)]


def has_active_filters(search_term: str, room_type: str) -> bool:
    return bool(search_term) or room_type != ALL_ROOM_TYPES
