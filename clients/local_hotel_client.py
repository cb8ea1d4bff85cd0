# clients/local_hotel_client.py
from __future__ import annotations
import time
from datetime import date
from typing import Callable, List, Optional

from models.api_result import ApiResult, HotelQuery
from models.hotel import Hotel, HotelData
from models.stats import HotelStats
from services.hotel_filter import filter_hotels
from services.hotel_stats import compute_stats

NOT_FOUND = "Hotel not found"


def seed_hotels() -> List[Hotel]:
    return [
        Hotel(
            id="1",
            name="Grand Plaza Hotel",
            location="New York, NY",
            room_type="Deluxe",
            price_per_night=250.00,
            available_rooms=15,
            rating=4.5,
            check_in_date=date(2025, 10, 15),
            is_pet_friendly=True,
            amenities=["WiFi", "Pool", "Gym", "Restaurant"],
        ),
        Hotel(
            id="2",
            name="Sunset Beach Resort",
            location="Miami, FL",
            room_type="Suite",
            price_per_night=350.00,
            available_rooms=8,
            rating=4.8,
            check_in_date=date(2025, 10, 20),
            is_pet_friendly=False,
            amenities=["WiFi", "Pool", "Spa", "Restaurant", "Room Service"],
        ),
        Hotel(
            id="3",
            name="Mountain View Lodge",
            location="Denver, CO",
            room_type="Double",
            price_per_night=180.00,
            available_rooms=25,
            rating=4.2,
            check_in_date=date(2025, 11, 1),
            is_pet_friendly=True,
            amenities=["WiFi", "Parking", "Gym"],
        ),
    ]


class LocalHotelClient:
    """
    In-memory stand-in for the hotel REST service, same operations and
    ApiResult contract as HotelApiClient. Ids come from a millisecond clock.
    """

    def __init__(
        self,
        hotels: Optional[List[Hotel]] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.hotels: List[Hotel] = list(seed_hotels() if hotels is None else hotels)
        self.clock = clock
        self._last_id = 0

    def list_hotels(self, query: Optional[HotelQuery] = None) -> ApiResult[List[Hotel]]:
        query = query or HotelQuery()
        hotels = filter_hotels(self.hotels, query.search, query.room_type)
        if query.min_price:
            hotels = [h for h in hotels if h.price_per_night >= query.min_price]
        if query.max_price:
            hotels = [h for h in hotels if h.price_per_night <= query.max_price]
        if query.min_rating:
            hotels = [h for h in hotels if h.rating >= query.min_rating]
        return ApiResult.ok(hotels)

    def get_hotel(self, hotel_id: str) -> ApiResult[Hotel]:
        hotel = self._find(hotel_id)
        if hotel is None:
            return ApiResult.failure(NOT_FOUND)
        return ApiResult.ok(hotel)

    def create_hotel(self, data: HotelData) -> ApiResult[Hotel]:
        hotel = Hotel.from_data(self._next_id(), data)
        self.hotels.append(hotel)
        return ApiResult.ok(hotel)

    def update_hotel(self, hotel_id: str, data: HotelData) -> ApiResult[Hotel]:
        for idx, hotel in enumerate(self.hotels):
            if hotel.id == hotel_id:
                updated = Hotel.from_data(hotel.id, data)
                self.hotels[idx] = updated
                return ApiResult.ok(updated)
        return ApiResult.failure(NOT_FOUND)

    def delete_hotel(self, hotel_id: str) -> ApiResult[None]:
        if self._find(hotel_id) is None:
            return ApiResult.failure(NOT_FOUND)
        self.hotels = [h for h in self.hotels if h.id != hotel_id]
        return ApiResult.ok()

    def get_stats(self) -> ApiResult[HotelStats]:
        return ApiResult.ok(compute_stats(self.hotels))

    def _find(self, hotel_id: str) -> Optional[Hotel]:
        for hotel in self.hotels:
            if hotel.id == hotel_id:
                return hotel
        return None

    def _next_id(self) -> str:
        # two creates in the same millisecond still get distinct ids
        candidate = max(int(self.clock() * 1000), self._last_id + 1)
        self._last_id = candidate
        return str(candidate)
