from datetime import date

import pytest

from helpers import make_hotel
from models.hotel_form import HotelFormData

TODAY = date(2026, 10, 19)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def valid_form():
    return HotelFormData(
        name="Grand Plaza Hotel",
        location="New York, NY",
        room_type="Deluxe",
        price_per_night="250",
        available_rooms="15",
        rating="4.5",
        check_in_date="2026-11-01",
        is_pet_friendly=True,
        amenities=["WiFi", "Pool"],
    )


@pytest.fixture
def hotels():
    return [
        make_hotel("1", "Grand Plaza Hotel", "New York, NY", "Deluxe", 15, 4.5, 250.0),
        make_hotel("2", "Sunset Beach Resort", "Miami, FL", "Suite", 8, 4.8, 350.0),
        make_hotel("3", "Mountain View Lodge", "Denver, CO", "Double", 25, 4.2, 180.0),
    ]
