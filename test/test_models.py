from datetime import date

import pytest

from helpers import make_hotel
from models.api_result import ApiResult, HotelQuery
from models.hotel import Hotel, MalformedHotelPayload
from models.hotel_form import HotelFormData
from models.stats import HotelStats


def test_toggle_amenity_appends_and_removes():
    form = HotelFormData(amenities=["WiFi"])
    added = form.toggle_amenity("Pool")
    assert added.amenities == ["WiFi", "Pool"]
    assert form.amenities == ["WiFi"]
    assert added.toggle_amenity("WiFi").amenities == ["Pool"]


def test_toggle_twice_never_duplicates():
    form = HotelFormData().toggle_amenity("Spa").toggle_amenity("Gym").toggle_amenity("Spa")
    assert form.amenities == ["Gym"]


def test_form_from_hotel_is_text():
    form = HotelFormData.from_hotel(make_hotel("1", "Grand Plaza", "NYC", rooms=15, rating=4.5, price=250.0))
    assert form.available_rooms == "15"
    assert form.rating == "4.5"
    assert form.price_per_night == "250.0"
    assert form.check_in_date == "2026-11-01"


def test_hotel_payload_roundtrip_keeps_id():
    hotel = make_hotel("abc", "Grand Plaza", "NYC")
    payload = hotel.to_payload()
    assert payload["id"] == "abc"
    assert payload["checkInDate"] == "2026-11-01"
    assert Hotel.from_payload(payload) == hotel


@pytest.mark.parametrize("payload", [
    None,
    [],
    {"_id": "1"},
    {"_id": "1", "name": 5, "location": "X", "roomType": "Suite", "pricePerNight": 1,
     "availableRooms": 1, "rating": 4, "checkInDate": "2026-01-01"},
    {"_id": "1", "name": "A", "location": "X", "roomType": "Suite", "pricePerNight": "cheap",
     "availableRooms": 1, "rating": 4, "checkInDate": "2026-01-01"},
])
def test_malformed_payloads(payload):
    with pytest.raises(MalformedHotelPayload):
        Hotel.from_payload(payload)


def test_hotel_str_shows_card_details():
    hotel = make_hotel("1", "Grand Plaza", "NYC", room_type="Deluxe", rooms=15, rating=4.5, price=250.0)
    hotel.is_pet_friendly = True
    hotel.amenities = ["WiFi", "Pool"]
    text = str(hotel)
    assert "Grand Plaza" in text
    assert "$250.00 per night" in text
    assert "November 1, 2026" in text
    assert "Pet Friendly" in text
    assert "WiFi, Pool" in text


def test_api_result_constructors():
    assert ApiResult.ok([1]).success
    failed = ApiResult.failure("boom")
    assert not failed.success
    assert failed.error == "boom"
    assert failed.data is None


def test_query_params_skip_empty_values():
    assert HotelQuery().to_params() == {}
    params = HotelQuery(search="x", room_type="Suite", min_price=10, max_price=20.5).to_params()
    assert params == {"search": "x", "roomType": "Suite", "minPrice": "10", "maxPrice": "20.5"}


def record(**overrides):
    payload = {
        "_id": "h1",
        "name": "Grand Plaza",
        "location": "NYC",
        "roomType": "Deluxe",
        "pricePerNight": 250,
        "availableRooms": 15,
        "rating": 4.5,
        "checkInDate": "2026-11-01",
        "isPetFriendly": True,
        "amenities": ["WiFi"],
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize("overrides", [
    {"availableRooms": 3.7},
    {"availableRooms": "15"},
    {"isPetFriendly": "false"},
    {"isPetFriendly": 0},
    {"pricePerNight": "250"},
    {"rating": "4.5"},
    {"checkInDate": 20261101},
    {"checkInDate": "soon-ish"},
    {"amenities": "WiFi"},
    {"amenities": ["WiFi", 3]},
    {"_id": None},
    {"_id": ""},
])
def test_wrong_typed_fields_are_rejected(overrides):
    with pytest.raises(MalformedHotelPayload):
        Hotel.from_payload(record(**overrides))


def test_strict_record_keeps_exact_values():
    hotel = Hotel.from_payload(record(isPetFriendly=False, amenities=None))
    assert hotel.price_per_night == 250.0
    assert isinstance(hotel.price_per_night, float)
    assert hotel.available_rooms == 15
    assert hotel.is_pet_friendly is False
    assert hotel.amenities == []
    assert hotel.check_in_date == date(2026, 11, 1)


def test_falsy_ids_are_kept():
    assert Hotel.from_payload(record(_id=0)).id == "0"
    assert Hotel.from_payload(record(_id=None, id=0)).id == "0"
    # `_id` wins over `id` even when it is falsy
    assert Hotel.from_payload(record(_id=0, id="other")).id == "0"


def test_stats_payload_is_strict():
    payload = {
        "totalHotels": 2,
        "totalAvailableRooms": 9,
        "averageRating": None,
        "roomTypeDistribution": [{"_id": "Suite", "count": 2}],
    }
    stats = HotelStats.from_payload(payload)
    assert stats.average_rating == 0.0
    assert stats.room_type_distribution == [("Suite", 2)]

    for bad in ({**payload, "totalHotels": 2.5}, {**payload, "totalAvailableRooms": "9"},
                {**payload, "roomTypeDistribution": [{"_id": "Suite", "count": "2"}]}, None):
        with pytest.raises(MalformedHotelPayload):
            HotelStats.from_payload(bad)
