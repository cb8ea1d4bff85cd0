from datetime import date

from models.hotel import Hotel


def make_hotel(hotel_id, name, location, room_type="Double", rooms=10, rating=4.0, price=100.0):
    return Hotel(
        id=hotel_id,
        name=name,
        location=location,
        room_type=room_type,
        price_per_night=price,
        available_rooms=rooms,
        rating=rating,
        check_in_date=date(2026, 11, 1),
    )


class FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    """Records requests and replies with queued responses (or raises queued exceptions)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "timeout": timeout, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
