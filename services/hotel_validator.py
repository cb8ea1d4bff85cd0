# services/hotel_validator.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, Optional

from models.hotel import ROOM_TYPES, HotelData
from models.hotel_form import HotelFormData
from utils.date_parser import parse_date
from utils.numbers import parse_decimal, parse_integer

REQUIRED = "REQUIRED"
TOO_SHORT = "TOO_SHORT"
INVALID_NUMBER = "INVALID_NUMBER"
OUT_OF_RANGE = "OUT_OF_RANGE"
NEGATIVE = "NEGATIVE"
INVALID_DATE = "INVALID_DATE"
PAST_DATE = "PAST_DATE"
INVALID_CHOICE = "INVALID_CHOICE"

MIN_NAME_LENGTH = 3
MAX_PRICE = 10000
MAX_ROOMS = 1000
MIN_RATING = 1
MAX_RATING = 5

# (field, code) -> message shown under the form field
MESSAGES = {
    ("name", REQUIRED): "Hotel name is required",
    ("name", TOO_SHORT): f"Hotel name must be at least {MIN_NAME_LENGTH} characters",
    ("location", REQUIRED): "Location is required",
    ("roomType", INVALID_CHOICE): f"Room type must be one of: {', '.join(ROOM_TYPES)}",
    ("pricePerNight", INVALID_NUMBER): "Valid price is required",
    ("pricePerNight", OUT_OF_RANGE): f"Price must be greater than 0 and at most {MAX_PRICE}",
    ("availableRooms", INVALID_NUMBER): "Valid number of rooms is required",
    ("availableRooms", NEGATIVE): "Rooms cannot be negative",
    ("availableRooms", OUT_OF_RANGE): f"Rooms must be at most {MAX_ROOMS}",
    ("rating", INVALID_NUMBER): "Valid rating is required",
    ("rating", OUT_OF_RANGE): f"Rating must be between {MIN_RATING} and {MAX_RATING}",
    ("checkInDate", REQUIRED): "Check-in date is required",
    ("checkInDate", INVALID_DATE): "Check-in date is not a valid date",
    ("checkInDate", PAST_DATE): "Check-in date cannot be in the past",
}


@dataclass
class FieldError:
    code: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationResult:
    data: Optional[HotelData] = None
    errors: Dict[str, FieldError] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def codes(self) -> Dict[str, str]:
        return {name: err.code for name, err in self.errors.items()}

    @property
    def messages(self) -> Dict[str, str]:
        return {name: err.message for name, err in self.errors.items()}


class HotelFormValidator:
    """
    Checks a raw HotelFormData against the hotel record constraints and
    normalizes it into HotelData. Every field is checked; all errors are
    reported together, keyed by the API field name.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self.today = today

    def validate(self, form: HotelFormData) -> ValidationResult:
        if not isinstance(form, HotelFormData):
            raise TypeError("HotelFormValidator.validate expects HotelFormData")

        errors: Dict[str, FieldError] = {}

        name = (form.name or "").strip()
        if not name:
            self._fail(errors, "name", REQUIRED)
        elif len(name) < MIN_NAME_LENGTH:
            self._fail(errors, "name", TOO_SHORT)

        location = (form.location or "").strip()
        if not location:
            self._fail(errors, "location", REQUIRED)

        if form.room_type not in ROOM_TYPES:
            self._fail(errors, "roomType", INVALID_CHOICE)

        price = parse_decimal(form.price_per_night)
        if price is None:
            self._fail(errors, "pricePerNight", INVALID_NUMBER)
        elif price <= 0 or price > MAX_PRICE:
            self._fail(errors, "pricePerNight", OUT_OF_RANGE)

        rooms = parse_integer(form.available_rooms)
        if rooms is None:
            self._fail(errors, "availableRooms", INVALID_NUMBER)
        elif rooms < 0:
            self._fail(errors, "availableRooms", NEGATIVE)
        elif rooms > MAX_ROOMS:
            self._fail(errors, "availableRooms", OUT_OF_RANGE)

        rating = parse_decimal(form.rating)
        if rating is None:
            self._fail(errors, "rating", INVALID_NUMBER)
        elif rating < MIN_RATING or rating > MAX_RATING:
            self._fail(errors, "rating", OUT_OF_RANGE)

        check_in = None
        if not (form.check_in_date or "").strip():
            self._fail(errors, "checkInDate", REQUIRED)
        else:
            check_in = parse_date(form.check_in_date)
            if check_in is None:
                self._fail(errors, "checkInDate", INVALID_DATE)
            elif check_in < self.today():
                self._fail(errors, "checkInDate", PAST_DATE)

        if errors:
            return ValidationResult(errors=errors)

        return ValidationResult(
            data=HotelData(
                name=name,
                location=location,
                room_type=form.room_type,
                price_per_night=price,
                available_rooms=rooms,
                rating=rating,
                check_in_date=check_in,
                is_pet_friendly=bool(form.is_pet_friendly),
                amenities=list(form.amenities),
            )
        )

    def _fail(self, errors: Dict[str, FieldError], field_name: str, code: str) -> None:
        errors[field_name] = FieldError(code=code, message=MESSAGES[(field_name, code)])


def validate_hotel_form(form: HotelFormData, today: Optional[date] = None) -> ValidationResult:
    validator = HotelFormValidator(today=(lambda: today) if today else date.today)
    return validator.validate(form)
