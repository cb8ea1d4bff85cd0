# models/stats.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from pydantic import ValidationError

from models.schemas import HotelStatsSchema, MalformedHotelPayload


@dataclass
class HotelStats:
    total_hotels: int = 0
    total_available_rooms: int = 0
    # unrounded; use display_rating for presentation
    average_rating: float = 0.0
    room_type_distribution: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def display_rating(self) -> str:
        return f"{self.average_rating:.1f}"

    @classmethod
    def from_payload(cls, payload: Any) -> "HotelStats":
        try:
            stats = HotelStatsSchema.model_validate(payload)
        except ValidationError as e:
            raise MalformedHotelPayload(f"stats payload is malformed: {e}") from e

        return cls(
            total_hotels=stats.total_hotels,
            total_available_rooms=stats.total_available_rooms,
            average_rating=float(stats.average_rating or 0.0),
            room_type_distribution=[(item.room_type, item.count) for item in stats.room_type_distribution],
        )
