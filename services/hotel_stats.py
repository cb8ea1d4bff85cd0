# services/hotel_stats.py
from __future__ import annotations
from typing import Dict, Sequence

from models.hotel import Hotel
from models.stats import HotelStats
from utils.numbers import safe_div


def compute_stats(hotels: Sequence[Hotel]) -> HotelStats:
    distribution: Dict[str, int] = {}
    for h in hotels:
        distribution[h.room_type] = distribution.get(h.room_type, 0) + 1

    return HotelStats(
        total_hotels=len(hotels),
        total_available_rooms=sum(h.available_rooms for h in hotels),
        average_rating=safe_div(sum(h.rating for h in hotels), len(hotels)),
        room_type_distribution=list(distribution.items()),
    )
