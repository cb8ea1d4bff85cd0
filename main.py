# main.py
from __future__ import annotations
import argparse

from config import build_client
from models.api_result import ALL_ROOM_TYPES
from models.hotel import ROOM_TYPES
from services.hotel_manager import HotelManager


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List hotels with summary statistics.")
    parser.add_argument("search", nargs="?", default="", help="match against hotel name or location")
    parser.add_argument("--room-type", default=ALL_ROOM_TYPES, choices=[ALL_ROOM_TYPES] + list(ROOM_TYPES))
    return parser.parse_args(argv)


def run(argv=None) -> int:
    args = parse_args(argv)
    manager = HotelManager(build_client())
    manager.search_term = args.search
    manager.room_type = args.room_type

    if not manager.refresh():
        print(f"❌ {manager.error}")
        return 1

    stats = manager.stats
    print(f"🏨 Total Hotels: {stats.total_hotels}")
    print(f"🛏️ Available Rooms: {stats.total_available_rooms}")
    print(f"⭐ Average Rating: {stats.display_rating}")
    print()

    hotels = manager.visible_hotels
    if manager.filters_active:
        print(f"Found {len(hotels)} hotel(s)")
        print()
    if not hotels:
        print("No Hotels Found")
    for hotel in hotels:
        print(hotel)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
