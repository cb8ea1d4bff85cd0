import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # ------------------------
    # Hotel REST API
    # ------------------------
    HOTEL_API_URL = os.getenv("HOTEL_API_URL", "http://localhost:5000/api")
    HOTEL_API_TIMEOUT = float(os.getenv("HOTEL_API_TIMEOUT", "10"))

    # "api" talks to the REST service, "local" keeps hotels in memory
    HOTEL_BACKEND = os.getenv("HOTEL_BACKEND", "api").lower()

    # ------------------------
    # Search
    # ------------------------
    SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", "500"))

    # ------------------------
    # Logging
    # ------------------------
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("LOG_FILE", "")


def build_client(config=Config):
    """Client selected by HOTEL_BACKEND."""
    from clients.hotel_api_client import HotelApiClient
    from clients.local_hotel_client import LocalHotelClient

    if config.HOTEL_BACKEND == "local":
        return LocalHotelClient()
    if config.HOTEL_BACKEND != "api":
        raise ValueError(f"Unknown HOTEL_BACKEND: {config.HOTEL_BACKEND!r}")
    return HotelApiClient(base_url=config.HOTEL_API_URL, timeout=config.HOTEL_API_TIMEOUT)
