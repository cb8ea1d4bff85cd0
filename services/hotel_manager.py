# services/hotel_manager.py
from __future__ import annotations
from typing import Dict, List, Optional

from config import Config
from models.api_result import ALL_ROOM_TYPES, ApiResult, HotelQuery
from models.hotel import ROOM_TYPES, Hotel
from models.hotel_form import HotelFormData
from models.stats import HotelStats
from services.hotel_filter import filter_hotels, has_active_filters
from services.hotel_stats import compute_stats
from services.hotel_validator import HotelFormValidator
from utils.debounce import Debouncer
from utils.logger import setup_logger

logger = setup_logger(__name__)


class HotelManager:
    """
    Application state behind the hotel list view: the loaded collection,
    the hotel being edited, the active filters and the error banner.

    The collection only changes after the client confirms an operation.
    List fetches are numbered; a response is applied only if it belongs to
    the most recently issued fetch, so a slow reply to an older search can
    never overwrite a newer one.
    """

    def __init__(self, client, validator: Optional[HotelFormValidator] = None,
                 debouncer: Optional[Debouncer] = None):
        self.client = client
        self.validator = validator or HotelFormValidator()
        self.debouncer: Debouncer = debouncer or Debouncer(Config.SEARCH_DEBOUNCE_MS)

        self.hotels: List[Hotel] = []
        self.search_term = ""
        self.room_type = ALL_ROOM_TYPES
        self.error: Optional[str] = None

        self.form_open = False
        self.editing: Optional[Hotel] = None
        self.form_errors: Dict[str, str] = {}
        self.pending_delete: Optional[str] = None

        self._latest_seq = 0

    # ------------------------
    # Derived views
    # ------------------------
    @property
    def query(self) -> HotelQuery:
        return HotelQuery(search=self.search_term, room_type=self.room_type)

    @property
    def visible_hotels(self) -> List[Hotel]:
        return filter_hotels(self.hotels, self.search_term, self.room_type)

    @property
    def stats(self) -> HotelStats:
        return compute_stats(self.hotels)

    @property
    def filters_active(self) -> bool:
        return has_active_filters(self.search_term, self.room_type)

    # ------------------------
    # Fetching
    # ------------------------
    def begin_fetch(self) -> int:
        self._latest_seq += 1
        return self._latest_seq

    def complete_fetch(self, seq: int, result: ApiResult[List[Hotel]]) -> bool:
        """Apply a list result. Returns False when it was stale or failed."""
        if seq != self._latest_seq:
            logger.debug("Discarding stale hotel list response #%s (latest #%s)", seq, self._latest_seq)
            return False
        if not result.success:
            self.error = result.error
            return False
        self.hotels = list(result.data or [])
        return True

    def refresh(self) -> bool:
        seq = self.begin_fetch()
        return self.complete_fetch(seq, self.client.list_hotels(self.query))

    # ------------------------
    # Filters
    # ------------------------
    def set_search_term(self, term: str) -> None:
        if term == self.search_term:
            return
        self.search_term = term
        self.debouncer.push(term)

    def poll_search(self) -> bool:
        """Fetch for the typed search term once typing has paused."""
        if self.debouncer.poll() is None:
            return False
        self.refresh()
        return True

    def set_room_type(self, room_type: str) -> None:
        if room_type != ALL_ROOM_TYPES and room_type not in ROOM_TYPES:
            raise ValueError(f"Unknown room type: {room_type!r}")
        if room_type == self.room_type:
            return
        self.room_type = room_type
        self.refresh()

    def clear_filters(self) -> None:
        self.search_term = ""
        self.room_type = ALL_ROOM_TYPES
        self.debouncer.cancel()
        self.refresh()

    # ------------------------
    # Add / edit form
    # ------------------------
    def open_create_form(self) -> None:
        self.editing = None
        self.form_errors = {}
        self.form_open = True

    def start_edit(self, hotel: Hotel) -> None:
        self.editing = hotel
        self.form_errors = {}
        self.form_open = True

    def close_form(self) -> None:
        self.form_open = False
        self.editing = None
        self.form_errors = {}

    def form_for_editing(self) -> HotelFormData:
        if self.editing is None:
            return HotelFormData()
        return HotelFormData.from_hotel(self.editing)

    def submit(self, form: HotelFormData) -> bool:
        """Validate and send the form. Returns True once the hotel is saved."""
        validation = self.validator.validate(form)
        if not validation.is_valid:
            self.form_errors = validation.messages
            return False
        self.form_errors = {}

        if self.editing is not None:
            result = self.client.update_hotel(self.editing.id, validation.data)
        else:
            result = self.client.create_hotel(validation.data)

        if not result.success:
            self.error = result.error
            return False

        saved = result.data
        if any(h.id == saved.id for h in self.hotels):
            self.hotels = [saved if h.id == saved.id else h for h in self.hotels]
            logger.info("Updated hotel %s", saved.id)
        else:
            self.hotels = self.hotels + [saved]
            logger.info("Created hotel %s", saved.id)
        self.close_form()
        return True

    # ------------------------
    # Delete (with confirmation)
    # ------------------------
    def request_delete(self, hotel_id: str) -> None:
        self.pending_delete = hotel_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        if self.pending_delete is None:
            return False
        hotel_id = self.pending_delete
        self.pending_delete = None
        return self.delete(hotel_id)

    def delete(self, hotel_id: str) -> bool:
        result = self.client.delete_hotel(hotel_id)
        if not result.success:
            self.error = result.error
            return False
        self.hotels = [h for h in self.hotels if h.id != hotel_id]
        logger.info("Deleted hotel %s", hotel_id)
        return True

    def dismiss_error(self) -> None:
        self.error = None
