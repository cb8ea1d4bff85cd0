from dataclasses import replace

import pytest

from clients.local_hotel_client import LocalHotelClient
from models.api_result import ApiResult
from services.hotel_manager import HotelManager
from services.hotel_validator import HotelFormValidator
from utils.debounce import Debouncer
from helpers import make_hotel


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000.0


class FailingClient(LocalHotelClient):
    """Local client whose mutations fail like a rejecting server."""

    def create_hotel(self, data):
        return ApiResult.failure("Server rejected hotel")

    def update_hotel(self, hotel_id, data):
        return ApiResult.failure("Server rejected update")

    def delete_hotel(self, hotel_id):
        return ApiResult.failure("Delete failed")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(today, clock):
    m = HotelManager(
        LocalHotelClient(),
        validator=HotelFormValidator(today=lambda: today),
        debouncer=Debouncer(500, clock=clock),
    )
    m.refresh()
    return m


def test_refresh_loads_collection(manager):
    assert [h.id for h in manager.hotels] == ["1", "2", "3"]
    assert manager.stats.total_hotels == 3


def test_stale_response_is_discarded(manager):
    old = manager.begin_fetch()
    new = manager.begin_fetch()
    fresh = [make_hotel("9", "Fresh Stay", "Austin, TX")]
    stale = [make_hotel("8", "Stale Stay", "Reno, NV")]

    assert manager.complete_fetch(new, ApiResult.ok(fresh))
    assert not manager.complete_fetch(old, ApiResult.ok(stale))
    assert [h.name for h in manager.hotels] == ["Fresh Stay"]


def test_stale_failure_does_not_raise_banner(manager):
    old = manager.begin_fetch()
    manager.begin_fetch()
    manager.complete_fetch(old, ApiResult.failure("timeout"))
    assert manager.error is None


def test_failed_fetch_keeps_collection_and_sets_error(manager):
    before = list(manager.hotels)
    seq = manager.begin_fetch()
    assert not manager.complete_fetch(seq, ApiResult.failure("Failed to fetch hotels"))
    assert manager.hotels == before
    assert manager.error == "Failed to fetch hotels"
    manager.dismiss_error()
    assert manager.error is None


def test_search_waits_for_quiet_period(manager, clock):
    calls = []
    original = manager.client.list_hotels
    manager.client.list_hotels = lambda query=None: calls.append(query.search) or original(query)

    manager.set_search_term("m")
    clock.advance(300)
    manager.set_search_term("mi")
    clock.advance(300)
    assert not manager.poll_search()
    manager.set_search_term("miami")
    clock.advance(499)
    assert not manager.poll_search()
    clock.advance(2)
    assert manager.poll_search()

    assert calls == ["miami"]
    assert [h.name for h in manager.visible_hotels] == ["Sunset Beach Resort"]
    assert manager.filters_active


def test_visible_hotels_filter_locally_before_fetch(manager):
    manager.set_search_term("DENVER")
    assert [h.id for h in manager.visible_hotels] == ["3"]


def test_room_type_filter_and_clear(manager):
    manager.set_room_type("Suite")
    assert [h.id for h in manager.hotels] == ["2"]
    manager.clear_filters()
    assert not manager.filters_active
    assert [h.id for h in manager.hotels] == ["1", "2", "3"]


def test_unknown_room_type_filter_rejected(manager):
    with pytest.raises(ValueError):
        manager.set_room_type("Penthouse")


def test_invalid_form_is_not_sent(manager, valid_form):
    manager.open_create_form()
    assert not manager.submit(replace(valid_form, name="Ab"))
    assert manager.form_errors == {"name": "Hotel name must be at least 3 characters"}
    assert manager.form_open
    assert len(manager.client.hotels) == 3


def test_create_appends_after_success(manager, valid_form):
    manager.open_create_form()
    assert manager.submit(replace(valid_form, name="  Harbor Inn "))
    assert manager.hotels[-1].name == "Harbor Inn"
    assert len(manager.hotels) == 4
    assert not manager.form_open
    assert manager.form_errors == {}


def test_edit_updates_in_place(manager, valid_form):
    target = manager.hotels[1]
    manager.start_edit(target)
    draft = manager.form_for_editing()
    assert draft.name == "Sunset Beach Resort"
    assert draft.price_per_night == "350.0"

    assert manager.submit(replace(draft, name="Sunset Bay Resort", check_in_date=valid_form.check_in_date))
    assert [h.id for h in manager.hotels] == ["1", "2", "3"]
    assert manager.hotels[1].name == "Sunset Bay Resort"
    assert manager.editing is None


def test_remote_failure_leaves_state_unchanged(today, valid_form):
    manager = HotelManager(FailingClient(), validator=HotelFormValidator(today=lambda: today))
    manager.refresh()
    before = list(manager.hotels)

    manager.open_create_form()
    assert not manager.submit(valid_form)
    assert manager.error == "Server rejected hotel"
    assert manager.form_open
    assert manager.hotels == before

    manager.request_delete("1")
    assert not manager.confirm_delete()
    assert manager.error == "Delete failed"
    assert manager.hotels == before


def test_delete_requires_confirmation(manager):
    manager.request_delete("2")
    assert manager.pending_delete == "2"
    manager.cancel_delete()
    assert not manager.confirm_delete()
    assert len(manager.hotels) == 3

    manager.request_delete("2")
    assert manager.confirm_delete()
    assert [h.id for h in manager.hotels] == ["1", "3"]
    assert manager.pending_delete is None
