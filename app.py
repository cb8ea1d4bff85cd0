from __future__ import annotations

import time

import streamlit as st

from config import build_client
from models.api_result import ALL_ROOM_TYPES
from models.hotel import AMENITY_OPTIONS, ROOM_TYPES, Hotel
from models.hotel_form import HotelFormData
from services.hotel_manager import HotelManager
from utils.date_parser import format_display_date, parse_date

APP_STYLE = """
<style>
:root {
  --bg: #f6f8fb;
  --panel: #ffffff;
  --text: #0f172a;
  --muted: #475569;
  --accent: #2563eb;
}
html, body {
  background: var(--bg);
  color: var(--text);
}
.main .block-container {
  padding: 1.5rem 2rem 3rem;
  background: var(--bg);
}
.hero {
  background: linear-gradient(135deg, rgba(37,99,235,0.16), rgba(79,70,229,0.14));
  border: 1px solid rgba(37,99,235,0.12);
  padding: 1.25rem 1.5rem;
  border-radius: 14px;
  margin-bottom: 1rem;
}
.hero h1 {
  margin: 0;
  color: var(--text);
}
.hero p {
  margin: 0.25rem 0 0;
  color: var(--muted);
}
.price {
  font-size: 1.6rem;
  font-weight: 700;
  color: var(--accent);
}
.amenity {
  display: inline-block;
  background: #eff6ff;
  color: #1d4ed8;
  border: 1px solid #bfdbfe;
  border-radius: 6px;
  padding: 0.1rem 0.5rem;
  margin: 0 0.25rem 0.25rem 0;
  font-size: 0.8rem;
}
</style>
"""

ROOM_TYPE_FILTER_OPTIONS = [ALL_ROOM_TYPES] + list(ROOM_TYPES)


def get_manager() -> HotelManager:
    if "manager" not in st.session_state:
        manager = HotelManager(build_client())
        manager.refresh()
        st.session_state.manager = manager
    return st.session_state.manager


def clear_filters() -> None:
    # runs as a widget callback, before the filter widgets are drawn again
    st.session_state.search_term = ""
    st.session_state.room_type_filter = ALL_ROOM_TYPES
    get_manager().clear_filters()


def field_error(manager: HotelManager, name: str) -> None:
    message = manager.form_errors.get(name)
    if message:
        st.markdown(f":red[{message}]")


def render_stats(manager: HotelManager) -> None:
    stats = manager.stats
    c1, c2, c3 = st.columns(3)
    c1.metric("🏨 Total Hotels", stats.total_hotels)
    c2.metric("🛏️ Available Rooms", stats.total_available_rooms)
    c3.metric("⭐ Average Rating", stats.display_rating)


def render_filters(manager: HotelManager) -> None:
    st.subheader("🔍 Search & Filter")
    left, right = st.columns(2)
    with left:
        term = st.text_input(
            "Search Hotels",
            key="search_term",
            placeholder="Search by name or location...",
        )
    with right:
        room_type = st.selectbox(
            "Filter by Room Type",
            ROOM_TYPE_FILTER_OPTIONS,
            key="room_type_filter",
            format_func=lambda v: "All Room Types" if v == ALL_ROOM_TYPES else v,
        )

    manager.set_room_type(room_type)
    manager.set_search_term(term)
    if manager.debouncer.pending:
        # a newer keystroke reruns the script and interrupts this wait
        time.sleep(manager.debouncer.remaining())
        manager.poll_search()

    if manager.filters_active:
        found, clear = st.columns([4, 1])
        found.markdown(f"Found **{len(manager.visible_hotels)}** hotel(s)")
        clear.button("✕ Clear Filters", on_click=clear_filters)


def render_card(manager: HotelManager, hotel: Hotel) -> None:
    with st.container(border=True):
        st.markdown(f"### {hotel.name}")
        st.caption(f"📍 {hotel.location} · ⭐ {hotel.rating:.1f}")

        c1, c2 = st.columns(2)
        c1.markdown(f"**Room Type**  \n{hotel.room_type}")
        c2.markdown(f"**Available Rooms**  \n{hotel.available_rooms}")
        st.markdown(f"📅 Check-in: **{format_display_date(hotel.check_in_date)}**")

        st.markdown(f'<span class="price">${hotel.price_per_night:.2f}</span> per night', unsafe_allow_html=True)
        if hotel.is_pet_friendly:
            st.markdown("🐾 Pet Friendly")
        if hotel.amenities:
            chips = "".join(f'<span class="amenity">{a}</span>' for a in hotel.amenities)
            st.markdown(chips, unsafe_allow_html=True)

        if manager.pending_delete == hotel.id:
            st.warning(f'Are you sure you want to delete "{hotel.name}"? This action cannot be undone.')
            yes, no = st.columns(2)
            yes.button("Delete", key=f"confirm-{hotel.id}", type="primary", on_click=manager.confirm_delete)
            no.button("Cancel", key=f"cancel-{hotel.id}", on_click=manager.cancel_delete)
        else:
            edit, delete = st.columns(2)
            edit.button("✏️ Edit", key=f"edit-{hotel.id}", on_click=manager.start_edit, args=(hotel,))
            delete.button("🗑️ Delete", key=f"delete-{hotel.id}", on_click=manager.request_delete, args=(hotel.id,))


def render_list(manager: HotelManager) -> None:
    hotels = manager.visible_hotels
    if not hotels:
        st.info("🏨 **No Hotels Found**  \nGet started by adding your first hotel!")
        return

    columns = st.columns(3)
    for idx, hotel in enumerate(hotels):
        with columns[idx % 3]:
            render_card(manager, hotel)


def render_form(manager: HotelManager) -> None:
    draft = manager.form_for_editing()
    editing = manager.editing is not None
    form_key = f"hotel-form-{manager.editing.id if editing else 'new'}"

    st.subheader("✏️ Edit Hotel" if editing else "➕ Add New Hotel")
    with st.form(form_key):
        name = st.text_input("Hotel Name *", value=draft.name, placeholder="Enter hotel name")
        field_error(manager, "name")
        location = st.text_input("Location *", value=draft.location, placeholder="Enter location")
        field_error(manager, "location")
        room_type_index = ROOM_TYPES.index(draft.room_type) if draft.room_type in ROOM_TYPES else 0
        room_type = st.selectbox("Room Type *", ROOM_TYPES, index=room_type_index)
        field_error(manager, "roomType")

        c1, c2 = st.columns(2)
        with c1:
            price = st.text_input("Price per Night ($) *", value=draft.price_per_night, placeholder="0.00")
            field_error(manager, "pricePerNight")
        with c2:
            rooms = st.text_input("Available Rooms *", value=draft.available_rooms, placeholder="0")
            field_error(manager, "availableRooms")

        c3, c4 = st.columns(2)
        with c3:
            rating = st.text_input("Rating (1-5) *", value=draft.rating, placeholder="5.0")
            field_error(manager, "rating")
        with c4:
            initial_date = parse_date(draft.check_in_date) if draft.check_in_date else None
            check_in = st.date_input("Check-in Date *", value=initial_date)
            field_error(manager, "checkInDate")

        pet_friendly = st.checkbox("🐾 Pet Friendly", value=draft.is_pet_friendly)

        st.markdown("**Amenities**")
        amenity_cols = st.columns(3)
        checked = {}
        for idx, amenity in enumerate(AMENITY_OPTIONS):
            with amenity_cols[idx % 3]:
                checked[amenity] = st.checkbox(amenity, value=amenity in draft.amenities)

        save, cancel = st.columns(2)
        submitted = save.form_submit_button("✓ Update Hotel" if editing else "+ Add Hotel", type="primary")
        cancelled = cancel.form_submit_button("Cancel")

    if cancelled:
        manager.close_form()
        st.rerun()

    if submitted:
        form = HotelFormData(
            name=name,
            location=location,
            room_type=room_type,
            price_per_night=price,
            available_rooms=rooms,
            rating=rating,
            check_in_date=check_in.isoformat() if check_in else "",
            is_pet_friendly=pet_friendly,
            amenities=list(draft.amenities),
        )
        for amenity in AMENITY_OPTIONS:
            if checked[amenity] != (amenity in form.amenities):
                form = form.toggle_amenity(amenity)
        manager.submit(form)
        st.rerun()


def render_error(manager: HotelManager) -> None:
    if not manager.error:
        return
    msg, dismiss = st.columns([6, 1])
    msg.error(manager.error)
    dismiss.button("Dismiss", on_click=manager.dismiss_error)


st.set_page_config(page_title="Hotel Management System", page_icon="🏨", layout="wide")
st.markdown(APP_STYLE, unsafe_allow_html=True)
st.markdown(
    """
    <div class="hero">
      <h1>🏨 Hotel Management System</h1>
      <p>Manage your hotel bookings efficiently</p>
    </div>
    """,
    unsafe_allow_html=True,
)

manager = get_manager()
st.button("+ Add New Hotel", type="primary", on_click=manager.open_create_form)

render_error(manager)
if manager.form_open:
    render_form(manager)

render_stats(manager)
render_filters(manager)
render_list(manager)
