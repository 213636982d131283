"""
Guest <-> plain-data conversion shared by the JSON, YAML and XML adapters.

Each format only has to produce / consume the dict shape below; every
shape check lives here so all formats reject the same bad data.

    {"guest_id": 1, "name": "joe", "phone": "...", "email": "...",
     "archived": false,
     "reservations": [{"reservation_id": 1, "room_number": 101,
                       "cost": 150, "party_size": 2, "is_paid": true}]}
"""

import re
from typing import Any

from guest_store.domain.guest import Guest
from guest_store.domain.reservation import Reservation
from guest_store.domain.serializer import DecodingError, EncodingError

_GUEST_FIELDS = {"guest_id": int, "name": str, "phone": str, "email": str, "archived": bool}
_RESERVATION_FIELDS = {
    "reservation_id": int,
    "room_number": int,
    "cost": int,
    "party_size": int,
    "is_paid": bool,
}

# Lone surrogates (input() yields them for undecodable bytes) have no UTF-8 form.
_SURROGATES = re.compile("[\ud800-\udfff]")


def _is_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int; keep them apart
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def _check_encodable(obj: object, fields: dict[str, type], what: str) -> None:
    for name, expected in fields.items():
        value = getattr(obj, name)
        if not _is_type(value, expected):
            raise EncodingError(
                f"{what}.{name} must be {expected.__name__}, got {type(value).__name__}"
            )
        if expected is str and _SURROGATES.search(value):
            raise EncodingError(f"{what}.{name} contains text that has no UTF-8 form")


def guest_to_record(guest: Guest) -> dict[str, Any]:
    _check_encodable(guest, _GUEST_FIELDS, "guest")
    reservations = []
    for reservation in guest.reservations.values():
        _check_encodable(reservation, _RESERVATION_FIELDS, "reservation")
        reservations.append({name: getattr(reservation, name) for name in _RESERVATION_FIELDS})
    record = {name: getattr(guest, name) for name in _GUEST_FIELDS}
    record["reservations"] = reservations
    return record


def guests_to_records(guests: list[Guest]) -> list[dict[str, Any]]:
    return [guest_to_record(g) for g in guests]


def _take(record: Any, fields: dict[str, type], what: str) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise DecodingError(f"{what} must be a mapping, got {type(record).__name__}")
    values = {}
    for name, expected in fields.items():
        if name not in record:
            raise DecodingError(f"{what} is missing {name!r}")
        value = record[name]
        if not _is_type(value, expected):
            raise DecodingError(
                f"{what}.{name} must be {expected.__name__}, got {type(value).__name__}"
            )
        values[name] = value
    return values


def guest_from_record(record: Any) -> Guest:
    guest = Guest(**_take(record, _GUEST_FIELDS, "guest"))
    reservations = record.get("reservations", [])
    if not isinstance(reservations, list):
        raise DecodingError(f"guest {guest.guest_id}: reservations must be a list")
    for item in reservations:
        reservation = Reservation(**_take(item, _RESERVATION_FIELDS, "reservation"))
        if not guest.add_reservation(reservation):
            raise DecodingError(
                f"guest {guest.guest_id}: duplicate reservation id {reservation.reservation_id}"
            )
    return guest


def guests_from_records(records: Any) -> list[Guest]:
    if not isinstance(records, list):
        raise DecodingError(f"guest collection must be a list, got {type(records).__name__}")
    guests = []
    seen: set[int] = set()
    for record in records:
        guest = guest_from_record(record)
        if guest.guest_id in seen:
            raise DecodingError(f"duplicate guest id {guest.guest_id}")
        seen.add(guest.guest_id)
        guests.append(guest)
    return guests
