"""
GuestStore: owns every Guest, hands out guest ids, and persists the
whole collection through a Serializer.

Ordinary misses (unknown id, already archived, ...) come back as False
or None.  Only persistence failures raise, straight from the serializer:
PersistenceError subclasses for bad data, OSError for I/O.
"""

import logging

from guest_store.domain.guest import Guest
from guest_store.domain.reservation import Reservation
from guest_store.domain.serializer import Serializer

log = logging.getLogger(__name__)


def _format_guests(guests: list[Guest]) -> str:
    return "\n".join(str(g) for g in guests)


class GuestStore:
    """
    In-memory guest collection, kept in insertion order.

    Ids start at 1 and are never handed out twice by the same store,
    even after the guest holding one is deleted.
    """

    def __init__(self, serializer: Serializer):
        self._serializer = serializer
        self._guests: list[Guest] = []
        self._last_id = 0

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    # -- guest CRUD ----------------------------------------------------------

    def add(self, guest: Guest) -> bool:
        """
        Assign the next id (overwriting any id on `guest`) and store it.

        The store takes ownership of `guest`: the caller may read the
        assigned id off it afterwards but should make further changes
        through the store.
        """
        guest.guest_id = self._next_id()
        self._guests.append(guest)
        log.debug("guest=%d added name=%r", guest.guest_id, guest.name)
        return True

    def delete(self, guest_id: int) -> bool:
        guest = self.find_guest(guest_id)
        if guest is None:
            return False
        self._guests.remove(guest)
        log.debug("guest=%d deleted", guest_id)
        return True

    def update(self, guest_id: int, updated: Guest) -> bool:
        """
        Correct a guest's contact details: name, phone and email.

        The id, archived flag and reservations are left alone; those have
        their own operations.
        """
        guest = self.find_guest(guest_id)
        if guest is None:
            return False
        guest.name = updated.name
        guest.phone = updated.phone
        guest.email = updated.email
        log.debug("guest=%d updated", guest_id)
        return True

    def find_guest(self, guest_id: int) -> Guest | None:
        for guest in self._guests:
            if guest.guest_id == guest_id:
                return guest
        return None

    # -- archiving -----------------------------------------------------------

    def archive_guest(self, guest_id: int) -> bool:
        """Active to Archived.  False if the guest is missing or already archived."""
        guest = self.find_guest(guest_id)
        if guest is None or guest.archived:
            return False
        guest.archived = True
        log.debug("guest=%d archived", guest_id)
        return True

    def unarchive_guest(self, guest_id: int) -> bool:
        """Archived to Active.  False if the guest is missing or already active."""
        guest = self.find_guest(guest_id)
        if guest is None or not guest.archived:
            return False
        guest.archived = False
        log.debug("guest=%d unarchived", guest_id)
        return True

    # -- search --------------------------------------------------------------

    def search_by_id(self, guest_id: int) -> list[Guest]:
        return [g for g in self._guests if g.guest_id == guest_id]

    def search_by_name(self, text: str) -> list[Guest]:
        """Case-insensitive substring match on the guest name."""
        needle = text.casefold()
        return [g for g in self._guests if needle in g.name.casefold()]

    def search_reservation_by_id(self, reservation_id: int) -> list[tuple[Guest, Reservation]]:
        """
        Every (guest, reservation) pair with this reservation id.

        Reservation ids are only unique per guest, so several guests may match.
        """
        matches = []
        for guest in self._guests:
            reservation = guest.find_reservation(reservation_id)
            if reservation is not None:
                matches.append((guest, reservation))
        return matches

    # -- listing & counts ----------------------------------------------------

    def _active(self) -> list[Guest]:
        return [g for g in self._guests if not g.archived]

    def _archived(self) -> list[Guest]:
        return [g for g in self._guests if g.archived]

    def list_all(self) -> str:
        if not self._guests:
            return "No guests stored"
        return _format_guests(self._guests)

    def list_active(self) -> str:
        active = self._active()
        if not active:
            return "No active guests stored"
        return _format_guests(active)

    def list_archived(self) -> str:
        archived = self._archived()
        if not archived:
            return "No archived guests stored"
        return _format_guests(archived)

    def number_of_guests(self) -> int:
        return len(self._guests)

    def number_of_active_guests(self) -> int:
        return len(self._active())

    def number_of_archived_guests(self) -> int:
        return len(self._archived())

    # -- persistence ---------------------------------------------------------

    def save(self) -> None:
        """Write the whole collection.  Serializer errors propagate."""
        self._serializer.write(self._guests)
        log.info("Saved %d guest(s)", len(self._guests))

    def load(self) -> None:
        """
        Replace the collection with what the serializer holds.

        On failure the current collection is kept as it was.  The id
        counter moves past every loaded id so add() cannot collide.
        """
        guests = self._serializer.read()
        self._guests = list(guests)
        highest = max((g.guest_id for g in self._guests), default=0)
        self._last_id = max(self._last_id, highest)
        log.info("Loaded %d guest(s), next id=%d", len(self._guests), self._last_id + 1)
