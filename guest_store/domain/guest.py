"""
Guest aggregate: a hotel customer record and the reservations it owns.

Reservations are keyed by reservation_id, so a guest can never hold two
bookings with the same id.  Nothing outside the Guest touches that dict;
the store asks the guest to add, change or drop a booking.
"""

from dataclasses import dataclass, field

from guest_store.domain.reservation import Reservation

NO_RESERVATIONS = "\tNO RESERVATIONS"


@dataclass
class Guest:
    guest_id: int = 0      # assigned by GuestStore.add()
    name: str = ""
    phone: str = ""
    email: str = ""
    archived: bool = False
    reservations: dict[int, Reservation] = field(default_factory=dict)

    def __post_init__(self):
        # whatever keys the caller used, each booking ends up under its own id
        keyed: dict[int, Reservation] = {}
        for reservation in self.reservations.values():
            if reservation.reservation_id in keyed:
                raise ValueError(f"duplicate reservation id {reservation.reservation_id}")
            keyed[reservation.reservation_id] = reservation
        self.reservations = keyed

    # -- reservations --------------------------------------------------------

    def add_reservation(self, reservation: Reservation) -> bool:
        """Add a booking. False if this guest already has one with the same id."""
        if reservation.reservation_id in self.reservations:
            return False
        self.reservations[reservation.reservation_id] = reservation
        return True

    def find_reservation(self, reservation_id: int) -> Reservation | None:
        return self.reservations.get(reservation_id)

    def update_reservation(self, reservation_id: int, updated: Reservation) -> bool:
        """
        Copy room, cost, party size and paid flag from `updated`.

        The reservation id is never changed; updated.reservation_id is ignored.
        """
        found = self.find_reservation(reservation_id)
        if found is None:
            return False
        found.room_number = updated.room_number
        found.cost = updated.cost
        found.party_size = updated.party_size
        found.is_paid = updated.is_paid
        return True

    def delete_reservation(self, reservation_id: int) -> bool:
        return self.reservations.pop(reservation_id, None) is not None

    def reservation_count(self) -> int:
        return len(self.reservations)

    def list_reservations(self) -> str:
        if not self.reservations:
            return NO_RESERVATIONS
        return "\n".join(f"\t{r}" for r in self.reservations.values())

    # -- rendering -----------------------------------------------------------

    def __str__(self) -> str:
        archived = "Y" if self.archived else "N"
        return (
            f"id {self.guest_id}: name {self.name}, Phone({self.phone}), "
            f"Email({self.email}), Archived({archived})\n{self.list_reservations()}"
        )
