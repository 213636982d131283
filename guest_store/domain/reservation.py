from dataclasses import dataclass


@dataclass
class Reservation:
    """A booking owned by exactly one guest. Identified per guest, not globally."""

    reservation_id: int = 0
    room_number: int = 0
    cost: int = 0
    party_size: int = 0
    is_paid: bool = False

    def __str__(self) -> str:
        paid = "Y" if self.is_paid else "N"
        return (
            f"reservation {self.reservation_id}: Room({self.room_number}), "
            f"Cost({self.cost}), People({self.party_size}), Paid({paid})"
        )
