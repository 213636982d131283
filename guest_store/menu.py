"""
Numbered console menu over a GuestStore.

Kept out of scripts/hotel.py so it can be imported and driven by tests
with a scripted input().  Every action prints a success or failure
line; persistence errors are reported, never allowed to end the loop.
"""

import logging

from guest_store.console_input import read_bool, read_int, read_line
from guest_store.domain.guest import Guest
from guest_store.domain.reservation import Reservation
from guest_store.domain.serializer import PersistenceError
from guest_store.store import GuestStore

log = logging.getLogger(__name__)

MAIN_MENU = """\
 --------------------------------------------------
 |         Hotel Guests                           |
 --------------------------------------------------
 | GUEST MENU                                     |
 |   1) Add a guest                               |
 |   2) Update a guest                            |
 |   3) Delete a guest                            |
 |   4) Search guests                             |
 |   5) Archive a guest                           |
 |   6) List guests                               |
 |  11) Unarchive a guest                         |
 |------------------------------------------------|
 | RESERVATION MENU                               |
 |   7) Add reservation to guest                  |
 |   8) Update reservation in guest               |
 |   9) Delete reservation from guest             |
 |  10) Search reservations                       |
 --------------------------------------------------
 |  20) Save guests                               |
 |  21) Load guests                               |
 --------------------------------------------------
 |   0) Exit                                      |
 --------------------------------------------------
 ==>> """

LIST_MENU = """\
 --------------------------------
 |   1) View ALL guests         |
 |   2) View ACTIVE guests      |
 |   3) View ARCHIVED guests    |
 --------------------------------
 ==>> """

SEARCH_MENU = """\
 --------------------------------
 |   1) Search guest by ID      |
 |   2) Search guest by name    |
 --------------------------------
 ==>> """


def _report(ok: bool, success: str, failure: str) -> None:
    print(success if ok else failure)


def _print_guests(guests: list[Guest]) -> None:
    if not guests:
        print("No guests found")
        return
    for guest in guests:
        print(guest)


# -- guests ------------------------------------------------------------------


def add_guest(store: GuestStore) -> None:
    name = read_line("Enter name of guest: ")
    phone = read_line("Enter guest phone number: ")
    email = read_line("Enter guest email: ")
    guest = Guest(name=name, phone=phone, email=email)
    _report(store.add(guest), f"Added Successfully (id {guest.guest_id})", "Add Failed")


def list_guests(store: GuestStore) -> None:
    if store.number_of_guests() == 0:
        print("Option Invalid - No guests stored")
        return
    option = read_int(LIST_MENU)
    if option == 1:
        print(store.list_all())
    elif option == 2:
        print(store.list_active())
    elif option == 3:
        print(store.list_archived())
    else:
        print(f"Invalid option entered: {option}")


def update_guest(store: GuestStore) -> None:
    list_guests(store)
    if store.number_of_guests() == 0:
        return
    guest_id = read_int("Enter the id of the guest to update: ")
    if store.find_guest(guest_id) is None:
        print("There are no guests for this id")
        return
    name = read_line("Enter guest name: ")
    phone = read_line("Enter guest's phone number: ")
    email = read_line("Enter guest's email: ")
    updated = Guest(name=name, phone=phone, email=email)
    _report(store.update(guest_id, updated), "Update Successful", "Update Failed")


def delete_guest(store: GuestStore) -> None:
    guest_id = read_int("Enter ID of the guest to delete: ")
    _report(store.delete(guest_id), "Deleted Successfully", "Delete Failed. Guest not found.")


def archive_guest(store: GuestStore) -> None:
    print(store.list_active())
    if store.number_of_active_guests() == 0:
        return
    guest_id = read_int("Enter the id of the guest to archive: ")
    _report(store.archive_guest(guest_id), "Archive Successful!", "Archive NOT Successful")


def unarchive_guest(store: GuestStore) -> None:
    print(store.list_archived())
    if store.number_of_archived_guests() == 0:
        return
    guest_id = read_int("Enter the id of the guest to unarchive: ")
    _report(store.unarchive_guest(guest_id), "Unarchive Successful!", "Unarchive NOT Successful")


def search_guests(store: GuestStore) -> None:
    if store.number_of_guests() == 0:
        print("Option Invalid - No guests stored")
        return
    option = read_int(SEARCH_MENU)
    if option == 1:
        _print_guests(store.search_by_id(read_int("Enter the guest id to search by: ")))
    elif option == 2:
        _print_guests(store.search_by_name(read_line("Enter the guest name to search by: ")))
    else:
        print(f"Invalid option entered: {option}")


# -- reservations ------------------------------------------------------------


def _choose_active_guest(store: GuestStore) -> Guest | None:
    print(store.list_active())
    if store.number_of_active_guests() == 0:
        return None
    guest = store.find_guest(read_int("\nEnter the id of the guest: "))
    if guest is None:
        print("guest id is not valid")
        return None
    if guest.archived:
        print("guest is NOT Active, it is Archived")
        return None
    return guest


def _choose_reservation(guest: Guest) -> Reservation | None:
    if guest.reservation_count() == 0:
        print("No reservations for chosen guest")
        return None
    print(guest.list_reservations())
    reservation = guest.find_reservation(read_int("\nEnter the id of reservation: "))
    if reservation is None:
        print("Invalid reservation id")
    return reservation


def _read_reservation_details(reservation_id: int) -> Reservation:
    return Reservation(
        reservation_id=reservation_id,
        room_number=read_int("\tRoom number: "),
        cost=read_int("\tCost: "),
        party_size=read_int("\tNumber of people: "),
        is_paid=read_bool("\tIs the bill paid? (y/n) "),
    )


def add_reservation(store: GuestStore) -> None:
    guest = _choose_active_guest(store)
    if guest is None:
        return
    reservation = _read_reservation_details(read_int("\tReservation id: "))
    _report(guest.add_reservation(reservation), "Add Successful!", "Add NOT Successful")


def update_reservation(store: GuestStore) -> None:
    guest = _choose_active_guest(store)
    if guest is None:
        return
    reservation = _choose_reservation(guest)
    if reservation is None:
        return
    updated = _read_reservation_details(reservation.reservation_id)
    _report(
        guest.update_reservation(reservation.reservation_id, updated),
        "Reservation updated successfully",
        "Failed to update reservation",
    )


def delete_reservation(store: GuestStore) -> None:
    guest = _choose_active_guest(store)
    if guest is None:
        return
    reservation = _choose_reservation(guest)
    if reservation is None:
        return
    _report(
        guest.delete_reservation(reservation.reservation_id),
        "Delete Successful!",
        "Delete NOT Successful",
    )


def search_reservations(store: GuestStore) -> None:
    reservation_id = read_int("Enter the reservation id: ")
    matches = store.search_reservation_by_id(reservation_id)
    if not matches:
        print("No reservations found")
        return
    for guest, reservation in matches:
        print(f"guest {guest.guest_id} ({guest.name}): {reservation}")


# -- persistence -------------------------------------------------------------


def save(store: GuestStore) -> None:
    try:
        store.save()
    except (PersistenceError, OSError) as exc:
        log.error("Save failed: %s", exc)
        print(f"Error saving guests: {exc}")
        return
    print("Guests saved successfully.")


def load(store: GuestStore) -> None:
    try:
        store.load()
    except (PersistenceError, OSError) as exc:
        log.error("Load failed: %s", exc)
        print(f"Error loading guests: {exc}")
        return
    print("Guests loaded successfully.")


ACTIONS = {
    1: add_guest,
    2: update_guest,
    3: delete_guest,
    4: search_guests,
    5: archive_guest,
    6: list_guests,
    7: add_reservation,
    8: update_reservation,
    9: delete_reservation,
    10: search_reservations,
    11: unarchive_guest,
    20: save,
    21: load,
}


def run(store: GuestStore) -> None:
    """Show the main menu until the user picks 0 or input runs out."""
    while True:
        try:
            choice = read_int(MAIN_MENU)
            if choice == 0:
                break
            action = ACTIONS.get(choice)
            if action is None:
                print(f"Invalid option entered: {choice}")
                continue
            action(store)
        except EOFError:
            print()
            break
    log.info("Menu closed")
