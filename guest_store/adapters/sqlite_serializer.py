"""
SQLite adapter for Serializer.

Each write() replaces both tables inside one transaction, so a failed
write rolls back to the previously saved collection.
"""

import os
import sqlite3

from guest_store.adapters.records import guest_to_record
from guest_store.domain.guest import Guest
from guest_store.domain.reservation import Reservation
from guest_store.domain.serializer import DecodingError, EncodingError, Serializer

_SCHEMA = """
CREATE TABLE IF NOT EXISTS guests (
    guest_id    INTEGER PRIMARY KEY,
    position    INTEGER NOT NULL,
    name        TEXT NOT NULL,
    phone       TEXT NOT NULL,
    email       TEXT NOT NULL,
    archived    INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS reservations (
    guest_id        INTEGER NOT NULL REFERENCES guests(guest_id) ON DELETE CASCADE,
    reservation_id  INTEGER NOT NULL,
    room_number     INTEGER NOT NULL,
    cost            INTEGER NOT NULL,
    party_size      INTEGER NOT NULL,
    is_paid         INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (guest_id, reservation_id)
);
"""


class SqliteSerializer(Serializer):

    def __init__(self, db_path: str = "guests.db"):
        self.db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def read(self) -> list[Guest]:
        # sqlite3.connect() would silently create a missing file
        if not os.path.exists(self.db_path):
            raise FileNotFoundError(2, "No such file or directory", self.db_path)
        conn = self._connect()
        try:
            guest_rows = conn.execute("SELECT * FROM guests ORDER BY position").fetchall()
            reservation_rows = conn.execute(
                "SELECT * FROM reservations ORDER BY guest_id, reservation_id"
            ).fetchall()
        except sqlite3.DatabaseError as exc:
            raise DecodingError(f"{self.db_path}: not a guest database: {exc}") from exc
        finally:
            conn.close()

        guests = {row["guest_id"]: self._row_to_guest(row) for row in guest_rows}
        for row in reservation_rows:
            guest = guests.get(row["guest_id"])
            if guest is None:
                raise DecodingError(
                    f"{self.db_path}: reservation {row['reservation_id']} "
                    f"belongs to unknown guest {row['guest_id']}"
                )
            guest.add_reservation(self._row_to_reservation(row))
        return list(guests.values())

    def write(self, guests: list[Guest]) -> None:
        # validates every field before the transaction starts
        records = [guest_to_record(g) for g in guests]
        conn = self._connect()
        try:
            conn.executescript(_SCHEMA)
            with conn:
                conn.execute("DELETE FROM reservations")
                conn.execute("DELETE FROM guests")
                for position, record in enumerate(records):
                    conn.execute(
                        "INSERT INTO guests"
                        " (guest_id, position, name, phone, email, archived)"
                        " VALUES (?, ?, ?, ?, ?, ?)",
                        (record["guest_id"], position, record["name"], record["phone"],
                         record["email"], int(record["archived"])),
                    )
                    conn.executemany(
                        "INSERT INTO reservations"
                        " (guest_id, reservation_id, room_number, cost, party_size, is_paid)"
                        " VALUES (?, ?, ?, ?, ?, ?)",
                        [(record["guest_id"], r["reservation_id"], r["room_number"],
                          r["cost"], r["party_size"], int(r["is_paid"]))
                         for r in record["reservations"]],
                    )
        except (sqlite3.DatabaseError, OverflowError) as exc:
            raise EncodingError(f"{self.db_path}: cannot store guests: {exc}") from exc
        finally:
            conn.close()

    @staticmethod
    def _row_to_guest(row) -> Guest:
        return Guest(
            guest_id=row["guest_id"],
            name=row["name"],
            phone=row["phone"],
            email=row["email"],
            archived=bool(row["archived"]),
        )

    @staticmethod
    def _row_to_reservation(row) -> Reservation:
        return Reservation(
            reservation_id=row["reservation_id"],
            room_number=row["room_number"],
            cost=row["cost"],
            party_size=row["party_size"],
            is_paid=bool(row["is_paid"]),
        )
