"""
Adapter contract for Serializer.

Any implementation (in-memory, JSON, YAML, XML, SQLite, ...) must pass
these tests.  Subclass this and provide create_serializer() to run the
contract against your adapter.
"""

from abc import ABC, abstractmethod
from pathlib import Path

import pytest

from guest_store.domain.guest import Guest
from guest_store.domain.reservation import Reservation
from guest_store.domain.serializer import EncodingError, Serializer


def _joe() -> Guest:
    joe = Guest(1, "joe", "123456789", "joe@example.com")
    joe.add_reservation(Reservation(1, 101, 150, 2, True))
    joe.add_reservation(Reservation(2, 204, 90, 1, False))
    return joe


def _emma() -> Guest:
    emma = Guest(2, "emma ", "987654321", "emma@example.com", archived=True)
    emma.add_reservation(Reservation(1, 300, 0, 4, False))
    return emma


class SerializerContract(ABC):
    """Contract tests that every Serializer implementation must satisfy."""

    @abstractmethod
    def create_serializer(self, directory: Path) -> Serializer:
        """Return a fresh adapter that stores its data under `directory`."""
        ...

    def test_empty_collection_roundtrip(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        ser.write([])
        assert ser.read() == []

    def test_populated_collection_roundtrip(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        guests = [_joe(), _emma(), Guest(5, "sam", "", "")]
        ser.write(guests)

        loaded = ser.read()
        assert loaded == guests
        assert [g.guest_id for g in loaded] == [1, 2, 5]
        assert loaded[0].reservation_count() == 2
        assert loaded[1].archived is True
        assert loaded[1].name == "emma "

    def test_read_returns_guest_objects(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        ser.write([_joe()])
        loaded = ser.read()
        assert isinstance(loaded, list)
        assert all(isinstance(g, Guest) for g in loaded)
        assert all(isinstance(r, Reservation) for r in loaded[0].reservations.values())
        assert loaded[0].find_reservation(1) == Reservation(1, 101, 150, 2, True)

    def test_read_before_any_write_raises(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        with pytest.raises(FileNotFoundError):
            ser.read()

    def test_write_replaces_previous_collection(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        ser.write([_joe(), _emma()])
        ser.write([_emma()])
        assert ser.read() == [_emma()]

    def test_reader_gets_independent_copies(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        guests = [_joe()]
        ser.write(guests)
        guests[0].name = "changed after save"
        guests[0].delete_reservation(1)
        assert ser.read() == [_joe()]

    def test_markup_and_unicode_survive(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        tricky = Guest(3, "Zoë <O'Brien> & \"Co\"", "+33 6 12 34 56 78", "zoë@exämple.fr")
        ser.write([tricky])
        assert ser.read() == [tricky]

    def test_failed_write_keeps_previous_data(self, tmp_path):
        ser = self.create_serializer(tmp_path)
        ser.write([_joe()])

        broken = Guest(9, "broken", "", "")
        broken.name = 12345  # type: ignore[assignment]
        with pytest.raises(EncodingError):
            ser.write([_emma(), broken])

        assert ser.read() == [_joe()]

    @pytest.mark.parametrize("text", [
        "tab\there",
        "two\nlines",
        "carriage\rreturn",
        "windows\r\nline",
        "  padded  ",
        "bell\x07",
        "",
    ])
    def test_awkward_text_roundtrips_exactly_or_is_refused(self, tmp_path, text):
        ser = self.create_serializer(tmp_path)
        ser.write([_joe()])

        awkward = Guest(2, text, text, text)
        try:
            ser.write([_joe(), awkward])
        except EncodingError:
            assert ser.read() == [_joe()]
        else:
            assert ser.read() == [_joe(), awkward]

    @pytest.mark.parametrize("field", ["name", "phone", "email"])
    def test_lone_surrogate_is_refused_and_previous_data_kept(self, tmp_path, field):
        ser = self.create_serializer(tmp_path)
        ser.write([_joe()])

        bad = Guest(3, "sam", "555", "sam@example.com")
        setattr(bad, field, "bad\udcff")
        with pytest.raises(EncodingError):
            ser.write([_emma(), bad])

        assert ser.read() == [_joe()]
