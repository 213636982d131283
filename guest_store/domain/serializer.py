"""
Serializer port: how the whole guest collection is saved and restored.

GuestStore depends ONLY on this interface.  It doesn't know or care
whether guests end up in XML, JSON, YAML, SQLite or a test double;
only the Guest / Reservation shape crosses this boundary.
"""

from abc import ABC, abstractmethod

from guest_store.domain.guest import Guest


class PersistenceError(Exception):
    """Stored data could not be produced or understood."""


class EncodingError(PersistenceError):
    """A guest could not be represented in the target format."""


class DecodingError(PersistenceError):
    """Stored data is corrupt or does not describe a guest collection."""


class Serializer(ABC):
    """
    Port: read and write the complete guest collection in one go.

    Plain I/O problems surface as OSError (FileNotFoundError when
    nothing has been written yet).  A failed write must leave whatever
    was written before untouched.
    """

    @abstractmethod
    def read(self) -> list[Guest]:
        """Return every stored guest, with reservations, in stored order."""
        ...

    @abstractmethod
    def write(self, guests: list[Guest]) -> None:
        """Replace the stored collection with `guests`."""
        ...
