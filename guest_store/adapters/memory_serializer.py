"""
In-memory Serializer for testing. No files required.

Rejects the same unencodable guests as the file adapters, so it can
stand in for them in store and menu tests.
"""

import copy

from guest_store.adapters.records import guests_to_records
from guest_store.domain.guest import Guest
from guest_store.domain.serializer import Serializer


class InMemorySerializer(Serializer):

    def __init__(self):
        self._saved: list[Guest] | None = None
        self.writes = 0

    def read(self) -> list[Guest]:
        if self._saved is None:
            raise FileNotFoundError("nothing has been saved yet")
        return copy.deepcopy(self._saved)

    def write(self, guests: list[Guest]) -> None:
        guests_to_records(guests)
        # copy so later edits in the store don't leak into the "saved" state
        self._saved = copy.deepcopy(list(guests))
        self.writes += 1
