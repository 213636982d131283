"""
JSON adapter for Serializer.

File layout: {"guests": [<guest record>, ...]}, see adapters/records.py.
"""

import json

from guest_store.adapters.files import read_file, replace_file
from guest_store.adapters.records import guests_from_records, guests_to_records
from guest_store.domain.guest import Guest
from guest_store.domain.serializer import DecodingError, EncodingError, Serializer


class JsonSerializer(Serializer):

    def __init__(self, path: str = "guests.json"):
        self.path = path

    def read(self) -> list[Guest]:
        raw = read_file(self.path)
        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodingError(f"{self.path}: not valid JSON: {exc}") from exc
        if not isinstance(document, dict) or "guests" not in document:
            raise DecodingError(f"{self.path}: expected an object with a 'guests' list")
        return guests_from_records(document["guests"])

    def write(self, guests: list[Guest]) -> None:
        document = {"guests": guests_to_records(guests)}
        try:
            data = json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            # UnicodeEncodeError is a ValueError
            raise EncodingError(f"cannot encode guests as JSON: {exc}") from exc
        replace_file(self.path, data)
