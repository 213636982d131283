"""
YAML adapter for Serializer.

Same document shape as the JSON adapter, written in block style.
Only safe_load / safe_dump are used, so a file can never build
arbitrary Python objects.
"""

import yaml

from guest_store.adapters.files import read_file, replace_file
from guest_store.adapters.records import guests_from_records, guests_to_records
from guest_store.domain.guest import Guest
from guest_store.domain.serializer import DecodingError, EncodingError, Serializer


class YamlSerializer(Serializer):

    def __init__(self, path: str = "guests.yaml"):
        self.path = path

    def read(self) -> list[Guest]:
        raw = read_file(self.path)
        try:
            document = yaml.safe_load(raw.decode("utf-8"))
        except (UnicodeDecodeError, yaml.YAMLError) as exc:
            raise DecodingError(f"{self.path}: not valid YAML: {exc}") from exc
        if not isinstance(document, dict) or "guests" not in document:
            raise DecodingError(f"{self.path}: expected a mapping with a 'guests' list")
        return guests_from_records(document["guests"])

    def write(self, guests: list[Guest]) -> None:
        document = {"guests": guests_to_records(guests)}
        try:
            data = yaml.safe_dump(
                document,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            ).encode("utf-8")
        except (yaml.YAMLError, UnicodeEncodeError) as exc:
            raise EncodingError(f"cannot encode guests as YAML: {exc}") from exc
        replace_file(self.path, data)
