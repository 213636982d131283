"""
XML adapter for Serializer.

    <guests>
      <guest id="1" archived="false">
        <name>joe</name>
        <phone>123456789</phone>
        <email>joe@example.com</email>
        <reservations>
          <reservation id="1" room="101" cost="150" people="2" paid="true" />
        </reservations>
      </guest>
    </guests>

Elements are turned into the records.py dict shape before validation,
so XML rejects exactly what JSON and YAML reject.
"""

import re
import xml.etree.ElementTree as ET
from typing import Any

from guest_store.adapters.files import read_file, replace_file
from guest_store.adapters.records import guests_from_records, guests_to_records
from guest_store.domain.guest import Guest
from guest_store.domain.serializer import DecodingError, EncodingError, Serializer

# Characters XML 1.0 cannot carry at all, escaped or not, plus \r, which a
# parser hands back as \n inside element text.
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\r\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

_RESERVATION_ATTRS = {
    "reservation_id": "id",
    "room_number": "room",
    "cost": "cost",
    "party_size": "people",
}


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _text(value: str, what: str) -> str:
    if _INVALID_XML_CHARS.search(value):
        raise EncodingError(f"{what} contains characters XML cannot represent")
    return value


def _guest_element(record: dict[str, Any]) -> ET.Element:
    elem = ET.Element(
        "guest",
        id=str(record["guest_id"]),
        archived=_bool_text(record["archived"]),
    )
    for name in ("name", "phone", "email"):
        ET.SubElement(elem, name).text = _text(record[name], f"guest.{name}")
    reservations = ET.SubElement(elem, "reservations")
    for r in record["reservations"]:
        attrs = {attr: str(r[field]) for field, attr in _RESERVATION_ATTRS.items()}
        attrs["paid"] = _bool_text(r["is_paid"])
        ET.SubElement(reservations, "reservation", attrs)
    return elem


def _parse_int(elem: ET.Element, attr: str) -> int:
    value = elem.get(attr)
    if value is None:
        raise DecodingError(f"<{elem.tag}> is missing attribute {attr!r}")
    try:
        return int(value)
    except ValueError as exc:
        raise DecodingError(f"<{elem.tag} {attr}={value!r}> is not an integer") from exc


def _parse_bool(elem: ET.Element, attr: str) -> bool:
    value = elem.get(attr)
    if value == "true":
        return True
    if value == "false":
        return False
    raise DecodingError(f"<{elem.tag} {attr}={value!r}> must be 'true' or 'false'")


def _child_text(elem: ET.Element, tag: str) -> str:
    child = elem.find(tag)
    if child is None:
        raise DecodingError(f"<{elem.tag}> is missing <{tag}>")
    return child.text or ""


def _guest_record(elem: ET.Element) -> dict[str, Any]:
    if elem.tag != "guest":
        raise DecodingError(f"unexpected <{elem.tag}> inside <guests>")
    reservations = []
    container = elem.find("reservations")
    if container is not None:
        for r in container:
            if r.tag != "reservation":
                raise DecodingError(f"unexpected <{r.tag}> inside <reservations>")
            record = {field: _parse_int(r, attr) for field, attr in _RESERVATION_ATTRS.items()}
            record["is_paid"] = _parse_bool(r, "paid")
            reservations.append(record)
    return {
        "guest_id": _parse_int(elem, "id"),
        "name": _child_text(elem, "name"),
        "phone": _child_text(elem, "phone"),
        "email": _child_text(elem, "email"),
        "archived": _parse_bool(elem, "archived"),
        "reservations": reservations,
    }


class XmlSerializer(Serializer):

    def __init__(self, path: str = "guests.xml"):
        self.path = path

    def read(self) -> list[Guest]:
        raw = read_file(self.path)
        try:
            root = ET.fromstring(raw)
        except ET.ParseError as exc:
            raise DecodingError(f"{self.path}: not valid XML: {exc}") from exc
        if root.tag != "guests":
            raise DecodingError(f"{self.path}: root element must be <guests>, got <{root.tag}>")
        return guests_from_records([_guest_record(elem) for elem in root])

    def write(self, guests: list[Guest]) -> None:
        root = ET.Element("guests")
        for record in guests_to_records(guests):
            root.append(_guest_element(record))
        ET.indent(root)
        data = ET.tostring(root, encoding="utf-8", xml_declaration=True)
        replace_file(self.path, data)
