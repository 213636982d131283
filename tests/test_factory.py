"""
Serializer factory: explicit arguments win over env vars, env vars over defaults.
"""

import pytest

from guest_store.adapters.factory import create_serializer
from guest_store.adapters.json_serializer import JsonSerializer
from guest_store.adapters.sqlite_serializer import SqliteSerializer
from guest_store.adapters.xml_serializer import XmlSerializer
from guest_store.adapters.yaml_serializer import YamlSerializer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GUEST_STORE_FORMAT", raising=False)
    monkeypatch.delenv("GUEST_STORE_PATH", raising=False)


def test_defaults_to_xml():
    ser = create_serializer()
    assert isinstance(ser, XmlSerializer)
    assert ser.path == "guests.xml"


@pytest.mark.parametrize(
    "fmt, cls, default_path",
    [
        ("json", JsonSerializer, "guests.json"),
        ("yaml", YamlSerializer, "guests.yaml"),
        ("YML", YamlSerializer, "guests.yaml"),
        ("xml", XmlSerializer, "guests.xml"),
    ],
)
def test_explicit_format(fmt, cls, default_path):
    ser = create_serializer(fmt)
    assert isinstance(ser, cls)
    assert ser.path == default_path


def test_sqlite_format():
    ser = create_serializer("sqlite")
    assert isinstance(ser, SqliteSerializer)
    assert ser.db_path == "guests.db"


def test_format_and_path_from_env(monkeypatch):
    monkeypatch.setenv("GUEST_STORE_FORMAT", "json")
    monkeypatch.setenv("GUEST_STORE_PATH", "/tmp/hotel.json")
    ser = create_serializer()
    assert isinstance(ser, JsonSerializer)
    assert ser.path == "/tmp/hotel.json"


def test_explicit_arguments_override_env(monkeypatch):
    monkeypatch.setenv("GUEST_STORE_FORMAT", "json")
    monkeypatch.setenv("GUEST_STORE_PATH", "/tmp/hotel.json")
    ser = create_serializer("yaml", "other.yaml")
    assert isinstance(ser, YamlSerializer)
    assert ser.path == "other.yaml"


def test_unknown_format_raises():
    with pytest.raises(ValueError, match="csv"):
        create_serializer("csv")
