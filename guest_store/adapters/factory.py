import os

from guest_store.domain.serializer import Serializer

DEFAULT_FORMAT = "xml"

_DEFAULT_PATHS = {
    "xml": "guests.xml",
    "json": "guests.json",
    "yaml": "guests.yaml",
    "sqlite": "guests.db",
}


def create_serializer(fmt: str | None = None, path: str | None = None) -> Serializer:
    """
    Build the Serializer for the configured storage format.

    The format can be passed explicitly or read from the
    GUEST_STORE_FORMAT env var ("xml", "json", "yaml", "sqlite").
    Defaults to "xml".  The file comes from `path`, then
    GUEST_STORE_PATH, then guests.<ext> in the working directory.
    """
    fmt = (fmt or os.environ.get("GUEST_STORE_FORMAT", DEFAULT_FORMAT)).lower()
    if fmt == "yml":
        fmt = "yaml"
    if fmt not in _DEFAULT_PATHS:
        raise ValueError(f"Unknown storage format: {fmt!r}")

    path = path or os.environ.get("GUEST_STORE_PATH") or _DEFAULT_PATHS[fmt]

    if fmt == "xml":
        from .xml_serializer import XmlSerializer

        return XmlSerializer(path)

    if fmt == "json":
        from .json_serializer import JsonSerializer

        return JsonSerializer(path)

    if fmt == "yaml":
        from .yaml_serializer import YamlSerializer

        return YamlSerializer(path)

    from .sqlite_serializer import SqliteSerializer

    return SqliteSerializer(path)
