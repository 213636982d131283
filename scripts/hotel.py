"""
Console runner for the hotel guest store.

Opens the numbered menu over a GuestStore whose storage format is
chosen by environment.  Nothing is loaded or saved unless the menu's
load (21) / save (20) actions are used.

Usage:
    python scripts/hotel.py

Environment variables (all optional):
    GUEST_STORE_FORMAT  - "xml", "json", "yaml" or "sqlite" (default: xml)
    GUEST_STORE_PATH    - data file (default: guests.<ext>, guests.db for sqlite)
    LOG_LEVEL           - logging level (default: INFO)
"""

import logging
import os
import sys

# guest_store lives one level up; allow running without an install
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from guest_store import menu
from guest_store.adapters.factory import create_serializer
from guest_store.store import GuestStore

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def build_store() -> GuestStore:
    try:
        serializer = create_serializer()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    log.info("Storage: %s", type(serializer).__name__)
    return GuestStore(serializer)


def main() -> None:
    menu.run(build_store())


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        log.info("Stopped.")
