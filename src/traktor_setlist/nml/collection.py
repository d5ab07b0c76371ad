"""COLLECTION extraction: one Track per unique file location."""

from __future__ import annotations

import logging

from traktor_setlist.nml.document import Document
from traktor_setlist.nml.models import Track

logger = logging.getLogger(__name__)


def track_key(volume: str, directory: str, filename: str) -> str:
    """Build the key playlists use to reference a file.

    Plain concatenation with no separator: PRIMARYKEY@KEY stores exactly
    this string.
    """
    return volume + directory + filename


def extract_collection(document: Document) -> dict[str, Track]:
    """Map track key -> Track for every COLLECTION ENTRY.

    Entries sharing a key collapse to the last one seen.
    """
    collection: dict[str, Track] = {}

    for entry in document.find_all("COLLECTION ENTRY"):
        location = document.find_first("LOCATION", entry)
        if location is None:
            key = ""
        else:
            key = track_key(
                location.attribute("VOLUME"),
                location.attribute("DIR"),
                location.attribute("FILE"),
            )

        if key in collection:
            logger.debug("Duplicate collection key %r, keeping last entry", key)

        collection[key] = Track(
            key=key,
            title=entry.attribute("TITLE"),
            artist=entry.attribute("ARTIST"),
        )

    return collection
