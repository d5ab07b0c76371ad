"""Playlist resolution.

Every NODE with TYPE="PLAYLIST" becomes a Playlist whose entries are
looked up in the collection by their PRIMARYKEY. ``start_track_index``
skips the tracks previewed before going live; ``only_played_tracks``
drops entries Traktor never played out to the master.
"""

from __future__ import annotations

import logging

from traktor_setlist.nml.codec import decode_date, decode_time, to_datetime
from traktor_setlist.nml.document import Document, Node
from traktor_setlist.nml.models import Playlist, PlaylistEntry, Track
from traktor_setlist.nml.offsets import compute_track_offsets

logger = logging.getLogger(__name__)

PLAYLIST_NODE_TYPE = "PLAYLIST"


def _parse_int(value: str) -> int:
    """Parse an integer attribute; missing or garbage values become 0."""
    try:
        return int(value.strip())
    except ValueError:
        return 0


def _resolve_entry(
    document: Document,
    entry: Node,
    collection: dict[str, Track],
) -> PlaylistEntry:
    primary_key = document.find_first("PRIMARYKEY", entry)
    key = primary_key.attribute("KEY") if primary_key is not None else ""

    track = PlaylistEntry(key=key, collection_entry=collection.get(key))
    if track.collection_entry is None:
        logger.debug("Playlist entry %r not found in collection", key)

    extended = document.find_first("EXTENDEDDATA", entry)
    if extended is not None:
        track.played_public = _parse_int(extended.attribute("PLAYEDPUBLIC")) != 0
        track.start_time = decode_time(_parse_int(extended.attribute("STARTTIME")))
        track.start_date = decode_date(_parse_int(extended.attribute("STARTDATE")))
        track.start_timestamp = to_datetime(track.start_date, track.start_time)

    return track


def resolve_playlists(
    document: Document,
    collection: dict[str, Track],
    start_track_index: int = 1,
    only_played_tracks: bool = False,
) -> list[Playlist]:
    """Build every playlist in document order.

    Args:
        document: Parsed NML document.
        collection: Output of extract_collection() for the same document.
        start_track_index: 1-based position of the first entry to keep.
            Positions are counted before the played filter is applied.
        only_played_tracks: Keep only entries with PLAYEDPUBLIC set
            (entries without EXTENDEDDATA count as played).

    Returns:
        Playlists with resolved, filtered entries and offsets computed.
    """
    playlists: list[Playlist] = []
    first_position = start_track_index - 1

    for node in document.find_all("NODE"):
        if node.attribute("TYPE") != PLAYLIST_NODE_TYPE:
            continue

        entries = [
            _resolve_entry(document, entry, collection)
            for entry in document.find_all("PLAYLIST ENTRY", node)
        ]
        kept = [
            track
            for position, track in enumerate(entries)
            if position >= first_position
        ]
        if only_played_tracks:
            kept = [track for track in kept if track.played_public]

        playlist = Playlist(name=node.attribute("NAME"), tracks=kept)
        compute_track_offsets(playlist)

        logger.debug(
            "Playlist %r: %d of %d entries kept",
            playlist.name, len(kept), len(entries),
        )
        playlists.append(playlist)

    return playlists
