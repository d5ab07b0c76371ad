"""Top-level NML decoding entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from traktor_setlist.nml.collection import extract_collection
from traktor_setlist.nml.document import Document, load_document
from traktor_setlist.nml.models import ARCHIVE_FORMAT, Archive, ParseOptions
from traktor_setlist.nml.playlists import resolve_playlists

logger = logging.getLogger(__name__)


def parse(
    document: Document,
    start_track_index: int = 1,
    only_played_tracks: bool = False,
) -> Archive:
    """Decode an NML document into an Archive.

    Never raises on inconsistent documents: missing sections simply
    produce an empty collection or no playlists.
    """
    collection = extract_collection(document)
    playlists = resolve_playlists(
        document, collection, start_track_index, only_played_tracks
    )
    logger.info(
        "Parsed %d tracks, %d playlists", len(collection), len(playlists)
    )
    return Archive(collection=collection, playlists=playlists, format=ARCHIVE_FORMAT)


def parse_file(path: Path | str, options: ParseOptions | None = None) -> Archive:
    """Load an NML file from disk and decode it.

    Raises FileNotFoundError or NMLParseError from load_document().
    """
    options = options or ParseOptions()
    document = load_document(path)
    return parse(document, options.start_track_index, options.only_played_tracks)
