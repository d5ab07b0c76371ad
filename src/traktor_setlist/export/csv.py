"""CSV export of a resolved playlist.

One row per entry with the resolved track fields, the played flag and
start timing, for use in spreadsheets or tracklist sites.
"""

from __future__ import annotations

import csv
from pathlib import Path

from traktor_setlist.nml.models import Playlist, PlaylistEntry

# Column order for the CSV export
CSV_COLUMNS = [
    "position",
    "key",
    "artist",
    "title",
    "played_public",
    "start_timestamp",
    "time_offset",
    "time_offset_string",
]


def _entry_to_row(position: int, entry: PlaylistEntry) -> dict[str, str | float | int]:
    """Convert a PlaylistEntry to a flat dict for CSV writing."""
    track = entry.collection_entry
    return {
        "position": position,
        "key": entry.key,
        "artist": track.artist if track is not None else "",
        "title": track.title if track is not None else "",
        "played_public": int(entry.played_public),
        "start_timestamp": (
            entry.start_timestamp.isoformat() if entry.start_timestamp else ""
        ),
        "time_offset": entry.time_offset if entry.time_offset is not None else "",
        "time_offset_string": entry.time_offset_string or "",
    }


def export_csv(playlist: Playlist, output_path: Path | str) -> Path:
    """Write playlist entries as a CSV file.

    Args:
        playlist: Resolved playlist to export.
        output_path: File path to write (will be created/overwritten).

    Returns:
        The output path as a Path object.
    """
    output_path = Path(output_path)

    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for position, entry in enumerate(playlist.tracks, start=1):
            writer.writerow(_entry_to_row(position, entry))

    return output_path
