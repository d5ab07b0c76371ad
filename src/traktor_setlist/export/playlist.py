"""Generic playlist helpers.

Provides common utilities used by all export formats.
"""

from __future__ import annotations

from traktor_setlist.nml.models import PlaylistEntry


def format_tracklist_line(entry: PlaylistEntry) -> str:
    """Format an entry as '[MM:SS] Artist - Title'.

    The offset prefix is omitted when the playlist has no timing data.
    """
    if entry.time_offset_string is None:
        return entry.display_name
    return f"[{entry.time_offset_string}] {entry.display_name}"
