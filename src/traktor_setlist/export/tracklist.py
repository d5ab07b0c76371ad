"""Plain-text tracklist export.

Renders a playlist as a setlist with one line per track, prefixed by the
track's offset into the set when timing is available.
"""

from __future__ import annotations

from pathlib import Path

from traktor_setlist.export.playlist import format_tracklist_line
from traktor_setlist.nml.models import Playlist


def render_tracklist(playlist: Playlist) -> str:
    """Return the tracklist as text, playlist name first."""
    lines = [playlist.name]
    for number, entry in enumerate(playlist.tracks, start=1):
        lines.append(f"{number:02d}. {format_tracklist_line(entry)}")
    lines.append("")  # trailing newline
    return "\n".join(lines)


def export_tracklist(playlist: Playlist, output_path: Path | str) -> Path:
    """Write the tracklist to a text file.

    Args:
        playlist: Resolved playlist to render.
        output_path: File path to write (will be created/overwritten).

    Returns:
        The output path as a Path object.
    """
    output_path = Path(output_path)
    output_path.write_text(render_tracklist(playlist), encoding="utf-8")
    return output_path
