"""Per-track start offsets within a played set."""

from __future__ import annotations

import logging
import math
from datetime import timedelta

from traktor_setlist.nml.codec import format_time
from traktor_setlist.nml.models import Playlist

logger = logging.getLogger(__name__)


def _spans_hours(span: float, span_delta: timedelta) -> bool:
    """Decide HH:MM:SS formatting from the set span.

    The float seconds count is canonical; the integer timedelta floor is
    computed independently as a cross-check and only logged on mismatch.
    """
    has_hours = math.floor(span / 3600) > 0
    has_hours_check = span_delta // timedelta(hours=1) > 0
    if has_hours != has_hours_check:
        logger.warning(
            "Hour detection mismatch (span %.3fs): %s != %s",
            span, has_hours, has_hours_check,
        )
    return has_hours


def compute_track_offsets(playlist: Playlist) -> None:
    """Annotate each track with its offset from the first track's start.

    Does nothing unless the first track has a start timestamp (i.e. the
    playlist carries EXTENDEDDATA). All offsets in a playlist share one
    format: HH:MM:SS if the set spans at least an hour, MM:SS otherwise.
    Offsets are not clamped, so out-of-order entries get negative values.
    """
    if not playlist.tracks or not playlist.tracks[0].has_timing:
        return

    start = playlist.tracks[0].start_timestamp
    timed = [t for t in playlist.tracks if t.has_timing]
    span_delta = timed[-1].start_timestamp - start
    has_hours = _spans_hours(span_delta.total_seconds(), span_delta)

    for track in timed:
        track.time_offset = (track.start_timestamp - start).total_seconds()
        track.time_offset_string = format_time(track.time_offset, not has_hours)
