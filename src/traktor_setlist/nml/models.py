"""Pydantic v2 data models for a decoded Traktor NML archive."""

from datetime import datetime

from pydantic import BaseModel, Field

ARCHIVE_FORMAT = "Traktor NML"

# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------

class Track(BaseModel):
    """A unique file in the NML collection.

    ``key`` is VOLUME + DIR + FILE of the entry's LOCATION node, the same
    string playlists store in their PRIMARYKEY nodes.
    """

    key: str
    title: str = ""
    artist: str = ""

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Packed date/time values
# ---------------------------------------------------------------------------

class NMLDate(BaseModel):
    """Calendar date unpacked from an EXTENDEDDATA STARTDATE value."""

    year: int
    month: int
    day: int


class NMLTime(BaseModel):
    """Clock time unpacked from a seconds count (STARTTIME)."""

    hours: int
    minutes: int
    seconds: int


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------

class PlaylistEntry(BaseModel):
    """One PLAYLIST ENTRY, resolved against the collection."""

    key: str
    collection_entry: Track | None = None
    played_public: bool = True

    # Only present when the entry carries EXTENDEDDATA
    start_time: NMLTime | None = None
    start_date: NMLDate | None = None
    start_timestamp: datetime | None = None

    # Filled in by compute_track_offsets()
    time_offset: float | None = None
    time_offset_string: str | None = None

    @property
    def has_timing(self) -> bool:
        return self.start_timestamp is not None

    @property
    def display_name(self) -> str:
        """'Artist - Title' of the matched track, or the raw key."""
        track = self.collection_entry
        if track is None:
            return self.key
        if track.artist and track.title:
            return f"{track.artist} - {track.title}"
        return track.title or track.artist or self.key


class Playlist(BaseModel):
    """A named playlist; ``tracks`` is in Traktor UI sort order."""

    name: str
    tracks: list[PlaylistEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Archive (top-level result)
# ---------------------------------------------------------------------------

class Archive(BaseModel):
    """Collection plus playlists decoded from one NML document."""

    collection: dict[str, Track] = Field(default_factory=dict)
    playlists: list[Playlist] = Field(default_factory=list)
    format: str = ARCHIVE_FORMAT

    def get_playlist(self, name: str) -> Playlist | None:
        """Return the first playlist called ``name``, or None."""
        for playlist in self.playlists:
            if playlist.name == name:
                return playlist
        return None


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class ParseOptions(BaseModel):
    """User-tunable parse behavior."""

    start_track_index: int = Field(
        1, description="1-based index of the first track kept in each playlist"
    )
    only_played_tracks: bool = Field(
        False, description="Drop entries whose PLAYEDPUBLIC flag is 0"
    )
