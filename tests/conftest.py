"""Shared test fixtures for traktor-setlist."""

import pytest

from traktor_setlist.nml.codec import encode_date
from traktor_setlist.nml.document import ElementTreeDocument
from traktor_setlist.nml.models import NMLDate

# 15 June 2023, the night the sample history was recorded
SET_DATE = encode_date(NMLDate(year=2023, month=6, day=15))
# 22:00:00
SET_START = 22 * 3600

SAMPLE_NML = f"""<?xml version="1.0" standalone="no" ?>
<NML VERSION="19">
  <HEAD COMPANY="www.native-instruments.com" PROGRAM="Traktor"></HEAD>
  <MUSICFOLDERS></MUSICFOLDERS>
  <COLLECTION ENTRIES="3">
    <ENTRY MODIFIED_DATE="2023/6/1" TITLE="Warmup Tool" ARTIST="Preview Guy">
      <LOCATION DIR="/:Music/:House/:" FILE="warmup.mp3" VOLUME="Macintosh HD" VOLUMEID="Macintosh HD"></LOCATION>
    </ENTRY>
    <ENTRY MODIFIED_DATE="2023/6/1" TITLE="Opener" ARTIST="DJ Alpha">
      <LOCATION DIR="/:Music/:House/:" FILE="opener.mp3" VOLUME="Macintosh HD" VOLUMEID="Macintosh HD"></LOCATION>
    </ENTRY>
    <ENTRY MODIFIED_DATE="2023/6/1" TITLE="Closer" ARTIST="DJ Beta">
      <LOCATION DIR="/:Music/:Techno/:" FILE="closer.flac" VOLUME="Macintosh HD" VOLUMEID="Macintosh HD"></LOCATION>
    </ENTRY>
  </COLLECTION>
  <SETS ENTRIES="0"></SETS>
  <PLAYLISTS>
    <NODE TYPE="FOLDER" NAME="$ROOT">
      <SUBNODES COUNT="2">
        <NODE TYPE="FOLDER" NAME="Archive">
          <SUBNODES COUNT="1">
            <NODE TYPE="PLAYLIST" NAME="History 2023-06-15">
              <PLAYLIST ENTRIES="4" TYPE="LIST" UUID="4b0d6c4e6a6a4b0d">
                <ENTRY>
                  <PRIMARYKEY TYPE="TRACK" KEY="Macintosh HD/:Music/:House/:warmup.mp3"></PRIMARYKEY>
                  <EXTENDEDDATA DECK="0" DURATION="12.0" EXTENDEDTYPE="HistoryData" PLAYEDPUBLIC="0" STARTDATE="{SET_DATE}" STARTTIME="{SET_START - 600}"></EXTENDEDDATA>
                </ENTRY>
                <ENTRY>
                  <PRIMARYKEY TYPE="TRACK" KEY="Macintosh HD/:Music/:House/:opener.mp3"></PRIMARYKEY>
                  <EXTENDEDDATA DECK="1" DURATION="400.0" EXTENDEDTYPE="HistoryData" PLAYEDPUBLIC="1" STARTDATE="{SET_DATE}" STARTTIME="{SET_START}"></EXTENDEDDATA>
                </ENTRY>
                <ENTRY>
                  <PRIMARYKEY TYPE="TRACK" KEY="Macintosh HD/:Music/:Gone/:deleted.mp3"></PRIMARYKEY>
                  <EXTENDEDDATA DECK="0" DURATION="350.0" EXTENDEDTYPE="HistoryData" PLAYEDPUBLIC="1" STARTDATE="{SET_DATE}" STARTTIME="{SET_START + 65}"></EXTENDEDDATA>
                </ENTRY>
                <ENTRY>
                  <PRIMARYKEY TYPE="TRACK" KEY="Macintosh HD/:Music/:Techno/:closer.flac"></PRIMARYKEY>
                  <EXTENDEDDATA DECK="1" DURATION="420.0" EXTENDEDTYPE="HistoryData" PLAYEDPUBLIC="1" STARTDATE="{SET_DATE}" STARTTIME="{SET_START + 3700}"></EXTENDEDDATA>
                </ENTRY>
              </PLAYLIST>
            </NODE>
          </SUBNODES>
        </NODE>
        <NODE TYPE="PLAYLIST" NAME="Crate">
          <PLAYLIST ENTRIES="2" TYPE="LIST" UUID="9c1e2f3a4b5c6d7e">
            <ENTRY>
              <PRIMARYKEY TYPE="TRACK" KEY="Macintosh HD/:Music/:Techno/:closer.flac"></PRIMARYKEY>
            </ENTRY>
            <ENTRY>
              <PRIMARYKEY TYPE="TRACK" KEY="Macintosh HD/:Music/:House/:opener.mp3"></PRIMARYKEY>
            </ENTRY>
          </PLAYLIST>
        </NODE>
      </SUBNODES>
    </NODE>
  </PLAYLISTS>
</NML>
"""


@pytest.fixture
def sample_document():
    """History archive: one preview track, three played tracks, a plain crate."""
    return ElementTreeDocument.from_string(SAMPLE_NML)


@pytest.fixture
def nml_file(tmp_path):
    """SAMPLE_NML written to disk."""
    path = tmp_path / "history.nml"
    path.write_text(SAMPLE_NML, encoding="utf-8")
    return path


@pytest.fixture
def make_document():
    """Factory building a document from an NML body string."""

    def _make(body: str) -> ElementTreeDocument:
        return ElementTreeDocument.from_string(f'<NML VERSION="19">{body}</NML>')

    return _make
