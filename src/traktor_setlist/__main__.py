"""Entry point for traktor-setlist.

Usage:
    python -m traktor_setlist history.nml                  # All playlists
    python -m traktor_setlist history.nml --start-track 4 --only-played
    python -m traktor_setlist history.nml --playlist "Set1" --output set1.txt
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from traktor_setlist.export.csv import export_csv
from traktor_setlist.export.tracklist import export_tracklist, render_tracklist
from traktor_setlist.nml.archive import parse_file
from traktor_setlist.nml.document import NMLParseError
from traktor_setlist.nml.models import ParseOptions
from traktor_setlist.settings import load_parse_options

logger = logging.getLogger("traktor_setlist")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="traktor_setlist",
        description="Print tracklists with start offsets from a Traktor NML archive.",
    )
    parser.add_argument("archive", type=Path, help="Traktor .nml file")
    parser.add_argument("--playlist", help="Only output the playlist with this name")
    parser.add_argument(
        "--start-track", type=int, default=None,
        help="1-based index of the first track to keep (skips previews)",
    )
    parser.add_argument(
        "--only-played", action="store_true", default=None,
        help="Drop tracks that were never played out",
    )
    parser.add_argument("--options", type=Path, help="JSON file with parse options")
    parser.add_argument("--output", type=Path, help="Write to this file instead of stdout")
    parser.add_argument("--csv", action="store_true", help="With --output, write CSV instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse an archive and emit its tracklists."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.csv and args.output is None:
        parser.error("--csv requires --output")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    options = ParseOptions()
    if args.options is not None:
        if not args.options.exists():
            logger.error("Options file not found: %s", args.options)
            return 1
        try:
            options = load_parse_options(args.options)
        except ValidationError as exc:
            logger.error("Invalid options file %s: %s", args.options, exc)
            return 1
    if args.start_track is not None:
        options.start_track_index = args.start_track
    if args.only_played:
        options.only_played_tracks = True

    try:
        archive = parse_file(args.archive, options)
    except (FileNotFoundError, NMLParseError) as exc:
        logger.error("Cannot read archive: %s", exc)
        return 1

    playlists = archive.playlists
    if args.playlist is not None:
        playlist = archive.get_playlist(args.playlist)
        if playlist is None:
            logger.error("No playlist named %r in %s", args.playlist, args.archive)
            return 1
        playlists = [playlist]

    if args.output is not None:
        if len(playlists) != 1:
            logger.error("--output needs exactly one playlist (use --playlist)")
            return 1
        if args.csv:
            export_csv(playlists[0], args.output)
        else:
            export_tracklist(playlists[0], args.output)
        logger.info("Wrote %s", args.output)
        return 0

    for playlist in playlists:
        print(render_tracklist(playlist))
    return 0


if __name__ == "__main__":
    sys.exit(main())
