"""Parse option persistence.

Stores ParseOptions as a JSON file so a DJ can keep per-venue defaults
(e.g. how many preview tracks to skip) next to their archives.
"""

from __future__ import annotations

import logging
from pathlib import Path

from traktor_setlist.nml.models import ParseOptions

logger = logging.getLogger(__name__)


def load_parse_options(path: Path | str) -> ParseOptions:
    """Load ParseOptions from a JSON file, or return defaults if absent.

    Raises pydantic.ValidationError if the file content is invalid.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No options file at %s, using defaults", path)
        return ParseOptions()
    return ParseOptions.model_validate_json(path.read_text(encoding="utf-8"))


def save_parse_options(options: ParseOptions, path: Path | str) -> Path:
    """Persist ParseOptions as JSON, overwriting any existing file."""
    path = Path(path)
    path.write_text(options.model_dump_json(indent=2), encoding="utf-8")
    return path
