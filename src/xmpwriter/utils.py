# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Utility functions for xmpwriter."""

import logging
import sys

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# PDF/A parts accepted by --pdfa and the conformance levels valid for each
PDFA_LEVELS = {
    "1": frozenset({"A", "B"}),
    "2": frozenset({"A", "B", "U"}),
    "3": frozenset({"A", "B", "U"}),
    "4": frozenset({"E", "F"}),
}


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configures logging for xmpwriter.

    Args:
        verbose: If True, DEBUG level is used.
        quiet: If True, only ERROR and higher are output.
            Takes precedence over verbose.

    Returns:
        Configured logger for xmpwriter.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    xmpwriter_logger = logging.getLogger("xmpwriter")
    xmpwriter_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    xmpwriter_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    xmpwriter_logger.addHandler(handler)

    logger.debug("Logging configured with level: %s", logging.getLevelName(level))
    return xmpwriter_logger


def parse_pdfa_level(level: str) -> tuple[int, str | None]:
    """Splits a PDF/A level such as ``2b`` into part and conformance.

    Args:
        level: Part number optionally followed by a conformance letter
            (case-insensitive), e.g. ``"2b"``, ``"3U"`` or ``"4"``.

    Returns:
        Tuple of (part, conformance). Conformance is upper case, or None
        when the level names only a part.

    Raises:
        ValueError: If the part or conformance is unknown.
    """
    text = level.strip()
    part, conformance = text[:1], text[1:].upper() or None
    if part not in PDFA_LEVELS:
        raise ValueError(f"Unknown PDF/A part: {level!r}")
    if conformance is not None and conformance not in PDFA_LEVELS[part]:
        raise ValueError(
            f"Invalid conformance level {conformance!r} for PDF/A-{part}"
        )
    return int(part), conformance
