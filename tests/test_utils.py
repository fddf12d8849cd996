# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for utils.py."""

import logging

import pytest

from xmpwriter.utils import LOG_FORMAT, parse_pdfa_level, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level_is_info(self) -> None:
        """Default log level is INFO."""
        logger = setup_logging()
        assert logger.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """verbose=True sets DEBUG level."""
        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG

    def test_quiet_takes_precedence(self) -> None:
        """quiet takes precedence over verbose."""
        logger = setup_logging(verbose=True, quiet=True)
        assert logger.level == logging.ERROR

    def test_returns_package_logger(self) -> None:
        """Returns the xmpwriter logger."""
        logger = setup_logging()
        assert logger.name == "xmpwriter"

    def test_repeated_calls_keep_one_handler(self) -> None:
        """Calling twice does not duplicate handlers."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_handler_has_formatter(self) -> None:
        """Handler has correct format."""
        logger = setup_logging()
        handler = logger.handlers[0]
        assert handler.formatter is not None
        assert handler.formatter._fmt == LOG_FORMAT


class TestParsePdfaLevel:
    """Tests for parse_pdfa_level."""

    @pytest.mark.parametrize(
        "level, expected",
        [
            ("1b", (1, "B")),
            ("2b", (2, "B")),
            ("2U", (2, "U")),
            ("3a", (3, "A")),
            ("4", (4, None)),
            ("4f", (4, "F")),
        ],
    )
    def test_valid(self, level: str, expected: tuple) -> None:
        """Part and upper-case conformance are split."""
        assert parse_pdfa_level(level) == expected

    @pytest.mark.parametrize("level", ["", "5b", "1u", "2x", "4b", "b2"])
    def test_invalid(self, level: str) -> None:
        """Unknown parts and conformance levels are rejected."""
        with pytest.raises(ValueError):
            parse_pdfa_level(level)
