"""Tests for pipefmt utility modules."""

import logging

from pipefmt.utils.logger import get_logger
from pipefmt.width import display_width


class TestGetLogger:
    def test_adds_prefix(self) -> None:
        assert get_logger("machine").name == "pipefmt.machine"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("pipefmt.formatter").name == "pipefmt.formatter"
        assert get_logger("pipefmt").name == "pipefmt"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger(__name__), logging.Logger)


class TestDisplayWidth:
    """Tests for display_width."""

    def test_ascii(self) -> None:
        assert display_width("") == 0
        assert display_width("hello") == 5

    def test_wide_characters_count_double(self) -> None:
        assert display_width("日本") == 4
        assert display_width("ｱｲ") == 2  # half-width katakana
        assert display_width("ＡＢ") == 4  # full-width latin

    def test_combining_mark_is_zero_width(self) -> None:
        assert display_width("e\u0301") == 1

    def test_non_printable_falls_back_to_length(self) -> None:
        assert display_width("a\x07b") == 3
