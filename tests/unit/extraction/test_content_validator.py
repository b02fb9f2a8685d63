"""Tests for the meaningfulness gate."""

import pytest

from cardforge.extraction.validator import is_date, is_meaningful, is_time

pytestmark = pytest.mark.unit


class TestIsMeaningful:
    """Tests for is_meaningful()."""

    def test_accepts_regular_sentence(self):
        assert is_meaningful("This is a meaningful sentence.")

    @pytest.mark.parametrize("text", ["", "short", "   tiny   "])
    def test_rejects_text_below_min_length(self, text):
        assert not is_meaningful(text)

    @pytest.mark.parametrize("text", ["12/25/2023", "2023-12-25", "Dec 22, 2025", "December 22, 2025", "25.12.2023"])
    def test_rejects_bare_dates(self, text):
        assert not is_meaningful(text)

    def test_rejects_bare_time(self):
        assert not is_meaningful("10:30:00 PM")

    @pytest.mark.parametrize("text", ["None", "n/a", "NULL", "no content"])
    def test_rejects_placeholders(self, text):
        assert not is_meaningful(text, min_length=1)

    def test_rejects_mostly_punctuation(self):
        assert not is_meaningful("- - - - - - - - ._")

    def test_rejects_numbers(self):
        assert not is_meaningful("1,234,567.89")

    def test_rejects_short_time_prefixed_text(self):
        """Two words, under 20 characters, starting with H:MM."""
        assert not is_meaningful("10:30 meeting")

    def test_non_string_is_never_meaningful(self):
        assert not is_meaningful(12345678901)
        assert not is_meaningful(None)

    def test_custom_min_length(self):
        assert is_meaningful("Ship it now", min_length=5)
        assert not is_meaningful("Ship it now", min_length=20)


class TestDateAndTimePatterns:
    """Tests for the date/time helpers."""

    def test_is_date(self):
        assert is_date("1/2/24")
        assert is_date("22 Dec 2025")
        assert not is_date("Dec 2025 review")

    def test_is_time(self):
        assert is_time("9:05")
        assert is_time("09:05:10 am")
        assert not is_time("9:05 tomorrow")
