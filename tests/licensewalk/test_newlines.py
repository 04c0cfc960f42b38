"""Tests for newlines.py module."""

import pytest
from unittest.mock import patch

from licensewalk.newlines import LineEnding, host_line_ending, normalize_newlines


class TestNormalizeNewlines:

    def test_mixed_to_lf(self):
        assert normalize_newlines("a\r\nb\rc\nd", "lf") == "a\nb\nc\nd"

    def test_to_crlf_does_not_double(self):
        assert normalize_newlines("a\r\nb\n", LineEnding.CRLF) == "a\r\nb\r\n"

    def test_to_cr(self):
        assert normalize_newlines("a\nb", "CR") == "a\rb"

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown line ending"):
            normalize_newlines("a", "unix")


class TestHostLineEnding:

    def test_windows(self):
        with patch("licensewalk.newlines.os.linesep", "\r\n"):
            assert host_line_ending() == LineEnding.CRLF

    def test_posix(self):
        with patch("licensewalk.newlines.os.linesep", "\n"):
            assert host_line_ending() == LineEnding.LF
