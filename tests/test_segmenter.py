"""Tests for the segmenter."""

import pytest

from tokenx.segmenter import iter_segments, segment


class TestSegment:
    def test_splits_words_whitespace_and_punctuation(self):
        assert segment("Hello, world!") == ["Hello", ",", " ", "world", "!"]

    def test_empty_input(self):
        assert segment("") == []

    def test_punctuation_runs_stay_together(self):
        assert segment("a--b  c") == ["a", "--", "b", "  ", "c"]
        assert segment("wait...what?!") == ["wait", "...", "what", "?!"]

    def test_typographic_quotes(self):
        assert segment("„Hallo“ ‘x’") == ["„", "Hallo", "“", " ", "‘", "x", "’"]

    def test_path_like_text(self):
        assert segment("C:\\tmp/file") == ["C", ":\\", "tmp", "/", "file"]

    def test_punctuation_never_merges_with_whitespace(self):
        assert segment("end. Next") == ["end", ".", " ", "Next"]

    def test_iter_segments_is_lazy(self):
        it = iter_segments("a b")
        assert next(it) == "a"
        assert list(it) == [" ", "b"]

    @pytest.mark.parametrize(
        "text",
        [
            "Hello, world! This is a short sentence.",
            "  leading and trailing  ",
            "line one\nline two\r\n\ttabbed",
            "你好，世界。こんにちは",
            "emoji 😀😀 and #hash @user $5.00 100%",
            "mixed: Grüße, ½ ¾ — dash… done",
        ],
    )
    def test_lossless(self, text):
        """Joining the segments gives back the input."""
        parts = segment(text)
        assert "".join(parts) == text
        assert all(parts)


class TestWhitespaceClass:
    def test_byte_order_mark_is_whitespace(self):
        assert segment("\ufeffHello") == ["\ufeff", "Hello"]

    def test_information_separators_are_not_whitespace(self):
        assert segment("a\x1cb\x1fc") == ["a\x1cb\x1fc"]

    def test_next_line_is_not_whitespace(self):
        assert segment("a\x85b") == ["a\x85b"]

    def test_unicode_spaces_split(self):
        assert segment("a\u00a0b\u2003c\u3000d") == ["a", "\u00a0", "b", "\u2003", "c", "\u3000", "d"]
