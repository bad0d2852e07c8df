"""Tests for greedy token-bounded chunking."""

import pytest

from tokenx.chunker import chunk_by_max_tokens, chunk_token_counts
from tokenx.estimator import TokenCount, approximate_token_chunks
from tokenx.exceptions import InvalidMaxTokensError


class TestChunkByMaxTokens:
    def test_short_english(self, sentence):
        assert chunk_by_max_tokens(sentence, 5) == [
            "Hello, world! This ",
            "is a short sentence",
            ".",
        ]

    def test_short_english_with_overlap(self, sentence):
        """Each chunk after the first starts with the tail of its predecessor."""
        assert chunk_by_max_tokens(sentence, 3, 1) == [
            "Hello, world",
            "Hello, world! This ",
            " This is a ",
            " a short ",
            " short sentence",
            " short sentence.",
        ]

    def test_short_german_with_umlauts(self, german):
        assert len(chunk_by_max_tokens(german, 5)) == 12

    def test_without_overlap_chunks_join_to_input(self, german):
        assert "".join(chunk_by_max_tokens(german, 7)) == german

    def test_negative_overlap_means_no_overlap(self, sentence):
        assert chunk_by_max_tokens(sentence, 3, -4) == chunk_by_max_tokens(sentence, 3)

    def test_overlap_adds_chunks_to_sentence(self, sentence):
        assert chunk_by_max_tokens(sentence, 3) == [
            "Hello, world",
            "! This is ",
            "a short ",
            "sentence.",
        ]
        assert len(chunk_by_max_tokens(sentence, 3, 1)) >= 4

    def test_larger_overlap_can_yield_fewer_chunks(self):
        """A walk that reaches the front carries only the final pair."""
        text = "-\u00c4!~\u0393+`00#\u00c4\u4f60~\t\u00e9,Z"
        assert len(chunk_by_max_tokens(text, 6, 4)) == 5
        assert len(chunk_by_max_tokens(text, 6, 5)) == 4

    def test_empty_input(self):
        assert chunk_by_max_tokens("", 10) == []

    def test_everything_fits(self, sentence):
        assert chunk_by_max_tokens(sentence, 100) == [sentence]

    def test_oversized_segment_kept_whole(self):
        """A segment larger than the budget gets its own chunk."""
        assert chunk_by_max_tokens("internationalization", 1) == ["internationalization"]
        assert chunk_by_max_tokens("a internationalization b", 2) == [
            "a ",
            "internationalization",
            " b",
        ]

    @pytest.mark.parametrize("max_tokens", [0, -1, 2.5, True, "10"])
    def test_rejects_invalid_max_tokens(self, sentence, max_tokens):
        with pytest.raises(InvalidMaxTokensError):
            chunk_by_max_tokens(sentence, max_tokens)

    def test_invalid_max_tokens_is_value_error(self):
        with pytest.raises(ValueError, match="positive"):
            chunk_by_max_tokens("text", 0)


class TestChunkTokenCounts:
    def test_budget_respected(self, german):
        for chunk in chunk_token_counts(approximate_token_chunks(german), 6):
            assert sum(p.count for p in chunk) <= 6 or len(chunk) == 1

    def test_accepts_iterator(self, sentence):
        chunks = chunk_token_counts(iter(approximate_token_chunks(sentence)), 5)
        assert len(chunks) == 3

    def test_overlap_carries_last_pair_when_front_reached(self):
        a, b, c = TokenCount("a", 3), TokenCount("b", 3), TokenCount("c", 3)
        assert chunk_token_counts([a, b, c], 3, overlap=100) == [[a], [a, b], [b, c]]

    def test_overlap_stops_once_reached(self):
        pairs = [TokenCount(s, 1) for s in "abcdef"]
        chunks = chunk_token_counts(pairs, 4, overlap=1)
        assert [[p.substring for p in chunk] for chunk in chunks] == [
            ["a", "b", "c", "d"],
            ["b", "c", "d", "e", "f"],
        ]
