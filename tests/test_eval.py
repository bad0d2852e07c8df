"""Tests for comparison against a reference tokenizer."""

import sys

import pytest

from tokenx.eval.compare import compare_samples, compare_text, load_encoder
from tokenx.exceptions import TokenizerUnavailableError


def fake_encoder(text: str) -> int:
    """Word count stands in for a real tokenizer."""
    return len(text.split())


class TestCompareText:
    def test_deviation(self, sentence):
        result = compare_text("sentence", sentence, fake_encoder)
        assert result.estimated_tokens == 11
        assert result.actual_tokens == 7
        assert result.characters == len(sentence)
        assert result.deviation == pytest.approx(4 / 7, abs=1e-4)

    def test_empty_reference_is_full_miss(self):
        result = compare_text("blank", "Hello", lambda text: 0)
        assert result.estimated_tokens == 1
        assert result.deviation == 1.0

    def test_empty_text(self):
        result = compare_text("empty", "", fake_encoder)
        assert result.estimated_tokens == 0
        assert result.actual_tokens == 0
        assert result.deviation == 0.0


class TestCompareSamples:
    def test_aggregates(self, sentence, german):
        report = compare_samples(
            [("en", sentence), ("de", german)], fake_encoder, encoding_name="words"
        )
        assert report.encoding == "words"
        assert [s.name for s in report.samples] == ["en", "de"]
        assert report.total_estimated == 11 + 49
        assert report.total_actual == 7 + len(german.split())
        expected = (abs(report.samples[0].deviation) + abs(report.samples[1].deviation)) / 2
        assert report.mean_abs_deviation == pytest.approx(expected, abs=1e-4)

    def test_no_samples(self):
        report = compare_samples([], fake_encoder)
        assert report.samples == []
        assert report.mean_abs_deviation == 0.0

    def test_report_serializes(self, sentence):
        report = compare_samples([("en", sentence)], fake_encoder)
        assert '"estimated_tokens":11' in report.model_dump_json()


class TestLoadEncoder:
    def test_missing_tiktoken(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "tiktoken", None)
        with pytest.raises(TokenizerUnavailableError, match="tiktoken is required"):
            load_encoder()

    def test_unknown_encoding(self):
        pytest.importorskip("tiktoken")
        with pytest.raises(TokenizerUnavailableError, match="no-such-encoding"):
            load_encoder("no-such-encoding")
