"""Vocabulary-free token estimation.

Each segment produced by the segmenter is classified by a ranked table of
rules. The first rule whose predicate matches decides the count:

    whitespace    -> 0
    cjk           -> one token per code point
    numeric       -> 1
    short         -> 1 (three characters or fewer)
    punctuation   -> 1, or ceil(length / 2) for runs
    alphanumeric  -> ceil(length / chars_per_token)
    fallback      -> one token per code point

The table order is part of the result. Moving a rule changes counts.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from tokenx.segmenter import PUNCTUATION_RE, WHITESPACE_CHARS, iter_segments

DEFAULT_AVERAGE_CHARS_PER_TOKEN = 6

_WHITESPACE_RE = re.compile(f"[{WHITESPACE_CHARS}]+")
_CJK_RE = re.compile(
    "[\u4E00-\u9FFF\u3400-\u4DBF\u3000-\u303F\uFF00-\uFFEF\u30A0-\u30FF"
    "\u2E80-\u2EFF\u31C0-\u31EF\u3200-\u32FF\u3300-\u33FF\uAC00-\uD7AF"
    "\u1100-\u11FF\u3130-\u318F\uA960-\uA97F\uD7B0-\uD7FF]"
)
_NUMERIC_SEQUENCE_RE = re.compile(r"[0-9.,]+")
# Spoken words, including Latin-1 accented letters
_ALPHANUMERIC_RE = re.compile("[a-zA-Z0-9\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u00FF]+")


@dataclass(frozen=True, slots=True)
class TokenCount:
    """A segment of the input and its estimated token count."""

    substring: str
    count: int


@dataclass(frozen=True, slots=True)
class LanguageMetric:
    """Average characters per token for text matching ``pattern``."""

    pattern: re.Pattern[str]
    average_chars_per_token: float


@dataclass(frozen=True, slots=True)
class EstimationRule:
    """One ranked entry of the classifier."""

    name: str
    applies: Callable[[str], bool]
    count: Callable[[str], int]


# Languages close to English, with their rough characters-per-token ratio
LANGUAGE_METRICS: tuple[LanguageMetric, ...] = (
    LanguageMetric(re.compile("[\u00E4\u00F6\u00FC\u00DF\u1E9E]", re.IGNORECASE), 3),
)


def language_chars_per_token(segment: str) -> float | None:
    """Return the ratio of the first language metric matching ``segment``."""
    for metric in LANGUAGE_METRICS:
        if metric.pattern.search(segment):
            return metric.average_chars_per_token
    return None


def _code_points(segment: str) -> int:
    return len(segment)


def _single(segment: str) -> int:
    return 1


def _punctuation_count(segment: str) -> int:
    # Runs of punctuation tend to split into pairs
    return math.ceil(len(segment) / 2) if len(segment) > 1 else 1


def _is_word(segment: str) -> bool:
    return bool(_ALPHANUMERIC_RE.fullmatch(segment)) or (
        language_chars_per_token(segment) is not None
    )


def _word_count(segment: str) -> int:
    ratio = language_chars_per_token(segment) or DEFAULT_AVERAGE_CHARS_PER_TOKEN
    return math.ceil(len(segment) / ratio)


RULES: tuple[EstimationRule, ...] = (
    EstimationRule("whitespace", lambda s: bool(_WHITESPACE_RE.fullmatch(s)), lambda s: 0),
    EstimationRule("cjk", lambda s: bool(_CJK_RE.search(s)), _code_points),
    EstimationRule("numeric", lambda s: bool(_NUMERIC_SEQUENCE_RE.search(s)), _single),
    EstimationRule("short", lambda s: len(s) <= 3, _single),
    EstimationRule("punctuation", lambda s: bool(PUNCTUATION_RE.search(s)), _punctuation_count),
    EstimationRule("alphanumeric", _is_word, _word_count),
    # Emoji, symbols and scripts like Arabic, Hebrew or Greek
    EstimationRule("fallback", lambda s: True, _code_points),
)


def match_rule(segment: str) -> EstimationRule:
    """Return the first rule in ``RULES`` that applies to ``segment``."""
    for rule in RULES:
        if rule.applies(segment):
            return rule
    raise AssertionError("fallback rule must match every segment")


def classify_segment(segment: str) -> str:
    """Name of the rule that decides the count for ``segment``."""
    return match_rule(segment).name


def estimate_segment(segment: str) -> int:
    """Estimated token count of a single segment."""
    return match_rule(segment).count(segment)


def iter_token_chunks(text: str) -> Iterator[TokenCount]:
    """Lazily yield a TokenCount for every segment of ``text``."""
    for part in iter_segments(text):
        yield TokenCount(part, estimate_segment(part))


def approximate_token_chunks(text: str) -> list[TokenCount]:
    """Segment ``text`` and estimate each segment, in reading order."""
    return list(iter_token_chunks(text))


def approximate_token_size(text: str) -> int:
    """Estimate the number of tokens in a string."""
    return sum(pair.count for pair in iter_token_chunks(text))
