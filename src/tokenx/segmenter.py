"""Lossless segmentation of text into rough token candidates."""

from __future__ import annotations

import re
from collections.abc import Iterator

# Characters treated as punctuation, both for splitting and classification
PUNCTUATION_CHARS = ".,!?;'\"„“”‘’\\-(){}\\[\\]<>:/\\\\|@#$%^&*+=`~"

PUNCTUATION_RE = re.compile(f"[{PUNCTUATION_CHARS}]")

# ECMAScript whitespace: byte-order mark included, \x1c-\x1f and \x85 excluded
WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Capturing group keeps the separators in re.split output
_SPLIT_RE = re.compile(f"([{WHITESPACE_CHARS}]+|[{PUNCTUATION_CHARS}]+)")


def iter_segments(text: str) -> Iterator[str]:
    """Yield non-empty segments of ``text`` in reading order.

    Whitespace runs and punctuation runs come out as their own segments.
    Joining the yielded segments gives back ``text`` unchanged.
    """
    for part in _SPLIT_RE.split(text):
        if part:
            yield part


def segment(text: str) -> list[str]:
    """Split ``text`` into whitespace, punctuation and word segments."""
    return list(iter_segments(text))
