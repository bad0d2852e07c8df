"""Measure how far estimates deviate from tiktoken counts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from tokenx.estimator import approximate_token_size
from tokenx.eval.models import ComparisonReport, SampleComparison
from tokenx.exceptions import TokenizerUnavailableError

logger = logging.getLogger(__name__)

Encoder = Callable[[str], int]


def load_encoder(encoding_name: str = "cl100k_base") -> Encoder:
    """Return a function counting real tokens with a tiktoken encoding.

    Raises:
        TokenizerUnavailableError: If tiktoken is not installed or the
            encoding cannot be loaded.
    """
    try:
        import tiktoken
    except ImportError as e:
        msg = "tiktoken is required for comparison (pip install 'tokenx[eval]')"
        raise TokenizerUnavailableError(msg) from e

    try:
        encoding = tiktoken.get_encoding(encoding_name)
    except (KeyError, ValueError, OSError) as e:
        msg = f"Cannot load tiktoken encoding {encoding_name!r}: {e}"
        raise TokenizerUnavailableError(msg) from e

    def count(text: str) -> int:
        return len(encoding.encode(text, disallowed_special=()))

    return count


def compare_text(name: str, text: str, encoder: Encoder) -> SampleComparison:
    """Compare the estimate for one text with ``encoder``'s count.

    Deviation is (estimated - actual) / actual, 0.0 when both are zero and
    1.0 when only the reference count is zero.
    """
    estimated = approximate_token_size(text)
    actual = encoder(text)
    if actual:
        deviation = (estimated - actual) / actual
    else:
        # Any estimate against an empty reference is a full miss
        deviation = 0.0 if estimated == 0 else 1.0
    return SampleComparison(
        name=name,
        characters=len(text),
        estimated_tokens=estimated,
        actual_tokens=actual,
        deviation=round(deviation, 4),
    )


def compare_samples(
    samples: Iterable[tuple[str, str]],
    encoder: Encoder,
    encoding_name: str = "cl100k_base",
) -> ComparisonReport:
    """Compare every ``(name, text)`` sample and aggregate the results."""
    results = [compare_text(name, text, encoder) for name, text in samples]
    for r in results:
        logger.debug(
            "%s: estimated=%d actual=%d deviation=%.2f%%",
            r.name,
            r.estimated_tokens,
            r.actual_tokens,
            r.deviation * 100,
        )

    mean_abs = sum(abs(r.deviation) for r in results) / len(results) if results else 0.0
    return ComparisonReport(
        encoding=encoding_name,
        timestamp=datetime.now(UTC).isoformat(),
        samples=results,
        total_estimated=sum(r.estimated_tokens for r in results),
        total_actual=sum(r.actual_tokens for r in results),
        mean_abs_deviation=round(mean_abs, 4),
    )
