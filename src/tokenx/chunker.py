"""Greedy token-bounded chunking with optional overlap."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tokenx.estimator import TokenCount, iter_token_chunks
from tokenx.exceptions import InvalidMaxTokensError

logger = logging.getLogger(__name__)


def _validate_max_tokens(max_tokens: int) -> None:
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int):
        msg = f"max_tokens must be an integer, got {type(max_tokens).__name__}"
        raise InvalidMaxTokensError(msg)
    if max_tokens <= 0:
        msg = f"max_tokens must be positive, got {max_tokens}"
        raise InvalidMaxTokensError(msg)


def _overlap_seed(chunk: list[TokenCount], overlap: int) -> tuple[list[TokenCount], int]:
    """Pick the trailing pairs that open the chunk after ``chunk``.

    Walks backward from the second-to-last pair, summing counts until the
    sum reaches ``overlap``. The seed starts one pair before the last pair
    summed, and the running count carried over is the walked sum rather
    than the seed's total. If the front is reached first, only the final
    pair is carried.
    """
    index = len(chunk) - 1
    carried = 0
    while True:
        previous, index = index, index - 1
        if previous == 0 or carried >= overlap:
            break
        carried += chunk[index].count
    return chunk[index:], carried


def chunk_token_counts(
    pairs: Iterable[TokenCount],
    max_tokens: int,
    overlap: int = 0,
) -> list[list[TokenCount]]:
    """Pack pairs left to right into chunks of at most ``max_tokens``.

    A pair larger than ``max_tokens`` on its own still gets a chunk.
    With ``overlap`` > 0 each new chunk is seeded with the tail of the
    previous one, measured in estimated tokens.

    Raises:
        InvalidMaxTokensError: If max_tokens is not a positive integer.
    """
    _validate_max_tokens(max_tokens)

    chunks: list[list[TokenCount]] = []
    chunk: list[TokenCount] = []
    count = 0
    for pair in pairs:
        if chunk and count + pair.count > max_tokens:
            chunks.append(chunk)
            if overlap > 0:
                chunk, count = _overlap_seed(chunk, overlap)
            else:
                chunk, count = [], 0
        if pair.count > max_tokens:
            logger.debug(
                "Segment of %d tokens exceeds max_tokens=%d, keeping it whole",
                pair.count,
                max_tokens,
            )

        chunk.append(pair)
        count += pair.count

    if chunk:
        chunks.append(chunk)

    logger.debug("Packed input into %d chunks (max_tokens=%d)", len(chunks), max_tokens)
    return chunks


def chunk_by_max_tokens(text: str, max_tokens: int, overlap: int = 0) -> list[str]:
    """Split ``text`` into chunks of at most ``max_tokens`` estimated tokens.

    Each chunk is the plain concatenation of its segments, so the text's own
    whitespace and punctuation act as separators.
    """
    chunks = chunk_token_counts(iter_token_chunks(text), max_tokens, overlap)
    return ["".join(pair.substring for pair in chunk) for chunk in chunks]
