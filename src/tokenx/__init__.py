"""tokenx: GPT token estimation and context budgets without a tokenizer.

Public API:
    approximate_token_chunks(text) -> list[TokenCount]
    approximate_token_size(text) -> int
    chunk_by_max_tokens(text, max_tokens, overlap=0) -> list[str]
    is_within_token_limit(text, token_limit) -> bool
    get_model_context_size(model_name) -> int
    approximate_max_token_size(prompt, model_name, max_tokens_in_response=0) -> int
"""

from __future__ import annotations

from tokenx.budget import approximate_max_token_size, is_within_token_limit, remaining_tokens
from tokenx.chunker import chunk_by_max_tokens, chunk_token_counts
from tokenx.estimator import (
    LANGUAGE_METRICS,
    RULES,
    EstimationRule,
    LanguageMetric,
    TokenCount,
    approximate_token_chunks,
    approximate_token_size,
    classify_segment,
    estimate_segment,
    iter_token_chunks,
)
from tokenx.exceptions import InvalidMaxTokensError, TokenizerUnavailableError, TokenxError
from tokenx.models import (
    ModelName,
    get_embedding_context_size,
    get_model_context_size,
    resolve_model_name,
)
from tokenx.segmenter import segment

__all__ = [
    "LANGUAGE_METRICS",
    "RULES",
    "EstimationRule",
    "InvalidMaxTokensError",
    "LanguageMetric",
    "ModelName",
    "TokenCount",
    "TokenizerUnavailableError",
    "TokenxError",
    "approximate_max_token_size",
    "approximate_token_chunks",
    "approximate_token_size",
    "chunk_by_max_tokens",
    "chunk_token_counts",
    "classify_segment",
    "estimate_segment",
    "get_embedding_context_size",
    "get_model_context_size",
    "is_within_token_limit",
    "iter_token_chunks",
    "remaining_tokens",
    "resolve_model_name",
    "segment",
]
