"""Token budget arithmetic on top of the estimator."""

from __future__ import annotations

from tokenx.estimator import approximate_token_size
from tokenx.models import get_model_context_size


def is_within_token_limit(text: str, token_limit: int) -> bool:
    """True when the estimated size of ``text`` is at most ``token_limit``."""
    return approximate_token_size(text) <= token_limit


def remaining_tokens(prompt: str, context_size: int, reserved_for_response: int = 0) -> int:
    """Tokens left in a context window after the prompt and the reply reserve.

    Never negative.
    """
    return max(0, context_size - approximate_token_size(prompt) - reserved_for_response)


def approximate_max_token_size(
    prompt: str,
    model_name: str,
    max_tokens_in_response: int = 0,
) -> int:
    """Maximum number of tokens the model can still generate for ``prompt``.

    Args:
        prompt: Prompt text sent to the model.
        model_name: Model name, versioned suffixes allowed.
        max_tokens_in_response: Tokens reserved for the reply. 1000 tokens are
            roughly 750 English words.
    """
    return remaining_tokens(prompt, get_model_context_size(model_name), max_tokens_in_response)
