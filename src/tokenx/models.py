"""Model names and their context sizes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal

ModelName = Literal[
    "gpt-3.5-turbo-16k",
    "gpt-3.5-turbo",
    "gpt-4-1106-preview",
    "gpt-4-32k",
    "gpt-4",
    "text-davinci-003",
    "text-curie-001",
    "text-babbage-001",
    "text-ada-001",
    "code-davinci-002",
    "code-cushman-001",
]

DEFAULT_CONTEXT_SIZE = 4097
DEFAULT_EMBEDDING_CONTEXT_SIZE = 2046

MODEL_CONTEXT_SIZES: MappingProxyType[str, int] = MappingProxyType(
    {
        "gpt-3.5-turbo-16k": 16384,
        "gpt-3.5-turbo": 4096,
        "gpt-4-1106-preview": 128000,
        "gpt-4-32k": 32768,
        "gpt-4": 8192,
        "text-davinci-003": 4097,
        "text-curie-001": 2048,
        "text-babbage-001": 2048,
        "text-ada-001": 2048,
        "code-davinci-002": 8000,
        "code-cushman-001": 2048,
    }
)

EMBEDDING_CONTEXT_SIZES: MappingProxyType[str, int] = MappingProxyType(
    {"text-embedding-ada-002": 8191}
)

# (prefix, canonical name), checked in order: longer families first
_VERSIONED_FAMILIES: tuple[tuple[str, str], ...] = (
    ("gpt-3.5-turbo-16k", "gpt-3.5-turbo-16k"),
    ("gpt-3.5-turbo-", "gpt-3.5-turbo"),
    ("gpt-4-32k", "gpt-4-32k"),
    ("gpt-4-", "gpt-4"),
)


def resolve_model_name(model_name: str) -> str:
    """Collapse a versioned model name to its family, e.g. gpt-4-0613 -> gpt-4.

    Prefixes are checked before exact names, so gpt-4-1106-preview
    resolves to gpt-4.
    """
    for prefix, canonical in _VERSIONED_FAMILIES:
        if model_name.startswith(prefix):
            return canonical
    return model_name


def get_model_context_size(model_name: str) -> int:
    """Context size (prompt plus response tokens) supported by the model."""
    return MODEL_CONTEXT_SIZES.get(resolve_model_name(model_name), DEFAULT_CONTEXT_SIZE)


def get_embedding_context_size(model_name: str | None = None) -> int:
    """Maximum input tokens for an embedding model."""
    if model_name is None:
        return DEFAULT_EMBEDDING_CONTEXT_SIZE
    return EMBEDDING_CONTEXT_SIZES.get(model_name, DEFAULT_EMBEDDING_CONTEXT_SIZE)
