"""Compare tokenx estimates with a real BPE tokenizer."""

from tokenx.eval.compare import compare_samples, compare_text, load_encoder
from tokenx.eval.models import ComparisonReport, SampleComparison

__all__ = [
    "ComparisonReport",
    "SampleComparison",
    "compare_samples",
    "compare_text",
    "load_encoder",
]
