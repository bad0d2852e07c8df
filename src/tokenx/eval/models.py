"""Pydantic models for estimate-versus-tokenizer comparison."""

from __future__ import annotations

from pydantic import BaseModel


class SampleComparison(BaseModel):
    """Estimated and actual token counts for one text."""

    name: str
    characters: int
    estimated_tokens: int
    actual_tokens: int
    deviation: float


class ComparisonReport(BaseModel):
    """Aggregate comparison over a set of texts."""

    encoding: str
    timestamp: str
    samples: list[SampleComparison]
    total_estimated: int
    total_actual: int
    mean_abs_deviation: float
