"""Configuration management for tokenx."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Config:
    """CLI defaults and derived paths."""

    base_dir: Path = field(default_factory=lambda: Path.home() / ".tokenx")

    # Budgeting
    default_model: str = "gpt-3.5-turbo"
    reserve_tokens: int = 0

    # Chunking
    default_max_tokens: int = 1000
    default_overlap: int = 0

    # Comparison against a real tokenizer
    comparison_encoding: str = "cl100k_base"

    # Run log
    log_runs: bool = False

    @property
    def log_dir(self) -> Path:
        return self.base_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create directory tree if it doesn't exist."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.log_dir.mkdir(parents=True, exist_ok=True)
