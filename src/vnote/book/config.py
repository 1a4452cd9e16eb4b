"""Configuration dataclasses for notebook storage and search.

These are pure data containers with sensible defaults.
Override them from YAML config, env vars, or constructor args.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Settings for topic matching and content search.

    Attributes:
        similarity_threshold: Lowest normalized edit-distance score (inclusive)
            at which a topic still counts as a typo of the input.
    """

    similarity_threshold: float = 0.7

    def __post_init__(self):
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError("similarity_threshold must be between 0 and 1")
