"""
Data Transformers

Pure functions for transforming extracted names into a score.
"""

from pipelines.transformers.names import normalize_name, normalize_names
from pipelines.transformers.ranking import rank_names
from pipelines.transformers.name_score import (
    calculate_total_score,
    letter_sum,
    position_names,
)

__all__ = [
    "normalize_name",
    "normalize_names",
    "rank_names",
    "calculate_total_score",
    "letter_sum",
    "position_names",
]
