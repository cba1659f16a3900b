"""
Result Loaders

Components that deliver computed results to external sinks.
"""

from pipelines.loaders.base import BaseLoader
from pipelines.loaders.score_sink import ScoreSinkLoader

__all__ = [
    "BaseLoader",
    "ScoreSinkLoader",
]
