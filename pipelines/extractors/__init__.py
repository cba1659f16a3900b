"""
Data Extractors

Reusable components for fetching data from external sources.
"""

from pipelines.extractors.base import BaseExtractor
from pipelines.extractors.name_source import NameSourceExtractor, parse_names

__all__ = [
    "BaseExtractor",
    "NameSourceExtractor",
    "parse_names",
]
