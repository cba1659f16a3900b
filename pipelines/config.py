"""
Pipeline Configuration

Immutable configuration dataclass for pipeline metadata.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineConfig:
    """
    Immutable configuration for a pipeline.

    Attributes:
        name: Internal name used for tracking (e.g., "name_score")
        display_name: Human-readable name (e.g., "Name Score")
        description: What this pipeline does
        target: Where this pipeline delivers its result
    """

    name: str
    display_name: str
    description: str
    target: str

    def __post_init__(self):
        """Validate configuration."""
        if not self.name:
            raise ValueError("Pipeline name is required")
        if not self.target:
            raise ValueError("Pipeline target is required")
