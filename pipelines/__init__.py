"""
Pipeline Registry and Exports

Provides a registry of all available pipelines and helper functions
for running them by name.
"""

from typing import Optional, Type

from core.settings import Settings
from pipelines.base import BasePipeline
from pipelines.config import PipelineConfig
from pipelines.context import PipelineContext
from pipelines.name_score import NameScorePipeline
from schemas.pipeline import PipelineResult


# Registry of all available pipelines
PIPELINE_REGISTRY: dict[str, Type[BasePipeline]] = {
    "name_score": NameScorePipeline,
}


def get_pipeline(name: str, **kwargs) -> BasePipeline:
    """
    Get a pipeline instance by name.

    Args:
        name: Pipeline name (e.g., "name_score")
        **kwargs: Passed to the pipeline constructor

    Returns:
        Instantiated pipeline

    Raises:
        KeyError: If pipeline name not found
    """
    if name not in PIPELINE_REGISTRY:
        available = ", ".join(PIPELINE_REGISTRY.keys())
        raise KeyError(f"Unknown pipeline '{name}'. Available: {available}")

    return PIPELINE_REGISTRY[name](**kwargs)


async def run_pipeline(
    name: str,
    settings: Optional[Settings] = None,
    **kwargs,
) -> PipelineResult:
    """
    Run a pipeline by name.

    Args:
        name: Pipeline name
        settings: Settings passed to the pipeline's collaborators
        **kwargs: Extra pipeline constructor arguments

    Returns:
        PipelineResult with status and details
    """
    pipeline = get_pipeline(name, settings=settings, **kwargs)
    return await pipeline.run()


def list_pipelines() -> list[dict]:
    """
    List all available pipelines with their configurations.

    Returns:
        List of pipeline info dicts
    """
    return [cls.get_info() for cls in PIPELINE_REGISTRY.values()]


__all__ = [
    "BasePipeline",
    "PipelineConfig",
    "PipelineContext",
    "NameScorePipeline",
    "PIPELINE_REGISTRY",
    "get_pipeline",
    "run_pipeline",
    "list_pipelines",
]
