"""
Base Loader

Abstract base class for result loaders.
"""

from abc import ABC, abstractmethod
from typing import Any

from core.logging import get_logger


class BaseLoader(ABC):
    """
    Abstract base class for loaders.

    Loaders deliver a pipeline's computed result to an external sink.
    Subclasses raise SinkRejected for any delivery failure.
    """

    def __init__(self, name: str):
        self.name = name
        self.log = get_logger(f"loader.{name}")

    @abstractmethod
    def load(self, result: Any, **kwargs: Any) -> Any:
        """Deliver the result to the sink."""
        pass
