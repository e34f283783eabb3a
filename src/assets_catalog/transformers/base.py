"""Base transformer class for turning catalog trees into output.

This module defines the interface for transformers that convert a
built metadata tree into whatever a source's consumer needs: generated
module source for the filesystem scanner, live trees for runtime use.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..core.types import Branch


class Transformer(ABC):
    """Abstract base class for tree transformers."""

    @abstractmethod
    def transform(self, tree: Branch, **kwargs: Any) -> Any:
        """Transform a metadata tree into output.

        Args:
            tree: Metadata tree built from a source's entries
            **kwargs: Transformer-specific parameters

        Returns:
            Transformer-specific output
        """
        pass
