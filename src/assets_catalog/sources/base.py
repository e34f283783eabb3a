"""Base abstractions for asset sources.

This module defines the interface that every source of asset paths
implements to feed the catalog pipeline.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..core.types import AssetEntry

if TYPE_CHECKING:
    from ..transformers.base import Transformer


class Source(ABC):
    """Abstract base class for all asset sources.

    A source knows where asset paths come from (a directory on disk,
    a bundler's glob result, ...) and turns each one into an
    :class:`AssetEntry`. The pipeline folds the entries into a tree and
    hands it to the source's transformer.
    """

    @abstractmethod
    def list_entries(self) -> list[AssetEntry]:
        """List every asset as a (segments, meta) entry.

        Entries are returned in a deterministic order; later entries
        win when two of them share a key path.

        Returns:
            List of entries ready to be inserted into a tree

        Raises:
            OSError: If the underlying storage can't be read
        """
        pass

    @abstractmethod
    def get_transformer(self) -> "Transformer":
        """Return the transformer that turns this source's tree into output."""
        pass

    def describe(self) -> str:
        """Human-readable description of where assets come from."""
        return type(self).__name__
