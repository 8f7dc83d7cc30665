# templatestore/core/catalog.py
"""
Template Catalog Interface

Expands path definitions (files, directories, globs) into concrete template paths
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List


class TemplateCatalog(ABC):
    """
    Abstract interface for resolving template definitions

    Implementations:
    - FileSystemCatalog: resolve against the local filesystem
    - MemoryCatalog: static mapping (for testing)
    """

    @abstractmethod
    def get_templates_path(self, definitions: Iterable[str]) -> List[str]:
        """
        Resolve definitions into absolute template paths.

        Duplicates are allowed in the output; callers deduplicate.

        Args:
            definitions: Files, directories or glob patterns

        Returns:
            List of absolute file paths
        """
        pass


__all__ = ["TemplateCatalog"]
