# templatestore/infra/catalog/memory.py
"""
Memory Template Catalog

In-memory catalog for testing and programmatic template sets
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from templatestore.core.catalog import TemplateCatalog


class MemoryCatalog(TemplateCatalog):
    """
    Resolve definitions from a static mapping

    Useful for:
    - Testing
    - Callers that already know their template paths
    """

    def __init__(self, entries: Optional[Dict[str, Sequence[str]]] = None):
        """
        Initialize memory catalog

        Args:
            entries: Optional dict of definition -> paths
        """
        self._entries: Dict[str, List[str]] = {
            definition: list(paths) for definition, paths in (entries or {}).items()
        }

    def get_templates_path(self, definitions: Iterable[str]) -> List[str]:
        """Unknown definitions resolve to nothing"""
        paths: List[str] = []
        for definition in definitions:
            paths.extend(self._entries.get(definition, []))
        return paths

    def add(self, definition: str, paths: Sequence[str]) -> None:
        """Register (or extend) a definition"""
        self._entries.setdefault(definition, []).extend(paths)

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["MemoryCatalog"]
