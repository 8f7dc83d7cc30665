# templatestore/infra/catalog/__init__.py
"""
Template Catalogs

Infrastructure layer implementations for resolving template definitions
"""

from .filesystem import FileSystemCatalog
from .memory import MemoryCatalog

__all__ = [
    "FileSystemCatalog",
    "MemoryCatalog",
]
