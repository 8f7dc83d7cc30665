# templatestore/core/errors/__init__.py
"""
Error types for the template store.

No side effects on import.
"""

from . import codes
from .exceptions import (
    TemplateStoreError,
    LoaderConfigError,
    TemplateLoadError,
    TemplateReadError,
    TemplateDecodeError,
    TemplateValidationError,
    TemplateCompileError,
)

__all__ = [
    "codes",
    "TemplateStoreError",
    "LoaderConfigError",
    "TemplateLoadError",
    "TemplateReadError",
    "TemplateDecodeError",
    "TemplateValidationError",
    "TemplateCompileError",
]
