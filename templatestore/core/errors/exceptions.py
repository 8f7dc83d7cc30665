# templatestore/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


@dataclass
class TemplateStoreError(Exception):
    """
    Base error for the template store.

    Per-template errors never abort a load; the store logs them and moves on.
    Only LoaderConfigError is raised to the caller (from Store construction).
    """
    message: str
    error_code: str = codes.UNKNOWN
    path: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "path": self.path,
            "details": self.details,
        }


@dataclass
class LoaderConfigError(TemplateStoreError):
    """Malformed loader configuration (raised by Store construction)"""
    error_code: str = codes.CONFIG_INVALID


@dataclass
class TemplateLoadError(TemplateStoreError):
    """Metadata pre-parse of a single template failed"""


@dataclass
class TemplateReadError(TemplateLoadError):
    error_code: str = codes.TEMPLATE_READ_FAILED

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "TemplateReadError":
        reason = exc.strerror or str(exc)
        return cls(
            message=f"could not read file: {reason}",
            path=path,
            details={"errno": exc.errno},
            cause=exc,
        )


@dataclass
class TemplateDecodeError(TemplateLoadError):
    error_code: str = codes.TEMPLATE_DECODE_FAILED


@dataclass
class TemplateValidationError(TemplateLoadError):
    error_code: str = codes.TEMPLATE_INVALID


@dataclass
class TemplateCompileError(TemplateStoreError):
    """Full compilation of a template failed"""
    error_code: str = codes.TEMPLATE_COMPILE_FAILED
