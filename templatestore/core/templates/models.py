# templatestore/core/templates/models.py
"""
Template Models

Typed views over a template document:
- TemplateInfo: partial metadata view used by the prefilter (name, authors,
  severity, tags, workflow chain). Cheap to build, never compiles anything.
- Template: fully parsed template produced by a TemplateParser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ..errors import TemplateDecodeError, TemplateValidationError


# Top-level keys that carry executable protocol requests
PROTOCOL_KEYS = (
    "requests",
    "http",
    "dns",
    "file",
    "network",
    "headless",
    "ssl",
    "websocket",
    "whois",
    "code",
    "javascript",
)


def to_string(value: Any) -> str:
    """
    Coerce a metadata value to a string.

    None becomes "", sequences are comma-joined, anything else goes through str().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(to_string(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def split_comma_trim(value: str) -> Tuple[str, ...]:
    """Split on comma and trim each element (empty elements are kept)"""
    return tuple(part.strip() for part in value.split(","))


def split_selector_values(values: Iterable[str]) -> FrozenSet[str]:
    """Flatten comma-separated selector values, dropping empty fragments"""
    result = set()
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part:
                result.add(part)
    return frozenset(result)


@dataclass(frozen=True)
class TemplateInfo:
    """
    Partial template metadata.

    tags and authors always hold at least one element: a missing tags
    field decodes to a single empty tag, which keeps the (tag, author)
    cross product non-empty for selector evaluation.
    """
    name: str
    authors: Tuple[str, ...]
    severity: str = ""
    tags: Tuple[str, ...] = ("",)
    workflows: Tuple[Any, ...] = ()

    @property
    def is_workflow(self) -> bool:
        return len(self.workflows) > 0

    @classmethod
    def from_document(cls, document: Any, path: Optional[str] = None) -> "TemplateInfo":
        """
        Decode metadata from a parsed YAML document.

        Raises:
            TemplateDecodeError: document shape is wrong
            TemplateValidationError: name or author is missing
        """
        if document is None:
            document = {}
        if not isinstance(document, Mapping):
            raise TemplateDecodeError(
                message=f"template must be a mapping, got {type(document).__name__}",
                path=path,
            )

        info = document.get("info")
        if info is None:
            info = {}
        if not isinstance(info, Mapping):
            raise TemplateDecodeError(
                message=f"info field must be a mapping, got {type(info).__name__}",
                path=path,
            )

        workflows = document.get("workflows")
        if workflows is None:
            workflows = []
        if not isinstance(workflows, list):
            raise TemplateDecodeError(
                message=f"workflows field must be a list, got {type(workflows).__name__}",
                path=path,
            )

        if "name" not in info:
            raise TemplateValidationError(message="no template name field provided", path=path)
        if "author" not in info:
            raise TemplateValidationError(message="no template author field provided", path=path)

        return cls(
            name=to_string(info["name"]),
            authors=split_comma_trim(to_string(info["author"])),
            severity=to_string(info.get("severity")),
            tags=split_comma_trim(to_string(info.get("tags"))),
            workflows=tuple(workflows),
        )


@dataclass
class Template:
    """Fully parsed template"""
    id: str
    path: str
    info: TemplateInfo
    requests: Dict[str, Any] = field(default_factory=dict)
    workflows: List[Any] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_workflow(self) -> bool:
        return len(self.workflows) > 0

    @property
    def request_count(self) -> int:
        count = 0
        for section in self.requests.values():
            count += len(section) if isinstance(section, list) else 1
        return count


__all__ = [
    "PROTOCOL_KEYS",
    "to_string",
    "split_comma_trim",
    "split_selector_values",
    "TemplateInfo",
    "Template",
]
