# templatestore/config/validator.py
"""
Configuration Validator

Validates loader configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Literal

from templatestore.core.templates.models import split_selector_values

if TYPE_CHECKING:
    from .loader import LoaderConfig


KNOWN_SEVERITIES = frozenset({"info", "low", "medium", "high", "critical", "unknown"})

PATH_FIELDS = ("templates", "workflows", "exclude_templates", "include_templates")
SELECTOR_FIELDS = ("tags", "exclude_tags", "include_tags", "authors", "severities")


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "loader.exclude_tags"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"[{self.level}] {self.path}: {self.message}{hint_str}"


def validate_config(config: "LoaderConfig") -> List[ConfigIssue]:
    """
    Validate loader configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues: List[ConfigIssue] = []

    if not isinstance(config.concurrency, int) or isinstance(config.concurrency, bool) or config.concurrency < 1:
        issues.append(ConfigIssue(
            level="error",
            path="loader.concurrency",
            message=f"concurrency must be a positive integer, got {config.concurrency!r}",
            hint="Use 1 for sequential loading",
        ))

    bad_types = False
    for name in PATH_FIELDS + SELECTOR_FIELDS:
        for value in getattr(config, name):
            if not isinstance(value, str):
                bad_types = True
                issues.append(ConfigIssue(
                    level="error",
                    path=f"loader.{name}",
                    message=f"entries must be strings, got {type(value).__name__} ({value!r})",
                ))
    if bad_types:
        return issues

    for severity in sorted(split_selector_values(config.severities) - KNOWN_SEVERITIES):
        issues.append(ConfigIssue(
            level="warn",
            path="loader.severities",
            message=f"unknown severity '{severity}'",
            hint=f"Known severities: {', '.join(sorted(KNOWN_SEVERITIES))}",
        ))

    unmatchable = (
        split_selector_values(config.tags)
        & split_selector_values(config.exclude_tags)
    ) - split_selector_values(config.include_tags)
    for tag in sorted(unmatchable):
        issues.append(ConfigIssue(
            level="warn",
            path="loader.tags",
            message=f"tag '{tag}' is both requested and excluded; it can never match",
            hint="Remove it from exclude_tags or add it to include_tags",
        ))

    if config.include_templates and not config.exclude_templates:
        issues.append(ConfigIssue(
            level="warn",
            path="loader.include_templates",
            message="include_templates has no effect without exclude_templates",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
    "KNOWN_SEVERITIES",
]
