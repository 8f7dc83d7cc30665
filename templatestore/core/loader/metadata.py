# templatestore/core/loader/metadata.py
"""
Metadata Prefilter

Decides whether a template is worth compiling by decoding only its metadata
and running the tag filter over it.
"""

from __future__ import annotations

from enum import Enum
import yaml

from ..errors import TemplateDecodeError, TemplateReadError
from ..templates.models import TemplateInfo
from .filter import FilterVerdict, TagFilter


class PrefilterOutcome(str, Enum):
    """Result of prefiltering one template"""
    QUALIFIED = "qualified"
    NOT_MATCHED = "not_matched"
    EXCLUDED = "excluded"            # Vetoed by an exclude selector
    KIND_MISMATCH = "kind_mismatch"  # Workflow seen in template pass, or vice versa

    @property
    def qualifies(self) -> bool:
        return self is PrefilterOutcome.QUALIFIED


def read_template_info(path: str) -> TemplateInfo:
    """
    Read and decode template metadata.

    Raises:
        TemplateReadError: file could not be opened or read
        TemplateDecodeError: malformed YAML or wrong document shape
        TemplateValidationError: name or author missing
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise TemplateReadError.from_os_error(path, e) from e

    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise TemplateDecodeError(
            message=f"could not decode template: {e}",
            path=path,
            cause=e,
        ) from e

    return TemplateInfo.from_document(document, path=path)


def evaluate_template_info(info: TemplateInfo, tag_filter: TagFilter, workflow: bool = False) -> PrefilterOutcome:
    """
    Run the tag filter over every (tag, author) pair of a template.

    An EXCLUDED verdict for any pair vetoes the template immediately, even if
    an earlier pair matched.
    """
    matched = False
    for tag in info.tags:
        for author in info.authors:
            verdict = tag_filter.match(tag, author, info.severity)
            if verdict is FilterVerdict.EXCLUDED:
                return PrefilterOutcome.EXCLUDED
            if verdict is FilterVerdict.MATCHED:
                matched = True

    if not matched:
        return PrefilterOutcome.NOT_MATCHED
    if info.is_workflow != workflow:
        return PrefilterOutcome.KIND_MISMATCH
    return PrefilterOutcome.QUALIFIED


def load_template_metadata(path: str, tag_filter: TagFilter, workflow: bool = False) -> PrefilterOutcome:
    """
    Prefilter the template at path.

    Args:
        path: Absolute template path
        tag_filter: Selector state of the calling store
        workflow: True when running the workflow pass

    Returns:
        PrefilterOutcome (only QUALIFIED templates should be compiled)

    Raises:
        TemplateLoadError: the file could not be read, decoded or validated
    """
    info = read_template_info(path)
    return evaluate_template_info(info, tag_filter, workflow=workflow)


__all__ = [
    "PrefilterOutcome",
    "read_template_info",
    "evaluate_template_info",
    "load_template_metadata",
]
