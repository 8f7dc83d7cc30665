# templatestore/core/loader/__init__.py
"""
Template loading pipeline

filter -> metadata prefilter -> store
"""

from .filter import (
    FilterVerdict,
    TagFilter,
)

from .metadata import (
    PrefilterOutcome,
    read_template_info,
    evaluate_template_info,
    load_template_metadata,
)

from .store import (
    Store,
    filter_candidates,
)

__all__ = [
    "FilterVerdict",
    "TagFilter",
    "PrefilterOutcome",
    "read_template_info",
    "evaluate_template_info",
    "load_template_metadata",
    "Store",
    "filter_candidates",
]
