# templatestore/config/__init__.py
"""
Template Store Configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import LoaderConfig, load_config
from .validator import validate_config, ConfigIssue, KNOWN_SEVERITIES

__all__ = [
    "LoaderConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
    "KNOWN_SEVERITIES",
]
