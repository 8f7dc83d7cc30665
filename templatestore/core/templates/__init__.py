# templatestore/core/templates/__init__.py
"""
Template models and parsers
"""

from .models import (
    PROTOCOL_KEYS,
    to_string,
    split_comma_trim,
    split_selector_values,
    TemplateInfo,
    Template,
)

from .parser import (
    TemplateParser,
    YamlTemplateParser,
)

__all__ = [
    "PROTOCOL_KEYS",
    "to_string",
    "split_comma_trim",
    "split_selector_values",
    "TemplateInfo",
    "Template",
    "TemplateParser",
    "YamlTemplateParser",
]
