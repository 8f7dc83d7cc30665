# templatestore/__init__.py
"""
templatestore - Template discovery and filtering for rule-based scanners

Given a pool of YAML templates (and workflows chaining them), decides which
files are compiled for a run, based on path-level include/exclude lists and
tag/author/severity selectors read from each template's metadata.

Basic usage:
    >>> from templatestore import LoaderConfig, Store
    >>> store = Store(LoaderConfig(
    ...     templates_directory="~/templates",
    ...     tags=("cve",),
    ...     exclude_tags=("dos",),
    ... ))
    >>> store.load()
    >>> len(store.templates), len(store.workflows)

Configuration from YAML:
    >>> from templatestore import Store, load_config
    >>> store = Store(load_config("loader.yml"))
"""

__version__ = "0.1.0"

from .config import LoaderConfig, load_config, validate_config, ConfigIssue

from .core.catalog import TemplateCatalog
from .core.errors import (
    TemplateStoreError,
    LoaderConfigError,
    TemplateLoadError,
    TemplateReadError,
    TemplateDecodeError,
    TemplateValidationError,
    TemplateCompileError,
)
from .core.loader import (
    FilterVerdict,
    TagFilter,
    PrefilterOutcome,
    load_template_metadata,
    Store,
)
from .core.templates import (
    Template,
    TemplateInfo,
    TemplateParser,
    YamlTemplateParser,
)
from .infra.catalog import FileSystemCatalog, MemoryCatalog

__all__ = [
    "__version__",

    # Configuration
    "LoaderConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",

    # Pipeline
    "Store",
    "TagFilter",
    "FilterVerdict",
    "PrefilterOutcome",
    "load_template_metadata",

    # Templates
    "Template",
    "TemplateInfo",
    "TemplateParser",
    "YamlTemplateParser",

    # Catalogs
    "TemplateCatalog",
    "FileSystemCatalog",
    "MemoryCatalog",

    # Errors
    "TemplateStoreError",
    "LoaderConfigError",
    "TemplateLoadError",
    "TemplateReadError",
    "TemplateDecodeError",
    "TemplateValidationError",
    "TemplateCompileError",
]
