# templatestore/config/loader.py
"""
Configuration Loader

Loader configuration with code defaults, optionally read from YAML.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Configuration is immutable once built (sequences are stored as tuples)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml

from templatestore.core.catalog import TemplateCatalog
from templatestore.core.errors import LoaderConfigError
from templatestore.core.templates.parser import TemplateParser, YamlTemplateParser
from templatestore.infra.catalog import FileSystemCatalog


# Sequence fields accepted from YAML / dicts
SEQUENCE_FIELDS = (
    "templates",
    "workflows",
    "exclude_templates",
    "include_templates",
    "tags",
    "exclude_tags",
    "include_tags",
    "authors",
    "severities",
)

# Collaborators that cannot come from YAML
COLLABORATOR_FIELDS = ("catalog", "parser", "executor_options")


def _as_tuple(value: Any) -> Tuple[Any, ...]:
    """Accept a single value where a list is expected"""
    if value is None:
        return ()
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True)
class LoaderConfig:
    """
    Template loader configuration.

    templates/workflows: definitions resolved through the catalog
    exclude_templates: definitions removed from the candidate sets
    include_templates: definitions that survive exclude_templates
    tags/authors/severities: include selectors (ANDed across categories)
    exclude_tags: tags that veto a template
    include_tags: tags that are never vetoed
    templates_directory: used when neither templates nor workflows are given
    concurrency: worker threads for prefilter + compile (1 = sequential)
    """

    templates: Tuple[str, ...] = ()
    workflows: Tuple[str, ...] = ()
    exclude_templates: Tuple[str, ...] = ()
    include_templates: Tuple[str, ...] = ()

    tags: Tuple[str, ...] = ()
    exclude_tags: Tuple[str, ...] = ()
    include_tags: Tuple[str, ...] = ()
    authors: Tuple[str, ...] = ()
    severities: Tuple[str, ...] = ()

    templates_directory: str = ""
    concurrency: int = 1

    catalog: Optional[TemplateCatalog] = None
    parser: Optional[TemplateParser] = None
    executor_options: Any = None

    def __post_init__(self) -> None:
        for name in SEQUENCE_FIELDS:
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))
        if self.templates_directory is None:
            object.__setattr__(self, "templates_directory", "")
        if self.catalog is None:
            object.__setattr__(self, "catalog", FileSystemCatalog(self.templates_directory or None))
        if self.parser is None:
            object.__setattr__(self, "parser", YamlTemplateParser())

    @classmethod
    def default(cls) -> "LoaderConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], **collaborators: Any) -> "LoaderConfig":
        """
        Build configuration from a plain mapping.

        Unknown keys are ignored. Collaborators (catalog, parser,
        executor_options) are passed as keyword arguments.
        """
        data = data or {}
        if not isinstance(data, dict):
            raise LoaderConfigError(
                message=f"loader configuration must be a mapping, got {type(data).__name__}",
            )

        known = {f.name for f in fields(cls)} - set(COLLABORATOR_FIELDS)
        values = {k: v for k, v in data.items() if k in known}
        values.update({k: v for k, v in collaborators.items() if k in COLLABORATOR_FIELDS})
        return cls(**values)

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None, **collaborators: Any) -> "LoaderConfig":
        """
        Load configuration from YAML file.

        The file may hold the options at the top level or under a `loader` key.
        A missing file yields code defaults.

        Raises:
            LoaderConfigError: the file exists but is not valid YAML
        """
        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return cls.from_dict({}, **collaborators)
        if isinstance(yaml_data, dict) and isinstance(yaml_data.get("loader"), dict):
            yaml_data = yaml_data["loader"]
        return cls.from_dict(yaml_data, **collaborators)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization (collaborators excluded)"""
        result: Dict[str, Any] = {name: list(getattr(self, name)) for name in SEQUENCE_FIELDS}
        result["templates_directory"] = self.templates_directory
        result["concurrency"] = self.concurrency
        return result


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Any]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = [Path.home() / ".templatestore" / "config.yml"]

    for path in paths:
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise LoaderConfigError(
                    message=f"invalid configuration file {path}: {e}",
                    path=str(path),
                    cause=e,
                ) from e
            except OSError as e:
                raise LoaderConfigError(
                    message=f"could not read configuration file {path}: {e.strerror or e}",
                    path=str(path),
                    cause=e,
                ) from e

    return None


def load_config(config_path: Optional[Path] = None, **collaborators: Any) -> LoaderConfig:
    """
    Load loader configuration.

    Args:
        config_path: Optional path to YAML file
        **collaborators: catalog, parser, executor_options

    Returns:
        LoaderConfig (code defaults when no YAML is found)
    """
    return LoaderConfig.from_yaml(config_path, **collaborators)


__all__ = [
    "LoaderConfig",
    "load_config",
]
