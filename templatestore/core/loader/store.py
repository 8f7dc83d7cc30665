# templatestore/core/loader/store.py
"""
Template Store

Resolves template definitions, applies path-level include/exclude rules,
prefilters every candidate on its metadata and compiles the survivors.

Nothing in load() is fatal: per-template failures are logged as warnings
and the template is skipped.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional
import logging

from templatestore.config.loader import LoaderConfig
from templatestore.config.validator import validate_config
from ..errors import LoaderConfigError, TemplateLoadError
from ..templates.models import Template
from .filter import TagFilter
from .metadata import load_template_metadata


logger = logging.getLogger(__name__)


def filter_candidates(
    included: Iterable[str],
    excluded: Iterable[str],
    always_included: Iterable[str],
) -> List[str]:
    """
    Compute the effective candidate list.

    Duplicates collapse (first occurrence wins the position). Excluded paths
    are removed unless they are also always-included.
    """
    candidates = dict.fromkeys(included)
    always = set(always_included)
    for path in excluded:
        if path in always:
            continue
        candidates.pop(path, None)
    return list(candidates)


class Store:
    """
    Storage for loaded templates and workflows

    Usage:
        store = Store(LoaderConfig(templates=("cves/",), tags=("rce",)))
        store.load()
        for template in store.templates:
            ...
    """

    def __init__(self, config: LoaderConfig):
        """
        Create a store from configuration

        Raises:
            LoaderConfigError: configuration has error-level issues
        """
        issues = validate_config(config)
        errors = [issue for issue in issues if issue.level == "error"]
        for issue in issues:
            if issue.level == "warn":
                logger.warning("Loader configuration: %s", issue)
        if errors:
            raise LoaderConfigError(
                message="invalid loader configuration: " + "; ".join(str(issue) for issue in errors),
                details={"issues": [str(issue) for issue in errors]},
            )

        self.config = config
        self.tag_filter = TagFilter.from_config(config)

        final_templates = list(config.templates)
        if not config.templates and not config.workflows and config.templates_directory:
            final_templates.append(config.templates_directory)
        self.final_templates = tuple(final_templates)

        self._templates: List[Template] = []
        self._workflows: List[Template] = []

    @property
    def templates(self) -> List[Template]:
        """Compiled templates from the last load()"""
        return self._templates

    @property
    def workflows(self) -> List[Template]:
        """Compiled workflows from the last load()"""
        return self._workflows

    def load(self) -> None:
        """
        Load, filter and compile all templates and workflows.

        Results of a previous load() are discarded.
        """
        catalog = self.config.catalog

        included_templates = catalog.get_templates_path(self.final_templates)
        included_workflows = catalog.get_templates_path(self.config.workflows)
        excluded_templates = catalog.get_templates_path(self.config.exclude_templates)
        always_included = catalog.get_templates_path(self.config.include_templates)

        template_paths = filter_candidates(included_templates, excluded_templates, always_included)
        workflow_paths = filter_candidates(included_workflows, excluded_templates, always_included)

        self._templates = self._load_all(template_paths, workflow=False)
        self._workflows = self._load_all(workflow_paths, workflow=True)

        logger.debug(
            "Loaded %d templates and %d workflows from %d/%d candidates",
            len(self._templates),
            len(self._workflows),
            len(template_paths),
            len(workflow_paths),
        )

    def _load_all(self, paths: List[str], workflow: bool) -> List[Template]:
        if self.config.concurrency > 1 and len(paths) > 1:
            workers = min(self.config.concurrency, len(paths))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(pool.map(lambda path: self._load_one(path, workflow), paths))
        else:
            results = [self._load_one(path, workflow) for path in paths]
        return [template for template in results if template is not None]

    def _load_one(self, path: str, workflow: bool) -> Optional[Template]:
        """Prefilter and compile a single candidate; never raises for per-file failures"""
        kind = "workflow" if workflow else "template"

        try:
            outcome = load_template_metadata(path, self.tag_filter, workflow=workflow)
        except TemplateLoadError as e:
            logger.warning("Could not load %s %s: %s", kind, path, e)
            return None

        if not outcome.qualifies:
            logger.debug("Skipping %s %s: %s", kind, path, outcome.value)
            return None

        try:
            parsed = self.config.parser.parse(path, self.config.executor_options)
        except Exception as e:
            # Parser is a pluggable collaborator; any failure only skips this file
            logger.warning("Could not parse %s %s: %s", kind, path, e)
            return None

        return parsed


__all__ = [
    "Store",
    "filter_candidates",
]
