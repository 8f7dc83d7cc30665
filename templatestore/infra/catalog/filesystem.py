# templatestore/infra/catalog/filesystem.py
"""
FileSystem Template Catalog

Resolves template definitions against the local filesystem
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence
from pathlib import Path
import glob
import logging
import os

from templatestore.core.catalog import TemplateCatalog


logger = logging.getLogger(__name__)

TEMPLATE_EXTENSIONS = (".yaml", ".yml")

_GLOB_CHARS = ("*", "?", "[")


class FileSystemCatalog(TemplateCatalog):
    """
    Resolve template definitions on disk

    A definition is resolved, in order, as:
        1. a glob pattern (relative patterns are anchored at templates_directory)
        2. an absolute path
        3. a path relative to the current working directory
        4. a path relative to templates_directory

    Directories are walked recursively for .yaml/.yml files.
    """

    def __init__(
        self,
        templates_directory: Optional[str | Path] = None,
        ignore_files: Sequence[str] = (),
    ):
        """
        Initialize filesystem catalog

        Args:
            templates_directory: Base directory for relative definitions
            ignore_files: Resolved paths containing any of these entries are dropped
        """
        self.templates_directory = (
            Path(templates_directory).expanduser().resolve() if templates_directory else None
        )
        self.ignore_files = tuple(ignore_files)

    def get_templates_path(self, definitions: Iterable[str]) -> List[str]:
        processed: Dict[str, None] = {}
        for definition in definitions:
            try:
                paths = self.get_template_path(definition)
            except FileNotFoundError as e:
                logger.warning("Could not find template '%s': %s", definition, e)
                continue

            for path in paths:
                if self._is_ignored(path):
                    logger.debug("Ignoring template %s", path)
                    continue
                processed.setdefault(path, None)
        return list(processed)

    def get_template_path(self, definition: str) -> List[str]:
        """
        Resolve a single definition.

        Raises:
            FileNotFoundError: nothing matched the definition
        """
        definition = os.path.expanduser(definition)

        if any(ch in definition for ch in _GLOB_CHARS):
            return self._find_glob_path_matches(definition)

        absolute = self.resolve_path(definition)
        if absolute.is_dir():
            return self._find_directory_matches(absolute)
        return [str(absolute)]

    def resolve_path(self, definition: str) -> Path:
        """
        Resolve a non-glob definition to an existing absolute path.

        Raises:
            FileNotFoundError: the path does not exist in any location
        """
        candidate = Path(definition)
        if candidate.is_absolute():
            if candidate.exists():
                return candidate.resolve()
            raise FileNotFoundError(f"no such file or directory: {definition}")

        cwd_candidate = Path.cwd() / candidate
        if cwd_candidate.exists():
            return cwd_candidate.resolve()

        if self.templates_directory is not None:
            templates_candidate = self.templates_directory / candidate
            if templates_candidate.exists():
                return templates_candidate.resolve()

        raise FileNotFoundError(f"no such path in working or templates directory: {definition}")

    def _find_glob_path_matches(self, pattern: str) -> List[str]:
        if not os.path.isabs(pattern) and self.templates_directory is not None:
            pattern = str(self.templates_directory / pattern)

        matches: List[str] = []
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match).resolve()
            if path.is_dir():
                matches.extend(self._find_directory_matches(path))
            elif path.is_file():
                matches.append(str(path))

        if not matches:
            raise FileNotFoundError(f"no files matched pattern: {pattern}")
        return matches

    def _find_directory_matches(self, directory: Path) -> List[str]:
        return [
            str(path.resolve())
            for path in sorted(directory.rglob("*"))
            if path.is_file() and path.suffix in TEMPLATE_EXTENSIONS
        ]

    def _is_ignored(self, path: str) -> bool:
        return any(entry and entry in path for entry in self.ignore_files)


__all__ = ["FileSystemCatalog", "TEMPLATE_EXTENSIONS"]
