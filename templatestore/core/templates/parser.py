# templatestore/core/templates/parser.py
"""
Template Parser

Turns a template file into a compiled Template.

Implementations:
- YamlTemplateParser: reads YAML templates from disk
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional
import yaml

from ..errors import TemplateCompileError, TemplateLoadError
from .models import PROTOCOL_KEYS, Template, TemplateInfo


class TemplateParser(ABC):
    """Abstract interface for compiling a template file"""

    @abstractmethod
    def parse(self, path: str, options: Any = None) -> Optional[Template]:
        """
        Compile the template at path.

        Args:
            path: Absolute template path
            options: Opaque executor options, passed through untouched

        Returns:
            Template, or None when the file yields nothing to execute

        Raises:
            TemplateCompileError: the template could not be compiled
        """
        pass


class YamlTemplateParser(TemplateParser):
    """
    Parse YAML templates

    File format:
        id: example
        info:
          name: Example check
          author: alice,bob
          severity: high
          tags: cve,rce
        http:
          - method: GET
            path: ["{{BaseURL}}"]

    Workflow templates carry a top-level `workflows` list instead of
    protocol sections. Workflow entries are kept as-is; they are not
    resolved against other templates here.
    """

    def parse(self, path: str, options: Any = None) -> Optional[Template]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except OSError as e:
            raise TemplateCompileError(
                message=f"could not read file: {e.strerror or e}",
                path=path,
                cause=e,
            ) from e
        except yaml.YAMLError as e:
            raise TemplateCompileError(
                message=f"could not decode template: {e}",
                path=path,
                cause=e,
            ) from e

        try:
            info = TemplateInfo.from_document(document, path=path)
        except TemplateLoadError as e:
            raise TemplateCompileError(message=e.message, path=path, cause=e) from e

        requests = {key: document[key] for key in PROTOCOL_KEYS if document.get(key)}

        template_id = document.get("id")
        if template_id is None or str(template_id).strip() == "":
            template_id = Path(path).stem

        return Template(
            id=str(template_id),
            path=path,
            info=info,
            requests=requests,
            workflows=list(info.workflows),
            raw=dict(document),
        )


__all__ = [
    "TemplateParser",
    "YamlTemplateParser",
]
