# tests/conftest.py
"""Shared fixtures: write YAML templates into a temporary directory"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import pytest
import yaml


def build_template(
    name: Optional[str] = "Example",
    author: Any = "alice",
    severity: Any = None,
    tags: Any = None,
    workflows: Optional[list] = None,
    template_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a template document; None leaves a field out"""
    info: Dict[str, Any] = {}
    if name is not None:
        info["name"] = name
    if author is not None:
        info["author"] = author
    if severity is not None:
        info["severity"] = severity
    if tags is not None:
        info["tags"] = tags

    document: Dict[str, Any] = {}
    if template_id is not None:
        document["id"] = template_id
    document["info"] = info
    if workflows is not None:
        document["workflows"] = workflows
    else:
        document["http"] = [{"method": "GET", "path": ["{{BaseURL}}"]}]
    return document


@pytest.fixture
def write_template(tmp_path: Path):
    """Write a template document (or raw text) and return its absolute path"""

    def _write(relative: str, document: Any = None, raw: Optional[str] = None, **fields: Any) -> str:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            if document is None:
                document = build_template(**fields)
            path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        return str(path.resolve())

    return _write
