# templatestore/core/loader/filter.py
"""
Tag Filter

Evaluates a (tag, author, severity) triple against the configured selectors.

Selector sets:
- allowed_tags:  tags a template must carry (Tags)
- blocked_tags:  tags that veto a template outright (ExcludeTags)
- authors:       authors a template must have (Authors)
- severities:    severities a template must have (Severities)
- match_allows:  tags that can never be blocked (IncludeTags)

Include categories are ANDed; an empty include configuration allows everything
that is not blocked. A blocked tag takes priority over any include match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, Iterable

from ..templates.models import split_selector_values

if TYPE_CHECKING:
    from templatestore.config.loader import LoaderConfig


class FilterVerdict(str, Enum):
    """Outcome of a single selector evaluation"""
    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    EXCLUDED = "excluded"  # Hard veto for the whole template


@dataclass(frozen=True)
class TagFilter:
    """Immutable selector state, built once per store"""
    allowed_tags: FrozenSet[str] = frozenset()
    blocked_tags: FrozenSet[str] = frozenset()
    authors: FrozenSet[str] = frozenset()
    severities: FrozenSet[str] = frozenset()
    match_allows: FrozenSet[str] = frozenset()

    @classmethod
    def create(
        cls,
        tags: Iterable[str] = (),
        exclude_tags: Iterable[str] = (),
        authors: Iterable[str] = (),
        severities: Iterable[str] = (),
        include_tags: Iterable[str] = (),
    ) -> "TagFilter":
        """
        Build a filter from raw selector values.

        Tags listed in include_tags are removed from the blocked set.
        """
        match_allows = split_selector_values(include_tags)
        return cls(
            allowed_tags=split_selector_values(tags),
            blocked_tags=split_selector_values(exclude_tags) - match_allows,
            authors=split_selector_values(authors),
            severities=split_selector_values(severities),
            match_allows=match_allows,
        )

    @classmethod
    def from_config(cls, config: "LoaderConfig") -> "TagFilter":
        return cls.create(
            tags=config.tags,
            exclude_tags=config.exclude_tags,
            authors=config.authors,
            severities=config.severities,
            include_tags=config.include_tags,
        )

    @property
    def has_include_selectors(self) -> bool:
        return bool(self.allowed_tags or self.authors or self.severities)

    def match(self, tag: str, author: str, severity: str) -> FilterVerdict:
        """
        Evaluate one (tag, author, severity) triple.

        Returns:
            EXCLUDED if the tag is blocked and not always-included,
            MATCHED if every configured include category accepts the triple,
            NOT_MATCHED otherwise
        """
        if tag in self.blocked_tags and tag not in self.match_allows:
            return FilterVerdict.EXCLUDED

        if not self.has_include_selectors:
            return FilterVerdict.MATCHED

        if self.allowed_tags and tag not in self.allowed_tags:
            return FilterVerdict.NOT_MATCHED
        if self.authors and author not in self.authors:
            return FilterVerdict.NOT_MATCHED
        if self.severities and severity not in self.severities:
            return FilterVerdict.NOT_MATCHED

        return FilterVerdict.MATCHED


__all__ = [
    "FilterVerdict",
    "TagFilter",
]
