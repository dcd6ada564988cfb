from __future__ import annotations

import re
from typing import List

from .types import FragmentType

# "fragment Name on Type" header of a named, schema-typed fragment.
FRAGMENT_PATTERN = re.compile(r"\w*fragment[\w\s]+on")
# "query Name {" header of an executable operation.
QUERY_PATTERN = re.compile(r"\w*query[\w\s]+\{")
# Spread reference "...Name"; group 1 is the referenced name.
REFERENCE_PATTERN = re.compile(r"\.\.\.(\w+)")


def classify(content: str) -> FragmentType:
    """Return the fragment type of ``content``; the first matching header wins."""

    if FRAGMENT_PATTERN.search(content) is not None:
        return FragmentType.FRAGMENT
    if QUERY_PATTERN.search(content) is not None:
        return FragmentType.QUERY
    return FragmentType.INLINE


def is_inline_content(content: str) -> bool:
    return FRAGMENT_PATTERN.search(content) is None


def extract_references(content: str) -> List[str]:
    """Collect referenced names in order of first occurrence, without duplicates."""

    return list(dict.fromkeys(REFERENCE_PATTERN.findall(content)))


def reference_pattern_for(name: str) -> re.Pattern[str]:
    """Pattern for ``...name`` delimited on both sides by a non-word character.

    Groups 1 and 3 capture the delimiters so a substitution can keep them.
    """

    return re.compile(r"([\s\W])(\.\.\.%s)([\s\W])" % re.escape(name))


__all__ = [
    "FRAGMENT_PATTERN",
    "QUERY_PATTERN",
    "REFERENCE_PATTERN",
    "classify",
    "is_inline_content",
    "extract_references",
    "reference_pattern_for",
]
