"""Classification and reference extraction for query template text."""

from .types import ROOT_QUERY_NAME, FragmentType, TemplateEntity, TypeFilter, TypeTag
from .patterns import (
    FRAGMENT_PATTERN,
    QUERY_PATTERN,
    REFERENCE_PATTERN,
    classify,
    extract_references,
    is_inline_content,
    reference_pattern_for,
)

__all__ = [
    "ROOT_QUERY_NAME",
    "FragmentType",
    "TemplateEntity",
    "TypeFilter",
    "TypeTag",
    "FRAGMENT_PATTERN",
    "QUERY_PATTERN",
    "REFERENCE_PATTERN",
    "classify",
    "extract_references",
    "is_inline_content",
    "reference_pattern_for",
]
