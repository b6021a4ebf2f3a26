"""Masking engine: rule table, cleaning and rendering."""

from .engine import (
    UnknownFormatError,
    clean,
    format_value,
    get_rule,
    list_rules,
    render,
    suggest_formats,
)
from .table import FORMAT_RULES, FormatId
from .types import CharacterClass, DateOrder, FormatDomain, FormatRule, Segment, SegmentPattern

__all__ = [
    "FORMAT_RULES",
    "CharacterClass",
    "DateOrder",
    "FormatDomain",
    "FormatId",
    "FormatRule",
    "Segment",
    "SegmentPattern",
    "UnknownFormatError",
    "clean",
    "format_value",
    "get_rule",
    "list_rules",
    "render",
    "suggest_formats",
]
