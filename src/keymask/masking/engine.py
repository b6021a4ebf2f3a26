"""Dispatch from a format id to its cleaning and rendering steps."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from rapidfuzz import fuzz, process

from keymask.masking.cleaning import clean_value
from keymask.masking.table import FORMAT_RULES, FormatId
from keymask.masking.types import FormatDomain, FormatRule

logger = logging.getLogger(__name__)

RuleRef = Union[FormatRule, FormatId, str]

DEFAULT_SUGGESTION_LIMIT = 3
DEFAULT_SUGGESTION_CUTOFF = 60.0


class UnknownFormatError(KeyError):
    """Raised when a format id is not present in the rule table."""

    def __init__(self, format_id: str, suggestions: Optional[Sequence[str]] = None) -> None:
        super().__init__(format_id)
        self.format_id = format_id
        self._suggestions = None if suggestions is None else tuple(suggestions)

    @property
    def suggestions(self) -> tuple[str, ...]:
        """Closest known ids, computed on first access with the default limit and cutoff."""

        if self._suggestions is None:
            self._suggestions = tuple(suggest_formats(self.format_id))
        return self._suggestions

    def suggest(self, *, limit: int, cutoff: float) -> tuple[str, ...]:
        """Recompute ``suggestions`` with an explicit limit and cutoff."""

        self._suggestions = tuple(suggest_formats(self.format_id, limit=limit, cutoff=cutoff))
        return self._suggestions

    def __str__(self) -> str:
        message = f"Unknown format: {self.format_id!r}"
        if self.suggestions:
            message += f" (did you mean {', '.join(self.suggestions)}?)"
        return message


def suggest_formats(
    query: str,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
    cutoff: float = DEFAULT_SUGGESTION_CUTOFF,
) -> list[str]:
    """Return the format ids closest to ``query``, best match first."""

    if not query or limit <= 0:
        return []
    choices = [format_id.value for format_id in FORMAT_RULES]
    matches = process.extract(
        query.lower(),
        choices,
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=cutoff,
    )
    return [choice for choice, _score, _index in matches]


def get_rule(format_id: Union[FormatId, str]) -> FormatRule:
    try:
        key = FormatId(format_id)
    except ValueError:
        raise UnknownFormatError(str(format_id)) from None
    return FORMAT_RULES[key]


def _resolve(rule: RuleRef) -> FormatRule:
    if isinstance(rule, FormatRule):
        return rule
    return get_rule(rule)


def list_rules(domain: Optional[FormatDomain] = None) -> list[FormatRule]:
    """Return rules in catalogue order, optionally restricted to one domain."""

    return [
        entry
        for entry in FORMAT_RULES.values()
        if domain is None or entry.domain is domain
    ]


def clean(rule: RuleRef, raw: str) -> str:
    resolved = _resolve(rule)
    return clean_value(resolved.character_class, raw)


def render(rule: RuleRef, cleaned: str) -> str:
    resolved = _resolve(rule)
    if resolved.max_length is not None:
        cleaned = cleaned[: resolved.max_length]
    return resolved.renderer.render(cleaned)


def format_value(format_id: Union[FormatId, str], raw: str, *, strict: bool = False) -> str:
    """Mask ``raw`` for ``format_id``.

    Any input produces a best-effort mask. An unknown id is returned unchanged
    (and logged) unless ``strict`` is set, in which case ``UnknownFormatError``
    propagates.
    """

    try:
        rule = get_rule(format_id)
    except UnknownFormatError as exc:
        if strict:
            raise
        logger.warning("%s; passing value through unchanged", exc)
        return raw
    return render(rule, clean(rule, raw))


__all__ = [
    "UnknownFormatError",
    "clean",
    "format_value",
    "get_rule",
    "list_rules",
    "render",
    "suggest_formats",
]
