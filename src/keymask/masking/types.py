"""Rule descriptors for the masking engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class CharacterClass(str, Enum):
    """How raw input is filtered before a renderer sees it."""

    DIGITS = "digits"
    ALPHANUMERIC_UPPER = "alphanumeric-upper"
    HEX_UPPER = "hex-upper"
    VERBATIM = "verbatim"


class FormatDomain(str, Enum):
    NATIONAL_ID = "national-id"
    PHONE = "phone"
    DATE = "date"
    CURRENCY = "currency"
    TIME = "time"
    TECHNICAL = "technical"


class DateOrder(str, Enum):
    DAY_MONTH_YEAR = "day-month-year"
    MONTH_DAY_YEAR = "month-day-year"


@dataclass(frozen=True)
class Segment:
    """One fixed-width slice of the cleaned value."""

    width: int
    separator: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Segment width must be positive, got {self.width}")


@dataclass(frozen=True)
class SegmentPattern:
    """Ordered segments plus an optional lead template for the head segment.

    The head segment is rendered bare while it is the only one with content.
    Once a later segment starts, the head is passed through ``lead``: a
    template containing ``{}`` wraps the head characters, a template without
    it replaces them with a constant (``"+52"``, ``"V"``).
    """

    segments: tuple[Segment, ...]
    lead: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("A segment pattern needs at least one segment")

    @property
    def width(self) -> int:
        return sum(segment.width for segment in self.segments)


def pattern(head: int, *rest: tuple[str, int], lead: Optional[str] = None) -> SegmentPattern:
    """Build a pattern from a head width followed by ``(separator, width)`` pairs."""

    segments = [Segment(head)]
    segments.extend(Segment(width, separator) for separator, width in rest)
    return SegmentPattern(tuple(segments), lead=lead)


class Renderer(Protocol):
    """Turns a cleaned value into its masked form."""

    kind: str

    def render(self, value: str) -> str:
        ...


@dataclass(frozen=True)
class FormatRule:
    """Static description of one supported format."""

    format_id: str
    label: str
    domain: FormatDomain
    character_class: CharacterClass
    renderer: Renderer
    max_length: Optional[int] = None
    region: Optional[str] = None

    def __post_init__(self) -> None:
        declared = getattr(self.renderer, "width", None)
        if declared is not None and declared != self.max_length:
            raise ValueError(
                f"Rule {self.format_id!r} declares max_length={self.max_length} "
                f"but its renderer covers {declared} characters"
            )
        if self.character_class is CharacterClass.VERBATIM and self.max_length is not None:
            raise ValueError(f"Verbatim rule {self.format_id!r} cannot declare a max_length")


__all__ = [
    "CharacterClass",
    "DateOrder",
    "FormatDomain",
    "FormatRule",
    "Renderer",
    "Segment",
    "SegmentPattern",
    "pattern",
]
