"""Generic fixed-width segment rendering."""

from __future__ import annotations

from dataclasses import dataclass

from keymask.masking.types import SegmentPattern


def render_segmented(segment_pattern: SegmentPattern, value: str) -> str:
    """Punctuate ``value`` according to ``segment_pattern``.

    The value is truncated to the pattern width. Separators are only emitted in
    front of a segment that has at least one character, so partial input never
    ends with a dangling separator and the head segment never gets one.
    """

    value = value[: segment_pattern.width]
    pieces: list[str] = []
    offset = 0
    for index, segment in enumerate(segment_pattern.segments):
        chunk = value[offset : offset + segment.width]
        if not chunk:
            break
        if index:
            pieces.append(segment.separator)
        pieces.append(chunk)
        offset += segment.width

    if len(pieces) > 1 and segment_pattern.lead is not None:
        pieces[0] = segment_pattern.lead.replace("{}", pieces[0])
    return "".join(pieces)


@dataclass(frozen=True)
class Segmented:
    """Single fixed pattern covering the whole format."""

    pattern: SegmentPattern
    kind: str = "segmented"

    @property
    def width(self) -> int:
        return self.pattern.width

    def render(self, value: str) -> str:
        return render_segmented(self.pattern, value)


@dataclass(frozen=True)
class VariableGroup:
    """Length-threshold ladder of patterns.

    Each rung is ``(up_to_length, pattern)``; the first rung whose threshold
    covers the value decides the layout. Used where segment boundaries move as
    the value grows (a Brazilian mobile number gains a fifth subscriber digit).
    """

    rungs: tuple[tuple[int, SegmentPattern], ...]
    kind: str = "variable-group"

    def __post_init__(self) -> None:
        if not self.rungs:
            raise ValueError("A variable group needs at least one rung")
        previous = 0
        for threshold, rung_pattern in self.rungs:
            if threshold <= previous:
                raise ValueError("Variable group thresholds must strictly increase")
            if rung_pattern.width < threshold:
                raise ValueError(
                    f"Rung pattern width {rung_pattern.width} cannot hold {threshold} characters"
                )
            previous = threshold

    @property
    def width(self) -> int:
        return self.rungs[-1][0]

    def render(self, value: str) -> str:
        value = value[: self.width]
        for threshold, rung_pattern in self.rungs[:-1]:
            if len(value) <= threshold:
                return render_segmented(rung_pattern, value)
        return render_segmented(self.rungs[-1][1], value)


__all__ = ["Segmented", "VariableGroup", "render_segmented"]
