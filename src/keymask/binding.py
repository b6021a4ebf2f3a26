"""Attach the masking engine to an editable text field.

The engine is a pure function; this module owns the stateful part: which
field is being watched, which listeners were installed on it, and writing
the masked value (and a sensible caret position) back after each change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable

from keymask.masking import format_value
from keymask.models.binding import BindingOptions

logger = logging.getLogger(__name__)

INPUT_EVENT = "input"
PASTE_EVENT = "paste"

Handler = Callable[["FieldEvent"], None]


@runtime_checkable
class TextField(Protocol):
    """Minimal surface a UI toolkit field must expose to be bound."""

    value: str

    def add_listener(self, event: str, handler: Handler) -> None:
        ...

    def remove_listener(self, event: str, handler: Handler) -> None:
        ...


@dataclass
class FieldEvent:
    """Change notification delivered by the field.

    ``text`` carries the clipboard contents for paste events and is ignored
    for input events, where the field's current value is authoritative.
    """

    kind: str
    text: str = ""
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


def remap_caret(raw: str, caret: int, masked: str) -> int:
    """Place the caret after the same number of significant characters.

    Separators inserted by the mask are skipped, so a caret that sat after
    the fifth digit of the raw text sits after the fifth digit of the mask.
    """

    caret = max(0, min(caret, len(raw)))
    wanted = sum(1 for char in raw[:caret] if char.isalnum())
    if wanted == 0:
        return 0
    seen = 0
    for position, char in enumerate(masked):
        if char.isalnum():
            seen += 1
            if seen == wanted:
                return position + 1
    return len(masked)


class MaskBinding:
    """Keep a text field masked as the user types or pastes."""

    def __init__(self, options: BindingOptions, field: Optional[TextField] = None) -> None:
        self._options = options
        self._field: Optional[TextField] = None
        # Bound once so detach removes exactly what attach installed.
        self._handlers: dict[str, Handler] = {
            INPUT_EVENT: self.handle_input,
            PASTE_EVENT: self.handle_paste,
        }
        if field is not None:
            self.attach(field)

    @property
    def format_id(self) -> str:
        return self._options.format_id.value

    @property
    def attached(self) -> bool:
        return self._field is not None

    @property
    def field(self) -> Optional[TextField]:
        return self._field

    def attach(self, field: TextField) -> None:
        if self._field is field:
            return
        if self._field is not None:
            self.detach()
        for event, handler in self._handlers.items():
            field.add_listener(event, handler)
        self._field = field
        logger.debug("Attached %s mask to %s", self.format_id, type(field).__name__)

    def detach(self) -> None:
        if self._field is None:
            return
        field, self._field = self._field, None
        for event, handler in self._handlers.items():
            field.remove_listener(event, handler)
        logger.debug("Detached %s mask from %s", self.format_id, type(field).__name__)

    def format(self, value: str) -> str:
        return format_value(self._options.format_id, value)

    def handle_input(self, event: FieldEvent) -> None:
        field = self._field
        if field is None:
            return
        raw = field.value
        masked = self.format(raw)
        caret = getattr(field, "caret", None)
        field.value = masked
        if caret is not None:
            field.caret = remap_caret(raw, caret, masked)
        self._notify(masked)

    def handle_paste(self, event: FieldEvent) -> None:
        event.prevent_default()
        field = self._field
        if field is None:
            return
        masked = self.format(event.text)
        field.value = masked
        if getattr(field, "caret", None) is not None:
            field.caret = len(masked)
        self._notify(masked)

    def _notify(self, masked: str) -> None:
        if self._options.on_format is not None:
            self._options.on_format(masked)


def create_binding(options: BindingOptions, field: Optional[TextField] = None) -> MaskBinding:
    """Build a binding, attaching it right away when ``field`` is given."""

    return MaskBinding(options, field)


__all__ = [
    "INPUT_EVENT",
    "PASTE_EVENT",
    "FieldEvent",
    "MaskBinding",
    "TextField",
    "create_binding",
    "remap_caret",
]
