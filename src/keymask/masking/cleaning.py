"""Character-class filtering applied before rendering."""

from __future__ import annotations

import re
from typing import Callable

from keymask.masking.types import CharacterClass

_NON_DIGITS = re.compile(r"[^0-9]")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_NON_HEX = re.compile(r"[^0-9A-Fa-f]")

_CLEANERS: dict[CharacterClass, Callable[[str], str]] = {
    CharacterClass.DIGITS: lambda raw: _NON_DIGITS.sub("", raw),
    CharacterClass.ALPHANUMERIC_UPPER: lambda raw: _NON_ALPHANUMERIC.sub("", raw).upper(),
    CharacterClass.HEX_UPPER: lambda raw: _NON_HEX.sub("", raw).upper(),
    CharacterClass.VERBATIM: lambda raw: raw,
}


def clean_value(character_class: CharacterClass, raw: str) -> str:
    """Drop characters outside ``character_class``; never truncates."""

    return _CLEANERS[character_class](raw or "")


__all__ = ["clean_value"]
