"""Renderers whose layout depends on content rather than a fixed pattern."""

from __future__ import annotations

import re
from dataclasses import dataclass

from keymask.masking.segments import render_segmented
from keymask.masking.types import DateOrder, pattern

_NON_DIGITS = re.compile(r"[^0-9]")
_NON_HEX_OR_COLON = re.compile(r"[^0-9A-Fa-f:]")
_MERIDIEM = re.compile(r"[APMapm]{1,2}")

DATE_SHORT = pattern(2, ("/", 2), ("/", 4))
TIME_SHORT = pattern(2, (":", 2))

ENGLISH_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
PORTUGUESE_MONTHS = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)


def render_date_full(
    value: str,
    month_names: tuple[str, ...],
    order: DateOrder,
    template: str,
) -> str:
    """Spell the month out once all eight digits are present.

    Partial dates, and complete ones whose month is not 01-12, keep the
    slash-separated short layout.
    """

    digits = value[: DATE_SHORT.width]
    short = render_segmented(DATE_SHORT, digits)
    if len(digits) < DATE_SHORT.width:
        return short

    first, second, year = digits[:2], digits[2:4], digits[4:]
    if order is DateOrder.MONTH_DAY_YEAR:
        month, day = first, second
    else:
        day, month = first, second

    if not month.isdecimal():
        return short
    month_index = int(month) - 1
    if not 0 <= month_index < len(month_names):
        return short
    return template.format(day=day, month=month_names[month_index], year=year)


def group_thousands(integer: str, separator: str) -> str:
    """Insert ``separator`` every three digits counting from the right."""

    chunks = [integer[max(end - 3, 0) : end] for end in range(len(integer), 0, -3)]
    return separator.join(reversed(chunks))


def render_currency(value: str, symbol: str, thousands_separator: str, decimal_separator: str) -> str:
    """Treat the digits typed so far as an amount in cents."""

    digits = _NON_DIGITS.sub("", value)
    if not digits:
        return ""
    integer = digits[:-2] or "0"
    cents = digits[-2:].rjust(2, "0")
    return f"{symbol}{group_thousands(integer, thousands_separator)}{decimal_separator}{cents}"


def render_ipv4(value: str) -> str:
    """Render up to four dotted groups of at most three digits.

    Groups only come from dots the user typed. An empty group is kept when a
    later dot follows it, so ``"1..2"`` stays editable.
    """

    parts = value.split(".")
    groups: list[str] = []
    for index in range(4):
        part = parts[index] if index < len(parts) else ""
        if part:
            groups.append(_NON_DIGITS.sub("", part)[:3])
        elif index < len(parts) - 1:
            groups.append("")
    return ".".join(groups)


def render_ipv6(value: str) -> str:
    """Render eight colon-separated groups, zero-padding the ones present."""

    parts = _NON_HEX_OR_COLON.sub("", value).upper().split(":")
    groups: list[str] = []
    for index in range(8):
        part = parts[index] if index < len(parts) else ""
        groups.append(part[:4].rjust(4, "0") if part else "")
    return ":".join(groups)


def render_time_12h(value: str) -> str:
    match = _MERIDIEM.search(value)
    meridiem = match.group(0).upper() if match else ""
    digits = _NON_DIGITS.sub("", value)[: TIME_SHORT.width]
    masked = render_segmented(TIME_SHORT, digits)
    if meridiem:
        return f"{masked} {meridiem}"
    return masked


def render_iban(value: str, group_width: int = 4, max_length: int = 34) -> str:
    cleaned = value[:max_length].upper()
    groups = [cleaned[start : start + group_width] for start in range(0, len(cleaned), group_width)]
    return " ".join(groups).strip()


@dataclass(frozen=True)
class DateFull:
    month_names: tuple[str, ...]
    order: DateOrder
    template: str
    kind: str = "date-full"

    def __post_init__(self) -> None:
        if len(self.month_names) != 12:
            raise ValueError("A month-name table needs exactly 12 entries")

    @property
    def width(self) -> int:
        return DATE_SHORT.width

    def render(self, value: str) -> str:
        return render_date_full(value, self.month_names, self.order, self.template)


@dataclass(frozen=True)
class Currency:
    symbol: str
    thousands_separator: str
    decimal_separator: str
    kind: str = "currency"

    def render(self, value: str) -> str:
        return render_currency(
            value, self.symbol, self.thousands_separator, self.decimal_separator
        )


@dataclass(frozen=True)
class IPv4:
    kind: str = "ipv4"

    def render(self, value: str) -> str:
        return render_ipv4(value)


@dataclass(frozen=True)
class IPv6:
    kind: str = "ipv6"

    def render(self, value: str) -> str:
        return render_ipv6(value)


@dataclass(frozen=True)
class Time12H:
    kind: str = "time-12h"

    def render(self, value: str) -> str:
        return render_time_12h(value)


@dataclass(frozen=True)
class IbanGroups:
    group_width: int = 4
    max_length: int = 34
    kind: str = "iban-groups"

    @property
    def width(self) -> int:
        return self.max_length

    def render(self, value: str) -> str:
        return render_iban(value, self.group_width, self.max_length)


__all__ = [
    "DATE_SHORT",
    "ENGLISH_MONTHS",
    "PORTUGUESE_MONTHS",
    "TIME_SHORT",
    "Currency",
    "DateFull",
    "IPv4",
    "IPv6",
    "IbanGroups",
    "Time12H",
    "group_thousands",
    "render_currency",
    "render_date_full",
    "render_iban",
    "render_ipv4",
    "render_ipv6",
    "render_time_12h",
]
