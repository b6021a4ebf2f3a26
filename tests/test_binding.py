from __future__ import annotations

from collections import defaultdict

import pytest
from pydantic import ValidationError

from keymask.binding import (
    INPUT_EVENT,
    PASTE_EVENT,
    FieldEvent,
    MaskBinding,
    TextField,
    create_binding,
    remap_caret,
)
from keymask.masking import FormatId
from keymask.models import BindingOptions


class FakeField:
    """In-memory stand-in for a UI text field."""

    def __init__(self, value: str = "") -> None:
        self.value = value
        self.caret = len(value)
        self.listeners: dict[str, list] = defaultdict(list)

    def add_listener(self, event, handler) -> None:
        self.listeners[event].append(handler)

    def remove_listener(self, event, handler) -> None:
        self.listeners[event].remove(handler)

    def type(self, value: str, caret: int | None = None) -> None:
        self.value = value
        self.caret = len(value) if caret is None else caret
        self._fire(FieldEvent(INPUT_EVENT))

    def paste(self, text: str) -> FieldEvent:
        event = FieldEvent(PASTE_EVENT, text=text)
        self._fire(event)
        return event

    def _fire(self, event: FieldEvent) -> None:
        for handler in list(self.listeners[event.kind]):
            handler(event)


def test_fake_field_satisfies_protocol():
    assert isinstance(FakeField(), TextField)


def test_input_is_masked_in_place():
    field = FakeField()
    create_binding(BindingOptions(format_id=FormatId.CPF), field)

    field.type("12345678901")

    assert field.value == "123.456.789-01"
    assert field.caret == len("123.456.789-01")


def test_caret_stays_after_the_same_digit():
    field = FakeField()
    create_binding(BindingOptions(format_id="cpf"), field)

    field.type("1234567", caret=4)

    assert field.value == "123.456.7"
    assert field.caret == 5


def test_paste_replaces_value_with_masked_clipboard():
    field = FakeField("999")
    seen: list[str] = []
    create_binding(BindingOptions(format_id="phone-us", on_format=seen.append), field)

    event = field.paste("555 123 4567")

    assert event.default_prevented
    assert field.value == "(555) 123-4567"
    assert field.caret == len(field.value)
    assert seen == ["(555) 123-4567"]


def test_callback_runs_after_every_change():
    field = FakeField()
    seen: list[str] = []
    create_binding(BindingOptions(format_id="cep", on_format=seen.append), field)

    field.type("013")
    field.type("01310100")

    assert seen == ["013", "01310-100"]


def test_detach_removes_listeners():
    field = FakeField()
    binding = MaskBinding(BindingOptions(format_id="cep"), field)

    assert binding.attached
    binding.detach()

    assert not binding.attached
    assert binding.field is None
    assert all(not handlers for handlers in field.listeners.values())
    field.type("01310100")
    assert field.value == "01310100"


def test_detach_twice_is_harmless():
    binding = MaskBinding(BindingOptions(format_id="cep"), FakeField())

    binding.detach()
    binding.detach()

    assert not binding.attached


def test_attaching_the_same_field_twice_does_not_duplicate_listeners():
    field = FakeField()
    binding = MaskBinding(BindingOptions(format_id="cep"), field)

    binding.attach(field)

    assert len(field.listeners[INPUT_EVENT]) == 1
    assert len(field.listeners[PASTE_EVENT]) == 1


def test_attaching_a_new_field_releases_the_old_one():
    first, second = FakeField(), FakeField()
    binding = MaskBinding(BindingOptions(format_id="cep"), first)

    binding.attach(second)

    assert binding.field is second
    assert not first.listeners[INPUT_EVENT]
    second.type("01310100")
    assert second.value == "01310-100"


def test_unbound_binding_still_formats():
    binding = MaskBinding(BindingOptions(format_id=FormatId.SSN))

    assert not binding.attached
    assert binding.format_id == "ssn"
    assert binding.format("123456789") == "123-45-6789"


def test_unknown_format_is_rejected_at_construction():
    with pytest.raises(ValidationError):
        BindingOptions(format_id="phone-usa")


@pytest.mark.parametrize(
    ("raw", "caret", "masked", "expected"),
    [
        ("1234567", 4, "123.456.7", 5),
        ("1234567", 0, "123.456.7", 0),
        ("1234567", 7, "123.456.7", 9),
        ("5551", 4, "(555) 1", 7),
        ("12", 99, "12", 2),
    ],
)
def test_remap_caret(raw, caret, masked, expected):
    assert remap_caret(raw, caret, masked) == expected
