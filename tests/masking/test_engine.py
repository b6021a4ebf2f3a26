from __future__ import annotations

import logging

import pytest

from keymask.masking import (
    FORMAT_RULES,
    FormatId,
    UnknownFormatError,
    clean,
    engine,
    format_value,
    get_rule,
    render,
    suggest_formats,
)


def test_unknown_format_passes_value_through(caplog):
    with caplog.at_level(logging.WARNING, logger="keymask.masking.engine"):
        assert format_value("nope", "12345") == "12345"

    assert "Unknown format: 'nope'" in caplog.text


def test_unknown_format_raises_when_strict():
    with pytest.raises(UnknownFormatError) as excinfo:
        format_value("phone-usa", "5551234567", strict=True)

    error = excinfo.value
    assert isinstance(error, KeyError)
    assert error.format_id == "phone-usa"
    assert error.suggestions[0] == "phone-us"
    assert "did you mean phone-us" in str(error)


def test_known_format_ignores_strict_flag():
    assert format_value("cep", "01310100", strict=True) == "01310-100"


def test_get_rule_accepts_enum_and_string():
    assert get_rule(FormatId.CPF) is get_rule("cpf") is FORMAT_RULES[FormatId.CPF]


def test_get_rule_is_case_sensitive():
    with pytest.raises(UnknownFormatError):
        get_rule("CPF")


def test_suggest_formats_respects_limit_and_cutoff():
    assert len(suggest_formats("phone", limit=2)) == 2
    assert suggest_formats("phone", limit=0) == []
    assert suggest_formats("") == []
    assert suggest_formats("zzzzzzzz", cutoff=99.0) == []


def test_clean_does_not_truncate():
    assert clean("cpf", "123.456.789-0123") == "1234567890123"
    assert clean("nino-uk", "ab 12-34-56 c") == "AB123456C"
    assert clean("mac-address", "0g:1h:2z") == "012"
    assert clean("ipv4", " 10.0.0.1 ") == " 10.0.0.1 "


def test_render_truncates_to_max_length():
    assert render("cep", "0131010099") == "01310-100"


def test_render_accepts_rule_objects():
    rule = get_rule("ssn")

    assert render(rule, clean(rule, "123 45 6789")) == "123-45-6789"


def test_format_value_tolerates_none():
    assert format_value("cpf", None) == ""  # type: ignore[arg-type]


def test_partial_input_has_no_trailing_separator():
    assert format_value("cpf", "123") == "123"
    assert format_value("cpf", "1234") == "123.4"
    assert format_value("phone-us", "555") == "555"
    assert format_value("phone-us", "5551") == "(555) 1"
    assert format_value("phone-mx", "52") == "52"
    assert format_value("phone-mx", "525") == "+52 (5"


def test_suggestions_are_computed_only_when_read(monkeypatch):
    calls: list[tuple] = []
    original = engine.suggest_formats

    def counting(query, **kwargs):
        calls.append((query, kwargs))
        return original(query, **kwargs)

    monkeypatch.setattr(engine, "suggest_formats", counting)

    with pytest.raises(UnknownFormatError) as excinfo:
        get_rule("phone-usa")
    assert calls == []

    first = excinfo.value.suggestions
    second = excinfo.value.suggestions
    assert first is second
    assert len(calls) == 1


def test_suggest_applies_explicit_limit_and_cutoff():
    error = UnknownFormatError("phone-usa")

    assert error.suggest(limit=1, cutoff=60.0) == ("phone-us",)
    assert error.suggestions == ("phone-us",)
    assert error.suggest(limit=3, cutoff=100.0) == ()
