from __future__ import annotations

import pytest

from keymask.masking import (
    FORMAT_RULES,
    CharacterClass,
    FormatDomain,
    FormatId,
    list_rules,
)
from keymask.masking.segments import Segmented, VariableGroup


def test_every_format_id_has_exactly_one_rule():
    assert set(FORMAT_RULES) == set(FormatId)
    for format_id, rule in FORMAT_RULES.items():
        assert rule.format_id == format_id.value


def test_rule_table_is_read_only():
    with pytest.raises(TypeError):
        FORMAT_RULES[FormatId.CPF] = FORMAT_RULES[FormatId.SSN]  # type: ignore[index]


def test_verbatim_formats_are_the_content_driven_ones():
    verbatim = {
        format_id.value
        for format_id, rule in FORMAT_RULES.items()
        if rule.character_class is CharacterClass.VERBATIM
    }

    assert verbatim == {"ipv4", "ipv6", "time-12h", "currency-br", "currency-us", "currency-eu"}
    for format_id in verbatim:
        assert FORMAT_RULES[FormatId(format_id)].max_length is None


def test_pattern_widths_match_declared_max_length():
    for rule in FORMAT_RULES.values():
        if isinstance(rule.renderer, (Segmented, VariableGroup)):
            assert rule.renderer.width == rule.max_length, rule.format_id


@pytest.mark.parametrize(
    ("format_id", "max_length"),
    [
        ("cpf", 11),
        ("cnpj", 14),
        ("phone-br", 11),
        ("date-br-full", 8),
        ("personnummer-se", 12),
        ("iban", 34),
        ("uuid", 32),
        ("mac-address", 12),
        ("phone-eu", 13),
    ],
)
def test_known_max_lengths(format_id, max_length):
    assert FORMAT_RULES[FormatId(format_id)].max_length == max_length


def test_list_rules_keeps_catalogue_order():
    rules = list_rules()

    assert [rule.format_id for rule in rules] == [member.value for member in FormatId]


def test_list_rules_filters_by_domain():
    phones = list_rules(FormatDomain.PHONE)

    assert phones
    assert all(rule.domain is FormatDomain.PHONE for rule in phones)
    assert "phone-br" in {rule.format_id for rule in phones}
    assert "cpf" not in {rule.format_id for rule in phones}


def test_phone_rules_are_digit_only():
    for rule in list_rules(FormatDomain.PHONE):
        assert rule.character_class is CharacterClass.DIGITS


def test_identifiers_accepting_letters_are_alphanumeric():
    for format_id in ("nif-es", "nie-es", "nino-uk", "curp-mx", "iban", "uuid", "isbn-10"):
        assert FORMAT_RULES[FormatId(format_id)].character_class is CharacterClass.ALPHANUMERIC_UPPER


def test_mac_address_only_keeps_hex_digits():
    assert FORMAT_RULES[FormatId.MAC_ADDRESS].character_class is CharacterClass.HEX_UPPER
