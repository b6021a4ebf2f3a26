"""Catalogue of every supported format.

Adding a format means adding a ``FormatId`` member and one ``_rule`` call
below; the engine itself never changes.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from keymask.masking.segments import Segmented, VariableGroup
from keymask.masking.special import (
    DATE_SHORT,
    ENGLISH_MONTHS,
    PORTUGUESE_MONTHS,
    Currency,
    DateFull,
    IbanGroups,
    IPv4,
    IPv6,
    Time12H,
)
from keymask.masking.types import (
    CharacterClass,
    DateOrder,
    FormatDomain,
    FormatRule,
    Renderer,
    SegmentPattern,
    pattern,
)


class FormatId(str, Enum):
    # Brazil
    CPF = "cpf"
    RG = "rg"
    CNPJ = "cnpj"
    CEP = "cep"
    PHONE_BR = "phone-br"
    DATE_BR = "date-br"
    DATE_BR_SHORT = "date-br-short"
    DATE_BR_FULL = "date-br-full"
    # United States
    SSN = "ssn"
    PHONE_US = "phone-us"
    DATE_US = "date-us"
    DATE_US_SHORT = "date-us-short"
    DATE_US_FULL = "date-us-full"
    DRIVERS_LICENSE_US = "drivers-license-us"
    # Europe
    NIF_ES = "nif-es"
    NIF_PT = "nif-pt"
    NIE_ES = "nie-es"
    NIR_FR = "nir-fr"
    STEUER_ID_DE = "steuer-id-de"
    CODICE_FISCALE_IT = "codice-fiscale-it"
    NINO_UK = "nino-uk"
    BSN_NL = "bsn-nl"
    NISS_BE = "niss-be"
    AVS_CH = "avs-ch"
    SVNR_AT = "svnr-at"
    PERSONNUMMER_SE = "personnummer-se"
    FODSELSNUMMER_NO = "fodselsnummer-no"
    PESEL_PL = "pesel-pl"
    AMKA_GR = "amka-gr"
    PASSPORT_EU = "passport-eu"
    DATE_EU = "date-eu"
    DATE_EU_SHORT = "date-eu-short"
    DATE_EU_FULL = "date-eu-full"
    PHONE_EU = "phone-eu"
    # Latin America
    CURP_MX = "curp-mx"
    RFC_MX = "rfc-mx"
    CUIT_AR = "cuit-ar"
    CUIT_CUIL_AR = "cuit-cuil-ar"
    DNI_AR = "dni-ar"
    RUT_CL = "rut-cl"
    NIT_CO = "nit-co"
    CC_CO = "cc-co"
    DNI_PE = "dni-pe"
    RUC_PE = "ruc-pe"
    CI_VE = "ci-ve"
    CI_EC = "ci-ec"
    CI_UY = "ci-uy"
    CI_PY = "ci-py"
    CI_BO = "ci-bo"
    PHONE_MX = "phone-mx"
    PHONE_AR = "phone-ar"
    PHONE_CL = "phone-cl"
    PHONE_CO = "phone-co"
    # Asia
    MY_NUMBER_JP = "my-number-jp"
    ID_CARD_CN = "id-card-cn"
    AADHAAR_IN = "aadhaar-in"
    PAN_IN = "pan-in"
    PHONE_JP = "phone-jp"
    PHONE_CN = "phone-cn"
    PHONE_IN = "phone-in"
    # Other countries
    SIN_CA = "sin-ca"
    TFN_AU = "tfn-au"
    ABN_AU = "abn-au"
    ID_ZA = "id-za"
    PHONE_CA = "phone-ca"
    PHONE_AU = "phone-au"
    SNILS_RU = "snils-ru"
    TC_KIMLIK_TR = "tc-kimlik-tr"
    TEUDAT_ZEHUT_IL = "teudat-zehut-il"
    # Universal
    CREDIT_CARD = "credit-card"
    IBAN = "iban"
    SWIFT_BIC = "swift-bic"
    ISBN_10 = "isbn-10"
    ISBN_13 = "isbn-13"
    UUID = "uuid"
    MAC_ADDRESS = "mac-address"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    EAN_13 = "ean-13"
    UPC_A = "upc-a"
    # Currency
    CURRENCY_BR = "currency-br"
    CURRENCY_US = "currency-us"
    CURRENCY_EU = "currency-eu"
    # Time
    TIME_24H = "time-24h"
    TIME_12H = "time-12h"


DIGITS = CharacterClass.DIGITS
ALNUM = CharacterClass.ALPHANUMERIC_UPPER
HEX = CharacterClass.HEX_UPPER
VERBATIM = CharacterClass.VERBATIM

_RULES: dict[FormatId, FormatRule] = {}


def _rule(
    format_id: FormatId,
    label: str,
    domain: FormatDomain,
    character_class: CharacterClass,
    renderer: Renderer | SegmentPattern,
    *,
    region: Optional[str] = None,
) -> None:
    if isinstance(renderer, SegmentPattern):
        renderer = Segmented(renderer)
    max_length = getattr(renderer, "width", None)
    if format_id in _RULES:
        raise ValueError(f"Duplicate rule for {format_id.value!r}")
    _RULES[format_id] = FormatRule(
        format_id=format_id.value,
        label=label,
        domain=domain,
        character_class=character_class,
        renderer=renderer,
        max_length=max_length,
        region=region,
    )


ID = FormatDomain.NATIONAL_ID
PHONE = FormatDomain.PHONE
DATE = FormatDomain.DATE
TECH = FormatDomain.TECHNICAL
MONEY = FormatDomain.CURRENCY
TIME = FormatDomain.TIME

_DATE_BR_LONG = DateFull(PORTUGUESE_MONTHS, DateOrder.DAY_MONTH_YEAR, "{day} de {month} de {year}")
_DATE_US_LONG = DateFull(ENGLISH_MONTHS, DateOrder.MONTH_DAY_YEAR, "{month} {day}, {year}")
_DATE_EU_LONG = DateFull(ENGLISH_MONTHS, DateOrder.DAY_MONTH_YEAR, "{day} {month} {year}")

_PHONE_BR_LADDER = VariableGroup(
    (
        (7, pattern(2, (" ", 5), lead="({})")),
        (10, pattern(2, (" ", 4), ("-", 4), lead="({})")),
        (11, pattern(2, (" ", 5), ("-", 4), lead="({})")),
    )
)
_PERSONNUMMER_LADDER = VariableGroup(
    (
        (10, pattern(6, ("-", 4))),
        (12, pattern(8, ("-", 4))),
    )
)

# Brazil
_rule(FormatId.CPF, "Brazilian CPF", ID, DIGITS, pattern(3, (".", 3), (".", 3), ("-", 2)), region="BR")
_rule(FormatId.RG, "Brazilian RG", ID, DIGITS, pattern(2, (".", 3), (".", 3), ("-", 1)), region="BR")
_rule(
    FormatId.CNPJ,
    "Brazilian CNPJ",
    ID,
    DIGITS,
    pattern(2, (".", 3), (".", 3), ("/", 4), ("-", 2)),
    region="BR",
)
_rule(FormatId.CEP, "Brazilian postal code", ID, DIGITS, pattern(5, ("-", 3)), region="BR")
_rule(FormatId.PHONE_BR, "Brazilian phone", PHONE, DIGITS, _PHONE_BR_LADDER, region="BR")
_rule(FormatId.DATE_BR, "Brazilian date", DATE, DIGITS, DATE_SHORT, region="BR")
_rule(FormatId.DATE_BR_SHORT, "Brazilian short date", DATE, DIGITS, DATE_SHORT, region="BR")
_rule(FormatId.DATE_BR_FULL, "Brazilian long date", DATE, DIGITS, _DATE_BR_LONG, region="BR")

# United States
_rule(FormatId.SSN, "US Social Security number", ID, DIGITS, pattern(3, ("-", 2), ("-", 4)), region="US")
_rule(
    FormatId.PHONE_US,
    "US phone",
    PHONE,
    DIGITS,
    pattern(3, (" ", 3), ("-", 4), lead="({})"),
    region="US",
)
_rule(FormatId.DATE_US, "US date", DATE, DIGITS, DATE_SHORT, region="US")
_rule(FormatId.DATE_US_SHORT, "US short date", DATE, DIGITS, DATE_SHORT, region="US")
_rule(FormatId.DATE_US_FULL, "US long date", DATE, DIGITS, _DATE_US_LONG, region="US")
_rule(FormatId.DRIVERS_LICENSE_US, "US driver's license", ID, ALNUM, pattern(13), region="US")

# Europe
_rule(FormatId.NIF_ES, "Spanish NIF", ID, ALNUM, pattern(8, ("-", 1)), region="ES")
_rule(FormatId.NIF_PT, "Portuguese NIF", ID, DIGITS, pattern(3, (" ", 3), (" ", 3)), region="PT")
_rule(FormatId.NIE_ES, "Spanish NIE", ID, ALNUM, pattern(1, ("-", 7), ("-", 1)), region="ES")
_rule(
    FormatId.NIR_FR,
    "French social security number",
    ID,
    ALNUM,
    pattern(1, (" ", 2), (" ", 2), (" ", 2), (" ", 3), (" ", 2), (" ", 1)),
    region="FR",
)
_rule(
    FormatId.STEUER_ID_DE,
    "German tax id",
    ID,
    ALNUM,
    pattern(2, (" ", 3), (" ", 3), (" ", 2), (" ", 1)),
    region="DE",
)
_rule(FormatId.CODICE_FISCALE_IT, "Italian codice fiscale", ID, ALNUM, pattern(16), region="IT")
_rule(
    FormatId.NINO_UK,
    "UK National Insurance number",
    ID,
    ALNUM,
    pattern(2, (" ", 2), (" ", 2), (" ", 2), (" ", 1)),
    region="GB",
)
_rule(FormatId.BSN_NL, "Dutch BSN", ID, ALNUM, pattern(4, (".", 2), (".", 3)), region="NL")
_rule(
    FormatId.NISS_BE,
    "Belgian NISS",
    ID,
    ALNUM,
    pattern(2, (".", 2), (".", 2), ("-", 3), (".", 2)),
    region="BE",
)
_rule(FormatId.AVS_CH, "Swiss AVS", ID, DIGITS, pattern(3, (".", 4), (".", 4), (".", 2)), region="CH")
_rule(
    FormatId.SVNR_AT,
    "Austrian social insurance number",
    ID,
    DIGITS,
    pattern(4, (" ", 2), (" ", 2), (" ", 2)),
    region="AT",
)
_rule(FormatId.PERSONNUMMER_SE, "Swedish personnummer", ID, ALNUM, _PERSONNUMMER_LADDER, region="SE")
_rule(FormatId.FODSELSNUMMER_NO, "Norwegian fødselsnummer", ID, ALNUM, pattern(6, (" ", 5)), region="NO")
_rule(FormatId.PESEL_PL, "Polish PESEL", ID, ALNUM, pattern(11), region="PL")
_rule(FormatId.AMKA_GR, "Greek AMKA", ID, DIGITS, pattern(6, (" ", 5)), region="GR")
_rule(FormatId.PASSPORT_EU, "European passport", ID, ALNUM, pattern(9))
_rule(FormatId.DATE_EU, "European date", DATE, DIGITS, DATE_SHORT)
_rule(FormatId.DATE_EU_SHORT, "European short date", DATE, DIGITS, DATE_SHORT)
_rule(FormatId.DATE_EU_FULL, "European long date", DATE, DIGITS, _DATE_EU_LONG)
_rule(
    FormatId.PHONE_EU,
    "European phone",
    PHONE,
    DIGITS,
    pattern(2, (" (", 2), (") ", 4), ("-", 5), lead="+{}"),
)

# Latin America
_rule(FormatId.CURP_MX, "Mexican CURP", ID, ALNUM, pattern(18), region="MX")
_rule(FormatId.RFC_MX, "Mexican RFC", ID, ALNUM, pattern(9, ("-", 4)), region="MX")
_rule(FormatId.CUIT_AR, "Argentine CUIT", ID, DIGITS, pattern(2, ("-", 8), ("-", 1)), region="AR")
_rule(FormatId.CUIT_CUIL_AR, "Argentine CUIT/CUIL", ID, DIGITS, pattern(2, ("-", 8), ("-", 1)), region="AR")
_rule(FormatId.DNI_AR, "Argentine DNI", ID, DIGITS, pattern(2, (".", 3), (".", 3)), region="AR")
_rule(FormatId.RUT_CL, "Chilean RUT", ID, DIGITS, pattern(1, (".", 3), (".", 3), ("-", 2)), region="CL")
_rule(FormatId.NIT_CO, "Colombian NIT", ID, DIGITS, pattern(3, (".", 3), (".", 3), ("-", 1)), region="CO")
_rule(FormatId.CC_CO, "Colombian cédula", ID, DIGITS, pattern(2, (".", 3), (".", 3), ("-", 2)), region="CO")
_rule(FormatId.DNI_PE, "Peruvian DNI", ID, DIGITS, pattern(8), region="PE")
_rule(FormatId.RUC_PE, "Peruvian RUC", ID, DIGITS, pattern(10, ("-", 1)), region="PE")
_rule(FormatId.CI_VE, "Venezuelan cédula", ID, DIGITS, pattern(1, ("-", 8), ("-", 1), lead="V"), region="VE")
_rule(FormatId.CI_EC, "Ecuadorian cédula", ID, DIGITS, pattern(10), region="EC")
_rule(FormatId.CI_UY, "Uruguayan cédula", ID, DIGITS, pattern(1, (".", 3), (".", 3), ("-", 1)), region="UY")
_rule(FormatId.CI_PY, "Paraguayan cédula", ID, DIGITS, pattern(7, ("-", 1)), region="PY")
_rule(FormatId.CI_BO, "Bolivian cédula", ID, DIGITS, pattern(7, ("-", 1)), region="BO")
_rule(
    FormatId.PHONE_MX,
    "Mexican phone",
    PHONE,
    DIGITS,
    pattern(2, (" (", 2), (") ", 4), ("-", 4), lead="+52"),
    region="MX",
)
_rule(
    FormatId.PHONE_AR,
    "Argentine phone",
    PHONE,
    DIGITS,
    pattern(2, (" (", 2), (") ", 4), ("-", 4), lead="+54"),
    region="AR",
)
_rule(
    FormatId.PHONE_CL,
    "Chilean phone",
    PHONE,
    DIGITS,
    pattern(2, (" ", 1), (" ", 4), ("-", 4), lead="+56"),
    region="CL",
)
_rule(
    FormatId.PHONE_CO,
    "Colombian phone",
    PHONE,
    DIGITS,
    pattern(2, (" ", 3), (" ", 3), ("-", 5), lead="+57"),
    region="CO",
)

# Asia
_rule(FormatId.MY_NUMBER_JP, "Japanese My Number", ID, DIGITS, pattern(4, ("-", 4), ("-", 4)), region="JP")
_rule(FormatId.ID_CARD_CN, "Chinese resident id", ID, DIGITS, pattern(6, (" ", 8), (" ", 4)), region="CN")
_rule(FormatId.AADHAAR_IN, "Indian Aadhaar", ID, DIGITS, pattern(4, (" ", 4), (" ", 4)), region="IN")
_rule(FormatId.PAN_IN, "Indian PAN", ID, ALNUM, pattern(10), region="IN")
_rule(
    FormatId.PHONE_JP,
    "Japanese phone",
    PHONE,
    DIGITS,
    pattern(2, (" ", 2), ("-", 4), ("-", 4), lead="+81"),
    region="JP",
)
_rule(
    FormatId.PHONE_CN,
    "Chinese phone",
    PHONE,
    DIGITS,
    pattern(2, (" ", 3), (" ", 4), (" ", 4), lead="+86"),
    region="CN",
)
_rule(
    FormatId.PHONE_IN,
    "Indian phone",
    PHONE,
    DIGITS,
    pattern(2, (" ", 4), ("-", 3), ("-", 3), lead="+91"),
    region="IN",
)

# Other countries
_rule(FormatId.SIN_CA, "Canadian SIN", ID, DIGITS, pattern(3, ("-", 3), ("-", 3)), region="CA")
_rule(FormatId.TFN_AU, "Australian TFN", ID, DIGITS, pattern(3, (" ", 3), (" ", 3)), region="AU")
_rule(
    FormatId.ABN_AU,
    "Australian ABN",
    ID,
    DIGITS,
    pattern(2, (" ", 3), (" ", 3), (" ", 2), (" ", 1)),
    region="AU",
)
_rule(FormatId.ID_ZA, "South African id", ID, DIGITS, pattern(6, (" ", 4), (" ", 2), (" ", 1)), region="ZA")
_rule(
    FormatId.PHONE_CA,
    "Canadian phone",
    PHONE,
    DIGITS,
    pattern(1, (" (", 3), (") ", 3), ("-", 4), lead="+1"),
    region="CA",
)
_rule(
    FormatId.PHONE_AU,
    "Australian phone",
    PHONE,
    DIGITS,
    pattern(2, (" ", 1), (" ", 4), (" ", 4), lead="+61"),
    region="AU",
)
_rule(FormatId.SNILS_RU, "Russian SNILS", ID, DIGITS, pattern(3, ("-", 3), ("-", 3), (" ", 2)), region="RU")
_rule(FormatId.TC_KIMLIK_TR, "Turkish TC Kimlik", ID, DIGITS, pattern(11), region="TR")
_rule(FormatId.TEUDAT_ZEHUT_IL, "Israeli Teudat Zehut", ID, DIGITS, pattern(9), region="IL")

# Universal
_rule(FormatId.CREDIT_CARD, "Payment card number", TECH, DIGITS, pattern(4, (" ", 4), (" ", 4), (" ", 4)))
_rule(FormatId.IBAN, "IBAN", TECH, ALNUM, IbanGroups())
_rule(FormatId.SWIFT_BIC, "SWIFT/BIC", TECH, ALNUM, pattern(4, (" ", 2), (" ", 2), (" ", 3)))
_rule(FormatId.ISBN_10, "ISBN-10", TECH, ALNUM, pattern(1, ("-", 3), ("-", 5), ("-", 1)))
_rule(FormatId.ISBN_13, "ISBN-13", TECH, ALNUM, pattern(3, ("-", 1), ("-", 3), ("-", 5), ("-", 1)))
_rule(FormatId.UUID, "UUID", TECH, ALNUM, pattern(8, ("-", 4), ("-", 4), ("-", 4), ("-", 12)))
_rule(
    FormatId.MAC_ADDRESS,
    "MAC address",
    TECH,
    HEX,
    pattern(2, (":", 2), (":", 2), (":", 2), (":", 2), (":", 2)),
)
_rule(FormatId.IPV4, "IPv4 address", TECH, VERBATIM, IPv4())
_rule(FormatId.IPV6, "IPv6 address", TECH, VERBATIM, IPv6())
_rule(FormatId.EAN_13, "EAN-13 barcode", TECH, DIGITS, pattern(13))
_rule(FormatId.UPC_A, "UPC-A barcode", TECH, DIGITS, pattern(12))

# Currency
_rule(FormatId.CURRENCY_BR, "Brazilian real", MONEY, VERBATIM, Currency("R$ ", ".", ","), region="BR")
_rule(FormatId.CURRENCY_US, "US dollar", MONEY, VERBATIM, Currency("$", ",", "."), region="US")
_rule(FormatId.CURRENCY_EU, "Euro", MONEY, VERBATIM, Currency("€", ".", ","))

# Time
_rule(FormatId.TIME_24H, "24-hour time", TIME, DIGITS, pattern(2, (":", 2), (":", 2)))
_rule(FormatId.TIME_12H, "12-hour time", TIME, VERBATIM, Time12H())

_missing = set(FormatId) - set(_RULES)
if _missing:
    raise ValueError(f"Formats without rules: {sorted(item.value for item in _missing)}")

FORMAT_RULES: Mapping[FormatId, FormatRule] = MappingProxyType(_RULES)

__all__ = ["FORMAT_RULES", "FormatId"]
