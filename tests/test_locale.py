import pytest

from meat365.dictionary import MEAT_DATA_MAP
from meat365.locale import (
    DISPLAY_LOCALES,
    LOCALES,
    SPECIES_NAMES,
    STORAGE_NAMES,
    LocalizedText,
    resolve,
)


def test_routing_locales_are_closed_set():
    assert LOCALES == ("ko", "th", "my", "en")
    assert "ar" in DISPLAY_LOCALES
    assert "ar" not in LOCALES


@pytest.mark.parametrize("locale", LOCALES)
def test_constant_tables_cover_every_locale(locale):
    for table in (SPECIES_NAMES, STORAGE_NAMES):
        for names in table.values():
            assert names[locale]


def test_resolve_direct():
    text = LocalizedText(ko="목살", th="คอหมู", my="လည်ပင်း", en="Collar")
    assert resolve("ko", text) == "목살"
    assert resolve("th", text) == "คอหมู"
    assert resolve("my", text) == "လည်ပင်း"
    assert resolve("en", text) == "Collar"


def test_resolve_my_falls_back_to_en():
    assert resolve("my", LocalizedText(ko="목살", en="Collar")) == "Collar"
    assert resolve("my", {"ko": "목살", "en": "Collar", "my": None}) == "Collar"


def test_resolve_ar_falls_back_to_en():
    pork_cut = MEAT_DATA_MAP["pork"].categories["neck"].cuts[0]
    assert pork_cut.ar is None
    assert resolve("ar", pork_cut) == pork_cut.en
    beef_cut = MEAT_DATA_MAP["beef"].categories["rib"].cuts[0]
    assert resolve("ar", beef_cut) == beef_cut.ar


def test_resolve_unknown_locale_uses_ko():
    assert resolve("fr", LocalizedText(ko="목살", en="Collar")) == "목살"


def test_resolve_missing_everything():
    assert resolve("th", LocalizedText()) == ""
    assert resolve("ko", {}) == ""


def test_suffixed_keeps_blank_names_blank():
    text = LocalizedText(ko="삼겹살", en="Belly").suffixed(" 2CM")
    assert text == LocalizedText(ko="삼겹살 2CM", en="Belly 2CM")
    assert LocalizedText(ko="a").suffixed("") == LocalizedText(ko="a")
