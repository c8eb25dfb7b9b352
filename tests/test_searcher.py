import pytest

from meat365.catalog.models import FilterState, ProductSpec
from meat365.catalog.parser import parse_peak_code
from meat365.catalog.searcher import (
    apply_filters,
    filter_products,
    haystack,
    only_active,
    search_products,
    tokenize_query,
)
from meat365.locale import LocalizedText


def _spec(code, ko="", en="", th="", aliases=None, is_active=True):
    return ProductSpec.from_code(
        code,
        parse_peak_code(code),
        names=LocalizedText(ko=ko, en=en, th=th),
        aliases=aliases or [],
        is_active=is_active,
    )


@pytest.fixture
def catalog():
    return [
        _spec("2-FP180001-2CM", ko="삼겹살 2CM", en="Pork Belly 2CM", th="สามชั้น"),
        _spec("2-FP180003", ko="목살", en="Pork Collar"),
        _spec("1-CB050501W3.5", ko="립아이", en="Beef Ribeye", aliases=["꽃등심"]),
        _spec("2-CC010701", ko="닭가슴살", en="Chicken Breast", is_active=False),
    ]


def test_tokenize_query():
    assert tokenize_query("  Pork   BELLY ") == ["pork", "belly"]
    assert tokenize_query("") == []
    assert tokenize_query("   ") == []
    assert tokenize_query(None) == []


def test_search_uses_and_semantics(catalog):
    a, b = catalog[0], catalog[1]
    assert search_products(catalog, "pork belly") == [a]
    assert search_products(catalog, "pork") == [a, b]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_empty_query_is_identity(catalog, query):
    result = search_products(catalog, query)
    assert result == catalog
    assert result is not catalog


def test_search_haystack_fields(catalog):
    assert search_products(catalog, "꽃등심") == [catalog[2]]
    assert search_products(catalog, "0501") == [catalog[2]]
    assert search_products(catalog, "2-fp180003") == [catalog[1]]
    assert search_products(catalog, "สามชั้น") == [catalog[0]]
    # 공급처 코드
    assert search_products(catalog, "05") == [catalog[2]]
    assert search_products(catalog, "nothing-here") == []


def test_haystack_is_lowercase(catalog):
    text = haystack(catalog[0])
    assert text == text.lower()
    assert "2-fp180001-2cm" in text


def test_filter_exact_match_and(catalog):
    assert filter_products(catalog, species="P") == catalog[:2]
    assert filter_products(catalog, species="P", part_code="0003") == [catalog[1]]
    assert filter_products(catalog, trade_type="1") == [catalog[2]]
    assert filter_products(catalog, storage="C", species="C") == [catalog[3]]
    assert filter_products(catalog, supplier_code="18") == catalog[:2]
    assert filter_products(catalog, species="B", storage="F") == []


def test_filter_all_sentinel_means_no_constraint(catalog):
    assert filter_products(catalog) == catalog
    assert filter_products(catalog, trade_type="all", species="all", storage=None) == catalog


def test_filter_preserves_order(catalog):
    reversed_catalog = list(reversed(catalog))
    assert filter_products(reversed_catalog, trade_type="2") == [catalog[3], catalog[1], catalog[0]]


def test_only_active(catalog):
    assert only_active(catalog) == catalog[:3]


def test_apply_filters(catalog):
    state = FilterState(species="P", search_query="collar")
    assert apply_filters(catalog, state) == [catalog[1]]
    assert apply_filters(catalog, FilterState()) == catalog
