import pytest

from meat365.catalog.models import ProductCode
from meat365.catalog.parser import (
    StorageKeyError,
    ensure_storage_key,
    format_peak_code,
    format_product_code,
    get_base_code,
    is_known_trade_type,
    parse_peak_code,
)


def test_parse_dashed_variant():
    parsed = parse_peak_code("2-FP180001-2CM")
    assert parsed == ProductCode(
        trade_type="2",
        storage="F",
        species="P",
        supplier_code="18",
        part_code="0001",
        variant="2CM",
    )
    assert parsed.base_code == "2-FP180001"
    assert parsed.meat_type == "pork"


def test_parse_undashed_variant_with_dot():
    parsed = parse_peak_code("1-CB050501W3.5")
    assert parsed.variant == "W3.5"
    assert parsed.base_code == "1-CB050501"
    assert parsed.meat_type == "beef"


def test_parse_variant_keeps_internal_hyphen():
    parsed = parse_peak_code("2-FP180001-TH-6")
    assert parsed.variant == "TH-6"
    assert parsed.base_code == "2-FP180001"


def test_parse_without_variant():
    parsed = parse_peak_code("1-CC010701")
    assert parsed.variant is None
    assert parsed.code == "1-CC010701"
    assert parsed.meat_type == "chicken"


def test_parse_trailing_hyphen_means_no_variant():
    parsed = parse_peak_code("2-FP180001-")
    assert parsed is not None
    assert parsed.variant is None
    assert parsed.code == "2-FP180001"


@pytest.mark.parametrize(
    "code",
    [
        "2-FP1800012CM",   # 부위 자릿수 초과
        "2-FP18001",       # 부위 자릿수 부족
        "2-XP180001",      # 보관 구분 오류
        "2-FX180001",      # 축종 오류
        "A-FP180001",
        "2FP180001",
        "2-FP180001 2CM",  # 공백
        "2-FP180001-2CM\n",
        "",
    ],
)
def test_parse_rejects_malformed(code):
    assert parse_peak_code(code) is None


def test_parse_rejects_non_string():
    assert parse_peak_code(None) is None
    assert parse_peak_code(12345) is None


@pytest.mark.parametrize("code", ["2-FP180001-2/3CM", "2-FP180001W/B", "2-FP180001-A\\B"])
def test_parse_rejects_path_hostile(code):
    assert parse_peak_code(code) is None


def test_ensure_storage_key():
    assert ensure_storage_key("2-FP180001-2CM") == "2-FP180001-2CM"
    with pytest.raises(StorageKeyError) as exc:
        ensure_storage_key("2-FP180001-2/3CM")
    assert exc.value.code == "2-FP180001-2/3CM"
    with pytest.raises(StorageKeyError):
        ensure_storage_key("")
    with pytest.raises(StorageKeyError):
        ensure_storage_key("a\\b")


@pytest.mark.parametrize("trade_type", ["1", "2"])
@pytest.mark.parametrize("storage", ["C", "F"])
@pytest.mark.parametrize("species", ["P", "B", "C"])
def test_round_trip_without_variant(trade_type, storage, species):
    fields = dict(trade_type=trade_type, storage=storage, species=species, supplier_code="05", part_code="0501")
    code = format_peak_code(**fields)
    parsed = parse_peak_code(code)
    assert parsed == ProductCode(**fields)
    assert parsed.base_code == code


@pytest.mark.parametrize("variant", ["T-6", "2CM", "W3.5", "TH-6-A", "10KG"])
def test_round_trip_with_variant(variant):
    fields = dict(trade_type="2", storage="F", species="P", supplier_code="18", part_code="0001", variant=variant)
    code = format_peak_code(**fields)
    parsed = parse_peak_code(code)
    assert parsed == ProductCode(**fields)
    assert parsed.base_code == "2-FP180001"
    assert variant not in parsed.base_code
    assert format_product_code(parsed) == code


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(trade_type="12", storage="F", species="P", supplier_code="18", part_code="0001"),
        dict(trade_type="2", storage="X", species="P", supplier_code="18", part_code="0001"),
        dict(trade_type="2", storage="F", species="Q", supplier_code="18", part_code="0001"),
        dict(trade_type="2", storage="F", species="P", supplier_code="8", part_code="0001"),
        dict(trade_type="2", storage="F", species="P", supplier_code="18", part_code="001"),
        dict(trade_type="2", storage="F", species="P", supplier_code="18", part_code="0001", variant="a/b"),
    ],
)
def test_format_rejects_invalid_fields(kwargs):
    with pytest.raises(ValueError):
        format_peak_code(**kwargs)


def test_get_base_code():
    assert get_base_code("2-FP180001-2CM") == "2-FP180001"
    assert get_base_code("1-CB050501W3.5") == "1-CB050501"
    assert get_base_code("legacy-code") == "legacy-code"


def test_is_known_trade_type():
    assert is_known_trade_type("1")
    assert is_known_trade_type("2")
    assert not is_known_trade_type("3")
    # 파싱 자체는 한 자리 숫자면 통과
    assert parse_peak_code("3-FP180001") is not None
