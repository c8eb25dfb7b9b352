import logging

from meat365.catalog.importer import (
    build_product_spec,
    extract_names,
    import_rows,
    read_rows_csv,
)


def test_build_product_spec_joins_dictionary_names():
    spec = build_product_spec(("2-FP180001-2CM", "Product", "", "Kg."), sort_order=3)
    assert spec.peak_code == "2-FP180001-2CM"
    assert spec.base_code == "2-FP180001"
    assert spec.variant == "2CM"
    assert spec.names.ko == "삼겹살(껍질O) 2CM"
    assert spec.names.en == "Belly Skin-on 2CM"
    assert spec.sort_order == 3
    assert spec.unit == "Kg."
    assert spec.created_by == "import"
    assert spec.search_terms == f"{spec.names.ko} {spec.names.th} {spec.names.en} 2-FP180001-2CM".lower()


def test_build_product_spec_prefers_names_from_row():
    spec = build_product_spec(("1-CB050501W3.5", "Product", "ริบอาย Ribeye Steak 3.5 A", "Pack"))
    assert spec.names.th.startswith("ริบอาย")
    assert spec.names.en == "Ribeye Steak"
    assert spec.names.ko == "립아이 W3.5"
    assert spec.unit == "Pack"


def test_build_product_spec_unknown_part_has_blank_names():
    spec = build_product_spec(("2-FP189999", "Product", "", ""))
    assert spec is not None
    assert spec.names.ko == ""
    assert spec.unit == "Kg."


def test_build_product_spec_fills_names_missing_from_dictionary():
    spec = build_product_spec(("1-CB050512-T2", "Product", "", "Kg."))
    assert spec.names.ko == "안창살 T2"
    assert spec.names.my == "အပြင်သား T2"
    assert spec.names.en == "Outside Skirt T2"


def test_build_product_spec_trailing_hyphen():
    spec = build_product_spec(("2-FP180001-", "Product", "", ""))
    assert spec is not None
    assert spec.base_code == "2-FP180001"
    assert spec.variant is None
    assert spec.names.ko == "삼겹살(껍질O)"


def test_build_product_spec_rejects():
    assert build_product_spec(("2-FP1800012CM", "Product", "", "")) is None
    assert build_product_spec(("2-FP180001", "Service", "", "")) is None
    assert build_product_spec(()) is None


def test_extract_names():
    names = extract_names("หมูสามชั้น 2.5 Pork Belly / x")
    assert names.th == "หมูสามชั้น 2.5"
    assert names.en == "Pork Belly"
    assert extract_names("").en == ""


def test_import_rows_counts_and_skips(caplog):
    rows = [
        ("2-FP180001-2CM", "Product", "", "Kg."),
        ("2-FP180003", "Product", "", "Kg."),
        ("1-CB050501W3.5", "Product", "", "Kg."),
        ("LEGACY-001", "Product", "", "Kg."),
        ("SVC-01", "Service", "배송비", ""),
    ]
    with caplog.at_level(logging.WARNING, logger="meat365.catalog.importer"):
        result = import_rows(rows)

    assert [p.peak_code for p in result.products] == ["2-FP180001-2CM", "2-FP180003", "1-CB050501W3.5"]
    assert [p.sort_order for p in result.products] == [0, 1, 2]
    assert result.skipped == ["LEGACY-001"]
    assert result.not_products == 1
    assert result.by_species == {"P": 2, "B": 1}
    assert result.by_trade_type == {"2": 2, "1": 1}
    assert "LEGACY-001" in caplog.text


def test_read_rows_csv(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(
        "code,type,name,unit\n"
        "2-FP180001-2CM,Product,หมูสามชั้น Pork Belly,Kg.\n"
        "SVC-01,Service,배송비,\n",
        encoding="utf-8-sig",
    )
    rows = read_rows_csv(path)
    assert rows == [
        ("2-FP180001-2CM", "Product", "หมูสามชั้น Pork Belly", "Kg."),
        ("SVC-01", "Service", "배송비", ""),
    ]
    result = import_rows(rows)
    assert len(result.products) == 1
    assert result.products[0].names.en == "Pork Belly"
