import pytest

from meat365.catalog.importer import import_rows
from meat365.catalog.parser import StorageKeyError
from meat365.db import MEAT_DICTIONARY, PRODUCT_SPECS, SpecDB
from meat365.dictionary import MEAT_DATA_MAP, UnknownMeatTypeError, merge_overrides
from meat365.media import SpecMedia


def _products():
    rows = [
        ("2-FP180001-2CM", "Product", "", "Kg."),
        ("2-FP180001-3CM", "Product", "", "Kg."),
        ("2-FP180003", "Product", "", "Kg."),
        ("1-CB050501W3.5", "Product", "", "Kg."),
    ]
    return import_rows(rows).products


# ── 범용 문서 ──

def test_set_and_get_document(db):
    db.set_document("things", "a", {"x": 1, "name": "삼겹살"})
    assert db.get_document("things", "a") == {"id": "a", "x": 1, "name": "삼겹살"}
    assert db.get_document("things", "missing") is None


def test_set_document_merge_semantics(db):
    db.set_document("things", "a", {"x": 1, "y": 2})
    db.set_document("things", "a", {"y": 3})
    assert db.get_document("things", "a") == {"id": "a", "x": 1, "y": 3}
    db.set_document("things", "a", {"z": 0}, merge=False)
    assert db.get_document("things", "a") == {"id": "a", "z": 0}


def test_add_and_delete_document(db):
    doc_id = db.add_document("things", {"x": 1})
    assert db.get_document("things", doc_id)["x"] == 1
    assert db.delete_document("things", doc_id)
    assert not db.delete_document("things", doc_id)


def test_list_documents_where(db):
    db.set_document("things", "a", {"kind": "p", "n": 2})
    db.set_document("things", "b", {"kind": "q", "n": 1})
    db.set_document("things", "c", {"kind": "p", "n": 0})
    assert [d["id"] for d in db.list_documents("things", kind="p")] == ["a", "c"]
    assert [d["id"] for d in db.list_documents("things", order_by="n")] == ["c", "b", "a"]
    assert [d["id"] for d in db.list_documents("things", kind=None)] == ["a", "b", "c"]


def test_path_hostile_document_id_rejected(db):
    with pytest.raises(StorageKeyError):
        db.set_document("things", "a/b", {"x": 1})


def test_reopen_keeps_data(tmp_path):
    path = tmp_path / "spec.db"
    with SpecDB(path) as first:
        first.set_document("things", "a", {"x": 1})
    with SpecDB(path) as second:
        assert second.get_document("things", "a")["x"] == 1


def test_default_path_read_when_opened(tmp_path, monkeypatch):
    monkeypatch.setenv("MEAT365_DB_PATH", str(tmp_path / "late.db"))
    with SpecDB() as db:
        assert db.db_path == tmp_path / "late.db"
    assert (tmp_path / "late.db").exists()


# ── 제품 스펙 ──

def test_save_and_get_product_spec(db):
    spec = _products()[0]
    db.save_product_spec(spec)
    loaded = db.get_product_spec(spec.peak_code)
    assert loaded.peak_code == spec.peak_code
    assert loaded.names == spec.names
    assert loaded.variant == "2CM"
    assert loaded.created_at
    assert loaded.updated_at


def test_save_product_spec_keeps_created_at(db):
    spec = _products()[0]
    db.save_product_spec(spec)
    created = db.get_product_spec(spec.peak_code).created_at
    spec.unit = "Box"
    db.save_product_spec(spec)
    loaded = db.get_product_spec(spec.peak_code)
    assert loaded.created_at == created
    assert loaded.unit == "Box"
    assert loaded.updated_at >= created


def test_get_product_specs_filters_and_sorts(db):
    products = _products()
    db.save_product_specs(list(reversed(products)))
    assert [p.peak_code for p in db.get_product_specs()] == [p.peak_code for p in products]
    assert [p.peak_code for p in db.get_product_specs(species="B")] == ["1-CB050501W3.5"]
    assert [p.peak_code for p in db.get_product_specs(species="P", trade_type="2", storage="F")] == [
        "2-FP180001-2CM", "2-FP180001-3CM", "2-FP180003",
    ]
    assert [p.peak_code for p in db.get_product_specs_by_part("0001")] == ["2-FP180001-2CM", "2-FP180001-3CM"]


def test_deactivate_product_spec(db):
    products = _products()
    db.save_product_specs(products)
    assert db.deactivate_product_spec("2-FP180003")
    assert "2-FP180003" not in [p.peak_code for p in db.get_product_specs()]
    # 문서는 남아 있다
    assert db.get_product_spec("2-FP180003").is_active is False
    assert not db.deactivate_product_spec("2-FP189999")


# ── 오버라이드 ──

def test_save_meat_cut_override_create_and_update(db):
    doc_id = db.save_meat_cut_override("pork", "belly", 0, {"note": "첫 수정"})
    assert doc_id == "pork_belly_0"
    first = db.get_document(MEAT_DICTIONARY, doc_id)
    assert first["meatType"] == "pork"
    assert first["categoryKey"] == "belly"
    assert first["cutKey"]
    assert first["createdAt"] == first["updatedAt"]

    db.save_meat_cut_override("pork", "belly", 0, {"en": "Pork Belly"})
    second = db.get_document(MEAT_DICTIONARY, doc_id)
    assert second["createdAt"] == first["createdAt"]
    assert second["updatedAt"] >= first["updatedAt"]
    assert second["note"] == "첫 수정"
    assert second["en"] == "Pork Belly"


def test_save_meat_cut_override_rejects_missing_target(db):
    with pytest.raises(IndexError):
        db.save_meat_cut_override("pork", "belly", 999, {"note": "x"})
    with pytest.raises(KeyError):
        db.save_meat_cut_override("pork", "wings", 0, {"note": "x"})
    with pytest.raises(UnknownMeatTypeError):
        db.save_meat_cut_override("lamb", "belly", 0, {"note": "x"})
    assert db.get_meat_cut_overrides() == []


def test_get_meat_cut_overrides_newest_first(db):
    db.save_meat_cut_override("pork", "belly", 0, {"note": "a"})
    db.save_meat_cut_override("beef", "rib", 1, {"note": "b"})
    db.save_meat_cut_override("pork", "belly", 0, {"note": "c"})
    overrides = db.get_meat_cut_overrides()
    assert [o.id for o in overrides] == ["pork_belly_0", "beef_rib_1"]
    assert overrides[0].fields["note"] == "c"


def test_stored_overrides_merge(db):
    db.save_meat_cut_override("pork", "belly", 0, {"note": "저장됨", "aliases": ["오겹"]})
    merged = merge_overrides(MEAT_DATA_MAP["pork"], db.get_meat_cut_overrides(), "pork")
    cut = merged.categories["belly"].cuts[0]
    assert cut.note == "저장됨"
    assert cut.aliases == ("오겹",)


def test_delete_meat_cut_override(db):
    db.save_meat_cut_override("chicken", "wing", 2, {"note": "x"})
    assert db.delete_meat_cut_override("chicken", "wing", 2)
    assert db.get_meat_cut_overrides() == []
    assert not db.delete_meat_cut_override("chicken", "wing", 2)


# ── 미디어 레코드 ──

def _media(peak_code, category="approved", path="x.jpg"):
    return SpecMedia(
        peak_code=peak_code,
        base_code=peak_code[:10],
        type="cross_section",
        category=category,
        path=path,
        file_name=path,
        file_size=10,
        mime_type="image/jpeg",
    )


def test_spec_media_queries(db):
    db.add_spec_media(_media("2-FP180001-2CM", path="a.jpg"))
    db.add_spec_media(_media("2-FP180001-3CM", path="b.jpg"))
    db.add_spec_media(_media("2-FP180001-2CM", category="rejected", path="c.jpg"))

    assert [m.path for m in db.get_spec_media("2-FP180001-2CM")] == ["c.jpg", "a.jpg"]
    assert [m.path for m in db.get_spec_media("2-FP180001-2CM", "approved")] == ["a.jpg"]
    assert [m.path for m in db.get_media_by_base_code("2-FP180001")] == ["c.jpg", "b.jpg", "a.jpg"]
    assert [m.path for m in db.get_media_by_base_code("2-FP180001", "approved")] == ["b.jpg", "a.jpg"]


def test_add_spec_media_assigns_id(db):
    media = _media("2-FP180001-2CM")
    media_id = db.add_spec_media(media)
    assert media.id == media_id
    assert db.get_spec_media("2-FP180001-2CM")[0].id == media_id
    assert db.delete_spec_media(media_id)


def test_add_spec_media_rejects_path_hostile_code(db):
    with pytest.raises(StorageKeyError):
        db.add_spec_media(_media("2-FP180001/2CM"))


def test_collections_are_separate(db):
    db.save_product_spec(_products()[0])
    assert db.list_documents(MEAT_DICTIONARY) == []
    assert len(db.list_documents(PRODUCT_SPECS)) == 1
