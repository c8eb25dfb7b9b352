"""제품 스펙 SQLite 문서 저장소

컬렉션/문서 ID/JSON 본문 구조의 단순한 키-값 저장소.
문서 ID 는 제품 코드나 오버라이드 ID 를 그대로 쓰므로 ensure_storage_key 로 검증한다.
"""

import json
import logging
import os
import sqlite3
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from meat365.catalog.models import ProductSpec
from meat365.catalog.parser import ensure_storage_key
from meat365.dictionary.overrides import MeatCutOverride, build_override, make_override_id
from meat365.media import SpecMedia

logger = logging.getLogger(__name__)

DB_FILE_NAME = "meat365.db"

PRODUCT_SPECS = "productSpecs"
MEAT_DICTIONARY = "meatDictionary"
SPEC_MEDIA = "specMedia"
COLLECTIONS = (PRODUCT_SPECS, MEAT_DICTIONARY, SPEC_MEDIA)


def _now() -> str:
    return datetime.now().isoformat(timespec="microseconds")


def default_db_path() -> Path:
    """MEAT365_DB_PATH (.env 포함) 또는 ./meat365.db. 호출 시점에 읽는다."""
    return Path(os.environ.get("MEAT365_DB_PATH") or Path.cwd() / DB_FILE_NAME)


class SpecDB:
    """제품 스펙 / 부위 사전 오버라이드 / 미디어 레코드 저장소"""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path) if db_path else default_db_path()
        self._conn: Optional[sqlite3.Connection] = None
        self._init_db()

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _init_db(self):
        """테이블 생성"""
        self.conn.executescript("""
            CREATE TABLE IF NOT EXISTS documents (
                collection TEXT NOT NULL,
                id TEXT NOT NULL,
                data TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                PRIMARY KEY (collection, id)
            );

            CREATE INDEX IF NOT EXISTS idx_documents_updated
                ON documents(collection, updated_at);
        """)
        self.conn.commit()

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # ── 범용 문서 ──

    @staticmethod
    def _row_to_doc(row: sqlite3.Row) -> dict:
        doc = json.loads(row["data"])
        doc["id"] = row["id"]
        return doc

    def get_document(self, collection: str, doc_id: str) -> Optional[dict]:
        row = self.conn.execute(
            "SELECT id, data FROM documents WHERE collection = ? AND id = ?",
            (collection, doc_id),
        ).fetchone()
        return self._row_to_doc(row) if row else None

    def list_documents(
        self,
        collection: str,
        order_by: Optional[str] = None,
        descending: bool = False,
        **where: Any,
    ) -> list[dict]:
        """조건(필드 = 값, AND)에 맞는 문서 목록.

        Args:
            collection: 컬렉션 이름
            order_by: 정렬 필드. "updated_at" 은 저장 시각, 그 외는 문서 필드
            descending: 내림차순
            **where: 문서 필드 = 값 (None 값은 조건에서 제외)
        """
        sql = "SELECT id, data FROM documents WHERE collection = ?"
        params: list[Any] = [collection]
        for key, value in where.items():
            if value is None:
                continue
            sql += " AND json_extract(data, ?) = ?"
            params.extend([f"$.{key}", value])

        direction = "DESC" if descending else "ASC"
        if order_by == "updated_at":
            sql += f" ORDER BY updated_at {direction}, rowid {direction}"
        elif order_by:
            sql += f" ORDER BY json_extract(data, ?) {direction}, rowid {direction}"
            params.append(f"$.{order_by}")
        else:
            sql += " ORDER BY rowid"

        rows = self.conn.execute(sql, params).fetchall()
        return [self._row_to_doc(r) for r in rows]

    def set_document(self, collection: str, doc_id: str, data: dict, merge: bool = True) -> str:
        """문서 저장. merge=True 면 기존 필드 위에 덮어쓴다."""
        ensure_storage_key(doc_id)
        data = {k: v for k, v in data.items() if k != "id"}
        now = _now()

        existing = self.get_document(collection, doc_id)
        if existing is None:
            self.conn.execute(
                "INSERT INTO documents (collection, id, data, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
                (collection, doc_id, json.dumps(data, ensure_ascii=False), now, now),
            )
        else:
            if merge:
                existing.pop("id")
                data = {**existing, **data}
            self.conn.execute(
                "UPDATE documents SET data = ?, updated_at = ? WHERE collection = ? AND id = ?",
                (json.dumps(data, ensure_ascii=False), now, collection, doc_id),
            )
        self.conn.commit()
        logger.debug("set %s/%s", collection, doc_id)
        return doc_id

    def add_document(self, collection: str, data: dict) -> str:
        """ID 를 새로 발급해 문서를 추가한다."""
        doc_id = uuid.uuid4().hex
        self.set_document(collection, doc_id, data, merge=False)
        return doc_id

    def delete_document(self, collection: str, doc_id: str) -> bool:
        cur = self.conn.execute(
            "DELETE FROM documents WHERE collection = ? AND id = ?",
            (collection, doc_id),
        )
        self.conn.commit()
        return cur.rowcount > 0

    # ── 제품 스펙 ──

    def save_product_spec(self, spec: ProductSpec) -> str:
        """제품 스펙 저장 (peak_code = 문서 ID). 기존 문서면 created_at 유지."""
        ensure_storage_key(spec.peak_code)
        now = _now()
        existing = self.get_document(PRODUCT_SPECS, spec.peak_code)
        data = spec.to_dict()
        data["created_at"] = (existing or {}).get("created_at") or spec.created_at or now
        data["updated_at"] = now
        return self.set_document(PRODUCT_SPECS, spec.peak_code, data)

    def save_product_specs(self, specs: list[ProductSpec]) -> int:
        for spec in specs:
            self.save_product_spec(spec)
        return len(specs)

    def get_product_spec(self, peak_code: str) -> Optional[ProductSpec]:
        doc = self.get_document(PRODUCT_SPECS, peak_code)
        return ProductSpec.from_dict(doc) if doc else None

    def get_product_specs(
        self,
        species: Optional[str] = None,
        storage: Optional[str] = None,
        trade_type: Optional[str] = None,
    ) -> list[ProductSpec]:
        """활성 제품 목록 (sort_order 순)"""
        docs = self.list_documents(
            PRODUCT_SPECS,
            order_by="sort_order",
            is_active=True,
            species=species,
            storage=storage,
            trade_type=trade_type,
        )
        return [ProductSpec.from_dict(d) for d in docs]

    def get_product_specs_by_part(self, part_code: str) -> list[ProductSpec]:
        docs = self.list_documents(
            PRODUCT_SPECS, order_by="sort_order", is_active=True, part_code=part_code
        )
        return [ProductSpec.from_dict(d) for d in docs]

    def deactivate_product_spec(self, peak_code: str) -> bool:
        """소프트 삭제 (is_active = False). 문서가 없으면 False."""
        if self.get_document(PRODUCT_SPECS, peak_code) is None:
            return False
        self.set_document(PRODUCT_SPECS, peak_code, {"is_active": False, "updated_at": _now()})
        return True

    # ── 부위 사전 오버라이드 ──

    def save_meat_cut_override(
        self,
        meat_type: str,
        category_key: str,
        cut_index: int,
        fields: dict,
    ) -> str:
        """오버라이드 저장. 신규면 createdAt 도 기록, 기존이면 updatedAt 만 갱신.

        Raises:
            UnknownMeatTypeError, KeyError, IndexError: 정적 사전에 없는 부위
        """
        override = build_override(meat_type, category_key, cut_index, fields)
        now = _now()
        existing = self.get_document(MEAT_DICTIONARY, override.id)
        override.created_at = existing.get("createdAt") if existing else now
        override.updated_at = now
        return self.set_document(MEAT_DICTIONARY, override.id, override.to_dict())

    def get_meat_cut_overrides(self) -> list[MeatCutOverride]:
        """전체 오버라이드 (최근 수정 순)"""
        docs = self.list_documents(MEAT_DICTIONARY, order_by="updated_at", descending=True)
        return [MeatCutOverride.from_dict(d["id"], d) for d in docs]

    def delete_meat_cut_override(self, meat_type: str, category_key: str, cut_index: int) -> bool:
        return self.delete_document(MEAT_DICTIONARY, make_override_id(meat_type, category_key, cut_index))

    # ── 미디어 레코드 ──

    def add_spec_media(self, media: SpecMedia) -> str:
        ensure_storage_key(media.peak_code)
        media.id = self.add_document(SPEC_MEDIA, media.to_dict())
        return media.id

    def get_spec_media(self, peak_code: str, category: Optional[str] = None) -> list[SpecMedia]:
        docs = self.list_documents(
            SPEC_MEDIA, order_by="updated_at", descending=True,
            peak_code=peak_code, category=category,
        )
        return [SpecMedia.from_dict(d) for d in docs]

    def get_media_by_base_code(self, base_code: str, category: Optional[str] = None) -> list[SpecMedia]:
        """기본 코드가 같은 모든 변형 제품의 미디어"""
        docs = self.list_documents(
            SPEC_MEDIA, order_by="updated_at", descending=True,
            base_code=base_code, category=category,
        )
        return [SpecMedia.from_dict(d) for d in docs]

    def delete_spec_media(self, media_id: str) -> bool:
        return self.delete_document(SPEC_MEDIA, media_id)
