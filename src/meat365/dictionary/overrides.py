"""부위 사전 오버라이드 병합

관리자가 수정한 부위 항목(meatDictionary 컬렉션)을 정적 사전 위에 덮어써
실제로 표시할 MeatData 를 만든다. 정적 사전은 절대 변경하지 않는다.

문서 ID 형식: "{meat_type}_{category_key}_{cut_index}"
카테고리 키에 '_' 가 들어갈 수 있으므로 인덱스는 마지막 세그먼트에서 읽는다.

위치 인덱스만으로는 정적 데이터 순서가 바뀌었을 때 엉뚱한 부위를 덮어쓰게 되므로,
저장 시 cut_key (meat_type|category_key|ko|en 의 해시) 를 함께 기록한다.
병합 시 인덱스 위치의 부위가 cut_key 와 다르면 같은 카테고리에서 cut_key 로 다시 찾고,
찾지 못하면 오래된 오버라이드로 보고 건너뛴다. cut_key 가 없는 기존 문서는 인덱스만 사용.
"""

import hashlib
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Optional

from .data import MEAT_DATA_MAP
from .models import MEAT_CUT_FIELDS, MEAT_TYPES, MeatCategory, MeatCut, MeatData

logger = logging.getLogger(__name__)

# 저장 문서(camelCase) ↔ MeatCut 필드
_DOC_TO_FIELD = {"peakCode": "peak_code", "arKo": "ar_ko"}
_FIELD_TO_DOC = {v: k for k, v in _DOC_TO_FIELD.items()}

_META_KEYS = {
    "id", "meatType", "categoryKey", "cutKey", "createdAt", "updatedAt",
    "meat_type", "category_key", "cut_key", "created_at", "updated_at",
}


class UnknownMeatTypeError(Exception):
    """축종 집합(pork/beef/chicken) 밖의 값으로 병합을 요청했을 때"""
    def __init__(self, meat_type: str):
        self.code = meat_type
        super().__init__(f"Unknown meat type [{meat_type!r}]: expected one of {MEAT_TYPES}")


def _check_meat_type(meat_type: str):
    if meat_type not in MEAT_TYPES:
        raise UnknownMeatTypeError(meat_type)


# ── 문서 ID ──

def make_override_id(meat_type: str, category_key: str, cut_index: int) -> str:
    return f"{meat_type}_{category_key}_{cut_index}"


def parse_override_id(doc_id: str) -> Optional[tuple[str, str, int]]:
    """문서 ID → (meat_type, category_key, cut_index). 형식이 아니면 None."""
    if not doc_id:
        return None
    head, sep, index = doc_id.rpartition("_")
    if not sep:
        return None
    meat_type, sep, category_key = head.partition("_")
    if not sep or not meat_type or not category_key:
        return None
    if not index or not all(ch in "0123456789" for ch in index):
        return None
    return meat_type, category_key, int(index)


def cut_key(meat_type: str, category_key: str, cut: MeatCut) -> str:
    """부위 항목의 안정 키 (순서 변경에 영향받지 않음)"""
    raw = f"{meat_type}|{category_key}|{cut.ko}|{cut.en}"
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()[:12]


# ── 모델 ──

@dataclass
class MeatCutOverride:
    """meatDictionary 문서 1건"""
    id: str
    meat_type: str
    category_key: str
    fields: dict[str, Any] = field(default_factory=dict)  # MeatCut 필드 일부
    cut_key: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def cut_index(self) -> Optional[int]:
        parsed = parse_override_id(self.id)
        return parsed[2] if parsed else None

    def to_dict(self) -> dict:
        """저장 문서 형태 (부위 필드 평탄화 + meatType/categoryKey)"""
        doc = {_FIELD_TO_DOC.get(k, k): (list(v) if isinstance(v, tuple) else v)
               for k, v in self.fields.items()}
        doc["meatType"] = self.meat_type
        doc["categoryKey"] = self.category_key
        if self.cut_key:
            doc["cutKey"] = self.cut_key
        if self.created_at:
            doc["createdAt"] = self.created_at
        if self.updated_at:
            doc["updatedAt"] = self.updated_at
        return doc

    @classmethod
    def from_dict(cls, doc_id: str, data: Mapping[str, Any]) -> "MeatCutOverride":
        fields_ = {}
        for key, value in data.items():
            if key in _META_KEYS:
                continue
            name = _DOC_TO_FIELD.get(key, key)
            if name in MEAT_CUT_FIELDS:
                fields_[name] = value
        return cls(
            id=doc_id,
            meat_type=data.get("meatType") or data.get("meat_type") or "",
            category_key=data.get("categoryKey") or data.get("category_key") or "",
            fields=fields_,
            cut_key=data.get("cutKey") or data.get("cut_key"),
            created_at=data.get("createdAt") or data.get("created_at"),
            updated_at=data.get("updatedAt") or data.get("updated_at"),
        )


def build_override(
    meat_type: str,
    category_key: str,
    cut_index: int,
    fields: Mapping[str, Any],
    static_data: Mapping[str, MeatData] = MEAT_DATA_MAP,
) -> MeatCutOverride:
    """정적 사전에 실제로 존재하는 부위에 대한 오버라이드를 만든다.

    Raises:
        UnknownMeatTypeError: 축종이 pork/beef/chicken 이 아닐 때
        KeyError: 카테고리가 없을 때
        IndexError: 인덱스가 범위 밖일 때
    """
    _check_meat_type(meat_type)
    category = static_data[meat_type].categories[category_key]
    if not 0 <= cut_index < len(category.cuts):
        raise IndexError(f"{meat_type}/{category_key} has no cut at index {cut_index}")

    unknown = set(fields) - set(MEAT_CUT_FIELDS)
    if unknown:
        raise KeyError(f"unknown cut fields: {sorted(unknown)}")

    return MeatCutOverride(
        id=make_override_id(meat_type, category_key, cut_index),
        meat_type=meat_type,
        category_key=category_key,
        fields=dict(fields),
        cut_key=cut_key(meat_type, category_key, category.cuts[cut_index]),
    )


# ── 병합 ──

def _apply(cut: MeatCut, fields: Mapping[str, Any]) -> MeatCut:
    changes = {}
    for name, value in fields.items():
        if name not in MEAT_CUT_FIELDS or value is None:
            continue
        if name == "aliases":
            value = (value,) if isinstance(value, str) else tuple(value)
        changes[name] = value
    return replace(cut, **changes) if changes else cut


def _locate(meat_type: str, category_key: str, cuts: tuple[MeatCut, ...], override: MeatCutOverride) -> Optional[int]:
    index = override.cut_index
    if override.cut_key is None:
        if index is None or not 0 <= index < len(cuts):
            return None
        return index

    if index is not None and 0 <= index < len(cuts):
        if cut_key(meat_type, category_key, cuts[index]) == override.cut_key:
            return index
    for i, cut in enumerate(cuts):
        if cut_key(meat_type, category_key, cut) == override.cut_key:
            return i
    return None


def merge_overrides(
    static_data: MeatData,
    overrides: Iterable[MeatCutOverride],
    meat_type: str,
) -> MeatData:
    """오버라이드를 적용한 새 MeatData 를 반환한다 (static_data 는 그대로).

    Args:
        static_data: 해당 축종의 정적 사전
        overrides: 저장된 오버라이드 전체 (다른 축종 항목은 무시)
        meat_type: pork / beef / chicken

    Returns:
        MeatData 사본. 적용할 오버라이드가 없으면 static_data 와 같은 값

    Raises:
        UnknownMeatTypeError: meat_type 이 축종 집합 밖일 때
    """
    _check_meat_type(meat_type)

    # 카테고리별 부위 목록 사본. 원본 cut 은 불변 객체라 교체만 한다
    working = {key: list(cat.cuts) for key, cat in static_data.categories.items()}
    # cut_key 는 정적 순서 기준으로 계산
    originals = {key: tuple(cuts) for key, cuts in working.items()}

    for override in overrides:
        if override.meat_type != meat_type:
            continue
        cuts = working.get(override.category_key)
        if cuts is None:
            logger.debug("override %s skipped: unknown category", override.id)
            continue
        index = _locate(meat_type, override.category_key, originals[override.category_key], override)
        if index is None:
            logger.debug("override %s skipped: stale index", override.id)
            continue
        cuts[index] = _apply(cuts[index], override.fields)

    categories = {
        key: MeatCategory(name=cat.name, cuts=tuple(working[key]))
        for key, cat in static_data.categories.items()
    }
    return replace(static_data, categories=categories)


def merged_meat_data_map(
    overrides: Iterable[MeatCutOverride],
    static_map: Mapping[str, MeatData] = MEAT_DATA_MAP,
) -> Mapping[str, MeatData]:
    """3개 축종 모두에 오버라이드를 적용한 읽기 전용 맵"""
    overrides = list(overrides)
    return MappingProxyType({
        meat_type: merge_overrides(data, overrides, meat_type)
        for meat_type, data in static_map.items()
    })
