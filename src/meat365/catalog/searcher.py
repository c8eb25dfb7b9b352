"""제품 카탈로그 필터/검색

화면에서 필터나 검색어가 바뀔 때마다 메모리의 제품 목록에 다시 적용하는 순수 함수.
입력 순서를 유지하고 순위는 매기지 않는다.
"""

from collections.abc import Iterable
from typing import Optional

from .models import FilterState, ProductSpec

ALL = "all"

# 필터 키 → ProductSpec 속성
FILTER_FIELDS = ("trade_type", "species", "storage", "part_code", "supplier_code")


def _is_unset(value: Optional[str]) -> bool:
    return value is None or value == ALL


def filter_products(
    records: Iterable[ProductSpec],
    trade_type: Optional[str] = None,
    species: Optional[str] = None,
    storage: Optional[str] = None,
    part_code: Optional[str] = None,
    supplier_code: Optional[str] = None,
) -> list[ProductSpec]:
    """구조 필터 (완전 일치 AND). None 또는 "all" 은 제한 없음."""
    wanted = {
        name: value
        for name, value in zip(
            FILTER_FIELDS, (trade_type, species, storage, part_code, supplier_code)
        )
        if not _is_unset(value)
    }
    return [
        r for r in records
        if all(getattr(r, name) == value for name, value in wanted.items())
    ]


def tokenize_query(text: Optional[str]) -> list[str]:
    """공백으로 나누고 소문자로. 빈 토큰은 버린다."""
    return [t.lower() for t in (text or "").split() if t]


def haystack(record: ProductSpec) -> str:
    """검색 대상 문자열: 코드, 각 언어 이름, searchTerms, 부위/공급처 코드, 별칭"""
    names = record.names
    parts = [
        record.peak_code,
        names.ko, names.th, names.en, names.my,
        record.search_terms,
        record.part_code,
        record.supplier_code,
    ]
    parts.extend(record.aliases or [])
    return " ".join(p for p in parts if p).lower()


def search_products(records: Iterable[ProductSpec], query: Optional[str]) -> list[ProductSpec]:
    """자유 검색. 모든 토큰이 포함된 제품만 (AND). 검색어가 비면 전체."""
    tokens = tokenize_query(query)
    if not tokens:
        return list(records)
    return [r for r in records if _matches(haystack(r), tokens)]


def _matches(text: str, tokens: list[str]) -> bool:
    return all(token in text for token in tokens)


def only_active(records: Iterable[ProductSpec]) -> list[ProductSpec]:
    return [r for r in records if r.is_active]


def apply_filters(records: Iterable[ProductSpec], state: FilterState) -> list[ProductSpec]:
    """FilterState 전체 적용: 구조 필터 후 자유 검색"""
    filtered = filter_products(
        records,
        trade_type=state.trade_type,
        species=state.species,
        storage=state.storage,
        part_code=state.part_code,
        supplier_code=state.supplier_code,
    )
    return search_products(filtered, state.search_query)
