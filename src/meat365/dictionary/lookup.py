"""부위 사전 조회 - Peak 부위코드 / 다국어 키워드 검색"""

from collections.abc import Iterator, Mapping
from typing import Optional

from meat365.locale import LocalizedText, resolve

from .data import MEAT_DATA_MAP
from .models import CutMatch, MeatCategory, MeatData, MeatStats


def _select(meat_type: Optional[str], data_map: Mapping[str, MeatData]):
    if meat_type is None:
        return data_map.items()
    data = data_map.get(meat_type)
    return [(meat_type, data)] if data is not None else []


def iter_cuts(
    meat_type: Optional[str] = None,
    data_map: Mapping[str, MeatData] = MEAT_DATA_MAP,
) -> Iterator[CutMatch]:
    """축종 → 카테고리 → 부위 순으로 전체 부위를 순회"""
    for type_key, data in _select(meat_type, data_map):
        for category_key, category in data.categories.items():
            for index, cut in enumerate(category.cuts):
                yield CutMatch(type_key, category_key, index, cut)


def find_cut_by_peak_code(
    part_code: str,
    meat_type: Optional[str] = None,
    data_map: Mapping[str, MeatData] = MEAT_DATA_MAP,
) -> Optional[CutMatch]:
    """Peak 부위코드(4자리)로 부위를 찾는다. 첫 번째 일치 항목, 없으면 None."""
    if not part_code:
        return None
    for match in iter_cuts(meat_type, data_map):
        if match.cut.peak_code == part_code:
            return match
    return None


def search_meat_cuts(
    query: str,
    meat_type: Optional[str] = None,
    data_map: Mapping[str, MeatData] = MEAT_DATA_MAP,
) -> list[CutMatch]:
    """다국어 부분 일치 검색 (대소문자 무시). 순서는 사전 순회 순서.

    Args:
        query: 검색어. 빈 문자열이면 전체 부위
        meat_type: pork / beef / chicken (None 이면 전체 축종)
        data_map: 검색 대상 (오버라이드 병합본을 넘길 수 있다)
    """
    needle = (query or "").lower()
    return [m for m in iter_cuts(meat_type, data_map) if needle in m.cut.search_text()]


def filter_categories(
    meat_type: str,
    query: str = "",
    data_map: Mapping[str, MeatData] = MEAT_DATA_MAP,
) -> dict[str, MeatCategory]:
    """검색 결과를 카테고리별로 다시 묶는다 (사전 화면 표시용).

    검색어가 없으면 해당 축종의 카테고리 전체. 일치 부위가 없는 카테고리는 제외.
    """
    data = data_map.get(meat_type)
    if data is None:
        return {}
    if not (query or "").strip():
        return dict(data.categories)

    grouped: dict[str, list] = {}
    for match in search_meat_cuts(query, meat_type, data_map):
        grouped.setdefault(match.category_key, []).append(match.cut)

    return {
        key: MeatCategory(name=data.categories[key].name, cuts=tuple(cuts))
        for key, cuts in grouped.items()
    }


def get_meat_stats(data_map: Mapping[str, MeatData] = MEAT_DATA_MAP) -> MeatStats:
    counts = {key: data.cut_count() for key, data in data_map.items()}
    return MeatStats(
        pork=counts.get("pork", 0),
        beef=counts.get("beef", 0),
        chicken=counts.get("chicken", 0),
    )


def get_part_name(part_code: str, locale: str = "ko") -> Optional[str]:
    """부위코드의 로케일별 명칭 (my 는 en 폴백). 사전에 없으면 None."""
    match = find_cut_by_peak_code(part_code)
    if match is None:
        return None
    return resolve(locale, match.cut)


def get_part_names(part_code: str, meat_type: Optional[str] = None) -> LocalizedText:
    """부위코드의 4개 언어 명칭. 사전에 없으면 빈 명칭."""
    match = find_cut_by_peak_code(part_code, meat_type)
    if match is None:
        return LocalizedText()
    cut = match.cut
    return LocalizedText(ko=cut.ko, th=cut.th, my=cut.my or cut.en, en=cut.en)
