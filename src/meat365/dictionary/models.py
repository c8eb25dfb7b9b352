"""육류 부위 사전 데이터 모델"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Mapping, Optional

MEAT_TYPES = ("pork", "beef", "chicken")


@dataclass(frozen=True)
class MeatCut:
    """부위 1개. 공급처/거래와 무관한 명칭 사전 항목."""
    ko: str                          # 한국어
    en: str                          # 영어
    th: str                          # 태국어
    us: str                          # 미국식 명칭
    peak_code: Optional[str] = None  # Peak 부위코드 4자리 (없으면 사전 전용)
    my: Optional[str] = None         # 미얀마어 (없으면 en)
    ar: Optional[str] = None         # 아랍어 (할랄 - 소/닭)
    ar_ko: Optional[str] = None      # 아랍어 한글 발음
    note: Optional[str] = None
    aliases: tuple[str, ...] = ()    # 검색용 별칭

    def search_text(self) -> str:
        """사전 검색 대상 문자열 (소문자)"""
        parts = [self.ko, self.en, self.th, self.my or "", self.us, self.peak_code or ""]
        parts.extend(self.aliases)
        return " ".join(parts).lower()


MEAT_CUT_FIELDS = tuple(f.name for f in fields(MeatCut))


@dataclass(frozen=True)
class CategoryName:
    ko: str
    en: str
    th: str
    my: Optional[str] = None
    ar: Optional[str] = None


@dataclass(frozen=True)
class MeatCategory:
    """축종 내 부위 그룹. cuts 순서는 오버라이드 인덱스와 표시 순서를 결정한다."""
    name: CategoryName
    cuts: tuple[MeatCut, ...] = ()


@dataclass(frozen=True, eq=True)
class MeatData:
    """축종별 최상위 컨테이너"""
    name: CategoryName
    color: str
    icon: str
    is_halal: bool = False
    categories: Mapping[str, MeatCategory] = field(default_factory=dict)

    def __post_init__(self):
        # 읽기 전용 매핑으로 고정
        if not isinstance(self.categories, MappingProxyType):
            object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))

    def cut_count(self) -> int:
        return sum(len(cat.cuts) for cat in self.categories.values())


@dataclass(frozen=True)
class CutMatch:
    """사전 조회/검색 결과 1건"""
    meat_type: str
    category_key: str
    index: int
    cut: MeatCut


@dataclass(frozen=True)
class MeatStats:
    pork: int
    beef: int
    chicken: int

    @property
    def total(self) -> int:
        return self.pork + self.beef + self.chicken

    @property
    def by_type(self) -> dict[str, int]:
        return {"pork": self.pork, "beef": self.beef, "chicken": self.chicken}
