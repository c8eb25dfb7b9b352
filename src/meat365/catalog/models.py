"""제품 카탈로그 데이터 모델 정의"""

from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Optional

from meat365.locale import SPECIES_TO_MEAT_TYPE, LocalizedText


@dataclass(frozen=True)
class ProductCode:
    """Peak 코드 파싱 결과 (예: 2-FP180001-2CM)"""
    trade_type: str              # 1=구매, 2=판매
    storage: str                 # C=냉장, F=냉동
    species: str                 # P=돼지, B=소, C=닭
    supplier_code: str           # 공급처 2자리
    part_code: str               # 부위 4자리
    variant: Optional[str] = None  # 2CM, T6, W3.5 등

    @property
    def base_code(self) -> str:
        return f"{self.trade_type}-{self.storage}{self.species}{self.supplier_code}{self.part_code}"

    @property
    def code(self) -> str:
        if self.variant:
            return f"{self.base_code}-{self.variant}"
        return self.base_code

    @property
    def meat_type(self) -> Optional[str]:
        return SPECIES_TO_MEAT_TYPE.get(self.species)

    def __str__(self) -> str:
        return self.code


@dataclass
class MediaCount:
    cross_section: int = 0
    defect: int = 0
    process_video: int = 0


@dataclass
class ProductSpec:
    """제품 스펙 마스터 (peak_code 가 곧 문서 ID)"""
    peak_code: str
    base_code: str
    trade_type: str
    storage: str
    species: str
    supplier_code: str
    part_code: str
    variant: Optional[str] = None
    names: LocalizedText = field(default_factory=LocalizedText)
    search_terms: str = ""
    aliases: list[str] = field(default_factory=list)
    specs: dict = field(default_factory=dict)   # 중량범위, 수율, 두께, 유통기한 등
    media_count: MediaCount = field(default_factory=MediaCount)
    unit: str = "Kg."
    is_active: bool = True
    sort_order: int = 0
    created_by: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_code(cls, peak_code: str, parsed: ProductCode, **kwargs) -> "ProductSpec":
        return cls(
            peak_code=peak_code,
            base_code=parsed.base_code,
            trade_type=parsed.trade_type,
            storage=parsed.storage,
            species=parsed.species,
            supplier_code=parsed.supplier_code,
            part_code=parsed.part_code,
            variant=parsed.variant,
            **kwargs,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ProductSpec":
        data = dict(data)
        data.pop("id", None)
        names = data.pop("names", None) or {}
        media_count = data.pop("media_count", None) or {}
        known = cls.__dataclass_fields__
        return cls(
            names=LocalizedText(**names),
            media_count=MediaCount(**media_count),
            **{k: v for k, v in data.items() if k in known},
        )


@dataclass
class FilterState:
    """카탈로그 필터 상태 (None 또는 "all" = 제한 없음)"""
    trade_type: Optional[str] = None
    species: Optional[str] = None
    storage: Optional[str] = None
    part_code: Optional[str] = None
    supplier_code: Optional[str] = None
    search_query: str = ""


@dataclass
class ImportResult:
    """일괄 Import 결과"""
    products: list[ProductSpec] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # 코드 형식 불일치
    not_products: int = 0                             # Type != Product 행

    @property
    def by_species(self) -> Counter:
        return Counter(p.species for p in self.products)

    @property
    def by_trade_type(self) -> Counter:
        return Counter(p.trade_type for p in self.products)
