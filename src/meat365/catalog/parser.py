"""Peak 제품 코드 파서

코드 형식: [거래유형]-[보관][축종][공급처2자리][부위4자리][변형]
    2-FP180001-2CM   → 변형 "2CM" (하이픈 구분)
    1-CB050501W3.5   → 변형 "W3.5" (하이픈 없음)
    2-FP180001-TH-6  → 변형 "TH-6" (변형 내부 하이픈 허용)

코드는 문서 저장소의 키와 스토리지 경로로 그대로 쓰이므로
'/' 와 '\\' 가 들어간 코드는 형식이 맞아도 거부한다.
"""

import re
from typing import Optional

from .models import ProductCode

TRADE_TYPES = ("1", "2")
STORAGES = ("C", "F")
SPECIES = ("P", "B", "C")

PATH_HOSTILE_CHARS = ("/", "\\")

# 고정폭 헤드: 부위코드 4자리까지
HEAD_PATTERN = re.compile(r"^([0-9])-([CF])([PBC])([0-9]{2})([0-9]{4})")
# 변형 문자: 영문, 숫자, 점, 하이픈, 슬래시
VARIANT_PATTERN = re.compile(r"[A-Za-z0-9.\-/]+")
BASE_CODE_PATTERN = re.compile(r"^([0-9]-[CF][PBC][0-9]{2}[0-9]{4})")


class StorageKeyError(Exception):
    """저장소 키로 쓸 수 없는 코드"""
    def __init__(self, code: str, message: str = ""):
        self.code = code
        super().__init__(f"Invalid storage key [{code!r}]: {message}")


def is_path_hostile(code: str) -> bool:
    return any(ch in code for ch in PATH_HOSTILE_CHARS)


def ensure_storage_key(code: str) -> str:
    """문서 ID / 스토리지 경로에 쓰기 전 검증. 통과하면 그대로 반환.

    Raises:
        StorageKeyError: 빈 문자열이거나 경로 문자('/', '\\')를 포함할 때
    """
    if not isinstance(code, str) or not code.strip():
        raise StorageKeyError(str(code), "empty key")
    if is_path_hostile(code):
        raise StorageKeyError(code, "contains path separator")
    return code


def parse_peak_code(code: str) -> Optional[ProductCode]:
    """Peak 코드를 파싱한다.

    형식 불일치는 일괄 Import 에서 흔한 일이므로 예외 대신 None 을 반환한다.

    Args:
        code: 임의의 문자열

    Returns:
        ProductCode, 또는 형식 불일치/경로 문자 포함 시 None
    """
    if not code or not isinstance(code, str):
        return None
    if is_path_hostile(code):
        return None

    head = HEAD_PATTERN.match(code)
    if not head:
        return None

    rest = code[head.end():]
    variant = _parse_variant(rest)
    if variant is False:
        return None

    trade_type, storage, species, supplier_code, part_code = head.groups()
    return ProductCode(
        trade_type=trade_type,
        storage=storage,
        species=species,
        supplier_code=supplier_code,
        part_code=part_code,
        variant=variant,
    )


def _parse_variant(rest: str):
    """부위코드 뒤 나머지에서 변형을 추출. 형식 불일치면 False."""
    # 1) 변형 없음
    if not rest:
        return None

    # 2) 하이픈 구분 변형: 앞 하이픈 하나만 제거. 하이픈만 남으면 변형 없음
    if rest.startswith("-"):
        variant = rest[1:]
        if not variant:
            return None
        if VARIANT_PATTERN.fullmatch(variant):
            return variant
        return False

    # 3) 하이픈 없이 붙은 변형: 숫자로 시작하면 부위코드 자릿수 초과
    if rest[0] in "0123456789":
        return False
    if VARIANT_PATTERN.fullmatch(rest):
        return rest
    return False


def format_peak_code(
    trade_type: str,
    storage: str,
    species: str,
    supplier_code: str,
    part_code: str,
    variant: Optional[str] = None,
) -> str:
    """필드에서 Peak 코드를 만든다 (parse_peak_code 의 역).

    Raises:
        ValueError: 필드가 코드 문법에 맞지 않을 때
    """
    if not re.fullmatch(r"[0-9]", trade_type or ""):
        raise ValueError(f"trade_type must be one digit: {trade_type!r}")
    if storage not in STORAGES:
        raise ValueError(f"storage must be one of {STORAGES}: {storage!r}")
    if species not in SPECIES:
        raise ValueError(f"species must be one of {SPECIES}: {species!r}")
    if not re.fullmatch(r"[0-9]{2}", supplier_code or ""):
        raise ValueError(f"supplier_code must be 2 digits: {supplier_code!r}")
    if not re.fullmatch(r"[0-9]{4}", part_code or ""):
        raise ValueError(f"part_code must be 4 digits: {part_code!r}")

    code = f"{trade_type}-{storage}{species}{supplier_code}{part_code}"
    if variant:
        if not VARIANT_PATTERN.fullmatch(variant) or is_path_hostile(variant):
            raise ValueError(f"invalid variant: {variant!r}")
        code += f"-{variant}"
    return code


def format_product_code(parsed: ProductCode) -> str:
    return format_peak_code(
        parsed.trade_type,
        parsed.storage,
        parsed.species,
        parsed.supplier_code,
        parsed.part_code,
        parsed.variant,
    )


def get_base_code(code: str) -> str:
    """변형을 뗀 기본 코드. 형식이 맞지 않으면 입력 그대로."""
    m = BASE_CODE_PATTERN.match(code or "")
    return m.group(1) if m else code


def is_known_trade_type(trade_type: str) -> bool:
    return trade_type in TRADE_TYPES
