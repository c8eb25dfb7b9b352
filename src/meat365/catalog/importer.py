"""Peak 제품 일괄 Import

스프레드시트에서 내보낸 행 (code, type, name, unit, ...) 을 ProductSpec 으로 변환한다.
Type 이 "Product" 인 행만 대상. 코드 형식이 맞지 않는 행은 건너뛰고 집계만 한다.
"""

import csv
import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional, Union

from meat365.dictionary.lookup import get_part_names
from meat365.locale import SPECIES_TO_MEAT_TYPE, LocalizedText

from .models import ImportResult, ProductSpec
from .parser import parse_peak_code

logger = logging.getLogger(__name__)

PRODUCT_TYPE = "Product"
DEFAULT_UNIT = "Kg."
CSV_COLUMNS = ("code", "type", "name", "unit")

THAI_PATTERN = re.compile(r"[\u0E00-\u0E7F]+[0-9.\s]*")
ENGLISH_PATTERN = re.compile(r"[A-Za-z]+(?:\s+[A-Za-z]+)*")

# 부위 사전에 아직 없는 Peak 부위코드 (Import 명칭 보충용)
EXTRA_PART_NAMES = {
    "0512": LocalizedText(ko="안창살", th="พับนอก", my="အပြင်သား", en="Outside Skirt"),
}


def extract_names(name: str) -> LocalizedText:
    """제품명에서 태국어/영어 부분을 뽑는다 (한국어는 부위 사전에서)"""
    if not name:
        return LocalizedText()
    text = str(name)
    th = " ".join(THAI_PATTERN.findall(text)).strip()
    en = " ".join(w for w in ENGLISH_PATTERN.findall(text) if len(w) > 1).strip()
    return LocalizedText(th=th, en=en)


def _cell(row: Sequence, index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def build_product_spec(row: Sequence, sort_order: int = 0) -> Optional[ProductSpec]:
    """행 1개 → ProductSpec. Product 행이 아니거나 코드 형식 불일치면 None.

    Args:
        row: (code, type, name, unit, ...)
        sort_order: 표시 순서

    Returns:
        ProductSpec 또는 None
    """
    code = _cell(row, 0)
    if _cell(row, 1) != PRODUCT_TYPE:
        return None

    parsed = parse_peak_code(code)
    if parsed is None:
        return None

    part = get_part_names(parsed.part_code, SPECIES_TO_MEAT_TYPE.get(parsed.species))
    if not part.ko:
        part = EXTRA_PART_NAMES.get(parsed.part_code, part)
    suffix = f" {parsed.variant}" if parsed.variant else ""
    base = part.suffixed(suffix)
    from_name = extract_names(_cell(row, 2))

    names = LocalizedText(
        ko=base.ko,
        th=from_name.th or base.th,
        my=base.my,
        en=from_name.en or base.en,
    )

    return ProductSpec.from_code(
        code,
        parsed,
        names=names,
        search_terms=f"{names.ko} {names.th} {names.en} {code}".lower(),
        unit=_cell(row, 3) or DEFAULT_UNIT,
        sort_order=sort_order,
        created_by="import",
    )


def import_rows(rows: Iterable[Sequence]) -> ImportResult:
    """여러 행을 변환한다. 실패한 행은 건너뛰고 계속 진행."""
    result = ImportResult()
    for row in rows:
        if _cell(row, 1) != PRODUCT_TYPE:
            result.not_products += 1
            continue
        spec = build_product_spec(row, sort_order=len(result.products))
        if spec is None:
            code = _cell(row, 0)
            logger.warning("[SKIP] Invalid code format: %s", code)
            result.skipped.append(code)
            continue
        result.products.append(spec)

    logger.info(
        "imported %d products (%d skipped, %d non-product rows)",
        len(result.products), len(result.skipped), result.not_products,
    )
    return result


def read_rows_csv(path: Union[str, Path]) -> list[tuple[str, ...]]:
    """CSV (헤더: code,type,name,unit) → 행 튜플 목록"""
    rows = []
    with Path(path).open("r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        for record in reader:
            if not record:
                continue
            rows.append(tuple((record.get(col) or "").strip() for col in CSV_COLUMNS))
    return rows
