"""Peak 제품 코드 / 카탈로그"""

from .importer import build_product_spec, import_rows, read_rows_csv
from .models import FilterState, ImportResult, MediaCount, ProductCode, ProductSpec
from .parser import (
    StorageKeyError,
    ensure_storage_key,
    format_peak_code,
    get_base_code,
    parse_peak_code,
)
from .searcher import apply_filters, filter_products, only_active, search_products, tokenize_query

__all__ = [
    "FilterState",
    "ImportResult",
    "MediaCount",
    "ProductCode",
    "ProductSpec",
    "StorageKeyError",
    "apply_filters",
    "build_product_spec",
    "ensure_storage_key",
    "filter_products",
    "format_peak_code",
    "get_base_code",
    "import_rows",
    "only_active",
    "parse_peak_code",
    "read_rows_csv",
    "search_products",
    "tokenize_query",
]
