"""육류 부위 명칭 사전"""

from .data import MEAT_DATA_MAP
from .lookup import (
    filter_categories,
    find_cut_by_peak_code,
    get_meat_stats,
    get_part_name,
    get_part_names,
    iter_cuts,
    search_meat_cuts,
)
from .models import MEAT_TYPES, CutMatch, MeatCategory, MeatCut, MeatData, MeatStats
from .overrides import (
    MeatCutOverride,
    UnknownMeatTypeError,
    build_override,
    merge_overrides,
    merged_meat_data_map,
)

__all__ = [
    "MEAT_DATA_MAP",
    "MEAT_TYPES",
    "CutMatch",
    "MeatCategory",
    "MeatCut",
    "MeatCutOverride",
    "MeatData",
    "MeatStats",
    "UnknownMeatTypeError",
    "build_override",
    "filter_categories",
    "find_cut_by_peak_code",
    "get_meat_stats",
    "get_part_name",
    "get_part_names",
    "iter_cuts",
    "merge_overrides",
    "merged_meat_data_map",
    "search_meat_cuts",
]
