"""meat365 - Peak product code, multilingual meat-cut dictionary and spec catalog toolkit"""

__version__ = "0.1.0"

from meat365.catalog import ProductCode, ProductSpec, StorageKeyError, parse_peak_code
from meat365.db import SpecDB
from meat365.dictionary import MEAT_DATA_MAP, UnknownMeatTypeError, merge_overrides
from meat365.media import MediaError, MediaStore

__all__ = [
    "MEAT_DATA_MAP",
    "MediaError",
    "MediaStore",
    "ProductCode",
    "ProductSpec",
    "SpecDB",
    "StorageKeyError",
    "UnknownMeatTypeError",
    "merge_overrides",
    "parse_peak_code",
]
