"""다국어 명칭 상수 및 로케일 폴백"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# 라우팅 로케일 (고정)
LOCALES = ("ko", "th", "my", "en")
# 표시 전용 (할랄 축종의 아랍어)
DISPLAY_LOCALES = LOCALES + ("ar",)
DEFAULT_LOCALE = "ko"

# 로케일별 폴백 순서
FALLBACKS: dict[str, tuple[str, ...]] = {
    "ko": ("ko",),
    "th": ("th",),
    "en": ("en",),
    "my": ("my", "en"),
    "ar": ("ar", "en"),
}

SPECIES_TO_MEAT_TYPE = {"P": "pork", "B": "beef", "C": "chicken"}
MEAT_TYPE_TO_SPECIES = {v: k for k, v in SPECIES_TO_MEAT_TYPE.items()}

SPECIES_NAMES = {
    "P": {"ko": "돼지", "th": "หมู", "my": "ဝက်", "en": "Pork"},
    "B": {"ko": "소", "th": "เนื้อ", "my": "အမဲ", "en": "Beef"},
    "C": {"ko": "닭", "th": "ไก่", "my": "ကြက်", "en": "Chicken"},
}

STORAGE_NAMES = {
    "C": {"ko": "냉장", "th": "แช่เย็น", "my": "အအေး", "en": "Chilled"},
    "F": {"ko": "냉동", "th": "แช่แข็ง", "my": "အေးခဲ", "en": "Frozen"},
}

TRADE_TYPE_NAMES = {
    "1": {"ko": "구매", "th": "ซื้อ", "my": "ဝယ်ယူ", "en": "Purchase"},
    "2": {"ko": "판매", "th": "ขาย", "my": "ရောင်းချ", "en": "Sales"},
}


@dataclass
class LocalizedText:
    """ko/th/my/en 4개 언어 문자열"""
    ko: str = ""
    th: str = ""
    my: str = ""
    en: str = ""

    def suffixed(self, suffix: str) -> "LocalizedText":
        """각 언어 이름 뒤에 suffix 를 붙인 사본 (빈 이름은 그대로)"""
        if not suffix:
            return LocalizedText(self.ko, self.th, self.my, self.en)
        return LocalizedText(
            ko=f"{self.ko}{suffix}" if self.ko else "",
            th=f"{self.th}{suffix}" if self.th else "",
            my=f"{self.my}{suffix}" if self.my else "",
            en=f"{self.en}{suffix}" if self.en else "",
        )


def _field(text: Any, key: str) -> str:
    if isinstance(text, Mapping):
        value = text.get(key)
    else:
        value = getattr(text, key, None)
    return value or ""


def resolve(locale: str, text: Any) -> str:
    """로케일에 맞는 문자열을 고른다.

    text 는 dict 또는 ko/en/th/my 속성을 가진 객체 (LocalizedText, MeatCut 등).
    my/ar 는 비어 있으면 en 으로 폴백, 알 수 없는 로케일은 ko.
    """
    for key in FALLBACKS.get(locale, (DEFAULT_LOCALE,)):
        value = _field(text, key)
        if value:
            return value
    return ""
