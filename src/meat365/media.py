"""제품 스펙 미디어 (단면 사진, 불량 사진, 공정 영상)

스토리지 경로 규칙: {product-images|process-videos}/{peak_code}/{category}/{file_name}
peak_code 가 경로에 그대로 들어가므로 저장 전에 ensure_storage_key 로 검증한다.
"""

import io
import logging
import os
import re
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from meat365.catalog.parser import ensure_storage_key, get_base_code

logger = logging.getLogger(__name__)

MEDIA_TYPES = ("cross_section", "appearance", "defect", "process_video", "reference")
MEDIA_CATEGORIES = ("approved", "rejected", "reference", "training")

STORAGE_PATHS = {
    "image": "product-images",
    "video": "process-videos",
    "thumbnail": "thumbnails",
}

ALLOWED_TYPES = ("image/jpeg", "image/png", "image/webp", "video/mp4")
MAX_SIZE_MB = 10

# 압축 기본값
COMPRESS_MAX_SIZE_MB = 2
COMPRESS_MAX_DIMENSION = 1920
COMPRESS_QUALITY = 80
COMPRESS_MIN_QUALITY = 40

MEDIA_DIR_NAME = "media"


def default_media_dir() -> Path:
    """MEAT365_MEDIA_DIR (.env 포함) 또는 ./media"""
    return Path(os.environ.get("MEAT365_MEDIA_DIR") or Path.cwd() / MEDIA_DIR_NAME)


class MediaError(Exception):
    """미디어 검증/저장 오류"""
    def __init__(self, code: str, message: str):
        self.code = code
        super().__init__(f"Media error [{code}]: {message}")


@dataclass
class SpecMedia:
    """specMedia 문서 1건"""
    peak_code: str
    base_code: str
    type: str
    category: str
    path: str
    file_name: str
    file_size: int
    mime_type: str
    tags: list[str] = field(default_factory=list)
    is_approved: bool = False
    created_by: str = ""
    created_at: Optional[str] = None
    id: Optional[str] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("id")
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SpecMedia":
        known = cls.__dataclass_fields__
        return cls(**{k: v for k, v in data.items() if k in known})


# ── 경로 / 파일명 ──

def storage_path(peak_code: str, category: str, kind: str = "image") -> str:
    """미디어 디렉토리 경로 (파일명 제외)

    Raises:
        StorageKeyError: peak_code 에 경로 문자가 있을 때
        MediaError: category / kind 가 정의되지 않은 값일 때
    """
    ensure_storage_key(peak_code)
    if category not in MEDIA_CATEGORIES:
        raise MediaError("invalid-category", f"{category!r} not in {MEDIA_CATEGORIES}")
    base = STORAGE_PATHS.get(kind)
    if base is None or kind == "thumbnail":
        raise MediaError("invalid-kind", f"{kind!r} is not an upload kind")
    return f"{base}/{peak_code}/{category}"


def generate_file_name(original_name: str, peak_code: str, timestamp_ms: Optional[int] = None) -> str:
    """{코드}_{밀리초}.{확장자} (코드의 영숫자/하이픈 외 문자는 '_')"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    extension = original_name.rsplit(".", 1)[-1] if "." in original_name else "jpg"
    sanitized = re.sub(r"[^a-zA-Z0-9-]", "_", peak_code)
    return f"{sanitized}_{timestamp_ms}.{extension}"


def validate_file(
    mime_type: str,
    size: int,
    max_size_mb: float = MAX_SIZE_MB,
    allowed_types: tuple[str, ...] = ALLOWED_TYPES,
):
    """업로드 전 파일 형식/크기 검증

    Raises:
        MediaError: 허용되지 않은 형식이거나 크기 초과
    """
    if mime_type not in allowed_types:
        raise MediaError("invalid-type", f"Invalid file type. Allowed: {', '.join(allowed_types)}")
    if size / (1024 * 1024) > max_size_mb:
        raise MediaError("too-large", f"File too large. Maximum size: {max_size_mb}MB")


# ── 이미지 압축 ──

def compress_image(
    data: bytes,
    max_size_mb: float = COMPRESS_MAX_SIZE_MB,
    max_dimension: int = COMPRESS_MAX_DIMENSION,
    quality: int = COMPRESS_QUALITY,
) -> bytes:
    """긴 변을 max_dimension 이하로 줄이고 JPEG 로 다시 인코딩한다.

    결과가 max_size_mb 를 넘으면 품질을 10 씩 낮춰 재시도 (최저 40).

    Raises:
        MediaError: 이미지로 열 수 없는 데이터
    """
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise MediaError("invalid-image", str(e)) from e

    if img.mode != "RGB":
        img = img.convert("RGB")
    if max(img.size) > max_dimension:
        img.thumbnail((max_dimension, max_dimension))

    limit = max_size_mb * 1024 * 1024
    while True:
        buf = io.BytesIO()
        img.save(buf, format="JPEG", quality=quality)
        out = buf.getvalue()
        if len(out) <= limit or quality <= COMPRESS_MIN_QUALITY:
            return out
        quality -= 10


# ── 로컬 블롭 저장소 ──

class MediaStore:
    """로컬 디렉토리 기반 미디어 저장소"""

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root) if root else default_media_dir()

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if not target.is_relative_to(self.root.resolve()):
            raise MediaError("invalid-path", f"{path!r} is outside the media root")
        return target

    def upload(
        self,
        peak_code: str,
        category: str,
        original_name: str,
        data: bytes,
        mime_type: str,
        media_type: str = "cross_section",
        tags: Optional[list[str]] = None,
        created_by: str = "",
        compress: bool = True,
    ) -> SpecMedia:
        """파일을 검증/압축 후 저장하고 SpecMedia 레코드를 반환한다.

        Args:
            peak_code: 제품 코드 (경로에 사용)
            category: approved / rejected / reference / training
            original_name: 원본 파일명 (확장자 추출용)
            data: 파일 내용
            mime_type: image/jpeg, image/png, image/webp, video/mp4
            media_type: cross_section, defect, process_video 등
            compress: 이미지면 JPEG 로 압축

        Raises:
            MediaError: 검증 실패
            StorageKeyError: peak_code 가 저장소 키로 부적합
        """
        if media_type not in MEDIA_TYPES:
            raise MediaError("invalid-media-type", f"{media_type!r} not in {MEDIA_TYPES}")
        validate_file(mime_type, len(data))

        is_video = mime_type.startswith("video/")
        directory = storage_path(peak_code, category, "video" if is_video else "image")

        if compress and not is_video:
            data = compress_image(data)
            mime_type = "image/jpeg"
            original_name = f"{original_name.rsplit('.', 1)[0]}.jpg"

        # 같은 이름이 이미 있으면 타임스탬프를 1ms 씩 민다
        timestamp_ms = int(time.time() * 1000)
        while True:
            file_name = generate_file_name(original_name, peak_code, timestamp_ms)
            path = f"{directory}/{file_name}"
            target = self._resolve(path)
            if not target.exists():
                break
            timestamp_ms += 1

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug("stored %s (%d bytes)", path, len(data))

        return SpecMedia(
            peak_code=peak_code,
            base_code=get_base_code(peak_code),
            type=media_type,
            category=category,
            path=path,
            file_name=file_name,
            file_size=len(data),
            mime_type=mime_type,
            tags=list(tags or []),
            created_by=created_by,
            created_at=datetime.now().isoformat(timespec="seconds"),
        )

    def read(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()

    def delete(self, path: str):
        target = self._resolve(path)
        if target.exists():
            target.unlink()
            logger.debug("deleted %s", path)
