import io

import pytest
from PIL import Image

from meat365.db import SpecDB


@pytest.fixture
def db(tmp_path):
    spec_db = SpecDB(tmp_path / "meat365.db")
    yield spec_db
    spec_db.close()


def make_image(size=(640, 480), fmt="PNG", mode="RGB", color=(200, 30, 60)) -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def png_bytes():
    return make_image()


@pytest.fixture
def image_factory():
    return make_image
