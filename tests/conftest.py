import pytest
from PIL import Image

from tileboard.geometry import PageGeometry


@pytest.fixture
def make_image():
    def _make(path, size=(64, 48), color=(255, 0, 0)):
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color).save(path)
        return path

    return _make


@pytest.fixture
def four_up():
    # 2 x 2 grid, no gaps: four tiles per page
    return PageGeometry(page_width=512, page_height=512, column_gap=0, row_gap=0)


@pytest.fixture
def five_images(tmp_path, make_image):
    src = tmp_path / "src"
    for name in "abcde":
        make_image(src / f"{name}.png")
    return src
