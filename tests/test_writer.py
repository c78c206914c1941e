import pytest
from PIL import Image

from tileboard.collect import collect_images
from tileboard.compose import compose_page
from tileboard.errors import WriteError
from tileboard.writer import page_filename, write_page


def test_page_filename():
    assert page_filename(0) == "board-0.png"
    assert page_filename(12) == "board-12.png"


def test_write_page_round_trip(five_images, four_up, tmp_path):
    page = compose_page(collect_images(five_images), 0, four_up)

    out = write_page(page, tmp_path / "out" / "nested", four_up)

    assert out == tmp_path / "out" / "nested" / "board-0.png"
    with Image.open(out) as im:
        assert im.format == "PNG"
        assert im.mode == page.canvas.mode
        assert im.size == page.canvas.size
        assert im.tobytes() == page.canvas.tobytes()
        assert im.info["dpi"] == pytest.approx((72, 72), abs=0.1)


def test_write_page_error(five_images, four_up, tmp_path):
    page = compose_page(collect_images(five_images), 1, four_up)
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    with pytest.raises(WriteError):
        write_page(page, blocker / "out", four_up)
