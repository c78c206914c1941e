import os
from dataclasses import dataclass

from PIL import Image, ImageDraw

from .errors import DecodeError
from .geometry import PageGeometry, Rect, TileCell


@dataclass(frozen=True)
class TilePlacement:
    rect: Rect

    @property
    def size(self) -> tuple[int, int]:
        x0, y0, x1, y1 = self.rect
        return (x1 - x0, y1 - y0)


def open_image(path: str | os.PathLike) -> Image.Image:
    """Decode a source image into RGBA. The file handle is closed before returning."""
    try:
        with Image.open(path) as im:
            return im.convert("RGBA")
    except (OSError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Cannot decode image {os.fspath(path)}: {exc}") from exc


def fit_size(src: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    """
    Largest size with the aspect ratio of 'src' that fits inside 'box'.

    Same rounding as ImageOps.contain; small images are scaled up to fit.
    """
    w, h = src
    box_w, box_h = box
    if w * box_h > h * box_w:
        return (box_w, max(1, min(box_h, round(h / w * box_w))))
    if w * box_h < h * box_w:
        return (max(1, min(box_w, round(w / h * box_h))), box_h)
    return (box_w, box_h)


def center_offset(size: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    return ((box[0] - size[0]) // 2, (box[1] - size[1]) // 2)


def _fill(draw: ImageDraw.ImageDraw, rect: Rect, color) -> None:
    x0, y0, x1, y1 = rect
    # Pillow rectangles include the far edge.
    draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=color)


def render_tile(
    canvas: Image.Image,
    image: Image.Image,
    cell: TileCell,
    geometry: PageGeometry,
) -> TilePlacement:
    """
    Draw one tile: border, inner fill, then 'image' fitted and centred in the image box.
    Returns where the image landed on the canvas.
    """
    draw = ImageDraw.Draw(canvas)
    _fill(draw, cell.outer, geometry.colors["border"])
    _fill(draw, cell.inner, geometry.colors["fill"])

    box = geometry.image_box
    size = fit_size(image.size, box)
    dx, dy = center_offset(size, box)
    px = cell.image_box[0] + dx
    py = cell.image_box[1] + dy

    fitted = image if image.size == size else image.resize(size, Image.Resampling.LANCZOS)
    if fitted.mode != "RGBA":
        fitted = fitted.convert("RGBA")
    canvas.alpha_composite(fitted, dest=(px, py))

    return TilePlacement(rect=(px, py, px + size[0], py + size[1]))
