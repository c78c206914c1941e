import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from PIL import Image, ImageDraw

from .caption import CaptionLayout, draw_caption, layout_caption
from .collect import ImageEntry
from .geometry import PageGeometry, TileCell
from .render import TilePlacement, open_image, render_tile


@dataclass(frozen=True)
class RenderedTile:
    entry: ImageEntry
    cell: TileCell
    placement: TilePlacement
    caption: CaptionLayout


@dataclass
class ComposedPage:
    index: int
    canvas: Image.Image
    tiles: list[RenderedTile]


def page_count(n: int, per_page: int) -> int:
    return math.ceil(n / per_page) if n > 0 else 0


def new_canvas(geometry: PageGeometry) -> Image.Image:
    return Image.new(
        "RGBA",
        (geometry.page_width, geometry.page_height),
        color=geometry.colors["background"],
    )


def compose_page(
    entries: Sequence[ImageEntry],
    page_index: int,
    geometry: PageGeometry,
) -> ComposedPage:
    """
    Render page 'page_index' of the full ordered 'entries' list.

    Cells are filled row-major. Once the global index runs past the last
    entry the page stops, so trailing cells get no frame at all. Captions are
    drawn after every tile is placed.
    """
    canvas = new_canvas(geometry)
    cols, rows = geometry.columns, geometry.rows

    placed: list[tuple[ImageEntry, TileCell, TilePlacement]] = []
    for r in range(rows):
        for c in range(cols):
            idx = page_index * rows * cols + r * cols + c
            if idx >= len(entries):
                break
            entry = entries[idx]
            cell = geometry.cell(r, c)
            image = open_image(entry.path)
            try:
                placement = render_tile(canvas, image, cell, geometry)
            finally:
                image.close()
            placed.append((entry, cell, placement))

    draw = ImageDraw.Draw(canvas)
    tiles = []
    for entry, cell, placement in placed:
        layout = layout_caption(entry.caption, cell.caption_origin, geometry)
        draw_caption(draw, layout, geometry)
        tiles.append(RenderedTile(entry=entry, cell=cell, placement=placement, caption=layout))

    return ComposedPage(index=page_index, canvas=canvas, tiles=tiles)


def compose_pages(
    entries: Sequence[ImageEntry],
    geometry: PageGeometry,
) -> Iterator[ComposedPage]:
    """Yield pages in order; each is finished before the next one starts."""
    for p in range(page_count(len(entries), geometry.tiles_per_page)):
        yield compose_page(entries, p, geometry)
