from dataclasses import dataclass
from functools import cached_property

from PIL import ImageColor

from .errors import ConfigError

Rect = tuple[int, int, int, int]
RGBA = tuple[int, int, int, int]


def parse_color(s: str) -> RGBA:
    """Parse a colour string ('white', '#fff', 'rgb(1,2,3)', ...) into RGBA."""
    try:
        r, g, b, a = ImageColor.getcolor(s.strip(), "RGBA")
    except ValueError as exc:
        raise ConfigError(f"Invalid colour: {s!r}") from exc
    return (r, g, b, a)


@dataclass(frozen=True)
class TileCell:
    row: int
    column: int
    outer: Rect
    inner: Rect
    image_box: Rect
    caption_origin: tuple[int, int]


@dataclass(frozen=True)
class PageGeometry:
    """
    Every layout constant of a board page.

    One instance is built at startup and handed to each component; nothing
    reads layout values from module state.
    """

    page_width: int = 612
    page_height: int = 792
    tile_size: int = 256
    column_gap: int = 8
    row_gap: int = 8
    border: int = 4
    caption_height: int = 40
    caption_padding: int = 14
    caption_inset: int = 8
    font_size: float = 14
    wrap_ratio: float = 1.4
    wrap_chars: int = 16
    dpi: int = 72
    background_color: str = "#ffffff"
    border_color: str = "#333333"
    fill_color: str = "#f2f2f2"
    text_color: str = "#111111"

    def __post_init__(self):
        for name in ("page_width", "page_height", "tile_size", "font_size", "dpi"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive.")
        for name in ("column_gap", "row_gap", "border", "caption_height", "caption_inset"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative.")
        if self.columns < 1 or self.rows < 1:
            raise ConfigError(
                f"Page {self.page_width}x{self.page_height} cannot hold a {self.tile_size} tile.",
            )
        if self.wrap_ratio <= 1:
            raise ConfigError("wrap_ratio must be greater than 1.")
        if self.wrap_chars < 1:
            raise ConfigError("wrap_chars must be at least 1.")
        box_w, box_h = self.image_box
        if box_w <= 0 or box_h <= 0:
            raise ConfigError("Border and caption leave no room for the image.")
        if self.grid_width > self.page_width or self.grid_height > self.page_height:
            raise ConfigError("Tile grid including gaps does not fit on the page.")
        for name in ("background_color", "border_color", "fill_color", "text_color"):
            parse_color(getattr(self, name))

    @property
    def columns(self) -> int:
        return self.page_width // self.tile_size

    @property
    def rows(self) -> int:
        return self.page_height // self.tile_size

    @property
    def tiles_per_page(self) -> int:
        return self.columns * self.rows

    @property
    def grid_width(self) -> int:
        return self.columns * self.tile_size + (self.columns - 1) * self.column_gap

    @property
    def grid_height(self) -> int:
        return self.rows * self.tile_size + (self.rows - 1) * self.row_gap

    @property
    def image_box(self) -> tuple[int, int]:
        inner = self.tile_size - 2 * self.border
        return (inner, inner - self.caption_height)

    @property
    def caption_max_width(self) -> int:
        return self.tile_size - 2 * self.border - 2 * self.caption_inset

    @property
    def font_px(self) -> int:
        return max(1, int(round(self.font_size * self.dpi / 72)))

    @property
    def wrap_font_px(self) -> int:
        return max(1, int(round(self.font_size / self.wrap_ratio * self.dpi / 72)))

    @cached_property
    def colors(self) -> dict[str, RGBA]:
        return {
            "background": parse_color(self.background_color),
            "border": parse_color(self.border_color),
            "fill": parse_color(self.fill_color),
            "text": parse_color(self.text_color),
        }

    def cell(self, row: int, column: int) -> TileCell:
        """Rectangles of the tile at (row, column); the grid is centred on the page."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"Cell ({row}, {column}) outside {self.rows}x{self.columns} grid")

        margin_x = (self.page_width - self.grid_width) // 2
        margin_y = (self.page_height - self.grid_height) // 2
        x0 = margin_x + column * (self.tile_size + self.column_gap)
        y0 = margin_y + row * (self.tile_size + self.row_gap)
        x1 = x0 + self.tile_size
        y1 = y0 + self.tile_size

        b = self.border
        inner = (x0 + b, y0 + b, x1 - b, y1 - b)
        caption_top = inner[3] - self.caption_height
        return TileCell(
            row=row,
            column=column,
            outer=(x0, y0, x1, y1),
            inner=inner,
            image_box=(inner[0], inner[1], inner[2], caption_top),
            caption_origin=(inner[0] + self.caption_inset, caption_top),
        )


DEFAULT_GEOMETRY = PageGeometry()
