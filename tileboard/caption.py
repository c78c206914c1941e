from dataclasses import dataclass
from typing import Callable

from PIL import ImageDraw

from .fonts import load_font
from .geometry import PageGeometry


@dataclass(frozen=True)
class CaptionLine:
    text: str
    x: int
    baseline: int


@dataclass(frozen=True)
class CaptionLayout:
    font_px: int
    lines: tuple[CaptionLine, ...]

    @property
    def wrapped(self) -> bool:
        return len(self.lines) > 1


def text_advance(text: str, px: int) -> float:
    """Rendered width of 'text' at pixel size 'px'."""
    return load_font(px).getlength(text)


def line_height(px: int) -> int:
    ascent, descent = load_font(px).getmetrics()
    return ascent + descent


def wrap_words(text: str, max_chars: int) -> list[str]:
    """
    Greedy word wrap by character count.

    A line is flushed when adding the next word would take it past 'max_chars';
    a word longer than the limit gets a line of its own.
    """
    words = text.split()
    if not words:
        return []
    lines = []
    current = words[0]
    for w in words[1:]:
        if len(current) + 1 + len(w) <= max_chars:
            current = current + " " + w
        else:
            lines.append(current)
            current = w
    lines.append(current)
    return lines


def layout_caption(
    text: str,
    origin: tuple[int, int],
    geometry: PageGeometry,
    measure: Callable[[str, int], float] = text_advance,
    leading: Callable[[int], int] = line_height,
) -> CaptionLayout:
    """
    Decide where each caption line goes.

    Text that fits 'caption_max_width' at the base size is one line on the
    standard baseline. Wider text drops to the reduced size and is packed by
    character count, one reduced line height per extra line. Nothing stops a
    long caption from running below the caption strip.
    """
    x, y = origin
    baseline = y + geometry.caption_padding
    if not text.strip():
        return CaptionLayout(font_px=geometry.font_px, lines=())

    if measure(text, geometry.font_px) <= geometry.caption_max_width:
        return CaptionLayout(
            font_px=geometry.font_px,
            lines=(CaptionLine(text=text, x=x, baseline=baseline),),
        )

    px = geometry.wrap_font_px
    step = leading(px)
    lines = tuple(
        CaptionLine(text=line, x=x, baseline=baseline + i * step)
        for i, line in enumerate(wrap_words(text, geometry.wrap_chars))
    )
    return CaptionLayout(font_px=px, lines=lines)


def draw_caption(
    draw: ImageDraw.ImageDraw,
    layout: CaptionLayout,
    geometry: PageGeometry,
) -> None:
    font = load_font(layout.font_px)
    fill = geometry.colors["text"]
    for line in layout.lines:
        draw.text((line.x, line.baseline), line.text, font=font, fill=fill, anchor="ls")
