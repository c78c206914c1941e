import pytest
from PIL import ImageDraw

from tileboard.caption import (
    draw_caption,
    layout_caption,
    line_height,
    text_advance,
    wrap_words,
)
from tileboard.compose import new_canvas
from tileboard.geometry import DEFAULT_GEOMETRY

ORIGIN = (50, 200)


def fixed_width(text, px):
    return 10 * len(text)


def fixed_leading(px):
    return 12


def test_wrap_words_packs_by_character_count():
    assert wrap_words("the quick brown fox", 9) == ["the quick", "brown fox"]
    assert wrap_words("one two three", 100) == ["one two three"]


def test_wrap_words_long_word_gets_own_line():
    assert wrap_words("a supercalifragilistic b", 5) == ["a", "supercalifragilistic", "b"]


def test_wrap_words_collapses_whitespace():
    assert wrap_words("  spaced\tout \n words ", 30) == ["spaced out words"]
    assert wrap_words("   ", 30) == []


def test_short_caption_is_one_line_on_standard_baseline():
    g = DEFAULT_GEOMETRY
    layout = layout_caption("holiday", ORIGIN, g, measure=fixed_width, leading=fixed_leading)

    assert layout.font_px == g.font_px
    assert not layout.wrapped
    assert [(l.text, l.x, l.baseline) for l in layout.lines] == [("holiday", 50, 200 + g.caption_padding)]


def test_caption_at_threshold_stays_on_one_line():
    g = DEFAULT_GEOMETRY
    text = "x" * (g.caption_max_width // 10)
    layout = layout_caption(text, ORIGIN, g, measure=fixed_width, leading=fixed_leading)
    assert len(layout.lines) == 1


def test_wide_caption_wraps_with_reduced_font():
    g = DEFAULT_GEOMETRY
    text = "a rather long caption that certainly needs more than one line to fit"
    layout = layout_caption(text, ORIGIN, g, measure=fixed_width, leading=fixed_leading)

    assert layout.font_px == g.wrap_font_px
    assert len(layout.lines) >= 2
    assert " ".join(l.text for l in layout.lines) == text
    for i, line in enumerate(layout.lines):
        assert len(line.text) <= g.wrap_chars
        assert line.x == 50
        assert line.baseline == 200 + g.caption_padding + 12 * i


def test_packing_ignores_measured_width():
    g = DEFAULT_GEOMETRY
    layout = layout_caption("aaaa bbbb cccc dddd", ORIGIN, g, measure=lambda t, px: 1000, leading=fixed_leading)
    assert layout.font_px == g.wrap_font_px
    assert [l.text for l in layout.lines] == ["aaaa bbbb cccc", "dddd"]


@pytest.mark.parametrize("glyph", ["W", "M", "m", "@", "%"])
def test_full_ceiling_of_wide_glyphs_fits_threshold(glyph):
    g = DEFAULT_GEOMETRY
    assert text_advance(glyph * g.wrap_chars, g.font_px) <= g.caption_max_width


@pytest.mark.parametrize(
    "text",
    [
        "WWWWW WWWWW WWWWW WWWWW",
        "WWWWWWWWWWWWWWWWWW WWW",
        "MMMM MMMM MMMM MMMM MMMM",
        "holiday photos from the summer trip to the mountains and lakes 2023",
        "IMG 20230812 beach sunset panorama final edit",
    ],
)
def test_over_threshold_caption_spans_several_lines(text):
    g = DEFAULT_GEOMETRY
    assert text_advance(text, g.font_px) > g.caption_max_width

    layout = layout_caption(text, ORIGIN, g)

    assert layout.font_px == g.wrap_font_px
    assert len(layout.lines) >= 2
    for line in layout.lines:
        assert len(line.text) <= g.wrap_chars or " " not in line.text


def test_no_line_limit():
    g = DEFAULT_GEOMETRY
    text = " ".join(["word"] * 60)
    layout = layout_caption(text, ORIGIN, g, measure=fixed_width, leading=fixed_leading)
    assert len(layout.lines) == 20
    assert layout.lines[-1].baseline > ORIGIN[1] + g.caption_height


def test_empty_caption_has_no_lines():
    assert layout_caption("", ORIGIN, DEFAULT_GEOMETRY).lines == ()


def test_real_font_measurements():
    assert text_advance("ab", 14) > text_advance("a", 14)
    assert text_advance("caption", 14) > text_advance("caption", 10)
    assert line_height(14) > line_height(10) > 0


def test_real_font_layout():
    g = DEFAULT_GEOMETRY
    assert len(layout_caption("e", ORIGIN, g).lines) == 1

    long_name = "holiday photos from the summer trip to the mountains and lakes 2023"
    layout = layout_caption(long_name, ORIGIN, g)
    assert len(layout.lines) >= 2
    assert all(len(l.text) <= g.wrap_chars for l in layout.lines)
    assert layout.lines[1].baseline - layout.lines[0].baseline == line_height(g.wrap_font_px)


def test_draw_caption_marks_pixels_near_baseline():
    g = DEFAULT_GEOMETRY
    canvas = new_canvas(g)
    layout = layout_caption("Board", ORIGIN, g)

    draw_caption(ImageDraw.Draw(canvas), layout, g)

    bbox = canvas.convert("RGB").point(lambda v: 255 - v).getbbox()
    assert bbox is not None
    x0, y0, x1, y1 = bbox
    assert x0 >= ORIGIN[0] - 1
    assert y1 <= layout.lines[0].baseline + 2
