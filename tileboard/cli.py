import argparse
import os
import sys
from pathlib import Path

from .collect import collect_images
from .compose import compose_pages, page_count
from .errors import BoardError
from .fonts import load_font
from .geometry import DEFAULT_GEOMETRY, PageGeometry
from .writer import write_page


def generate(
    input_dir: str | os.PathLike,
    output_dir: str | os.PathLike,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
) -> list[Path]:
    """
    Lay out every image under 'input_dir' into board pages written to 'output_dir'.

    Stops at the first error. Pages already written stay on disk.
    """
    # Both caption sizes must load before any work starts.
    load_font(geometry.font_px)
    load_font(geometry.wrap_font_px)

    entries = collect_images(input_dir)
    total = page_count(len(entries), geometry.tiles_per_page)
    print(
        f"Found {len(entries)} image(s) in {input_dir}: {total} page(s) of "
        f"{geometry.columns}x{geometry.rows}",
    )

    written = []
    for page in compose_pages(entries, geometry):
        out_path = write_page(page, output_dir, geometry)
        written.append(out_path)
        print(
            f"Saved page to: {out_path}  "
            f"({geometry.page_width}x{geometry.page_height}px @ {geometry.dpi}dpi)",
        )
    return written


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tileboard",
        description="Arrange images into captioned printable grid pages.",
    )
    p.add_argument("--input", default=".", help="Input directory (searched recursively).")
    p.add_argument("--output", default=".", help="Output directory for board-<n>.png pages.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        generate(args.input, args.output)
    except BoardError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
