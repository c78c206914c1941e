import os
from pathlib import Path

from .compose import ComposedPage
from .errors import WriteError
from .geometry import PageGeometry

PNG_COMPRESS_LEVEL = 6


def page_filename(index: int) -> str:
    return f"board-{index}.png"


def write_page(
    page: ComposedPage,
    output_dir: str | os.PathLike,
    geometry: PageGeometry,
) -> Path:
    """Encode 'page' as PNG under 'output_dir' and return the written path."""
    out_path = Path(output_dir) / page_filename(page.index)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        page.canvas.save(
            out_path,
            format="PNG",
            dpi=(geometry.dpi, geometry.dpi),
            compress_level=PNG_COMPRESS_LEVEL,
        )
    except (OSError, ValueError) as exc:
        raise WriteError(f"Cannot write {out_path}: {exc}") from exc
    return out_path
