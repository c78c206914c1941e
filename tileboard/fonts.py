from functools import lru_cache
from importlib.resources import files

from PIL import ImageFont

from .errors import FontError

FONT_RESOURCE = "Lato-Regular.ttf"


def font_path() -> str:
    return str(files("tileboard") / "fonts" / FONT_RESOURCE)


@lru_cache(maxsize=None)
def load_font(size: int) -> ImageFont.FreeTypeFont:
    """Load the bundled caption font at a pixel size. Fonts are cached per size and never mutated."""
    path = font_path()
    try:
        return ImageFont.truetype(path, size=size)
    except OSError as exc:
        raise FontError(f"Cannot load caption font {path}: {exc}") from exc
