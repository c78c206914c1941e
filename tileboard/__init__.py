from .collect import ImageEntry, collect_images
from .compose import ComposedPage, compose_page, compose_pages, page_count
from .errors import BoardError
from .geometry import DEFAULT_GEOMETRY, PageGeometry
from .writer import write_page

__all__ = [
    "BoardError",
    "ComposedPage",
    "DEFAULT_GEOMETRY",
    "ImageEntry",
    "PageGeometry",
    "collect_images",
    "compose_page",
    "compose_pages",
    "page_count",
    "write_page",
]
