import os
from dataclasses import dataclass
from pathlib import Path

from .errors import CollectError

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif")


@dataclass(frozen=True)
class ImageEntry:
    path: Path
    caption: str


def image_caption(path: str | os.PathLike) -> str:
    """Filename with its extension removed: 'photos/cat.png' -> 'cat'."""
    name = os.path.basename(os.fspath(path))
    return os.path.splitext(name)[0]


def is_image_file(name: str) -> bool:
    # Case-sensitive: 'photo.PNG' is not picked up.
    return os.path.splitext(name)[1] in IMAGE_EXTENSIONS


def _walk(directory: str):
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise CollectError(f"Cannot read directory {directory}: {exc}") from exc

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from _walk(entry.path)
            elif entry.is_file() and is_image_file(entry.name):
                yield entry.path
        except OSError as exc:
            raise CollectError(f"Cannot stat {entry.path}: {exc}") from exc


def collect_images(root: str | os.PathLike) -> list[ImageEntry]:
    """
    Walk 'root' depth first and return every supported image in placement order.

    Each directory is listed in lexical name order, so the same tree always
    yields the same order. Any traversal error aborts the collection.
    """
    root = os.fspath(root)
    if not os.path.isdir(root):
        raise CollectError(f"Input directory not found: {root}")

    return [ImageEntry(path=Path(p), caption=image_caption(p)) for p in _walk(root)]
