"""Writing rendered files to disk."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..utils import ensure_dir
from .models import RenderedFile


def emit(output_dir: str | Path, files: Iterable[RenderedFile]) -> list[Path]:
    """Write *files* into *output_dir*, creating it (and parents) if needed.

    Existing files are overwritten.  The first ``OSError`` stops the remaining
    writes and propagates; files already written stay in place.

    Returns:
        The written file paths, in order.
    """
    root = ensure_dir(output_dir)
    written: list[Path] = []
    for rendered in files:
        target = root / rendered.path
        target.write_bytes(rendered.content)
        written.append(target)
    return written
