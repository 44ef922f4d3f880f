from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def recreate_dir(root: Path, subdirs: Iterable[str] = ()) -> None:
    """Remove root if present, then create it with the given relative subdirs."""

    remove_tree(root)
    root.mkdir(parents=True, exist_ok=True)
    for rel in subdirs:
        (root / rel.lstrip("/")).mkdir(parents=True, exist_ok=True)


def remove_tree(root: Path) -> None:
    if root.is_dir() and not root.is_symlink():
        shutil.rmtree(root)
    elif root.exists() or root.is_symlink():
        root.unlink()


def write_file(root: Path, rel: str, contents: str, *, mode: int | None = None) -> Path:
    p = root / rel.lstrip("/")
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(contents, encoding="utf-8")
    if mode is not None:
        p.chmod(mode)
    logger.debug("Wrote %s", str(p))
    return p
