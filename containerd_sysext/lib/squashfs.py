from __future__ import annotations

import logging
import os
from pathlib import Path

from .command import Runner, run_cmd

logger = logging.getLogger(__name__)


def build_image(source_dir: Path, image_path: Path, *, runner: Runner = run_cmd) -> Path:
    """Pack source_dir into a zstd SquashFS image at image_path.

    The image is written next to its final location and renamed into place,
    so the previous image stays visible until the new one is complete.
    Every file inside the image is owned by root.
    """

    image_path.parent.mkdir(parents=True, exist_ok=True)
    # hidden and not *.raw, so systemd-sysext never picks up a half-written image
    tmp_path = image_path.with_name(f".{image_path.name}.tmp")
    if tmp_path.exists():
        tmp_path.unlink()

    try:
        runner(
            [
                "mksquashfs",
                str(source_dir),
                str(tmp_path),
                "-all-root",
                "-noappend",
                "-comp",
                "zstd",
                "-quiet",
            ]
        )
        os.replace(tmp_path, image_path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    logger.info("Wrote image %s", str(image_path))
    return image_path
