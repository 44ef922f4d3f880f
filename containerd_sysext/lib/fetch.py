from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .command import Runner, run_cmd

logger = logging.getLogger(__name__)

DEFAULT_RETRIES = 3


def download(
    url: str,
    dest: Path,
    *,
    retries: int = DEFAULT_RETRIES,
    runner: Runner = run_cmd,
) -> Path:
    """Fetch url to dest with curl.

    Follows redirects, fails on HTTP errors and lets curl retry transient
    failures a bounded number of times. Raises CommandError once the retry
    budget is spent.
    """

    dest.parent.mkdir(parents=True, exist_ok=True)
    runner(["curl", "-L", "--fail", "--retry", str(retries), "-o", str(dest), url])
    return dest


def extract_members(
    archive: Path,
    dest_dir: Path,
    members: Sequence[str],
    *,
    strip_components: int = 1,
    runner: Runner = run_cmd,
) -> None:
    """Extract only the named members of a gzipped tarball into dest_dir."""

    dest_dir.mkdir(parents=True, exist_ok=True)
    runner(
        [
            "tar",
            "-xzf",
            str(archive),
            "-C",
            str(dest_dir),
            f"--strip-components={strip_components}",
            *members,
        ]
    )
