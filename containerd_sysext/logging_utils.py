from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from .settings import DEFAULT_LOG_PATH

PROGRESS_PREFIX = ">>> "

_FILE_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)


class ProgressFilter(logging.Filter):
    """Console shows `>>> ` progress lines and warnings; CMD traces stay in the file."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= logging.WARNING:
            return True
        return str(record.msg).startswith(PROGRESS_PREFIX)


def _open_log_file(candidates: Iterable[str]) -> Optional[logging.FileHandler]:
    for path in candidates:
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            return logging.FileHandler(path)
        except OSError:
            continue
    return None


def configure_logging(log_path: Optional[str] = DEFAULT_LOG_PATH) -> Optional[str]:
    """Send progress lines to stdout and the full trace to a log file.

    log_path=None skips the file (read-only commands). When neither log_path
    nor ./containerd-sysext.log can be opened, logging is console-only.

    Returns the log file in use, or None.
    """

    root = logging.getLogger()
    if getattr(root, "_sysext_configured", False):
        return getattr(root, "_sysext_log_path", None)
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(message)s"))
    console.addFilter(ProgressFilter())
    root.addHandler(console)

    chosen: Optional[str] = None
    if log_path is not None:
        fh = _open_log_file([log_path, str(Path.cwd() / "containerd-sysext.log")])
        if fh is None:
            logging.getLogger(__name__).warning("Cannot open a log file; logging to console only")
        else:
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(_FILE_FORMAT)
            root.addHandler(fh)
            chosen = fh.baseFilename

    setattr(root, "_sysext_configured", True)
    setattr(root, "_sysext_log_path", chosen)
    return chosen
