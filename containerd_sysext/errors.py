from __future__ import annotations

import shlex
from typing import Sequence


class SysextError(RuntimeError):
    """Base class for all lifecycle failures."""


class PreconditionError(SysextError):
    """Raised before any mutation (unsupported arch, missing tool)."""


class ConfigError(SysextError):
    pass


class CommandError(SysextError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {shlex.join(self.argv)}"
        if stderr:
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)
