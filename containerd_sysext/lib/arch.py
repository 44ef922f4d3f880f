from __future__ import annotations

import logging
import platform
from typing import Optional

from ..errors import PreconditionError

logger = logging.getLogger(__name__)

# uname -m -> upstream release naming (Go GOARCH)
_GO_ARCH_MAP = {
    "x86_64": "amd64",
    "aarch64": "arm64",
}

SUPPORTED_MACHINES = tuple(_GO_ARCH_MAP)


def resolve_arch(machine: Optional[str] = None) -> str:
    """Map the running machine to the architecture token used in release URLs."""

    m = machine if machine is not None else platform.machine()
    try:
        arch = _GO_ARCH_MAP[m]
    except KeyError:
        raise PreconditionError(
            f"Unsupported architecture: {m} (supported: {', '.join(SUPPORTED_MACHINES)})"
        ) from None
    logger.info("Architecture: machine=%s arch=%s", m, arch)
    return arch
