from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.fetch import download

logger = logging.getLogger(__name__)


class FetchRuncStep:
    """Ship runc inside the extension so it does not depend on the host's."""

    step_id = "30_fetch_runc"

    def run(self, ctx: InstallCtx) -> None:
        s = ctx.settings
        logger.info(">>> Downloading runc v%s...", s.runc_version)
        dest = download(s.runc_url(ctx.arch), ctx.bin_dir / "runc", retries=s.retries, runner=ctx.runner)
        dest.chmod(0o755)
