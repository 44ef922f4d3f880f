from __future__ import annotations

import logging

from ..context import CONTAINERD_MEMBERS, InstallCtx
from ..lib.fetch import download, extract_members

logger = logging.getLogger(__name__)


class FetchContainerdStep:
    step_id = "20_fetch_containerd"

    def run(self, ctx: InstallCtx) -> None:
        s = ctx.settings
        logger.info(">>> Downloading containerd v%s...", s.containerd_version)
        archive = download(
            s.containerd_url(ctx.arch),
            ctx.download_dir / f"containerd-{s.containerd_version}-linux-{ctx.arch}.tar.gz",
            retries=s.retries,
            runner=ctx.runner,
        )
        # Archive layout is bin/<tool>; drop the bin/ prefix.
        extract_members(archive, ctx.bin_dir, CONTAINERD_MEMBERS, strip_components=1, runner=ctx.runner)
