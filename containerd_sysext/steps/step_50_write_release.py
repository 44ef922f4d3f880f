from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.staging import write_file
from ..lib.unit import render_extension_release

logger = logging.getLogger(__name__)


class WriteExtensionReleaseStep:
    step_id = "50_write_release"

    def run(self, ctx: InstallCtx) -> None:
        logger.info(">>> Creating extension metadata...")
        write_file(
            ctx.staging_dir,
            str(ctx.release_path.relative_to(ctx.staging_dir)),
            render_extension_release(level=ctx.settings.level),
            mode=0o644,
        )
