from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.staging import write_file
from ..lib.unit import render_service_unit

logger = logging.getLogger(__name__)


class WriteServiceUnitStep:
    step_id = "40_write_unit"

    def run(self, ctx: InstallCtx) -> None:
        logger.info(">>> Creating systemd unit...")
        write_file(
            ctx.staging_dir,
            str(ctx.unit_path.relative_to(ctx.staging_dir)),
            render_service_unit(),
            mode=0o644,
        )
