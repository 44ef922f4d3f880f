from __future__ import annotations

import logging

from ..context import BIN_DIR, RELEASE_DIR, UNIT_DIR, InstallCtx
from ..lib.staging import recreate_dir

logger = logging.getLogger(__name__)


class PrepareStagingStep:
    step_id = "10_prepare_staging"

    def run(self, ctx: InstallCtx) -> None:
        logger.info(">>> Preparing build directory at %s...", str(ctx.staging_dir))
        recreate_dir(ctx.staging_dir, [BIN_DIR, UNIT_DIR, RELEASE_DIR])
        recreate_dir(ctx.download_dir)
