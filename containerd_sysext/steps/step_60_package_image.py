from __future__ import annotations

import logging

from ..context import InstallCtx
from ..lib.squashfs import build_image

logger = logging.getLogger(__name__)


class PackageImageStep:
    step_id = "60_package_image"

    def run(self, ctx: InstallCtx) -> None:
        logger.info(">>> Packaging extension into SquashFS...")
        build_image(ctx.staging_dir, ctx.image_path, runner=ctx.runner)
