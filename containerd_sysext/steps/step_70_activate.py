from __future__ import annotations

import logging

from ..context import InstallCtx

logger = logging.getLogger(__name__)


class ActivateStep:
    step_id = "70_activate"

    def run(self, ctx: InstallCtx) -> None:
        logger.info(">>> Activating extension...")
        ctx.host.refresh_overlay()

        logger.info(">>> Reloading systemd...")
        ctx.host.reload_units()

        logger.info(">>> Enabling and starting %s...", ctx.settings.service)
        ctx.host.enable_service(ctx.settings.service)
