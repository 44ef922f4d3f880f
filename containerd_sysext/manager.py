from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from typing import Callable, List, Optional

from .context import REQUIRED_TOOLS, InstallCtx
from .host import HostController, SystemdHost
from .lib.arch import resolve_arch
from .lib.command import Runner, require_tools, run_cmd
from .lib.staging import remove_tree
from .pipeline import PipelineResult, Step, run_pipeline
from .settings import Settings
from .steps import (
    ActivateStep,
    FetchContainerdStep,
    FetchRuncStep,
    PackageImageStep,
    PrepareStagingStep,
    WriteExtensionReleaseStep,
    WriteServiceUnitStep,
)

logger = logging.getLogger(__name__)


def build_install_steps() -> List[Step]:
    return [
        PrepareStagingStep(),
        FetchContainerdStep(),
        FetchRuncStep(),
        WriteServiceUnitStep(),
        WriteExtensionReleaseStep(),
        PackageImageStep(),
        ActivateStep(),
    ]


@dataclass(frozen=True)
class StatusReport:
    installed: bool
    service_status: Optional[str] = None


class ExtensionLifecycleManager:
    """Install, remove and report one systemd-sysext image.

    The image file is the only record of installed state; there is no
    manifest. All host mutations beyond the image file go through `host`.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        host: Optional[HostController] = None,
        runner: Runner = run_cmd,
        which: Callable[[str], Optional[str]] = shutil.which,
        machine: Optional[str] = None,
    ) -> None:
        self.settings = settings
        self.runner = runner
        self.host = host if host is not None else SystemdHost(runner)
        self.which = which
        self.machine = machine

    def install(self) -> PipelineResult:
        s = self.settings
        logger.info(">>> Starting Containerd Sysext Installation...")

        arch = resolve_arch(self.machine)
        logger.info(
            "Pinned versions: containerd=%s runc=%s cni=%s (cni is not staged)",
            s.containerd_version,
            s.runc_version,
            s.cni_version,
        )

        require_tools(REQUIRED_TOOLS, which=self.which)

        ctx = InstallCtx(settings=s, arch=arch, host=self.host, runner=self.runner)
        try:
            result = run_pipeline(ctx=ctx, steps=build_install_steps())
        finally:
            remove_tree(ctx.staging_dir)
            remove_tree(ctx.download_dir)

        logger.info(">>> Success! Containerd is now active.")
        return result

    def remove(self) -> None:
        s = self.settings
        logger.info(">>> Removing Containerd Sysext...")

        if self.host.is_active(s.service):
            logger.info(">>> Stopping %s service...", s.service)
            self.host.disable_service(s.service)

        if s.image_path.is_file():
            logger.info(">>> Deleting extension image...")
            s.image_path.unlink()
        else:
            logger.info(">>> Extension image not found.")

        logger.info(">>> Refreshing system extensions...")
        self.host.refresh_overlay()
        self.host.reload_units()

        logger.info(">>> Containerd has been removed.")

    def status(self) -> StatusReport:
        s = self.settings
        if not s.image_path.is_file():
            return StatusReport(installed=False)
        return StatusReport(installed=True, service_status=self.host.service_status(s.service))
