from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .host import HostController
from .lib.command import Runner, run_cmd
from .settings import Settings

BIN_DIR = "usr/bin"
UNIT_DIR = "usr/lib/systemd/system"
RELEASE_DIR = "usr/lib/extension-release.d"

CONTAINERD_MEMBERS = ("bin/containerd", "bin/ctr", "bin/containerd-shim-runc-v2")
REQUIRED_TOOLS = ("curl", "tar", "mksquashfs", "systemd-sysext")


@dataclass(frozen=True)
class InstallCtx:
    settings: Settings
    arch: str
    host: HostController
    runner: Runner = run_cmd

    @property
    def staging_dir(self) -> Path:
        return self.settings.build_dir

    @property
    def download_dir(self) -> Path:
        return self.settings.download_dir

    @property
    def bin_dir(self) -> Path:
        return self.staging_dir / BIN_DIR

    @property
    def unit_path(self) -> Path:
        return self.staging_dir / UNIT_DIR / f"{self.settings.service}.service"

    @property
    def release_path(self) -> Path:
        return self.staging_dir / RELEASE_DIR / f"extension-release.{self.settings.name}"

    @property
    def image_path(self) -> Path:
        return self.settings.image_path
