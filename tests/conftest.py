from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from containerd_sysext.errors import CommandError
from containerd_sysext.lib.command import CmdResult
from containerd_sysext.settings import Settings


class FakeRunner:
    """Stands in for curl/tar/mksquashfs and writes the files they would."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.fail_on: Optional[str] = None

    def __call__(self, argv: Sequence[str], *, check: bool = True, env=None, cwd=None) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        tool = argv[0]

        if self.fail_on and any(self.fail_on in a for a in argv):
            if check:
                raise CommandError(argv, 22, "curl: (22) The requested URL returned error: 404")
            return CmdResult(argv=argv, returncode=22, stdout="", stderr="")

        if tool == "curl":
            dest = Path(argv[argv.index("-o") + 1])
            dest.write_bytes(b"payload")
        elif tool == "tar":
            dest_dir = Path(argv[argv.index("-C") + 1])
            for member in argv:
                if member.startswith("bin/"):
                    (dest_dir / member.split("/", 1)[1]).write_bytes(b"\x7fELF")
        elif tool == "mksquashfs":
            Path(argv[2]).write_bytes(b"hsqs")

        return CmdResult(argv=argv, returncode=0, stdout="", stderr="")

    def tools(self) -> List[str]:
        return [c[0] for c in self.calls]


class FakeHost:
    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.active: set = set()

    def refresh_overlay(self) -> None:
        self.calls.append(("refresh_overlay",))

    def reload_units(self) -> None:
        self.calls.append(("reload_units",))

    def enable_service(self, name: str) -> None:
        self.calls.append(("enable_service", name))
        self.active.add(name)

    def disable_service(self, name: str) -> None:
        self.calls.append(("disable_service", name))
        self.active.discard(name)

    def is_active(self, name: str) -> bool:
        return name in self.active

    def service_status(self, name: str) -> str:
        state = "active (running)" if name in self.active else "inactive (dead)"
        return f"* {name}.service - containerd container runtime\n     Active: {state}\n"


def all_tools(name: str) -> str:
    return f"/usr/bin/{name}"


_LOGGING_MARKERS = ("_sysext_configured", "_sysext_log_path")


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for h in saved_handlers:
        root.removeHandler(h)
    for attr in _LOGGING_MARKERS:
        if hasattr(root, attr):
            delattr(root, attr)
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
    for attr in _LOGGING_MARKERS:
        if hasattr(root, attr):
            delattr(root, attr)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        raw={
            "paths": {
                "extensions_dir": str(tmp_path / "extensions"),
                "build_dir": str(tmp_path / "build"),
                "log": str(tmp_path / "sysext.log"),
            }
        }
    )


@pytest.fixture
def manager(settings, host, runner):
    from containerd_sysext.manager import ExtensionLifecycleManager

    return ExtensionLifecycleManager(settings, host=host, runner=runner, which=all_tools, machine="x86_64")
