from __future__ import annotations

import logging
from typing import Protocol

from .errors import CommandError
from .lib.command import Runner, run_cmd

logger = logging.getLogger(__name__)

# systemctl status: 0-3 describe the unit's state, 4 means "no such unit"
_STATUS_MAX_OK = 3


class HostController(Protocol):
    """The live host state the lifecycle touches: the sysext overlay and systemd."""

    def refresh_overlay(self) -> None:
        ...

    def reload_units(self) -> None:
        ...

    def enable_service(self, name: str) -> None:
        ...

    def disable_service(self, name: str) -> None:
        ...

    def is_active(self, name: str) -> bool:
        ...

    def service_status(self, name: str) -> str:
        ...


class SystemdHost:
    def __init__(self, runner: Runner = run_cmd) -> None:
        self._run = runner

    def refresh_overlay(self) -> None:
        self._run(["systemd-sysext", "refresh"])

    def reload_units(self) -> None:
        self._run(["systemctl", "daemon-reload"])

    def enable_service(self, name: str) -> None:
        self._run(["systemctl", "enable", "--now", name])

    def disable_service(self, name: str) -> None:
        self._run(["systemctl", "disable", "--now", name])

    def is_active(self, name: str) -> bool:
        r = self._run(["systemctl", "is-active", "--quiet", name], check=False)
        return r.returncode == 0

    def service_status(self, name: str) -> str:
        """Return `systemctl status` output; an inactive unit is not an error."""

        r = self._run(["systemctl", "status", name, "--no-pager"], check=False)
        if r.returncode > _STATUS_MAX_OK:
            raise CommandError(r.argv, r.returncode, r.stderr)
        return r.stdout
