from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .errors import SysextError
from .logging_utils import configure_logging
from .manager import ExtensionLifecycleManager
from .settings import load_settings

logger = logging.getLogger(__name__)

PROG = "containerd-sysext"
COMMANDS = ("install", "remove", "status")
USAGE = f"Usage: {PROG} {{{'|'.join(COMMANDS)}}}"


def run(command: str, *, manager: Optional[ExtensionLifecycleManager] = None) -> None:
    """Run one lifecycle command against the host."""

    if manager is None:
        settings = load_settings()
        # status is a pure read and leaves no log file behind
        configure_logging(log_path=None if command == "status" else settings.log_path)
        manager = ExtensionLifecycleManager(settings)

    try:
        if command == "install":
            manager.install()
            print(f"    Verify with: systemctl status {manager.settings.service}")
            print("    CLI tool:    ctr version")
        elif command == "remove":
            manager.remove()
        elif command == "status":
            report = manager.status()
            if report.installed:
                print("Status: Installed")
                if report.service_status:
                    sys.stdout.write(report.service_status)
            else:
                print("Status: Not Installed")
        else:
            raise ValueError(f"unknown command: {command}")
    except (SysextError, OSError):
        logger.debug("%s failed", command, exc_info=True)
        raise
    except Exception:
        logger.exception("%s failed", command)
        raise


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog=PROG, usage=USAGE, add_help=False)
    p.add_argument("command", nargs="?", default=None)

    args, extra = p.parse_known_args(argv)
    if args.command not in COMMANDS or extra:
        print(USAGE)
        return 1

    try:
        run(args.command)
    except (RuntimeError, OSError) as e:
        print(f">>> Failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
