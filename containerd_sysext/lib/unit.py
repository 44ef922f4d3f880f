from __future__ import annotations

from typing import List


def render_service_unit(*, exec_start: str = "/usr/bin/containerd") -> str:
    """systemd unit for the runtime shipped inside the extension.

    Config is read from /etc/containerd/config.toml, which stays on the
    mutable part of the host.
    """

    lines: List[str] = [
        "[Unit]",
        "Description=containerd container runtime",
        "Documentation=https://containerd.io",
        "After=network.target local-fs.target",
        "",
        "[Service]",
        # leading '-': a failed modprobe does not fail the unit
        "ExecStartPre=-/sbin/modprobe overlay",
        f"ExecStart={exec_start}",
        "Type=notify",
        "Delegate=yes",
        "KillMode=process",
        "Restart=always",
        "RestartSec=5",
        "LimitNPROC=infinity",
        "LimitCORE=infinity",
        "TasksMax=infinity",
        "OOMScoreAdjust=-999",
        "",
        "[Install]",
        "WantedBy=multi-user.target",
        "",
    ]
    return "\n".join(lines)


def render_extension_release(*, level: str = "1.0") -> str:
    # ID=_any lets the extension load on any host OS release.
    return f"ID=_any\nSYSEXT_LEVEL={level}\n"
