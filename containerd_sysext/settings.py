from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "CONTAINERD_SYSEXT_CONFIG"
LOG_ENV = "CONTAINERD_SYSEXT_LOG"

SECTIONS = ("versions", "sysext", "paths", "download")

DEFAULT_LOG_PATH = "/var/log/containerd-sysext.log"

# env var -> (section, key)
_ENV_OVERRIDES = {
    "CONTAINERD_VERSION": ("versions", "containerd"),
    "RUNC_VERSION": ("versions", "runc"),
    "CNI_VERSION": ("versions", "cni"),
    LOG_ENV: ("paths", "log"),
}


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    def _get(self, section: str, key: str, default: Any) -> Any:
        value = (self.raw.get(section) or {}).get(key)
        return default if value in (None, "") else value

    @property
    def containerd_version(self) -> str:
        return str(self._get("versions", "containerd", "1.7.13"))

    @property
    def runc_version(self) -> str:
        return str(self._get("versions", "runc", "1.1.12"))

    @property
    def cni_version(self) -> str:
        # Pinned for parity with the other components; nothing is fetched for it.
        return str(self._get("versions", "cni", "1.4.0"))

    @property
    def name(self) -> str:
        return str(self._get("sysext", "name", "containerd"))

    @property
    def service(self) -> str:
        return str(self._get("sysext", "service", "containerd"))

    @property
    def level(self) -> str:
        return str(self._get("sysext", "level", "1.0"))

    @property
    def extensions_dir(self) -> Path:
        return Path(self._get("paths", "extensions_dir", "/var/lib/extensions"))

    @property
    def build_dir(self) -> Path:
        return Path(self._get("paths", "build_dir", f"/tmp/{self.name}-sysext-build"))

    @property
    def download_dir(self) -> Path:
        return Path(self._get("paths", "download_dir", f"{self.build_dir}-downloads"))

    @property
    def log_path(self) -> str:
        return str(self._get("paths", "log", DEFAULT_LOG_PATH))

    @property
    def retries(self) -> int:
        return int(self._get("download", "retries", 3))

    @property
    def image_path(self) -> Path:
        return self.extensions_dir / f"{self.name}.raw"

    def containerd_url(self, arch: str) -> str:
        v = self.containerd_version
        return (
            f"https://github.com/containerd/containerd/releases/download/"
            f"v{v}/containerd-{v}-linux-{arch}.tar.gz"
        )

    def runc_url(self, arch: str) -> str:
        v = self.runc_version
        return f"https://github.com/opencontainers/runc/releases/download/v{v}/runc.{arch}"


def _load_yaml(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("config file must be YAML")

    import yaml

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping/object")
    for section in SECTIONS:
        if raw.get(section) is not None and not isinstance(raw[section], dict):
            raise ConfigError(f"{path}: '{section}' must be a mapping, got {type(raw[section]).__name__}")
    return raw


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Defaults, then the optional YAML file, then environment overrides."""

    env = os.environ if environ is None else environ

    raw: Dict[str, Any] = {}
    config_path = env.get(CONFIG_ENV)
    if config_path:
        raw = _load_yaml(config_path)
        logger.debug("Loaded settings from %s", config_path)

    for var, (section, key) in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            if raw.get(section) is None:
                raw[section] = {}
            raw[section][key] = value

    settings = Settings(raw=raw)
    try:
        retries = settings.retries
    except (TypeError, ValueError):
        bad = raw["download"]["retries"]
        raise ConfigError(f"download.retries must be an integer, got {bad!r}") from None
    if retries < 0:
        raise ConfigError(f"download.retries must not be negative, got {retries}")
    return settings
