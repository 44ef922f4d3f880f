from __future__ import annotations

from pathlib import Path

import pytest

from containerd_sysext.errors import ConfigError
from containerd_sysext.settings import load_settings


def test_defaults():
    s = load_settings({})

    assert s.containerd_version == "1.7.13"
    assert s.runc_version == "1.1.12"
    assert s.cni_version == "1.4.0"
    assert s.image_path == Path("/var/lib/extensions/containerd.raw")
    assert s.build_dir == Path("/tmp/containerd-sysext-build")
    assert s.download_dir == Path("/tmp/containerd-sysext-build-downloads")
    assert s.log_path == "/var/log/containerd-sysext.log"
    assert s.retries == 3


def test_env_overrides_versions():
    s = load_settings({"CONTAINERD_VERSION": "2.0.1", "RUNC_VERSION": "1.2.3", "CNI_VERSION": "1.5.0"})

    assert s.containerd_url("arm64").endswith("/v2.0.1/containerd-2.0.1-linux-arm64.tar.gz")
    assert s.runc_url("amd64").endswith("/v1.2.3/runc.amd64")
    assert s.cni_version == "1.5.0"


def test_empty_env_value_keeps_default():
    assert load_settings({"CONTAINERD_VERSION": ""}).containerd_version == "1.7.13"


def test_yaml_file_then_env(tmp_path):
    cfg = tmp_path / "sysext.yaml"
    cfg.write_text(
        "versions:\n"
        "  containerd: 1.7.20\n"
        "  runc: 1.1.14\n"
        "paths:\n"
        "  extensions_dir: /srv/extensions\n"
        "download:\n"
        "  retries: 5\n",
        encoding="utf-8",
    )

    s = load_settings({"CONTAINERD_SYSEXT_CONFIG": str(cfg), "RUNC_VERSION": "1.1.15"})

    assert s.containerd_version == "1.7.20"
    assert s.runc_version == "1.1.15"
    assert s.image_path == Path("/srv/extensions/containerd.raw")
    assert s.retries == 5


def test_log_env(tmp_path):
    s = load_settings({"CONTAINERD_SYSEXT_LOG": str(tmp_path / "x.log")})
    assert s.log_path == str(tmp_path / "x.log")


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings({"CONTAINERD_SYSEXT_CONFIG": str(tmp_path / "nope.yaml")})


def test_config_must_be_yaml(tmp_path):
    cfg = tmp_path / "sysext.toml"
    cfg.write_text("x = 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="YAML"):
        load_settings({"CONTAINERD_SYSEXT_CONFIG": str(cfg)})


def test_config_must_be_mapping(tmp_path):
    cfg = tmp_path / "sysext.yml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_settings({"CONTAINERD_SYSEXT_CONFIG": str(cfg)})


@pytest.mark.parametrize("section", ["versions", "sysext", "paths", "download"])
def test_scalar_section_is_rejected(tmp_path, section):
    cfg = tmp_path / "sysext.yaml"
    cfg.write_text(f"{section}: 1.7.20\n", encoding="utf-8")
    with pytest.raises(ConfigError, match=f"'{section}' must be a mapping"):
        load_settings({"CONTAINERD_SYSEXT_CONFIG": str(cfg)})


@pytest.mark.parametrize("value", ["lots", "[1, 2]"])
def test_retries_must_be_integer(tmp_path, value):
    cfg = tmp_path / "sysext.yaml"
    cfg.write_text(f"download:\n  retries: {value}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="download.retries must be an integer"):
        load_settings({"CONTAINERD_SYSEXT_CONFIG": str(cfg)})


def test_negative_retries_rejected(tmp_path):
    cfg = tmp_path / "sysext.yaml"
    cfg.write_text("download:\n  retries: -1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="negative"):
        load_settings({"CONTAINERD_SYSEXT_CONFIG": str(cfg)})
