from pathlib import Path

import pytest

from varna.config import load_config

REPO_ROOT = Path(__file__).resolve().parents[1]
ENV_VARS = (
    "VARNA_ENV",
    "VARNA_LOG_LEVEL",
    "VARNA_API_HOST",
    "VARNA_API_PORT",
    "VARNA_WORKERS",
    "VARNA_STRICT_VALIDATION",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_dev_profile() -> None:
    config = load_config("dev", config_dir=REPO_ROOT / "configs")

    assert config.env == "dev"
    assert config.log_level == "DEBUG"
    assert config.api_host == "127.0.0.1"
    assert config.api_port == 8000
    assert config.workers == 1
    assert config.strict_validation is False


def test_strict_profile_falls_back_to_defaults() -> None:
    config = load_config("strict", config_dir=REPO_ROOT / "configs")

    assert config.strict_validation is True
    assert config.log_level == "WARNING"
    assert config.api_port == 8000


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("VARNA_ENV", "prod")
    monkeypatch.setenv("VARNA_API_PORT", "9000")
    monkeypatch.setenv("VARNA_STRICT_VALIDATION", "yes")
    monkeypatch.setenv("VARNA_LOG_LEVEL", "warning")

    config = load_config(config_dir=REPO_ROOT / "configs")

    assert config.env == "prod"
    assert config.api_port == 9000
    assert config.workers == 2
    assert config.strict_validation is True
    assert config.log_level == "WARNING"


def test_missing_profile_uses_defaults(tmp_path: Path) -> None:
    config = load_config("staging", config_dir=tmp_path)

    assert config.env == "staging"
    assert config.log_level == "INFO"
    assert config.strict_validation is False


def test_invalid_values_are_rejected(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("VARNA_STRICT_VALIDATION", "maybe")
    with pytest.raises(ValueError, match="VARNA_STRICT_VALIDATION"):
        load_config("dev", config_dir=REPO_ROOT / "configs")

    monkeypatch.delenv("VARNA_STRICT_VALIDATION")
    (tmp_path / "bad.toml").write_text("api_port = true\n", encoding="utf-8")
    with pytest.raises(ValueError, match="api_port"):
        load_config("bad", config_dir=tmp_path)
