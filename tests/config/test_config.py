from __future__ import annotations

import os
from pathlib import Path

import pytest

from cwlgraph.config import (
    CacheConfig,
    MissingConfigurationError,
    get_github_config,
    get_storage_config,
    optional_env_var,
    require_env_vars,
)
from cwlgraph.config.github import DEFAULT_GITHUB_API_URL


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR") is None
    assert os.getenv("EXAMPLE_VAR") == "   "


def test_github_config_without_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)

    config = get_github_config()

    assert config.token is None
    assert config.resilience.base_url == DEFAULT_GITHUB_API_URL
    assert config.resilience.default_headers is not None
    assert "Authorization" not in config.resilience.default_headers


def test_github_config_with_token_and_custom_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3/")

    config = get_github_config(cache=CacheConfig(enabled=False))

    assert config.token == "secret"
    assert config.resilience.base_url == "https://github.example.com/api/v3"
    assert config.resilience.default_headers is not None
    assert config.resilience.default_headers["Authorization"] == "Bearer secret"
    assert config.resilience.cache == CacheConfig(enabled=False)


def test_github_config_can_require_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(MissingConfigurationError, match="GITHUB_TOKEN"):
        get_github_config(require_token=True)


def test_storage_config_respects_data_dir(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("CWLGRAPH_DATA_DIR", str(tmp_path / "data"))

    storage = get_storage_config()

    assert storage.http_cache_path() == (tmp_path / "data" / "http_cache.db").resolve()
    assert (tmp_path / "data").is_dir()


def test_storage_config_defaults_to_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CWLGRAPH_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    if os.name == "nt":
        pytest.skip("XDG layout only applies to POSIX systems")

    storage = get_storage_config()

    assert storage.resolve_data_dir() == Path(tmp_path, "cwlgraph").resolve()
