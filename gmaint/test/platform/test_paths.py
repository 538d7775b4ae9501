"""Tests for gmaint.platform.paths module."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from gmaint.platform import paths


@pytest.fixture(autouse=True)
def _clear_path_caches() -> Iterator[None]:
    paths.clear_caches()
    yield
    paths.clear_caches()


@pytest.mark.skipif(os.name == "nt", reason="Unix config layout")
class TestUnixPaths:
    def test_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert paths.user_config_dir() == tmp_path / "git-maint"

    def test_falls_back_to_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert paths.user_config_dir() == tmp_path / ".config" / "git-maint"


class TestDefaultConfigPath:
    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "custom.toml"
        monkeypatch.setenv(paths.CONFIG_ENV_VAR, str(target))
        assert paths.default_config_path() == target

    def test_user_config_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(paths.CONFIG_ENV_VAR, raising=False)
        assert paths.default_config_path() == paths.user_config_dir() / "config.toml"
