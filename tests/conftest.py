"""Shared fixtures."""

from pathlib import Path

import pytest

from pagination_sequence import seq_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a temp location and clear env overrides."""
    user_file = tmp_path / "user-config" / "config.json"
    monkeypatch.setattr(seq_config, "USER_CONFIG_FILE", user_file)
    monkeypatch.delenv(seq_config.EDGES_ENV, raising=False)
    monkeypatch.delenv(seq_config.NEIGHBORS_ENV, raising=False)
    return user_file
