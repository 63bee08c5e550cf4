"""
Shared test fixtures for clawboard-cli tests.
Points the config module at a temp directory so tests never touch ~/.config
or make real API calls.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clawboard_cli.models import BoardConfig, Credentials  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Ensure every test starts with a clean config state in its own directory."""
    from clawboard_cli import config

    cfg_dir = tmp_path / "trello"
    monkeypatch.setattr(config, "CONFIG_DIR", str(cfg_dir))
    monkeypatch.setattr(config, "ENV_PATH", str(cfg_dir / "clawboard.env"))
    monkeypatch.setattr(config, "CREDENTIALS_PATH", str(cfg_dir / "credentials.json"))
    monkeypatch.setattr(config, "BOARD_PATH", str(cfg_dir / "board.json"))
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "BOARD_NAME", "")
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)
    return cfg_dir


@pytest.fixture
def creds():
    return Credentials(key="fake-key-123456", token="fake-token-abcdef")


@pytest.fixture
def board():
    return BoardConfig(
        board_id="b" * 24,
        lists={"todo": "list-todo", "doing": "list-doing", "done": "list-done"},
        board_url="https://trello.com/b/AbCd1234/clawboard",
    )
