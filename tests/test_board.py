"""Tests for board.py: list-key routing and board provisioning."""

import json
import os
from unittest.mock import call, patch

import pytest

from clawboard_cli import config
from clawboard_cli.board import (
    ensure_board,
    list_id_for_key,
    normalize_list_key,
    provision_board,
    resolve_board_name,
)
from clawboard_cli.exceptions import AuthError, CliError, SetupError, ValidationError


def _fake_service(board_url="https://trello.com/b/AbCd1234/clawboard"):
    """Return a trello_request stand-in that creates a board and sequential lists."""
    list_ids = iter(["list-1", "list-2", "list-3"])

    def _request(method, path, creds, params=None, body=None):
        if path == "/boards":
            out = {"id": "board-1"}
            if board_url:
                out["url"] = board_url
            return out
        if path == "/lists":
            return {"id": next(list_ids), "name": params["name"]}
        raise AssertionError(f"unexpected call {method} {path}")

    return _request


class TestListKeyRouting:
    @pytest.mark.parametrize("key", ["todo", "ToDo", "TODO", "to do", "to-do", "To-Do"])
    def test_todo_aliases(self, key, board):
        assert normalize_list_key(key) == "todo"
        assert list_id_for_key(board, key) == "list-todo"

    @pytest.mark.parametrize("key", ["doing", "DOING", "Doing"])
    def test_doing(self, key, board):
        assert list_id_for_key(board, key) == "list-doing"

    @pytest.mark.parametrize("key", ["done", "DONE"])
    def test_done(self, key, board):
        assert list_id_for_key(board, key) == "list-done"

    @pytest.mark.parametrize("key", ["later", "to_do", "todo ", "", "backlog"])
    def test_unknown_key(self, key, board):
        with pytest.raises(ValidationError) as exc_info:
            list_id_for_key(board, key)
        assert f"Unknown list key: {key}" in str(exc_info.value)


class TestResolveBoardName:
    def test_default(self):
        assert resolve_board_name() == "Clawboard"

    def test_setting_used(self, monkeypatch):
        monkeypatch.setattr(config, "BOARD_NAME", "Team board")
        assert resolve_board_name() == "Team board"

    def test_explicit_wins(self, monkeypatch):
        monkeypatch.setattr(config, "BOARD_NAME", "Team board")
        assert resolve_board_name("  Mine ") == "Mine"

    def test_blank_explicit_falls_through(self):
        assert resolve_board_name("   ") == "Clawboard"


class TestProvisionBoard:
    @patch("clawboard_cli.board.trello_request")
    def test_creates_board_then_three_lists_in_order(self, mock_req, creds):
        mock_req.side_effect = _fake_service()
        result = provision_board(creds, "Clawboard")
        assert mock_req.call_args_list == [
            call("POST", "/boards", creds, {"name": "Clawboard", "defaultLists": False}),
            call("POST", "/lists", creds, {"name": "To do", "idBoard": "board-1", "pos": "bottom"}),
            call("POST", "/lists", creds, {"name": "Doing", "idBoard": "board-1", "pos": "bottom"}),
            call("POST", "/lists", creds, {"name": "Done", "idBoard": "board-1", "pos": "bottom"}),
        ]
        assert result.board_id == "board-1"
        assert result.lists == {"todo": "list-1", "doing": "list-2", "done": "list-3"}
        assert result.board_url == "https://trello.com/b/AbCd1234/clawboard"

    @patch("clawboard_cli.board.trello_request")
    def test_board_without_url(self, mock_req, creds):
        mock_req.side_effect = _fake_service(board_url=None)
        assert provision_board(creds, "X").board_url is None

    @patch("clawboard_cli.board.trello_request")
    def test_board_without_id_fails(self, mock_req, creds):
        mock_req.return_value = {}
        with pytest.raises(CliError):
            provision_board(creds, "X")


class TestEnsureBoard:
    @patch("clawboard_cli.board.trello_request")
    def test_first_run_provisions_and_persists(self, mock_req, creds):
        mock_req.side_effect = _fake_service()
        board = ensure_board(creds)
        assert board.lists == {"todo": "list-1", "doing": "list-2", "done": "list-3"}
        with open(config.BOARD_PATH) as f:
            saved = json.load(f)
        assert saved == {
            "boardId": "board-1",
            "boardUrl": "https://trello.com/b/AbCd1234/clawboard",
            "lists": {"todo": "list-1", "doing": "list-2", "done": "list-3"},
        }

    @patch("clawboard_cli.board.trello_request")
    def test_second_run_reads_back_without_calls(self, mock_req, creds):
        mock_req.side_effect = _fake_service()
        first = ensure_board(creds)
        mock_req.reset_mock()
        second = ensure_board(creds)
        mock_req.assert_not_called()
        assert second == first

    @patch("clawboard_cli.board.trello_request")
    def test_existing_config_returned_unchanged(self, mock_req, creds):
        data = {"boardId": "B", "lists": {"todo": "T", "doing": "D", "done": "X"}}
        os.makedirs(os.path.dirname(config.BOARD_PATH), exist_ok=True)
        with open(config.BOARD_PATH, "w") as f:
            json.dump(data, f)
        board = ensure_board(creds)
        mock_req.assert_not_called()
        assert board.to_dict() == data

    @patch("clawboard_cli.board.trello_request")
    def test_board_name_threaded_through(self, mock_req, creds, monkeypatch):
        monkeypatch.setattr(config, "BOARD_NAME", "From settings")
        mock_req.side_effect = _fake_service()
        ensure_board(creds, board_name="Explicit")
        assert mock_req.call_args_list[0].args[3]["name"] == "Explicit"

    @patch("clawboard_cli.board.trello_request")
    def test_setting_used_when_no_name_given(self, mock_req, creds, monkeypatch):
        monkeypatch.setattr(config, "BOARD_NAME", "From settings")
        mock_req.side_effect = _fake_service()
        ensure_board(creds)
        assert mock_req.call_args_list[0].args[3]["name"] == "From settings"

    @patch("clawboard_cli.board.trello_request")
    def test_auth_failure_writes_nothing(self, mock_req, creds):
        mock_req.side_effect = AuthError("[AUTH_FAILED] HTTP 401 Unauthorized", status=401)
        with pytest.raises(AuthError) as exc_info:
            ensure_board(creds)
        assert "401" in str(exc_info.value)
        assert not os.path.exists(config.BOARD_PATH)

    @patch("clawboard_cli.board.trello_request")
    def test_failure_mid_lists_writes_nothing(self, mock_req, creds):
        service = _fake_service()
        calls = {"n": 0}

        def _flaky(method, path, creds, params=None, body=None):
            calls["n"] += 1
            if calls["n"] == 3:
                raise CliError("[ERROR] Connection failed: reset")
            return service(method, path, creds, params, body)

        mock_req.side_effect = _flaky
        with pytest.raises(CliError):
            ensure_board(creds)
        assert not os.path.exists(config.BOARD_PATH)

    def test_malformed_config_is_setup_error(self, creds):
        os.makedirs(os.path.dirname(config.BOARD_PATH), exist_ok=True)
        with open(config.BOARD_PATH, "w") as f:
            f.write("{not json")
        with pytest.raises(SetupError) as exc_info:
            ensure_board(creds)
        assert config.BOARD_PATH in str(exc_info.value)

    @patch("clawboard_cli.board.trello_request")
    def test_verbose_notices_on_stderr(self, mock_req, creds, monkeypatch, capsys):
        monkeypatch.setattr(config, "RUNTIME_VERBOSE", True)
        mock_req.side_effect = _fake_service()
        ensure_board(creds)
        err = capsys.readouterr().err
        assert "creating board 'Clawboard'" in err
        assert "Wrote board config" in err
