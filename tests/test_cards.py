"""Tests for cards.py: card reference resolution and card API calls."""

from unittest.mock import patch

import pytest

from clawboard_cli.cards import (
    count_list_cards,
    create_card,
    extract_short_link,
    get_list_cards,
    is_canonical_id,
    move_card,
    resolve_card_id,
)
from clawboard_cli.exceptions import ApiError, ResolutionError

OBJECT_ID = "5f1a2b3c4d5e6f7a8b9c0d1e"
UUID_ID = "123e4567-e89b-12d3-a456-426614174000"


class TestExtractShortLink:
    @pytest.mark.parametrize("ref", ["yuQBBlHs", "ABCDEFGH", "12345678", "a1B2c3D4"])
    def test_bare_short_link(self, ref):
        assert extract_short_link(ref) == ref

    def test_bare_short_link_skips_url_parsing(self):
        with patch("clawboard_cli.cards.urllib.parse.urlsplit") as mock_split:
            assert extract_short_link("yuQBBlHs") == "yuQBBlHs"
        mock_split.assert_not_called()

    def test_surrounding_whitespace_trimmed(self):
        assert extract_short_link("  yuQBBlHs\n") == "yuQBBlHs"

    @pytest.mark.parametrize(
        "url",
        [
            "https://trello.com/c/yuQBBlHs/1-title",
            "https://trello.com/c/yuQBBlHs",
            "https://trello.com/c/yuQBBlHs/",
            "https://trello.com/c/yuQBBlHs/42-some/deeper/path?x=1#frag",
            "http://example.org/c/yuQBBlHs/anything",
        ],
    )
    def test_short_url(self, url):
        assert extract_short_link(url) == "yuQBBlHs"

    @pytest.mark.parametrize(
        "ref",
        [
            "yuQBBlH",  # 7 chars
            "yuQBBlHs9",  # 9 chars
            "yuQB-lHs",
            "https://trello.com/b/yuQBBlHs/board",
            "https://trello.com/c/short/1-title",
            "trello.com/c/yuQBBlHs/1-title",
            OBJECT_ID,
            UUID_ID,
            "",
        ],
    )
    def test_no_short_link(self, ref):
        assert extract_short_link(ref) is None


class TestIsCanonicalId:
    def test_object_id(self):
        assert is_canonical_id(OBJECT_ID)

    def test_uuid(self):
        assert is_canonical_id(UUID_ID)

    def test_uppercase_object_id_rejected(self):
        assert not is_canonical_id(OBJECT_ID.upper())

    def test_wrong_length(self):
        assert not is_canonical_id(OBJECT_ID[:-1])


class TestResolveCardId:
    @patch("clawboard_cli.cards.trello_request")
    def test_short_link_looked_up(self, mock_req, creds):
        mock_req.return_value = {"id": OBJECT_ID}
        assert resolve_card_id("yuQBBlHs", creds) == OBJECT_ID
        mock_req.assert_called_once_with("GET", "/cards/yuQBBlHs", creds, {"fields": "id"})

    @patch("clawboard_cli.cards.trello_request")
    def test_short_url_looked_up(self, mock_req, creds):
        mock_req.return_value = {"id": OBJECT_ID}
        assert resolve_card_id("https://trello.com/c/yuQBBlHs/7-fix-bug", creds) == OBJECT_ID
        assert mock_req.call_args.args[1] == "/cards/yuQBBlHs"

    @pytest.mark.parametrize("ref", [OBJECT_ID, UUID_ID])
    @patch("clawboard_cli.cards.trello_request")
    def test_canonical_id_no_remote_call(self, mock_req, ref, creds):
        assert resolve_card_id(ref, creds) == ref
        mock_req.assert_not_called()

    @patch("clawboard_cli.cards.trello_request")
    def test_canonical_id_trimmed(self, mock_req, creds):
        assert resolve_card_id(f"  {OBJECT_ID} ", creds) == OBJECT_ID
        mock_req.assert_not_called()

    @pytest.mark.parametrize("ref", ["not a card", "https://trello.com/b/x/y", "1234"])
    @patch("clawboard_cli.cards.trello_request")
    def test_unrecognized_fails_naming_input(self, mock_req, ref, creds):
        with pytest.raises(ResolutionError) as exc_info:
            resolve_card_id(ref, creds)
        assert ref in str(exc_info.value)
        assert exc_info.value.ref == ref
        mock_req.assert_not_called()

    @patch("clawboard_cli.cards.trello_request")
    def test_lookup_without_id_fails(self, mock_req, creds):
        mock_req.return_value = {}
        with pytest.raises(ResolutionError) as exc_info:
            resolve_card_id("yuQBBlHs", creds)
        assert "yuQBBlHs" in str(exc_info.value)

    @patch("clawboard_cli.cards.trello_request")
    def test_lookup_non_dict_fails(self, mock_req, creds):
        mock_req.return_value = "card not found"
        with pytest.raises(ResolutionError):
            resolve_card_id("yuQBBlHs", creds)

    @patch("clawboard_cli.cards.trello_request")
    def test_lookup_api_error_propagates(self, mock_req, creds):
        mock_req.side_effect = ApiError("[ERROR] HTTP 404 Not Found", status=404)
        with pytest.raises(ApiError):
            resolve_card_id("yuQBBlHs", creds)


class TestCardCalls:
    @patch("clawboard_cli.cards.trello_request")
    def test_count_list_cards(self, mock_req, creds):
        mock_req.return_value = [{"id": "a"}, {"id": "b"}]
        assert count_list_cards("L1", creds) == 2
        mock_req.assert_called_once_with("GET", "/lists/L1/cards", creds, {"fields": "id"})

    @patch("clawboard_cli.cards.trello_request")
    def test_count_non_list_is_zero(self, mock_req, creds):
        mock_req.return_value = {"unexpected": True}
        assert count_list_cards("L1", creds) == 0

    @patch("clawboard_cli.cards.trello_request")
    def test_get_list_cards_projection(self, mock_req, creds):
        mock_req.return_value = [{"id": "a"}]
        assert get_list_cards("L1", creds) == [{"id": "a"}]
        assert mock_req.call_args.args[3] == {"fields": "id,name,shortUrl,due,dateLastActivity"}

    @patch("clawboard_cli.cards.trello_request")
    def test_create_card_defaults(self, mock_req, creds):
        create_card("L1", "Title", creds)
        mock_req.assert_called_once_with(
            "POST",
            "/cards",
            creds,
            {"idList": "L1", "name": "Title", "desc": "", "due": None, "pos": "top"},
        )

    @patch("clawboard_cli.cards.trello_request")
    def test_create_card_with_desc_and_due(self, mock_req, creds):
        create_card("L1", "Title", creds, desc="body", due="2026-02-03T09:00:00+09:00")
        params = mock_req.call_args.args[3]
        assert params["desc"] == "body"
        assert params["due"] == "2026-02-03T09:00:00+09:00"

    @patch("clawboard_cli.cards.trello_request")
    def test_move_card(self, mock_req, creds):
        move_card(OBJECT_ID, "L2", creds)
        mock_req.assert_called_once_with("PUT", f"/cards/{OBJECT_ID}", creds, {"idList": "L2"})
