"""Tests for the command-line client."""
import json
from unittest.mock import patch

import httpx
import pytest

from deckserver import cli


def mock_client(handler):
    """Patch the CLI to talk to an in-process handler."""
    client = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://test")
    return patch.object(cli, "_client", return_value=client)


class TestCommands:
    """Test CLI commands against a mocked server."""

    def test_create(self, capsys):
        """Test create sends the options and prints the summary."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"DeckID": "abc", "Shuffled": True, "Remaining": 2})

        with mock_client(handler):
            cli.create_deck(True, "AS,KD")

        assert seen == {"params": {"cards": "AS,KD"}, "body": {"shuffled": True}}
        out = capsys.readouterr().out
        assert "abc" in out
        assert "Remaining: 2" in out

    def test_open(self, capsys):
        """Test open lists the deck's cards."""
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PUT"
            assert request.url.path == "/deck/abc/open"
            return httpx.Response(200, json={
                "deck_id": "abc",
                "shuffled": False,
                "remaining": 1,
                "cards": [{"value": "ACE", "suit": "SPADES", "code": "AS"}],
            })

        with mock_client(handler):
            cli.open_deck("abc")

        out = capsys.readouterr().out
        assert "AS" in out
        assert "SPADES" in out

    def test_draw_error_exits(self, capsys):
        """Test a failed draw prints the error and exits non-zero."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json="not permitted on opened deck")

        with mock_client(handler):
            with pytest.raises(SystemExit) as exc_info:
                cli.draw_cards("abc", 1)

        assert exc_info.value.code == 1
        assert "not permitted on opened deck" in capsys.readouterr().out


class TestMain:
    """Test argument dispatch."""

    def test_no_args(self, capsys):
        """Test running without a command prints usage."""
        with patch.object(cli.sys, "argv", ["deckserver"]):
            with pytest.raises(SystemExit):
                cli.main()

        assert "Usage" in capsys.readouterr().out

    def test_draw_requires_count(self, capsys):
        """Test draw without a numeric count is rejected."""
        with patch.object(cli.sys, "argv", ["deckserver", "draw", "abc", "many"]):
            with pytest.raises(SystemExit):
                cli.main()

        assert "count required" in capsys.readouterr().out

    def test_create_dispatch(self):
        """Test create flags are parsed."""
        with patch.object(cli.sys, "argv", ["deckserver", "create", "--shuffled", "--cards", "AS"]):
            with patch.object(cli, "create_deck") as create:
                cli.main()

        create.assert_called_once_with(True, "AS")
