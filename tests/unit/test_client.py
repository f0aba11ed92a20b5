"""Tests for the XIVAPI client (HTTP session mocked)."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from xivparty.core.config import ApiConfig
from xivparty.lodestone.base import AmbiguousCharacterError, CharacterNotFoundError
from xivparty.lodestone.client import XIVAPIClient

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def _load(name: str) -> Any:
    return json.loads((FIXTURES_DIR / name).read_text())


def _response(payload: Any = None, status_error: Exception | None = None) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    return resp


def _client(*responses: MagicMock, **config: Any) -> tuple[XIVAPIClient, MagicMock]:
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = list(responses)
    return XIVAPIClient(ApiConfig(**config), session=session), session


class TestListServers:
    def test_returns_names(self) -> None:
        client, session = _client(_response(_load("servers.json")))
        assert "Cerberus" in client.list_servers()
        session.get.assert_called_once_with(
            "https://xivapi.com/servers", params=None, timeout=15.0,
        )

    def test_http_error_propagates(self) -> None:
        client, _ = _client(_response(status_error=requests.HTTPError("503")))
        with pytest.raises(requests.HTTPError):
            client.list_servers()

    def test_invalid_json(self) -> None:
        resp = _response()
        resp.json.side_effect = ValueError("no json")
        client, _ = _client(resp)
        with pytest.raises(ValueError, match="not valid JSON"):
            client.list_servers()


class TestSearchCharacter:
    def test_query_params(self) -> None:
        client, session = _client(_response(_load("character_search_one.json")))
        results = client.search_character("Alice Example", "Cerberus")
        assert results[0].id == 1234567
        session.get.assert_called_once_with(
            "https://xivapi.com/character/search",
            params={"name": "Alice Example", "server": "Cerberus"},
            timeout=15.0,
        )

    def test_private_key_and_base_url(self) -> None:
        client, session = _client(
            _response(_load("character_search_none.json")),
            base_url="https://mirror.example.com/",
            private_key="k",
            timeout_s=3,
        )
        client.search_character("Nobody", "Lich")
        session.get.assert_called_once_with(
            "https://mirror.example.com/character/search",
            params={"name": "Nobody", "server": "Lich", "private_key": "k"},
            timeout=3.0,
        )


class TestFindCharacter:
    def test_single_hit(self) -> None:
        client, _ = _client(_response(_load("character_search_one.json")))
        entry = client.find_character("Alice Example", "Cerberus")
        assert entry.name == "Alice Example"

    def test_no_hit(self) -> None:
        client, _ = _client(_response(_load("character_search_none.json")))
        with pytest.raises(CharacterNotFoundError, match="Nobody"):
            client.find_character("Nobody", "Cerberus")

    def test_several_hits(self) -> None:
        client, _ = _client(_response(_load("character_search_many.json")))
        with pytest.raises(AmbiguousCharacterError, match="Multiple"):
            client.find_character("Bob Example", "Cerberus")

    def test_lookup_errors_are_lookup_errors(self) -> None:
        assert issubclass(CharacterNotFoundError, LookupError)
        assert issubclass(AmbiguousCharacterError, LookupError)


class TestFetchMember:
    def test_fetch(self) -> None:
        client, session = _client(_response(_load("character.json")))
        member = client.fetch_member(1234567)
        assert member.display_name == "Alice Example"
        assert len(member.jobs) == 4
        assert session.get.call_args.args[0] == "https://xivapi.com/character/1234567"


class TestSessionLifetime:
    def test_owned_session_closed_on_exit(self) -> None:
        with patch("xivparty.lodestone.client.requests.Session") as mock_session:
            with XIVAPIClient(ApiConfig()) as client:
                assert isinstance(client, XIVAPIClient)
            mock_session.return_value.close.assert_called_once()

    def test_owned_session_closed_on_error(self) -> None:
        with patch("xivparty.lodestone.client.requests.Session") as mock_session:
            with pytest.raises(requests.ConnectionError), XIVAPIClient(ApiConfig()):
                raise requests.ConnectionError("down")
            mock_session.return_value.close.assert_called_once()

    def test_injected_session_left_open(self) -> None:
        client, session = _client()
        with client:
            pass
        client.close()
        session.close.assert_not_called()
