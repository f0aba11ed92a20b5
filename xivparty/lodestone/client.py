"""XIVAPI client: server list, character search, and character detail."""

import logging
from types import TracebackType
from typing import Any

import requests

from xivparty.core.config import ApiConfig
from xivparty.core.schemas import Member
from xivparty.lodestone.base import CharacterSource
from xivparty.lodestone.parser import (
    CharacterSearchEntry,
    parse_member,
    parse_search_results,
    parse_server_list,
)

logger = logging.getLogger(__name__)


class XIVAPIClient(CharacterSource):
    """Character source backed by the public XIVAPI JSON service.

    Usage::

        with XIVAPIClient(config) as client:
            servers = client.list_servers()

    A session passed in by the caller stays open; one created here is closed
    on exit.
    """

    def __init__(self, config: ApiConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._owns_session = session is None
        self._session = session or requests.Session()

    def __enter__(self) -> "XIVAPIClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def list_servers(self) -> list[str]:
        logger.info("Getting list of servers...")
        return parse_server_list(self._get("/servers"))

    def search_character(self, name: str, server: str) -> list[CharacterSearchEntry]:
        logger.info("Searching for %s on %s...", name, server)
        data = self._get("/character/search", {"name": name, "server": server})
        return parse_search_results(data)

    def fetch_member(self, character_id: int) -> Member:
        logger.info("Getting character data for %d...", character_id)
        return parse_member(self._get(f"/character/{character_id}"))

    def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        query = dict(params or {})
        if self._config.private_key:
            query["private_key"] = self._config.private_key

        url = f"{self._config.base_url}{path}"
        logger.debug("GET %s %s", url, {k: v for k, v in query.items() if k != "private_key"})
        resp = self._session.get(url, params=query or None, timeout=self._config.timeout_s)
        resp.raise_for_status()
        try:
            return resp.json()
        except ValueError as e:
            msg = f"Response from {url} is not valid JSON"
            raise ValueError(msg) from e
