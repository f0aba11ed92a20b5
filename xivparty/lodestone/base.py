"""Abstract base class for character data sources."""

from abc import ABC, abstractmethod

from xivparty.core.schemas import Member
from xivparty.lodestone.parser import CharacterSearchEntry


class CharacterNotFoundError(LookupError):
    """No character with the given name exists on the server."""


class AmbiguousCharacterError(LookupError):
    """More than one character matched the given name."""


class CharacterSource(ABC):
    """Base class that every character data source must implement."""

    @abstractmethod
    def list_servers(self) -> list[str]:
        """Return the names of all known game servers."""

    @abstractmethod
    def search_character(self, name: str, server: str) -> list[CharacterSearchEntry]:
        """Return every character matching ``name`` on ``server``."""

    @abstractmethod
    def fetch_member(self, character_id: int) -> Member:
        """Return a character's combat jobs and levels."""

    def find_character(self, name: str, server: str) -> CharacterSearchEntry:
        """Resolve a name to exactly one character.

        Raises:
            CharacterNotFoundError: If the search has no hits.
            AmbiguousCharacterError: If the search has several hits.
        """
        hits = self.search_character(name, server)
        if not hits:
            msg = f"No character named '{name}' was found on {server}"
            raise CharacterNotFoundError(msg)
        if len(hits) > 1:
            msg = f"Multiple characters named '{name}' were found on {server} ({len(hits)})"
            raise AmbiguousCharacterError(msg)
        return hits[0]
