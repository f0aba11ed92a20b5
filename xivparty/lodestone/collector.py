"""Server and party collection, interactive or from a list of names."""

import logging
from collections.abc import Callable

from xivparty.core.schemas import MAX_PARTY_SIZE, Member
from xivparty.lodestone.base import (
    AmbiguousCharacterError,
    CharacterNotFoundError,
    CharacterSource,
)

logger = logging.getLogger(__name__)

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


def prompt_server(
    servers: list[str],
    input_fn: InputFn | None = None,
    output: OutputFn = print,
) -> str:
    """Ask for a server name until a known one is entered.

    Raises:
        ValueError: If input ends before a known server was entered.
    """
    read = input_fn or input
    known = set(servers)
    while True:
        output("Please enter the name of your FFXIV server:")
        try:
            name = read().strip()
        except EOFError:
            msg = "Input ended before a server was chosen"
            raise ValueError(msg) from None
        if name in known:
            return name
        output(f"Server {name} does not exist!")


def resolve_server(
    source: CharacterSource,
    default: str | None = None,
    input_fn: InputFn | None = None,
    output: OutputFn = print,
) -> str:
    """Use the configured server if it exists, otherwise prompt for one."""
    servers = source.list_servers()
    if default is not None:
        if default in servers:
            return default
        logger.warning("Configured server '%s' does not exist, prompting", default)
    return prompt_server(servers, input_fn, output)


def collect_party(
    source: CharacterSource,
    server: str,
    input_fn: InputFn | None = None,
    output: OutputFn = print,
    max_members: int = MAX_PARTY_SIZE,
) -> list[Member]:
    """Prompt for character names until a blank line or a full party.

    End of input counts as a blank line.

    Names that match no character or several characters are reported and
    the same slot is asked again. The result may hold fewer than two members;
    the caller decides whether that is enough.
    """
    read = input_fn or input
    members: list[Member] = []
    while len(members) < max_members:
        output(f"Character {len(members) + 1} Name (press enter to stop):")
        try:
            name = read().strip()
        except EOFError:
            name = ""
        if not name:
            break

        output(f"Searching for {name} in the Lodestone...")
        try:
            member = fetch_character(source, name, server, output)
        except CharacterNotFoundError:
            output("No character with that name was found!")
            continue
        except AmbiguousCharacterError:
            output("Multiple characters were found!")
            continue
        members.append(member)

    return members


def fetch_party_members(
    source: CharacterSource,
    server: str,
    names: list[str],
    output: OutputFn = print,
) -> list[Member]:
    """Fetch a fixed list of characters, failing on the first unresolved name."""
    if len(names) > MAX_PARTY_SIZE:
        msg = f"at most {MAX_PARTY_SIZE} characters can be fetched, got {len(names)}"
        raise ValueError(msg)
    return [fetch_character(source, name, server, output) for name in names]


def fetch_character(
    source: CharacterSource,
    name: str,
    server: str,
    output: OutputFn = print,
) -> Member:
    entry = source.find_character(name, server)
    output(f"Found character {entry.name} with ID {entry.id}!")
    output(f"Getting character data for {entry.name}...")
    return source.fetch_member(entry.id)
