"""Interactive, one-at-a-time display of ranked configurations."""

import logging
from collections.abc import Callable

from xivparty.core.schemas import Party, PartyConfiguration
from xivparty.pipeline.ranking import RankingStore

logger = logging.getLogger(__name__)

QUIT_TOKEN = "q"


def format_configuration(party: Party, configuration: PartyConfiguration) -> list[str]:
    """Render one configuration as display lines."""
    lines = []
    for member, job in zip(party.members, party.chosen_jobs(configuration.chosen_indices)):
        lines.append(f"{member.display_name:<20}: {job.name:<15} Lv {job.level}")
    lines.append(f"- Lv Var: {configuration.variance}")
    lines.append(f"- Lv Avg: {configuration.average_level}")
    return lines


def present(
    party: Party,
    store: RankingStore,
    input_fn: Callable[[], str] | None = None,
    output: Callable[[str], None] = print,
) -> int:
    """Show configurations best-first, waiting for a line after each one.

    Entering ``q`` stops; any other line (including an empty one) shows the
    next configuration. End of input behaves like ``q``.

    Returns:
        Number of configurations shown.
    """
    read = input_fn or input
    shown = 0
    while store:
        configuration = store.pop_best()
        if configuration is None:
            break
        for line in format_configuration(party, configuration):
            output(line)
        shown += 1

        try:
            answer = read().strip()
        except EOFError:
            logger.debug("Input closed after %d configurations", shown)
            break
        if answer == QUIT_TOKEN:
            break

    return shown
