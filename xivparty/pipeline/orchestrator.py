"""Orchestrator: wires enumerator, validator, scorer, and ranking store.

Data flow:
  1. Enumerator → every assignment of one job per member
  2. Validator  → role counts and progression rules
  3. Scorer     → variance / average level
  4. Ranking store insert
The whole pass finishes before anything is presented.
"""

import json
import logging
from collections.abc import Iterable

from xivparty.core.roles import LEVEL_CAP
from xivparty.core.schemas import Party, PartyConfiguration
from xivparty.pipeline.enumerator import AssignmentEnumerator
from xivparty.pipeline.ranking import RankingStore
from xivparty.pipeline.scorer import score_configuration
from xivparty.pipeline.validator import filter_valid

logger = logging.getLogger(__name__)


class SearchResult:
    """Summary of one search over a party snapshot."""

    def __init__(
        self,
        party: Party,
        combinations: int,
        valid_count: int,
        store: RankingStore,
    ) -> None:
        self.party = party
        self.combinations = combinations
        self.valid_count = valid_count
        self.store = store


def run_search(party: Party, level_cap: int = LEVEL_CAP) -> SearchResult:
    """Enumerate, validate, and score every assignment for ``party``.

    Returns SearchResult whose store holds all valid configurations.
    """
    enumerator = AssignmentEnumerator.for_party(party)
    logger.info(
        "Searching %d combinations for %d members", len(enumerator), len(party),
    )

    store = RankingStore()
    for assignment in filter_valid(party, enumerator, level_cap):
        store.insert(score_configuration(party, assignment))

    logger.info("Valid configurations: %d", len(store))
    return SearchResult(
        party=party,
        combinations=len(enumerator),
        valid_count=len(store),
        store=store,
    )


def export_configurations_json(
    party: Party,
    configurations: Iterable[PartyConfiguration],
) -> str:
    """Export configurations (in the given order) as a JSON string."""
    data = []
    for rank, config in enumerate(configurations, start=1):
        jobs = party.chosen_jobs(config.chosen_indices)
        data.append({
            "rank": rank,
            "variance": config.variance,
            "average_level": config.average_level,
            "members": [
                {"name": member.display_name, "job": job.name, "level": job.level}
                for member, job in zip(party.members, jobs)
            ],
        })
    return json.dumps(data, indent=2)
