"""Balance scoring for valid party configurations.

variance: sum of |level_i - level_j| over every ordered pair of distinct
members, so each unordered pair counts twice. Only the ranking matters, the
doubled scale is kept as is.
average_level: floor of the mean chosen level.
"""

from collections.abc import Sequence

from xivparty.core.schemas import Assignment, Party, PartyConfiguration


def score_configuration(party: Party, assignment: Assignment) -> PartyConfiguration:
    """Score an assignment that already passed validation.

    Args:
        party: The party snapshot the assignment indexes into.
        assignment: One job index per member.

    Returns:
        PartyConfiguration with variance and average level of the chosen jobs.
    """
    levels = [job.level for job in party.chosen_jobs(assignment)]
    return PartyConfiguration(
        chosen_indices=tuple(assignment),
        variance=pairwise_variance(levels),
        average_level=average_level(levels),
    )


def pairwise_variance(levels: Sequence[int]) -> int:
    """Sum absolute level differences over all ordered pairs (i != j)."""
    return sum(
        abs(a - b)
        for i, a in enumerate(levels)
        for j, b in enumerate(levels)
        if i != j
    )


def average_level(levels: Sequence[int]) -> int:
    """Integer (floor) mean of the chosen levels."""
    return sum(levels) // len(levels)
