"""Rule chain that decides whether an assignment is a usable party.

Rule order:
  1. ExactlyOneRoleRule(TANK)
  2. ExactlyOneRoleRule(HEALER)
  3. AllUnlockedRule: no chosen job at level 0
  4. NotAllMaxedRule: at least one chosen job below the level cap

Members that are neither the tank nor the healer are not checked for DPS
separately: a second tank or healer already fails the counts above.
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from xivparty.core.roles import LEVEL_CAP, Role, role_of
from xivparty.core.schemas import Assignment, JobRecord, Party

logger = logging.getLogger(__name__)

# A rule takes the jobs chosen by an assignment and accepts or rejects them.
Rule = Callable[[list[JobRecord]], bool]


class ExactlyOneRoleRule:
    """Accept only when exactly one chosen job has the given role."""

    def __init__(self, role: Role) -> None:
        self._role = role

    def __call__(self, jobs: list[JobRecord]) -> bool:
        return sum(1 for job in jobs if role_of(job.job_id) is self._role) == 1


class AllUnlockedRule:
    """Reject any assignment containing a locked (level 0) job."""

    def __call__(self, jobs: list[JobRecord]) -> bool:
        return all(job.level > 0 for job in jobs)


class NotAllMaxedRule:
    """Reject assignments where every chosen job is already capped."""

    def __init__(self, level_cap: int = LEVEL_CAP) -> None:
        self._level_cap = level_cap

    def __call__(self, jobs: list[JobRecord]) -> bool:
        return not all(job.level >= self._level_cap for job in jobs)


def default_rules(level_cap: int = LEVEL_CAP) -> list[Rule]:
    return [
        ExactlyOneRoleRule(Role.TANK),
        ExactlyOneRoleRule(Role.HEALER),
        AllUnlockedRule(),
        NotAllMaxedRule(level_cap),
    ]


def is_valid(
    party: Party,
    assignment: Assignment,
    level_cap: int = LEVEL_CAP,
    rules: list[Rule] | None = None,
) -> bool:
    """Return True if the jobs chosen by ``assignment`` pass every rule."""
    jobs = party.chosen_jobs(assignment)
    if rules is None:
        rules = default_rules(level_cap)
    return all(rule(jobs) for rule in rules)


def filter_valid(
    party: Party,
    assignments: Iterable[Assignment],
    level_cap: int = LEVEL_CAP,
) -> Iterator[Assignment]:
    """Yield only the assignments that pass the rule chain."""
    rules = default_rules(level_cap)
    rejected = 0
    for assignment in assignments:
        if is_valid(party, assignment, rules=rules):
            yield assignment
        else:
            rejected += 1
    if rejected:
        logger.debug("Validator: rejected %d assignments", rejected)
