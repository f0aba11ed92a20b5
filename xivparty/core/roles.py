"""Fixed role tables and level cap for combat jobs.

Job identifiers are XIVAPI ``ClassID`` values. A class shared by two jobs
(Arcanist levels both Scholar and Summoner) is listed under the first role in
Tank, Healer, DPS order so the three tables stay disjoint.
"""

from enum import Enum

LEVEL_CAP = 80


class Role(str, Enum):
    """Party role a combat job fills."""

    TANK = "tank"
    HEALER = "healer"
    DPS = "dps"


TANK_JOBS: frozenset[int] = frozenset({1, 3, 32, 37})
HEALER_JOBS: frozenset[int] = frozenset({6, 26, 33})
DPS_JOBS: frozenset[int] = frozenset({2, 4, 29, 34, 5, 31, 38, 7, 35})

_ROLE_TABLES: tuple[tuple[Role, frozenset[int]], ...] = (
    (Role.TANK, TANK_JOBS),
    (Role.HEALER, HEALER_JOBS),
    (Role.DPS, DPS_JOBS),
)


def role_of(job_id: int) -> Role | None:
    """Return the role of a job, or None for crafting/gathering/unknown ids."""
    for role, jobs in _ROLE_TABLES:
        if job_id in jobs:
            return role
    return None


def is_combat_job(job_id: int) -> bool:
    """Return True if the job belongs to any of the three role tables."""
    return role_of(job_id) is not None
