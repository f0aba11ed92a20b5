"""Odometer enumeration of job assignments.

Every assignment picks one job index per member. Assignments are produced in
mixed-radix counting order: the last member's digit turns fastest and carries
into the previous digit on overflow. The walk ends when the digits come back
to all zeros.
"""

import logging
import math
from collections.abc import Iterator, Sequence

from xivparty.core.schemas import Assignment, Party

logger = logging.getLogger(__name__)


class AssignmentEnumerator:
    """Restartable iterable over every assignment for the given radices.

    Usage::

        for assignment in AssignmentEnumerator.for_party(party):
            ...
    """

    def __init__(self, radices: Sequence[int]) -> None:
        self._radices = tuple(radices)

    @classmethod
    def for_party(cls, party: Party) -> "AssignmentEnumerator":
        return cls([len(member.jobs) for member in party.members])

    @property
    def radices(self) -> tuple[int, ...]:
        return self._radices

    def __len__(self) -> int:
        if not self._radices:
            return 0
        return math.prod(self._radices)

    def __iter__(self) -> Iterator[Assignment]:
        if not self._radices or any(r <= 0 for r in self._radices):
            logger.debug("No combinations for radices %s", self._radices)
            return

        digits = [0] * len(self._radices)
        while True:
            yield tuple(digits)
            _advance(digits, self._radices)
            if not any(digits):
                return


def count_combinations(party: Party) -> int:
    """Return the number of assignments the enumerator walks for ``party``."""
    return len(AssignmentEnumerator.for_party(party))


def _advance(digits: list[int], radices: tuple[int, ...]) -> None:
    """Increment the odometer in place, carrying leftward."""
    for i in reversed(range(len(digits))):
        digits[i] += 1
        if digits[i] < radices[i]:
            return
        digits[i] = 0
