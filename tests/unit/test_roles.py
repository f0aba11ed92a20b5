"""Tests for role tables and classification."""

import pytest

from xivparty.core.roles import (
    DPS_JOBS,
    HEALER_JOBS,
    LEVEL_CAP,
    TANK_JOBS,
    Role,
    is_combat_job,
    role_of,
)


class TestRoleTables:
    def test_tables_are_disjoint(self) -> None:
        assert not TANK_JOBS & HEALER_JOBS
        assert not TANK_JOBS & DPS_JOBS
        assert not HEALER_JOBS & DPS_JOBS

    def test_level_cap(self) -> None:
        assert LEVEL_CAP == 80


class TestRoleOf:
    @pytest.mark.parametrize("job_id", [1, 3, 32, 37])
    def test_tanks(self, job_id: int) -> None:
        assert role_of(job_id) is Role.TANK

    @pytest.mark.parametrize("job_id", [6, 26, 33])
    def test_healers(self, job_id: int) -> None:
        assert role_of(job_id) is Role.HEALER

    @pytest.mark.parametrize("job_id", [2, 4, 5, 7, 29, 31, 34, 35, 38])
    def test_dps(self, job_id: int) -> None:
        assert role_of(job_id) is Role.DPS

    def test_arcanist_counts_as_healer(self) -> None:
        assert role_of(26) is Role.HEALER

    @pytest.mark.parametrize("job_id", [0, 8, 16, 36, 999, -1])
    def test_unknown_is_none(self, job_id: int) -> None:
        assert role_of(job_id) is None


class TestIsCombatJob:
    def test_combat(self) -> None:
        assert is_combat_job(1) is True
        assert is_combat_job(33) is True
        assert is_combat_job(35) is True

    def test_crafter_and_limited_job(self) -> None:
        assert is_combat_job(8) is False
        assert is_combat_job(36) is False
