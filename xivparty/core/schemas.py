"""Core data models for the party planner."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from xivparty.core.roles import LEVEL_CAP

MIN_PARTY_SIZE = 2
MAX_PARTY_SIZE = 4

# One job index per party member, in member order.
Assignment = tuple[int, ...]


class JobRecord(BaseModel):
    """A single job a character owns. Level 0 means the job is still locked."""

    model_config = ConfigDict(frozen=True)

    job_id: int
    name: str
    level: int = Field(default=0, ge=0, le=LEVEL_CAP)


class Member(BaseModel):
    """A party member and their combat jobs.

    The order of ``jobs`` is the index space the enumerator walks.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str
    jobs: tuple[JobRecord, ...] = ()

    @field_validator("display_name")
    @classmethod
    def display_name_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "display_name must not be empty"
            raise ValueError(msg)
        return v.strip()


class Party(BaseModel):
    """An immutable snapshot of 2-4 members taken before the search starts."""

    model_config = ConfigDict(frozen=True)

    members: tuple[Member, ...]

    @field_validator("members")
    @classmethod
    def party_size_in_range(cls, v: tuple[Member, ...]) -> tuple[Member, ...]:
        if not MIN_PARTY_SIZE <= len(v) <= MAX_PARTY_SIZE:
            msg = (
                f"party must have {MIN_PARTY_SIZE}-{MAX_PARTY_SIZE} members, "
                f"got {len(v)}"
            )
            raise ValueError(msg)
        return v

    def __len__(self) -> int:
        return len(self.members)

    def chosen_jobs(self, assignment: Assignment) -> list[JobRecord]:
        """Return the job each member picks under ``assignment``."""
        return [member.jobs[i] for member, i in zip(self.members, assignment)]

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Party":
        """Load a party snapshot from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Party file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def to_yaml(self, path: str | Path) -> None:
        """Write the party snapshot to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json")
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))


class PartyConfiguration(BaseModel):
    """A valid assignment together with its balance score."""

    model_config = ConfigDict(frozen=True)

    chosen_indices: Assignment
    variance: int = Field(ge=0)
    average_level: int
