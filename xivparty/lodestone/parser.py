"""XIVAPI payload parsing.

Pure functions, no network dependency. Payload keys are PascalCase; the
models below map them onto snake_case fields.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xivparty.core.roles import LEVEL_CAP, is_combat_job
from xivparty.core.schemas import JobRecord, Member

logger = logging.getLogger(__name__)


class CharacterSearchEntry(BaseModel):
    """One hit from the character search endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="ID")
    name: str = Field(alias="Name")


class _Pagination(BaseModel):
    results: int = Field(default=0, alias="Results")


class _SearchPayload(BaseModel):
    pagination: _Pagination = Field(default_factory=_Pagination, alias="Pagination")
    results: list[CharacterSearchEntry] = Field(default_factory=list, alias="Results")


class _UnlockedState(BaseModel):
    name: str | None = Field(default=None, alias="Name")


class _ClassJob(BaseModel):
    class_id: int = Field(alias="ClassID")
    level: int | None = Field(default=0, alias="Level")
    unlocked_state: _UnlockedState = Field(
        default_factory=_UnlockedState, alias="UnlockedState",
    )


class _Character(BaseModel):
    name: str = Field(alias="Name")
    class_jobs: list[_ClassJob] = Field(default_factory=list, alias="ClassJobs")


class _CharacterPayload(BaseModel):
    character: _Character = Field(alias="Character")


def parse_server_list(data: Any) -> list[str]:
    """Parse the ``/servers`` payload (a JSON array of server names)."""
    if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
        msg = "Unexpected server list payload: expected a list of names"
        raise ValueError(msg)
    return list(data)


def parse_search_results(data: Any) -> list[CharacterSearchEntry]:
    """Parse the ``/character/search`` payload into search entries."""
    payload = _validate(_SearchPayload, data, "character search")
    if payload.pagination.results != len(payload.results):
        logger.debug(
            "Search reports %d results but page holds %d",
            payload.pagination.results, len(payload.results),
        )
    return payload.results


def parse_member(data: Any) -> Member:
    """Parse the ``/character/{id}`` payload into a Member with combat jobs only.

    Jobs outside the tank/healer/DPS tables (crafters, gatherers, limited
    jobs) are dropped. Levels above the cap are clamped to it.
    """
    payload = _validate(_CharacterPayload, data, "character")
    character = payload.character

    jobs: list[JobRecord] = []
    for class_job in character.class_jobs:
        if not is_combat_job(class_job.class_id):
            continue
        level = class_job.level or 0
        if level > LEVEL_CAP:
            logger.info(
                "%s: class %d is level %d, counting it as the level cap %d",
                character.name, class_job.class_id, level, LEVEL_CAP,
            )
            level = LEVEL_CAP
        jobs.append(JobRecord(
            job_id=class_job.class_id,
            name=class_job.unlocked_state.name or f"Class {class_job.class_id}",
            level=level,
        ))

    logger.debug(
        "Parsed %s: %d of %d jobs are combat jobs",
        character.name, len(jobs), len(character.class_jobs),
    )
    return Member(display_name=character.name, jobs=tuple(jobs))


def _validate(model: type[BaseModel], data: Any, what: str) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        msg = f"Unexpected {what} payload: {e}"
        raise ValueError(msg) from e
