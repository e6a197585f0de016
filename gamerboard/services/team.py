import logging
from typing import Any, AsyncIterator, Dict, Mapping
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from gamerboard.errors import DuplicateKeyError, NotFoundError, ValidationError
from gamerboard.models import (
    EventSlot,
    GamerTeam,
    GamerTeamCreate,
    TeamScoreCard,
    TeamSummary,
    utcnow,
)
from gamerboard.repositories.team import make_team_repository

log = logging.getLogger(__name__)

UNIQUE_TEAM_FIELDS = ("teamname", "email")


def _describe_validation_error(exc: PydanticValidationError) -> str:
    problems = []
    for error in exc.errors():
        field_name = ".".join(str(part) for part in error.get("loc", ())) or "payload"
        problems.append(f"{field_name}: {error.get('msg')}")
    return "; ".join(problems)


def event_scores(team: GamerTeam) -> Dict[str, float]:
    return {slot.value: getattr(team, slot.value) for slot in EventSlot}


async def register_team(session: AsyncSession, payload: Mapping[str, Any]) -> GamerTeam:
    try:
        team_in = GamerTeamCreate.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(_describe_validation_error(exc)) from exc

    repository = make_team_repository(session)
    for field_name in UNIQUE_TEAM_FIELDS:
        value = getattr(team_in, field_name)
        if await repository.find_one(**{field_name: value}) is not None:
            log.info("Rejected registration, %s %r is taken", field_name, value)
            raise DuplicateKeyError(f"A team with this {field_name} is already registered")

    now = utcnow()
    team = GamerTeam(
        id=uuid4(),
        **team_in.model_dump(),
        created_at=now,
        updated_at=now,
    )
    team = await repository.insert(team)
    log.info("Registered team %r (%s)", team.teamname, team.id)
    return team


async def list_team_summaries(session: AsyncSession) -> AsyncIterator[TeamSummary]:
    repository = make_team_repository(session)
    async for row in repository.find_all(GamerTeam.id, GamerTeam.teamname):
        yield TeamSummary(id=row.id, teamname=row.teamname)


async def find_team_by_name(session: AsyncSession, teamname: str) -> TeamScoreCard:
    repository = make_team_repository(session)
    team = await repository.find_one(teamname=teamname)
    if team is None:
        raise NotFoundError("Gamer not found")
    return TeamScoreCard(
        teamname=team.teamname,
        collegename=team.collegename,
        eventScores=event_scores(team),
    )
