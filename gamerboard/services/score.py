import logging
import math
from typing import Any
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from gamerboard.errors import InvalidEventError, NotFoundError, ValidationError
from gamerboard.models import EventSlot, GamerTeam, utcnow
from gamerboard.repositories.team import make_team_repository

log = logging.getLogger(__name__)


def parse_event_slot(event_name: Any) -> EventSlot:
    try:
        return EventSlot(event_name)
    except (TypeError, ValueError) as exc:
        valid = ", ".join(slot.value for slot in EventSlot)
        raise InvalidEventError(f"Invalid event name. Valid options are: {valid}.") from exc


def _check_score(score: Any) -> float:
    # bool is an int subclass, but True is not a score.
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValidationError("Score must be a number")
    if not math.isfinite(score):
        raise ValidationError("Score must be a finite number")
    return float(score)


def _parse_team_id(team_id: Any) -> UUID:
    if isinstance(team_id, UUID):
        return team_id
    try:
        return UUID(str(team_id))
    except ValueError as exc:
        raise NotFoundError("Gamer not found") from exc


async def update_score(
    session: AsyncSession,
    team_id: Any,
    teamname: str,
    event_name: Any,
    score: Any,
) -> GamerTeam:
    slot = parse_event_slot(event_name)
    value = _check_score(score)
    team_uuid = _parse_team_id(team_id)

    repository = make_team_repository(session)
    team = await repository.atomic_update(
        {"id": team_uuid, "teamname": teamname},
        {slot.value: value, "updated_at": utcnow()},
    )
    if team is None:
        log.info("Score update for %r (%s) matched no team", teamname, team_uuid)
        raise NotFoundError("Gamer not found")

    log.info("Set %s=%s for team %r", slot.value, value, teamname)
    return team
