from typing import Any, Iterable, List

from sqlmodel.ext.asyncio.session import AsyncSession

from gamerboard.config import TOP_TEAMS_DEFAULT_LIMIT
from gamerboard.errors import ValidationError
from gamerboard.models import EventSlot, GamerTeam, RankedTeam
from gamerboard.repositories.team import make_team_repository


def total_score(team: Any) -> float:
    """Sum of the five event slots; an unset slot counts as zero."""
    return sum(getattr(team, slot.value, None) or 0 for slot in EventSlot)


def rank_teams(teams: Iterable[GamerTeam], limit: int) -> List[RankedTeam]:
    ranked = [
        RankedTeam(
            teamname=team.teamname,
            collegename=team.collegename,
            **{slot.value: getattr(team, slot.value, None) or 0 for slot in EventSlot},
            totalScore=total_score(team),
        )
        for team in teams
    ]
    # Highest total first; equal totals fall back to team name.
    ranked.sort(key=lambda entry: (-entry.totalScore, entry.teamname))
    return ranked[:limit]


async def top_teams(
    session: AsyncSession, limit: int = TOP_TEAMS_DEFAULT_LIMIT
) -> List[RankedTeam]:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValidationError("Limit must be a non-negative integer")

    repository = make_team_repository(session)
    teams = [team async for team in repository.find_all()]
    return rank_teams(teams, limit)
