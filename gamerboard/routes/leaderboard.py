from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from gamerboard.config import TOP_TEAMS_DEFAULT_LIMIT
from gamerboard.db.database import get_session
from gamerboard.errors import GamerboardError
from gamerboard.models import RankedTeam
from gamerboard.routes.errors import to_http_exception
from gamerboard.services.ranking import top_teams

router = APIRouter(tags=["Leaderboard"])


@router.get("/top-gamers", response_model=List[RankedTeam])
async def get_top_gamers(
    limit: int = Query(default=TOP_TEAMS_DEFAULT_LIMIT),
    session: AsyncSession = Depends(get_session),
) -> List[RankedTeam]:
    try:
        return await top_teams(session, limit)
    except GamerboardError as exc:
        raise to_http_exception(exc) from exc
