from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from gamerboard.db.database import get_session
from gamerboard.errors import GamerboardError
from gamerboard.models import (
    GamerTeam,
    GamerTeamCreate,
    ScoreUpdateRequest,
    TeamScoreCard,
    TeamSummary,
)
from gamerboard.routes.errors import to_http_exception
from gamerboard.services.score import update_score
from gamerboard.services.team import (
    find_team_by_name,
    list_team_summaries,
    register_team,
)

router = APIRouter(tags=["Gamer"])


@router.post("/api/gamers", status_code=status.HTTP_201_CREATED, response_model=GamerTeam)
async def create_gamer(
    gamer: GamerTeamCreate,
    session: AsyncSession = Depends(get_session),
):
    try:
        return await register_team(session, gamer.model_dump())
    except GamerboardError as exc:
        raise to_http_exception(exc) from exc


@router.get("/teams", response_model=List[TeamSummary])
async def get_team_names(session: AsyncSession = Depends(get_session)) -> List[TeamSummary]:
    try:
        return [summary async for summary in list_team_summaries(session)]
    except GamerboardError as exc:
        raise to_http_exception(exc) from exc


@router.post("/gamer/score")
async def update_gamer_score(
    request: ScoreUpdateRequest,
    session: AsyncSession = Depends(get_session),
):
    try:
        gamer = await update_score(
            session,
            request.id,
            request.teamname,
            request.eventName,
            request.score,
        )
    except GamerboardError as exc:
        raise to_http_exception(exc) from exc
    return {"message": "Score updated successfully", "gamer": gamer}


@router.get("/gamer/{teamname}", response_model=TeamScoreCard)
async def get_gamer(teamname: str, session: AsyncSession = Depends(get_session)) -> TeamScoreCard:
    try:
        return await find_team_by_name(session, teamname)
    except GamerboardError as exc:
        raise to_http_exception(exc) from exc
