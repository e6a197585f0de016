from datetime import datetime, timezone
from typing import Annotated, Dict, Union
from uuid import UUID, uuid4

from pydantic import StrictFloat, StrictInt, StringConstraints
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

MAX_FIELD_LENGTH = 100

# Required registration text: surrounding whitespace is dropped before the
# length bounds are checked.
RequiredText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_FIELD_LENGTH),
]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GamerTeam(SQLModel, table=True):
    __tablename__ = "gamerteam"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    teamname: str = Field(max_length=MAX_FIELD_LENGTH, unique=True, index=True)
    email: str = Field(max_length=MAX_FIELD_LENGTH, unique=True)
    collegename: str = Field(max_length=MAX_FIELD_LENGTH)
    membernameone: str = Field(max_length=MAX_FIELD_LENGTH)
    membernametwo: str = Field(max_length=MAX_FIELD_LENGTH)
    membernamethree: str = Field(max_length=MAX_FIELD_LENGTH)
    membernamefour: str = Field(max_length=MAX_FIELD_LENGTH)

    # Event slots, one per competition event
    eventOne: float = Field(default=0)
    eventTwo: float = Field(default=0)
    eventThree: float = Field(default=0)
    eventFour: float = Field(default=0)
    eventFive: float = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))


class GamerTeamCreate(SQLModel):
    """Registration payload; every field is required and length-bounded."""

    teamname: RequiredText
    email: RequiredText
    collegename: RequiredText
    membernameone: RequiredText
    membernametwo: RequiredText
    membernamethree: RequiredText
    membernamefour: RequiredText


class TeamSummary(SQLModel):
    id: UUID
    teamname: str


class TeamScoreCard(SQLModel):
    teamname: str
    collegename: str
    eventScores: Dict[str, float]


class RankedTeam(SQLModel):
    teamname: str
    collegename: str
    eventOne: float
    eventTwo: float
    eventThree: float
    eventFour: float
    eventFive: float
    totalScore: float


class ScoreUpdateRequest(SQLModel):
    id: str = Field(min_length=1)
    teamname: str = Field(min_length=1)
    eventName: str = Field(min_length=1)
    # Strict so that JSON booleans and numeric strings are not coerced.
    score: Union[StrictInt, StrictFloat]
