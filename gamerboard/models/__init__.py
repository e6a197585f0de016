"""Convenience exports for the models package."""

from .event_slot import EventSlot
from .gamer_team import (
    MAX_FIELD_LENGTH,
    GamerTeam,
    GamerTeamCreate,
    RankedTeam,
    ScoreUpdateRequest,
    TeamScoreCard,
    TeamSummary,
    utcnow,
)
