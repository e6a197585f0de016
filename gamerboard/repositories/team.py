import logging
from typing import Any, AsyncIterator, Dict, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gamerboard.errors import DuplicateKeyError, StorageError
from gamerboard.models import GamerTeam

log = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when ``exc`` comes from a unique index rather than e.g. NOT NULL."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message


class TeamRepository:
    """Document-style access to ``GamerTeam`` records over one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, team: GamerTeam) -> GamerTeam:
        self.session.add(team)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                raise DuplicateKeyError("Team name or email is already registered") from exc
            log.error("Insert of team %r broke a constraint: %s", team.teamname, exc)
            raise StorageError("Team record violates a storage constraint") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            log.error("Insert of team %r failed: %s", team.teamname, exc)
            raise StorageError("Could not save the team record") from exc

        await self.session.refresh(team)
        return team

    async def find_one(self, **criteria: Any) -> Optional[GamerTeam]:
        statement = select(GamerTeam).filter_by(**criteria)
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as exc:
            log.error("Lookup of team by %s failed: %s", sorted(criteria), exc)
            raise StorageError("Could not read team records") from exc
        return result.scalars().first()

    async def find_all(self, *columns: Any) -> AsyncIterator[Any]:
        # Whole records when no projection is given, bare rows otherwise.
        # Rows are pulled from the cursor as the caller iterates.
        statement = select(*columns) if columns else select(GamerTeam)
        try:
            result = await self.session.stream(statement)
        except SQLAlchemyError as exc:
            log.error("Scan of team records failed: %s", exc)
            raise StorageError("Could not read team records") from exc

        rows = result if columns else result.scalars()
        try:
            async for row in rows:
                yield row
        except SQLAlchemyError as exc:
            log.error("Scan of team records failed mid-read: %s", exc)
            raise StorageError("Could not read team records") from exc
        finally:
            await result.close()

    async def atomic_update(
        self, criteria: Dict[str, Any], values: Dict[str, Any]
    ) -> Optional[GamerTeam]:
        """Apply ``values`` to the record matching ``criteria`` in one statement.

        The predicate is evaluated by the database at write time, so a
        concurrent writer can never interleave between the lookup and the
        mutation. Returns ``None`` when nothing matched.
        """

        statement = (
            update(GamerTeam)
            .filter_by(**criteria)
            .values(values)
            .returning(GamerTeam)
        )
        try:
            result = await self.session.execute(statement)
            team = result.scalars().first()
            if team is None:
                await self.session.rollback()
                return None
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            log.error("Atomic update of team failed: %s", exc)
            raise StorageError("Could not update the team record") from exc

        await self.session.refresh(team)
        return team


def make_team_repository(session: AsyncSession) -> TeamRepository:
    return TeamRepository(session)
