import asyncio
import inspect

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, OperationalError

from gamerboard.db.database import get_session
from gamerboard.errors import DuplicateKeyError
from gamerboard.main import app
from gamerboard.models import GamerTeam
from gamerboard.repositories.team import is_unique_violation, make_team_repository
from gamerboard.services.team import register_team
from tests.conftest import AsyncSessionLocal, make_team_payload, override_get_session


class _SqlStateError(Exception):
    def __init__(self, message, sqlstate):
        super().__init__(message)
        self.sqlstate = sqlstate


class _UnavailableSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is unavailable"))

    async def stream(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is unavailable"))


async def _unavailable_session():
    yield _UnavailableSession()


async def _register(suffix):
    async with AsyncSessionLocal() as session:
        return await register_team(session, make_team_payload(suffix))


def _integrity_error(orig):
    return IntegrityError("INSERT INTO gamerteam", {}, orig)


def test_insert_with_colliding_email_is_a_duplicate(setup_database):
    existing = asyncio.run(_register("repo-a"))

    async def insert_colliding_team():
        payload = make_team_payload("repo-b", email=existing.email)
        async with AsyncSessionLocal() as session:
            await make_team_repository(session).insert(GamerTeam(**payload))

    # Goes straight to storage, so only the unique index can catch it.
    with pytest.raises(DuplicateKeyError):
        asyncio.run(insert_colliding_team())


def test_unique_violations_are_told_apart_from_other_integrity_errors():
    assert is_unique_violation(
        _integrity_error(Exception("UNIQUE constraint failed: gamerteam.email"))
    )
    assert is_unique_violation(
        _integrity_error(_SqlStateError("duplicate key value", "23505"))
    )
    assert not is_unique_violation(
        _integrity_error(Exception("NOT NULL constraint failed: gamerteam.collegename"))
    )
    assert not is_unique_violation(
        _integrity_error(_SqlStateError("null value in column", "23502"))
    )


def test_find_all_yields_rows_without_reading_everything(setup_database):
    asyncio.run(_register("repo-c"))
    asyncio.run(_register("repo-d"))

    async def read_first_row():
        async with AsyncSessionLocal() as session:
            rows = make_team_repository(session).find_all(GamerTeam.id, GamerTeam.teamname)
            assert inspect.isasyncgen(rows)
            first = await rows.__anext__()
            await rows.aclose()
            return first

    first = asyncio.run(read_first_row())
    assert isinstance(first.teamname, str)


def test_storage_failure_is_service_unavailable(setup_database):
    app.dependency_overrides[get_session] = _unavailable_session
    try:
        with TestClient(app) as client:
            lookup = client.get("/gamer/Anyone")
            listing = client.get("/teams")
    finally:
        app.dependency_overrides[get_session] = override_get_session

    assert lookup.status_code == 503
    assert lookup.json()["detail"]["error"] == "StorageError"
    assert listing.status_code == 503
    assert listing.json()["detail"]["error"] == "StorageError"
