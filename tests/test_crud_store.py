"""Classification of store rejections in commit_unique."""

import pytest
from sqlalchemy.exc import IntegrityError

from roster_service.app import crud
from roster_service.app.crud.store import commit_unique, is_foreign_key_violation, is_unique_violation
from roster_service.app.errors import DuplicateKeyError, MissingReferenceError
from roster_service.db import models


class FakeDriverError(Exception):
    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


class FakeSession:
    """Stands in for AsyncSession: commit raises `error`, rollback is recorded."""

    def __init__(self, error: Exception):
        self.error = error
        self.rolled_back = False

    async def commit(self):
        raise self.error

    async def rollback(self):
        self.rolled_back = True


def integrity_error(message: str, sqlstate=None) -> IntegrityError:
    return IntegrityError("INSERT INTO teams ...", {}, FakeDriverError(message, sqlstate))


@pytest.mark.parametrize("error,unique,foreign_key", [
    (integrity_error("duplicate key value violates unique constraint", "23505"), True, False),
    (integrity_error("insert or update violates foreign key constraint", "23503"), False, True),
    (integrity_error("UNIQUE constraint failed: players.email"), True, False),
    (integrity_error("FOREIGN KEY constraint failed"), False, True),
    (integrity_error("NOT NULL constraint failed: players.name"), False, False),
])
def test_violation_classification(error, unique, foreign_key) -> None:
    assert is_unique_violation(error) is unique
    assert is_foreign_key_violation(error) is foreign_key


async def test_not_null_failure_is_not_a_duplicate(db) -> None:
    db.add(models.Player(name=None, email="nameless@email.com"))

    with pytest.raises(IntegrityError):
        await commit_unique(db, "player", "email", "nameless@email.com")

    assert await crud.get_players(db) == []


async def test_foreign_key_failure_becomes_missing_reference() -> None:
    session = FakeSession(integrity_error("violates foreign key constraint", "23503"))

    with pytest.raises(MissingReferenceError) as excinfo:
        await commit_unique(session, "team", "name", "Ford Racing", reference=("TEAM", "a1"))

    assert excinfo.value.message == "Referenced TEAM with id a1 does not exist."
    assert session.rolled_back


async def test_foreign_key_failure_without_reference_is_reraised() -> None:
    session = FakeSession(integrity_error("violates foreign key constraint", "23503"))

    with pytest.raises(IntegrityError):
        await commit_unique(session, "player", "email", "cat@email.com")


async def test_unique_failure_becomes_duplicate_key() -> None:
    session = FakeSession(integrity_error("duplicate key value violates unique constraint", "23505"))

    with pytest.raises(DuplicateKeyError):
        await commit_unique(session, "team", "name", "Ford", reference=("TEAM", None))

    assert session.rolled_back


async def test_other_failures_roll_back_and_propagate() -> None:
    session = FakeSession(ConnectionError("server closed the connection"))

    with pytest.raises(ConnectionError):
        await commit_unique(session, "player", "email", "cat@email.com")

    assert session.rolled_back
