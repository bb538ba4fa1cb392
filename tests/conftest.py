"""Shared fixtures: the users table used across the suites."""

import pytest

from mini_dbase.engine.database import Database

USERS_DDL = (
    "CREATE TABLE users ({key, autoincrement} id: int32, {unique} login: string[32], "
    "password_hash: bytes[8], is_admin: bool = false)"
)


@pytest.fixture
def users_ddl():
    """CREATE TABLE text of the users table."""
    return USERS_DDL


@pytest.fixture
def db():
    return Database()


@pytest.fixture
def users_db(db, users_ddl):
    """Database holding an empty users table."""
    db.create_table_from_text(users_ddl)
    return db
