"""
People request handling.

One stateless function per HTTP verb. Handlers return plain values and raise
`NotFoundError` / `StorageError`; turning those into status codes is left to
`core.errors`. Driver failures are collapsed into `StorageError` here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import asyncpg

from core import config
from core.errors import StorageError

from . import repository
from .schemas import Person, PersonCreate

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except _DRIVER_ERRORS as exc:
        raise StorageError(f"{operation} failed.") from exc


def person_location(person_id: int) -> str:
    return f"{config.public_base_url()}/people/{person_id}"


async def list_people(conn: asyncpg.Connection) -> list[Person]:
    with _storage_errors("list people"):
        rows = await repository.all_people(conn)
    return [Person(**row) for row in rows]


async def get_person(conn: asyncpg.Connection, person_id: int) -> Person:
    with _storage_errors("get person"):
        row = await repository.get_person(conn, person_id)
    return Person(**row)


async def create_person(conn: asyncpg.Connection, person: PersonCreate) -> Person:
    with _storage_errors("create person"):
        row = await repository.insert_person(conn, person)
    logger.info("Created person %s", row["id"])
    return Person(**row)


async def update_person(conn: asyncpg.Connection, person_id: int, person: PersonCreate) -> Person:
    with _storage_errors("update person"):
        row = await repository.update_person(conn, person_id, person)
    return Person(**row)


async def delete_person(conn: asyncpg.Connection, person_id: int) -> None:
    """
    Delete a person, reporting NotFound for unknown ids without touching storage.
    """
    with _storage_errors("delete person"):
        await repository.get_person(conn, person_id)
        removed = await repository.delete_person(conn, person_id)
    logger.info("Deleted person %s (rows=%s)", person_id, removed)
