"""
People persistence (raw SQL).

Every function takes the connection to run on; the caller owns its lifetime.
Each call is a single statement, so there is no explicit transaction.
Ids outside the SERIAL range cannot match a row and never reach the driver.
"""

from __future__ import annotations

import asyncpg

from core.errors import NotFoundError, StorageError

from .schemas import PersonCreate, is_storable_id

_SELECT_COLUMNS = "id, first_name, last_name, age, profession, salary"


def _parse_row_count(status: str) -> int:
    # asyncpg returns the command tag, e.g. "DELETE 1".
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, AttributeError) as exc:
        raise StorageError(f"Unexpected command tag: {status!r}") from exc


async def all_people(conn: asyncpg.Connection) -> list[dict]:
    rows = await conn.fetch(
        f"""
        SELECT {_SELECT_COLUMNS}
        FROM people
        ORDER BY id ASC
        """
    )
    return [dict(row) for row in rows]


async def get_person(conn: asyncpg.Connection, person_id: int) -> dict:
    if not is_storable_id(person_id):
        raise NotFoundError(f"Person {person_id} not found.")
    row = await conn.fetchrow(
        f"""
        SELECT {_SELECT_COLUMNS}
        FROM people
        WHERE id = $1
        """,
        person_id,
    )
    if row is None:
        raise NotFoundError(f"Person {person_id} not found.")
    return dict(row)


async def insert_person(conn: asyncpg.Connection, person: PersonCreate) -> dict:
    row = await conn.fetchrow(
        f"""
        INSERT INTO people (first_name, last_name, age, profession, salary)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_SELECT_COLUMNS}
        """,
        person.first_name,
        person.last_name,
        person.age,
        person.profession,
        person.salary,
    )
    if row is None:
        raise StorageError("Insert returned no row.")
    return dict(row)


async def update_person(conn: asyncpg.Connection, person_id: int, person: PersonCreate) -> dict:
    if not is_storable_id(person_id):
        raise NotFoundError(f"Person {person_id} not found.")
    row = await conn.fetchrow(
        f"""
        UPDATE people
        SET first_name = $2,
            last_name = $3,
            age = $4,
            profession = $5,
            salary = $6
        WHERE id = $1
        RETURNING {_SELECT_COLUMNS}
        """,
        person_id,
        person.first_name,
        person.last_name,
        person.age,
        person.profession,
        person.salary,
    )
    if row is None:
        raise NotFoundError(f"Person {person_id} not found.")
    return dict(row)


async def delete_person(conn: asyncpg.Connection, person_id: int) -> int:
    if not is_storable_id(person_id):
        return 0
    status = await conn.execute(
        """
        DELETE FROM people
        WHERE id = $1
        """,
        person_id,
    )
    return _parse_row_count(status)
