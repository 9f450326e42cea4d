"""
People API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db

from . import service
from .schemas import Person, PersonCreate, PersonUpdate

router = APIRouter(prefix="/people")


@router.get("", response_model=list[Person])
async def list_people(conn: asyncpg.Connection = Depends(db.get_connection)) -> list[Person]:
    return await service.list_people(conn)


@router.get("/{person_id}", response_model=Person)
async def get_person(
    person_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> Person:
    return await service.get_person(conn, person_id)


@router.post("", response_model=Person, status_code=status.HTTP_201_CREATED)
async def create_person(
    request: PersonCreate,
    response: Response,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> Person:
    person = await service.create_person(conn, request)
    response.headers["Location"] = service.person_location(person.id)
    return person


@router.put("/{person_id}", response_model=Person)
async def update_person(
    person_id: int,
    request: PersonUpdate,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> Person:
    return await service.update_person(conn, person_id, request)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: int,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> Response:
    await service.delete_person(conn, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
