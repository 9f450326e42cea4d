"""
Pydantic schemas for the people resource.

JSON field names are the column names of the `people` table. Integer fields
are bounded to the INTEGER column range so oversized values fail validation
instead of reaching the driver.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

PERSON_COLUMNS = ("id", "first_name", "last_name", "age", "profession", "salary")
MUTABLE_COLUMNS = PERSON_COLUMNS[1:]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def is_storable_id(person_id: int) -> bool:
    return INT32_MIN <= person_id <= INT32_MAX


class PersonCreate(BaseModel):
    first_name: str
    last_name: str
    age: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    profession: str
    salary: int = Field(..., ge=INT32_MIN, le=INT32_MAX)


class PersonUpdate(PersonCreate):
    # Accepted for clients that send the full record back; the path id wins.
    id: int | None = Field(default=None, exclude=True)


class Person(PersonCreate):
    id: int
