"""
Employee GraphQL type definitions
"""

from datetime import date, datetime

import strawberry


@strawberry.type
class Employee:
    """Employee type for GraphQL API."""

    id: strawberry.ID = strawberry.field(name="_id")
    first_name: str
    last_name: str
    email: str | None
    gender: str | None
    designation: str
    salary: float
    date_of_joining: date
    department: str
    employee_photo: str | None
    created_at: datetime | None
    updated_at: datetime | None
