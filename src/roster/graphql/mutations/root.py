"""
Root GraphQL mutation definitions
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

import strawberry

from ..context import get_hasher, get_store
from ..types.employee import Employee
from ..types.user import User


# Structured argument bags passed from the mutations to the resolvers
@dataclass
class NewEmployee:
    """Fields for creating an employee."""

    first_name: str | None
    last_name: str | None
    designation: str | None
    salary: float | None
    date_of_joining: date | str | None
    department: str | None
    email: str | None = None
    gender: str | None = None
    employee_photo: str | None = None


@dataclass
class EmployeePatch:
    """Partial update for an employee.

    A field left as ``strawberry.UNSET`` was not supplied and is not touched;
    ``None`` is an explicit null.
    """

    first_name: Any = strawberry.UNSET
    last_name: Any = strawberry.UNSET
    email: Any = strawberry.UNSET
    gender: Any = strawberry.UNSET
    designation: Any = strawberry.UNSET
    salary: Any = strawberry.UNSET
    date_of_joining: Any = strawberry.UNSET
    department: Any = strawberry.UNSET
    employee_photo: Any = strawberry.UNSET


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation
    async def signup(
        self, info: strawberry.Info, username: str, email: str, password: str
    ) -> User | None:
        """Register a new user."""
        from ..resolvers.auth import signup

        return await signup(get_store(info), get_hasher(info), username, email, password)

    # Employee mutations
    @strawberry.mutation(name="addNewEmployee")
    async def add_new_employee(
        self,
        info: strawberry.Info,
        first_name: str,
        last_name: str,
        designation: str,
        salary: float,
        date_of_joining: date,
        department: str,
        email: str | None = None,
        gender: str | None = None,
        employee_photo: str | None = None,
    ) -> Employee | None:
        """Create a new employee."""
        from ..resolvers.employee import add_new_employee

        return await add_new_employee(
            get_store(info),
            NewEmployee(
                first_name=first_name,
                last_name=last_name,
                designation=designation,
                salary=salary,
                date_of_joining=date_of_joining,
                department=department,
                email=email,
                gender=gender,
                employee_photo=employee_photo,
            ),
        )

    @strawberry.mutation(name="updateEmployeeByEid")
    async def update_employee_by_eid(
        self,
        info: strawberry.Info,
        eid: strawberry.ID,
        first_name: str | None = strawberry.UNSET,
        last_name: str | None = strawberry.UNSET,
        email: str | None = strawberry.UNSET,
        gender: str | None = strawberry.UNSET,
        designation: str | None = strawberry.UNSET,
        salary: float | None = strawberry.UNSET,
        date_of_joining: date | None = strawberry.UNSET,
        department: str | None = strawberry.UNSET,
        employee_photo: str | None = strawberry.UNSET,
    ) -> Employee | None:
        """Update the supplied fields of an employee."""
        from ..resolvers.employee import update_employee_by_eid

        return await update_employee_by_eid(
            get_store(info),
            eid,
            EmployeePatch(
                first_name=first_name,
                last_name=last_name,
                email=email,
                gender=gender,
                designation=designation,
                salary=salary,
                date_of_joining=date_of_joining,
                department=department,
                employee_photo=employee_photo,
            ),
        )

    @strawberry.mutation(name="deleteEmployeeByEid")
    async def delete_employee_by_eid(self, info: strawberry.Info, eid: strawberry.ID) -> str | None:
        """Delete an employee by ID."""
        from ..resolvers.employee import delete_employee_by_eid

        return await delete_employee_by_eid(get_store(info), eid)
