"""
Root GraphQL query definitions
"""

import strawberry

from ..context import get_hasher, get_store
from ..types.employee import Employee
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def login(
        self,
        info: strawberry.Info,
        password: str,
        username: str | None = None,
        email: str | None = None,
    ) -> User | None:
        """Log in with a username or email and a password."""
        from ..resolvers.auth import login

        return await login(get_store(info), get_hasher(info), username, email, password)

    @strawberry.field(name="getAllEmployees")
    async def get_all_employees(self, info: strawberry.Info) -> list[Employee | None] | None:
        """Get all employees."""
        from ..resolvers.employee import get_all_employees

        return await get_all_employees(get_store(info))

    @strawberry.field(name="searchEmployeeByEid")
    async def search_employee_by_eid(
        self, info: strawberry.Info, eid: strawberry.ID
    ) -> Employee | None:
        """Get an employee by ID."""
        from ..resolvers.employee import search_employee_by_eid

        return await search_employee_by_eid(get_store(info), eid)

    @strawberry.field(name="searchEmployeeByDesignationOrDepartment")
    async def search_employee_by_designation_or_department(
        self,
        info: strawberry.Info,
        designation: str | None = None,
        department: str | None = None,
    ) -> list[Employee | None] | None:
        """Get employees matching a designation or a department."""
        from ..resolvers.employee import search_employees_by_designation_or_department

        return await search_employees_by_designation_or_department(
            get_store(info), designation, department
        )
