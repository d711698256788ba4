from __future__ import annotations

from dataclasses import fields as dataclass_fields
from datetime import datetime
from typing import TYPE_CHECKING, Any

import strawberry

from ...errors import InvalidArgument, NotFound
from ...logging import get_logger
from ...store import Document, Store
from ...store.base import or_predicate
from ..validators import is_absent, require_date, require_non_empty, require_salary

if TYPE_CHECKING:
    from ..mutations.root import EmployeePatch, NewEmployee
    from ..types.employee import Employee

logger = get_logger(__name__)

DELETE_CONFIRMATION = "Employee deleted successfully"

# Required fields of an Employee and the rule that guards each, in check order
REQUIRED_FIELD_RULES = (
    ("first_name", require_non_empty),
    ("last_name", require_non_empty),
    ("designation", require_non_empty),
    ("salary", require_salary),
    ("date_of_joining", require_date),
    ("department", require_non_empty),
)
OPTIONAL_FIELDS = ("email", "gender", "employee_photo")


def _to_employee(document: Document) -> Employee:
    from ..types.employee import Employee as EmployeeType

    date_of_joining = document["date_of_joining"]
    if isinstance(date_of_joining, datetime):
        date_of_joining = date_of_joining.date()

    return EmployeeType(
        id=strawberry.ID(document["_id"]),
        first_name=document["first_name"],
        last_name=document["last_name"],
        email=document.get("email"),
        gender=document.get("gender"),
        designation=document["designation"],
        salary=float(document["salary"]),
        date_of_joining=date_of_joining,
        department=document["department"],
        employee_photo=document.get("employee_photo"),
        created_at=document.get("created_at"),
        updated_at=document.get("updated_at"),
    )


def _require_eid(eid: Any) -> str:
    if is_absent(eid):
        raise InvalidArgument("eid is required", ["eid"])
    return str(eid)


# Query resolvers
async def get_all_employees(store: Store) -> list[Employee]:
    """Return every employee in natural storage order."""
    employees = await store.employees.find()
    return [_to_employee(employee) for employee in employees]


async def search_employee_by_eid(store: Store, eid: str | None) -> Employee | None:
    """
    Look up an employee by identifier.

    A miss returns None rather than raising.
    """
    employee = await store.employees.find_by_id(_require_eid(eid))
    if employee is None:
        logger.info("Employee not found", eid=str(eid))
        return None
    return _to_employee(employee)


async def search_employees_by_designation_or_department(
    store: Store, designation: str | None, department: str | None
) -> list[Employee]:
    """Return employees whose designation OR department matches."""
    if is_absent(designation) and is_absent(department):
        raise InvalidArgument(
            "Either designation or department is required", ["designation", "department"]
        )

    predicate = or_predicate(
        designation=None if is_absent(designation) else designation.strip(),
        department=None if is_absent(department) else department.strip(),
    )
    employees = await store.employees.find(predicate)
    return [_to_employee(employee) for employee in employees]


# Mutation resolvers
async def add_new_employee(store: Store, new_employee: NewEmployee) -> Employee:
    """Validate and persist a new employee."""
    document: Document = {}
    for field, rule in REQUIRED_FIELD_RULES:
        document[field] = rule(getattr(new_employee, field), field)

    for field in OPTIONAL_FIELDS:
        value = getattr(new_employee, field)
        if value is not None and value is not strawberry.UNSET:
            document[field] = value

    employee = await store.employees.insert(document)
    logger.info("Employee created", eid=employee["_id"], department=employee["department"])
    return _to_employee(employee)


async def update_employee_by_eid(store: Store, eid: str | None, patch: EmployeePatch) -> Employee:
    """
    Apply the supplied subset of fields to an existing employee.

    Fields left UNSET are untouched. Supplied required fields must still pass
    the same rules as on creation; supplied optional fields may be cleared
    with null.
    """
    eid = _require_eid(eid)

    rules = dict(REQUIRED_FIELD_RULES)
    changes: Document = {}
    for field in (f.name for f in dataclass_fields(patch)):
        value = getattr(patch, field)
        if value is strawberry.UNSET:
            continue
        rule = rules.get(field)
        changes[field] = rule(value, field) if rule is not None else value

    employee = await store.employees.update_by_id(eid, changes)
    if employee is None:
        logger.info("Employee not found for update", eid=eid)
        raise NotFound("Employee not found")

    logger.info("Employee updated", eid=eid, fields=sorted(changes))
    return _to_employee(employee)


async def delete_employee_by_eid(store: Store, eid: str | None) -> str:
    """Delete an employee; succeeds whether or not the record existed."""
    eid = _require_eid(eid)
    deleted = await store.employees.delete_by_id(eid)
    logger.info("Employee delete requested", eid=eid, deleted=deleted)
    return DELETE_CONFIRMATION
