"""
Unit tests for employee resolvers
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from roster.errors import AdapterUnavailable, InvalidArgument, NotFound
from roster.graphql.mutations.root import EmployeePatch, NewEmployee
from roster.graphql.resolvers.employee import (
    DELETE_CONFIRMATION,
    add_new_employee,
    delete_employee_by_eid,
    get_all_employees,
    search_employee_by_eid,
    search_employees_by_designation_or_department,
    update_employee_by_eid,
)


async def _add(store, **overrides):
    fields = {
        "first_name": "A",
        "last_name": "B",
        "designation": "Eng",
        "salary": 2000,
        "date_of_joining": "2024-01-01",
        "department": "R&D",
    }
    fields.update(overrides)
    return await add_new_employee(store, NewEmployee(**fields))


class TestAddNewEmployee:
    """Tests for addNewEmployee mutation."""

    @pytest.mark.asyncio
    async def test_add_employee_success(self, store, employee_fields):
        """Test creating an employee with all fields."""
        employee = await add_new_employee(store, NewEmployee(**employee_fields))

        assert employee.id
        assert employee.first_name == "Ada"
        assert employee.last_name == "Lovelace"
        assert employee.email == "ada@example.com"
        assert employee.gender == "Female"
        assert employee.salary == 5000.0
        assert employee.date_of_joining == date(2024, 1, 1)
        assert employee.department == "R&D"
        assert employee.employee_photo is None
        assert employee.created_at is not None

    @pytest.mark.asyncio
    async def test_add_then_search_round_trip(self, store, employee_fields):
        """Test that a created employee is found again by its identifier."""
        created = await add_new_employee(store, NewEmployee(**employee_fields))

        found = await search_employee_by_eid(store, created.id)

        assert found == created

    @pytest.mark.asyncio
    async def test_salary_below_minimum(self, store):
        """Test that a salary under 1000 is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            await _add(store, salary=500)

        assert exc_info.value.fields == ["salary"]
        assert await store.employees.find() == []

    @pytest.mark.asyncio
    async def test_salary_at_minimum(self, store):
        """Test that exactly 1000 is accepted."""
        employee = await _add(store, salary=1000)

        assert employee.salary == 1000.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"first_name": ""}, "first_name"),
            ({"last_name": "  "}, "last_name"),
            ({"designation": None}, "designation"),
            ({"salary": None}, "salary"),
            ({"salary": "lots"}, "salary"),
            ({"date_of_joining": None}, "date_of_joining"),
            ({"date_of_joining": "01/02/2024"}, "date_of_joining"),
            ({"department": ""}, "department"),
        ],
    )
    async def test_required_field_validation(self, store, overrides, field):
        """Test each required field is validated and named."""
        with pytest.raises(InvalidArgument) as exc_info:
            await _add(store, **overrides)

        assert exc_info.value.fields == [field]

    @pytest.mark.asyncio
    async def test_first_failure_wins(self, store):
        """Test validation stops at the first failing field."""
        with pytest.raises(InvalidArgument) as exc_info:
            await _add(store, last_name="", salary=1, department="")

        assert exc_info.value.fields == ["last_name"]


class TestSearchEmployees:
    """Tests for employee queries."""

    @pytest.mark.asyncio
    async def test_get_all_employees(self, store):
        """Test listing returns every employee in insertion order."""
        first = await _add(store, first_name="One")
        second = await _add(store, first_name="Two")

        employees = await get_all_employees(store)

        assert [e.id for e in employees] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_get_all_employees_empty(self, store):
        """Test listing an empty collection."""
        assert await get_all_employees(store) == []

    @pytest.mark.asyncio
    async def test_search_by_eid_miss_returns_none(self, store):
        """Test that an unknown identifier returns None rather than raising."""
        assert await search_employee_by_eid(store, str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_search_by_eid_requires_eid(self, store):
        """Test that a missing identifier is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            await search_employee_by_eid(store, None)

        assert exc_info.value.fields == ["eid"]

    @pytest.mark.asyncio
    async def test_search_by_designation(self, store):
        """Test designation matches regardless of department."""
        eng_rd = await _add(store, designation="Eng", department="R&D")
        eng_ops = await _add(store, designation="Eng", department="Ops")
        await _add(store, designation="Sales", department="Ops")

        employees = await search_employees_by_designation_or_department(store, "Eng", None)

        assert {e.id for e in employees} == {eng_rd.id, eng_ops.id}

    @pytest.mark.asyncio
    async def test_search_by_designation_or_department(self, store):
        """Test that either field qualifies a record."""
        eng = await _add(store, designation="Eng", department="R&D")
        ops = await _add(store, designation="Sales", department="Ops")
        await _add(store, designation="Sales", department="Marketing")

        employees = await search_employees_by_designation_or_department(store, "Eng", "Ops")

        assert {e.id for e in employees} == {eng.id, ops.id}

    @pytest.mark.asyncio
    async def test_search_requires_a_filter(self, store):
        """Test that both filters absent is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            await search_employees_by_designation_or_department(store, None, "")

        assert exc_info.value.fields == ["designation", "department"]


class TestUpdateEmployee:
    """Tests for updateEmployeeByEid mutation."""

    @pytest.mark.asyncio
    async def test_partial_update(self, store):
        """Test only supplied fields change."""
        created = await _add(store, email="a@example.com")

        updated = await update_employee_by_eid(
            store, created.id, EmployeePatch(salary=3000, designation="Lead")
        )

        assert updated.salary == 3000.0
        assert updated.designation == "Lead"
        assert updated.first_name == created.first_name
        assert updated.email == "a@example.com"
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_update_clears_optional_field(self, store):
        """Test an explicit null clears an optional field."""
        created = await _add(store, email="a@example.com")

        updated = await update_employee_by_eid(store, created.id, EmployeePatch(email=None))

        assert updated.email is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "patch,field",
        [
            (EmployeePatch(first_name=""), "first_name"),
            (EmployeePatch(department=None), "department"),
            (EmployeePatch(salary=999), "salary"),
            (EmployeePatch(date_of_joining=None), "date_of_joining"),
        ],
    )
    async def test_update_validates_supplied_required_fields(self, store, patch, field):
        """Test touched required fields keep their constraints."""
        created = await _add(store)

        with pytest.raises(InvalidArgument) as exc_info:
            await update_employee_by_eid(store, created.id, patch)

        assert exc_info.value.fields == [field]
        unchanged = await search_employee_by_eid(store, created.id)
        assert unchanged.first_name == created.first_name
        assert unchanged.salary == created.salary

    @pytest.mark.asyncio
    async def test_update_missing_employee_fails_every_time(self, store):
        """Test updating an unknown identifier raises NotFound on each attempt."""
        eid = str(ObjectId())

        for _ in range(2):
            with pytest.raises(NotFound, match="Employee not found"):
                await update_employee_by_eid(store, eid, EmployeePatch(salary=2000))

    @pytest.mark.asyncio
    async def test_update_malformed_eid_is_not_found(self, store):
        """Test a malformed identifier behaves as a miss."""
        with pytest.raises(NotFound):
            await update_employee_by_eid(store, "not-an-id", EmployeePatch())

    @pytest.mark.asyncio
    async def test_update_requires_eid(self, store):
        """Test that a missing identifier is rejected before any lookup."""
        with pytest.raises(InvalidArgument) as exc_info:
            await update_employee_by_eid(store, "", EmployeePatch(salary=2000))

        assert exc_info.value.fields == ["eid"]


class TestDeleteEmployee:
    """Tests for deleteEmployeeByEid mutation."""

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, store):
        """Test deleting twice succeeds both times."""
        created = await _add(store)

        assert await delete_employee_by_eid(store, created.id) == DELETE_CONFIRMATION
        assert await delete_employee_by_eid(store, created.id) == DELETE_CONFIRMATION
        assert await search_employee_by_eid(store, created.id) is None

    @pytest.mark.asyncio
    async def test_delete_requires_eid(self, store):
        """Test that a missing identifier is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            await delete_employee_by_eid(store, None)

        assert exc_info.value.fields == ["eid"]


class TestStoreInteraction:
    """Tests for how the resolvers use the persistence layer."""

    @pytest.mark.asyncio
    async def test_required_text_fields_are_trimmed(self, store):
        """Test stored text fields lose surrounding whitespace."""
        employee = await _add(store, first_name="  Ada ", department=" R&D")

        assert employee.first_name == "Ada"
        assert [e.id for e in await search_employees_by_designation_or_department(store, None, "R&D ")] == [
            employee.id
        ]

    @pytest.mark.asyncio
    async def test_validation_failure_never_touches_store(self):
        """Test rejected arguments fail before any persistence call."""
        store = MagicMock()

        with pytest.raises(InvalidArgument):
            await _add(store, salary=10)
        with pytest.raises(InvalidArgument):
            await update_employee_by_eid(store, str(ObjectId()), EmployeePatch(first_name=""))

        assert store.mock_calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,call",
        [
            ("find", lambda store: get_all_employees(store)),
            ("find_by_id", lambda store: search_employee_by_eid(store, str(ObjectId()))),
            ("insert", lambda store: _add(store)),
            ("update_by_id", lambda store: update_employee_by_eid(store, str(ObjectId()), EmployeePatch(salary=2000))),
            ("delete_by_id", lambda store: delete_employee_by_eid(store, str(ObjectId()))),
        ],
    )
    async def test_adapter_failure_propagates(self, method, call):
        """Test a failing store reaches the caller unchanged and is not retried."""
        store = MagicMock()
        failing = AsyncMock(side_effect=AdapterUnavailable("Persistence layer unavailable"))
        setattr(store.employees, method, failing)

        with pytest.raises(AdapterUnavailable, match="Persistence layer unavailable"):
            await call(store)

        assert failing.await_count == 1
