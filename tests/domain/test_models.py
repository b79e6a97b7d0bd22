"""Tests for Person, Employee, and Department models."""

from decimal import Decimal

from pydantic import TypeAdapter

from orgdir.domain.models import Department, Employee, Member, Person


def _employee(**overrides: object) -> Employee:
    data: dict[str, object] = {
        "person": Person(name="John Smith", age=30),
        "employee_id": "EMP0001",
        "salary": Decimal("75000"),
    }
    data.update(overrides)
    return Employee(**data)  # type: ignore[arg-type]


class TestPerson:
    def test_negative_age_clamped_on_construction(self) -> None:
        assert Person(name="Ann Lee", age=-4).age == 0

    def test_negative_age_clamped_on_write(self) -> None:
        person = Person(name="Ann Lee", age=20)
        person.age = -1
        assert person.age == 0

    def test_describe(self) -> None:
        assert Person(name="Ann Lee", age=20).describe() == "Ann Lee, age 20"


class TestEmployee:
    def test_proxies_person_fields(self) -> None:
        employee = _employee()
        assert employee.name == "John Smith"
        assert employee.age == 30

    def test_starts_unassigned(self) -> None:
        employee = _employee()
        assert employee.department_id is None
        assert not employee.is_assigned

    def test_contains_the_given_person(self) -> None:
        person = Person(name="John Smith", age=30)
        employee = _employee(person=person)
        assert employee.person is person

    def test_summary_exposes_fields(self) -> None:
        summary = _employee().to_summary()
        assert summary == {
            "kind": "employee",
            "name": "John Smith",
            "age": 30,
            "employee_id": "EMP0001",
            "salary": "75000",
            "department_id": None,
        }

    def test_describe_includes_employee_id(self) -> None:
        assert "EMP0001" in _employee().describe()


class TestMember:
    def test_discriminated_by_kind(self) -> None:
        adapter: TypeAdapter[Person | Employee] = TypeAdapter(Member)
        person = adapter.validate_python({"kind": "person", "name": "Ann Lee", "age": 20})
        employee = adapter.validate_python(
            {
                "kind": "employee",
                "person": {"name": "Bo Chen", "age": 40},
                "employee_id": "EMP0002",
                "salary": "1000",
            }
        )
        assert isinstance(person, Person)
        assert isinstance(employee, Employee)


class TestDepartment:
    def test_code_match_is_case_insensitive(self) -> None:
        department = Department(id="DEPT-0001", name="Information Technology", code="IT")
        assert department.matches_code("it")
        assert department.matches_code("It")
        assert not department.matches_code("HR")
