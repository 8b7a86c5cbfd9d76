"""An employee register: reading, totals, the top earner and sorting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

__all__ = [
    "Employee",
    "format_employee",
    "total_expenditure",
    "highest_salary",
    "sort_by_salary",
    "read_employees",
]


@dataclass
class Employee:
    """One employee record."""

    emp_id: int
    name: str
    salary: float


def format_employee(employee: Employee) -> str:
    """Return the three-line description of an employee."""
    return (
        f"Employee ID: {employee.emp_id}\n"
        f"Name: {employee.name}\n"
        f"Salary: {employee.salary:.2f}"
    )


def total_expenditure(employees: Iterable[Employee]) -> float:
    """Return the salaries summed, the running total kept in whole units."""
    total = 0
    for employee in employees:
        total = int(total + employee.salary)
    return float(total)


def highest_salary(employees: list[Employee]) -> Employee | None:
    """Return the top earner as found by comparing neighbours.

    The last employee who earns more than the one before is taken; if no
    one does, the first employee. An empty list gives None.
    """
    if not employees:
        return None
    best = employees[0]
    for previous, current in pairwise(employees):
        if previous.salary < current.salary:
            best = current
    return best


def sort_by_salary(employees: Iterable[Employee]) -> list[Employee]:
    """Return the employees by salary, highest first; ties keep their order."""
    return sorted(employees, key=lambda e: e.salary, reverse=True)


def read_employees(lines: Iterable[str], count: int) -> list[Employee]:
    """Read ``count`` employees, each from an id, a name and a salary line."""
    stream = iter(lines)

    def next_line(what: str, number: int) -> str:
        try:
            return next(stream).rstrip("\r\n")
        except StopIteration:
            raise ValueError(f"missing {what} for employee {number}") from None

    employees = []
    for number in range(1, count + 1):
        raw_id = next_line("ID", number)
        name = next_line("name", number)
        raw_salary = next_line("salary", number)
        try:
            emp_id = int(raw_id.strip())
            salary = float(raw_salary.strip())
        except ValueError as exc:
            raise ValueError(f"invalid details for employee {number}: {exc}") from None
        employees.append(Employee(emp_id, name, salary))
    return employees