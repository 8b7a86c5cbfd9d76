import pytest

from practicekit.employees import (
    Employee,
    format_employee,
    highest_salary,
    read_employees,
    sort_by_salary,
    total_expenditure,
)


def _staff(*salaries):
    return [Employee(i, f"emp{i}", s) for i, s in enumerate(salaries, start=1)]


def test_format_employee():
    text = format_employee(Employee(7, "Ann Lee", 1500.5))
    assert text == "Employee ID: 7\nName: Ann Lee\nSalary: 1500.50"


def test_total_of_whole_salaries_is_sum():
    staff = _staff(100, 250, 300)
    assert total_expenditure(staff) == 650.0


def test_total_drops_fractions_as_it_goes():
    assert total_expenditure(_staff(1.5, 2.7)) == 3.0


def test_total_empty():
    assert total_expenditure([]) == 0.0


def test_highest_salary_ascending():
    staff = _staff(100, 200, 300)
    assert highest_salary(staff) is staff[2]


def test_highest_salary_first_when_no_rise():
    staff = _staff(500, 400, 300)
    assert highest_salary(staff) is staff[0]


def test_highest_salary_takes_last_rise():
    staff = _staff(300, 100, 200)
    assert highest_salary(staff) is staff[2]


def test_highest_salary_empty():
    assert highest_salary([]) is None


def test_sort_by_salary_descending_and_stable():
    staff = _staff(200, 500, 200, 100)
    ordered = sort_by_salary(staff)
    assert [e.salary for e in ordered] == [500, 200, 200, 100]
    assert [e.emp_id for e in ordered if e.salary == 200] == [1, 3]
    assert sorted(e.emp_id for e in ordered) == [1, 2, 3, 4]


def test_sort_does_not_change_input():
    staff = _staff(1, 2, 3)
    sort_by_salary(staff)
    assert [e.salary for e in staff] == [1, 2, 3]


def test_read_employees():
    lines = ["1\n", "Ann Lee\n", "1000.5\n", "2", "Bob", "200"]
    employees = read_employees(lines, 2)
    assert employees == [Employee(1, "Ann Lee", 1000.5), Employee(2, "Bob", 200.0)]


def test_read_employees_zero_count():
    assert read_employees(["1", "x", "2"], 0) == []


def test_read_employees_missing_lines():
    with pytest.raises(ValueError):
        read_employees(["1", "Ann"], 1)


def test_read_employees_bad_salary():
    with pytest.raises(ValueError):
        read_employees(["1", "Ann", "lots"], 1)


def test_read_employees_bad_id():
    with pytest.raises(ValueError):
        read_employees(["one", "Ann", "10"], 1)