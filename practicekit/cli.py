"""Command-line front end: the vector demo, an account menu and the employee register."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from practicekit.account import Account, InsufficientBalance
from practicekit.employees import (
    format_employee,
    highest_salary,
    read_employees,
    sort_by_salary,
    total_expenditure,
)

__all__ = ["vectors_demo", "main"]

_MENU = (
    "Enter:\n1: to deposite\n2: to withdraw\n3: to get balance and \n"
    "4: to quit\nEnter your choice: "
)


def _describe_vector(label: str, values: list[int]) -> list[str]:
    return [
        f"{label}:",
        *(f"The number at {index}: {value}" for index, value in enumerate(values[:2])),
        f"The size of {label.lower()} is: {len(values)}",
    ]


def _describe_grid(grid: list[list[int]]) -> list[str]:
    return [" ".join(str(value) for value in row) for row in grid]


def vectors_demo() -> str:
    """Return the report showing that a nested list holds copies, not aliases."""
    vector1 = [10, 20]
    vector2 = [100, 200]
    lines = _describe_vector("Vector 1", vector1)
    lines += _describe_vector("Vector 2", vector2)

    grid = [list(vector1), list(vector2)]
    lines.append("Vector_2D: ")
    lines += _describe_grid(grid)

    vector1[0] = 1000
    lines.append("Vector_2D after editing vector1: ")
    lines += _describe_grid(grid)

    lines += _describe_vector("Vector 1", vector1)
    lines[-3 - 1] = "Vector 1 after editing:"
    return "".join(f"{line}\n" for line in lines)


def _format_amount(value: float) -> str:
    return f"{value:g}"


def _next_token(tokens: Iterator[str], what: str) -> str:
    token = next(tokens, None)
    if token is None:
        raise ValueError(f"missing {what}")
    return token


def _parse_amount(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"invalid amount {token!r}") from None


def _run_account(stdin: TextIO, stdout: TextIO) -> None:
    tokens = iter(stdin.read().split())
    stdout.write("Enter account name: ")
    name = _next_token(tokens, "account name")
    stdout.write("Enter balance in account: ")
    account = Account(name, _parse_amount(_next_token(tokens, "account balance")))

    while True:
        stdout.write(_MENU)
        raw_choice = next(tokens, None)
        if raw_choice is None:
            stdout.write("\n")
            return
        try:
            choice = int(raw_choice)
        except ValueError:
            choice = None

        if choice == 4:
            return
        if choice == 1:
            stdout.write("Enter the amount to be deposited: ")
            account.deposit(_parse_amount(_next_token(tokens, "deposit amount")))
            stdout.write("In deposite\n\n")
        elif choice == 2:
            stdout.write("Enter the amount to be withdrawn: ")
            amount = _parse_amount(_next_token(tokens, "withdrawal amount"))
            try:
                account.withdraw(amount)
            except InsufficientBalance:
                stdout.write("Insufficient balance!\n\n")
            else:
                stdout.write("In withdraw\n\n")
        elif choice == 3:
            stdout.write(
                "The amount balance in the account is: "
                f"{_format_amount(account.balance)}\n\n"
            )
        else:
            stdout.write("Please enter valid choice!\n")


def _run_employees(stdin: TextIO, stdout: TextIO) -> None:
    lines = iter(stdin.read().splitlines())
    stdout.write("Enter the no. of employees:")
    raw_count = next(lines, None)
    if raw_count is None:
        raise ValueError("missing number of employees")
    try:
        count = int(raw_count.strip())
    except ValueError:
        raise ValueError(f"invalid number of employees {raw_count!r}") from None
    if count < 0:
        raise ValueError(f"number of employees must not be negative: {count}")

    stdout.write("Enter employee details:\n\n")
    employees = read_employees(lines, count)

    stdout.write(
        "\nThe total expenditure of the company on salaries: "
        f"{total_expenditure(employees):.2f}\n"
    )
    stdout.write("Highest Salary Employee details\n")
    top = highest_salary(employees)
    if top is not None:
        stdout.write(f"{format_employee(top)}\n\n")

    stdout.write("Printing all employee details\n")
    for employee in sort_by_salary(employees):
        stdout.write(f"{format_employee(employee)}\n\n")


def main(argv: list[str] | None = None) -> int:
    """Run one of the interactive exercises and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="practicekit", description="Small interactive programming exercises."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("vectors", help="show how nested lists copy their rows")
    commands.add_parser("account", help="run the bank account menu")
    commands.add_parser("employees", help="read employees and report on salaries")
    args = parser.parse_args(argv)

    try:
        if args.command == "vectors":
            sys.stdout.write(vectors_demo())
        elif args.command == "account":
            _run_account(sys.stdin, sys.stdout)
        else:
            _run_employees(sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())