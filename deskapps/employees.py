"""A register of employees with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Employee", "EmployeeRegistry", "main"]

_RULE = "-------------------------"


@dataclass
class Employee:
    name: str
    age: int
    department: str
    salary: float

    def describe(self) -> str:
        """The employee's details as a block of lines ending in a rule."""
        return "\n".join(
            [
                f"Name: {self.name}",
                f"Age: {self.age}",
                f"Department: {self.department}",
                f"Salary: ${self.salary:g}",
                _RULE,
            ]
        )


class EmployeeRegistry:
    """Employees in the order they were added."""

    def __init__(self) -> None:
        self._employees: list[Employee] = []

    def add(self, name: str, age: int, department: str, salary: float) -> Employee:
        employee = Employee(name, age, department, salary)
        self._employees.append(employee)
        return employee

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def report(self) -> str:
        blocks = ["Employee List:"]
        blocks.extend(e.describe() for e in self._employees)
        return "\n".join(blocks)


_MENU = "\n".join(
    [
        "",
        "Employee Management System",
        "1. Add Employee",
        "2. Display Employees",
        "3. Exit",
    ]
)


def _add(registry: EmployeeRegistry) -> None:
    name = input("Enter employee name: ").strip()
    age = int(input("Enter employee age: ").strip())
    department = input("Enter employee department: ").strip()
    salary = float(input("Enter employee salary: ").strip())
    registry.add(name, age, department, salary)
    print("Employee added successfully!")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive employee menu until the user exits."""
    argparse.ArgumentParser(
        prog="employees", description="Interactive employee register."
    ).parse_args(argv)
    registry = EmployeeRegistry()
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input("Enter your choice: ").strip())
            except ValueError:
                choice = 0
            if choice == 1:
                try:
                    _add(registry)
                except ValueError:
                    print("Invalid number.")
            elif choice == 2:
                print()
                print(registry.report())
            elif choice == 3:
                print("Exiting...")
                return 0
            else:
                print("Invalid choice. Please enter a number from 1 to 3.")
    except EOFError:
        return 0