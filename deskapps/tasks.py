"""A numbered to-do list with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["TaskIndexError", "Task", "TaskList", "main"]


class TaskIndexError(IndexError):
    """The task number is outside the list."""


@dataclass
class Task:
    name: str
    description: str
    completed: bool = False


class TaskList:
    """Tasks numbered from 1 in the order they were added."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def add(self, name: str, description: str) -> Task:
        task = Task(name, description)
        self._tasks.append(task)
        return task

    def mark_completed(self, number: int) -> Task:
        """Mark the task with 1-based ``number`` as completed and return it."""
        if not 1 <= number <= len(self._tasks):
            raise TaskIndexError("Invalid task number.")
        task = self._tasks[number - 1]
        task.completed = True
        return task

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def report(self) -> str:
        if not self._tasks:
            return "No tasks to show."
        lines = ["Tasks:"]
        for number, task in enumerate(self._tasks, start=1):
            state = "Completed" if task.completed else "Pending"
            lines.append(f"{number}. {task.name} - {task.description} [{state}]")
        return "\n".join(lines)


_MENU = "\n".join(
    [
        "",
        "Task Management System",
        "1. Add Task",
        "2. Display Tasks",
        "3. Mark Task as Completed",
        "4. Exit",
    ]
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive task menu until the user exits."""
    argparse.ArgumentParser(
        prog="tasks", description="Interactive task list."
    ).parse_args(argv)
    tasks = TaskList()
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input("Enter your choice: ").strip())
            except ValueError:
                choice = 0
            if choice == 1:
                name = input("Enter task name: ").strip()
                description = input("Enter task description: ").strip()
                tasks.add(name, description)
                print("Task added successfully!")
            elif choice == 2:
                report = tasks.report()
                print(report if not tasks else "\n" + report)
            elif choice == 3:
                raw = input("Enter the index of the task to mark as completed: ")
                try:
                    tasks.mark_completed(int(raw.strip()))
                    print("Task marked as completed.")
                except (ValueError, TaskIndexError):
                    print("Invalid task number.")
            elif choice == 4:
                print("Exiting...")
                return 0
            else:
                print("Invalid choice. Please enter a number from 1 to 4.")
    except EOFError:
        return 0