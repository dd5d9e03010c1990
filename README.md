# deskapps

deskapps bundles five small menu-driven console applications. Each one is also
a plain Python class that you can use on its own.

| Command              | Module                | What it does                                            |
|----------------------|-----------------------|---------------------------------------------------------|
| `deskapps-bank`      | `deskapps.bank`       | Create password-protected accounts, deposit, withdraw, check the balance |
| `deskapps-library`   | `deskapps.library`    | Add books and members, lend books, list the catalogue   |
| `deskapps-parking`   | `deskapps.parking`    | Park and remove cars, show the number of free spaces    |
| `deskapps-employees` | `deskapps.employees`  | Add employees and list them                             |
| `deskapps-tasks`     | `deskapps.tasks`      | Add tasks, list them, mark them completed               |

## Installation

```
pip install .
```

## Running the applications

Each command opens a numbered menu. Type the number of an option and answer
the prompts. The last menu option quits; so does ending the input (Ctrl-D).

```
deskapps-bank
deskapps-library
deskapps-parking
deskapps-employees
deskapps-tasks
```

The car park has ten spaces unless you give another number:

```
deskapps-parking --capacity 25
```

In the bank, every deposit, withdrawal and balance check asks for the
account's password. A withdrawal succeeds only when the balance is strictly
greater than the amount taken out.

## Using the classes

```python
from deskapps.bank import Bank, AuthenticationError

password = "password"
bank = Bank()
bank.create_account("alice", 100.0, password)
bank.deposit("alice", 50.0, password)      # returns the new balance, 150.0
print(bank.balance("alice", password))     # 150.0
print("alice" in bank)                     # True

try:
    bank.withdraw("alice", 10.0, "wrong")
except AuthenticationError:
    print("Incorrect password")
```

```python
from deskapps.library import Library

library = Library()
library.add_book("Dune", "Frank Herbert", 1)
library.add_member("Sam", 7)
library.lend_book(7, 1)
print(library.report())
# Library Books:
# Title: Dune, Author: Frank Herbert, ID: 1 (Not Available)
```

```python
from deskapps.parking import ParkingSystem

lot = ParkingSystem(2)
lot.park_car()
print(lot.available())   # 1
lot.remove_car()
```

```python
from deskapps.tasks import TaskList

tasks = TaskList()
tasks.add("Write report", "Quarterly figures")
tasks.mark_completed(1)
print(tasks.report())
# Tasks:
# 1. Write report - Quarterly figures [Completed]
```

```python
from deskapps.employees import EmployeeRegistry

staff = EmployeeRegistry()
staff.add("Ann", 30, "Sales", 4200.0)
print(len(staff))        # 1
print(staff.report())
```

Failures are reported as exceptions:

- bank: `AccountExistsError`, `AccountNotFoundError`, `AuthenticationError`,
  `InsufficientFundsError`, all subclasses of `BankError`;
- library: `MemberNotFoundError`, `BookNotFoundError`, `BookUnavailableError`,
  all subclasses of `LibraryError`;
- parking: `ParkingFullError` and `ParkingEmptyError`, subclasses of
  `ParkingError`;
- tasks: `TaskIndexError`, a subclass of `IndexError`.

## What it does not do

Everything is kept in memory. Nothing is saved to disk, so accounts, books,
members, employees and tasks are gone when an application exits. There is no
way to return a borrowed book, remove an employee or delete a task.

## Running the tests

```
pip install ".[test]"
pytest
```