"""A small lending library of books and members."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

__all__ = [
    "LibraryError",
    "MemberNotFoundError",
    "BookNotFoundError",
    "BookUnavailableError",
    "Book",
    "Member",
    "Library",
    "main",
]


class LibraryError(Exception):
    """Base class for every error the library reports."""


class MemberNotFoundError(LibraryError):
    """No member has the requested id."""


class BookNotFoundError(LibraryError):
    """No book has the requested id."""


class BookUnavailableError(LibraryError):
    """The book is already lent out."""


@dataclass
class Book:
    title: str
    author: str
    book_id: int
    available: bool = True

    def describe(self) -> str:
        """One line summarising the book and whether it can be borrowed."""
        state = " (Available)" if self.available else " (Not Available)"
        return f"Title: {self.title}, Author: {self.author}, ID: {self.book_id}{state}"


@dataclass
class Member:
    name: str
    member_id: int
    borrowed: list[Book] = field(default_factory=list)


class Library:
    """Books and members, looked up by id in the order they were added."""

    def __init__(self) -> None:
        self.books: list[Book] = []
        self.members: list[Member] = []

    def add_book(self, title: str, author: str, book_id: int) -> Book:
        book = Book(title, author, book_id)
        self.books.append(book)
        return book

    def add_member(self, name: str, member_id: int) -> Member:
        member = Member(name, member_id)
        self.members.append(member)
        return member

    def find_book(self, book_id: int) -> Book:
        """Return the first book with ``book_id``."""
        book = next((b for b in self.books if b.book_id == book_id), None)
        if book is None:
            raise BookNotFoundError("Book not found.")
        return book

    def find_member(self, member_id: int) -> Member:
        """Return the first member with ``member_id``."""
        member = next((m for m in self.members if m.member_id == member_id), None)
        if member is None:
            raise MemberNotFoundError("Member not found.")
        return member

    def lend_book(self, member_id: int, book_id: int) -> Book:
        """Lend a book to a member and return the book."""
        member = self.find_member(member_id)
        book = self.find_book(book_id)
        if not book.available:
            raise BookUnavailableError("Book is already lent out.")
        book.available = False
        member.borrowed.append(book)
        return book

    def report(self) -> str:
        lines = ["Library Books:"]
        lines.extend(book.describe() for book in self.books)
        return "\n".join(lines)


_MENU = "\n".join(
    [
        "",
        "Library Management System",
        "1. Add Book",
        "2. Add Member",
        "3. Lend Book",
        "4. Display Books",
        "5. Exit",
    ]
)


def _add_book(library: Library) -> None:
    title = input("Enter book title: ").strip()
    author = input("Enter author name: ").strip()
    book_id = int(input("Enter book ID: ").strip())
    library.add_book(title, author, book_id)
    print("Book added successfully!")


def _add_member(library: Library) -> None:
    name = input("Enter member name: ").strip()
    member_id = int(input("Enter member ID: ").strip())
    library.add_member(name, member_id)
    print("Member added successfully!")


def _lend(library: Library) -> None:
    member_id = int(input("Enter member ID: ").strip())
    book_id = int(input("Enter book ID: ").strip())
    library.lend_book(member_id, book_id)
    print(f"Book lent to {library.find_member(member_id).name}.")


def _display(library: Library) -> None:
    print(library.report())


_ACTIONS = {1: _add_book, 2: _add_member, 3: _lend, 4: _display}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive library menu until the user exits."""
    argparse.ArgumentParser(
        prog="library", description="Interactive library manager."
    ).parse_args(argv)
    library = Library()
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input("Enter your choice: ").strip())
            except ValueError:
                choice = 0
            if choice == 5:
                print("Exiting...")
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                print("Invalid choice. Please enter a number from 1 to 5.")
                continue
            try:
                action(library)
            except LibraryError as error:
                print(error)
            except ValueError:
                print("Invalid ID.")
    except EOFError:
        return 0