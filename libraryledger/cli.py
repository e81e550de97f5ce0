"""Interactive menus for admins and students."""

from __future__ import annotations

import argparse
import getpass
import re
import sys
from pathlib import Path
from typing import Callable, Optional

from .books import IssueOutcome, Library, format_book, format_issue
from .login import Accounts, NoDatabaseError
from .records import Admin, Book, IssuedBook, Student

WELCOME = (
    "Welcome to your Library Details Management Program\nWho are You ?\n"
    "Admin --> 1\nStudent --> 2\nNew Login --> 3  "
)
ADMIN_MENU = (
    "\n\nWelcome To Admin Corner :\nAdd New Book in the Database --> 1\n"
    "View all Books in the Database --> 2\nSearch a Book by it's ID --> 3\n"
    "Issue a Book --> 4\nView Issued Books --> 5\nExit Program --> 6  "
)
STUDENT_MENU = (
    "\n\nWelcome to Student Corner :\nView Available Books --> 1\n"
    "View my Issued Books --> 2\nExit --> 3  "
)
_LOGIN_PROMPT = "Enter Password : "
_NEW_LOGIN_PROMPT = "Enter your Password to login : "

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_int(text: str) -> Optional[int]:
    match = _INT.match(text)
    if not match:
        return None
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else None


def _parse_price(text: str) -> Optional[float]:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else None


def _read_password(prompt: str) -> str:
    if sys.stdin.isatty():
        return getpass.getpass(prompt)
    return input(prompt)


def _format_available(book: Book) -> str:
    return (
        f"Book ID : {book.book_id} | Book Title : {book.title} | "
        f"Book Author : {book.author} | Book Price : {book.price:.6f} | "
        f"Quantity : {book.quantity}"
    )


class _Quit(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


class _Session:
    def __init__(self, data_dir: Path) -> None:
        self.library = Library(data_dir)
        self.accounts = Accounts(data_dir)

    def run(self) -> int:
        choice = _parse_int(input(WELCOME))
        print()
        try:
            if choice == 1:
                self._login(
                    "Admin", self.accounts.check_admin, self._admin_corner
                )
            elif choice == 2:
                self._login(
                    "Student", self.accounts.check_student, self._student_corner
                )
            elif choice == 3:
                self._new_login()
        except _Quit as quit_:
            return quit_.code
        return 0

    @staticmethod
    def _read_int(prompt: str, retry: str) -> int:
        value = _parse_int(input(prompt))
        while value is None:
            value = _parse_int(input(retry))
        return value

    def _login(
        self, role: str, check: Callable[[int, str], bool], corner: Callable[[], None]
    ) -> None:
        account_id = self._read_int(
            f"Enter {role} ID : ",
            f"\nInvalid Input. Enter {role.lower()} ID again : ",
        )
        password = _read_password(_LOGIN_PROMPT)
        try:
            accepted = check(account_id, password)
        except NoDatabaseError as exc:
            print(exc)
            raise _Quit(3) from exc
        if accepted:
            corner()
        else:
            print("Access Denied")

    def _new_login(self) -> None:
        choice = _parse_int(input("New login Admin --> 1\nNew Login Student --> 2"))
        retry = "\nInvalid Input. Enter ID again : "
        if choice == 1:
            admin_id = self._read_int(
                "Enter your Admin ID (It will be your ID to login) : ", retry
            )
            name = input("Enter your Name : ")
            password = input(_NEW_LOGIN_PROMPT)
            self.accounts.register_admin(Admin(admin_id, name, password))
            print("Login Credentials Saved")
            self._admin_corner()
        elif choice == 2:
            student_id = self._read_int(
                "Enter your Student ID (It will be your ID to login) : ", retry
            )
            name = input("Enter your Name : ")
            course = input("Enter your Course : ")
            password = input(_NEW_LOGIN_PROMPT)
            self.accounts.register_student(Student(student_id, name, course, password))
            print("Login Credentials Saved")
            self._student_corner()

    def _admin_corner(self) -> None:
        actions = {
            1: self._add_book,
            2: self._view_books,
            3: self._search_book,
            4: self._issue_book,
            5: self._view_issued,
        }
        while True:
            choice = _parse_int(input(ADMIN_MENU))
            print()
            if choice == 6:
                raise _Quit(0)
            if choice in actions:
                actions[choice]()
            print("\n")

    def _student_corner(self) -> None:
        actions = {1: self._view_available, 2: self._view_my_issue}
        while True:
            choice = _parse_int(input(STUDENT_MENU))
            print()
            if choice == 3:
                raise _Quit(0)
            if choice in actions:
                actions[choice]()
            print("\n")

    def _add_book(self) -> None:
        book_id = self._read_int(
            "Enter Book ID : ", "\nInvalid Input. Enter book ID again : "
        )
        title = input("Enter Book Title : ")
        author = input("Enter Book Author : ")
        price = _parse_price(input("Enter Book Price (in INR): "))
        while price is None:
            print("Enter Correct Price")
            price = _parse_price(input())
        quantity = self._read_int(
            "Enter Quantity of Books : ", "\nInvalid Input. Enter Quantity again : "
        )
        try:
            self.library.add_book(Book(book_id, title, author, price, quantity))
        except (OSError, ValueError):
            print("Book Not Stored")
            return
        print("\n\nBook Stored")

    def _view_books(self) -> None:
        try:
            books = self.library.books()
        except FileNotFoundError as exc:
            print("No Book Stored")
            raise _Quit(0) from exc
        print("-------------------------Books List-------------------------\n")
        for book in books:
            print(format_book(book))

    def _search_book(self) -> None:
        book_id = self._read_int(
            "Enter Book ID to search : ", "\nInvalid Input. Enter book ID again : "
        )
        try:
            book = self.library.find_book(book_id)
        except FileNotFoundError:
            book = None
        print(format_book(book) if book else "Book not found")

    def _issue_book(self) -> None:
        book_id = self._read_int("Enter Book ID : ", "\nInvalid Input. Enter ID again : ")
        title = input("Enter Book Title : ")
        author = input("Enter Book Author : ")
        student_id = self._read_int(
            "Enter Student ID : ", "\nInvalid Input. Enter student ID again : "
        )
        student_name = input("Enter Student Name : ")
        due_date = input("Enter Due Date : ")
        issue = IssuedBook(book_id, title, author, student_id, student_name, due_date)
        try:
            outcome = self.library.issue_book(issue)
        except FileNotFoundError as exc:
            print("Failed to Issue book ")
            raise _Quit(0) from exc
        messages = {
            IssueOutcome.ISSUED: "Book Issued Successfully",
            IssueOutcome.OUT_OF_STOCK: "Book out of Stock",
            IssueOutcome.NOT_FOUND: "Book not found",
        }
        print(messages[outcome])

    def _view_issued(self) -> None:
        try:
            issues = self.library.issued_books()
        except FileNotFoundError as exc:
            print("No books issued yet")
            raise _Quit(0) from exc
        for issue in issues:
            print(format_issue(issue, True))

    def _view_available(self) -> None:
        try:
            books = self.library.available_books()
        except FileNotFoundError as exc:
            print("No books available")
            raise _Quit(0) from exc
        for book in books:
            print(_format_available(book))

    def _view_my_issue(self) -> None:
        student_id = self._read_int(
            "Enter your Student ID : ", "\nInvalid Input. Enter book ID again : "
        )
        try:
            issue = self.library.issued_to(student_id)
        except FileNotFoundError as exc:
            print("No Books issued")
            raise _Quit(0) from exc
        if issue is not None:
            print(format_issue(issue, False))


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive library program; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="libraryledger", description="Library details management."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding the data files (default: current directory)",
    )
    args = parser.parse_args(argv)
    try:
        return _Session(args.data_dir).run()
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())