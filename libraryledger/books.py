"""The book catalogue and the record of issued books."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .records import Book, IssuedBook, append_record, read_records

BOOK_FILE = "book.bin"
ISSUE_FILE = "issue.bin"


class IssueOutcome(Enum):
    """What happened to the stock when a book was issued."""

    ISSUED = "issued"
    OUT_OF_STOCK = "out_of_stock"
    NOT_FOUND = "not_found"


class Library:
    """Books and issues kept in a data directory."""

    def __init__(self, directory: Union[str, Path] = ".") -> None:
        self.directory = Path(directory)
        self.book_path = self.directory / BOOK_FILE
        self.issue_path = self.directory / ISSUE_FILE

    def add_book(self, book: Book) -> None:
        """Append a book to the catalogue."""
        append_record(self.book_path, book)

    def books(self) -> list[Book]:
        """All stored books in file order; FileNotFoundError if none were stored."""
        return list(read_records(self.book_path, Book))

    def find_book(self, book_id: int) -> Optional[Book]:
        """The first book with ``book_id``, or None."""
        return next(
            (b for b in read_records(self.book_path, Book) if b.book_id == book_id),
            None,
        )

    def available_books(self) -> list[Book]:
        """Books with at least one copy in stock."""
        return [b for b in self.books() if b.quantity > 0]

    def issue_book(self, issue: IssuedBook) -> IssueOutcome:
        """Record the issue and take one copy of the book out of stock.

        The issue is recorded even when the book is missing or out of stock.
        """
        append_record(self.issue_path, issue)
        for index, book in enumerate(read_records(self.book_path, Book)):
            if book.book_id != issue.book_id:
                continue
            if book.quantity <= 0:
                return IssueOutcome.OUT_OF_STOCK
            updated = replace(book, quantity=book.quantity - 1)
            with open(self.book_path, "r+b") as stream:
                stream.seek(index * Book.RECORD_SIZE)
                stream.write(updated.pack())
            return IssueOutcome.ISSUED
        return IssueOutcome.NOT_FOUND

    def issued_books(self) -> list[IssuedBook]:
        """All issue records; FileNotFoundError if nothing was ever issued."""
        return list(read_records(self.issue_path, IssuedBook))

    def issued_to(self, student_id: int) -> Optional[IssuedBook]:
        """The first issue record for ``student_id``, or None."""
        return next(
            (
                i
                for i in read_records(self.issue_path, IssuedBook)
                if i.student_id == student_id
            ),
            None,
        )


def format_book(book: Book) -> str:
    """One catalogue line for a book."""
    return (
        f"Book ID = {book.book_id} | Book Title = {book.title} | "
        f"Book Author = {book.author} | Book Price = {book.price:.6f} INR | "
        f"Book Quantity = {book.quantity}"
    )


def format_issue(issue: IssuedBook, include_student: bool) -> str:
    """One line describing an issued book, optionally naming the student."""
    head = (
        f"Book ID : {issue.book_id} | Book title : {issue.book_title} | "
        f"Book Author : {issue.book_author} | "
    )
    if include_student:
        head += f"Student ID : {issue.student_id} | Student Name : {issue.student_name} | "
    return head + f"Due date : {issue.due_date}"