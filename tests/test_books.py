import pytest

from libraryledger.books import IssueOutcome, Library, format_book, format_issue
from libraryledger.records import Book, IssuedBook


@pytest.fixture
def library(tmp_path):
    lib = Library(tmp_path)
    lib.add_book(Book(1, "Dune", "Herbert", 12.5, 2))
    lib.add_book(Book(2, "Emma", "Austen", 8.0, 0))
    lib.add_book(Book(3, "Ulysses", "Joyce", 20.0, 1))
    return lib


def _issue(book_id, student_id=9, due="2024-01-31"):
    return IssuedBook(book_id, "T", "A", student_id, "Ravi", due)


def test_books_in_file_order(library):
    assert [b.book_id for b in library.books()] == [1, 2, 3]


def test_books_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Library(tmp_path).books()


def test_find_book(library):
    assert library.find_book(3) == Book(3, "Ulysses", "Joyce", 20.0, 1)
    assert library.find_book(42) is None


def test_available_books_skip_empty_stock(library):
    assert [b.book_id for b in library.available_books()] == [1, 3]


def test_issue_decrements_only_matching_book(library):
    assert library.issue_book(_issue(1)) is IssueOutcome.ISSUED
    assert [b.quantity for b in library.books()] == [1, 0, 1]


def test_issue_until_out_of_stock(library):
    assert library.issue_book(_issue(3)) is IssueOutcome.ISSUED
    assert library.issue_book(_issue(3)) is IssueOutcome.OUT_OF_STOCK
    assert library.find_book(3).quantity == 0


def test_issue_unknown_book_leaves_stock(library):
    before = library.books()
    assert library.issue_book(_issue(99)) is IssueOutcome.NOT_FOUND
    assert library.books() == before


def test_issue_is_recorded_even_when_out_of_stock(library):
    library.issue_book(_issue(2))
    assert library.issued_books() == [_issue(2)]


def test_issue_without_catalogue_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Library(tmp_path).issue_book(_issue(1))


def test_issued_to_returns_first_match(library):
    library.issue_book(_issue(1, student_id=5, due="first"))
    library.issue_book(_issue(3, student_id=5, due="second"))
    assert library.issued_to(5).due_date == "first"
    assert library.issued_to(6) is None


def test_format_book():
    line = format_book(Book(1, "Dune", "Herbert", 12.5, 3))
    assert line == (
        "Book ID = 1 | Book Title = Dune | Book Author = Herbert | "
        "Book Price = 12.500000 INR | Book Quantity = 3"
    )


def test_format_issue_for_student():
    line = format_issue(IssuedBook(1, "Dune", "Herbert", 9, "Ravi", "Mon"), False)
    assert line == "Book ID : 1 | Book title : Dune | Book Author : Herbert | Due date : Mon"


def test_format_issue_for_admin_names_student():
    line = format_issue(IssuedBook(1, "Dune", "Herbert", 9, "Ravi", "Mon"), True)
    assert "Student ID : 9 | Student Name : Ravi | " in line
    assert line.endswith("Due date : Mon")