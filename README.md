# libraryledger

A small interactive ledger for a library. Admins add books, list and search
them, issue them to students and list what has been issued; students list the
books in stock and look up a book issued to them. Everything is kept in
fixed-size binary record files in a data directory (the current directory
unless `--data-dir` is given):

| File          | Holds            | Record class            |
|---------------|------------------|-------------------------|
| `book.bin`    | books            | `records.Book`          |
| `issue.bin`   | issued books     | `records.IssuedBook`    |
| `admin.bin`   | admin accounts   | `records.Admin`         |
| `student.bin` | student accounts | `records.Student`       |

## Install

```
pip install .
```

## Running

```
libraryledger
libraryledger --data-dir path/to/data
```

The program first asks who you are:

- **1: Admin.** Log in with an admin ID and password. The admin menu can
  add a book (1), list all books (2), search a book by its ID (3), issue a
  book to a student (4), list all issued books (5), or exit (6).
- **2: Student.** Log in with a student ID and password. The student menu
  can list the books with at least one copy in stock (1), show the first book
  issued to a given student ID (2), or exit (3).
- **3: New login.** Register a new admin (1) or student (2) account, then go
  straight to that menu.

Passwords at the login prompt are read without echo when input comes from a
terminal. A wrong ID or password prints `Access Denied`. If the account file
does not exist yet, the program prints a message and exits with status 3.
Listing books or issues when the matching file does not exist prints a
message and ends the program. End of input ends the program with status 0.

Issuing a book always records the issue in `issue.bin`. If the book is in
`book.bin` with copies left, one copy is taken off its quantity; otherwise
the program reports that it is out of stock or not found.

## Using it as a library

```python
from libraryledger.records import Book, IssuedBook
from libraryledger.books import Library, format_book, format_issue

library = Library("data")
library.add_book(Book(book_id=1, title="Dune", author="Frank Herbert",
                      price=450.0, quantity=2))

for book in library.available_books():
    print(format_book(book))

outcome = library.issue_book(
    IssuedBook(book_id=1, book_title="Dune", book_author="Frank Herbert",
               student_id=7, student_name="Asha", due_date="2024-06-01")
)
print(outcome)                     # IssueOutcome.ISSUED

issue = library.issued_to(7)
print(format_issue(issue, include_student=False))
```

`Library` also has `books()`, `find_book(book_id)` and `issued_books()`.
`books()`, `available_books()` and `issued_books()` raise
`FileNotFoundError` if their file does not exist yet; `find_book` and
`issued_to` return `None` when nothing matches.

Accounts are handled by `libraryledger.login.Accounts`:

```python
from libraryledger.login import Accounts
from libraryledger.records import Admin

accounts = Accounts("data")
password = "password"
accounts.register_admin(Admin(admin_id=1, name="Asha", password=password))
print(accounts.check_admin(1, password))    # True
```

`check_admin` and `check_student` raise `NoDatabaseError` (a subclass of
`FileNotFoundError`) if no account file exists yet.

### Record files

Each record class has `pack()`, `unpack(data)` and a `RECORD_SIZE`
(`Book` 212 bytes, `Student` 204, `Admin` 156, `IssuedBook` 340). Text
fields are UTF-8, NUL-padded, and are trimmed to fit their field; prices are
stored as 32-bit floats. `records.read_records(path, record_type)` yields the
whole records in a file and `records.append_record(path, record)` appends one.

## What it does not do

- Passwords are stored in plain text in `admin.bin` and `student.bin`.
- There is no way to return a book, delete or edit a book, or remove an
  account; records are only ever appended, apart from a book's quantity
  going down when it is issued.

## Tests

```
pip install .[test]
pytest
```