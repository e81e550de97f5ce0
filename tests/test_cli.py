import io

from libraryledger.books import Library
from libraryledger.cli import main
from libraryledger.login import Accounts
from libraryledger.records import Admin, Book, IssuedBook, Student

PASSWORD = "password"


def _run(monkeypatch, tmp_path, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(["--data-dir", str(tmp_path)])


def _register(tmp_path):
    accounts = Accounts(tmp_path)
    password = PASSWORD
    accounts.register_admin(Admin(admin_id=5, name="Asha", password=password))
    accounts.register_student(
        Student(student_id=8, name="Ravi", course="Physics", password=password)
    )


def test_new_admin_adds_book(monkeypatch, tmp_path, capsys):
    text = "3\n1\n5\nAsha\npassword\n1\n10\nDune\nHerbert\nabc\n12.5\n2\n6\n"
    assert _run(monkeypatch, tmp_path, text) == 0
    out = capsys.readouterr().out
    assert "Enter Correct Price" in out
    assert "Book Stored" in out
    assert Library(tmp_path).books() == [Book(10, "Dune", "Herbert", 12.5, 2)]
    assert Accounts(tmp_path).check_admin(5, PASSWORD) is True


def test_admin_login_and_issue(monkeypatch, tmp_path, capsys):
    _register(tmp_path)
    Library(tmp_path).add_book(Book(1, "Dune", "Herbert", 12.5, 1))
    text = "1\n5\npassword\n4\n1\nDune\nHerbert\n8\nRavi\nMon\n5\n6\n"
    assert _run(monkeypatch, tmp_path, text) == 0
    out = capsys.readouterr().out
    assert "Book Issued Successfully" in out
    assert "Student Name : Ravi" in out
    assert Library(tmp_path).find_book(1).quantity == 0


def test_wrong_password_denied(monkeypatch, tmp_path, capsys):
    _register(tmp_path)
    assert _run(monkeypatch, tmp_path, "1\n5\nsecret\n") == 0
    out = capsys.readouterr().out
    assert "Access Denied" in out
    assert "Admin Corner" not in out


def test_missing_admin_database_exits_3(monkeypatch, tmp_path, capsys):
    assert _run(monkeypatch, tmp_path, "1\n5\npassword\n") == 3
    assert "No Admin Database found" in capsys.readouterr().out


def test_invalid_id_reprompts(monkeypatch, tmp_path, capsys):
    _register(tmp_path)
    assert _run(monkeypatch, tmp_path, "2\nabc\n8\npassword\n3\n") == 0
    out = capsys.readouterr().out
    assert "Invalid Input" in out
    assert "Student Corner" in out


def test_student_views_books_and_issue(monkeypatch, tmp_path, capsys):
    _register(tmp_path)
    library = Library(tmp_path)
    library.add_book(Book(1, "Dune", "Herbert", 12.5, 2))
    library.add_book(Book(2, "Emma", "Austen", 8.0, 0))
    library.issue_book(IssuedBook(1, "Dune", "Herbert", 8, "Ravi", "Mon"))
    assert _run(monkeypatch, tmp_path, "2\n8\npassword\n1\n2\n8\n3\n") == 0
    out = capsys.readouterr().out
    assert "Book Title : Dune" in out
    assert "Emma" not in out
    assert "Due date : Mon" in out


def test_view_books_without_catalogue(monkeypatch, tmp_path, capsys):
    _register(tmp_path)
    assert _run(monkeypatch, tmp_path, "1\n5\npassword\n2\n") == 0
    assert "No Book Stored" in capsys.readouterr().out


def test_end_of_input_stops_cleanly(monkeypatch, tmp_path):
    _register(tmp_path)
    assert _run(monkeypatch, tmp_path, "1\n5\npassword\n") == 0