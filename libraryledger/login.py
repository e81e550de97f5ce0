"""Admin and student accounts."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .records import Admin, Student, append_record, read_records

ADMIN_FILE = "admin.bin"
STUDENT_FILE = "student.bin"


class NoDatabaseError(FileNotFoundError):
    """Raised when an account file does not exist yet."""


class Accounts:
    """Login credentials kept in a data directory."""

    def __init__(self, directory: Union[str, Path] = ".") -> None:
        self.directory = Path(directory)
        self.admin_path = self.directory / ADMIN_FILE
        self.student_path = self.directory / STUDENT_FILE

    def register_admin(self, admin: Admin) -> None:
        """Store a new admin account."""
        append_record(self.admin_path, admin)

    def register_student(self, student: Student) -> None:
        """Store a new student account."""
        append_record(self.student_path, student)

    def check_admin(self, admin_id: int, password: str) -> bool:
        """True if an admin with this ID has this password."""
        try:
            return any(
                a.admin_id == admin_id and a.password == password
                for a in read_records(self.admin_path, Admin)
            )
        except FileNotFoundError as exc:
            raise NoDatabaseError("No Admin Database found") from exc

    def check_student(self, student_id: int, password: str) -> bool:
        """True if a student with this ID has this password."""
        try:
            return any(
                s.student_id == student_id and s.password == password
                for s in read_records(self.student_path, Student)
            )
        except FileNotFoundError as exc:
            raise NoDatabaseError("No Student Database found") from exc