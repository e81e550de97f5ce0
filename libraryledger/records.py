"""Fixed-size binary records stored in the library's data files."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import ClassVar, TypeVar, Union

_ENCODING = "utf-8"

PathLike = Union[str, Path]
R = TypeVar("R", bound="_Record")


def _fit(text: str, size: int) -> str:
    """Trim text so that it fits a NUL-terminated field of ``size`` bytes."""
    raw = text.encode(_ENCODING)[: size - 1]
    return raw.decode(_ENCODING, "ignore")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(_ENCODING, "replace")


def _as_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class _Record:
    """Shared validation for the dataclass records below."""

    _STRUCT: ClassVar[struct.Struct]
    _TEXT_SIZES: ClassVar[dict[str, int]]
    RECORD_SIZE: ClassVar[int]

    def __post_init__(self) -> None:
        for name, size in self._TEXT_SIZES.items():
            setattr(self, name, _fit(getattr(self, name), size))


def _pack(record: _Record) -> bytes:
    values = []
    for field in fields(record):
        value = getattr(record, field.name)
        if field.name in record._TEXT_SIZES:
            value = value.encode(_ENCODING)
        values.append(value)
    try:
        return record._STRUCT.pack(*values)
    except struct.error as exc:
        raise ValueError(f"cannot store {type(record).__name__}: {exc}") from exc


def _unpack(cls: type[R], data: bytes) -> R:
    if len(data) != cls._STRUCT.size:
        raise ValueError(
            f"{cls.__name__} needs {cls._STRUCT.size} bytes, got {len(data)}"
        )
    kwargs = {}
    for field, value in zip(fields(cls), cls._STRUCT.unpack(data)):
        kwargs[field.name] = _decode(value) if field.name in cls._TEXT_SIZES else value
    return cls(**kwargs)


@dataclass
class Book(_Record):
    """A book held by the library."""

    book_id: int
    title: str
    author: str
    price: float
    quantity: int

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<i100s100sfi")
    _TEXT_SIZES: ClassVar[dict[str, int]] = {"title": 100, "author": 100}
    RECORD_SIZE: ClassVar[int] = _STRUCT.size

    def __post_init__(self) -> None:
        super().__post_init__()
        try:
            self.price = _as_float32(float(self.price))
        except (OverflowError, struct.error) as exc:
            raise ValueError(f"price out of range: {self.price}") from exc

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        return _pack(self)

    @classmethod
    def unpack(cls, data: bytes) -> Book:
        """Build a record from exactly ``RECORD_SIZE`` bytes."""
        return _unpack(cls, data)


@dataclass
class Student(_Record):
    """A student account."""

    student_id: int
    name: str
    course: str
    password: str

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<i50s50s100s")
    _TEXT_SIZES: ClassVar[dict[str, int]] = {"name": 50, "course": 50, "password": 100}
    RECORD_SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        return _pack(self)

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        """Build a record from exactly ``RECORD_SIZE`` bytes."""
        return _unpack(cls, data)


@dataclass
class Admin(_Record):
    """An administrator account."""

    admin_id: int
    name: str
    password: str

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<i50s100s2x")
    _TEXT_SIZES: ClassVar[dict[str, int]] = {"name": 50, "password": 100}
    RECORD_SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        return _pack(self)

    @classmethod
    def unpack(cls, data: bytes) -> Admin:
        """Build a record from exactly ``RECORD_SIZE`` bytes."""
        return _unpack(cls, data)


@dataclass
class IssuedBook(_Record):
    """A book lent to a student."""

    book_id: int
    book_title: str
    book_author: str
    student_id: int
    student_name: str
    due_date: str

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<i100s100si100s30s2x")
    _TEXT_SIZES: ClassVar[dict[str, int]] = {
        "book_title": 100,
        "book_author": 100,
        "student_name": 100,
        "due_date": 30,
    }
    RECORD_SIZE: ClassVar[int] = _STRUCT.size

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        return _pack(self)

    @classmethod
    def unpack(cls, data: bytes) -> IssuedBook:
        """Build a record from exactly ``RECORD_SIZE`` bytes."""
        return _unpack(cls, data)


def read_records(path: PathLike, record_type: type[R]) -> Iterator[R]:
    """Yield every whole record in ``path``; a missing file raises FileNotFoundError."""
    size = record_type.RECORD_SIZE
    with open(path, "rb") as stream:
        while len(chunk := stream.read(size)) == size:
            yield record_type.unpack(chunk)


def append_record(path: PathLike, record: _Record) -> None:
    """Append one record to the end of ``path``."""
    data = record.pack()
    with open(path, "ab") as stream:
        stream.write(data)