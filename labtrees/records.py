"""Fixed-size binary record files: a sequential student file and an indexed employee file."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Union

DELETED = -1

_STUDENT = struct.Struct("<10s2xii50s2x")
_EMPLOYEE = struct.Struct("<10s2xii20s")
_INDEX = struct.Struct("<ii")

STUDENT_RECORD_SIZE = _STUDENT.size
EMPLOYEE_RECORD_SIZE = _EMPLOYEE.size
INDEX_RECORD_SIZE = _INDEX.size

PathArg = Union[str, "PathLike[str]"]


def _encode(text: str, size: int, field: str) -> bytes:
    raw = text.encode()
    if len(raw) >= size:
        raise ValueError(f"{field} must be shorter than {size} bytes: {text!r}")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(errors="replace")


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return b""


def _unpack_all(layout: struct.Struct, data: bytes) -> list[tuple]:
    usable = len(data) - len(data) % layout.size
    return list(layout.iter_unpack(data[:usable]))


def _write_at(path: Path, offset: int, payload: bytes) -> None:
    with path.open("r+b") as handle:
        handle.seek(offset)
        handle.write(payload)


@dataclass(frozen=True)
class Student:
    """One student record."""

    name: str
    roll_no: int
    division: int
    address: str

    def _pack(self) -> bytes:
        return _STUDENT.pack(
            _encode(self.name, 10, "name"),
            self.roll_no,
            self.division,
            _encode(self.address, 50, "address"),
        )

    @classmethod
    def _unpack(cls, fields: tuple) -> Student:
        name, roll_no, division, address = fields
        return cls(_decode(name), roll_no, division, _decode(address))


_BLANK_STUDENT = Student("", DELETED, DELETED, "")


class StudentFile:
    """Sequential file of student records; deleted slots are marked, not removed."""

    def __init__(self, path: PathArg) -> None:
        self.path = Path(path)

    def create(self, students: Iterable[Student]) -> None:
        """Replace the file with ``students``."""
        payload = b"".join(student._pack() for student in students)
        self.path.write_bytes(payload)

    def _slots(self) -> list[Student]:
        return [Student._unpack(f) for f in _unpack_all(_STUDENT, _read_bytes(self.path))]

    def records(self) -> list[Student]:
        """All students that have not been deleted, in file order."""
        return [s for s in self._slots() if s.roll_no != DELETED]

    def search(self, roll_no: int) -> Optional[int]:
        """Slot position of the first record with ``roll_no``, or ``None``."""
        return next(
            (pos for pos, student in enumerate(self._slots()) if student.roll_no == roll_no),
            None,
        )

    def _require(self, roll_no: int) -> int:
        pos = self.search(roll_no)
        if pos is None:
            raise KeyError(f"no record with roll no {roll_no}")
        return pos

    def update(self, roll_no: int, student: Student) -> None:
        """Overwrite the record with ``roll_no``; raise ``KeyError`` if absent."""
        payload = student._pack()
        pos = self._require(roll_no)
        _write_at(self.path, pos * STUDENT_RECORD_SIZE, payload)

    def delete(self, roll_no: int) -> None:
        """Blank out the record with ``roll_no``; raise ``KeyError`` if absent."""
        pos = self._require(roll_no)
        _write_at(self.path, pos * STUDENT_RECORD_SIZE, _BLANK_STUDENT._pack())

    def append(self, student: Student) -> None:
        """Add ``student`` at the end of the file."""
        payload = student._pack()
        with self.path.open("ab") as handle:
            handle.write(payload)


@dataclass(frozen=True)
class Employee:
    """One employee record."""

    name: str
    emp_id: int
    salary: int
    designation: str

    def _pack(self) -> bytes:
        return _EMPLOYEE.pack(
            _encode(self.name, 10, "name"),
            self.emp_id,
            self.salary,
            _encode(self.designation, 20, "designation"),
        )

    @classmethod
    def _unpack(cls, fields: tuple) -> Employee:
        name, emp_id, salary, designation = fields
        return cls(_decode(name), emp_id, salary, _decode(designation))


_BLANK_EMPLOYEE = Employee("", DELETED, DELETED, "")


class EmployeeFile:
    """Employee data file reached through a separate index of ``(emp_id, position)``."""

    def __init__(self, data_path: PathArg, index_path: PathArg) -> None:
        self.data_path = Path(data_path)
        self.index_path = Path(index_path)

    def create(self, employees: Iterable[Employee]) -> None:
        """Replace both files with ``employees``, indexed in order."""
        employees = list(employees)
        data = b"".join(e._pack() for e in employees)
        index = b"".join(_INDEX.pack(e.emp_id, pos) for pos, e in enumerate(employees))
        self.data_path.write_bytes(data)
        self.index_path.write_bytes(index)

    def _index(self) -> list[tuple[int, int]]:
        return _unpack_all(_INDEX, _read_bytes(self.index_path))

    def _read_at(self, position: int) -> Optional[Employee]:
        try:
            with self.data_path.open("rb") as handle:
                handle.seek(position * EMPLOYEE_RECORD_SIZE)
                raw = handle.read(EMPLOYEE_RECORD_SIZE)
        except FileNotFoundError:
            return None
        if len(raw) < EMPLOYEE_RECORD_SIZE:
            return None
        return Employee._unpack(_EMPLOYEE.unpack(raw))

    def _locate(self, emp_id: int) -> Optional[tuple[int, int]]:
        return next(
            ((slot, pos) for slot, (key, pos) in enumerate(self._index()) if key == emp_id),
            None,
        )

    def records(self) -> list[Employee]:
        """All live employees, in index order."""
        found = []
        for _, position in self._index():
            employee = self._read_at(position)
            if employee is not None and employee.emp_id != DELETED:
                found.append(employee)
        return found

    def search(self, emp_id: int) -> Optional[Employee]:
        """The employee with ``emp_id``, or ``None`` if absent or deleted."""
        location = self._locate(emp_id)
        if location is None:
            return None
        employee = self._read_at(location[1])
        if employee is None or employee.emp_id == DELETED:
            return None
        return employee

    def _require(self, emp_id: int) -> tuple[int, int]:
        location = self._locate(emp_id)
        if location is None:
            raise KeyError(f"no record with emp id {emp_id}")
        return location

    def update(self, emp_id: int, name: str, salary: int) -> None:
        """Change name and salary of ``emp_id``, keeping its designation."""
        _, position = self._require(emp_id)
        existing = self._read_at(position)
        designation = existing.designation if existing is not None else ""
        payload = Employee(name, emp_id, salary, designation)._pack()
        _write_at(self.data_path, position * EMPLOYEE_RECORD_SIZE, payload)

    def delete(self, emp_id: int) -> None:
        """Blank the record and its index entry; raise ``KeyError`` if absent."""
        slot, position = self._require(emp_id)
        _write_at(self.data_path, position * EMPLOYEE_RECORD_SIZE, _BLANK_EMPLOYEE._pack())
        _write_at(self.index_path, slot * INDEX_RECORD_SIZE, _INDEX.pack(DELETED, position))

    def append(self, employee: Employee) -> None:
        """Add ``employee`` at the end of the data file and index it."""
        payload = employee._pack()
        position = len(_read_bytes(self.index_path)) // INDEX_RECORD_SIZE
        with self.data_path.open("ab") as handle:
            handle.write(payload)
        with self.index_path.open("ab") as handle:
            handle.write(_INDEX.pack(employee.emp_id, position))