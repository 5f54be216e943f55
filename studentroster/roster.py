"""Student records kept in a roster ordered by ascending student id."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterator, Optional

MAX_NAME_LENGTH = 64
MAX_AGE_LIMIT = 100
MIN_AGE_LIMIT = 4
MAX_GPA_LIMIT = 4

_by_id = attrgetter("id")


class RosterError(Exception):
    """Base class for roster errors."""


class DuplicateStudentError(RosterError):
    """A student with the same id is already in the roster."""


class StudentNotFoundError(RosterError, LookupError):
    """No student with the requested id is in the roster."""


class EmptyRosterError(RosterError):
    """The operation needs at least one student in the roster."""


@dataclass
class Student:
    """One student record."""

    name: str
    id: int
    age: int
    gpa: float

    def describe(self) -> str:
        """Return the multi-line description shown to the user."""
        return (
            f"Student's name : {self.name}\n"
            f"ID  : {self.id}\n"
            f"Age : {self.age}\n"
            f"GPA : {self.gpa:0.2f}\n"
        )


def validate_age(age: int) -> int:
    """Return ``age`` if it lies within the allowed range, else raise ValueError."""
    if not MIN_AGE_LIMIT <= age <= MAX_AGE_LIMIT:
        raise ValueError(
            f"age must be between {MIN_AGE_LIMIT} and {MAX_AGE_LIMIT}, got {age}"
        )
    return age


def validate_gpa(gpa: float) -> float:
    """Return ``gpa`` if it does not exceed the maximum, else raise ValueError."""
    if gpa > MAX_GPA_LIMIT:
        raise ValueError(f"GPA must not exceed {MAX_GPA_LIMIT}, got {gpa}")
    return gpa


class Roster:
    """A collection of students kept sorted by id, with unique ids."""

    def __init__(self) -> None:
        self._students: list[Student] = []

    def _index(self, student_id: int) -> int:
        return bisect.bisect_left(self._students, student_id, key=_by_id)

    def _position(self, student_id: int) -> int:
        index = self._index(student_id)
        if index < len(self._students) and self._students[index].id == student_id:
            return index
        raise StudentNotFoundError(f"no student with id {student_id}")

    def add(self, student: Student) -> None:
        """Insert ``student`` in id order; raise DuplicateStudentError if the id is taken."""
        index = self._index(student.id)
        if index < len(self._students) and self._students[index].id == student.id:
            raise DuplicateStudentError(f"a student with id {student.id} exists already")
        self._students.insert(index, student)

    def find(self, student_id: int) -> Student:
        """Return the student with ``student_id``."""
        return self._students[self._position(student_id)]

    def remove(self, student_id: int) -> Student:
        """Remove and return the student with ``student_id``."""
        if not self._students:
            raise EmptyRosterError("list is empty")
        return self._students.pop(self._position(student_id))

    def average_gpa(self) -> float:
        """Return the mean GPA of all students."""
        if not self._students:
            raise EmptyRosterError("cannot average an empty roster")
        return sum(student.gpa for student in self._students) / len(self._students)

    def highest_gpa(self) -> Optional[Student]:
        """Return the first student with the strictly highest positive GPA, or None."""
        best: Optional[Student] = None
        highest = 0.0
        for student in self._students:
            if student.gpa > highest:
                best = student
                highest = student.gpa
        return best

    def clear(self) -> None:
        """Remove every student."""
        self._students.clear()

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students))

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        if not isinstance(student_id, int):
            return False
        try:
            self._position(student_id)
        except StudentNotFoundError:
            return False
        return True