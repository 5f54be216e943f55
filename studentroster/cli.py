"""Interactive menu for managing a student roster."""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Sequence, TextIO

from .roster import (
    MAX_NAME_LENGTH,
    DuplicateStudentError,
    EmptyRosterError,
    Roster,
    Student,
    StudentNotFoundError,
    validate_age,
    validate_gpa,
)

_UINT16 = 0x10000

MENU = (
    "\nEnter Required Operation:\n"
    "1. Add a Student\n"
    "2. Display All Students\n"
    "3. Search for a Student by ID\n"
    "4. Update Student Information\n"
    "5. Delete a Student\n"
    "6. Calculate Average GPA\n"
    "7. Find Student with Highest GPA\n"
    "8. Exit\n"
)

EDIT_MENU = (
    "Enter attribute to be modified : \n"
    "1) Name\n"
    "2) id\n"
    "3) age\n"
    "4) GPA\n"
    "5) exit edit\n"
)


class Operation(IntEnum):
    ADD = 0
    DISPLAY = 1
    SEARCH = 2
    UPDATE = 3
    DELETE = 4
    AVG_GPA = 5
    HIGHEST_GPA = 6
    EXIT = 7


class _Attribute(IntEnum):
    NAME = 0
    ID = 1
    AGE = 2
    GPA = 3


@dataclass
class Prompter:
    """Reads answers line by line from ``input`` after writing prompts to ``output``."""

    input: TextIO
    output: TextIO

    def _read_line(self, prompt: str) -> str:
        self.output.write(prompt)
        self.output.flush()
        line = self.input.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def ask_text(self, prompt: str) -> str:
        """Return one line of text."""
        return self._read_line(prompt)

    def ask_int(self, prompt: str) -> int:
        """Return an integer, prompting again until one is given."""
        while True:
            try:
                return int(self._read_line(prompt).strip())
            except ValueError:
                continue

    def ask_float(self, prompt: str) -> float:
        """Return a number, prompting again until one is given."""
        while True:
            try:
                return float(self._read_line(prompt).strip())
            except ValueError:
                continue


def _ask_uint16(prompter: Prompter, prompt: str) -> int:
    return prompter.ask_int(prompt) % _UINT16


def _ask_name(prompter: Prompter) -> str:
    return prompter.ask_text("Enter student name: ")[: MAX_NAME_LENGTH - 1]


def _ask_age(prompter: Prompter, first_prompt: str) -> int:
    age = _ask_uint16(prompter, first_prompt)
    while True:
        try:
            return validate_age(age)
        except ValueError:
            age = _ask_uint16(prompter, "Enter Age: ")


def _ask_gpa(prompter: Prompter, first_prompt: str) -> float:
    gpa = prompter.ask_float(first_prompt)
    while True:
        try:
            return validate_gpa(gpa)
        except ValueError:
            prompter.output.write("Invalid GPA!\n")
            gpa = prompter.ask_float("Enter GPA: ")


def read_student(prompter: Prompter) -> Student:
    """Ask for every field of a new student and return it."""
    name = _ask_name(prompter)
    student_id = _ask_uint16(prompter, "Enter ID: ")
    age = _ask_age(prompter, "Enter Age: ")
    gpa = _ask_gpa(prompter, "Enter GPA: ")
    return Student(name=name, id=student_id, age=age, gpa=gpa)


def edit_student(prompter: Prompter, student: Student) -> Student:
    """Let the user change fields of ``student`` until they choose to stop."""
    while True:
        prompter.output.write(EDIT_MENU)
        try:
            attribute = _Attribute(prompter.ask_int("") - 1)
        except ValueError:
            return student
        if attribute is _Attribute.NAME:
            student.name = _ask_name(prompter)
        elif attribute is _Attribute.ID:
            student.id = _ask_uint16(prompter, "Enter new id: ")
        elif attribute is _Attribute.AGE:
            student.age = _ask_age(prompter, "Enter new age: ")
        else:
            student.gpa = _ask_gpa(prompter, "Enter new GPA: ")


def _add(prompter: Prompter, roster: Roster) -> None:
    student = read_student(prompter)
    try:
        roster.add(student)
    except DuplicateStudentError:
        prompter.output.write(roster.find(student.id).describe())
        prompter.output.write("Student with the same ID exists already")


def _display(prompter: Prompter, roster: Roster) -> None:
    for student in roster:
        prompter.output.write(student.describe())


def _search(prompter: Prompter, roster: Roster) -> None:
    student_id = _ask_uint16(prompter, "Enter ID for search: ")
    try:
        prompter.output.write(roster.find(student_id).describe())
    except StudentNotFoundError:
        pass


def _update(prompter: Prompter, roster: Roster) -> None:
    student_id = _ask_uint16(prompter, "Enter ID for update: ")
    try:
        student = roster.find(student_id)
    except StudentNotFoundError:
        prompter.output.write("Student with this ID doesn't exist! ")
        return
    prompter.output.write(student.describe())
    original = copy.copy(student)
    roster.remove(student_id)
    try:
        edit_student(prompter, student)
    finally:
        try:
            roster.add(student)
        except DuplicateStudentError:
            student.id = original.id
            roster.add(student)
            prompter.output.write("Student with the same ID exists already\n")


def _delete(prompter: Prompter, roster: Roster) -> None:
    student_id = _ask_uint16(prompter, "Enter ID for delete: ")
    try:
        roster.remove(student_id)
    except EmptyRosterError:
        prompter.output.write("list is empty!")
    except StudentNotFoundError:
        pass


def _average(prompter: Prompter, roster: Roster) -> None:
    try:
        average = roster.average_gpa()
    except EmptyRosterError:
        average = float("nan")
    prompter.output.write(f"Average GPA is {average:f}\n")


def _highest(prompter: Prompter, roster: Roster) -> None:
    prompter.output.write("Highest GPA student is :\n")
    best = roster.highest_gpa()
    if best is not None:
        prompter.output.write(best.describe())


_HANDLERS: dict[Operation, Callable[[Prompter, Roster], None]] = {
    Operation.ADD: _add,
    Operation.DISPLAY: _display,
    Operation.SEARCH: _search,
    Operation.UPDATE: _update,
    Operation.DELETE: _delete,
    Operation.AVG_GPA: _average,
    Operation.HIGHEST_GPA: _highest,
}


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends; return the exit status."""
    prompter = Prompter(stdin, stdout)
    roster = Roster()
    try:
        while True:
            stdout.write(MENU)
            choice = prompter.ask_int("Enter choice: ")
            try:
                operation = Operation(choice - 1)
            except ValueError:
                stdout.write("Invalid choice. Please enter a number between 1 and 8.\n")
                continue
            if operation is Operation.EXIT:
                stdout.write("Exiting the program.\n")
                break
            _HANDLERS[operation](prompter, roster)
    except EOFError:
        pass
    finally:
        roster.clear()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive roster on standard input and output."""
    return run(sys.stdin, sys.stdout)