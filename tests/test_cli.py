import io

import pytest

from studentroster.cli import (
    Prompter,
    edit_student,
    main,
    read_student,
    run,
)
from studentroster.roster import Student


def session(*lines):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    status = run(stdin, stdout)
    return status, stdout.getvalue()


def prompter_for(*lines):
    return Prompter(io.StringIO("".join(f"{line}\n" for line in lines)), io.StringIO())


def test_prompter_ask_text_strips_newline():
    p = prompter_for("hello world")
    assert p.ask_text("> ") == "hello world"
    assert p.output.getvalue() == "> "


def test_prompter_ask_int_retries():
    p = prompter_for("abc", "12")
    assert p.ask_int("n: ") == 12
    assert p.output.getvalue().count("n: ") == 2


def test_prompter_ask_float():
    p = prompter_for("x", "2.5")
    assert p.ask_float("g: ") == 2.5


def test_prompter_eof_raises():
    with pytest.raises(EOFError):
        prompter_for().ask_text("> ")


def test_read_student_collects_fields():
    student = read_student(prompter_for("Ann", "7", "20", "3.5"))
    assert student == Student(name="Ann", id=7, age=20, gpa=3.5)


def test_read_student_reprompts_bad_age_and_gpa():
    p = prompter_for("Ann", "7", "2", "20", "4.5", "3.0")
    student = read_student(p)
    assert student.age == 20
    assert student.gpa == 3.0
    out = p.output.getvalue()
    assert out.count("Enter Age: ") == 2
    assert "Invalid GPA!\n" in out


def test_read_student_truncates_long_name():
    student = read_student(prompter_for("x" * 100, "1", "20", "3"))
    assert student.name == "x" * 63


def test_edit_student_changes_fields():
    student = Student(name="Ann", id=7, age=20, gpa=3.5)
    edit_student(prompter_for("1", "Bob", "3", "30", "4", "2.0", "5"), student)
    assert (student.name, student.id, student.age, student.gpa) == ("Bob", 7, 30, 2.0)


def test_add_and_display():
    status, out = session("1", "Ann", "7", "20", "3.5", "2", "8")
    assert status == 0
    assert "Student's name : Ann\nID  : 7\nAge : 20\nGPA : 3.50\n" in out
    assert out.endswith("Exiting the program.\n")


def test_display_sorted_by_id():
    _, out = session(
        "1", "Zed", "9", "20", "3", "1", "Amy", "2", "21", "3", "2", "8"
    )
    assert out.index("ID  : 2\n") < out.index("ID  : 9\n")


def test_duplicate_add_reports():
    _, out = session("1", "Ann", "7", "20", "3", "1", "Bob", "7", "22", "2", "8")
    assert "Student with the same ID exists already" in out


def test_search_found_and_missing():
    _, out = session("1", "Ann", "7", "20", "3", "3", "7", "3", "8", "8")
    assert out.count("Student's name : Ann") == 1


def test_update_missing():
    _, out = session("4", "5", "8")
    assert "Student with this ID doesn't exist! " in out


def test_update_changes_id_and_keeps_order():
    _, out = session(
        "1", "Ann", "7", "20", "3",
        "4", "7", "2", "1", "5",
        "3", "1", "3", "7", "8",
    )
    assert out.count("Student's name : Ann") == 2
    assert "ID  : 1\n" in out


def test_update_to_duplicate_id_is_rejected():
    _, out = session(
        "1", "Ann", "7", "20", "3",
        "1", "Bob", "9", "20", "3",
        "4", "9", "2", "7", "5",
        "2", "8",
    )
    assert "Student with the same ID exists already\n" in out
    assert "ID  : 9\n" in out.rsplit("Enter choice: ", 2)[1]


def test_delete_empty_and_existing():
    _, out = session("5", "3", "1", "Ann", "7", "20", "3", "5", "7", "2", "8")
    assert "list is empty!" in out
    tail = out.rsplit("Enter choice: ", 2)[1]
    assert "Student's name" not in tail


def test_average_of_empty_is_nan():
    _, out = session("6", "8")
    assert "Average GPA is nan\n" in out


def test_average_single_student():
    _, out = session("1", "Ann", "7", "20", "3.5", "6", "8")
    assert "Average GPA is 3.500000\n" in out


def test_highest_gpa():
    _, out = session(
        "1", "Ann", "1", "20", "2", "1", "Bob", "2", "20", "3.9", "7", "8"
    )
    after = out.split("Highest GPA student is :\n", 1)[1]
    assert after.startswith("Student's name : Bob")


def test_invalid_choice():
    _, out = session("9", "8")
    assert "Invalid choice. Please enter a number between 1 and 8.\n" in out


def test_eof_ends_cleanly():
    status, out = session("2")
    assert status == 0
    assert "Exiting the program." not in out


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n"))
    assert main() == 0
    assert "Exiting the program." in capsys.readouterr().out