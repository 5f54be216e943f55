# studentroster

A small console program for keeping student records. Each record holds a
name, a numeric ID, an age and a GPA. The roster stays sorted by ID, and
no two students can share an ID.

## Running it

```
studentroster
```

The program shows a menu and reads your choices from standard input, one
answer per line. Where a number is expected and the line is not one, it asks
again. The program ends when you choose Exit or when input runs out.

1. Add a student. It asks for the name, ID, age and GPA. Names are cut to
   63 characters, and IDs and ages are taken modulo 65536. It asks for the
   age again until the age is between 4 and 100, and for the GPA again
   (after printing `Invalid GPA!`) while the GPA is above 4. If the ID is
   already taken, the existing student is shown and nothing is added.
2. Display all students, in ID order.
3. Search for a student by ID and show it if found.
4. Update a student's information. The student is shown, then you choose a
   field to change (1 name, 2 ID, 3 age, 4 GPA); any other number ends the
   edit. If the new ID belongs to another student, the old ID is kept.
5. Delete a student.
6. Calculate the average GPA (`nan` when the roster is empty).
7. Find the student with the highest GPA: the first student whose GPA is
   strictly highest and above zero.
8. Exit.

## Using it from Python

```python
from studentroster.roster import Roster, Student

roster = Roster()
roster.add(Student(name="Ada", id=2, age=20, gpa=3.9))
roster.add(Student(name="Brian", id=1, age=22, gpa=3.1))

[s.id for s in roster]              # [1, 2]
len(roster)                         # 2
1 in roster                         # True
roster.average_gpa()                # 3.5
roster.highest_gpa().name           # "Ada"
print(roster.find(1).describe())
roster.remove(2)                    # returns the removed Student
roster.clear()
```

- `Roster.add` raises `DuplicateStudentError` when the ID is already taken.
- `Roster.find` raises `StudentNotFoundError` when no student has that ID.
- `Roster.remove` raises `EmptyRosterError` on an empty roster and
  `StudentNotFoundError` when no student has that ID.
- `Roster.average_gpa` raises `EmptyRosterError` on an empty roster.
- `Roster.highest_gpa` returns `None` when no student has a GPA above zero.

All of these errors are subclasses of `RosterError`; `StudentNotFoundError`
is also a `LookupError`. `validate_age` and `validate_gpa` return their
argument when it is within the limits the program uses (age 4 to 100, GPA at
most 4) and raise `ValueError` otherwise. `Roster.add` does not check them
itself.

The interactive loop is `studentroster.cli.run(stdin, stdout)`, so it can be
driven from any text streams. `studentroster.cli.Prompter` wraps such a pair
of streams, and `read_student` and `edit_student` use it to ask for a new
student or change an existing one.

## What it does not do

Records live in memory only. Nothing is saved to or loaded from disk, so the
roster is empty each time the program starts and is lost when it exits.

## Tests

```
pip install -e ".[test]"
pytest
```