# stuman

A small management tool for a tutoring business. All of its data lives in
one SQLite database:

- **Students** (`studentInfo`): rows with whatever columns the table has,
  photos included.
- **Payments** (`financialRecords`): payments per student, filtered by date
  range and joined with the student's name.
- **Schedule** (`schedule`): a weekly timetable of seven days by named time
  slots.
- **Honour wall** (`honorWall`): pictures stored as PNG data and laid out
  three to a row.
- **Accounts** (`users`): password changes, stored as hex SHA-256 hashes.

Settings (the database path, whether login details are remembered, the last
user) are kept in an INI file, `config.ini` by default.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package gives the `stuman` command. Every command reads the
settings file (`--config`, default `config.ini`) and works on the database it
names, unless `--db PATH` is given. Errors are printed as `error: ...` and the
command exits with status 1.

```
stuman --help
```

### Students

```
stuman students list
stuman students add name=Alice grade=5 --photo alice.png
stuman students update 1 grade=6
stuman students delete 1
```

`list` prints a tab-separated table; binary columns such as photos are shown
as `<N bytes>`. `add` prints the new id.

### Payments

```
stuman finance list [--student ID] [--start YYYY-MM-DD] [--end YYYY-MM-DD]
stuman finance add STUDENT_ID AMOUNT [--date YYYY-MM-DD] [--type TYPE] [--notes TEXT]
stuman finance update ID STUDENT_ID AMOUNT [--date ...] [--type ...] [--notes ...]
stuman finance delete ID
```

`list` shows every student's payments unless `--student` is given; the date
range is inclusive. `--date` defaults to today.

### Schedule

```
stuman schedule show [--year YEAR] [--week WEEK]
stuman schedule add YYYY-MM-DD SLOT STUDENT [--time HH:MM]
stuman schedule delete YYYY-MM-DD SLOT
```

Weeks are ISO weeks, Monday to Sunday; `show` defaults to the current week
and prints the date range followed by one line per day. The slots are
`上午1 上午2 下午1 下午2 晚上1 晚上2` unless `--times a,b,c` is given before
the action. `add` refuses a slot that is already taken and stores the course
as `STUDENT,HH:MM`; without `--time`, the six slots default to 09:00, 11:00,
14:00, 16:00, 19:00 and 21:00.

### Honour wall

```
stuman honor list
stuman honor add picture.jpg
stuman honor replace ID picture.png
stuman honor delete ID
```

`list` prints each picture's id, grid row, grid column and size in bytes.
Pictures that cannot be decoded are left out.

### Password

```
stuman password [--user NAME] [--old ...] [--new ...] [--confirm ...]
```

The user defaults to the last user in the settings; passwords not given as
options are asked for without echo.

### Settings

```
stuman settings show
stuman settings set [--db-path PATH] [--cache | --no-cache] [--last-user NAME]
```

Setting a database path that does not exist yet creates an empty database
file there.

## Library use

```python
from datetime import date

from stuman.database import DatabaseManager
from stuman.students import StudentModel
from stuman.finance import FinancialModel
from stuman.schedule import ScheduleModel, week_range

with DatabaseManager("school.db") as db:
    students = StudentModel(db.connection)
    student_id = students.add_student({"name": "Alice", "grade": "5"})
    print(students.all_students())

    finance = FinancialModel(db.connection)
    finance.add_record(student_id, date(2024, 3, 1), 200.0, "cash", "March fee")
    print(finance.records("-1", date(2024, 1, 1), date(2024, 12, 31)))

    schedule = ScheduleModel(db.connection, ["morning", "afternoon"])
    schedule.add_course(date(2024, 3, 4), "morning", "Alice,09:00")
    print(schedule.schedule(2024, 10))

start, end = week_range(2024, 10)
```

- `stuman.database.DatabaseManager` opens the database (default
  `StuManSys.db`); assigning a new `path` reopens it. `connection` raises
  `DatabaseError` when closed.
- `stuman.students.StudentModel`, `stuman.finance.FinancialModel`,
  `stuman.schedule.ScheduleModel` and `stuman.honorwall.HonorWall` return the
  new row id from their add methods and the number of rows changed from
  their update, replace and delete methods.
- `FinancialModel.records` takes `"-1"` or `None` as the student id to return
  every student's payments.
- `stuman.schedule` also has `week_range`, `default_time_for_slot` and
  `course_label`.
- `stuman.honorwall` has `grid_position(index)` (row and column in a
  three-column grid) and `thumbnail(image_data)` (a Pillow image scaled to fit
  300 by 500, keeping its aspect ratio). `HonorWall.images()` returns
  `HonorImage` objects with `id` and `image_data`.
- `stuman.accounts` has `hash_password` and `change_password`, which raises
  `PasswordError` when the confirmation differs, there is no user, the user
  is unknown or the old password is wrong.
- `stuman.settings.Settings` exposes `database_path`, `cache_enabled` and
  `last_user`; each assignment is written to the INI file at once.

Failing SQL statements raise `stuman.database.DatabaseError`.

## What it does not do

- It does not create the tables. The database must already hold
  `studentInfo`, `financialRecords`, `schedule`, `honorWall` and `users` with
  the columns named above.
- It has no graphical interface and no login screen; it does not check a
  password at start-up, and the remembered-login setting is only stored, not
  acted on.
- It does not add users; `stuman password` only changes the password of a
  user that already exists.