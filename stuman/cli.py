"""Command-line front end for the student management system."""

from __future__ import annotations

import argparse
import datetime
import getpass
import os
import sqlite3
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from stuman.accounts import change_password
from stuman.database import DatabaseError, DatabaseManager
from stuman.finance import ALL_STUDENTS, FinancialModel
from stuman.honorwall import HonorWall, grid_position
from stuman.schedule import ScheduleModel, course_label, default_time_for_slot, week_range
from stuman.settings import DEFAULT_SETTINGS_PATH, Settings
from stuman.students import StudentModel

DEFAULT_TIMES = ("上午1", "上午2", "下午1", "下午2", "晚上1", "晚上2")
_EARLIEST = datetime.date(1900, 1, 1)
_LATEST = datetime.date(9999, 12, 31)


def _parse_date(text: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {text!r}, expected YYYY-MM-DD") from exc


def _parse_time(text: str) -> datetime.time:
    try:
        return datetime.datetime.strptime(text, "%H:%M").time()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid time {text!r}, expected HH:MM") from exc


def _parse_field(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got {text!r}")
    return name, value


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"<{len(bytes(value))} bytes>"
    return str(value)


def _print_rows(rows: Iterable[dict[str, Any]]) -> None:
    rows = list(rows)
    if not rows:
        return
    columns = list(rows[0])
    print("\t".join(columns))
    for row in rows:
        print("\t".join(_cell(row.get(column)) for column in columns))


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def _student_data(args: argparse.Namespace) -> dict[str, Any]:
    data: dict[str, Any] = dict(args.fields)
    if args.photo is not None:
        data["photo"] = Path(args.photo).read_bytes()
    return data


def _students(args: argparse.Namespace, connection: sqlite3.Connection, settings: Settings) -> int:
    model = StudentModel(connection)
    if args.action == "list":
        _print_rows(model.all_students())
    elif args.action == "add":
        print(model.add_student(_student_data(args)))
    elif args.action == "update":
        if not model.update_student(args.id, _student_data(args)):
            return _fail(f"no student with id {args.id}")
    elif args.action == "delete":
        if not model.delete_student(args.id):
            return _fail(f"no student with id {args.id}")
    return 0


def _finance(args: argparse.Namespace, connection: sqlite3.Connection, settings: Settings) -> int:
    model = FinancialModel(connection)
    if args.action == "list":
        _print_rows(model.records(args.student, args.start, args.end))
    elif args.action == "add":
        print(model.add_record(args.student_id, args.date, args.amount, args.type, args.notes))
    elif args.action == "update":
        changed = model.update_record(
            args.id, args.student_id, args.date, args.amount, args.type, args.notes
        )
        if not changed:
            return _fail(f"no payment record with id {args.id}")
    elif args.action == "delete":
        if not model.delete_record(args.id):
            return _fail(f"no payment record with id {args.id}")
    return 0


def _schedule(args: argparse.Namespace, connection: sqlite3.Connection, settings: Settings) -> int:
    times = [slot for slot in args.times.split(",") if slot] if args.times else list(DEFAULT_TIMES)
    model = ScheduleModel(connection, times)
    if args.action == "show":
        start, end = week_range(args.year, args.week)
        print(f"{start:%Y-%m-%d}到{end:%Y-%m-%d}")
        print("\t".join(["date", *times]))
        for offset, cells in enumerate(model.schedule(args.year, args.week)):
            day = start + datetime.timedelta(days=offset)
            print("\t".join([f"{day:%Y-%m-%d}", *cells]))
        return 0
    if args.slot not in times:
        return _fail(f"unknown time slot {args.slot!r}")
    if args.action == "add":
        slot_index = times.index(args.slot)
        start_time = args.time or default_time_for_slot(slot_index)
        if start_time is None:
            return _fail(f"no default time for slot {args.slot!r}; give --time")
        year, week, _ = args.date.isocalendar()
        grid = model.schedule(year, week)
        if grid[args.date.weekday()][slot_index]:
            return _fail("time slot is already occupied")
        model.add_course(args.date, args.slot, course_label(args.student, start_time))
    elif args.action == "delete":
        if not model.delete_course(args.date, args.slot):
            return _fail("no course in that time slot")
    return 0


def _honor(args: argparse.Namespace, connection: sqlite3.Connection, settings: Settings) -> int:
    wall = HonorWall(connection)
    if args.action == "list":
        for index, image in enumerate(wall.images()):
            row, col = grid_position(index)
            print(f"{image.id}\t{row}\t{col}\t{len(image.image_data)}")
    elif args.action == "add":
        print(wall.add_image(args.path))
    elif args.action == "replace":
        if not wall.replace_image(args.id, args.path):
            return _fail(f"no picture with id {args.id}")
    elif args.action == "delete":
        if not wall.delete_image(args.id):
            return _fail(f"no picture with id {args.id}")
    return 0


def _change_credentials(
    args: argparse.Namespace, connection: sqlite3.Connection, settings: Settings
) -> int:
    username = args.user if args.user is not None else settings.last_user
    old = args.old if args.old is not None else getpass.getpass("Old password: ")
    new = args.new if args.new is not None else getpass.getpass("New password: ")
    confirm = args.confirm if args.confirm is not None else getpass.getpass("Confirm password: ")
    change_password(connection, username, old, new, confirm)
    print("password updated")
    return 0


def _settings(args: argparse.Namespace, settings: Settings) -> int:
    if args.action == "show":
        print(f"database_path={settings.database_path}")
        print(f"cache_enabled={'true' if settings.cache_enabled else 'false'}")
        print(f"last_user={settings.last_user}")
        return 0
    if args.cache is not None:
        settings.cache_enabled = args.cache
    if args.last_user is not None:
        settings.last_user = args.last_user
    if args.db_path is not None:
        previous = settings.database_path
        settings.database_path = args.db_path
        if not os.path.exists(args.db_path):
            DatabaseManager(args.db_path).close()
        if args.db_path != previous:
            print("database path change takes effect on next start")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stuman", description="Student management system.")
    parser.add_argument("--config", default=DEFAULT_SETTINGS_PATH, help="settings INI file")
    parser.add_argument("--db", default=None, help="database file (default from settings)")
    commands = parser.add_subparsers(dest="command", required=True)

    students = commands.add_parser("students", help="student information")
    students.set_defaults(handler=_students)
    s_actions = students.add_subparsers(dest="action", required=True)
    s_actions.add_parser("list")
    for name in ("add", "update"):
        action = s_actions.add_parser(name)
        if name == "update":
            action.add_argument("id", type=int)
        action.add_argument("fields", nargs="*", type=_parse_field, metavar="FIELD=VALUE")
        action.add_argument("--photo", default=None, help="image file stored as photo")
    s_actions.add_parser("delete").add_argument("id", type=int)

    finance = commands.add_parser("finance", help="payment records")
    finance.set_defaults(handler=_finance)
    f_actions = finance.add_subparsers(dest="action", required=True)
    f_list = f_actions.add_parser("list")
    f_list.add_argument("--student", default=ALL_STUDENTS)
    f_list.add_argument("--start", type=_parse_date, default=_EARLIEST)
    f_list.add_argument("--end", type=_parse_date, default=_LATEST)
    for name in ("add", "update"):
        action = f_actions.add_parser(name)
        if name == "update":
            action.add_argument("id", type=int)
        action.add_argument("student_id")
        action.add_argument("amount", type=float)
        action.add_argument("--date", type=_parse_date, default=datetime.date.today())
        action.add_argument("--type", default="")
        action.add_argument("--notes", default="")
    f_actions.add_parser("delete").add_argument("id", type=int)

    schedule = commands.add_parser("schedule", help="weekly timetable")
    schedule.set_defaults(handler=_schedule)
    schedule.add_argument("--times", default=None, help="comma separated slot names")
    c_actions = schedule.add_subparsers(dest="action", required=True)
    today = datetime.date.today().isocalendar()
    show = c_actions.add_parser("show")
    show.add_argument("--year", type=int, default=today[0])
    show.add_argument("--week", type=int, default=today[1])
    add = c_actions.add_parser("add")
    add.add_argument("date", type=_parse_date)
    add.add_argument("slot")
    add.add_argument("student")
    add.add_argument("--time", type=_parse_time, default=None)
    delete = c_actions.add_parser("delete")
    delete.add_argument("date", type=_parse_date)
    delete.add_argument("slot")

    honor = commands.add_parser("honor", help="honor wall pictures")
    honor.set_defaults(handler=_honor)
    h_actions = honor.add_subparsers(dest="action", required=True)
    h_actions.add_parser("list")
    h_actions.add_parser("add").add_argument("path")
    replace = h_actions.add_parser("replace")
    replace.add_argument("id", type=int)
    replace.add_argument("path")
    h_actions.add_parser("delete").add_argument("id", type=int)

    credentials_cmd = commands.add_parser("password", help="change a user's password")
    credentials_cmd.set_defaults(handler=_change_credentials)
    credentials_cmd.add_argument("--user", default=None)
    credentials_cmd.add_argument("--old", default=None)
    credentials_cmd.add_argument("--new", default=None)
    credentials_cmd.add_argument("--confirm", default=None)

    settings = commands.add_parser("settings", help="system settings")
    settings.set_defaults(handler=None)
    g_actions = settings.add_subparsers(dest="action", required=True)
    g_actions.add_parser("show")
    set_action = g_actions.add_parser("set")
    set_action.add_argument("--db-path", default=None)
    set_action.add_argument("--cache", action=argparse.BooleanOptionalAction, default=None)
    set_action.add_argument("--last-user", default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = _build_parser().parse_args(argv)
    settings = Settings(args.config)
    try:
        if args.command == "settings":
            return _settings(args, settings)
        db_path = args.db if args.db is not None else settings.database_path
        with DatabaseManager(db_path) as manager:
            return args.handler(args, manager.connection, settings)
    except (DatabaseError, ValueError, OSError) as exc:
        return _fail(str(exc))


if __name__ == "__main__":
    sys.exit(main())