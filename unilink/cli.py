"""
CLI (Command Line Interface).

Quick terminal commands around the registry state file, e.g.:

    unilink demo
    unilink hire Smith "Computer Science"
    unilink found "State University"
    unilink link "State University" Smith
    unilink teach "State University"
    unilink close "State University"
    unilink show

Every command loads the state file, applies one change and saves it again.
Plain text is printed, except for `show` which renders a rich table.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unilink.demo import run_demo
from unilink.model import TEACHER_KINDS, Teacher, make_teacher
from unilink.registry import Registry
from unilink.storage import load_registry, save_registry

logger = logging.getLogger(__name__)


def _cmd_demo(args: argparse.Namespace, registry: Registry) -> int:
    run_demo()
    return 0


def _cmd_hire(args: argparse.Namespace, registry: Registry) -> int:
    teacher = make_teacher(args.kind, args.name, args.subject, department=args.department, title=args.title)
    registry.hire(teacher)
    print(f"Hired: {teacher.describe()}")
    return 0


def _cmd_release(args: argparse.Namespace, registry: Registry) -> int:
    affiliations = registry.affiliations(args.name)
    teacher = registry.release(args.name)
    if affiliations:
        print(f"Released: {teacher.display_name} (unlinked from {', '.join(affiliations)})")
    else:
        print(f"Released: {teacher.display_name}")
    return 0


def _cmd_found(args: argparse.Namespace, registry: Registry) -> int:
    uni = registry.found(args.university)
    print(f"Founded: {uni.name}")
    return 0


def _cmd_close(args: argparse.Namespace, registry: Registry) -> int:
    uni = registry.university(args.university)
    names = [t.display_name for t in uni.members()]
    registry.close(args.university)
    print(f"Closed: {uni.name}")
    if names:
        print(f"Still hired: {', '.join(names)}")
    return 0


def _cmd_link(args: argparse.Namespace, registry: Registry) -> int:
    uni = registry.university(args.university)
    teacher = registry.teacher(args.name)
    if not registry.link(args.university, args.name):
        print(f"Already linked: {teacher.display_name} -> {uni.name}")
        return 0
    print(f"Linked: {teacher.display_name} -> {uni.name} (members: {len(uni)})")
    return 0


def _cmd_unlink(args: argparse.Namespace, registry: Registry) -> int:
    uni = registry.university(args.university)
    teacher = registry.teacher(args.name)
    if not registry.unlink(args.university, args.name):
        print(f"Not linked: {teacher.display_name} -> {uni.name}")
        return 0
    print(f"Unlinked: {teacher.display_name} -> {uni.name} (members: {len(uni)})")
    return 0


def _cmd_list(args: argparse.Namespace, registry: Registry) -> int:
    universities = registry.universities()
    teachers = registry.teachers()
    if not universities and not teachers:
        print("Nothing here yet.")
        return 0

    for uni in universities:
        for line in uni.show():
            print(line)

    # teachers not linked anywhere still exist on their own
    unaffiliated = [t for t in teachers if not any(t in u for u in universities)]
    if unaffiliated:
        print("Unaffiliated:")
        for t in unaffiliated:
            print(f"  - {t.describe()}")
    return 0


def _cmd_teach(args: argparse.Namespace, registry: Registry) -> int:
    uni = registry.university(args.university)
    lines = uni.teach_all()
    if not lines:
        print(f"{uni.name} has no teachers.")
        return 0
    for line in lines:
        print(line)
    return 0


def _cmd_show(args: argparse.Namespace, registry: Registry) -> int:
    console = Console()
    table = Table(title="Universities", box=box.SIMPLE)
    table.add_column("University")
    table.add_column("Teacher")
    table.add_column("Subject")
    table.add_column("Department")

    # names are user input, so every value goes through escape() before markup
    def teacher_cells(t: Teacher) -> tuple[str, str, str]:
        return f"[magenta]{escape(t.display_name)}[/]", escape(t.subject), escape(t.department or "-")

    for uni in registry.universities():
        members = uni.members()
        if not members:
            table.add_row(f"[bold cyan]{escape(uni.name)}[/]", "[dim](none)[/]", "", "")
        for i, t in enumerate(members):
            label = f"[bold cyan]{escape(uni.name)}[/]" if i == 0 else ""
            table.add_row(label, *teacher_cells(t))

    for t in registry.teachers():
        if not registry.affiliations(t.name):
            table.add_row("[dim](unaffiliated)[/]", *teacher_cells(t))

    console.print(table)
    return 0


COMMANDS: dict[str, tuple[Callable[[argparse.Namespace, Registry], int], bool]] = {
    # name -> (handler, saves state)
    "demo": (_cmd_demo, False),
    "hire": (_cmd_hire, True),
    "release": (_cmd_release, True),
    "found": (_cmd_found, True),
    "close": (_cmd_close, True),
    "link": (_cmd_link, True),
    "unlink": (_cmd_unlink, True),
    "list": (_cmd_list, False),
    "teach": (_cmd_teach, False),
    "show": (_cmd_show, False),
}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="unilink", description="University/teacher aggregation demo")
    parser.add_argument("--state", type=str, default=None, help="State file path (default: $UNILINK_STATE or package data)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("demo", help="Run the University/Professor tutorial")

    p_hire = sub.add_parser("hire", help="Hire a teacher")
    p_hire.add_argument("name", type=str, help="Teacher name (e.g. Smith)")
    p_hire.add_argument("subject", type=str, help="Subject (e.g. 'Computer Science')")
    p_hire.add_argument("--kind", choices=sorted(TEACHER_KINDS), default="professor", help="Teacher kind")
    p_hire.add_argument("--department", type=str, default=None, help="Department")
    p_hire.add_argument("--title", type=str, default=None, help="Title (default depends on kind)")

    p_release = sub.add_parser("release", help="Release a teacher (unlinks everywhere)")
    p_release.add_argument("name", type=str, help="Teacher name")

    p_found = sub.add_parser("found", help="Found a university")
    p_found.add_argument("university", type=str, help="University name")

    p_close = sub.add_parser("close", help="Close a university (teachers stay hired)")
    p_close.add_argument("university", type=str, help="University name")

    p_link = sub.add_parser("link", help="Link a teacher to a university")
    p_link.add_argument("university", type=str, help="University name")
    p_link.add_argument("name", type=str, help="Teacher name")

    p_unlink = sub.add_parser("unlink", help="Unlink a teacher from a university")
    p_unlink.add_argument("university", type=str, help="University name")
    p_unlink.add_argument("name", type=str, help="Teacher name")

    sub.add_parser("list", help="List universities and teachers")

    p_teach = sub.add_parser("teach", help="Let every teacher of a university teach")
    p_teach.add_argument("university", type=str, help="University name")

    sub.add_parser("show", help="Show universities and teachers as a table")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handler, saves = COMMANDS[args.command]
    registry = load_registry(args.state)

    try:
        code = handler(args, registry)
    except KeyError as exc:
        # KeyError wraps its message in quotes
        print(exc.args[0] if exc.args else "Not found.")
        raise SystemExit(1)
    except ValueError as exc:
        print(str(exc))
        raise SystemExit(1)

    if saves and code == 0:
        save_registry(registry, args.state)
        logger.debug("state saved")
    raise SystemExit(code)
