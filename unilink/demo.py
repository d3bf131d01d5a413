"""
The tutorial program.

Builds two professors on their own, links them to a university and lets the
university walk its list. Then it shows what makes this aggregation and not
composition: the professors outlive the university, can be shared, and
vanish from a university once their owner lets them go.
"""

from __future__ import annotations

from typing import Callable

from unilink.model import Professor
from unilink.university import University


def run_demo(echo: Callable[[str], None] = print) -> list[str]:
    lines: list[str] = []

    def say(line: str = "") -> None:
        lines.append(line)
        echo(line)

    smith = Professor("Smith", "Computer Science")
    jones = Professor("Jones", "Mathematics")

    uni = University("State University")
    uni.add(smith)
    uni.add(jones)

    for line in uni.teach_all():
        say(line)

    say()
    say(f"{uni.name} has {len(uni)} professors.")
    del uni
    say("State University was closed. Its professors keep teaching:")
    say(smith.teach())
    say(jones.teach())

    say()
    north = University("North College")
    south = University("South Institute")
    north.add(smith)
    south.add(smith)
    south.add(jones)
    say(f"{smith.display_name} is shared by {north.name} and {south.name}.")
    for line in north.show() + south.show():
        say(line)

    say()
    del jones
    say("Dr. Jones left. South Institute now lists:")
    for line in south.show():
        say(line)

    return lines
