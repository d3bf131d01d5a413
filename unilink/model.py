"""
Central data model definitions used across the project.

This module defines the teaching staff that universities link to:
- Teacher is the common interface (every variant can teach)
- Professor, Lecturer and TeachingAssistant are the implementing variants

A teacher exists on its own. It can teach whether or not any university
refers to it, which is the whole point of aggregation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


def normalize_key(name: str) -> str:
    """
    Normalize a teacher or university name into a lookup key (strip + uppercase).
    """
    return str(name).strip().upper()


@dataclass(eq=False)
class Teacher(ABC):
    """
    Represents one member of the teaching staff.

    eq=False keeps identity semantics: two teachers with the same fields
    are still two different people as far as a university is concerned.
    """

    name: str
    subject: str
    department: Optional[str] = None
    title: Optional[str] = None

    def __post_init__(self) -> None:
        for field_name in ("title", "department"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field_name} must be a string, got {type(value).__name__}")
        self.name = str(self.name or "").strip()
        self.subject = str(self.subject or "").strip()
        if not self.name:
            raise ValueError("Teacher name must not be empty")
        if not self.subject:
            raise ValueError(f"Subject of {self.name!r} must not be empty")
        if self.title is None:
            self.title = self.default_title
        if self.department is not None:
            self.department = self.department.strip() or None

    default_title = ""
    kind = "teacher"

    @property
    def key(self) -> str:
        return normalize_key(self.name)

    @property
    def display_name(self) -> str:
        title = (self.title or "").strip()
        return f"{title} {self.name}" if title else self.name

    def describe(self) -> str:
        return f"{self.display_name} | {self.subject} | {self.department or '-'}"

    @abstractmethod
    def teach(self) -> str:
        """Return one line describing what this teacher is doing."""


@dataclass(eq=False)
class Professor(Teacher):
    default_title = "Dr."
    kind = "professor"

    def teach(self) -> str:
        return f"{self.display_name} is teaching {self.subject}"


@dataclass(eq=False)
class Lecturer(Teacher):
    kind = "lecturer"

    def teach(self) -> str:
        return f"{self.display_name} is giving a lecture on {self.subject}"


@dataclass(eq=False)
class TeachingAssistant(Teacher):
    kind = "assistant"

    def teach(self) -> str:
        return f"{self.display_name} is assisting with {self.subject}"


TEACHER_KINDS: dict[str, type[Teacher]] = {
    Professor.kind: Professor,
    Lecturer.kind: Lecturer,
    TeachingAssistant.kind: TeachingAssistant,
}


def make_teacher(
    kind: str,
    name: str,
    subject: str,
    department: Optional[str] = None,
    title: Optional[str] = None,
) -> Teacher:
    """
    Build a teacher of the given kind ('professor', 'lecturer', 'assistant').

    Raises ValueError for unknown kinds or empty name/subject.
    """
    cls = TEACHER_KINDS.get(str(kind or "").strip().lower())
    if cls is None:
        raise ValueError(f"Unknown teacher kind: {kind!r} (expected one of {', '.join(TEACHER_KINDS)})")
    return cls(name=name, subject=subject, department=department, title=title)
