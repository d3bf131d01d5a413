"""
The owning side of the relationship.

Registry holds the only strong references to teachers and universities.
Universities merely point at teachers (see unilink.university), so:

    registry.release("Smith")   -> Smith vanishes from every university
    registry.close("Uni")       -> Uni is gone, every teacher stays hired
"""

from __future__ import annotations

import logging

from unilink.model import Teacher, normalize_key
from unilink.university import University

logger = logging.getLogger(__name__)


class Registry:
    def __init__(self) -> None:
        self._teachers: dict[str, Teacher] = {}
        self._universities: dict[str, University] = {}

    def __repr__(self) -> str:
        return f"Registry(teachers={len(self._teachers)}, universities={len(self._universities)})"

    # --- teachers -------------------------------------------------------

    def hire(self, teacher: Teacher) -> Teacher:
        if teacher.key in self._teachers:
            raise ValueError(f"Teacher already hired: {teacher.name}")
        logger.debug("hiring %s", teacher.display_name)
        self._teachers[teacher.key] = teacher
        return teacher

    def teacher(self, name: str) -> Teacher:
        key = normalize_key(name)
        if key not in self._teachers:
            raise KeyError(f"Unknown teacher: {name}")
        return self._teachers[key]

    def teachers(self) -> list[Teacher]:
        return [self._teachers[k] for k in sorted(self._teachers)]

    def has_teacher(self, name: str) -> bool:
        return normalize_key(name) in self._teachers

    def release(self, name: str) -> Teacher:
        """
        Stop owning a teacher and unlink it everywhere.

        The object is returned, so the caller may keep it alive (and teaching)
        on its own.
        """
        teacher = self.teacher(name)
        for uni in self._universities.values():
            uni.remove(teacher)
        del self._teachers[teacher.key]
        logger.debug("released %s", teacher.display_name)
        return teacher

    def affiliations(self, name: str) -> list[str]:
        teacher = self.teacher(name)
        return [u.name for u in self.universities() if teacher in u]

    # --- universities ---------------------------------------------------

    def found(self, name: str) -> University:
        uni = University(name)
        if uni.key in self._universities:
            raise ValueError(f"University already exists: {uni.name}")
        self._universities[uni.key] = uni
        logger.debug("founded %s", uni.name)
        return uni

    def university(self, name: str) -> University:
        key = normalize_key(name)
        if key not in self._universities:
            raise KeyError(f"Unknown university: {name}")
        return self._universities[key]

    def universities(self) -> list[University]:
        return [self._universities[k] for k in sorted(self._universities)]

    def close(self, name: str) -> University:
        uni = self.university(name)
        uni.dissolve()
        del self._universities[uni.key]
        logger.debug("closed %s", uni.name)
        return uni

    # --- links ----------------------------------------------------------

    def link(self, university: str, teacher: str) -> bool:
        return self.university(university).add(self.teacher(teacher))

    def unlink(self, university: str, teacher: str) -> bool:
        return self.university(university).remove(self.teacher(teacher))
