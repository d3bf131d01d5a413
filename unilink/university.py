"""
The University aggregate.

A University keeps a list of non-owning references (weakref.ref) to teachers.
It never decides when a teacher is destroyed:
- dissolving or deleting a university leaves every teacher intact
- a teacher may be linked to several universities, or to none
- once the owner drops a teacher, it silently disappears from all universities
"""

from __future__ import annotations

import logging
import weakref
from typing import Callable, Iterator

from unilink.model import Teacher, normalize_key

logger = logging.getLogger(__name__)


class University:
    def __init__(self, name: str) -> None:
        name = str(name or "").strip()
        if not name:
            raise ValueError("University name must not be empty")
        self.name = name
        self._links: list[weakref.ref[Teacher]] = []

    def __repr__(self) -> str:
        return f"University(name={self.name!r}, members={len(self)})"

    @property
    def key(self) -> str:
        return normalize_key(self.name)

    def _forget_callback(self) -> Callable[[weakref.ref[Teacher]], None]:
        """
        Build the weakref callback that drops a link once its teacher is destroyed.

        The callback only holds a weak reference to the university, so links
        never keep their university alive.
        """
        self_ref = weakref.ref(self)

        def forget(ref: weakref.ref[Teacher]) -> None:
            uni = self_ref()
            if uni is None:
                return
            try:
                uni._links.remove(ref)
            except ValueError:
                return
            logger.debug("%s: dropped link to a destroyed teacher", uni.name)

        return forget

    def _index_of(self, teacher: Teacher) -> int:
        for i, ref in enumerate(self._links):
            if ref() is teacher:
                return i
        return -1

    def add(self, teacher: Teacher) -> bool:
        """
        Link a teacher. Returns False if this exact object is already linked.
        """
        if not isinstance(teacher, Teacher):
            raise TypeError(f"Expected a Teacher, got {type(teacher).__name__}")
        if self._index_of(teacher) >= 0:
            return False
        self._links.append(weakref.ref(teacher, self._forget_callback()))
        logger.debug("%s: linked %s", self.name, teacher.display_name)
        return True

    def remove(self, teacher: Teacher) -> bool:
        """
        Unlink a teacher. The teacher itself is not touched.
        """
        i = self._index_of(teacher)
        if i < 0:
            return False
        del self._links[i]
        logger.debug("%s: unlinked %s", self.name, teacher.display_name)
        return True

    def members(self) -> list[Teacher]:
        out: list[Teacher] = []
        for ref in self._links:
            teacher = ref()
            if teacher is not None:
                out.append(teacher)
        return out

    def __iter__(self) -> Iterator[Teacher]:
        return iter(self.members())

    def __len__(self) -> int:
        return len(self.members())

    def __contains__(self, teacher: object) -> bool:
        return isinstance(teacher, Teacher) and self._index_of(teacher) >= 0

    def is_empty(self) -> bool:
        return len(self) == 0

    def teach_all(self) -> list[str]:
        return [t.teach() for t in self.members()]

    def show(self) -> list[str]:
        lines = [f"University: {self.name}"]
        members = self.members()
        if not members:
            lines.append("  (no teachers linked)")
        for t in members:
            lines.append(f"  - {t.describe()}")
        return lines

    def dissolve(self) -> int:
        """
        Drop every link and return how many live links were dropped.
        """
        n = len(self)
        self._links.clear()
        logger.debug("%s: dissolved (%d links dropped)", self.name, n)
        return n
