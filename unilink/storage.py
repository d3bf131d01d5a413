"""
Persistent storage for the registry.

This module manages the file:

    data/state.json    (or $UNILINK_STATE, or the CLI --state option)

Schema:

    {
      "teachers": [{"kind": ..., "name": ..., "subject": ..., "department": ..., "title": ...}],
      "universities": [{"name": ..., "members": ["SMITH", ...]}]
    }

University members are stored by teacher key only. The file never stores a
copy of a teacher inside a university, so links stay non-owning on disk too.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from unilink.model import make_teacher
from unilink.registry import Registry

logger = logging.getLogger(__name__)

STATE_ENV_VAR = "UNILINK_STATE"


def _default_state_path() -> Path:
    """
    Return the state file path: $UNILINK_STATE if set, otherwise
    data/state.json inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    env = os.environ.get(STATE_ENV_VAR, "").strip()
    if env:
        return Path(env)
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "state.json"


def _resolve(path: str | Path | None) -> Path:
    return Path(path) if path is not None else _default_state_path()


def _load_teachers(registry: Registry, items: Any) -> None:
    if not isinstance(items, list):
        return
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            teacher = make_teacher(
                item.get("kind", "professor"),
                item.get("name", ""),
                item.get("subject", ""),
                department=item.get("department"),
                title=item.get("title"),
            )
            registry.hire(teacher)
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Skipping teacher entry %r: %s", item, exc)


def _load_universities(registry: Registry, items: Any) -> None:
    if not isinstance(items, list):
        return
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            uni = registry.found(item.get("name", ""))
        except (ValueError, TypeError) as exc:
            logger.warning("Skipping university entry %r: %s", item, exc)
            continue
        members = item.get("members", [])
        if not isinstance(members, list):
            continue
        for key in members:
            if not isinstance(key, str) or not registry.has_teacher(key):
                logger.warning("%s: skipping link to unknown teacher %r", uni.name, key)
                continue
            uni.add(registry.teacher(key))


def load_registry(path: str | Path | None = None) -> Registry:
    """
    Load the registry from the state file.

    Returns an empty registry if the file does not exist or is invalid.
    """
    state_path = _resolve(path)
    registry = Registry()

    # First run: nothing hired, nothing founded
    if not state_path.exists():
        return registry

    try:
        data = json.loads(state_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", state_path, exc)
        return registry
    if not isinstance(data, dict):
        return registry

    _load_teachers(registry, data.get("teachers", []))
    _load_universities(registry, data.get("universities", []))
    return registry


def registry_to_dict(registry: Registry) -> dict[str, Any]:
    teachers = [
        {
            "kind": t.kind,
            "name": t.name,
            "subject": t.subject,
            "department": t.department,
            "title": t.title,
        }
        for t in registry.teachers()
    ]
    universities = [
        {"name": u.name, "members": [t.key for t in u.members()]}
        for u in registry.universities()
    ]
    return {"teachers": teachers, "universities": universities}


def save_registry(registry: Registry, path: str | Path | None = None) -> None:
    """
    Save the registry to the state file.

    Creates parent directories if needed.
    """
    state_path = _resolve(path)
    state_path.parent.mkdir(parents=True, exist_ok=True)

    payload = registry_to_dict(registry)
    state_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
