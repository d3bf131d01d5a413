"""
Unit tests for registry persistence.

Storage contract:
- Missing/invalid file -> empty registry
- University members are stored by teacher key, not as copies
- Links to teachers that are not hired are skipped on load
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import unilink.storage as storage
from unilink.model import Lecturer, Professor
from unilink.registry import Registry
from unilink.storage import load_registry, save_registry


class TestStorage(unittest.TestCase):
    def test_load_missing_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            reg = load_registry(Path(d) / "missing.json")
            self.assertEqual(reg.teachers(), [])
            self.assertEqual(reg.universities(), [])

    def test_load_corrupted_file_returns_empty(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "state.json"
            p.write_text("{not json", encoding="utf-8")
            with self.assertLogs("unilink.storage", level="WARNING"):
                reg = load_registry(p)
            self.assertEqual(reg.teachers(), [])

    def test_save_and_load_keeps_shared_teacher_single(self) -> None:
        reg = Registry()
        reg.hire(Professor("Smith", "Computer Science", department="Informatics"))
        reg.hire(Lecturer("Lee", "Physics", title="Ms."))
        reg.found("North College")
        reg.found("South Institute")
        reg.link("North College", "Smith")
        reg.link("South Institute", "Smith")
        reg.link("South Institute", "Lee")

        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "state.json"
            save_registry(reg, p)

            data = json.loads(p.read_text(encoding="utf-8"))
            self.assertEqual([t["name"] for t in data["teachers"]], ["Lee", "Smith"])
            self.assertEqual(data["universities"][1], {"name": "South Institute", "members": ["SMITH", "LEE"]})

            loaded = load_registry(p)

        smith = loaded.teacher("Smith")
        self.assertIs(loaded.university("North College").members()[0], smith)
        self.assertIs(loaded.university("South Institute").members()[0], smith)
        self.assertEqual(loaded.teacher("Lee").teach(), "Ms. Lee is giving a lecture on Physics")
        self.assertEqual(smith.department, "Informatics")

    def test_wrongly_typed_fields_are_skipped(self) -> None:
        payload = {
            "teachers": [
                {"kind": "professor", "name": "Smith", "subject": "Computer Science", "title": 5},
                {"kind": "lecturer", "name": "Lee", "subject": "Physics", "department": ["Science"]},
                {"kind": "professor", "name": "Jones", "subject": "Mathematics"},
            ],
            "universities": [{"name": "U", "members": ["SMITH", "LEE", "JONES"]}],
        }
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "state.json"
            p.write_text(json.dumps(payload), encoding="utf-8")
            with self.assertLogs("unilink.storage", level="WARNING"):
                reg = load_registry(p)
        self.assertEqual([t.name for t in reg.teachers()], ["Jones"])
        self.assertFalse(reg.has_teacher("Smith"))
        self.assertEqual(reg.university("U").teach_all(), ["Dr. Jones is teaching Mathematics"])

    def test_unknown_member_is_skipped(self) -> None:
        payload = {
            "teachers": [{"kind": "professor", "name": "Smith", "subject": "Computer Science"}, {"name": ""}],
            "universities": [{"name": "U", "members": ["SMITH", "GHOST"]}],
        }
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "state.json"
            p.write_text(json.dumps(payload), encoding="utf-8")
            with self.assertLogs("unilink.storage", level="WARNING") as logs:
                reg = load_registry(p)
        self.assertEqual([t.name for t in reg.university("U").members()], ["Smith"])
        self.assertTrue(any("GHOST" in line for line in logs.output))

    def test_env_var_overrides_default_path(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "env_state.json"
            with mock.patch.dict(os.environ, {storage.STATE_ENV_VAR: str(p)}):
                self.assertEqual(storage._default_state_path(), p)
                reg = Registry()
                reg.hire(Professor("Smith", "Computer Science"))
                save_registry(reg)
            self.assertTrue(p.exists())


if __name__ == "__main__":
    unittest.main()
