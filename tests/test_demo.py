"""
The tutorial output must start with the literal lines shown in the write-up.
"""

import unittest

from unilink.demo import run_demo


class TestDemo(unittest.TestCase):
    def test_demo_output(self) -> None:
        printed: list[str] = []
        lines = run_demo(echo=printed.append)

        self.assertEqual(lines, printed)
        self.assertEqual(lines[0], "Dr. Smith is teaching Computer Science")
        self.assertEqual(lines[1], "Dr. Jones is teaching Mathematics")
        self.assertIn("State University has 2 professors.", lines)

    def test_professors_outlive_university(self) -> None:
        lines = run_demo(echo=lambda line: None)
        i = lines.index("State University was closed. Its professors keep teaching:")
        self.assertEqual(lines[i + 1], "Dr. Smith is teaching Computer Science")
        self.assertEqual(lines[i + 2], "Dr. Jones is teaching Mathematics")

    def test_released_professor_vanishes(self) -> None:
        lines = run_demo(echo=lambda line: None)
        i = lines.index("Dr. Jones left. South Institute now lists:")
        self.assertEqual(
            lines[i + 1 :],
            ["University: South Institute", "  - Dr. Smith | Computer Science | -"],
        )


if __name__ == "__main__":
    unittest.main()
