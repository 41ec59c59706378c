"""Student mark records and a pass/fail summary."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

PASS_MARK = 120


@dataclass(frozen=True)
class Student:
    """A student's roll number, name and marks in three subjects."""

    roll: int
    name: str
    marks: tuple[int, int, int]

    def __post_init__(self) -> None:
        if len(self.marks) != 3:
            raise ValueError("a student has marks in exactly three subjects")
        object.__setattr__(self, "marks", tuple(self.marks))

    def total(self) -> int:
        """Sum of the three subject marks."""
        return sum(self.marks)

    def passed(self) -> bool:
        """A student passes with a total of at least ``PASS_MARK``."""
        return self.total() >= PASS_MARK


@dataclass(frozen=True)
class Report:
    """The students in entry order with pass and fail counts."""

    students: tuple[Student, ...]
    passed: int
    failed: int


def summarize(students: Iterable[Student]) -> Report:
    """Count how many of ``students`` passed and how many failed."""
    records = tuple(students)
    passed = sum(1 for student in records if student.passed())
    return Report(students=records, passed=passed, failed=len(records) - passed)