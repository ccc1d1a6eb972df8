"""Student and employee records, and a growable tracker of class marks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["StudentRecord", "Employee", "MarksTracker"]


@dataclass(frozen=True)
class StudentRecord:
    """A student's enrollment number, name and CGPA."""

    enrollment_number: str
    name: str
    cgpa: float

    def describe(self) -> str:
        """Return a one-line summary with the CGPA to two decimals."""
        return (
            f"{self.name} having enrollment number {self.enrollment_number} "
            f"got {self.cgpa:.2f} cgpa in 5th sem."
        )


@dataclass(frozen=True)
class Employee:
    """An employee's name and monthly salary."""

    name: str
    salary: float

    def describe(self) -> str:
        """Return a one-line summary with the salary to three decimals."""
        return f"{self.name} have {self.salary:.3f} salary per month."


class MarksTracker:
    """Marks of a class that can grow as late students arrive."""

    def __init__(self, marks: Iterable[int] = ()) -> None:
        self._marks = list(marks)

    def add(self, mark: int) -> None:
        """Record one more student's mark."""
        self._marks.append(mark)

    def extend(self, marks: Iterable[int]) -> None:
        """Record the marks of several more students."""
        self._marks.extend(marks)

    def average(self) -> float:
        """Return the mean mark; raise ValueError when no marks are recorded."""
        if not self._marks:
            raise ValueError("no marks recorded")
        return sum(self._marks) / len(self._marks)

    def __len__(self) -> int:
        return len(self._marks)