"""A student record ordered by score."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Student:
    """A named student with a score; ordering compares scores only."""

    name: str
    score: int

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.score < other.score

    def __gt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.score > other.score

    def __str__(self) -> str:
        return f"Student:{self.name} Score{self.score}"