"""Core domain models for multiplication table practice."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

MIN_TABLE = 1
MAX_TABLE = 10
MULTIPLIERS = range(1, 11)


class InvalidCategory(KeyError):
    """Feedback category has no message pool."""


class InvalidTransition(RuntimeError):
    """Session cannot move to the requested phase."""


class Phase(str, Enum):
    SELECTING = "selecting"
    PRACTICING = "practicing"


class FeedbackCategory(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


class OutcomeBand(str, Enum):
    EXCELLENT = "excellent"
    KEEP_PRACTICING = "keep practicing"


class Mood(str, Enum):
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"


@dataclass(frozen=True)
class Question:
    """One multiplication exercise."""

    num1: int
    num2: int

    @property
    def answer(self) -> int:
        return self.num1 * self.num2

    def __str__(self) -> str:
        return f"{self.num1} × {self.num2} ="


@dataclass(frozen=True)
class Feedback:
    """Message shown for a validated question."""

    message: str
    correct: bool


@dataclass(frozen=True)
class Score:
    """Running correct/incorrect counts."""

    correct: int = 0
    incorrect: int = 0

    @property
    def answered(self) -> int:
        return self.correct + self.incorrect

    def record(self, correct: bool) -> Score:
        """Return a new score with one more result counted."""
        if correct:
            return Score(correct=self.correct + 1, incorrect=self.incorrect)
        return Score(correct=self.correct, incorrect=self.incorrect + 1)


@dataclass(frozen=True)
class Summary:
    """Aggregate results once every question is validated."""

    correct: int
    incorrect: int
    total: int
    accuracy_percent: float
    band: OutcomeBand
    mood: Mood

    @property
    def accuracy_label(self) -> str:
        return f"{self.accuracy_percent:.2f}%"


@dataclass(frozen=True)
class ValidationResult:
    """What happened when one answer was checked, for the presentation layer to announce."""

    index: int
    question: Question
    submitted: int
    correct_answer: int
    is_correct: bool
    message: str


@dataclass(frozen=True)
class SessionView:
    """Read-only projection of a practice session for rendering."""

    phase: Phase
    selected_tables: tuple[int, ...]
    questions: tuple[Question, ...]
    answers: Mapping[int, str]
    feedback: Mapping[int, Feedback]
    validated: frozenset[int]
    score: Score
    summary: Summary | None

    @property
    def can_advance(self) -> bool:
        return bool(self.selected_tables)

    @property
    def remaining(self) -> tuple[int, ...]:
        """Indices of questions not yet validated, in display order."""
        return tuple(index for index in range(len(self.questions)) if index not in self.validated)
