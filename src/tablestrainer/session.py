"""Practice session state machine."""

from __future__ import annotations

import logging
import random
import re
from types import MappingProxyType

from .generator import generate_questions
from .messages import MessagePicker
from .models import (
    MAX_TABLE,
    MIN_TABLE,
    Feedback,
    FeedbackCategory,
    InvalidTransition,
    Phase,
    Question,
    Score,
    SessionView,
    Summary,
    ValidationResult,
)
from .scoring import summarize

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_answer(raw: str | None) -> int | None:
    """Parse the leading integer of a typed answer, or return None."""
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class PracticeSession:
    """Owns selection, questions, answers and score for one practice session.

    Every operation runs to completion and either changes state as a whole or
    leaves it untouched. Callers read state through :meth:`view`.
    """

    def __init__(self, messages: MessagePicker | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.messages = messages if messages is not None else MessagePicker(rng=self.rng)
        self.phase = Phase.SELECTING
        self.selected_tables: set[int] = set()
        self.questions: tuple[Question, ...] = ()
        self.answers: dict[int, str] = {}
        self.feedback: dict[int, Feedback] = {}
        self.validated: set[int] = set()
        self.score = Score()

    def toggle_table(self, table: int) -> None:
        """Flip one table's membership and regenerate while the selection is non-empty."""
        if not (MIN_TABLE <= table <= MAX_TABLE):
            raise ValueError(f"Table {table} is outside {MIN_TABLE}..{MAX_TABLE}.")
        if self.phase is not Phase.SELECTING:
            logger.debug("Table %d toggled while %s", table, self.phase.value)
        if table in self.selected_tables:
            self.selected_tables.discard(table)
        else:
            self.selected_tables.add(table)
        if self.selected_tables:
            self._regenerate()

    def _regenerate(self) -> None:
        questions = generate_questions(sorted(self.selected_tables), self.rng)
        self.questions = questions
        self.answers = {}
        self.feedback = {}
        self.validated = set()
        self.score = Score()
        logger.debug("Generated %d questions for tables %s", len(questions), sorted(self.selected_tables))

    def confirm_advance(self) -> None:
        """Move from table selection to answering questions."""
        if self.phase is Phase.PRACTICING:
            return
        if not self.selected_tables:
            raise InvalidTransition("Select at least one table.")
        self.phase = Phase.PRACTICING
        logger.debug("Practicing %d questions", len(self.questions))

    def restart(self) -> None:
        """Return to table selection, keeping the current selection."""
        if self.phase is Phase.SELECTING:
            return
        self.phase = Phase.SELECTING
        logger.debug("Restarted with tables %s still selected", sorted(self.selected_tables))

    def _editable(self, index: int) -> bool:
        return 0 <= index < len(self.questions) and index not in self.validated

    def set_answer(self, index: int, raw: str) -> None:
        """Store the raw typed answer for an unlocked question."""
        if not self._editable(index):
            logger.debug("Ignored answer for locked or unknown question %d", index)
            return
        self.answers[index] = raw

    def validate(self, index: int) -> ValidationResult | None:
        """Check and lock one answer; return None when nothing changed."""
        if not self._editable(index):
            logger.debug("Ignored validation for locked or unknown question %d", index)
            return None
        submitted = parse_answer(self.answers.get(index))
        if submitted is None:
            logger.debug("Ignored validation for question %d: answer is not a number", index)
            return None

        question = self.questions[index]
        is_correct = submitted == question.answer
        category = FeedbackCategory.CORRECT if is_correct else FeedbackCategory.INCORRECT
        message = self.messages.pick(category)

        self.feedback[index] = Feedback(message=message, correct=is_correct)
        self.validated.add(index)
        self.score = self.score.record(is_correct)
        logger.debug("Question %d (%s %d) validated: %s", index, question, submitted, category.value)
        return ValidationResult(
            index=index,
            question=question,
            submitted=submitted,
            correct_answer=question.answer,
            is_correct=is_correct,
            message=message,
        )

    def summary(self) -> Summary | None:
        """Return aggregate results once every question is validated."""
        return summarize(self.score, len(self.questions))

    def view(self) -> SessionView:
        """Return a read-only snapshot of the session."""
        return SessionView(
            phase=self.phase,
            selected_tables=tuple(sorted(self.selected_tables)),
            questions=self.questions,
            answers=MappingProxyType(dict(self.answers)),
            feedback=MappingProxyType(dict(self.feedback)),
            validated=frozenset(self.validated),
            score=self.score,
            summary=self.summary(),
        )
