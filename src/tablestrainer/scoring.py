"""Aggregate scoring and outcome bands."""

from __future__ import annotations

from .models import Mood, OutcomeBand, Score, Summary

EXCELLENT_THRESHOLD = 0.75
NEUTRAL_THRESHOLD = 0.50


def outcome_band(correct: int, total: int) -> OutcomeBand:
    """Return the qualitative band for a finished session."""
    if total > 0 and correct / total >= EXCELLENT_THRESHOLD:
        return OutcomeBand.EXCELLENT
    return OutcomeBand.KEEP_PRACTICING


def mood_for(correct: int, total: int) -> Mood:
    """Return the finer three-way mood for a finished session."""
    ratio = correct / total if total > 0 else 0.0
    if ratio >= EXCELLENT_THRESHOLD:
        return Mood.HAPPY
    if ratio >= NEUTRAL_THRESHOLD:
        return Mood.NEUTRAL
    return Mood.SAD


def feedback_mood(correct: bool) -> Mood:
    """Mood shown next to a single validated question."""
    return Mood.HAPPY if correct else Mood.SAD


def summarize(score: Score, total: int) -> Summary | None:
    """Return the summary once every one of ``total`` questions has a result."""
    if total <= 0 or score.answered != total:
        return None
    return Summary(
        correct=score.correct,
        incorrect=score.incorrect,
        total=total,
        accuracy_percent=round(100.0 * score.correct / total, 2),
        band=outcome_band(score.correct, total),
        mood=mood_for(score.correct, total),
    )
