from tablestrainer.models import Mood, OutcomeBand, Score
from tablestrainer.scoring import feedback_mood, mood_for, outcome_band, summarize


def test_summarize_ninety_percent() -> None:
    summary = summarize(Score(correct=18, incorrect=2), 20)
    assert summary is not None
    assert summary.correct == 18
    assert summary.incorrect == 2
    assert summary.total == 20
    assert summary.accuracy_percent == 90.0
    assert summary.accuracy_label == "90.00%"
    assert summary.band is OutcomeBand.EXCELLENT
    assert summary.mood is Mood.HAPPY


def test_summarize_rounds_to_two_decimals() -> None:
    third = summarize(Score(correct=1, incorrect=2), 3)
    assert third is not None
    assert third.accuracy_label == "33.33%"
    two_thirds = summarize(Score(correct=2, incorrect=1), 3)
    assert two_thirds is not None
    assert two_thirds.accuracy_label == "66.67%"


def test_summarize_incomplete_or_empty() -> None:
    assert summarize(Score(correct=1), 2) is None
    assert summarize(Score(), 0) is None


def test_seventy_five_percent_boundary_is_inclusive_for_band_and_mood() -> None:
    assert outcome_band(15, 20) is OutcomeBand.EXCELLENT
    assert mood_for(15, 20) is Mood.HAPPY
    assert outcome_band(14, 20) is OutcomeBand.KEEP_PRACTICING
    assert mood_for(14, 20) is Mood.NEUTRAL


def test_mood_bands() -> None:
    assert mood_for(10, 20) is Mood.NEUTRAL
    assert mood_for(9, 20) is Mood.SAD
    assert mood_for(0, 20) is Mood.SAD
    assert mood_for(0, 0) is Mood.SAD
    assert outcome_band(0, 0) is OutcomeBand.KEEP_PRACTICING


def test_all_wrong_summary() -> None:
    summary = summarize(Score(incorrect=10), 10)
    assert summary is not None
    assert summary.accuracy_label == "0.00%"
    assert summary.band is OutcomeBand.KEEP_PRACTICING
    assert summary.mood is Mood.SAD


def test_feedback_mood() -> None:
    assert feedback_mood(True) is Mood.HAPPY
    assert feedback_mood(False) is Mood.SAD
