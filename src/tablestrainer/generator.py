"""Shuffled question set generation."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .models import MAX_TABLE, MIN_TABLE, MULTIPLIERS, Question


def generate_questions(tables: Iterable[int], rng: random.Random | None = None) -> tuple[Question, ...]:
    """Build every (table, multiplier) pair for the selected tables in random order.

    Each table's ten multipliers are shuffled before pairing, then the whole
    list is shuffled once more. Both shuffles are uniform Fisher-Yates
    permutations from ``random.Random.shuffle``.
    """
    shuffler = rng if rng is not None else random.Random()
    questions: list[Question] = []
    for table in tables:
        if not (MIN_TABLE <= table <= MAX_TABLE):
            raise ValueError(f"Table {table} is outside {MIN_TABLE}..{MAX_TABLE}.")
        multipliers = list(MULTIPLIERS)
        shuffler.shuffle(multipliers)
        questions.extend(Question(num1=table, num2=multiplier) for multiplier in multipliers)
    shuffler.shuffle(questions)
    return tuple(questions)
