"""Feedback message pools and the random message picker."""

from __future__ import annotations

import json
import random
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

from .models import FeedbackCategory, InvalidCategory

CONTENT_PACKAGE = "tablestrainer.content.messages"
DEFAULT_LOCALE = "es"

MessagePools = dict[FeedbackCategory, tuple[str, ...]]


def _pools_from_dict(raw: dict[str, Any], source: str) -> MessagePools:
    """Build validated message pools from raw JSON content."""
    pools: MessagePools = {}
    for category in FeedbackCategory:
        values = raw.get(category.value)
        if not isinstance(values, list):
            raise ValueError(f"Messages '{source}' have no '{category.value}' list.")
        messages = tuple(str(value).strip() for value in values if str(value).strip())
        if not messages:
            raise ValueError(f"Messages '{source}' have an empty '{category.value}' pool.")
        pools[category] = messages
    return pools


def available_locales() -> list[str]:
    """Return bundled locale codes."""
    return sorted(
        entry.name.removesuffix(".json")
        for entry in resources.files(CONTENT_PACKAGE).iterdir()
        if entry.name.endswith(".json")
    )


@cache
def _bundled_pools(locale: str) -> MessagePools:
    """Read and validate one bundled locale file once per process."""
    entry = resources.files(CONTENT_PACKAGE).joinpath(f"{locale}.json")
    if not entry.is_file():
        raise ValueError(f"Unknown locale: {locale}")
    raw = json.loads(entry.read_text(encoding="utf-8-sig"))
    return _pools_from_dict(raw, locale)


def load_messages(locale: str = DEFAULT_LOCALE) -> MessagePools:
    """Return bundled message pools for one locale."""
    return dict(_bundled_pools(locale))


def load_messages_from_path(path: Path) -> MessagePools:
    """Load message pools from a JSON file for tests/tools."""
    raw = json.loads(path.read_text(encoding="utf-8-sig"))
    if not isinstance(raw, dict):
        raise ValueError(f"Messages file '{path.name}' root must be a JSON object.")
    return _pools_from_dict(raw, path.name)


def _coerce_category(category: FeedbackCategory | str) -> FeedbackCategory:
    if isinstance(category, FeedbackCategory):
        return category
    try:
        return FeedbackCategory(category)
    except ValueError:
        raise InvalidCategory(category) from None


def pick(
    category: FeedbackCategory | str,
    pools: MessagePools | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return one message for the category, chosen uniformly at random."""
    resolved = _coerce_category(category)
    source = pools if pools is not None else _bundled_pools(DEFAULT_LOCALE)
    pool = source.get(resolved)
    if not pool:
        raise InvalidCategory(resolved.value)
    chooser = rng if rng is not None else random
    return chooser.choice(pool)


class MessagePicker:
    """Picks feedback messages from a fixed set of pools."""

    def __init__(self, pools: MessagePools | None = None, rng: random.Random | None = None) -> None:
        self.pools = pools if pools is not None else load_messages()
        self.rng = rng if rng is not None else random.Random()

    def pick(self, category: FeedbackCategory | str) -> str:
        return pick(category, self.pools, self.rng)
