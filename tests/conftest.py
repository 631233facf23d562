from __future__ import annotations

import random
import shutil
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tablestrainer.messages import MessagePicker  # noqa: E402
from tablestrainer.models import FeedbackCategory  # noqa: E402
from tablestrainer.session import PracticeSession  # noqa: E402

POOLS = {
    FeedbackCategory.CORRECT: ("yes",),
    FeedbackCategory.INCORRECT: ("no",),
}


def make_session(seed: int = 0) -> PracticeSession:
    """Session with one-message pools and a seeded random source."""
    return PracticeSession(messages=MessagePicker(POOLS, random.Random(seed)), rng=random.Random(seed))


def _tmp_path_fixture() -> Iterator[Path]:
    """Provide per-test temporary directory path inside the workspace.

    Overrides pytest's builtin ``tmp_path`` fixture so temporary files stay
    under the project working directory at ``.tmp_pytest/``.
    """
    base = ROOT / ".tmp_pytest"
    base.mkdir(parents=True, exist_ok=True)
    path = base / str(uuid4())
    path.mkdir(parents=True, exist_ok=False)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        try:
            next(base.iterdir())
        except StopIteration:
            base.rmdir()
        except FileNotFoundError:
            pass


tmp_path = pytest.fixture(name="tmp_path")(_tmp_path_fixture)


@pytest.fixture
def session() -> PracticeSession:
    return make_session()


@pytest.fixture
def session_factory() -> Callable[..., PracticeSession]:
    return make_session
