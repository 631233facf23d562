"""Dialog service used by the presentation layer for notices and confirmations."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Protocol

from .models import ValidationResult

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
CONFIRM_ANSWERS = {"y", "yes"}


class NoticeKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


class Dialogs(Protocol):
    """Fire-and-forget notices plus a yes/no confirmation."""

    def notify(self, kind: NoticeKind, title: str, body: str) -> None: ...

    def confirm(self, title: str, body: str) -> bool: ...


class ConsoleDialogs:
    """Dialogs rendered through plain input/print callables."""

    MARKERS = {
        NoticeKind.INFO: "i",
        NoticeKind.SUCCESS: "+",
        NoticeKind.ERROR: "x",
        NoticeKind.WARNING: "!",
    }

    def __init__(self, input_fn: InputFn = input, print_fn: PrintFn = print) -> None:
        self.input_fn = input_fn
        self.print_fn = print_fn

    def notify(self, kind: NoticeKind, title: str, body: str) -> None:
        self.print_fn(f"[{self.MARKERS[kind]}] {title}")
        if body:
            self.print_fn(f"    {body}")

    def confirm(self, title: str, body: str) -> bool:
        self.print_fn(f"[?] {title}")
        if body:
            self.print_fn(f"    {body}")
        choice = self.input_fn("Continue? (y/N): ").strip().lower()
        return choice in CONFIRM_ANSWERS


def announce_result(dialogs: Dialogs, result: ValidationResult) -> None:
    """Show the outcome of one validated answer."""
    if result.is_correct:
        dialogs.notify(NoticeKind.SUCCESS, result.message, f"{result.question} {result.correct_answer}")
        return
    dialogs.notify(
        NoticeKind.ERROR,
        result.message,
        f"{result.question} {result.correct_answer} (you answered {result.submitted})",
    )
