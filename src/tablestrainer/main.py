"""CLI entrypoint for multiplication table practice."""

from __future__ import annotations

import argparse
import random
import re

from .dialogs import ConsoleDialogs, Dialogs, InputFn, NoticeKind, PrintFn, announce_result
from .log import setup_logging
from .messages import DEFAULT_LOCALE, MessagePicker, available_locales, load_messages
from .models import MAX_TABLE, MIN_TABLE, InvalidTransition, OutcomeBand, Phase, SessionView
from .scoring import feedback_mood
from .session import PracticeSession

BACK_COMMANDS = {":back", ":b", "back"}
MENU_QUIT_COMMANDS = {"q"}
NEXT_COMMANDS = {"n"}
PLAY_COMMANDS = {"p"}
RESTART_COMMANDS = {"r"}
NUMBER_CHOICE = re.compile(r"[0-9]+")
BAND_TEXT = {
    OutcomeBand.EXCELLENT: "Excellent work!",
    OutcomeBand.KEEP_PRACTICING: "Keep practicing.",
}


class QuitApp(Exception):
    """Signal immediate app exit from nested menu flows."""


def _session(seed: int | None = None, locale: str = DEFAULT_LOCALE) -> PracticeSession:
    """Create a practice session with its own random source."""
    rng = random.Random(seed)
    return PracticeSession(messages=MessagePicker(load_messages(locale), rng), rng=rng)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="tablestrainer", description="Multiplication table practice")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument("--seed", type=int, default=None, help="seed for repeatable question order")
    parser.add_argument("--locale", default=DEFAULT_LOCALE, choices=available_locales(), help="feedback language")
    parser.add_argument(
        "--tables",
        type=int,
        nargs="+",
        choices=range(MIN_TABLE, MAX_TABLE + 1),
        metavar="N",
        help="tables to preselect",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log engine events to stderr")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    session = _session(args.seed, args.locale)
    for table in sorted(set(args.tables or [])):
        session.toggle_table(table)
    return play_shell(session=session)


def play_shell(
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    *,
    session: PracticeSession | None = None,
    dialogs: Dialogs | None = None,
) -> int:
    """Run the selection/practice shell until the user quits."""
    active = session if session is not None else _session()
    notices = dialogs if dialogs is not None else ConsoleDialogs(input_fn, print_fn)
    try:
        while True:
            if active.phase is Phase.SELECTING:
                _selection_flow(active, input_fn, print_fn)
            else:
                _practice_flow(active, notices, input_fn, print_fn)
    except QuitApp:
        return 0


def _render_selection(view: SessionView, print_fn: PrintFn) -> None:
    """Print the table picker."""
    print_fn("\n=== Multiplication Tables ===")
    selected = ", ".join(str(table) for table in view.selected_tables) if view.selected_tables else "none"
    print_fn(f"Selected: {selected}")
    cells = [
        f"{table:>2} [{'x' if table in view.selected_tables else ' '}]" for table in range(MIN_TABLE, MAX_TABLE + 1)
    ]
    print_fn("  ".join(cells[:5]))
    print_fn("  ".join(cells[5:]))
    print_fn(f"{MIN_TABLE}-{MAX_TABLE}) Toggle table")
    if view.can_advance:
        print_fn(f"n) Next ({len(view.questions)} questions)")
    print_fn("q) Quit")


def _selection_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Handle one command on the table selection screen."""
    _render_selection(session.view(), print_fn)
    choice = input_fn("Choose: ").strip().lower()
    if choice in MENU_QUIT_COMMANDS:
        raise QuitApp()
    if choice in NEXT_COMMANDS:
        try:
            session.confirm_advance()
        except InvalidTransition as exc:
            print_fn(str(exc))
        return
    if NUMBER_CHOICE.fullmatch(choice) and MIN_TABLE <= int(choice) <= MAX_TABLE:
        session.toggle_table(int(choice))
        return
    print_fn("Invalid choice.")


def _render_practice(view: SessionView, print_fn: PrintFn) -> None:
    """Print question rows, running score and the summary when complete."""
    print_fn("\n=== Practice ===")
    total = len(view.questions)
    print_fn(
        f"Score: {view.score.correct} correct, {view.score.incorrect} incorrect "
        f"({len(view.validated)}/{total} answered)"
    )
    number_width = max(len("#"), len(str(total)))
    operation_width = max(len("Operation"), max((len(str(question)) for question in view.questions), default=0))
    answer_width = 8
    header = f"{'#':>{number_width}} {'Operation':<{operation_width}} {'Answer':<{answer_width}} Result"
    print_fn(header)
    print_fn("-" * len(header))
    for index, question in enumerate(view.questions):
        answer = view.answers.get(index, "")
        feedback = view.feedback.get(index)
        if feedback is None:
            result = ""
        else:
            result = f"({feedback_mood(feedback.correct).value}) {feedback.message}"
        print_fn(
            f"{index + 1:>{number_width}} "
            f"{str(question):<{operation_width}} "
            f"{answer:<{answer_width}} "
            f"{result}".rstrip()
        )

    summary = view.summary
    if summary is not None:
        print_fn("\n=== Results ===")
        print_fn(f"Correct: {summary.correct}")
        print_fn(f"Incorrect: {summary.incorrect}")
        print_fn(f"Accuracy: {summary.accuracy_label}")
        print_fn(BAND_TEXT[summary.band])
        print_fn(f"Mood: {summary.mood.value}")

    print_fn(f"\n1-{total}) Answer question")
    if view.remaining:
        print_fn("p) Play unanswered questions")
    print_fn("r) Restart")
    print_fn("q) Quit")


def _practice_flow(session: PracticeSession, dialogs: Dialogs, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Handle one command on the practice screen."""
    view = session.view()
    _render_practice(view, print_fn)
    choice = input_fn("Choose: ").strip().lower()
    if choice in MENU_QUIT_COMMANDS:
        raise QuitApp()
    if choice in RESTART_COMMANDS:
        _restart_flow(session, dialogs, print_fn)
        return
    if choice in PLAY_COMMANDS:
        _play_unanswered_flow(session, dialogs, input_fn, print_fn)
        return
    if not NUMBER_CHOICE.fullmatch(choice):
        print_fn("Invalid choice.")
        return

    index = int(choice) - 1
    if not (0 <= index < len(view.questions)):
        print_fn("Invalid choice.")
        return
    if index in view.validated:
        print_fn("Question already validated.")
        return
    _answer_question(session, dialogs, index, input_fn, print_fn)


def _answer_question(
    session: PracticeSession,
    dialogs: Dialogs,
    index: int,
    input_fn: InputFn,
    print_fn: PrintFn,
) -> bool:
    """Ask one question; return False when the user backs out."""
    question = session.questions[index]
    raw = input_fn(f"{index + 1}) {question} ").strip()
    if raw.lower() in BACK_COMMANDS:
        return False
    session.set_answer(index, raw)
    result = session.validate(index)
    if result is None:
        print_fn("Answer not checked: enter a whole number.")
        return True
    announce_result(dialogs, result)
    return True


def _play_unanswered_flow(session: PracticeSession, dialogs: Dialogs, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Ask every unanswered question in order."""
    remaining = session.view().remaining
    if not remaining:
        print_fn("All questions are answered.")
        return
    print_fn("Type :b to stop.")
    for index in remaining:
        if not _answer_question(session, dialogs, index, input_fn, print_fn):
            print_fn("Stopped. Answers so far are kept.")
            return


def _restart_flow(session: PracticeSession, dialogs: Dialogs, print_fn: PrintFn) -> None:
    """Return to table selection once the user confirms."""
    confirmed = dialogs.confirm(
        "Restart practice?",
        "Changing the selected tables afterwards deals a new set and clears your answers.",
    )
    if not confirmed:
        print_fn("Restart cancelled.")
        return
    session.restart()
    dialogs.notify(NoticeKind.INFO, "Back to table selection.", "")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
