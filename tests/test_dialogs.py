from tablestrainer.dialogs import ConsoleDialogs, NoticeKind, announce_result
from tablestrainer.models import Question, ValidationResult


class RecordingDialogs:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.notices: list[tuple[NoticeKind, str, str]] = []
        self.confirms: list[tuple[str, str]] = []

    def notify(self, kind: NoticeKind, title: str, body: str) -> None:
        self.notices.append((kind, title, body))

    def confirm(self, title: str, body: str) -> bool:
        self.confirms.append((title, body))
        return self.answer


def test_console_notify_prints_marker_and_body() -> None:
    outputs: list[str] = []
    dialogs = ConsoleDialogs(input_fn=lambda _: "", print_fn=outputs.append)
    dialogs.notify(NoticeKind.WARNING, "Careful", "Details here")
    dialogs.notify(NoticeKind.INFO, "Title only", "")
    assert outputs == ["[!] Careful", "    Details here", "[i] Title only"]


def test_console_confirm_accepts_yes() -> None:
    for answer in ["y", "YES", " Yes "]:
        dialogs = ConsoleDialogs(input_fn=lambda _, value=answer: value, print_fn=lambda _: None)
        assert dialogs.confirm("Restart?", "") is True


def test_console_confirm_rejects_anything_else() -> None:
    outputs: list[str] = []
    for answer in ["", "n", "no", "yep"]:
        dialogs = ConsoleDialogs(input_fn=lambda _, value=answer: value, print_fn=outputs.append)
        assert dialogs.confirm("Restart?", "Progress may be lost.") is False
    assert outputs[:2] == ["[?] Restart?", "    Progress may be lost."]


def test_announce_correct_result() -> None:
    dialogs = RecordingDialogs()
    result = ValidationResult(
        index=0, question=Question(3, 4), submitted=12, correct_answer=12, is_correct=True, message="Great job!"
    )
    announce_result(dialogs, result)
    assert dialogs.notices == [(NoticeKind.SUCCESS, "Great job!", "3 × 4 = 12")]


def test_announce_wrong_result() -> None:
    dialogs = RecordingDialogs()
    result = ValidationResult(
        index=2, question=Question(6, 7), submitted=41, correct_answer=42, is_correct=False, message="Don't give up!"
    )
    announce_result(dialogs, result)
    assert dialogs.notices == [(NoticeKind.ERROR, "Don't give up!", "6 × 7 = 42 (you answered 41)")]
