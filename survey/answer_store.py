# survey/answer_store.py
from __future__ import annotations
import math
from typing import Any, Dict, Iterator, Optional

from .models import AnswerValue, OptionValue


def is_empty_answer(value: Any) -> bool:
    """True for the values that count as "not answered": None, "" and empty selections."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (set, frozenset, list, tuple)):
        return len(value) == 0
    return False


class AnswerStore:
    """
    Answers collected during one evaluation session, keyed by question id.
    A missing key means the question has not been answered.
    """

    def __init__(self, answers: Optional[Dict[str, Any]] = None):
        self._answers: Dict[str, AnswerValue] = {}
        for question_id, value in (answers or {}).items():
            self.set(question_id, value)

    def set(self, question_id: str, value: Any) -> None:
        # Selections are stored as frozensets: no duplicates, order irrelevant
        if isinstance(value, (set, frozenset, list, tuple)):
            value = frozenset(value)
        self._answers[question_id] = value

    def get(self, question_id: str, default: Any = None) -> Any:
        return self._answers.get(question_id, default)

    def toggle(self, question_id: str, option_value: OptionValue) -> frozenset:
        """Add `option_value` to the selection if absent, remove it if present."""
        current = self._answers.get(question_id)
        selection = set(current) if isinstance(current, frozenset) else set()
        if option_value in selection:
            selection.discard(option_value)
        else:
            selection.add(option_value)
        result = frozenset(selection)
        self._answers[question_id] = result
        return result

    def is_answered(self, question_id: str) -> bool:
        return not is_empty_answer(self._answers.get(question_id))

    def remove(self, question_id: str) -> None:
        self._answers.pop(question_id, None)

    def clear(self) -> None:
        self._answers.clear()

    def as_dict(self) -> Dict[str, AnswerValue]:
        """Shallow copy of the stored answers."""
        return dict(self._answers)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._answers

    def __getitem__(self, question_id: str) -> AnswerValue:
        return self._answers[question_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __repr__(self) -> str:
        return f"AnswerStore({self._answers!r})"


def to_number(value: Any) -> Optional[float]:
    """Convert a numeric answer to a finite float, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None
