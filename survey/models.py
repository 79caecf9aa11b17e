# survey/models.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

OptionValue = Union[str, int, float]
AnswerValue = Union[str, int, float, FrozenSet[OptionValue]]


class QuestionType(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"
    TEXT = "text"
    NUMBER = "number"


class QuestionCategory(str, Enum):
    PERSONAL = "personal"
    FINANCIAL = "financial"
    EMPLOYMENT = "employment"
    CREDIT_HISTORY = "credit_history"


CHOICE_TYPES = (QuestionType.SINGLE, QuestionType.MULTIPLE)


@dataclass(frozen=True)
class Option:
    id: str
    text: str
    value: OptionValue
    score: Optional[float] = None

    def __post_init__(self):
        if self.score is not None and not math.isfinite(self.score):
            raise ValueError(f"Option '{self.id}' has a non-finite score: {self.score}")


@dataclass(frozen=True)
class Validation:
    min: Optional[float] = None
    max: Optional[float] = None
    message: Optional[str] = None

    def __post_init__(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Validation min ({self.min}) is greater than max ({self.max})")

    def contains(self, value: float) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


@dataclass(frozen=True)
class Question:
    id: str
    type: QuestionType
    prompt: str
    category: QuestionCategory
    weight: float
    required: bool = True
    description: Optional[str] = None
    options: Tuple[Option, ...] = ()
    validation: Optional[Validation] = None

    def __post_init__(self):
        # Coerce plain strings and lists so schema data can be written loosely
        object.__setattr__(self, "type", QuestionType(self.type))
        object.__setattr__(self, "category", QuestionCategory(self.category))
        object.__setattr__(self, "options", tuple(self.options))

        if self.weight < 0:
            raise ValueError(f"Question '{self.id}' has a negative weight: {self.weight}")
        if self.type in CHOICE_TYPES and not self.options:
            raise ValueError(f"Question '{self.id}' of type '{self.type.value}' needs at least one option")
        if self.type not in CHOICE_TYPES and self.options:
            raise ValueError(f"Question '{self.id}' of type '{self.type.value}' cannot declare options")

        option_ids = [opt.id for opt in self.options]
        if len(option_ids) != len(set(option_ids)):
            raise ValueError(f"Question '{self.id}' has duplicate option ids")

    def find_option(self, value: OptionValue) -> Optional[Option]:
        """Return the option whose value equals `value`, or None."""
        for opt in self.options:
            # bool is an int subclass; True must not match an option valued 1
            if isinstance(value, bool) != isinstance(opt.value, bool):
                continue
            if opt.value == value:
                return opt
        return None


@dataclass(frozen=True)
class Section:
    id: str
    title: str
    description: str
    questions: Tuple[Question, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "questions", tuple(self.questions))


@dataclass(frozen=True)
class Schema:
    """
    A complete questionnaire. Immutable for the lifetime of an evaluation;
    scoring and the wizard both see its questions as one flat ordered list.
    """
    id: str
    title: str
    description: str
    sections: Tuple[Section, ...] = ()
    estimated_time: int = 0  # minutes
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)
    _questions: Tuple[Question, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "sections", tuple(self.sections))
        flat = tuple(q for section in self.sections for q in section.questions)
        index: Dict[str, int] = {}
        for i, q in enumerate(flat):
            if q.id in index:
                raise ValueError(f"Duplicate question id '{q.id}' in schema '{self.id}'")
            index[q.id] = i
        object.__setattr__(self, "_questions", flat)
        object.__setattr__(self, "_index", index)

    @property
    def questions(self) -> List[Question]:
        """Questions of every section, in section order then question order."""
        return list(self._questions)

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    def get_question(self, index: int) -> Question:
        """Get a question by its position in the flattened list."""
        if 0 <= index < len(self._questions):
            return self._questions[index]
        raise IndexError(f"Question index {index} out of range")

    def get_question_by_id(self, question_id: str) -> Question:
        """Get a question by ID."""
        if question_id not in self._index:
            raise ValueError(f"Question with ID '{question_id}' not found")
        return self._questions[self._index[question_id]]

    def has_question(self, question_id: str) -> bool:
        return question_id in self._index

    def section_for(self, question_id: str) -> Section:
        """Get the section that declares the given question."""
        for section in self.sections:
            if any(q.id == question_id for q in section.questions):
                return section
        raise ValueError(f"Question with ID '{question_id}' not found")
