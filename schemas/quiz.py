import logging
from enum import Enum

from pydantic import BaseModel, Field, constr, field_validator

logger = logging.getLogger(__name__)


class QuizDirection(str, Enum):
    """Language of the word shown to the user.

    POLISH shows the Polish word and expects the Ukrainian one,
    UKRAINIAN shows the Ukrainian word and expects the Polish one.
    """

    POLISH = "POLISH"
    UKRAINIAN = "UKRAINIAN"

    @classmethod
    def parse(cls, raw: "str | QuizDirection | None") -> "QuizDirection":
        """Map a client supplied value onto a direction.

        Matching is case-insensitive against ``UKRAINIAN``; anything else
        falls back to ``POLISH``.
        """
        if isinstance(raw, QuizDirection):
            return raw
        value = (raw or "").strip().upper()
        if value == cls.UKRAINIAN.value:
            return cls.UKRAINIAN
        if value != cls.POLISH.value:
            logger.warning("Unknown question language %r, falling back to %s", raw, cls.POLISH.value)
        return cls.POLISH

    def question_text(self, pair) -> str:
        return pair.ukrainian_word if self is QuizDirection.UKRAINIAN else pair.polish_word

    def answer_text(self, pair) -> str:
        return pair.polish_word if self is QuizDirection.UKRAINIAN else pair.ukrainian_word


class QuizQuestion(BaseModel):
    question_word_id: int
    question_word: str
    question_language: QuizDirection
    options: list[str]
    correct_answer: str = Field(exclude=True, repr=False)


class QuizQuestionOut(BaseModel):
    question_word_id: int
    question_word: str
    question_language: QuizDirection
    options: list[str]


class SpellCheckResult(BaseModel):
    correct: bool
    correct_answer: str
    provided_answer: str
    message: str


class SpellCheckIn(BaseModel):
    question_word: constr(strip_whitespace=True, min_length=1)
    question_language: constr(strip_whitespace=True, min_length=1)
    # kept verbatim so the result can echo exactly what the user typed
    answer: constr(min_length=1)

    @field_validator("answer")
    @classmethod
    def _reject_blank_answer(cls, value: str):
        if not value.strip():
            raise ValueError("Answer is required")
        return value


class SpellCheckOut(SpellCheckResult):
    pass
