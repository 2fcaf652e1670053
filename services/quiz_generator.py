import logging
import random

from core.exceptions import InsufficientDataError
from core.ports import WordStore
from models.word_pair import WordPair
from schemas.quiz import QuizDirection, QuizQuestion
from services.answer_normalizer import normalize_answer

logger = logging.getLogger(__name__)

DISTRACTOR_COUNT = 3
MIN_PAIRS_FOR_QUIZ = DISTRACTOR_COUNT + 1


class QuizGenerator:
    """Builds multiple-choice questions from an owner's word pairs.

    The target pair and its distractors are drawn uniformly at random by the
    store; the options are shuffled here with a process-wide PRNG unless a
    seeded ``random.Random`` is supplied.
    """

    def __init__(self, store: WordStore, rng: random.Random | None = None):
        self.store = store
        self.rng = rng or random.Random()

    def generate(self, user_id: int, direction: QuizDirection) -> QuizQuestion:
        total = self.store.count_by_owner(user_id)
        if total < MIN_PAIRS_FOR_QUIZ:
            logger.info("User %s has %s word pairs, quiz needs %s", user_id, total, MIN_PAIRS_FOR_QUIZ)
            raise InsufficientDataError(f"Need at least {MIN_PAIRS_FOR_QUIZ} word pairs to generate a quiz")

        target = self.store.sample_one_by_owner(user_id)
        if target is None:
            raise InsufficientDataError("No words found")

        question_word = direction.question_text(target)
        correct_answer = direction.answer_text(target)
        distractors = self._pick_distractors(user_id, target, direction, correct_answer, total)

        options = [correct_answer] + distractors
        self.rng.shuffle(options)

        logger.info(
            "Generated %s question for user %s from word pair %s",
            direction.value,
            user_id,
            target.id,
        )
        return QuizQuestion(
            question_word_id=target.id,
            question_word=question_word,
            question_language=direction,
            options=options,
            correct_answer=correct_answer,
        )

    def _pick_distractors(
        self,
        user_id: int,
        target: WordPair,
        direction: QuizDirection,
        correct_answer: str,
        total: int,
    ) -> list[str]:
        candidates = self.store.sample_many_by_owner_excluding(user_id, target.id, DISTRACTOR_COUNT)
        if len(candidates) < DISTRACTOR_COUNT:
            raise InsufficientDataError("Not enough words to generate quiz options")

        distractors = self._distinct_answers(candidates, direction, correct_answer)
        if len(distractors) < DISTRACTOR_COUNT:
            # Some pairs share a translation; draw every remaining pair in random order instead.
            candidates = self.store.sample_many_by_owner_excluding(user_id, target.id, total)
            distractors = self._distinct_answers(candidates, direction, correct_answer)
        if len(distractors) < DISTRACTOR_COUNT:
            raise InsufficientDataError("Not enough distinct words to generate quiz options")
        return distractors

    @staticmethod
    def _distinct_answers(candidates: list[WordPair], direction: QuizDirection, correct_answer: str) -> list[str]:
        seen = {normalize_answer(correct_answer)}
        answers: list[str] = []
        for pair in candidates:
            text = direction.answer_text(pair)
            key = normalize_answer(text)
            if key in seen:
                continue
            seen.add(key)
            answers.append(text)
            if len(answers) == DISTRACTOR_COUNT:
                break
        return answers
