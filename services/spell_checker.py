import logging

from core.exceptions import NotFoundError
from core.ports import WordStore
from models.word_pair import WordPair
from schemas.quiz import QuizDirection, SpellCheckResult
from services.answer_normalizer import answers_match, normalize_answer
from services.statistics_tracker import StatisticsTracker

logger = logging.getLogger(__name__)

CORRECT_MESSAGE = "Correct!"
INCORRECT_MESSAGE = "Incorrect. Try again!"


class SpellChecker:
    def __init__(self, store: WordStore, tracker: StatisticsTracker):
        self.store = store
        self.tracker = tracker

    def find_pair(self, user_id: int, direction: QuizDirection, question_text: str) -> WordPair:
        """Return the owner's pair whose shown-language text matches the question.

        Pairs are scanned by ascending id, so when several pairs share the
        same text the oldest one wins.
        """
        wanted = normalize_answer(question_text)
        if wanted:
            for pair in self.store.list_by_owner(user_id):
                if normalize_answer(direction.question_text(pair)) == wanted:
                    return pair
        raise NotFoundError("Word not found")

    def evaluate(
        self,
        user_id: int,
        direction: QuizDirection,
        question_text: str,
        provided_answer: str,
    ) -> SpellCheckResult:
        pair = self.find_pair(user_id, direction, question_text)
        pair_id = pair.id
        correct_answer = direction.answer_text(pair)
        is_correct = answers_match(provided_answer, correct_answer)

        self.tracker.record(pair_id, is_correct)

        logger.info(
            "Spell check for user %s on word pair %s: %s",
            user_id,
            pair_id,
            "correct" if is_correct else "incorrect",
        )
        return SpellCheckResult(
            correct=is_correct,
            correct_answer=correct_answer,
            provided_answer=provided_answer,
            message=CORRECT_MESSAGE if is_correct else INCORRECT_MESSAGE,
        )
