import random

from sqlalchemy.orm import Session

from repositories.word_pair_repo import WordPairRepository
from schemas.quiz import QuizDirection, QuizQuestion, SpellCheckResult
from services.quiz_generator import QuizGenerator
from services.spell_checker import SpellChecker
from services.statistics_tracker import StatisticsTracker


class QuizService:
    def __init__(self, db: Session, rng: random.Random | None = None):
        self.repo = WordPairRepository(db)
        self.tracker = StatisticsTracker(self.repo)
        self.generator = QuizGenerator(self.repo, rng=rng)
        self.spell_checker = SpellChecker(self.repo, self.tracker)

    def generate_question(self, *, user_id: int, direction: QuizDirection | str) -> QuizQuestion:
        return self.generator.generate(user_id, QuizDirection.parse(direction))

    def check_spelling(
        self,
        *,
        user_id: int,
        direction: QuizDirection | str,
        question_word: str,
        answer: str,
    ) -> SpellCheckResult:
        return self.spell_checker.evaluate(user_id, QuizDirection.parse(direction), question_word, answer)
