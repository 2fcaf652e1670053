import logging
from typing import Iterable

from sqlalchemy.orm import Session

from models.word_pair import WordPair
from repositories.word_pair_repo import WordPairRepository

logger = logging.getLogger(__name__)


class WordService:
    def __init__(self, db: Session):
        self.repo = WordPairRepository(db)

    @staticmethod
    def _build(user_id: int, polish_word: str, ukrainian_word: str) -> WordPair:
        return WordPair(
            user_id=user_id,
            polish_word=polish_word.strip(),
            ukrainian_word=ukrainian_word.strip(),
            correct_count=0,
            incorrect_count=0,
        )

    def create_word_pair(self, *, user_id: int, polish_word: str, ukrainian_word: str) -> WordPair:
        return self.repo.save(self._build(user_id, polish_word, ukrainian_word))

    def create_bulk_word_pairs(self, *, user_id: int, pairs: Iterable[tuple[str, str]]) -> dict:
        entities = [self._build(user_id, polish, ukrainian) for polish, ukrainian in pairs]
        saved = self.repo.save_all(entities)
        logger.info("Imported %s word pairs for user %s", len(saved), user_id)
        return {"total_processed": len(saved), "created_words": saved}

    def list_word_pairs(self, user_id: int) -> list[WordPair]:
        return self.repo.list_by_owner(user_id)
