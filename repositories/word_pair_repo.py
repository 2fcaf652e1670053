from typing import Sequence

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from models.word_pair import WordPair


class WordPairRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_by_owner(self, user_id: int) -> list[WordPair]:
        stmt = (
            select(WordPair)
            .where(WordPair.user_id == user_id)
            .order_by(WordPair.id.asc())
        )
        return list(self.db.execute(stmt).scalars())

    def count_by_owner(self, user_id: int) -> int:
        stmt = select(func.count(WordPair.id)).where(WordPair.user_id == user_id)
        return self.db.execute(stmt).scalar_one()

    def sample_one_by_owner(self, user_id: int) -> WordPair | None:
        stmt = (
            select(WordPair)
            .where(WordPair.user_id == user_id)
            .order_by(func.random())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def sample_many_by_owner_excluding(self, user_id: int, exclude_id: int, limit: int) -> list[WordPair]:
        if limit <= 0:
            return []
        stmt = (
            select(WordPair)
            .where(
                WordPair.user_id == user_id,
                WordPair.id != exclude_id,
            )
            .order_by(func.random())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars())

    def save(self, pair: WordPair) -> WordPair:
        self.db.add(pair)
        self.db.commit()
        self.db.refresh(pair)
        return pair

    def save_all(self, pairs: Sequence[WordPair]) -> list[WordPair]:
        self.db.add_all(pairs)
        self.db.commit()
        for pair in pairs:
            self.db.refresh(pair)
        return list(pairs)

    def increment_counter(self, pair_id: int, *, correct: bool) -> bool:
        # x = x + 1 in the database, never read-modify-write in Python
        column = WordPair.correct_count if correct else WordPair.incorrect_count
        stmt = (
            update(WordPair)
            .where(WordPair.id == pair_id)
            .values({column: column + 1})
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount > 0
