from typing import Protocol, Sequence

from models.word_pair import WordPair


class WordStore(Protocol):
    def list_by_owner(self, user_id: int) -> list[WordPair]: ...

    def count_by_owner(self, user_id: int) -> int: ...

    def sample_one_by_owner(self, user_id: int) -> WordPair | None: ...

    def sample_many_by_owner_excluding(self, user_id: int, exclude_id: int, limit: int) -> list[WordPair]: ...

    def save(self, pair: WordPair) -> WordPair: ...

    def save_all(self, pairs: Sequence[WordPair]) -> list[WordPair]: ...

    def increment_counter(self, pair_id: int, *, correct: bool) -> bool: ...
