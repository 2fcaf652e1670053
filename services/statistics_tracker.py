import logging

from core.exceptions import NotFoundError
from core.ports import WordStore

logger = logging.getLogger(__name__)


class StatisticsTracker:
    def __init__(self, store: WordStore):
        self.store = store

    def record(self, pair_id: int, correct: bool) -> None:
        updated = self.store.increment_counter(pair_id, correct=correct)
        if not updated:
            raise NotFoundError("Word not found")
        logger.debug(
            "Recorded %s answer for word pair %s",
            "correct" if correct else "incorrect",
            pair_id,
        )
