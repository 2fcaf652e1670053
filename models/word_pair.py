from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, func

from core.database import Base


class WordPair(Base):
    __tablename__ = "word_pairs"
    __table_args__ = (
        CheckConstraint("correct_count >= 0", name="ck_word_pairs_correct_count"),
        CheckConstraint("incorrect_count >= 0", name="ck_word_pairs_incorrect_count"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    polish_word = Column(String(255), nullable=False)
    ukrainian_word = Column(String(255), nullable=False)
    correct_count = Column(Integer, nullable=False, default=0, server_default="0")
    incorrect_count = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
