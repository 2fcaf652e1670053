from pydantic import BaseModel, ConfigDict, Field, constr


class WordPairCreateIn(BaseModel):
    polish_word: constr(strip_whitespace=True, min_length=1, max_length=255)
    ukrainian_word: constr(strip_whitespace=True, min_length=1, max_length=255)


class BulkWordIn(BaseModel):
    word_pairs: list[WordPairCreateIn] = Field(min_length=1)


class WordPairOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    polish_word: str
    ukrainian_word: str
    correct_count: int
    incorrect_count: int


class BulkWordOut(BaseModel):
    total_processed: int
    created_words: list[WordPairOut]
