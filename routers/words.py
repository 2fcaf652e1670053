from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import get_current_owner_id
from schemas.word import BulkWordIn, BulkWordOut, WordPairCreateIn, WordPairOut
from services.word_service import WordService

router = APIRouter(prefix="/api/words", tags=["Words"])


@router.post(
    "",
    response_model=WordPairOut,
    status_code=201,
)
async def create_word_pair(
    data: WordPairCreateIn,
    user_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    svc = WordService(db)
    pair = svc.create_word_pair(
        user_id=user_id,
        polish_word=data.polish_word,
        ukrainian_word=data.ukrainian_word,
    )
    return WordPairOut.model_validate(pair, from_attributes=True)


@router.post(
    "/bulk",
    response_model=BulkWordOut,
    status_code=201,
)
async def create_bulk_word_pairs(
    data: BulkWordIn,
    user_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    svc = WordService(db)
    result = svc.create_bulk_word_pairs(
        user_id=user_id,
        pairs=[(item.polish_word, item.ukrainian_word) for item in data.word_pairs],
    )
    return BulkWordOut(
        total_processed=result["total_processed"],
        created_words=[WordPairOut.model_validate(pair, from_attributes=True) for pair in result["created_words"]],
    )


@router.get(
    "",
    response_model=list[WordPairOut],
)
async def list_word_pairs(
    user_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    svc = WordService(db)
    pairs = svc.list_word_pairs(user_id)
    return [WordPairOut.model_validate(pair, from_attributes=True) for pair in pairs]
