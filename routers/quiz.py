from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import get_current_owner_id
from schemas.quiz import QuizQuestionOut, SpellCheckIn, SpellCheckOut
from services.quiz_service import QuizService

router = APIRouter(prefix="/api/quiz", tags=["Quiz"])


@router.get(
    "/multiple-choice",
    response_model=QuizQuestionOut,
)
async def get_multiple_choice_question(
    question_language: str = Query("UKRAINIAN", description="Language of the word shown: POLISH or UKRAINIAN"),
    user_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    svc = QuizService(db)
    question = svc.generate_question(user_id=user_id, direction=question_language)
    return QuizQuestionOut.model_validate(question.model_dump())


@router.post(
    "/spell-check",
    response_model=SpellCheckOut,
)
async def check_spelling(
    data: SpellCheckIn,
    user_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    svc = QuizService(db)
    result = svc.check_spelling(
        user_id=user_id,
        direction=data.question_language,
        question_word=data.question_word,
        answer=data.answer,
    )
    return SpellCheckOut.model_validate(result.model_dump())
