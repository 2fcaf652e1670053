from datetime import timedelta

from authx import AuthX, AuthXConfig, TokenPayload
from fastapi import Depends, HTTPException, status

from core.config import settings


config = AuthXConfig(
    JWT_SECRET_KEY=settings.SECRET_KEY,
    JWT_ALGORITHM=settings.JWT_ALG,
    JWT_ACCESS_TOKEN_EXPIRES=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    JWT_TOKEN_LOCATION=settings.JWT_TOKEN_LOCATION,
)

# Tokens are issued by the identity service; this app only verifies them.
security = AuthX(config=config)


def get_current_owner_id(payload: TokenPayload = Depends(security.access_token_required)) -> int:
    try:
        return int(payload.sub)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid subject in token") from exc
