import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WordPairsError(Exception):
    """Base class for errors the request layer maps to a client response."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InsufficientDataError(WordPairsError):
    """The owner does not have enough word pairs to build a question."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(WordPairsError):
    status_code = status.HTTP_404_NOT_FOUND


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": status_code, "message": message})


async def _handle_app_error(request: Request, exc: WordPairsError) -> JSONResponse:
    logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = ", ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:])}: {err.get('msg', 'Invalid data')}"
        for err in exc.errors()
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WordPairsError, _handle_app_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
