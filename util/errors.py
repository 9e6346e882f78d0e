# util/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from util.enums import ErrorMessage


class AppError(Exception):
    def __init__(self, message: str, http_status: int) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    @classmethod
    def of(cls, error: ErrorMessage, detail: str | None = None) -> "AppError":
        """Build from an ErrorMessage entry, optionally replacing its message."""
        return cls(detail or error.value.message, error.value.http_status)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        {"error": exc.message},
        status_code=exc.http_status,
        headers={"Cache-Control": "no-store"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
