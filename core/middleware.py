from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.logging import get_logger
from schemas.common import ApiStatus, error_response


def setup_middleware(app: FastAPI):
    """Setup global exception handlers"""
    log = get_logger("api")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", url=str(request.url), errors=exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response(
                message="Request validation failed",
                status=ApiStatus.VALIDATION_ERROR,
                error_code="VALIDATION_ERROR",
                data={"errors": jsonable_encoder(exc.errors())},
            ),
        )
