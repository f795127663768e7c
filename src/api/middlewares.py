import logging
from time import perf_counter

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


async def request_logging_middleware(request: Request, call_next):
    started_at = perf_counter()
    response = await call_next(request)
    elapsed_ms = round((perf_counter() - started_at) * 1000, 2)
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms}ms")
    return response


def register_middlewares(app: FastAPI) -> None:
    app.middleware("http")(request_logging_middleware)
