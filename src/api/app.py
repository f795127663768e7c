import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlmodel import SQLModel

from .error import ApiError
from .middlewares import register_middlewares
from .utils.response import error_payload

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI, ApplicationConfig) -> None:
    with_stack = ApplicationConfig.ENVIRONMENT == "development"

    async def handle_api_error(request: Request, exc: ApiError):
        error = exc.base_error
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"Server error: {error.code} {error.message}")
        else:
            logger.warning(f"Client error: {error.code} {error.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(error.code, error.message, exc, with_stack),
        )

    async def handle_validation_error(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg", "Invalid request"))
        logger.warning(f"Validation error: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload("VALIDATION_ERROR", message, exc, with_stack),
        )

    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload("INTERNAL_ERROR", "Internal server error", exc, with_stack),
        )

    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def create_app(ApplicationConfig) -> FastAPI:
    from src import depends
    from src.adapter.services.local_file_storage import LocalFileStorage
    from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from src.app.services.lifecycle_policy import LifecyclePolicy
    from src.app.use_cases.startup import AdminSeed, SeedAdminsUseCase, SeedRolesUseCase

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        LocalFileStorage(ApplicationConfig.PUBLIC_DIR, ApplicationConfig.PUBLIC_URL).ensure_folders()

        if ApplicationConfig.AUTO_CREATE_TABLES:
            async with depends.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

        async with depends.AsyncSessionLocal() as session:
            policy = LifecyclePolicy.from_config(ApplicationConfig)
            await SeedRolesUseCase(SqlAlchemyUnitOfWork(session), policy).execute()

            admins = [AdminSeed(**admin) for admin in ApplicationConfig.ADMINS]
            seeded = await SeedAdminsUseCase(SqlAlchemyUnitOfWork(session)).execute(admins)
            if seeded.is_err():
                logger.error(f"Admin seeding failed: {seeded.error}")

        yield

        await depends.engine.dispose()

    app = FastAPI(title="Catalog API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        register_middlewares(app)

    from src.api.routes import (
        authentication,
        health_check,
        manufacturers,
        products,
        techniques,
        tools,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(authentication.router, prefix=prefix, tags=["Authentication"])
    app.include_router(manufacturers.router, prefix=prefix, tags=["Manufacturers"])
    app.include_router(tools.router, prefix=prefix, tags=["Tools"])
    app.include_router(techniques.router, prefix=prefix, tags=["Techniques"])
    app.include_router(products.router, prefix=prefix, tags=["Products"])

    os.makedirs(ApplicationConfig.PUBLIC_DIR, exist_ok=True)
    app.mount("/public", StaticFiles(directory=ApplicationConfig.PUBLIC_DIR), name="public")

    _register_exception_handlers(app, ApplicationConfig)

    return app
