"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.app.api.http.app_data import ApplicationDependencies
from src.app.api.http.routers.health import router as health_router
from src.app.api.http.routers.service.product import router as product_router
from src.app.api.utils.app_startup import configure_logging
from src.app.core.exceptions import ProductValidationError
from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.context import get_config

configure_logging()


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Inventory API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
cors = get_config().app.cors
if "*" in cors.origins and cors.allow_credentials:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' origins with allow_credentials=True"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Domain error mapping ---
@app.exception_handler(ProductValidationError)
async def product_validation_error_handler(
    request: Request, exc: ProductValidationError
) -> JSONResponse:
    logger.bind(field=exc.field).warning("Product validation failed: {}", exc.message)
    return JSONResponse(
        status_code=422,
        content={
            "detail": [
                {
                    "loc": [exc.location, exc.field],
                    "msg": exc.message,
                    "type": "value_error",
                }
            ]
        },
    )


# --- Router registration ---
app.include_router(health_router)
app.include_router(product_router, prefix=get_config().api.prefix)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config)
    if config.database.create_tables:
        DbManageService(engine=database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # We handle access logging in middleware
    )
