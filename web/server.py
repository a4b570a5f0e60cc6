"""FastAPI application - survey endpoints under /api/v1."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import container
from survey_client import RemoteError
from web.api import api_router
from web.api.errors import NotFoundError, RefreshError, ValidationError

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(_: FastAPI):
    container.init()
    await container.start()
    yield
    await container.shutdown()


app = FastAPI(title="Survey Cache", lifespan=lifespan)


@app.middleware("http")
async def log_request(request: Request, call_next):
    response = await call_next(request)
    logger.info("{} {} -> {}", request.method, request.url.path, response.status_code)
    return response


@app.exception_handler(ValidationError)
async def validation_error_handler(_: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_handler(_: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(RefreshError)
@app.exception_handler(RemoteError)
async def upstream_error_handler(_: Request, exc: RefreshError | RemoteError) -> JSONResponse:
    logger.error("Upstream failure: {}", exc.message)
    return JSONResponse(status_code=502, content={"detail": exc.message})


app.include_router(api_router, prefix=API_PREFIX)


@app.get("/health")
async def health():
    return {"status": "ok"}
