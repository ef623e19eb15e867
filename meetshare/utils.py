from datetime import datetime, timezone

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meetshare.logs import get_logger, uvicorn_log_config
from meetshare.models.v1.common import ErrorResponse

log = get_logger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # clients read the message from `error`, not from fastapi's default `detail`
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=str(exc.detail)).model_dump())


def create_app(**kwargs):
    app = FastAPI(**kwargs)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    return app


responses = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Upstream or internal failure"},
}


def get_router() -> APIRouter:
    return APIRouter(responses=responses)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


async def create_webserver(app, port):
    server_config = uvicorn.Config(
        app,
        host='0.0.0.0',
        port=port,
        log_config=uvicorn_log_config,
    )
    server = uvicorn.Server(server_config)
    await server.serve()
