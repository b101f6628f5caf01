from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_error_registry, get_request_language
from api.dependencies.rate_limits import setup_rate_limiter
from api.errors import HTTPError
from api.responses import reply_error
from api.router import api_router
from core.config import settings
from core.logging import get_module_logger
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(lifespan=lifespan)
setup_rate_limiter(handler)


allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@handler.exception_handler(HTTPError)
async def http_error_handler(request: Request, exc: HTTPError):
    """Reply with the localized body of an HTTPError."""
    return reply_error(exc, exc.language, get_error_registry())


@handler.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Reply to any other failure with a localized InternalError."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return reply_error(exc, get_request_language(request), get_error_registry())


handler.include_router(api_router)
