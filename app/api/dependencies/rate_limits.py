from fastapi import FastAPI, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from api.dependencies.providers import get_error_registry, get_request_language
from api.errors import TOO_MANY_REQUESTS
from api.responses import reply_error

limiter = Limiter(
    key_func=get_remote_address,
)


async def rate_limit_handler(request: Request, exc: Exception):
    """Reply to a rate-limited request with a localized 429 error body."""
    language = get_request_language(request)
    registry = get_error_registry()
    err = registry.new_http_error(
        status.HTTP_429_TOO_MANY_REQUESTS, TOO_MANY_REQUESTS, language
    ).with_error_details(str(exc))
    return reply_error(err, language, registry)


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
