"""One log line per request: ``METHOD path status length - N ms``."""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("blog_api.access")


async def access_log_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %s - %.1f ms",
        request.method,
        request.url.path,
        response.status_code,
        response.headers.get("content-length", "-"),
        elapsed_ms,
    )
    return response
