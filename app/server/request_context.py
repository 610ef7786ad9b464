from starlette.middleware.base import BaseHTTPMiddleware

from api.exception_handlers import unexpected_error_handler
from infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    get_module_logger,
)

logger = get_module_logger()

CORRELATION_ID_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id, path and method to every log of a request.

    Unhandled errors are rendered here rather than by Starlette's outermost
    error middleware, so 500 responses carry the correlation id as well.
    """

    async def dispatch(self, request, call_next):
        clear_request_context()
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = await unexpected_error_handler(request, exc)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            logger.info("request_completed", status_code=response.status_code)
            return response
