import logging
import time
from typing import Callable, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from .config import Config
from .http import client_ip_from_request


logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET, POST, OPTIONS"


def _request_id(request: Request) -> str:
    return f"{int(time.time() * 1000)}-{id(request)}"


def error_cors_headers(origin: str | None) -> Dict[str, str]:
    """CORS headers for responses built outside CORSMiddleware.

    Empty unless ``origin`` is one of ``Config.allowed_origins()``.
    """
    if not origin or origin not in Config.allowed_origins():
        return {}
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": "*",
    }


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = _request_id(request)
    client_ip = client_ip_from_request(request)

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(f"[{request_id}] {client_ip} {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[{request_id}] {client_ip} {request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise


async def limit_request_size(request: Request, call_next: Callable):
    max_bytes = Config.max_request_bytes()
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_bytes:
        logger.warning(f"Rejected {request.method} {request.url.path} from {client_ip_from_request(request)}: {content_length} bytes exceeds {Config.MAX_REQUEST_SIZE}")
        return JSONResponse(
            status_code=413,
            content={"detail": f"Request too large. Maximum size is {Config.MAX_REQUEST_SIZE}"},
            headers=error_cors_headers(request.headers.get("origin")),
        )
    return await call_next(request)


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    client_ip = client_ip_from_request(request)
    logger.error(f"[{request_id}] {client_ip} {request.method} {request.url.path} - unhandled {type(exc).__name__}: {str(exc)}", exc_info=True)

    headers = error_cors_headers(request.headers.get("origin"))
    headers["X-Request-ID"] = request_id
    return JSONResponse(status_code=500, content={"detail": "Internal server error"}, headers=headers)
