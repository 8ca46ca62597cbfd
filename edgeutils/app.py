import logging
import time
from datetime import datetime

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Config
from .core.http import client_ip_from_request
from .core.middleware import CORS_ALLOW_METHODS, global_exception_handler, limit_request_size, log_requests
from .core.sizes import iec_to_num
from .core.validation import FQDNOptions, is_fqdn

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(title="Edge Utilities API")

# CORS setup
ALLOWED_ORIGINS = Config.allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=CORS_ALLOW_METHODS.split(", "),
    allow_headers=["*"],
)


@app.middleware("http")
async def _limit_request_size(request, call_next):
    return await limit_request_size(request, call_next)


@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)


@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/ip")
async def client_ip(request: Request):
    """Return the caller's IP as seen through proxy headers."""
    return {"ip": client_ip_from_request(request)}


@app.get("/domains/validate")
async def validate_domain(
    name: str = Query(""),
    require_tld: bool = Query(True),
    allow_underscores: bool = Query(False),
    allow_trailing_dot: bool = Query(False),
    allow_numeric_tld: bool = Query(False),
    allow_wildcard: bool = Query(False),
    ignore_max_length: bool = Query(False),
):
    """Check a domain name against the FQDN rules.

    Query flags map one to one onto ``FQDNOptions``; ``require_tld`` is on by
    default here since callers of this endpoint are validating public names.
    """
    if not name:
        raise HTTPException(status_code=400, detail="name is required")

    options = FQDNOptions(
        require_tld=require_tld,
        allow_underscores=allow_underscores,
        allow_trailing_dot=allow_trailing_dot,
        allow_numeric_tld=allow_numeric_tld,
        allow_wildcard=allow_wildcard,
        ignore_max_length=ignore_max_length,
    )
    return {"name": name, "valid": is_fqdn(name, options)}


@app.get("/sizes/parse")
async def parse_size(value: str = Query("")):
    """Convert an IEC size string to bytes."""
    if not value:
        raise HTTPException(status_code=400, detail="value is required")

    return {"value": value, "bytes": iec_to_num(value)}


@app.get("/health")
async def health_check():
    """Configuration check for the API."""
    health_start_time = time.time()

    try:
        Config.validate()

        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "edge-utilities-api",
            "environment": Config.ENVIRONMENT,
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2)
        }
    except ValueError as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "edge-utilities-api",
            "environment": Config.ENVIRONMENT,
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2)
        }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "Edge Utilities API",
        "version": "1.0",
        "endpoints": {
            "client_ip": "/ip",
            "validate_domain": "/domains/validate",
            "parse_size": "/sizes/parse",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": "Domain validation, IEC size parsing and client IP resolution"
    }
