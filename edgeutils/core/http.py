import logging
from typing import Mapping, Union

from fastapi import Request
from fastapi.datastructures import Headers


logger = logging.getLogger(__name__)

# Checked in order, first present header wins
CLIENT_IP_HEADERS = (
    "x-client-ip",  # Amazon EC2, Heroku and others
    "cf-connecting-ip",  # Cloudflare
    "do-connecting-ip",  # DigitalOcean App Platform
    "fastly-client-ip",  # Fastly, Firebase hosting
    "true-client-ip",  # Akamai, Cloudflare Enterprise
    "x-real-ip",  # nginx proxy/fcgi
    "x-forwarded",
    "forwarded-for",
)


def get_client_ip(headers: Union[Headers, Mapping[str, str]], remote_host: str) -> str:
    """Resolve the originating client IP from proxy headers.

    Header values are returned as-is. Callers are expected to sit behind a proxy
    that sets them; otherwise clients can spoof their address.

    Args:
        headers: Request headers, looked up case-insensitively
        remote_host: Peer address of the connection, used when no header is set

    Returns:
        The first matching header value, or ``remote_host``
    """
    if not isinstance(headers, Headers):
        # Plain mappings are only lowercased, values are never re-encoded
        lowered = {}
        for key, value in headers.items():
            lowered.setdefault(str(key).lower(), value)
        headers = lowered

    for name in CLIENT_IP_HEADERS:
        if name in headers:
            logger.debug(f"Client IP resolved from {name} header")
            return headers[name]

    return remote_host


def client_ip_from_request(request: Request) -> str:
    remote_host = request.client.host if request.client else ""
    return get_client_ip(request.headers, remote_host)
