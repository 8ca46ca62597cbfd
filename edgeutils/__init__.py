"""Small stateless helpers for HTTP services.

Domain name validation, IEC size parsing, client IP resolution and a handful
of text and sequence utilities.
"""

from .core.encoding import text_decode, text_encode
from .core.http import CLIENT_IP_HEADERS, client_ip_from_request, get_client_ip
from .core.sequences import array_difference, array_merge
from .core.sizes import iec_to_num
from .core.validation import FQDNOptions, is_empty, is_fqdn, is_with_line_break

__all__ = [
    "CLIENT_IP_HEADERS",
    "FQDNOptions",
    "array_difference",
    "array_merge",
    "client_ip_from_request",
    "get_client_ip",
    "iec_to_num",
    "is_empty",
    "is_fqdn",
    "is_with_line_break",
    "text_decode",
    "text_encode",
]
