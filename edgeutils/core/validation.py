import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, Optional


MAX_LABEL_LENGTH = 63

TLD_PATTERN = re.compile(
    r"[a-z\u00a1-\u00a8\u00aa-\ud7ff\uf900-\ufdcf\ufdf0-\uffef]{2,}|xn[a-z0-9-]{2,}",
    re.IGNORECASE,
)
NUMERIC_PATTERN = re.compile(r"[0-9]+")
WHITESPACE_PATTERN = re.compile(r"\s")
LABEL_PATTERN = re.compile(r"[a-z_\u00a1-\U0010ffff0-9-]+", re.IGNORECASE)
FULL_WIDTH_PATTERN = re.compile(r"[\uff01-\uff5e]")
LINE_BREAK_PATTERN = re.compile(r"\r?\n\Z")


@dataclass(frozen=True)
class FQDNOptions:
    """Flags controlling which domain name forms ``is_fqdn`` accepts.

    Every flag defaults to ``False``, which gives the strictest check short of
    requiring a top-level domain.
    """

    require_tld: bool = False
    allow_underscores: bool = False
    allow_trailing_dot: bool = False
    allow_numeric_tld: bool = False
    allow_wildcard: bool = False
    ignore_max_length: bool = False


def is_empty(value: Any) -> bool:
    """Return True for ``None`` and for mappings or sequences with no entries.

    Strings and bytes are not treated as sequences here, so ``is_empty("")``
    is False, as is any other non-container value.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if isinstance(value, (Mapping, Sequence)):
        return len(value) == 0
    return False


def _label_length(label: str) -> int:
    # UTF-16 code units, so astral characters count twice
    return len(label.encode("utf-16-le", "surrogatepass")) // 2


def _is_valid_label(label: str, options: FQDNOptions) -> bool:
    if _label_length(label) > MAX_LABEL_LENGTH and not options.ignore_max_length:
        return False

    if not LABEL_PATTERN.fullmatch(label):
        return False

    if FULL_WIDTH_PATTERN.search(label):
        return False

    if label.startswith("-") or label.endswith("-"):
        return False

    if not options.allow_underscores and "_" in label:
        return False

    return True


def is_fqdn(value: str, options: Optional[FQDNOptions] = None, **flags: bool) -> bool:
    """Check that ``value`` is a syntactically valid fully qualified domain name.

    Args:
        value: Candidate domain name
        options: Validation flags, defaults to ``FQDNOptions()``
        **flags: Individual ``FQDNOptions`` fields overriding ``options``

    Returns:
        True if the name and every one of its labels pass, False otherwise
    """
    options = options or FQDNOptions()
    if flags:
        options = replace(options, **flags)

    if options.allow_trailing_dot and value.endswith("."):
        value = value[:-1]

    if options.allow_wildcard and value.startswith("*."):
        value = value[2:]

    labels = value.split(".")
    tld = labels[-1]

    if options.require_tld:
        if len(labels) < 2:
            return False

        if WHITESPACE_PATTERN.search(tld):
            return False

        if not options.allow_numeric_tld and not TLD_PATTERN.fullmatch(tld):
            return False

    if not options.allow_numeric_tld and NUMERIC_PATTERN.fullmatch(tld):
        return False

    return all(_is_valid_label(label, options) for label in labels)


def is_with_line_break(value: Optional[str]) -> bool:
    """Return True if ``value`` ends with ``\\n`` or ``\\r\\n``."""
    if not value:
        return False
    return LINE_BREAK_PATTERN.search(value) is not None
