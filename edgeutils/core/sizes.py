"""IEC size strings, in the spirit of ``numfmt --from=iec``.

``"100M"`` parses to ``100 * 1024 ** 2``. The optional ``i`` suffix
(``"100Mi"``) is accepted and means the same thing.
"""

import logging
import re
from typing import Optional, Union


logger = logging.getLogger(__name__)

IEC_MULTIPLIERS = {
    unit: 1024 ** rank for rank, unit in enumerate("KMGTPEZYRQ", start=1)
}

IEC_PATTERN = re.compile(r"([0-9.]+)([KMGTPEZYRQ]?)(i?)", re.IGNORECASE)
MAGNITUDE_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def iec_to_num(value: Optional[str]) -> Union[int, float]:
    """Convert an IEC size string such as ``"2.5Gi"`` to a number of bytes.

    Returns 0 when no size can be found in ``value``.
    """
    if not value:
        return 0

    match = IEC_PATTERN.search(value)
    if not match:
        logger.debug(f"No IEC size found in {value!r}")
        return 0

    digits, unit, _ = match.groups()
    magnitude = MAGNITUDE_PATTERN.match(digits)
    if not magnitude:
        logger.debug(f"Unparseable IEC magnitude {digits!r} in {value!r}")
        return 0

    number = magnitude.group(0)
    factor = IEC_MULTIPLIERS.get(unit.upper(), 1)
    if "." in number:
        return float(number) * factor
    return int(number) * factor
