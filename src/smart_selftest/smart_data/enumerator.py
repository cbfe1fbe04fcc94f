"""
Polling-duration enumeration.

Reduces a PollingDurations table to an ordered list of (test_type, minutes)
pairs for iteration or display.

Enumeration is validate-all-then-build:
1. Re-express the table as field name -> raw value, in POLLING_TEST_TYPES order
2. Parse every present value as an unsigned integer
3. If any present value failed to parse, raise for the first one
   (POLLING_TEST_TYPES order) and return nothing
4. Otherwise emit the present fields, dropping absent ones entirely

A malformed present value means the table is untrustworthy, so callers
get either the complete list or an error, never a truncated list.
Deserialization already guarantees integers; values built with
model_construct() skip that guarantee, which is what step 2 re-checks.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .. import constants
from ..exceptions import InconsistentDurationError

logger = logging.getLogger(__name__)


class _ParsedMinutes(NamedTuple):
    minutes: Optional[int]
    error: Optional[InconsistentDurationError]


def _parse_minutes(test_type: str, value: Any) -> _ParsedMinutes:
    # None means the device does not support this test kind
    if value is None:
        return _ParsedMinutes(None, None)

    # bool is an int subclass but never a duration
    if isinstance(value, bool) or not isinstance(value, int):
        return _ParsedMinutes(None, InconsistentDurationError(test_type, value))

    if not 0 <= value <= constants.MAX_POLLING_MINUTES:
        return _ParsedMinutes(None, InconsistentDurationError(test_type, value))

    return _ParsedMinutes(value, None)


def enumerate_polling_durations(polling) -> List[Tuple[str, int]]:
    """
    Convert a PollingDurations value into ordered (test_type, minutes) pairs.

    Args:
        polling: PollingDurations instance (or any pydantic model of the
                 same shape)

    Returns:
        List of (test_type, minutes) in POLLING_TEST_TYPES order
        (short, extended, conveyance), absent fields omitted

    Raises:
        InconsistentDurationError: If any present field is not an unsigned
            integer. Names the first offending field in POLLING_TEST_TYPES order.

    Example:
        PollingDurations(short=2, extended=10) -> [("short", 2), ("extended", 10)]
    """
    # Read attributes rather than model_dump() so malformed values reach the
    # check below instead of the serializer
    raw: Dict[str, Any] = {
        name: getattr(polling, name, None) for name in constants.POLLING_TEST_TYPES
    }

    parsed = {name: _parse_minutes(name, value) for name, value in raw.items()}

    for parse_result in parsed.values():
        if parse_result.error is not None:
            raise parse_result.error

    test_types = [
        (name, parse_result.minutes)
        for name, parse_result in parsed.items()
        if parse_result.minutes is not None
    ]

    logger.debug(f"Enumerated polling durations: {test_types}")
    return test_types
