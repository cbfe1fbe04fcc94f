"""
Live self-test status for SMART drives.

Turns the self-test subsection of smartctl's JSON output into a strict,
immutable SelfTest value and enumerates its polling durations.

Usage:
    self_test = parse_smartctl_report(json.loads(report_text))
    if self_test.is_running():
        print(self_test.status.remaining_percent)
    for test_type, minutes in self_test.get_test_types():
        ...
"""

from .models.self_test import SelfTest, SelfTestStatus, PollingDurations
from .smart_data.enumerator import enumerate_polling_durations
from .smart_data.extractor import (
    SelfTestExtractor,
    extract_self_test,
    parse_smartctl_report,
)
from .exceptions import (
    SmartSelfTestError,
    MissingSectionError,
    MalformedFieldError,
    InconsistentDurationError,
)

__all__ = [
    "SelfTest",
    "SelfTestStatus",
    "PollingDurations",
    "SelfTestExtractor",
    "extract_self_test",
    "parse_smartctl_report",
    "enumerate_polling_durations",
    "SmartSelfTestError",
    "MissingSectionError",
    "MalformedFieldError",
    "InconsistentDurationError",
]
