"""
Custom exception classes for self-test extraction.

This module defines the hierarchy of exceptions raised while turning a
smartctl JSON report into a typed SelfTest value. All exceptions inherit
from SmartSelfTestError, allowing catch-all exception handling while
keeping specific error types for better error messages.

Exception hierarchy:
- SmartSelfTestError (base)
  - MissingSectionError (a report section is absent)
  - MalformedFieldError (required field missing or of the wrong type)
  - InconsistentDurationError (present polling duration is not an unsigned integer)
"""

from typing import Any


class SmartSelfTestError(Exception):
    """
    Base exception for all self-test extraction errors.

    Don't raise this directly - use more specific exceptions instead.
    """
    pass


class MissingSectionError(SmartSelfTestError):
    """
    Raised when a report section cannot be found.

    Typically means the caller passed the wrong section of the report
    (e.g., the whole report instead of "ata_smart_data"), or the device
    reports no self-test data at all.
    """

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Missing {section} field")


class MalformedFieldError(SmartSelfTestError):
    """
    Raised when a required field is missing or has the wrong type.

    The field_path is dotted and rooted at the located section, for
    example "self_test.status.value". The reason distinguishes a field
    that is not there at all from one that holds the wrong kind of value.
    """

    MISSING = "missing"
    INVALID = "invalid"

    def __init__(self, field_path: str, reason: str = INVALID, detail: str = ""):
        self.field_path = field_path
        self.reason = reason
        self.detail = detail

        if reason == self.MISSING:
            message = f"Missing required field {field_path}"
        else:
            message = f"Malformed field {field_path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InconsistentDurationError(SmartSelfTestError):
    """
    Raised when a present polling duration is not an unsigned integer.

    Deserialization already rejects such values, so this only fires when a
    PollingDurations value was built without validation. The whole
    enumeration fails; no partial list is returned.
    """

    def __init__(self, test_type: str, value: Any):
        self.test_type = test_type
        self.value = value
        super().__init__(
            f"Expected unsigned integer for test type {test_type}, got: {value!r}"
        )
