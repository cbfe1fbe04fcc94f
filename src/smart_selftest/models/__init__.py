"""Typed models for smartctl self-test data."""

from .self_test import SelfTest, SelfTestStatus, PollingDurations

__all__ = [
    "SelfTest",
    "SelfTestStatus",
    "PollingDurations"
]
