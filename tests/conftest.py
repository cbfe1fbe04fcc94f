"""Pytest fixtures and configuration."""

import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

# Saved smartctl -a -j reports
REPORT_FILES = [
    "smartctl_idle_passed.json",
    "smartctl_running.json",
    "smartctl_no_conveyance.json",
]


def load_report(filename: str) -> dict:
    """Load a saved smartctl report from tests/data."""
    with open(DATA_DIR / filename, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def data_dir():
    """Provide the directory holding saved smartctl reports."""
    return DATA_DIR


@pytest.fixture
def idle_report():
    """Provide a report for an idle drive whose last self-test passed."""
    return load_report("smartctl_idle_passed.json")


@pytest.fixture
def running_report():
    """Provide a report captured while a self-test was running."""
    return load_report("smartctl_running.json")


@pytest.fixture
def no_conveyance_report():
    """Provide a report for a drive without conveyance test support."""
    return load_report("smartctl_no_conveyance.json")


@pytest.fixture(params=REPORT_FILES)
def any_report(request):
    """Provide each saved report in turn."""
    return load_report(request.param)


@pytest.fixture
def sample_ata_smart_data():
    """Provide a minimal ata_smart_data section with a concluded test."""
    return {
        "self_test": {
            "status": {
                "value": 0,
                "string": "Completed without error",
                "passed": True
            },
            "polling_minutes": {
                "short": 2,
                "extended": 10
            }
        }
    }


@pytest.fixture
def sample_running_ata_smart_data():
    """Provide a minimal ata_smart_data section with a test in progress."""
    return {
        "self_test": {
            "status": {
                "value": 249,
                "string": "Self-test routine in progress",
                "remaining_percent": 90
            },
            "polling_minutes": {
                "short": 2
            }
        }
    }
