"""
Report keys and limits for smartctl self-test data.

smartctl's JSON output (``smartctl -a -j``) nests the live self-test state
two levels deep:

    {
        "ata_smart_data": {
            "self_test": {
                "status": {"value": 0, "string": "...", "passed": true},
                "polling_minutes": {"short": 2, "extended": 10}
            }
        }
    }

If smartctl renames any of these keys, update them here; nothing else in
the package hard-codes them.
"""

# Section of the full report that carries device SMART data
ATA_SMART_DATA_KEY = "ata_smart_data"

# Self-test subsection inside ata_smart_data
SELF_TEST_KEY = "self_test"

# Required children of the self-test subsection
STATUS_KEY = "status"
POLLING_MINUTES_KEY = "polling_minutes"

# Key of the human-readable label inside status
STATUS_LABEL_KEY = "string"

# Self-test kinds that report a polling duration, in declaration order.
# Enumeration output follows this order, never value or name order.
POLLING_TEST_TYPES = [
    "short",
    "extended",
    "conveyance",
]

# status.value is an unsigned 8-bit code (0 = no test running)
MAX_STATUS_VALUE = 255

MAX_REMAINING_PERCENT = 100

# Polling durations are unsigned 64-bit minute counts
MAX_POLLING_MINUTES = 2**64 - 1
