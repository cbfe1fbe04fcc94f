"""
Self-test status extraction from smartctl JSON documents.

This module turns a generic JSON-like tree (dicts, lists, scalars) into a
typed SelfTest value. Extraction runs in two stages:
1. Structural: locate the self-test subsection and confirm its required
   children are present (reports "missing")
2. Typed: strictly decode the subsection with pydantic (reports "invalid")

Keeping the stages apart means a missing field is never reported as a
type error and vice versa.

The input is the "ata_smart_data" section of ``smartctl -a -j`` output,
not the whole report. Use parse_smartctl_report() for a whole report.
Producing the tree from raw process output is the caller's job.
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from ..constants import (
    ATA_SMART_DATA_KEY,
    POLLING_MINUTES_KEY,
    SELF_TEST_KEY,
    STATUS_KEY,
)
from ..exceptions import MalformedFieldError, MissingSectionError
from ..models.self_test import SelfTest

logger = logging.getLogger(__name__)

# Placeholder path used when the input itself is not an object
DOCUMENT_PATH = "<document>"


class SelfTestExtractor:
    """
    Extractor for the live self-test status of a drive.

    Stateless: one instance can serve any number of documents, from any
    number of threads, as long as the documents are not mutated while
    being read.

    Required structure under the self-test key:
    - status: object with value (0-255) and string
    - polling_minutes: object with optional short/extended/conveyance
    """

    # Children that must exist before typed decoding is attempted
    REQUIRED_CHILDREN = [STATUS_KEY, POLLING_MINUTES_KEY]

    def __init__(self, section_key: str = SELF_TEST_KEY):
        """
        Initialize the extractor.

        Args:
            section_key: Key of the self-test subsection inside the
                         ata_smart_data section
        """
        self.section_key = section_key

    def extract(self, ata_smart_data: Mapping[str, Any]) -> SelfTest:
        """
        Locate and decode the self-test subsection.

        Args:
            ata_smart_data: The "ata_smart_data" section of a smartctl report

        Returns:
            Validated SelfTest value

        Raises:
            MissingSectionError: If the self-test subsection is absent
            MalformedFieldError: If a required field is missing or any
                field has the wrong type or range
        """
        subsection = self._locate(ata_smart_data)
        self_test = self._decode(subsection)

        logger.debug(
            f"Extracted self-test status {self_test.status.value} "
            f"({self_test.status.label!r}), running={self_test.is_running()}"
        )
        return self_test

    def _locate(self, ata_smart_data: Any) -> Mapping[str, Any]:
        """Stage 1: structural presence checks."""
        if not isinstance(ata_smart_data, Mapping):
            raise MalformedFieldError(
                DOCUMENT_PATH,
                detail=f"expected an object, got {type(ata_smart_data).__name__}",
            )

        subsection = ata_smart_data.get(self.section_key)
        if subsection is None:
            raise MissingSectionError(self.section_key)

        if not isinstance(subsection, Mapping):
            raise MalformedFieldError(
                self.section_key,
                detail=f"expected an object, got {type(subsection).__name__}",
            )

        missing = [key for key in self.REQUIRED_CHILDREN if key not in subsection]
        if missing:
            raise MalformedFieldError(
                f"{self.section_key}.{missing[0]}", reason=MalformedFieldError.MISSING
            )

        return subsection

    def _decode(self, subsection: Mapping[str, Any]) -> SelfTest:
        """Stage 2: strict typed decoding."""
        try:
            return SelfTest.model_validate(dict(subsection))
        except ValidationError as e:
            raise self._to_malformed_field_error(e) from e

    def _to_malformed_field_error(self, error: ValidationError) -> MalformedFieldError:
        # pydantic reports every failure; the first one names the field
        first = error.errors()[0]
        path = ".".join([self.section_key] + [str(part) for part in first["loc"]])

        if first["type"] == "missing":
            return MalformedFieldError(path, reason=MalformedFieldError.MISSING)
        return MalformedFieldError(path, detail=first["msg"])


_default_extractor = SelfTestExtractor()


def extract_self_test(ata_smart_data: Mapping[str, Any]) -> SelfTest:
    """
    Extract the live self-test status from an ata_smart_data section.

    Args:
        ata_smart_data: The "ata_smart_data" section of a smartctl report

    Returns:
        Validated SelfTest value

    Raises:
        MissingSectionError: If the self-test subsection is absent
        MalformedFieldError: If the subsection does not match the expected shape
    """
    return _default_extractor.extract(ata_smart_data)


def parse_smartctl_report(report: Mapping[str, Any]) -> SelfTest:
    """
    Extract the live self-test status from a whole smartctl JSON report.

    Raises:
        MissingSectionError: If ata_smart_data or the self-test subsection
            is absent
        MalformedFieldError: If the report or subsection is malformed
    """
    if not isinstance(report, Mapping):
        raise MalformedFieldError(
            DOCUMENT_PATH, detail=f"expected an object, got {type(report).__name__}"
        )

    ata_smart_data = report.get(ATA_SMART_DATA_KEY)
    if ata_smart_data is None:
        raise MissingSectionError(ATA_SMART_DATA_KEY)

    if not isinstance(ata_smart_data, Mapping):
        raise MalformedFieldError(
            ATA_SMART_DATA_KEY,
            detail=f"expected an object, got {type(ata_smart_data).__name__}",
        )

    return extract_self_test(ata_smart_data)
