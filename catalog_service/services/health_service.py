"""
==============================================================================
Health Reporter Module
==============================================================================

Binary serving status, independent of catalog content.

The reporter only asks a readiness probe; it never runs a search or a
lookup, so an empty search result can't affect health.

==============================================================================
"""

from __future__ import annotations

import enum
import logging
from typing import Callable


# Module logger
logger = logging.getLogger(__name__)


class ServingStatus(str, enum.Enum):
    """Health status values."""
    SERVING = "SERVING"
    NOT_SERVING = "NOT_SERVING"


class HealthReporter:
    """
    Reports SERVING once the readiness probe is true.

    Example:
        >>> reporter = HealthReporter(lambda: catalog_service.is_ready)
        >>> reporter.check()
        <ServingStatus.SERVING: 'SERVING'>
    """

    def __init__(self, readiness: Callable[[], bool]) -> None:
        self._readiness = readiness

    def check(self) -> ServingStatus:
        """Current serving status."""
        if self._readiness():
            return ServingStatus.SERVING
        return ServingStatus.NOT_SERVING
