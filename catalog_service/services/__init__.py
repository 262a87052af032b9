"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

This package provides:
- CatalogService: list/get/search with lifecycle and fault injection
- HealthReporter: SERVING / NOT_SERVING status

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐     ┌─────────────────┐
    │ CatalogService  │────▶│ FaultInjection  │──▶ FlagResolver
    └────────┬────────┘     └─────────────────┘
             │
    ┌────────▼────────┐
    │ Store / Search  │  ← Immutable catalog
    └─────────────────┘

HealthReporter sits beside CatalogService and only reads its readiness.

==============================================================================
"""

from .catalog_service import CatalogService, ServiceState
from .health_service import HealthReporter, ServingStatus

__all__ = [
    "CatalogService",
    "ServiceState",
    "HealthReporter",
    "ServingStatus",
]
