"""
==============================================================================
Flags Package - Feature Flags & Fault Injection
==============================================================================

Classes:
--------
- RequestContext: Per-request data passed to flag lookups
- FlagResolver: Resolver protocol
- StaticFlagResolver / FileFlagResolver: Resolver implementations
- FaultInjectionPolicy: Fail-open failure/latency injection
- Operation: Operation name constants

==============================================================================
"""

from .context import RequestContext
from .policy import FaultInjectionPolicy, Operation
from .resolver import FileFlagResolver, FlagResolver, StaticFlagResolver

__all__ = [
    "RequestContext",
    "FaultInjectionPolicy",
    "Operation",
    "FlagResolver",
    "FileFlagResolver",
    "StaticFlagResolver",
]
