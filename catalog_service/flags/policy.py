"""
==============================================================================
Fault Injection Policy Module
==============================================================================

Decides, per request, whether to simulate a failure or add latency.

Behaviour:
---------
- Each operation maps to at most one failure flag and one latency flag
- Failure injection can be narrowed to specific product ids
- Every lookup is fail-open: no resolver, an unknown flag, a resolver
  error or a timeout all mean "no injection"
- Resolver calls run in a worker thread and never outlive the request
  deadline or the configured flag timeout, whichever is shorter

Usage:
------
    policy = FaultInjectionPolicy(
        resolver=StaticFlagResolver({"productCatalogFailure": True}),
        failure_flags={Operation.GET_PRODUCT: "productCatalogFailure"},
        target_ids={"OLJCESPC7Z"},
    )
    if await policy.should_fail(Operation.GET_PRODUCT, ctx):
        raise exceptions.injected_failure(...)

==============================================================================
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Mapping, Optional

from .context import RequestContext
from .resolver import FlagResolver

if TYPE_CHECKING:
    from catalog_service.config import Settings


# Module logger
logger = logging.getLogger(__name__)


class Operation:
    """Operation names used as policy keys."""

    LIST_PRODUCTS = "ListProducts"
    GET_PRODUCT = "GetProduct"
    SEARCH_PRODUCTS = "SearchProducts"

    ALL = (LIST_PRODUCTS, GET_PRODUCT, SEARCH_PRODUCTS)


class FaultInjectionPolicy:
    """
    Flag-driven fault injection for catalog operations.

    Attributes:
        _resolver: Flag provider, or None when no provider is configured
        _failure_flags: Operation name -> failure flag name
        _target_ids: Product ids eligible for injected failure (empty = all)
        _latency_flags: Operation name -> latency flag name
        _latency: Delay in seconds applied when a latency flag is on
        _timeout: Upper bound for a single flag lookup in seconds
    """

    def __init__(
        self,
        resolver: Optional[FlagResolver] = None,
        failure_flags: Optional[Mapping[str, str]] = None,
        target_ids: Iterable[str] = (),
        latency_flags: Optional[Mapping[str, str]] = None,
        latency: float = 0.0,
        timeout: float = 0.5,
    ) -> None:
        if timeout <= 0:
            raise ValueError("Flag timeout must be positive")
        if latency < 0:
            raise ValueError("Injected latency cannot be negative")

        self._resolver = resolver
        self._failure_flags: Dict[str, str] = dict(failure_flags or {})
        self._target_ids: FrozenSet[str] = frozenset(target_ids)
        self._latency_flags: Dict[str, str] = dict(latency_flags or {})
        self._latency = latency
        self._timeout = timeout

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        resolver: Optional[FlagResolver],
    ) -> "FaultInjectionPolicy":
        """Build the policy from application settings."""
        return cls(
            resolver=resolver,
            failure_flags={Operation.GET_PRODUCT: settings.failure_flag},
            target_ids=settings.failure_product_id_list,
            latency_flags={op: settings.latency_flag for op in Operation.ALL},
            latency=settings.injected_latency_seconds,
            timeout=settings.flag_timeout_seconds,
        )

    # =========================================================================
    # FLAG LOOKUP
    # =========================================================================

    async def _resolve(self, name: str, context: RequestContext) -> bool:
        """Resolve a flag, falling back to False on any problem."""
        if self._resolver is None:
            return False

        timeout = self._timeout
        remaining = context.remaining()
        if remaining is not None:
            if remaining <= 0:
                logger.debug(f"Request {context.request_id} past deadline, flag {name} -> default")
                return False
            timeout = min(timeout, remaining)

        try:
            value = await asyncio.wait_for(
                asyncio.to_thread(self._resolver.resolve, name, context),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"⚠️ Flag {name} timed out after {timeout:.3f}s, using default")
            return False
        except Exception as e:
            logger.warning(f"⚠️ Flag {name} lookup failed ({e}), using default")
            return False

        return value is True

    # =========================================================================
    # POLICY
    # =========================================================================

    async def should_fail(self, operation: str, context: RequestContext) -> bool:
        """
        Decide whether this request should fail on purpose.

        Args:
            operation: Operation name (see ``Operation``)
            context: Request context; ``product_id`` is matched against
                the configured target ids

        Returns:
            True only if the operation has a failure flag, the request
            targets an eligible product, and the flag resolves on
        """
        flag = self._failure_flags.get(operation)
        if not flag:
            return False

        if self._target_ids and context.attributes.get("product_id") not in self._target_ids:
            return False

        return await self._resolve(flag, context)

    async def injected_latency(self, operation: str, context: RequestContext) -> float:
        """Extra delay in seconds for this request (0.0 when off)."""
        if self._latency <= 0:
            return 0.0

        flag = self._latency_flags.get(operation)
        if not flag:
            return 0.0

        return self._latency if await self._resolve(flag, context) else 0.0

    async def apply_latency(self, operation: str, context: RequestContext) -> float:
        """
        Sleep for the injected latency, capped by the request deadline.

        Returns:
            Seconds actually slept
        """
        delay = await self.injected_latency(operation, context)
        if delay <= 0:
            return 0.0

        remaining = context.remaining()
        if remaining is not None:
            delay = min(delay, remaining)

        if delay > 0:
            logger.info(f"🐢 Injecting {delay:.3f}s latency into {operation}")
            await asyncio.sleep(delay)
        return delay
