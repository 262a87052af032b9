"""
Per-request context handed to flag resolvers.
"""

from __future__ import annotations

import time
import uuid
from typing import Dict, Mapping, Optional


class RequestContext:
    """
    Request-scoped data for flag evaluation.

    Attributes:
        request_id: Correlation id for logs
        attributes: Evaluation attributes (e.g. ``product_id``)
        deadline: Monotonic time after which the caller has given up

    Example:
        >>> ctx = RequestContext(timeout=2.0)
        >>> ctx.with_attributes(product_id="OLJCESPC7Z").attributes
        {'product_id': 'OLJCESPC7Z'}
    """

    def __init__(
        self,
        request_id: Optional[str] = None,
        attributes: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        deadline: Optional[float] = None,
    ):
        self.request_id = request_id or uuid.uuid4().hex
        self.attributes: Dict[str, str] = dict(attributes or {})
        if deadline is None and timeout is not None:
            deadline = time.monotonic() + timeout
        self.deadline = deadline

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        """True once the deadline has passed."""
        return self.deadline is not None and time.monotonic() >= self.deadline

    def with_attributes(self, **attributes: str) -> "RequestContext":
        """Copy of this context with extra attributes, same deadline."""
        merged = {**self.attributes, **attributes}
        return RequestContext(
            request_id=self.request_id,
            attributes=merged,
            deadline=self.deadline,
        )

    def __repr__(self) -> str:
        return (
            f"RequestContext(request_id={self.request_id!r}, "
            f"attributes={self.attributes!r}, remaining={self.remaining()!r})"
        )
