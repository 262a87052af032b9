"""
==============================================================================
Feature Flag Resolvers
==============================================================================

Boolean flag lookup behind a single ``resolve(name, context)`` call.

Resolvers:
----------
- StaticFlagResolver: in-memory mapping (tests, local runs)
- FileFlagResolver: flagd-style JSON definition file, re-read per lookup
  so flags can be flipped without a restart

flagd File Format:
-----------------
{
  "flags": {
    "productCatalogFailure": {
      "state": "ENABLED",
      "variants": {"on": true, "off": false},
      "defaultVariant": "off"
    }
  }
}

Resolvers may raise; callers are expected to apply their own default.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol, Union

from .context import RequestContext


# Module logger
logger = logging.getLogger(__name__)


class FlagResolver(Protocol):
    """Anything that can answer a boolean flag for a request."""

    def resolve(self, name: str, context: RequestContext) -> bool:
        ...


class StaticFlagResolver:
    """
    Flag values held in memory.

    Unknown flags resolve to False.

    Example:
        >>> flags = StaticFlagResolver({"productCatalogFailure": True})
        >>> flags.resolve("productCatalogFailure", RequestContext())
        True
    """

    def __init__(self, flags: Optional[Mapping[str, bool]] = None):
        self._flags: Dict[str, bool] = dict(flags or {})

    def set(self, name: str, value: bool) -> None:
        """Set a flag value."""
        self._flags[name] = value

    def resolve(self, name: str, context: RequestContext) -> bool:
        return bool(self._flags.get(name, False))


class FileFlagResolver:
    """
    Flags read from a flagd-style JSON file.

    A flag is on when its state is ``ENABLED`` and its default variant
    maps to boolean ``true``. Missing flags are off.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def _load(self) -> Dict[str, dict]:
        """Read flag definitions; raises on unreadable or malformed files."""
        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        flags = data.get("flags") if isinstance(data, dict) else None
        if not isinstance(flags, dict):
            raise ValueError(f"Invalid flag file, expected a 'flags' object: {self._path}")
        return flags

    def resolve(self, name: str, context: RequestContext) -> bool:
        definition = self._load().get(name)
        if not isinstance(definition, dict):
            return False

        if str(definition.get("state", "")).upper() != "ENABLED":
            return False

        variants = definition.get("variants") or {}
        value = variants.get(definition.get("defaultVariant"))

        logger.debug(f"Flag {name} -> {value!r} (request {context.request_id})")
        return value is True
