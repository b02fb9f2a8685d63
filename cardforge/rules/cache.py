"""
Time-bounded cache for the active rule set.

The cache owns a single reference to the current RuleSet. Refreshing swaps
that reference as a whole, so concurrent readers observe either the previous
or the new rule set and never a mix of both.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .defaults import default_rule_set
from .model import RuleSet

logger = logging.getLogger(__name__)

RuleSetLoader = Callable[[], Optional[RuleSet]]

DEFAULT_TTL_SECONDS = 60.0


class RuleSetCache:
    """
    Read-mostly cache in front of a rule set loader.

    Example:
        >>> store = YamlRuleStore("config/rules.yaml")
        >>> cache = RuleSetCache(store.load, ttl=60)
        >>> rules = cache.get()
        >>> cache.invalidate()  # after store.save(...)

    When the loader returns None or fails, the built-in default rule set is
    returned and nothing is cached, so the next get() retries the loader.
    """

    def __init__(
        self,
        loader: Optional[RuleSetLoader] = None,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        fallback: Optional[RuleSet] = None,
    ):
        self.loader = loader
        self.ttl = ttl
        self.value: Optional[RuleSet] = None
        self.last_refreshed: float = 0.0
        self._clock = clock
        self._fallback = fallback
        self._lock = threading.Lock()

    def _is_fresh(self, now: float) -> bool:
        return self.value is not None and (now - self.last_refreshed) < self.ttl

    def get(self) -> RuleSet:
        """Return the cached rule set, refreshing it when the TTL has expired."""
        now = self._clock()
        value = self.value
        if value is not None and self._is_fresh(now):
            return value

        with self._lock:
            now = self._clock()
            if self._is_fresh(now):
                return self.value
            return self._refresh(now)

    def _refresh(self, now: float) -> RuleSet:
        if self.loader is None:
            return self._default()
        try:
            loaded = self.loader()
        except Exception as e:
            logger.warning("Could not load rule set, using defaults: %s", e)
            return self._default()
        if loaded is None:
            return self._default()

        self.value = loaded
        self.last_refreshed = now
        logger.debug("Rule set refreshed (version %d)", loaded.version)
        return loaded

    def _default(self) -> RuleSet:
        return self._fallback or default_rule_set()

    def invalidate(self) -> None:
        """Drop the cached rule set; the next get() reloads it."""
        with self._lock:
            self.value = None
            self.last_refreshed = 0.0


__all__ = ["RuleSetCache", "RuleSetLoader", "DEFAULT_TTL_SECONDS"]
