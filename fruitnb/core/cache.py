"""Optional LRU cache for per-class feature statistics."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable, Optional, Tuple

from .records import ClassStatistics, FeatureKind, RecordStore
from .statistics import estimate_statistics
from .validity import DEFAULT_VALIDITY, ValidityPolicy

StatisticsKey = Tuple[Hashable, str, FeatureKind]


class StatisticsCache:
    """Memoizes `ClassStatistics` keyed by (policy, class label, feature).

    The cache knows nothing about the record store it was filled from; owners
    must call `clear()` whenever the training records change.
    """

    def __init__(self, max_items: int = 256) -> None:
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._store: OrderedDict[StatisticsKey, ClassStatistics] = OrderedDict()
        self._max_items = max_items
        self.hits = 0
        self.misses = 0

    def get(self, key: StatisticsKey) -> Optional[ClassStatistics]:
        """Return cached statistics for `key`, updating recency, or None if missing."""
        if key not in self._store:
            return None
        stats = self._store.pop(key)
        self._store[key] = stats
        return stats

    def set(self, key: StatisticsKey, stats: ClassStatistics) -> None:
        """Insert statistics, evicting the least recently used entry when full."""
        if key in self._store:
            self._store.pop(key)
        elif len(self._store) >= self._max_items:
            self._store.popitem(last=False)
        self._store[key] = stats

    def statistics(
        self,
        records: RecordStore,
        class_label: str,
        feature: FeatureKind,
        validity: Optional[ValidityPolicy] = None,
    ) -> ClassStatistics:
        """Return cached statistics, estimating and storing them on a miss."""
        policy = validity or DEFAULT_VALIDITY
        key = (policy, class_label, feature)
        cached = self.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        stats = estimate_statistics(records, class_label, feature, policy)
        self.set(key, stats)
        return stats

    def clear(self) -> None:
        """Remove every cached entry and reset the hit counters."""
        self._store.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._store)
