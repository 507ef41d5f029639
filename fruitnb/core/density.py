"""Gaussian likelihood of an observed feature value given class statistics."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .cache import StatisticsCache
from .records import FeatureKind, RecordStore
from .statistics import estimate_statistics
from .validity import ValidityPolicy


def gaussian_pdf(observed: float, mean: float, std: float) -> float:
    """Univariate normal density; 0.0 whenever the spread is zero or undefined."""
    if not np.isfinite(std) or std <= 0:
        return 0.0
    variance = std * std
    if variance == 0.0:
        return 0.0
    coeff = 1.0 / (std * np.sqrt(2.0 * np.pi))
    exponent = -((observed - mean) ** 2) / (2.0 * variance)
    return float(coeff * np.exp(exponent))


def feature_density(
    records: RecordStore,
    class_label: str,
    feature: FeatureKind,
    observed: float,
    validity: Optional[ValidityPolicy] = None,
    cache: Optional[StatisticsCache] = None,
) -> float:
    """P(feature = observed | class) under a normal fit of the class's training values."""
    if cache is not None:
        stats = cache.statistics(records, class_label, feature, validity)
    else:
        stats = estimate_statistics(records, class_label, feature, validity)
    return gaussian_pdf(float(observed), stats.mean, stats.std)
