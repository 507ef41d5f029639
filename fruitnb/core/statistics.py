"""Per-class, per-feature sample statistics over the training records."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .records import ClassStatistics, FeatureKind, RecordStore, TrainingRecord, snapshot_records
from .validity import DEFAULT_VALIDITY, ValidityPolicy


def _as_number(value: Optional[float]) -> float:
    # Unset values are accumulated as zero; only the legacy mean rule lets them through.
    if value is None or np.isnan(value):
        return 0.0
    return float(value)


def _collect(
    records: RecordStore,
    class_label: str,
    feature: FeatureKind,
    accepts: Callable[[TrainingRecord], bool],
) -> np.ndarray:
    """Gather the feature values of every accepted record whose label matches exactly."""
    values = [
        _as_number(record.feature(feature))
        for record in records
        if record.class_label == class_label and accepts(record)
    ]
    return np.asarray(values, dtype=np.float64)


def feature_mean(
    records: RecordStore,
    class_label: str,
    feature: FeatureKind,
    validity: Optional[ValidityPolicy] = None,
) -> float:
    """Mean of `feature` across the valid records of `class_label`.

    Returns 0.0 when the class has no valid records.
    """
    policy = validity or DEFAULT_VALIDITY
    values = _collect(records, class_label, feature, policy.accepts_for_mean)
    if values.size == 0:
        return 0.0
    return float(values.sum() / values.size)


def feature_std(
    records: RecordStore,
    class_label: str,
    feature: FeatureKind,
    validity: Optional[ValidityPolicy] = None,
) -> float:
    """Population standard deviation of `feature` for `class_label`.

    The deviations are taken from `feature_mean` under the same policy. A class
    without valid records yields 0.0 instead of 0/0.
    """
    return estimate_statistics(records, class_label, feature, validity).std


def estimate_statistics(
    records: RecordStore,
    class_label: str,
    feature: FeatureKind,
    validity: Optional[ValidityPolicy] = None,
) -> ClassStatistics:
    """Compute mean, standard deviation and spread count in one call."""
    records = snapshot_records(records)
    policy = validity or DEFAULT_VALIDITY
    mean = feature_mean(records, class_label, feature, policy)
    values = _collect(records, class_label, feature, policy.accepts_for_spread)
    if values.size == 0:
        return ClassStatistics(mean=mean, std=0.0, count=0)
    squared = np.square(values - mean)
    std = float(np.sqrt(squared.sum() / values.size))
    return ClassStatistics(mean=mean, std=std, count=int(values.size))
