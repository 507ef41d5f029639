"""Validity policies deciding which training records feed the statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

import numpy as np

from .records import FeatureKind, TrainingRecord

STRICT_FEATURES: Tuple[FeatureKind, ...] = tuple(FeatureKind)
# Compactness is not checked when averaging in the legacy rule.
LEGACY_MEAN_FEATURES: Tuple[FeatureKind, ...] = (
    FeatureKind.HUE,
    FeatureKind.SATURATION,
    FeatureKind.VALUE,
    FeatureKind.TEXTURE,
)


def is_present(value: object) -> bool:
    """True when a feature value is set: not None, not NaN and not zero."""
    if value is None:
        return False
    number = float(value)  # type: ignore[arg-type]
    if np.isnan(number):
        return False
    return number != 0.0


def has_features(record: TrainingRecord, features: Tuple[FeatureKind, ...]) -> bool:
    return all(is_present(record.feature(kind)) for kind in features)


class ValidityPolicy(Protocol):
    """Strategy object that filters training records."""

    name: str

    def accepts_for_mean(self, record: TrainingRecord) -> bool:
        """Return True if the record contributes to the feature mean."""
        return True

    def accepts_for_spread(self, record: TrainingRecord) -> bool:
        """Return True if the record contributes to the standard deviation."""
        return True


@dataclass(frozen=True)
class StrictValidity:
    """A record counts only when all five features are present, for mean and SD alike."""

    name: str = "strict"

    def accepts_for_mean(self, record: TrainingRecord) -> bool:
        return has_features(record, STRICT_FEATURES)

    def accepts_for_spread(self, record: TrainingRecord) -> bool:
        return has_features(record, STRICT_FEATURES)


@dataclass(frozen=True)
class LegacyValidity:
    """Mean ignores compactness when filtering while SD requires all five features."""

    name: str = "legacy"

    def accepts_for_mean(self, record: TrainingRecord) -> bool:
        return has_features(record, LEGACY_MEAN_FEATURES)

    def accepts_for_spread(self, record: TrainingRecord) -> bool:
        return has_features(record, STRICT_FEATURES)


DEFAULT_VALIDITY = StrictValidity()
