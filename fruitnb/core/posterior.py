"""Naive Bayes combination of per-feature densities into one class score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from .cache import StatisticsCache
from .density import feature_density
from .diagnostics import PosteriorObserver
from .records import ALL_FEATURES, FeatureKind, RecordStore, Sample, snapshot_records
from .validity import DEFAULT_VALIDITY, ValidityPolicy

# Texture is evaluated for diagnostics but only scored when explicitly requested.
SCORED_FEATURES: Tuple[FeatureKind, ...] = (
    FeatureKind.HUE,
    FeatureKind.SATURATION,
    FeatureKind.VALUE,
    FeatureKind.COMPACTNESS,
)


@dataclass
class PosteriorConfig:
    """Configuration for `posterior` and `score_all_classes`."""

    include_texture: bool = False
    validity: ValidityPolicy = field(default_factory=lambda: DEFAULT_VALIDITY)
    observer: Optional[PosteriorObserver] = None

    def validate(self) -> None:
        for attr in ("accepts_for_mean", "accepts_for_spread"):
            if not callable(getattr(self.validity, attr, None)):
                raise TypeError(f"validity policy must provide {attr}()")

    @property
    def scored_features(self) -> Tuple[FeatureKind, ...]:
        if self.include_texture:
            return SCORED_FEATURES + (FeatureKind.TEXTURE,)
        return SCORED_FEATURES


@dataclass(frozen=True)
class PosteriorBreakdown:
    """Densities of all five features for one class and the resulting score."""

    class_label: str
    densities: Mapping[FeatureKind, float]
    score: float

    def density(self, feature: FeatureKind) -> float:
        return self.densities[feature]


def posterior_breakdown(
    records: RecordStore,
    class_label: str,
    sample: Sample,
    config: Optional[PosteriorConfig] = None,
    cache: Optional[StatisticsCache] = None,
) -> PosteriorBreakdown:
    """Evaluate every feature density for `class_label` and multiply the scored ones.

    Priors are assumed equal across classes, so the prior factor is omitted.
    A zero density on any scored feature zeroes the whole score.
    """
    cfg = config or PosteriorConfig()
    cfg.validate()
    records = snapshot_records(records)

    densities: Dict[FeatureKind, float] = {}
    for feature in ALL_FEATURES:
        densities[feature] = feature_density(
            records,
            class_label,
            feature,
            sample.feature(feature),
            validity=cfg.validity,
            cache=cache,
        )
        if cfg.observer is not None:
            cfg.observer.on_feature_density(class_label, feature, densities[feature])

    score = 1.0
    for feature in cfg.scored_features:
        score *= densities[feature]

    if cfg.observer is not None:
        cfg.observer.on_posterior(class_label, score)
    return PosteriorBreakdown(class_label=class_label, densities=densities, score=score)


def posterior(
    records: RecordStore,
    class_label: str,
    sample: Sample,
    config: Optional[PosteriorConfig] = None,
    cache: Optional[StatisticsCache] = None,
) -> float:
    """Unnormalized posterior score of `class_label` for `sample`."""
    return posterior_breakdown(records, class_label, sample, config, cache).score
