"""Gaussian Naive Bayes core: statistics, densities and posterior scores."""

from .cache import StatisticsCache
from .density import feature_density, gaussian_pdf
from .diagnostics import ConsoleObserver, PosteriorObserver
from .posterior import PosteriorBreakdown, PosteriorConfig, posterior, posterior_breakdown
from .records import (
    ClassCandidate,
    ClassStatistics,
    FeatureKind,
    HsvRange,
    Sample,
    TrainingRecord,
)
from .scoring import PosteriorEntry, PosteriorResult, score_all_classes
from .statistics import estimate_statistics, feature_mean, feature_std
from .validity import LegacyValidity, StrictValidity, ValidityPolicy

__all__ = [
    "ClassCandidate",
    "ClassStatistics",
    "ConsoleObserver",
    "FeatureKind",
    "HsvRange",
    "LegacyValidity",
    "PosteriorBreakdown",
    "PosteriorConfig",
    "PosteriorEntry",
    "PosteriorObserver",
    "PosteriorResult",
    "Sample",
    "StatisticsCache",
    "StrictValidity",
    "TrainingRecord",
    "ValidityPolicy",
    "estimate_statistics",
    "feature_density",
    "feature_mean",
    "feature_std",
    "gaussian_pdf",
    "posterior",
    "posterior_breakdown",
    "score_all_classes",
]
