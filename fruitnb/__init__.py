"""Gaussian Naive Bayes fruit classifier."""

from .core import (
    ClassCandidate,
    FeatureKind,
    PosteriorConfig,
    PosteriorResult,
    Sample,
    TrainingRecord,
    score_all_classes,
)

__all__ = [
    "ClassCandidate",
    "FeatureKind",
    "PosteriorConfig",
    "PosteriorResult",
    "Sample",
    "TrainingRecord",
    "score_all_classes",
]
