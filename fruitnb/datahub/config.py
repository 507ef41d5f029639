"""Static configuration for training data, candidate classes and paths."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, TypedDict

from ..core.records import FeatureKind


# JSON layout of one candidate class entry; only "class" is required.
CandidatePayload = TypedDict(
    "CandidatePayload",
    {"class": str, "hue": List[int], "saturation": List[int], "value": List[int]},
    total=False,
)


# Default locations used by the Typer CLI; callers may override these.
DEFAULT_TRAINING_PATH = Path("data/training.csv")
DEFAULT_CLASSES_PATH = Path("data/classes.json")

# Number of fruit classes the reference pipeline was calibrated with.
DEFAULT_CLASS_COUNT = 7

LABEL_COLUMN = "class"
TRAINING_COLUMNS: Dict[FeatureKind, str] = {
    FeatureKind.HUE: "hue",
    FeatureKind.SATURATION: "saturation",
    FeatureKind.VALUE: "value",
    FeatureKind.COMPACTNESS: "compactness",
    FeatureKind.TEXTURE: "texture",
}


__all__ = [
    "CandidatePayload",
    "DEFAULT_CLASSES_PATH",
    "DEFAULT_CLASS_COUNT",
    "DEFAULT_TRAINING_PATH",
    "LABEL_COLUMN",
    "TRAINING_COLUMNS",
]
