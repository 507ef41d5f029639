"""Shared data records for the fruit classifier core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union


class FeatureKind(Enum):
    """The five attributes measured for every fruit sample."""

    HUE = 0
    SATURATION = 1
    VALUE = 2
    COMPACTNESS = 3
    TEXTURE = 4

    @property
    def field_name(self) -> str:
        """Attribute name on `TrainingRecord` and `Sample`."""
        return self.name.lower()

    @property
    def trace_name(self) -> str:
        """Short name used in diagnostic lines."""
        return _TRACE_NAMES[self]


_TRACE_NAMES = {
    FeatureKind.HUE: "hue",
    FeatureKind.SATURATION: "sat",
    FeatureKind.VALUE: "val",
    FeatureKind.COMPACTNESS: "c",
    FeatureKind.TEXTURE: "t",
}


@dataclass(frozen=True)
class TrainingRecord:
    """Single labelled training example. Unset features are `None` or zero."""

    class_label: str
    hue: Optional[float]
    saturation: Optional[float]
    value: Optional[float]
    compactness: Optional[float]
    texture: Optional[float]

    def feature(self, kind: FeatureKind) -> Optional[float]:
        return getattr(self, kind.field_name)


@dataclass(frozen=True)
class Sample:
    """Feature vector of one unlabelled observation."""

    hue: float
    saturation: float
    value: float
    compactness: float
    texture: float

    def feature(self, kind: FeatureKind) -> float:
        return float(getattr(self, kind.field_name))


@dataclass(frozen=True)
class HsvRange:
    """HSV thresholding bounds attached to a candidate class.

    ``h3``/``h4`` describe a second hue band so that reds wrapping around the
    hue axis can be gated. The classifier core never reads these values.
    """

    h1: int
    h2: int
    h3: int = 0
    h4: int = 0
    s1: int = 0
    s2: int = 0
    v1: int = 0
    v2: int = 0


@dataclass(frozen=True)
class ClassCandidate:
    """A class eligible for scoring, plus its optional threshold metadata."""

    label: str
    hsv_range: Optional[HsvRange] = None


CandidateLike = Union[ClassCandidate, str]
RecordStore = Iterable[TrainingRecord]


def snapshot_records(records: RecordStore) -> RecordStore:
    """Freeze one-shot iterators so the records can be scanned more than once."""
    if iter(records) is records:
        return tuple(records)
    return records


def candidate_label(candidate: CandidateLike) -> str:
    """Return the class label of a candidate given as a record or a plain string."""
    if isinstance(candidate, ClassCandidate):
        return candidate.label
    if isinstance(candidate, str):
        return candidate
    raise TypeError(f"Unexpected candidate type: {type(candidate)}")


@dataclass(frozen=True)
class ClassStatistics:
    """Mean and population standard deviation of one feature within one class."""

    mean: float
    std: float
    count: int

    @property
    def empty(self) -> bool:
        return self.count == 0


ALL_FEATURES: Tuple[FeatureKind, ...] = tuple(FeatureKind)
