"""Score every candidate class for one sample."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .cache import StatisticsCache
from .posterior import PosteriorConfig, posterior_breakdown
from .records import CandidateLike, FeatureKind, RecordStore, Sample, candidate_label, snapshot_records


@dataclass(frozen=True)
class PosteriorEntry:
    """Score of a single class, with the densities it was built from."""

    class_label: str
    score: float
    densities: Mapping[FeatureKind, float]


@dataclass(frozen=True)
class PosteriorResult:
    """Posterior scores in candidate order. Scores are relative, not probabilities."""

    entries: Tuple[PosteriorEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PosteriorEntry]:
        return iter(self.entries)

    @property
    def labels(self) -> List[str]:
        return [entry.class_label for entry in self.entries]

    @property
    def scores(self) -> List[float]:
        return [entry.score for entry in self.entries]

    def as_dict(self) -> Dict[str, float]:
        return {entry.class_label: entry.score for entry in self.entries}

    def ranked(self) -> List[PosteriorEntry]:
        """Entries by descending score; ties keep candidate order."""
        return sorted(self.entries, key=lambda entry: entry.score, reverse=True)

    def best(self) -> Optional[PosteriorEntry]:
        """Highest scoring entry, or None when no class scored above zero."""
        if not self.entries:
            return None
        top = self.ranked()[0]
        if top.score <= 0.0:
            return None
        return top


def score_all_classes(
    records: RecordStore,
    candidates: Sequence[CandidateLike],
    sample: Sample,
    config: Optional[PosteriorConfig] = None,
    cache: Optional[StatisticsCache] = None,
) -> PosteriorResult:
    """Run the posterior for each candidate, in order, exactly once each."""
    cfg = config or PosteriorConfig()
    cfg.validate()

    # Every class must see the same records.
    records = snapshot_records(records)

    entries: List[PosteriorEntry] = []
    for candidate in candidates:
        label = candidate_label(candidate)
        breakdown = posterior_breakdown(records, label, sample, cfg, cache)
        entries.append(
            PosteriorEntry(class_label=label, score=breakdown.score, densities=breakdown.densities)
        )
    return PosteriorResult(entries=tuple(entries))
