from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from fruitnb.core import (
    ConsoleObserver,
    FeatureKind,
    LegacyValidity,
    PosteriorConfig,
    PosteriorResult,
    Sample,
    StatisticsCache,
    StrictValidity,
    TrainingRecord,
    estimate_statistics,
    score_all_classes,
)
from fruitnb.datahub import load_candidates, load_training_records


@dataclass(frozen=True)
class ClassificationRun:
    """Result of scoring one sample against a training file."""

    result: PosteriorResult
    record_count: int
    cache_hits: int = 0


def run_classification(
    sample: Sample,
    training_path: Path,
    classes_path: Path,
    include_texture: bool = False,
    legacy_validity: bool = False,
    trace: bool = False,
    use_cache: bool = True,
    class_count: Optional[int] = None,
) -> ClassificationRun:
    records: List[TrainingRecord] = list(load_training_records(training_path))
    candidates = load_candidates(classes_path, expected_count=class_count)
    print(f"[bayes] Loaded {len(records)} training records and {len(candidates)} candidate classes.")

    config = PosteriorConfig(
        include_texture=include_texture,
        validity=LegacyValidity() if legacy_validity else StrictValidity(),
        observer=ConsoleObserver() if trace else None,
    )
    cache = StatisticsCache() if use_cache else None
    result = score_all_classes(records, candidates, sample, config=config, cache=cache)
    return ClassificationRun(
        result=result,
        record_count=len(records),
        cache_hits=cache.hits if cache is not None else 0,
    )


def summarize_statistics(
    training_path: Path,
    classes_path: Optional[Path] = None,
    legacy_validity: bool = False,
) -> pd.DataFrame:
    """Tabulate mean/SD for every class and feature found in the training file."""
    records = list(load_training_records(training_path))
    if classes_path is not None:
        labels = [candidate.label for candidate in load_candidates(classes_path)]
    else:
        labels = list(dict.fromkeys(record.class_label for record in records))

    validity = LegacyValidity() if legacy_validity else StrictValidity()
    rows = []
    for label in labels:
        for feature in FeatureKind:
            stats = estimate_statistics(records, label, feature, validity)
            rows.append(
                {
                    "class": label,
                    "feature": feature.field_name,
                    "mean": stats.mean,
                    "std": stats.std,
                    "count": stats.count,
                }
            )
    return pd.DataFrame(rows, columns=["class", "feature", "mean", "std", "count"])
