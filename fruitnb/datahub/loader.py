from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, List, Optional, cast

import pandas as pd

from ..core.records import ClassCandidate, HsvRange, TrainingRecord
from .config import CandidatePayload, DEFAULT_CLASSES_PATH, DEFAULT_TRAINING_PATH, LABEL_COLUMN, TRAINING_COLUMNS
from .helpers import ensure_mapping, to_int_band, to_optional_float


def load_training_records(path: Path = DEFAULT_TRAINING_PATH) -> Iterator[TrainingRecord]:
    """Yield TrainingRecord rows from a CSV file; blank feature cells become None."""
    # Labels are compared byte-for-byte, so keep them as raw strings.
    frame = pd.read_csv(path, dtype={LABEL_COLUMN: str}, keep_default_na=False, na_values=[""])
    required = [LABEL_COLUMN, *TRAINING_COLUMNS.values()]
    missing = [column for column in required if column not in frame.columns]
    if missing:
        raise ValueError(f"{path} is missing required columns: {', '.join(missing)}")

    for row in frame.to_dict(orient="records"):
        features = {kind.field_name: to_optional_float(row[column]) for kind, column in TRAINING_COLUMNS.items()}
        yield TrainingRecord(class_label=str(row[LABEL_COLUMN]), **features)


def load_candidates(
    path: Path = DEFAULT_CLASSES_PATH,
    expected_count: Optional[int] = None,
) -> List[ClassCandidate]:
    """Read the candidate class list, keeping file order."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON list of candidate classes")

    candidates: List[ClassCandidate] = []
    for entry in payload:
        data = cast(CandidatePayload, ensure_mapping(entry))
        label = data.get("class")
        if not isinstance(label, str) or not label:
            raise ValueError(f"Candidate entry without a class name: {entry!r}")
        candidates.append(ClassCandidate(label=label, hsv_range=_parse_range(data)))

    if expected_count is not None and len(candidates) != expected_count:
        raise ValueError(f"Expected {expected_count} candidate classes in {path}, found {len(candidates)}")
    return candidates


def _parse_range(data: CandidatePayload) -> Optional[HsvRange]:
    if not any(key in data for key in ("hue", "saturation", "value")):
        return None
    h1, h2, h3, h4 = to_int_band(data.get("hue"), 4, name="hue")
    s1, s2 = to_int_band(data.get("saturation"), 2, name="saturation")
    v1, v2 = to_int_band(data.get("value"), 2, name="value")
    return HsvRange(h1=h1, h2=h2, h3=h3, h4=h4, s1=s1, s2=s2, v1=v1, v2=v2)
