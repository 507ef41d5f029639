"""Tests for scoring every candidate class."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fruitnb.core.cache import StatisticsCache
from fruitnb.core.posterior import PosteriorConfig, posterior
from fruitnb.core.records import ClassCandidate, FeatureKind, HsvRange, Sample, TrainingRecord
from fruitnb.core.scoring import PosteriorEntry, PosteriorResult, score_all_classes


def _training() -> list[TrainingRecord]:
    rows = [
        ("apple", 10.0, 150.0, 120.0, 0.80, 3.0),
        ("apple", 14.0, 160.0, 130.0, 0.85, 4.0),
        ("apple", 12.0, 170.0, 125.0, 0.90, 5.0),
        ("orange", 20.0, 220.0, 200.0, 0.95, 6.0),
        ("orange", 22.0, 230.0, 210.0, 0.92, 7.0),
        ("orange", 24.0, 240.0, 205.0, 0.97, 6.5),
    ]
    return [
        TrainingRecord(class_label=label, hue=h, saturation=s, value=v, compactness=c, texture=t)
        for label, h, s, v, c, t in rows
    ]


SAMPLE = Sample(hue=21.0, saturation=225.0, value=204.0, compactness=0.94, texture=6.0)


def _candidates() -> list[ClassCandidate]:
    return [
        ClassCandidate("apple", HsvRange(h1=0, h2=15, h3=170, h4=180, s1=100, s2=255, v1=60, v2=255)),
        ClassCandidate("kiwi"),
        ClassCandidate("orange", HsvRange(h1=10, h2=25, s1=150, s2=255, v1=100, v2=255)),
    ]


# ---------------------------------------------------------------------------
# Completeness and order


def test_one_entry_per_candidate_in_order() -> None:
    result = score_all_classes(_training(), _candidates(), SAMPLE)
    assert len(result) == 3
    assert result.labels == ["apple", "kiwi", "orange"]


def test_entries_match_individual_posteriors() -> None:
    records = _training()
    result = score_all_classes(records, _candidates(), SAMPLE)
    for entry in result:
        assert entry.score == posterior(records, entry.class_label, SAMPLE)


def test_all_zero_scores_still_visit_every_candidate() -> None:
    result = score_all_classes([], ["a", "b", "c", "d"], SAMPLE)
    assert result.labels == ["a", "b", "c", "d"]
    assert result.scores == [0.0, 0.0, 0.0, 0.0]
    assert result.best() is None


def test_duplicate_candidates_are_scored_each_time() -> None:
    result = score_all_classes(_training(), ["orange", "orange"], SAMPLE)
    assert result.labels == ["orange", "orange"]
    assert result.scores[0] == result.scores[1]


def test_plain_string_candidates_are_accepted() -> None:
    records = _training()
    as_strings = score_all_classes(records, ["apple", "kiwi", "orange"], SAMPLE)
    as_records = score_all_classes(records, _candidates(), SAMPLE)
    assert as_strings.scores == as_records.scores


def test_unsupported_candidate_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        score_all_classes(_training(), [42], SAMPLE)  # type: ignore[list-item]


# ---------------------------------------------------------------------------
# Determinism and snapshots


def test_repeated_calls_are_bit_identical() -> None:
    records = _training()
    first = score_all_classes(records, _candidates(), SAMPLE)
    second = score_all_classes(records, _candidates(), SAMPLE)
    assert first.scores == second.scores
    assert first == second


def test_one_shot_iterator_is_scored_like_a_list() -> None:
    records = _training()
    from_list = score_all_classes(records, _candidates(), SAMPLE)
    from_iterator = score_all_classes(iter(records), _candidates(), SAMPLE)
    assert from_iterator.scores == from_list.scores
    assert from_iterator.scores[2] > 0


def test_cache_preserves_scores_and_is_reused() -> None:
    records = _training()
    cache = StatisticsCache()
    uncached = score_all_classes(records, _candidates(), SAMPLE)
    cached = score_all_classes(records, _candidates(), SAMPLE, cache=cache)
    assert cached.scores == uncached.scores
    assert cache.misses == 3 * len(FeatureKind)
    assert cache.hits == 0

    score_all_classes(records, _candidates(), SAMPLE, cache=cache)
    assert cache.hits == 3 * len(FeatureKind)


def test_texture_mode_changes_scores_of_trained_classes() -> None:
    records = _training()
    default = score_all_classes(records, _candidates(), SAMPLE)
    with_texture = score_all_classes(records, _candidates(), SAMPLE, PosteriorConfig(include_texture=True))
    assert with_texture.scores[1] == default.scores[1] == 0.0
    assert with_texture.scores[2] != default.scores[2]


# ---------------------------------------------------------------------------
# PosteriorResult helpers


def test_best_picks_highest_score() -> None:
    result = score_all_classes(_training(), _candidates(), SAMPLE)
    best = result.best()
    assert best is not None
    assert best.class_label == "orange"
    assert result.as_dict()["kiwi"] == 0.0


def test_ranked_keeps_candidate_order_on_ties() -> None:
    result = PosteriorResult(
        entries=(
            PosteriorEntry("a", 0.1, {}),
            PosteriorEntry("b", 0.5, {}),
            PosteriorEntry("c", 0.1, {}),
        )
    )
    assert [entry.class_label for entry in result.ranked()] == ["b", "a", "c"]


def test_empty_result_has_no_best() -> None:
    result = score_all_classes(_training(), [], SAMPLE)
    assert len(result) == 0
    assert result.best() is None
