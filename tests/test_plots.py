"""Tests for posterior chart helpers."""

from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from experiments.plots import PlotSaveConfig, plot_posteriors, posterior_frame
from fruitnb.core.scoring import PosteriorEntry, PosteriorResult


def _result() -> PosteriorResult:
    return PosteriorResult(
        entries=(
            PosteriorEntry("apple", 1e-6, {}),
            PosteriorEntry("orange", 3e-4, {}),
            PosteriorEntry("kiwi", 0.0, {}),
        )
    )


def test_posterior_frame_flags_best_class() -> None:
    df = posterior_frame(_result())
    assert list(df["class"]) == ["apple", "orange", "kiwi"]
    assert list(df["selected"]) == [False, True, False]


def test_posterior_frame_without_winner() -> None:
    result = PosteriorResult(entries=(PosteriorEntry("apple", 0.0, {}),))
    assert not posterior_frame(result)["selected"].any()


def test_for_plot_sanitizes_slug(tmp_path: Path) -> None:
    config = PlotSaveConfig(base_dir=tmp_path, run_tag="run-1")
    destination = config.for_plot("posteriors / sample #3")
    assert destination.slug == "posteriors_sample_3"
    assert destination.html_path == tmp_path / "run-1" / "posteriors_sample_3.html"


def test_plot_posteriors_writes_html(tmp_path: Path) -> None:
    config = PlotSaveConfig(base_dir=tmp_path, run_tag="run", save_static=False)
    destination = config.for_plot("posteriors")
    plot_posteriors(_result(), save_to=destination)
    assert destination.html_path.exists()
    assert not destination.png_path.exists()


def test_plot_posteriors_skips_empty_result(tmp_path: Path) -> None:
    config = PlotSaveConfig(base_dir=tmp_path, run_tag="run", save_static=False)
    plot_posteriors(PosteriorResult(entries=()), save_to=config.for_plot("empty"))
    assert not (tmp_path / "run").exists()
