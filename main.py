from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from experiments.classify import run_classification, summarize_statistics
from experiments.plots import PlotSaveConfig, plot_posteriors
from fruitnb.core import Sample
from fruitnb.datahub import DEFAULT_CLASSES_PATH, DEFAULT_TRAINING_PATH

app = typer.Typer()


@app.command()
def score(
    hue: float = typer.Option(..., "--hue", help="Sample hue."),
    saturation: float = typer.Option(..., "--saturation", help="Sample saturation."),
    value: float = typer.Option(..., "--value", help="Sample value (brightness)."),
    compactness: float = typer.Option(..., "--compactness", help="Sample compactness."),
    texture: float = typer.Option(0.0, "--texture", help="Sample texture score."),
    training: Path = typer.Option(
        DEFAULT_TRAINING_PATH,
        "--training",
        exists=True,
        dir_okay=False,
        help="CSV file with labelled training records.",
    ),
    classes: Path = typer.Option(
        DEFAULT_CLASSES_PATH,
        "--classes",
        exists=True,
        dir_okay=False,
        help="JSON list of candidate classes.",
    ),
    class_count: Optional[int] = typer.Option(
        None,
        "--class-count",
        help="Fail unless the candidate list holds exactly this many classes.",
    ),
    include_texture: bool = typer.Option(False, "--include-texture", help="Multiply the texture density into the score."),
    legacy_validity: bool = typer.Option(
        False,
        "--legacy-validity",
        help="Skip the compactness check when averaging, as the original calibration did.",
    ),
    trace: bool = typer.Option(False, "--trace", help="Print every per-feature density."),
    use_cache: bool = typer.Option(True, "--cache/--no-cache", help="Reuse statistics across classes and features."),
    plots_root: Optional[Path] = typer.Option(
        None,
        "--plots-root",
        help="Directory where the posterior chart should be saved.",
    ),
    plots_tag: Optional[str] = typer.Option(
        None,
        "--plots-tag",
        help="Folder suffix for this run (defaults to timestamp).",
    ),
) -> None:
    """
    Score one sample against every candidate class and report the arg-max.
    """
    sample = Sample(
        hue=hue,
        saturation=saturation,
        value=value,
        compactness=compactness,
        texture=texture,
    )
    try:
        run = run_classification(
            sample,
            training_path=training,
            classes_path=classes,
            include_texture=include_texture,
            legacy_validity=legacy_validity,
            trace=trace,
            use_cache=use_cache,
            class_count=class_count,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    for entry in run.result:
        print(f"{entry.class_label}\t{entry.score:.6g}")

    best = run.result.best()
    if best is None:
        print("[bayes] No class scored above zero.")
    else:
        print(f"[bayes] Best match: {best.class_label}")

    if plots_root:
        tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
        save_config = PlotSaveConfig(base_dir=plots_root / "posteriors", run_tag=tag, save_static=False)
        plot_posteriors(run.result, save_to=save_config.for_plot("posteriors"))


@app.command()
def stats(
    training: Path = typer.Option(
        DEFAULT_TRAINING_PATH,
        "--training",
        exists=True,
        dir_okay=False,
        help="CSV file with labelled training records.",
    ),
    classes: Optional[Path] = typer.Option(
        None,
        "--classes",
        exists=True,
        dir_okay=False,
        help="Restrict the table to these candidate classes.",
    ),
    legacy_validity: bool = typer.Option(False, "--legacy-validity", help="Use the original validity rule."),
) -> None:
    """
    Print the per-class mean and standard deviation of every feature.
    """
    try:
        table = summarize_statistics(training, classes_path=classes, legacy_validity=legacy_validity)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print(table.to_string(index=False))


if __name__ == "__main__":
    app()
