"""Bar chart of posterior scores per candidate class."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px

from fruitnb.core import PosteriorResult
from .save_config import PlotDestination


def posterior_frame(result: PosteriorResult) -> pd.DataFrame:
    """One row per class, in candidate order, flagging the arg-max."""
    best = result.best()
    return pd.DataFrame(
        {
            "class": result.labels,
            "score": result.scores,
            "selected": [best is not None and label == best.class_label for label in result.labels],
        }
    )


def plot_posteriors(
    result: PosteriorResult,
    title: str = "Posterior score per class",
    save_to: Optional[PlotDestination] = None,
) -> None:
    """Visualize posterior scores; a log axis keeps tiny likelihoods readable."""
    if len(result) == 0:
        return

    df = posterior_frame(result)
    positive = df["score"] > 0
    fig = px.bar(
        df,
        x="score",
        y="class",
        orientation="h",
        color="selected",
        title=title,
        labels={"score": "Posterior score (unnormalized)", "class": "Class"},
        log_x=bool(positive.all()),
    )
    fig.update_layout(showlegend=False)

    if save_to:
        save_to.write(fig)
    else:
        fig.show()
