"""Plotting utilities for classification results."""

from .posterior_summary import plot_posteriors, posterior_frame
from .save_config import PlotDestination, PlotSaveConfig

__all__ = [
    "plot_posteriors",
    "posterior_frame",
    "PlotDestination",
    "PlotSaveConfig",
]
