"""Observers receiving per-feature densities and posteriors while scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from .records import FeatureKind


class PosteriorObserver(Protocol):
    """Receives diagnostic events from the posterior aggregator."""

    def on_feature_density(self, class_label: str, feature: FeatureKind, density: float) -> None:
        """Called once per evaluated feature, texture included."""

    def on_posterior(self, class_label: str, score: float) -> None:
        """Called once per class after the product is formed."""


@dataclass
class ConsoleObserver:
    """Prints a trace line for every density and posterior."""

    precision: int = 6
    tag: str = "[bayes]"
    write: Callable[[str], None] = field(default=print, repr=False)

    def on_feature_density(self, class_label: str, feature: FeatureKind, density: float) -> None:
        self.write(f"{self.tag} P({feature.trace_name}|{class_label}) = {density:.{self.precision}g}")

    def on_posterior(self, class_label: str, score: float) -> None:
        self.write(f"{self.tag} posterior({class_label}) = {score:.{self.precision}g}")
