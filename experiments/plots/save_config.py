"""Where posterior charts are written on disk."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import plotly.graph_objects as go

_SLUG_PATTERN = re.compile(r"[^A-Za-z0-9_.-]+")


@dataclass(frozen=True)
class PlotDestination:
    """Resolved output paths for one figure."""

    directory: Path
    slug: str
    save_static: bool
    save_html: bool

    @property
    def png_path(self) -> Path:
        return self.directory / f"{self.slug}.png"

    @property
    def html_path(self) -> Path:
        return self.directory / f"{self.slug}.html"

    def write(self, fig: go.Figure) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        if self.save_static:
            fig.write_image(str(self.png_path), engine="kaleido")
        if self.save_html:
            fig.write_html(str(self.html_path), include_plotlyjs="cdn", full_html=True)
        print(f"[plots] Wrote {self.slug} under {self.directory}")


@dataclass(frozen=True)
class PlotSaveConfig:
    """Groups every figure of one run under ``base_dir / run_tag``."""

    base_dir: Path
    run_tag: str
    save_static: bool = True
    save_html: bool = True

    def for_plot(self, name: str) -> PlotDestination:
        slug = _SLUG_PATTERN.sub("_", name).strip("_") or "plot"
        return PlotDestination(
            directory=self.base_dir / self.run_tag,
            slug=slug,
            save_static=self.save_static,
            save_html=self.save_html,
        )


__all__ = ["PlotDestination", "PlotSaveConfig"]
