"""
ui/
---
Presentation layer.

    from ui import render_canvas, render_legend
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, render_legend, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    algorithm_card,
    range_slider,
    analytics_panel,
    comparison_panel,
    explanation_panel,
)

__all__ = [
    "render_canvas",
    "render_legend",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "algorithm_card",
    "range_slider",
    "analytics_panel",
    "comparison_panel",
    "explanation_panel",
]
