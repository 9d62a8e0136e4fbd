"""
canvas.py — SVG Bar Renderer
=============================
Pure rendering function: bars (+ optional Step) → SVG string.

Design decisions:
  - NO mutation.  The caller passes in everything it needs and gets back
    a string.
  - Each Bar already carries its resolved BarState, so coloring is a
    dict lookup: BarState → hex color.
  - Bar height is proportional to value against VALUE_MAX so heights stay
    comparable across regenerations.
"""

from typing import Dict, Optional, Sequence

from bars import Bar, VALUE_MAX
from algorithms.step import Step


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"
    pad:    int = 10

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#60a5fa",   # blue
        "comparing": "#facc15",   # yellow
        "swapping":  "#ef4444",   # red
        "pivot":     "#a855f7",   # purple
        "sorted":    "#22c55e",   # green
    }

    bar_gap:          int = 2
    bar_radius:       int = 2
    label_color:      str = "#e6edf3"
    label_size:       int = 10
    label_max_bars:   int = 30    # value labels only when bars are wide enough

    legend_labels: Dict[str, str] = {
        "default":   "Unsorted",
        "comparing": "Comparing",
        "swapping":  "Swapping",
        "pivot":     "Pivot",
        "sorted":    "Sorted",
    }


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    bars: Sequence[Bar],
    step: Optional[Step] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        bars   : Array to draw when there is no step (fresh array).
        step   : Current Step; its bars win over `bars` when given.
        config : Visual config.
    """
    if step is not None:
        bars = step.bars

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    n = len(bars)
    if n:
        inner_w = config.width - 2 * config.pad
        inner_h = config.height - 2 * config.pad
        slot    = inner_w / n
        bar_w   = max(1.0, slot - config.bar_gap)
        show_labels = n <= config.label_max_bars

        for idx, bar in enumerate(bars):
            h = max(1.0, inner_h * bar.value / VALUE_MAX)
            x = config.pad + idx * slot
            y = config.height - config.pad - h
            fill = config.bar_colors.get(bar.state.value, config.bar_colors["default"])
            svg_parts.append(
                f'<rect class="bar bar-{bar.state.value}" data-index="{idx}" '
                f'x="{x:.2f}" y="{y:.2f}" width="{bar_w:.2f}" height="{h:.2f}" '
                f'rx="{config.bar_radius}" fill="{fill}"/>'
            )
            if show_labels:
                svg_parts.append(
                    f'<text x="{x + bar_w / 2:.2f}" y="{y - 3:.2f}" text-anchor="middle" '
                    f'font-size="{config.label_size}" fill="{config.label_color}">{bar.value}</text>'
                )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def render_legend(config: CanvasConfig = CONFIG) -> str:
    items = []
    for state, label in config.legend_labels.items():
        color = config.bar_colors[state]
        items.append(
            f'<div class="legend-item"><span class="swatch" style="background: {color};"></span>'
            f'{label}</div>'
        )
    return f"""
    <div class="panel legend">
      <h3>Color Legend</h3>
      <div class="legend-items">{''.join(items)}</div>
    </div>
    """
