"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – start / generate, or pause|resume / stop
  • algorithm_selector  – dropdown with complexity labels + info card
  • range_slider        – array size and speed sliders
  • analytics_panel     – steps, comparisons, swaps, writes, …
  • comparison_panel    – side-by-side metrics of two runs
  • explanation_panel   – what the current step did

All panels are stateless; the main app stitches them together.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from engine import RunMetrics, ComparisonResult


def _disabled(flag: bool) -> str:
    return "disabled" if flag else ""


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(is_sorting: bool = False, is_paused: bool = False) -> str:
    # the same buttons always exist; the page JS toggles visibility from /api/state
    idle_style   = "" if not is_sorting else "display: none;"
    active_style = "" if is_sorting else "display: none;"
    pause_style  = "" if not is_paused else "display: none;"
    resume_style = "" if is_paused else "display: none;"

    return f"""
    <div class="panel playback-controls">
      <div class="button-row" id="idle-buttons" style="{idle_style}">
        <button id="btn-start" class="btn-primary">▶ Start Sorting</button>
        <button id="btn-generate" class="btn-secondary">↻ Generate Array</button>
      </div>
      <div class="button-row" id="active-buttons" style="{active_style}">
        <button id="btn-pause" class="btn-warn" style="{pause_style}">⏸ Pause</button>
        <button id="btn-resume" class="btn-primary" style="{resume_style}">▶ Resume</button>
        <button id="btn-stop" class="btn-danger">■ Stop</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    disabled: bool = False,
) -> str:
    options = []
    selected: Optional[AlgoInfo] = None
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        if sel:
            selected = algo
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algo-selector" {_disabled(disabled)}>
        {''.join(options)}
      </select>
      {algorithm_card(selected) if selected else ''}
    </div>
    """


def algorithm_card(algo: AlgoInfo) -> str:
    """Description plus space / stability / in-place badges."""
    badges = [f"Space {algo.complexity_space}"] if algo.complexity_space else []
    badges.append("stable" if algo.stable else "unstable")
    badges.append("in-place" if algo.in_place else "extra buffer")
    badge_html = "".join(f'<span class="badge">{b}</span>' for b in badges)
    return f"""
      <div class="algo-card" id="algo-card">
        <p>{algo.description}</p>
        <div class="badges">{badge_html}</div>
      </div>
    """


# ---------------------------------------------------------------------------
# Range Slider
# ---------------------------------------------------------------------------
def range_slider(
    slider_id: str,
    label: str,
    value: int,
    min_value: int,
    max_value: int,
    disabled: bool = False,
    suffix: str = "",
) -> str:
    return f"""
    <div class="panel range-slider">
      <h3>{label}: <span id="{slider_id}-val">{value}</span>{suffix}</h3>
      <input type="range" id="{slider_id}" min="{min_value}" max="{max_value}"
             value="{value}" {_disabled(disabled)}>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>Analytics</h3>
          <p class="placeholder">Compare two algorithms to see metrics.</p>
        </div>
        """

    status = "✅ Sorted" if metrics.sorted_ok else "❌ Not sorted"

    return f"""
    <div class="panel analytics-panel">
      <h3>Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Array Size:</td><td><strong>{metrics.array_size}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{metrics.writes}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Result:</td><td><strong>{status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>Comparison</h3>
          <p class="placeholder">Pick two algorithms and compare them on the current array.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Steps</td>
            <td>{left.total_steps}</td>
            <td>{right.total_steps}</td>
            <td>{winner_badge(comp.winner_steps)}</td>
          </tr>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Swaps</td>
            <td>{left.swaps}</td>
            <td>{right.swaps}</td>
            <td>{winner_badge(comp.winner_swaps)}</td>
          </tr>
          <tr>
            <td>Wall Time</td>
            <td>{left.wall_time_ms:.2f} ms</td>
            <td>{right.wall_time_ms:.2f} ms</td>
            <td>—</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        explanation = "Press <strong>Start Sorting</strong> to watch the algorithm step by step."
    return f"""<div class="explanation-text">{explanation}</div>"""
