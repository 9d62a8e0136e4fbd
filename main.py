"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current app state + canvas SVG (polled by the page)
  POST /api/array/generate     – generate a new random array
  POST /api/run/start          – start sorting with the selected algorithm
  POST /api/run/pause          – pause the active run
  POST /api/run/resume         – resume a paused run
  POST /api/run/stop           – abandon the run and regenerate the array
  POST /api/config/algo        – select algorithm   (idle only)
  POST /api/config/size        – set array size     (idle only, regenerates)
  POST /api/config/speed       – set steps/second   (any time)
  POST /api/compare            – record two algorithms on the current array

State management:
  One SortController per process.  Playback runs on timer threads
  (ThreadingScheduler); the page polls /api/state for the latest Step.
  Refused commands answer 400 with {"error": ...}.

Configuration:
  Defaults below, overridable with SORTVIS_* environment variables
  (SORTVIS_ARRAY_SIZE=80, SORTVIS_ALGORITHM='"quick"', SORTVIS_PORT=8000, …).
"""

import logging

from flask import Flask, render_template_string, request, jsonify

from bars import SIZE_MIN, SIZE_MAX
from algorithms import get_algorithm, list_algorithms
from engine import (
    SortController,
    ThreadingScheduler,
    Recorder,
    compare,
    SPEED_MIN,
    SPEED_MAX,
)
from ui import (
    render_canvas,
    render_legend,
    playback_controls,
    algorithm_selector,
    algorithm_card,
    range_slider,
    analytics_panel,
    comparison_panel,
    explanation_panel,
)


app = Flask(__name__)
app.config.from_mapping(
    ARRAY_SIZE=50,
    SPEED=50,
    ALGORITHM="bubble",
    SEED=None,
    HOST="127.0.0.1",
    PORT=5000,
)
app.config.from_prefixed_env("SORTVIS")


def build_controller() -> SortController:
    return SortController(
        scheduler=ThreadingScheduler(),
        size=app.config["ARRAY_SIZE"],
        algorithm=app.config["ALGORITHM"],
        speed=app.config["SPEED"],
        seed=app.config["SEED"],
    )


controller = build_controller()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def get_controller() -> SortController:
    return controller


def state_payload():
    ctl  = get_controller()
    data = ctl.state()
    step = ctl.stepper.last_step
    data["svg"] = render_canvas(ctl.bars, step)
    data["explanation"] = explanation_panel(step.explanation if step else "")
    return data


def refused(message: str):
    app.logger.info("refused: %s", message)
    return jsonify({"error": message, **get_controller().state()}), 400


def int_arg(name: str):
    data = request.get_json(silent=True) or {}
    try:
        return int(data[name])
    except (KeyError, TypeError, ValueError):
        return None


@app.errorhandler(ValueError)
def handle_value_error(e):
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    ctl   = get_controller()
    state = ctl.state()

    html = render_template_string(INDEX_TEMPLATE,
        svg=render_canvas(ctl.bars, ctl.stepper.last_step),
        algo_label=ctl.algo_info.label,
        complexity=ctl.algo_info.complexity_time,
        algo_selector=algorithm_selector(
            algorithms=list_algorithms(),
            selected_key=state["algorithm"],
            disabled=state["is_sorting"],
        ),
        size_slider=range_slider(
            "size-slider", "Array Size", state["size"], SIZE_MIN, SIZE_MAX,
            disabled=state["is_sorting"],
        ),
        speed_slider=range_slider(
            "speed-slider", "Speed", state["speed"], SPEED_MIN, SPEED_MAX,
            suffix=" steps/s",
        ),
        playback=playback_controls(state["is_sorting"], state["is_paused"]),
        legend=render_legend(),
        explanation=explanation_panel(),
        analytics=analytics_panel(),
        comparison=comparison_panel(),
        algorithms=list_algorithms(),
    )
    return html


@app.route("/api/state")
def api_state():
    return jsonify(state_payload())


# ---------------------------------------------------------------------------
# API: Array
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    size = int_arg("size")
    if not get_controller().generate(size):
        return refused("Cannot generate a new array while sorting")
    return jsonify(state_payload())


# ---------------------------------------------------------------------------
# API: Run
# ---------------------------------------------------------------------------
@app.route("/api/run/start", methods=["POST"])
def api_run_start():
    data = request.get_json(silent=True) or {}
    if not get_controller().start(data.get("algo_key")):
        return refused("A run is already in progress")
    return jsonify(state_payload())


@app.route("/api/run/pause", methods=["POST"])
def api_run_pause():
    if not get_controller().pause():
        return refused("Nothing is playing")
    return jsonify(state_payload())


@app.route("/api/run/resume", methods=["POST"])
def api_run_resume():
    if not get_controller().resume():
        return refused("Nothing is paused")
    return jsonify(state_payload())


@app.route("/api/run/stop", methods=["POST"])
def api_run_stop():
    if not get_controller().stop():
        return refused("No active run")
    return jsonify(state_payload())


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    data = request.get_json(silent=True) or {}
    algo_key = data.get("algo_key", "bubble")
    if get_algorithm(algo_key) is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

    ctl = get_controller()
    if not ctl.set_algorithm(algo_key):
        return refused("Cannot change algorithm while sorting")
    info = ctl.algo_info
    return jsonify({
        "algorithm":  info.key,
        "algo_label": info.label,
        "complexity": info.complexity_time,
        "card":       algorithm_card(info),
    })


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    size = int_arg("size")
    if size is None or size < 0:
        return jsonify({"error": "size must be a non-negative integer"}), 400
    if not get_controller().set_size(size):
        return refused("Cannot resize the array while sorting")
    return jsonify(state_payload())


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = int_arg("speed")
    if speed is None:
        return jsonify({"error": "speed must be an integer"}), 400
    ctl = get_controller()
    ctl.set_speed(speed)
    return jsonify({"speed": ctl.stepper.speed})


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data  = request.get_json(silent=True) or {}
    ctl   = get_controller()
    left  = data.get("left", ctl.algorithm)
    right = data.get("right", "quick")

    recorders = []
    for key in (left, right):
        rec = Recorder()
        rec.start(key, ctl.bars)
        rec.run_to_completion()
        recorders.append(rec)

    result = compare(*recorders)
    return jsonify({
        "left":       result.left.__dict__,
        "right":      result.right.__dict__,
        "comparison": comparison_panel(result),
        "analytics":  analytics_panel(result.left),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #header { padding: 16px 24px; border-bottom: 1px solid var(--border); }
    #header h1 { font-size: 20px; }
    #header .complexity { color: var(--text-secondary); font-size: 13px; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
    }
    #canvas-svg { max-width: 100%; max-height: 100%; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      border-top: 1px solid var(--border);
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .algo-card { margin-top: 12px; font-size: 12px; color: var(--text-secondary); }
    .algo-card .badges { display: flex; gap: 6px; margin-top: 8px; }
    .badge { border: 1px solid var(--border); border-radius: 999px; padding: 2px 8px; }

    .button-row { display: flex; gap: 8px; flex-wrap: wrap; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-weight: 600;
    }
    button.btn-secondary { background: var(--border); }
    button.btn-warn { background: var(--accent-amber); }
    button.btn-danger { background: var(--accent-rose); }
    button:disabled, select:disabled, input:disabled { opacity: 0.5; cursor: not-allowed; }

    select, input[type=range] { width: 100%; }
    select {
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 8px;
    }

    .legend-items { display: flex; flex-wrap: wrap; gap: 12px; font-size: 13px; }
    .legend-item { display: flex; align-items: center; gap: 6px; }
    .swatch { width: 14px; height: 14px; border-radius: 3px; display: inline-block; }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .placeholder { color: var(--text-secondary); font-size: 13px; }
    table { width: 100%; font-size: 13px; }
    td, th { padding: 4px; text-align: left; }
  </style>
</head>
<body>
  <div id="sidebar">
    {{ algo_selector|safe }}
    {{ size_slider|safe }}
    {{ speed_slider|safe }}
    {{ playback|safe }}
    <div class="panel">
      <h3>Compare</h3>
      <select id="compare-left">
        {% for a in algorithms %}<option value="{{ a.key }}">{{ a.label }}</option>{% endfor %}
      </select>
      <select id="compare-right">
        {% for a in algorithms %}<option value="{{ a.key }}" {% if a.key == 'quick' %}selected{% endif %}>{{ a.label }}</option>{% endfor %}
      </select>
      <div class="button-row" style="margin-top: 8px;">
        <button id="btn-compare" class="btn-secondary">Compare on this array</button>
      </div>
    </div>
    {{ legend|safe }}
  </div>

  <div id="main">
    <div id="header">
      <h1 id="algo-label">{{ algo_label }}</h1>
      <div class="complexity">Time complexity: <span id="algo-complexity">{{ complexity }}</span></div>
    </div>
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="bottom-panel">
      <div>
        <div class="panel">
          <h3>Current Step</h3>
          <div id="explanation">{{ explanation|safe }}</div>
        </div>
        <div id="analytics">{{ analytics|safe }}</div>
      </div>
      <div id="comparison">{{ comparison|safe }}</div>
    </div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function show(id, visible) {
      const el = document.getElementById(id);
      if (el) el.style.display = visible ? '' : 'none';
    }

    function apply(data) {
      if (!data || data.svg === undefined) return;
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('explanation').innerHTML = data.explanation;
      document.getElementById('algo-label').textContent = data.algo_label;
      document.getElementById('algo-complexity').textContent = data.complexity;
      show('idle-buttons', !data.is_sorting);
      show('active-buttons', data.is_sorting);
      show('btn-pause', !data.is_paused);
      show('btn-resume', data.is_paused);
      document.getElementById('algo-selector').disabled = data.is_sorting;
      document.getElementById('size-slider').disabled = data.is_sorting;
    }

    async function poll() {
      const res = await fetch('/api/state');
      const data = await res.json();
      apply(data);
      setTimeout(poll, data.status === 'running' ? 30 : 500);
    }

    document.getElementById('btn-start').addEventListener('click', async () => {
      apply(await post('/api/run/start'));
    });
    document.getElementById('btn-generate').addEventListener('click', async () => {
      apply(await post('/api/array/generate'));
    });
    document.getElementById('btn-pause').addEventListener('click', async () => {
      apply(await post('/api/run/pause'));
    });
    document.getElementById('btn-resume').addEventListener('click', async () => {
      apply(await post('/api/run/resume'));
    });
    document.getElementById('btn-stop').addEventListener('click', async () => {
      apply(await post('/api/run/stop'));
    });

    document.getElementById('algo-selector').addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.algo_label) document.getElementById('algo-label').textContent = data.algo_label;
      if (data.complexity) document.getElementById('algo-complexity').textContent = data.complexity;
      if (data.card) document.getElementById('algo-card').outerHTML = data.card;
    });

    document.getElementById('size-slider').addEventListener('input', (e) => {
      document.getElementById('size-slider-val').textContent = e.target.value;
    });
    document.getElementById('size-slider').addEventListener('change', async (e) => {
      apply(await post('/api/config/size', {size: +e.target.value}));
    });

    document.getElementById('speed-slider').addEventListener('input', async (e) => {
      document.getElementById('speed-slider-val').textContent = e.target.value;
      await post('/api/config/speed', {speed: +e.target.value});
    });

    document.getElementById('btn-compare').addEventListener('click', async () => {
      const data = await post('/api/compare', {
        left: document.getElementById('compare-left').value,
        right: document.getElementById('compare-right').value,
      });
      if (data.comparison) document.getElementById('comparison').innerHTML = data.comparison;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
    });

    poll();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("Sorting Algorithm Visualizer on http://%s:%s", host, port)
    app.run(debug=False, host=host, port=port)
