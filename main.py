"""
main.py — Sorting Visualizer Flask App
========================================
JSON API over the two playback controllers.  Rendering is left to
whatever front end consumes these routes.

Routes (<engine> is "comparison" or "radix"):
  GET  /api/algorithms               – registry listing + speed presets
  GET  /api/<engine>/state           – controller state + current step
  GET  /api/<engine>/steps           – the full step list
  POST /api/<engine>/input           – {"values": [...]} or {"text": "3, 1, 2"}
  POST /api/<engine>/random          – random input ({"seed": 7, "text": false})
  POST /api/comparison/algorithm     – {"algorithm": "quick"}
  POST /api/<engine>/order           – {"order": "desc"}
  POST /api/<engine>/start           – materialise steps, show step 0
  POST /api/<engine>/next            – advance one step
  POST /api/<engine>/prev            – rewind one step
  POST /api/<engine>/goto            – {"index": n}
  POST /api/<engine>/end             – jump to the last step
  POST /api/<engine>/reset           – back to idle, steps kept
  POST /api/<engine>/play            – toggle autoplay
  POST /api/<engine>/speed           – {"speed": 250} or {"preset": "fast"}
  POST /api/compare                  – metrics of two algorithms on one input

State management:
  Controllers own timers, so they cannot live in the cookie session.
  The Flask session only stores a random token; the controllers sit in
  an in-process dict keyed by that token.  Only the most recently used
  `SORTVIZ_MAX_SESSIONS` sessions are kept; older ones are paused and
  dropped.
"""

import logging
import os
import random
import secrets
import sys
import threading
from collections import OrderedDict
from typing import Dict, Optional

from flask import Flask, jsonify, request, session

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from settings import Settings, load_settings
from sorting import ASC, list_algorithms
from engine import (
    SPEED_PRESETS,
    ComparisonStepper,
    RadixStepper,
    Recorder,
    Stepper,
    compare,
    parse_values,
    random_values,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

settings: Settings = load_settings()

app = Flask(__name__)
app.secret_key = settings.secret_key

ENGINES = ("comparison", "radix")

# sid → controllers, least recently used first
_controllers: "OrderedDict[str, Dict[str, Stepper]]" = OrderedDict()
_controllers_lock = threading.Lock()


class UnknownEngine(LookupError):
    pass


def configure_logging(config: Optional[Settings] = None) -> None:
    config = config or settings
    logging.basicConfig(level=config.log_level_numeric(), format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_controllers() -> Dict[str, Stepper]:
    """Controllers for this browser session, created on first use."""
    sid = session.get("sid")
    if sid is None:
        sid = secrets.token_hex(8)
        session["sid"] = sid
    with _controllers_lock:
        controllers = _controllers.get(sid)
        if controllers is None:
            controllers = {
                "comparison": ComparisonStepper(),
                "radix":      RadixStepper(),
            }
            _controllers[sid] = controllers
            logger.info("new session %s", sid)
            _evict_stale_sessions()
        else:
            _controllers.move_to_end(sid)
        return controllers


def _evict_stale_sessions() -> None:
    """Drop least recently used sessions beyond the cap; their timers are stopped."""
    while len(_controllers) > settings.max_sessions:
        sid, controllers = _controllers.popitem(last=False)
        for ctrl in controllers.values():
            ctrl.pause()
        logger.info("evicted session %s", sid)


def get_controller(engine: str) -> Stepper:
    if engine not in ENGINES:
        raise UnknownEngine(engine)
    return get_controllers()[engine]


def payload() -> dict:
    return request.get_json(silent=True) or {}


def values_from(data: dict):
    if "text" in data:
        return parse_values(data["text"])
    return data.get("values", [])


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(UnknownEngine)
def handle_unknown_engine(exc: UnknownEngine):
    return jsonify({"error": f"Unknown engine: {exc}"}), 404


# ---------------------------------------------------------------------------
# API: Catalogue & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        "algorithms":    [a.to_dict() for a in list_algorithms()],
        "speed_presets": SPEED_PRESETS,
    })


@app.route("/api/<engine>/state")
def api_state(engine: str):
    return jsonify(get_controller(engine).to_dict())


@app.route("/api/<engine>/steps")
def api_steps(engine: str):
    ctrl = get_controller(engine)
    return jsonify({
        "total_steps": ctrl.total_steps,
        "steps":       [s.to_dict() for s in ctrl.steps],
    })


# ---------------------------------------------------------------------------
# API: Configuration
# ---------------------------------------------------------------------------
@app.route("/api/<engine>/input", methods=["POST"])
def api_input(engine: str):
    ctrl = get_controller(engine)
    ctrl.set_input(values_from(payload()))
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/random", methods=["POST"])
def api_random(engine: str):
    ctrl = get_controller(engine)
    data = payload()
    rng  = random.Random(data.get("seed"))
    ctrl.set_input(random_values(rng, text=data.get("text")))
    return jsonify(ctrl.to_dict())


@app.route("/api/comparison/algorithm", methods=["POST"])
def api_algorithm():
    ctrl = get_controller("comparison")
    ctrl.set_algorithm(payload().get("algorithm", "bubble"))
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/order", methods=["POST"])
def api_order(engine: str):
    ctrl = get_controller(engine)
    ctrl.set_order(payload().get("order", ASC))
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/speed", methods=["POST"])
def api_speed(engine: str):
    ctrl = get_controller(engine)
    data = payload()
    if "preset" in data:
        ctrl.set_speed_preset(data["preset"])
    else:
        ctrl.set_speed(data.get("speed"))
    return jsonify(ctrl.to_dict())


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/<engine>/start", methods=["POST"])
def api_start(engine: str):
    ctrl = get_controller(engine)
    ctrl.start()
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/next", methods=["POST"])
def api_next(engine: str):
    ctrl = get_controller(engine)
    if not ctrl.next_step():
        return jsonify({"error": "Already at last step"}), 400
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/prev", methods=["POST"])
def api_prev(engine: str):
    ctrl = get_controller(engine)
    if not ctrl.prev_step():
        return jsonify({"error": "Already at first step"}), 400
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/goto", methods=["POST"])
def api_goto(engine: str):
    ctrl = get_controller(engine)
    idx  = payload().get("index", 0)
    if not isinstance(idx, int) or not ctrl.goto_step(idx):
        return jsonify({"error": "Invalid step index"}), 400
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/end", methods=["POST"])
def api_end(engine: str):
    ctrl = get_controller(engine)
    ctrl.jump_to_end()
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/reset", methods=["POST"])
def api_reset(engine: str):
    ctrl = get_controller(engine)
    ctrl.reset()
    return jsonify(ctrl.to_dict())


@app.route("/api/<engine>/play", methods=["POST"])
def api_play(engine: str):
    ctrl = get_controller(engine)
    ctrl.toggle_autoplay()
    data = ctrl.to_dict()
    data["is_playing"] = ctrl.is_playing
    return jsonify(data)


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data   = payload()
    values = values_from(data)
    order  = data.get("order", ASC)

    left, right = Recorder(), Recorder()
    left.start(data.get("left", "bubble"), values, order)
    right.start(data.get("right", "quick"), values, order)
    left.run_to_completion()
    right.run_to_completion()

    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    configure_logging()
    host, port = settings.host, settings.port
    print("=" * 60)
    print("  Sorting Step Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{host}:{port}/api/algorithms")
    print("=" * 60)
    app.run(host=host, port=port)
