# app.py — 8-Puzzle UI (start/goal entry in sidebar, A* solve, step-by-step playback)
from typing import Optional
import logging, random, json, time
import streamlit as st

from config import DEFAULT_GOAL, DEFAULT_START, SHUFFLE_STEPS, configure_logging
from puzzle import Grid, PuzzleError, neighbors, parse_grid
from render import render_image
from solver_impl import solve

configure_logging()
logger = logging.getLogger(__name__)


def shuffle_via_legal_moves(goal: Grid, steps: int = SHUFFLE_STEPS) -> Grid:
    """Shuffle by valid moves from the goal (always solvable)."""
    g: Grid = goal
    prev: Optional[Grid] = None
    for _ in range(steps):
        opts = [nxt for _, nxt in neighbors(g)]
        if prev in opts and len(opts) > 1:
            opts = [x for x in opts if x != prev]  # avoid immediate undo
        prev, g = g, random.choice(opts)
    return g


def _fmt(g: Grid) -> str:
    return "".join(str(v) for v in g)


def _clear_solution():
    ss.result, ss.step, ss.last_tick = None, 0, 0.0


#  Streamlit UI
st.set_page_config(page_title="8-Puzzle", layout="centered")
st.title("8-Puzzle")
st.caption("Enter start and goal → Solve (A*, Manhattan distance) → Step-by-step.")

# Session state
ss = st.session_state
if "start" not in ss: ss.start = DEFAULT_START
if "goal" not in ss: ss.goal = DEFAULT_GOAL
if "result" not in ss: ss.result = None           # SolveResult | None
if "step" not in ss: ss.step = 0
if "last_tick" not in ss: ss.last_tick = 0.0

#  SIDEBAR: controls
st.sidebar.header("States")
start_text = st.sidebar.text_input("Start (9 digits, 0 = blank)", _fmt(ss.start))
goal_text = st.sidebar.text_input("Goal (9 digits, 0 = blank)", _fmt(ss.goal))
try:
    start_in, goal_in = parse_grid(start_text), parse_grid(goal_text)
    if (start_in, goal_in) != (ss.start, ss.goal):
        ss.start, ss.goal = start_in, goal_in
        _clear_solution()
    inputs_ok = True
except PuzzleError as e:
    st.sidebar.error(str(e))
    inputs_ok = False

shuffle_steps = st.sidebar.slider("Shuffle moves", 10, 100, SHUFFLE_STEPS, 5)

st.sidebar.subheader("Autoplay solution")
auto_play = st.sidebar.checkbox("Enable autoplay", value=False, key="autoplay")
auto_speed_ms = st.sidebar.slider("Speed (ms/step)", 100, 1500, 300, 50)

#  MAIN: top buttons
col1, col2, col3 = st.columns(3)

if col1.button("Shuffle"):
    ss.start = shuffle_via_legal_moves(ss.goal, shuffle_steps)
    _clear_solution()
    st.rerun()

if col2.button("Solve", disabled=not inputs_ok):
    try:
        ss.result = solve(ss.start, ss.goal)
        ss.step, ss.last_tick = 0, 0.0
    except PuzzleError as e:
        ss.result = None
        logger.info("solve failed: %s", e)
        st.error(f"Solver error: {e}")

if col3.button("Reset"):
    ss.start, ss.goal = DEFAULT_START, DEFAULT_GOAL
    _clear_solution()
    st.rerun()

#  Playback + stats
res = ss.result
if res is not None:
    st.caption(f"Expanded: {res.expanded}  •  Generated: {res.generated}  •  "
               f"Time: {res.elapsed * 1000:0.1f} ms")

if res is not None and res.cost > 0:
    last_idx = res.cost
    ss.step = min(max(ss.step, 0), last_idx)

    st.write(f"Solution length: **{last_idx}** moves")
    c1, c2, c3 = st.columns(3)
    if c1.button("⬅️ Prev", disabled=ss.step <= 0):
        ss.step = max(0, ss.step - 1)
        ss.last_tick = 0.0
        st.rerun()
    if c2.button("➡️ Next", disabled=ss.step >= last_idx):
        ss.step = min(last_idx, ss.step + 1)
        ss.last_tick = 0.0
        st.rerun()
    if c3.button("⏩ End", disabled=ss.step >= last_idx):
        ss.step = last_idx
        ss.last_tick = 0.0
        st.rerun()

    current = res.steps[ss.step]
    display_state = current.grid
    caption = f"Step {ss.step}/{last_idx}"
    if current.direction is not None:
        caption += f", blank moved {current.direction}"
    st.write("Moves: " + " ".join(str(d) for d in res.moves))
else:
    last_idx = 0
    display_state = ss.start
    caption = "Already solved" if res is not None else "Start state"

#  Show current frame (image)
left, right = st.columns(2)
left.image(render_image(display_state), caption=caption, use_container_width=True)
right.image(render_image(ss.goal), caption="Goal", use_container_width=True)

#  Autoplay tick (render, then schedule next step)
if res is not None and auto_play and ss.step < last_idx:
    now_ms = time.time() * 1000.0
    if ss.last_tick == 0.0:
        ss.last_tick = now_ms
    remaining_ms = max(0.0, ss.last_tick + auto_speed_ms - now_ms)
    if remaining_ms > 0:
        time.sleep(remaining_ms / 1000.0)
    ss.step = min(last_idx, ss.step + 1)
    ss.last_tick = time.time() * 1000.0
    st.rerun()

#  Download solution as JSON
if res is not None:
    data = {
        "start": list(ss.start),
        "goal": list(ss.goal),
        "moves": [str(d) for d in res.moves],
        "path": [{"move": str(s.direction) if s.direction else None, "state": list(s.grid)}
                 for s in res.steps],
    }
    st.download_button("Download solution (JSON)",
                       data=json.dumps(data, indent=2),
                       file_name="solution.json",
                       mime="application/json")
