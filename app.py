# N-Queens Problem: Interactive Streamlit App
# Pick a board size, browse every placement of N non-attacking queens.
# Run: streamlit run app.py

import matplotlib.pyplot as plt
import streamlit as st

from nqueens_explorer import settings
from nqueens_explorer.cli import apply_configuration
from nqueens_explorer.plots import draw_board
from nqueens_explorer.session import SolverSession
from nqueens_explorer.stats import solutions_frame


@st.cache_resource
def load_configuration(config_path="config.json"):
    """Apply config.json once per server process; built-in defaults otherwise."""
    try:
        apply_configuration(config_path)
    except FileNotFoundError:
        print("No config.json found, using built-in defaults.")
    return config_path


def solve_again():
    """Button callback: runs before the rerun, so the page starts out loading."""
    st.session_state.solver.request(st.session_state.board_size)


# --- Page Configuration ---

st.set_page_config(page_title="N-Queens Problem", page_icon="♛", layout="wide")
load_configuration()

if "solver" not in st.session_state:
    st.session_state.solver = SolverSession()
solver = st.session_state.solver

st.title("N-Queens Problem")

board_col, controls_col = st.columns(2)

# --- Controls ---

with controls_col:
    st.header("Controls")
    st.caption("Adjust the board size and explore different solutions")
    board_size = st.slider(
        "Board Size (N)",
        min_value=settings.MIN_BOARD_SIZE,
        max_value=settings.MAX_BOARD_SIZE,
        value=settings.DEFAULT_BOARD_SIZE,
        step=1,
        key="board_size",
    )
    st.caption("Note: Larger board sizes may take longer to compute")

    light_square_color = st.color_picker("Light Square Color", settings.LIGHT_SQUARE_COLOR)
    dark_square_color = st.color_picker("Dark Square Color", settings.DARK_SQUARE_COLOR)

    # A new size supersedes whatever is still running for the old one.
    if solver.size != board_size:
        solver.request(board_size)

    solve_slot = st.empty()
    if solver.is_loading:
        solve_slot.button("Solving...", width="stretch", disabled=True)

    st.subheader("Statistics")
    stats_placeholder = st.empty()
    if solver.is_loading:
        stats_placeholder.markdown("**Total Solutions:** Calculating...")

# --- Board ---

with board_col:
    st.header("Chessboard")
    st.caption(
        f"Place {board_size} queens on a {board_size}×{board_size} chessboard "
        "so that no two queens threaten each other"
    )

    if solver.is_loading:
        with st.spinner("Solving..."):
            solver.wait()

    cursor = solver.cursor
    if len(cursor) == 0:
        st.info("No solutions found")
    else:
        fig = draw_board(cursor.current, board_size, light_square_color, dark_square_color)
        st.pyplot(fig)
        plt.close(fig)

    prev_col, label_col, next_col = st.columns([1, 2, 1])
    with prev_col:
        st.button("◀ Previous", on_click=cursor.previous, disabled=not cursor.can_navigate, width="stretch")
    with label_col:
        st.markdown(
            f"<div style='text-align: center'>{cursor.label()}</div>",
            unsafe_allow_html=True,
        )
    with next_col:
        st.button("Next ▶", on_click=cursor.next, disabled=not cursor.can_navigate, width="stretch")

# --- Statistics ---

stats = solver.stats
if not solver.is_loading:
    solve_slot.button("Solve Again", on_click=solve_again, width="stretch")

    with stats_placeholder.container():
        stat_count, stat_first = st.columns(2)
        stat_count.metric("Total Solutions", stats["count"] if stats else 0)
        stat_first.metric("First Solution", stats["first_solution"] if stats else "None")
        if stats:
            st.write(f"Nodes explored: {stats['nodes']:,}, time: {stats['time']:.3f}s")

    if stats and stats["count"]:
        with controls_col:
            frame = solutions_frame(solver.solutions, stats["size"])
            with st.expander(f"All {stats['count']} solutions (1-based columns per row)"):
                st.dataframe(frame, width="stretch")
            st.download_button(
                "Download solutions as CSV",
                data=frame.to_csv().encode("utf-8"),
                file_name=f"solutions_N{stats['size']}.csv",
                mime="text/csv",
            )

# --- About ---

with st.expander("About the N-Queens Problem", expanded=True):
    st.markdown(
        """
        The N-Queens puzzle is the problem of placing N chess queens on an N×N chessboard so that no two queens
        threaten each other. Thus, a solution requires that no two queens share the same row, column, or diagonal.

        The problem has 92 distinct solutions for an 8×8 board. If solutions that differ only by symmetry operations
        (rotations and reflections) are counted as one, the problem has 12 unique solutions. This page lists all
        raw solutions, in the order a row-by-row backtracking search finds them.
        """
    )
