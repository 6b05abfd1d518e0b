"""
Marketing Budget Trainer web app

Streamlit application for budget allocation and projection practice.

Usage:
    pip install -e ".[app]"
    streamlit run src/marketing_trainer/app.py

Requires the package to be installed (e.g. via ``pip install -e .``).
"""

from __future__ import annotations

import logging

import plotly.graph_objects as go
import streamlit as st
from dotenv import load_dotenv

from marketing_trainer.answer_parser import find_invalid_fields, parse_number
from marketing_trainer.domain.constants import (
    ALLOCATION,
    LEVEL_DESCRIPTIONS,
    LEVELS,
    PROJECTION,
    REQUIRED_ALLOCATION_TOTAL,
)
from marketing_trainer.domain.value_objects import AllocationResult, ProjectionResult
from marketing_trainer.infrastructure.progress_store import CsvProgressStore, ProgressStoreError
from marketing_trainer.infrastructure.scenario_store import JsonScenarioStore
from marketing_trainer.trainer_config import TrainerConfig, load_config
from marketing_trainer.use_cases.progress import is_passing, score_history, summarize_progress
from marketing_trainer.use_cases.session import PracticeSession
from marketing_trainer.use_cases.submission import (
    AllocationTotalError,
    IncompleteAnswerError,
    allocation_total,
    channel_spend,
    is_allocation_complete,
    submit_allocation,
    submit_projection,
)

# -- Colors --
KIND_COLORS = {ALLOCATION: "#1a73e8", PROJECTION: "#00897b"}


@st.cache_resource
def _stores(scenario_pack: str, progress_path: str) -> tuple[JsonScenarioStore, CsvProgressStore]:
    return JsonScenarioStore(scenario_pack), CsvProgressStore(progress_path)


def _input_key(session: PracticeSession, name: str) -> str:
    # Unique per scenario and attempt so "Try Again" starts from empty fields
    return f"{session.kind}:{session.index}:{session.attempt_number}:{name}"


def _go_home() -> None:
    st.session_state.pop("session", None)
    st.session_state["page"] = "home"


def _render_home() -> None:
    """Name entry and mode selection."""
    st.title("Marketing Budget Trainer")
    st.caption("Master budgeting and financial projections through interactive practice")

    name = st.text_input("Your Name", value=st.session_state.get("user_name", ""), placeholder="Enter your name")
    if not name.strip():
        return
    st.session_state["user_name"] = name.strip()

    st.header(f"Welcome, {name.strip()}!")
    st.write("Choose your training mode to begin")

    col_budget, col_projection = st.columns(2)
    with col_budget:
        st.subheader("Budget Allocation Practice")
        st.write(
            "Learn how to distribute marketing budgets effectively across multiple channels. "
            "Practice with real-world scenarios and get instant feedback on your decisions."
        )
        if st.button("Start Training", key="start_allocation"):
            st.session_state["page"] = ALLOCATION
            st.rerun()
    with col_projection:
        st.subheader("Projection Builder")
        st.write(
            "Master financial calculations like CAC, LTV, ROI, and ROAS. Build projections "
            "from campaign data and understand key performance metrics."
        )
        if st.button("Start Training", key="start_projection"):
            st.session_state["page"] = PROJECTION
            st.rerun()


def _render_score_card(score: int, message_lines: list[str], config: TrainerConfig) -> None:
    text = f"**Score: {score}/100**\n\n" + "\n\n".join(message_lines)
    if is_passing(score, config.practice.passing_score):
        st.success(text)
    else:
        st.warning(text)


def _render_allocation_feedback(result: AllocationResult, config: TrainerConfig) -> None:
    _render_score_card(result.score, result.messages, config)
    st.subheader("Channel Feedback")
    for channel, message in result.channel_feedback.items():
        st.info(f"**{channel}**: {message}")


def _render_next_buttons(session: PracticeSession) -> None:
    col_retry, col_next = st.columns(2)
    with col_retry:
        if st.button("Try Again", use_container_width=True):
            session.try_again()
            st.rerun()
    with col_next:
        if session.has_next and st.button("Next Scenario", use_container_width=True):
            session.next_scenario()
            st.rerun()


def _render_allocation(config: TrainerConfig, stores) -> None:
    scenario_store, progress_store = stores
    session: PracticeSession | None = st.session_state.get("session")

    if session is None or session.kind != ALLOCATION:
        st.title("Budget Allocation Practice")
        st.write("Select your difficulty level to begin")
        for level in LEVELS:
            if st.button(f"{level}: {LEVEL_DESCRIPTIONS[level]}", key=f"level_{level}", use_container_width=True):
                st.session_state["session"] = PracticeSession.start(
                    st.session_state["user_name"], ALLOCATION, scenario_store, level=level
                )
                st.rerun()
        return

    if session.is_empty:
        st.info("No scenarios available")
        return

    scenario = session.current_scenario
    st.caption(f"{session.level} · Attempt #{session.attempt_number}")
    st.header(scenario.title)
    st.write(scenario.description)

    col_budget, col_goal = st.columns(2)
    col_budget.metric("Total Budget", f"${scenario.total_budget:,.0f}")
    col_goal.metric("Goal", scenario.goal)

    st.subheader("Allocate Your Budget (%)")
    raw: dict[str, str] = {}
    for channel in scenario.channels:
        col_label, col_input, col_spend = st.columns([3, 2, 1])
        col_label.write(channel)
        raw[channel] = col_input.text_input(
            channel,
            key=_input_key(session, channel),
            label_visibility="collapsed",
            disabled=session.is_submitted,
        )
        col_spend.write(f"${channel_spend(parse_number(raw[channel]), scenario.total_budget):,.0f}")

    invalid = find_invalid_fields(raw)
    if invalid:
        st.warning(f"Not a number, counted as 0: {', '.join(invalid)}")

    total = allocation_total(raw)
    st.metric("Total Allocation", f"{total:.1f}%")

    if not session.is_submitted:
        if st.button(
            "Submit Allocation",
            disabled=not is_allocation_complete(total),
            use_container_width=True,
            help=f"The total must equal {REQUIRED_ALLOCATION_TOTAL}%",
        ):
            try:
                submit_allocation(session, raw, progress_store)
            except AllocationTotalError as e:
                st.error(str(e))
                return
            st.rerun()
        return

    _render_allocation_feedback(session.last_result, config)
    _render_next_buttons(session)


def _render_projection_feedback(result: ProjectionResult, config: TrainerConfig) -> None:
    _render_score_card(result.score, [result.message], config)


def _render_projection(config: TrainerConfig, stores) -> None:
    scenario_store, progress_store = stores
    session: PracticeSession | None = st.session_state.get("session")
    if session is None or session.kind != PROJECTION:
        session = PracticeSession.start(st.session_state["user_name"], PROJECTION, scenario_store)
        st.session_state["session"] = session

    if session.is_empty:
        st.info("No scenarios available")
        return

    scenario = session.current_scenario
    unlock = config.practice.hint_unlock_failures
    st.caption(f"Projection Builder · Attempt #{session.attempt_number}")
    st.header(scenario.title)
    st.write(scenario.description)

    st.subheader("Campaign Metrics")
    cols = st.columns(2)
    for i, (name, value) in enumerate(scenario.metrics.items()):
        shown = f"{value * 100:.1f}%" if 0 < value < 1 else f"{value:,g}"
        cols[i % 2].metric(name.replace("_", " ").capitalize(), shown)

    st.subheader("Calculate the Following Metrics")
    raw: dict[str, str] = {}
    for metric in scenario.answer_key:
        hint = scenario.hint_for(metric)
        if session.can_show_hints(unlock) and hint:
            if st.button(f"Hint: {metric}", key=_input_key(session, f"hint_{metric}")):
                session.toggle_hint(metric, unlock)
            if metric in session.revealed_hints:
                st.caption(hint)
        raw[metric] = st.text_input(
            metric.upper(),
            key=_input_key(session, metric),
            placeholder="Enter your answer",
            disabled=session.is_submitted,
        )
        if session.is_submitted:
            detail = session.last_result.per_metric[metric]
            if detail.is_correct:
                st.success(f"Correct! (Deviation: {detail.deviation_percent:.1f}%)")
            else:
                st.error(
                    f"Your answer: {detail.user_value:.2f} | Correct: {detail.correct_value:.2f} | "
                    f"Deviation: {detail.deviation_percent:.1f}%"
                )

    if session.can_show_hints(unlock) and not session.is_submitted:
        st.warning('Having trouble? Hints are now available for each metric. Click the "Hint" button next to any field.')

    if not session.is_submitted:
        all_filled = all(v.strip() for v in raw.values())
        if st.button("Submit Answers", disabled=not all_filled, use_container_width=True):
            try:
                submit_projection(session, raw, progress_store, config.practice)
            except IncompleteAnswerError as e:
                st.error(str(e))
                return
            st.rerun()
        return

    _render_projection_feedback(session.last_result, config)
    _render_next_buttons(session)


def _render_progress(stores) -> None:
    """Score history chart and per-scenario summary for the current user."""
    _, progress_store = stores
    user = st.session_state.get("user_name", "")
    st.header("Your Progress")
    try:
        progress_df = progress_store.load()
    except ProgressStoreError as e:
        st.error(str(e))
        return

    history = score_history(progress_df, user)
    if history.empty:
        st.info("No attempts recorded yet.")
        return

    fig = go.Figure()
    for kind, color in KIND_COLORS.items():
        rows = history[history["scenario_kind"] == kind]
        if rows.empty:
            continue
        fig.add_trace(go.Scatter(
            x=rows["submission"],
            y=rows["score"],
            mode="lines+markers",
            name=kind.capitalize(),
            text=rows["scenario_id"],
            line=dict(color=color, width=2),
            marker=dict(color=color, size=8),
        ))
    fig.update_layout(
        xaxis_title="Submission",
        yaxis_title="Score",
        yaxis_range=[0, 105],
        template="plotly_white",
        height=400,
    )
    st.plotly_chart(fig, use_container_width=True)

    summary = summarize_progress(progress_df, user_name=user)
    st.dataframe(
        summary.drop(columns=["user_name"]).rename(columns={
            "scenario_kind": "Mode",
            "scenario_id": "Scenario",
            "attempts": "Attempts",
            "best_score": "Best",
            "latest_score": "Latest",
            "mean_score": "Mean",
        }),
        use_container_width=True,
        hide_index=True,
    )


def main() -> None:
    load_dotenv()
    config = load_config()
    logging.basicConfig(level=config.logging.level)

    st.set_page_config(page_title="Marketing Budget Trainer", layout="centered")
    stores = _stores(config.storage.scenario_pack, config.storage.progress_path)
    page = st.session_state.setdefault("page", "home")

    if page != "home" and not st.session_state.get("user_name"):
        page = st.session_state["page"] = "home"

    if page != "home":
        st.sidebar.markdown(f"**{st.session_state['user_name']}**")
        if st.sidebar.button("Back to Home"):
            _go_home()
            st.rerun()
        if st.sidebar.button("Progress"):
            st.session_state["page"] = "progress"
            st.rerun()

    if page == "home":
        _render_home()
    elif page == ALLOCATION:
        _render_allocation(config, stores)
    elif page == PROJECTION:
        _render_projection(config, stores)
    else:
        _render_progress(stores)


if __name__ == "__main__":
    main()
