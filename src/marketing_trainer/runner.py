"""
Marketing Budget Trainer console runner

Practice in the terminal, or print a progress summary.

Usage:
    python -m marketing_trainer.runner --user Alex --mode allocation --level Basic
    python -m marketing_trainer.runner --user Alex --mode projection
    python -m marketing_trainer.runner --summary
    python -m marketing_trainer.runner --summary --user Alex
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from marketing_trainer.answer_parser import parse_number
from marketing_trainer.domain.constants import ALLOCATION, LEVELS, SCENARIO_KINDS
from marketing_trainer.domain.value_objects import AllocationResult, ProjectionResult
from marketing_trainer.infrastructure.progress_store import CsvProgressStore, ProgressStoreError
from marketing_trainer.infrastructure.scenario_store import JsonScenarioStore
from marketing_trainer.trainer_config import TrainerConfig, load_config
from marketing_trainer.use_cases.progress import summarize_progress
from marketing_trainer.use_cases.session import PracticeSession
from marketing_trainer.use_cases.submission import (
    AllocationTotalError,
    IncompleteAnswerError,
    channel_spend,
    submit_allocation,
    submit_projection,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Marketing Budget Trainer: practice budget allocation and campaign projections",
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Your name (required unless --summary is given)",
    )
    parser.add_argument(
        "--mode",
        choices=SCENARIO_KINDS,
        default=ALLOCATION,
        help="Practice mode (default: allocation)",
    )
    parser.add_argument(
        "--level",
        choices=LEVELS,
        default="Basic",
        help="Allocation difficulty level (default: Basic)",
    )
    parser.add_argument(
        "--scenario-pack",
        default=None,
        help="Scenario pack JSON (default: TRAINER_SCENARIO_PACK from .env)",
    )
    parser.add_argument(
        "--progress-path",
        default=None,
        help="Progress log CSV (default: TRAINER_PROGRESS_PATH from .env)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a progress summary instead of practicing",
    )
    args = parser.parse_args(argv)
    if not args.summary and not (args.user and args.user.strip()):
        parser.error("--user is required to practice")
    return args


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _print_allocation_result(result: AllocationResult) -> None:
    print(f"\n  Score: {result.score}/100")
    for message in result.messages:
        print(f"  {message}")
    print("\n  Channel Feedback")
    for channel, message in result.channel_feedback.items():
        print(f"    {channel}: {message}")
    print()


def _print_projection_result(result: ProjectionResult) -> None:
    print(f"\n  Score: {result.score}/100")
    print(f"  {result.message}\n")
    for metric, detail in result.per_metric.items():
        if detail.is_correct:
            print(f"    {metric}: Correct! (Deviation: {detail.deviation_percent:.1f}%)")
        else:
            print(
                f"    {metric}: Your answer: {detail.user_value:.2f} | "
                f"Correct: {detail.correct_value:.2f} | Deviation: {detail.deviation_percent:.1f}%"
            )
    print()


def _practice_allocation(session: PracticeSession, store: CsvProgressStore) -> None:
    scenario = session.current_scenario
    print(f"Total budget: ${scenario.total_budget:,.0f}")
    print(f"Goal: {scenario.goal}\n")
    print("Allocate your budget (%)")
    while True:
        raw = {}
        for channel in scenario.channels:
            raw[channel] = _ask(f"  {channel}: ")
            spend = channel_spend(parse_number(raw[channel]), scenario.total_budget)
            print(f"    = ${spend:,.0f}")
        try:
            result = submit_allocation(session, raw, store)
        except AllocationTotalError as e:
            print(f"\n  {e}. Try again.\n")
            continue
        _print_allocation_result(result)
        return


def _practice_projection(session: PracticeSession, store: CsvProgressStore, config: TrainerConfig) -> None:
    scenario = session.current_scenario
    print("Campaign Metrics")
    for name, value in scenario.metrics.items():
        label = name.replace("_", " ")
        shown = f"{value * 100:.1f}%" if 0 < value < 1 else f"{value:,g}"
        print(f"  {label}: {shown}")
    print()

    unlock = config.practice.hint_unlock_failures
    if session.can_show_hints(unlock):
        print("  Having trouble? Hints are now available for each metric.\n")

    print("Calculate the following metrics")
    while True:
        raw = {}
        for metric in scenario.answer_key:
            if session.can_show_hints(unlock) and scenario.hint_for(metric):
                print(f"    Hint: {scenario.hint_for(metric)}")
            raw[metric] = _ask(f"  {metric}: ")
        try:
            result = submit_projection(session, raw, store, config.practice)
        except IncompleteAnswerError as e:
            print(f"\n  {e}\n")
            continue
        _print_projection_result(result)
        return


def run_practice(args: argparse.Namespace, config: TrainerConfig) -> int:
    scenario_store = JsonScenarioStore(config.storage.scenario_pack)
    progress_store = CsvProgressStore(config.storage.progress_path)
    level = args.level if args.mode == ALLOCATION else None
    session = PracticeSession.start(args.user, args.mode, scenario_store, level=level)

    print(f"\n=== Welcome, {session.user_name}! ===\n")
    if session.is_empty:
        print("No scenarios available")
        return 1

    while True:
        scenario = session.current_scenario
        header = level if level else "Projection Builder"
        print(f"=== [{header}] {scenario.title} (Attempt #{session.attempt_number}) ===\n")
        print(f"{scenario.description}\n")

        if session.kind == ALLOCATION:
            _practice_allocation(session, progress_store)
        else:
            _practice_projection(session, progress_store, config)

        options = "[r]etry"
        if session.has_next:
            options += ", [n]ext scenario"
        choice = _ask(f"{options}, [q]uit: ").lower()
        if choice.startswith("r"):
            session.try_again()
        elif choice.startswith("n") and session.has_next:
            session.next_scenario()
        else:
            return 0


def run_summary(args: argparse.Namespace, config: TrainerConfig) -> int:
    store = CsvProgressStore(config.storage.progress_path)
    try:
        progress_df = store.load()
    except ProgressStoreError as e:
        print(f"ERROR: {e}")
        return 1
    user = args.user.strip() if args.user else None
    summary = summarize_progress(progress_df, user_name=user)
    if summary.empty:
        print("No progress recorded yet.")
        return 0

    print("=== Progress Summary ===\n")
    print(f"  {'User':<20} {'Mode':<11} {'Scenario':<28} {'Attempts':>8} {'Best':>5} {'Latest':>6} {'Mean':>6}")
    print(f"  {'-'*20} {'-'*11} {'-'*28} {'-'*8} {'-'*5} {'-'*6} {'-'*6}")
    for _, row in summary.iterrows():
        print(
            f"  {row['user_name']:<20} "
            f"{row['scenario_kind']:<11} "
            f"{row['scenario_id']:<28} "
            f"{row['attempts']:>8} "
            f"{row['best_score']:>5} "
            f"{row['latest_score']:>6} "
            f"{row['mean_score']:>6.1f}"
        )
    print()
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    config = load_config()
    logging.basicConfig(level=config.logging.level, format="%(levelname)s %(name)s: %(message)s")

    if args.scenario_pack:
        config.storage.scenario_pack = args.scenario_pack
    if args.progress_path:
        config.storage.progress_path = args.progress_path

    if args.summary:
        return run_summary(args, config)
    try:
        return run_practice(args, config)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
