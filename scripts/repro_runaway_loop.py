#!/usr/bin/env python3
"""Repro script for a runaway polling loop.

Prints deterministic BEFORE/AFTER evidence: without a guard the loop only
stops at an artificial hard cap; with a LoopGuard it is cut off with
IterationLimitExceeded on the first tick past ``max_ticks``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Make script runnable from repo root without requiring package install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from loop_guard import IterationLimitExceeded, LoopGuard

HARD_CAP = 25


def job_finished(poll: int) -> bool:
    # Bug under repro: the status never flips to done.
    return False


def run_before() -> None:
    print("=== BEFORE (no guard) ===")
    poll = 0
    while not job_finished(poll):
        poll += 1
        if poll >= HARD_CAP:
            break
    print(f"polls={poll} stopped_by=hard_cap")
    print("note=no loop-break condition; sequence would continue until hard cap")


def run_after() -> None:
    print("\n=== AFTER (with LoopGuard) ===")
    guard = LoopGuard(10).with_message("job status poll never completed")
    print("guard", repr(guard))

    poll = 0
    try:
        while not job_finished(poll):
            guard.protect()
            poll += 1
            print(f"poll={poll} remaining={guard.remaining} tripped={guard.tripped}")
    except IterationLimitExceeded as exc:
        print(f"stopped_by=loop_guard count={exc.count} max_ticks={exc.max_ticks}")
        print(f"message={exc}")

    print("polls", poll)
    print("tripped", guard.tripped)


def main() -> None:
    run_before()
    run_after()


if __name__ == "__main__":
    main()
