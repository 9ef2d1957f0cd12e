from __future__ import annotations

from typing import Dict, List, Tuple

from pingstatus.models import ProbeOutcome, Status

T1 = "2026-10-19T08:00:00.000Z"
T2 = "2026-10-19T08:05:00.000Z"
T3 = "2026-10-19T08:10:00.000Z"

UP = ProbeOutcome(status=Status.UP, status_code=200, response_time_ms=42)
DOWN = ProbeOutcome(status=Status.DOWN, status_code=503, response_time_ms=17)
UNREACHABLE = ProbeOutcome(status=Status.DOWN)


class StubProber:
    """Returns canned outcomes per url and records the calls it received."""

    def __init__(self, outcomes: Dict[str, ProbeOutcome]):
        self.outcomes = outcomes
        self.calls: List[Tuple[str, int]] = []

    def __call__(self, url: str, timeout_ms: int) -> ProbeOutcome:
        self.calls.append((url, timeout_ms))
        return self.outcomes.get(url, UNREACHABLE)
