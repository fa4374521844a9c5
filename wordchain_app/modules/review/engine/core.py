from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Dict

from ..config import ReviewPolicyConfig
from ..schemas import ScheduleState, Stage


@dataclass(frozen=True)
class StagedReviewPolicy:
    """
    Fixed-interval staged scheduler.
    Pure Logic Layer: No Database, No Flask Context.

    new --pass--> consolidating --pass--> long-term --pass--> long-term;
    a fail keeps the stage and brings the entry back soon.
    """
    initial_interval_days: int = ReviewPolicyConfig.INITIAL_INTERVAL_DAYS
    pass_interval_days: Dict[int, int] = field(
        default_factory=lambda: dict(ReviewPolicyConfig.PASS_INTERVAL_DAYS)
    )
    fail_interval_days: int = ReviewPolicyConfig.FAIL_INTERVAL_DAYS
    max_stage: int = ReviewPolicyConfig.MAX_STAGE

    def initial_state(self, today: datetime.date) -> ScheduleState:
        return ScheduleState(
            stage=Stage.NEW,
            next_due=today + datetime.timedelta(days=self.initial_interval_days),
            last_tested=None,
        )

    def next_state(self, stage: int, passed: bool, today: datetime.date) -> ScheduleState:
        """Stage and due date after one grading event on ``today``."""
        if stage not in Stage.ALL:
            raise ValueError(f"Stage must be one of {Stage.ALL}, got {stage!r}")

        if passed:
            new_stage = min(stage + 1, self.max_stage)
            days = self.pass_interval_days[stage]
        else:
            new_stage = stage
            days = self.fail_interval_days

        return ScheduleState(
            stage=new_stage,
            next_due=today + datetime.timedelta(days=days),
            last_tested=today,
        )


DEFAULT_POLICY = StagedReviewPolicy()


def initial_schedule(today: datetime.date) -> ScheduleState:
    return DEFAULT_POLICY.initial_state(today)


def schedule_next(stage: int, passed: bool, today: datetime.date) -> ScheduleState:
    return DEFAULT_POLICY.next_state(stage, passed, today)
