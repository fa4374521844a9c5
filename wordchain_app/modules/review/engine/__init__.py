from .core import DEFAULT_POLICY, StagedReviewPolicy, initial_schedule, schedule_next

__all__ = ["DEFAULT_POLICY", "StagedReviewPolicy", "initial_schedule", "schedule_next"]
