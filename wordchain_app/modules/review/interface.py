# File: wordchain_app/modules/review/interface.py
import datetime
from typing import Dict

from wordchain_app.modules.vocabulary.repositories import get_repository
from .engine.core import DEFAULT_POLICY
from .services.review_service import ReviewService


class ReviewInterface:
    """Public API for the review module."""

    @staticmethod
    def get_service() -> ReviewService:
        return ReviewService(get_repository())

    @staticmethod
    def preview(stage: int, today: datetime.date) -> Dict[str, Dict[str, object]]:
        """Outcome of a pass and of a fail, for the answer buttons."""
        previews = {}
        for label, passed in (('pass', True), ('fail', False)):
            state = DEFAULT_POLICY.next_state(stage, passed, today)
            previews[label] = {
                'stage': state.stage,
                'nextDue': state.next_due.isoformat(),
                'intervalDays': (state.next_due - today).days,
            }
        return previews
