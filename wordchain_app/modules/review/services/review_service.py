from __future__ import annotations

import datetime
import logging
from dataclasses import replace
from typing import List, Optional

from wordchain_app.core.error_handlers import ValidationError
from wordchain_app.core.identity import UserContext
from wordchain_app.core.signals import entry_reviewed
from wordchain_app.modules.vocabulary.repositories.base import VocabularyRepository
from wordchain_app.modules.vocabulary.schemas import VocabularyEntry
from wordchain_app.modules.vocabulary.utils import find_entry_index, sort_for_review
from ..config import ReviewPolicyConfig
from ..engine.core import DEFAULT_POLICY, StagedReviewPolicy

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Orchestrator for review sessions.
    Loads entries, calls the policy, persists and emits signals.
    """

    def __init__(self, repository: VocabularyRepository, policy: StagedReviewPolicy = DEFAULT_POLICY) -> None:
        self._repository = repository
        self._policy = policy

    def study_queue(self, user: UserContext, today: Optional[datetime.date] = None) -> List[VocabularyEntry]:
        """Entries due on or before ``today``, most overdue first."""
        today = today or datetime.date.today()
        return sort_for_review([e for e in self._repository.read_all(user) if e.is_due(today)])

    def grade(
        self,
        user: UserContext,
        entry_id: str,
        passed: bool,
        today: Optional[datetime.date] = None,
    ) -> VocabularyEntry:
        """Apply one pass/fail outcome to an entry and save it."""
        today = today or datetime.date.today()
        entries = self._repository.read_all(user)
        index = find_entry_index(entries, entry_id)
        entry = entries[index]

        previous_stage = entry.stage
        updated = entry.with_schedule(self._policy.next_state(entry.stage, bool(passed), today))
        entries[index] = updated
        self._repository.write_all(user, entries)

        entry_reviewed.send(
            self,
            user_id=user.user_id,
            entry=updated,
            passed=bool(passed),
            previous_stage=previous_stage,
        )
        return updated

    def postpone(
        self,
        user: UserContext,
        entry_id: str,
        days: int = ReviewPolicyConfig.POSTPONE_DAYS,
        today: Optional[datetime.date] = None,
    ) -> VocabularyEntry:
        """Push an entry to ``today + days`` without grading it."""
        if (
            not isinstance(days, int)
            or isinstance(days, bool)
            or not 1 <= days <= ReviewPolicyConfig.MAX_POSTPONE_DAYS
        ):
            raise ValidationError(
                f'days must be an integer between 1 and {ReviewPolicyConfig.MAX_POSTPONE_DAYS}',
                errors={'days': days},
            )
        today = today or datetime.date.today()
        entries = self._repository.read_all(user)
        index = find_entry_index(entries, entry_id)
        entries[index] = replace(entries[index], next_due=today + datetime.timedelta(days=days))
        self._repository.write_all(user, entries)
        logger.debug("Postponed %s by %d day(s) for %s", entry_id, days, user.user_id)
        return entries[index]
