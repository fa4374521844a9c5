# File: wordchain_app/modules/review/schemas.py
import datetime
from dataclasses import dataclass
from typing import Optional


# Review stages
class Stage:
    NEW = 0
    CONSOLIDATING = 1
    LONG_TERM = 2

    ALL = (NEW, CONSOLIDATING, LONG_TERM)
    LABELS = {
        NEW: 'new',
        CONSOLIDATING: 'consolidating',
        LONG_TERM: 'long-term',
    }


@dataclass(frozen=True)
class ScheduleState:
    """Scheduling fields of an entry, before or after a grading event."""
    stage: int
    next_due: datetime.date
    last_tested: Optional[datetime.date] = None
