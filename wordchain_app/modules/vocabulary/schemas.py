# File: wordchain_app/modules/vocabulary/schemas.py
from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from wordchain_app.modules.review.schemas import ScheduleState, Stage


def new_entry_id() -> str:
    return uuid.uuid4().hex[:12]


def _parse_date(value: Any) -> Optional[datetime.date]:
    if value in (None, ''):
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    # Accept full ISO timestamps as well as plain YYYY-MM-DD
    return datetime.date.fromisoformat(str(value)[:10])


def _text(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def _format_date(value: Optional[datetime.date]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class VocabularyEntry:
    """A word with its dictionary data and review state."""
    word: str
    definition: str
    next_due: datetime.date
    id: str = field(default_factory=new_entry_id)
    pronunciation: str = ''
    part_of_speech: str = ''
    stage: int = Stage.NEW
    last_tested: Optional[datetime.date] = None
    added_date: Optional[datetime.date] = None

    @property
    def status(self) -> str:
        return Stage.LABELS.get(self.stage, 'new')

    def is_due(self, today: datetime.date) -> bool:
        return self.next_due <= today

    def with_schedule(self, state: ScheduleState) -> 'VocabularyEntry':
        return replace(self, stage=state.stage, next_due=state.next_due, last_tested=state.last_tested)

    def to_dict(self) -> Dict[str, Any]:
        """Persisted layout, one JSON object per entry."""
        return {
            'id': self.id,
            'word': self.word,
            'pronunciation': self.pronunciation,
            'partOfSpeech': self.part_of_speech,
            'definition': self.definition,
            'stage': self.stage,
            'nextDue': _format_date(self.next_due),
            'lastTested': _format_date(self.last_tested),
            'addedDate': _format_date(self.added_date),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'VocabularyEntry':
        """Inverse of to_dict; raises KeyError/ValueError/TypeError on malformed data."""
        next_due = _parse_date(payload['nextDue'])
        if next_due is None:
            raise ValueError("nextDue is required")
        stage = int(payload.get('stage', Stage.NEW))
        if stage not in Stage.ALL:
            raise ValueError(f"stage out of range: {stage}")
        word = payload['word']
        if not isinstance(word, str) or not word.strip():
            raise ValueError("word must be a non-empty string")
        return cls(
            id=str(payload.get('id') or new_entry_id()),
            word=word.strip(),
            pronunciation=_text(payload, 'pronunciation'),
            part_of_speech=_text(payload, 'partOfSpeech'),
            definition=_text(payload, 'definition'),
            stage=stage,
            next_due=next_due,
            last_tested=_parse_date(payload.get('lastTested')),
            added_date=_parse_date(payload.get('addedDate')),
        )


@dataclass
class VocabularyStats:
    total: int = 0
    due_today: int = 0
    new: int = 0
    consolidating: int = 0
    long_term: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'total': self.total,
            'dueToday': self.due_today,
            'new': self.new,
            'consolidating': self.consolidating,
            'longTerm': self.long_term,
        }


@dataclass
class UserSettings:
    """Per-user preferences; unknown keys are kept as-is."""
    values: Dict[str, Any] = field(default_factory=dict)
    display_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'settings': dict(self.values), 'userName': self.display_name}
