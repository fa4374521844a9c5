"""Vocabulary Service - entry CRUD, list views, stats and settings for one user."""

from __future__ import annotations

import datetime
import logging
from typing import Any, Dict, List, Optional

from wordchain_app.core.error_handlers import ConflictError, ValidationError
from wordchain_app.core.identity import UserContext
from wordchain_app.core.signals import data_cleared, entry_added, entry_deleted
from wordchain_app.modules.dictionary.engine import normalize_part_of_speech
from wordchain_app.modules.dictionary.exceptions import InvalidPartOfSpeech
from wordchain_app.modules.review.engine import DEFAULT_POLICY, StagedReviewPolicy
from wordchain_app.modules.review.schemas import Stage
from ..config import DEFAULT_SETTINGS, STATUS_FILTERS
from ..repositories.base import VocabularyRepository
from ..schemas import UserSettings, VocabularyEntry, VocabularyStats
from ..utils import find_entry_index, sort_for_listing

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = {
    'word': 'word',
    'pronunciation': 'pronunciation',
    'partOfSpeech': 'part_of_speech',
    'definition': 'definition',
}


def _require_strings(fields: Dict[str, Any]) -> None:
    """None counts as empty; any other non-string value is rejected."""
    wrong_type = {
        name: 'must be a string'
        for name, value in fields.items()
        if value is not None and not isinstance(value, str)
    }
    if wrong_type:
        raise ValidationError('Fields must be strings', errors=wrong_type)


def _clean_part_of_speech(value: Optional[str]) -> str:
    if not value or not value.strip():
        return ''
    try:
        return normalize_part_of_speech(value)
    except InvalidPartOfSpeech:
        raise ValidationError('Invalid part of speech', errors={'partOfSpeech': value})


class VocabularyService:
    """Application service over a VocabularyRepository.

    The repository is the only state; every call reads the user's list,
    works on it in memory and writes it back when it changed.
    """

    def __init__(self, repository: VocabularyRepository, policy: StagedReviewPolicy = DEFAULT_POLICY) -> None:
        self._repository = repository
        self._policy = policy

    def list_entries(
        self,
        user: UserContext,
        status: str = 'all',
        search: str = '',
        today: Optional[datetime.date] = None,
    ) -> List[VocabularyEntry]:
        """Entries matching a status filter and a search term.

        Args:
            status: one of 'all', 'new', 'consolidating', 'long-term', 'due'
            search: case-insensitive substring of the word or the definition
        """
        if status not in STATUS_FILTERS:
            raise ValidationError(f"Unknown status filter '{status}'", errors={'status': status})
        today = today or datetime.date.today()
        needle = (search or '').strip().lower()

        def matches(entry: VocabularyEntry) -> bool:
            if needle and needle not in entry.word.lower() and needle not in entry.definition.lower():
                return False
            if status == 'all':
                return True
            if status == 'due':
                return entry.is_due(today)
            return entry.status == status

        return sort_for_listing([e for e in self._repository.read_all(user) if matches(e)])

    def get_entry(self, user: UserContext, entry_id: str) -> VocabularyEntry:
        entries = self._repository.read_all(user)
        return entries[find_entry_index(entries, entry_id)]

    def add_entry(
        self,
        user: UserContext,
        word: str,
        definition: str,
        pronunciation: str = '',
        part_of_speech: str = '',
        today: Optional[datetime.date] = None,
    ) -> VocabularyEntry:
        """Store a confirmed word with the initial review schedule."""
        _require_strings({
            'word': word,
            'definition': definition,
            'pronunciation': pronunciation,
            'partOfSpeech': part_of_speech,
        })
        word = (word or '').strip()
        definition = (definition or '').strip()
        errors = {}
        if not word:
            errors['word'] = 'required'
        if not definition:
            errors['definition'] = 'required'
        if errors:
            raise ValidationError('Word and definition are required', errors=errors)

        entries = self._repository.read_all(user)
        if any(e.word.lower() == word.lower() for e in entries):
            raise ConflictError(f"'{word}' is already in the vocabulary", resource='vocabulary_entry')

        today = today or datetime.date.today()
        schedule = self._policy.initial_state(today)
        entry = VocabularyEntry(
            word=word,
            definition=definition,
            pronunciation=(pronunciation or '').strip(),
            part_of_speech=_clean_part_of_speech(part_of_speech),
            stage=schedule.stage,
            next_due=schedule.next_due,
            last_tested=schedule.last_tested,
            added_date=today,
        )
        entries.append(entry)
        self._repository.write_all(user, entries)

        entry_added.send(self, user_id=user.user_id, entry=entry)
        return entry

    def update_entry(self, user: UserContext, entry_id: str, changes: Dict[str, Any]) -> VocabularyEntry:
        """Manually edit the text fields of an entry; scheduling is untouched."""
        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError('Fields cannot be edited', errors={name: 'not editable' for name in unknown})
        _require_strings(changes)

        entries = self._repository.read_all(user)
        index = find_entry_index(entries, entry_id)
        entry = entries[index]

        for key, value in changes.items():
            value = (value or '').strip()
            if key == 'partOfSpeech':
                value = _clean_part_of_speech(value)
            elif key in ('word', 'definition') and not value:
                raise ValidationError(f"{key} cannot be empty", errors={key: 'required'})
            setattr(entry, EDITABLE_FIELDS[key], value)

        if 'word' in changes and any(
            e.id != entry.id and e.word.lower() == entry.word.lower() for e in entries
        ):
            raise ConflictError(f"'{entry.word}' is already in the vocabulary", resource='vocabulary_entry')

        self._repository.write_all(user, entries)
        return entry

    def delete_entry(self, user: UserContext, entry_id: str) -> None:
        entries = self._repository.read_all(user)
        removed = entries.pop(find_entry_index(entries, entry_id))
        self._repository.write_all(user, entries)
        entry_deleted.send(self, user_id=user.user_id, entry_id=removed.id)

    def clear(self, user: UserContext) -> int:
        """Remove every entry and the settings of the user."""
        count = len(self._repository.read_all(user))
        self._repository.clear(user)
        data_cleared.send(self, user_id=user.user_id, reason='clear', count=count)
        return count

    def stats(self, user: UserContext, today: Optional[datetime.date] = None) -> VocabularyStats:
        today = today or datetime.date.today()
        entries = self._repository.read_all(user)
        return VocabularyStats(
            total=len(entries),
            due_today=sum(1 for e in entries if e.is_due(today)),
            new=sum(1 for e in entries if e.stage == Stage.NEW),
            consolidating=sum(1 for e in entries if e.stage == Stage.CONSOLIDATING),
            long_term=sum(1 for e in entries if e.stage == Stage.LONG_TERM),
        )

    def get_settings(self, user: UserContext) -> UserSettings:
        """Stored settings layered over the defaults."""
        stored = self._repository.read_settings(user)
        values = dict(DEFAULT_SETTINGS)
        values.update(stored.values)
        return UserSettings(values=values, display_name=stored.display_name or user.display_name)

    def update_settings(
        self,
        user: UserContext,
        changes: Optional[Dict[str, Any]] = None,
        display_name: Optional[str] = None,
    ) -> UserSettings:
        if changes is not None and not isinstance(changes, dict):
            raise ValidationError('settings must be an object')

        stored = self._repository.read_settings(user)
        stored.values.update(changes or {})
        if display_name is not None:
            if not isinstance(display_name, str):
                raise ValidationError('userName must be a string', errors={'userName': 'must be a string'})
            display_name = display_name.strip()
            if not display_name:
                raise ValidationError('userName cannot be empty', errors={'userName': 'required'})
            stored.display_name = display_name[:80]
        self._repository.write_settings(user, stored)
        logger.debug("Settings saved for %s", user.user_id)
        return self.get_settings(user)
