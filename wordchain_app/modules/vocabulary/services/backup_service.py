"""Backup Service - whole-account export/restore and CSV export."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

import pandas as pd

from wordchain_app.core.error_handlers import ValidationError
from wordchain_app.core.identity import UserContext
from wordchain_app.core.signals import data_cleared
from wordchain_app.modules.dictionary.engine import normalize_part_of_speech
from wordchain_app.modules.dictionary.exceptions import InvalidPartOfSpeech
from ..config import BACKUP_VERSION
from ..repositories.base import VocabularyRepository
from ..schemas import UserSettings, VocabularyEntry
from ..utils import sort_for_listing

logger = logging.getLogger(__name__)

CSV_COLUMNS = ['word', 'pronunciation', 'partOfSpeech', 'definition', 'stage', 'nextDue', 'lastTested', 'addedDate']


class BackupService:
    """Moves a user's entries and settings in and out as one document."""

    def __init__(self, repository: VocabularyRepository) -> None:
        self._repository = repository

    def export_backup(self, user: UserContext) -> Dict[str, Any]:
        settings = self._repository.read_settings(user)
        return {
            'version': BACKUP_VERSION,
            'exportedAt': datetime.now(timezone.utc).isoformat(),
            'items': [entry.to_dict() for entry in self._repository.read_all(user)],
            'settings': dict(settings.values),
            'userName': settings.display_name or user.display_name,
        }

    def restore_backup(self, user: UserContext, payload: Any) -> int:
        """Replace the user's data with the backup; returns the number of entries restored."""
        if not isinstance(payload, dict):
            raise ValidationError('Backup must be a JSON object')

        items = payload.get('items')
        settings = payload.get('settings', {})
        user_name = payload.get('userName')
        if not isinstance(items, list):
            raise ValidationError('Backup has no items list', errors={'items': 'expected a list'})
        if not isinstance(settings, dict):
            raise ValidationError('Backup settings must be an object', errors={'settings': 'expected an object'})

        entries = []
        bad_rows = {}
        seen_ids = set()
        for index, item in enumerate(items):
            try:
                entry = VocabularyEntry.from_dict(item)
                if entry.part_of_speech:
                    entry.part_of_speech = normalize_part_of_speech(entry.part_of_speech)
            except (InvalidPartOfSpeech, KeyError, ValueError, TypeError, AttributeError) as exc:
                bad_rows[str(index)] = str(exc)
                continue
            if entry.id in seen_ids:
                bad_rows[str(index)] = f"duplicate id {entry.id!r}"
                continue
            seen_ids.add(entry.id)
            entries.append(entry)
        if bad_rows:
            raise ValidationError('Backup contains invalid items', errors=bad_rows)

        self._repository.write_all(user, entries)
        self._repository.write_settings(
            user,
            UserSettings(values=settings, display_name=user_name if isinstance(user_name, str) else None),
        )
        data_cleared.send(self, user_id=user.user_id, reason='restore', count=len(entries))
        logger.info("Restored %d entries for %s", len(entries), user.user_id)
        return len(entries)

    def export_csv(self, user: UserContext) -> str:
        rows = [entry.to_dict() for entry in sort_for_listing(self._repository.read_all(user))]
        frame = pd.DataFrame(rows, columns=CSV_COLUMNS)
        return frame.to_csv(index=False)
