from typing import List

from wordchain_app.core.extensions import db
from wordchain_app.core.identity import UserContext
from ..models import UserSettingsRecord, VocabularyEntryRecord
from ..schemas import UserSettings, VocabularyEntry
from .base import VocabularyRepository


class SqlVocabularyRepository(VocabularyRepository):
    """Flask-SQLAlchemy backed store. Needs an application context."""

    def read_all(self, user: UserContext) -> List[VocabularyEntry]:
        records = (
            VocabularyEntryRecord.query
            .filter_by(user_id=user.user_id)
            .order_by(VocabularyEntryRecord.position, VocabularyEntryRecord.record_id)
            .all()
        )
        return [record.to_entry() for record in records]

    def write_all(self, user: UserContext, entries: List[VocabularyEntry]) -> None:
        try:
            VocabularyEntryRecord.query.filter_by(user_id=user.user_id).delete()
            db.session.add_all(
                VocabularyEntryRecord.from_entry(user.user_id, entry, position=index)
                for index, entry in enumerate(entries)
            )
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    def read_settings(self, user: UserContext) -> UserSettings:
        record = db.session.get(UserSettingsRecord, user.user_id)
        if record is None:
            return UserSettings()
        return UserSettings(values=dict(record.settings or {}), display_name=record.display_name)

    def write_settings(self, user: UserContext, settings: UserSettings) -> None:
        record = db.session.get(UserSettingsRecord, user.user_id)
        if record is None:
            record = UserSettingsRecord(user_id=user.user_id)
            db.session.add(record)
        record.settings = dict(settings.values)
        record.display_name = settings.display_name
        db.session.commit()

    def clear(self, user: UserContext) -> None:
        try:
            VocabularyEntryRecord.query.filter_by(user_id=user.user_id).delete()
            UserSettingsRecord.query.filter_by(user_id=user.user_id).delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
