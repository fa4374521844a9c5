from datetime import datetime, timezone

from wordchain_app.core.extensions import db
from .schemas import VocabularyEntry


class VocabularyEntryRecord(db.Model):
    """
    Row form of a VocabularyEntry for the SQL-backed repository.
    """
    __tablename__ = 'vocabulary_entries'

    record_id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    entry_id = db.Column(db.String(64), nullable=False)
    position = db.Column(db.Integer, nullable=False, default=0)

    word = db.Column(db.String(255), nullable=False)
    pronunciation = db.Column(db.Text, default='')
    part_of_speech = db.Column(db.String(32), default='')
    definition = db.Column(db.Text, default='')

    # Scheduling
    stage = db.Column(db.Integer, nullable=False, default=0)
    next_due = db.Column(db.Date, nullable=False, index=True)
    last_tested = db.Column(db.Date)
    added_date = db.Column(db.Date)

    updated_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        db.UniqueConstraint('user_id', 'entry_id', name='uq_user_vocabulary_entry'),
    )

    @classmethod
    def from_entry(cls, user_id: str, entry: VocabularyEntry, position: int = 0) -> 'VocabularyEntryRecord':
        return cls(
            user_id=user_id,
            entry_id=entry.id,
            position=position,
            word=entry.word,
            pronunciation=entry.pronunciation,
            part_of_speech=entry.part_of_speech,
            definition=entry.definition,
            stage=entry.stage,
            next_due=entry.next_due,
            last_tested=entry.last_tested,
            added_date=entry.added_date,
        )

    def to_entry(self) -> VocabularyEntry:
        return VocabularyEntry(
            id=self.entry_id,
            word=self.word,
            pronunciation=self.pronunciation or '',
            part_of_speech=self.part_of_speech or '',
            definition=self.definition or '',
            stage=self.stage or 0,
            next_due=self.next_due,
            last_tested=self.last_tested,
            added_date=self.added_date,
        )


class UserSettingsRecord(db.Model):
    """Settings object and display name of one user."""
    __tablename__ = 'user_settings'

    user_id = db.Column(db.String(64), primary_key=True)
    settings = db.Column(db.JSON, nullable=False, default=dict)
    display_name = db.Column(db.String(80))
    updated_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
