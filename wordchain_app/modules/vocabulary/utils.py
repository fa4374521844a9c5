import datetime
from typing import List, Sequence

from wordchain_app.core.error_handlers import NotFoundError
from .schemas import VocabularyEntry


def find_entry_index(entries: Sequence[VocabularyEntry], entry_id: str) -> int:
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            return index
    raise NotFoundError(f"Entry '{entry_id}' not found", resource='vocabulary_entry')


def short_definition(definition: str, separator: str = ';') -> str:
    """Display form of a definition: text up to the first separator."""
    if not definition:
        return ''
    head, _, _ = definition.partition(separator)
    return head.strip()


def sort_for_listing(entries: List[VocabularyEntry]) -> List[VocabularyEntry]:
    """Newest first, then alphabetical."""
    by_word = sorted(entries, key=lambda e: e.word.lower())
    return sorted(by_word, key=lambda e: e.added_date or datetime.date.min, reverse=True)


def sort_for_review(entries: List[VocabularyEntry]) -> List[VocabularyEntry]:
    """Most overdue first, then alphabetical."""
    return sorted(entries, key=lambda e: (e.next_due, e.word.lower()))
