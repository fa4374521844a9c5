# File: wordchain_app/modules/vocabulary/events.py
"""
Vocabulary Module Event Handlers
================================
Activity log for the vocabulary signals.
"""

import logging

from wordchain_app.core.signals import data_cleared, entry_added, entry_deleted, entry_reviewed

logger = logging.getLogger(__name__)


@entry_added.connect
def on_entry_added(sender, **kwargs):
    entry = kwargs.get('entry')
    logger.info("[%s] added '%s' (due %s)", kwargs.get('user_id'), entry.word, entry.next_due)


@entry_reviewed.connect
def on_entry_reviewed(sender, **kwargs):
    entry = kwargs.get('entry')
    logger.info(
        "[%s] reviewed '%s': %s, stage %s -> %s, next due %s",
        kwargs.get('user_id'),
        entry.word,
        'pass' if kwargs.get('passed') else 'fail',
        kwargs.get('previous_stage'),
        entry.stage,
        entry.next_due,
    )


@entry_deleted.connect
def on_entry_deleted(sender, **kwargs):
    logger.info("[%s] deleted entry %s", kwargs.get('user_id'), kwargs.get('entry_id'))


@data_cleared.connect
def on_data_cleared(sender, **kwargs):
    logger.warning("[%s] vocabulary %s (%s entries)", kwargs.get('user_id'), kwargs.get('reason'), kwargs.get('count'))
