"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker to enable decoupled communication between modules.

Usage:
    # Publisher (sender)
    from wordchain_app.core.signals import entry_reviewed
    entry_reviewed.send(None, user_id='device-1', entry=entry, passed=True)

    # Subscriber (receiver) - in module's events.py
    @entry_reviewed.connect
    def on_entry_reviewed(sender, **kwargs):
        ...
"""
from blinker import Namespace

vocabulary_signals = Namespace()

# Signal: Fired when a new entry has been stored
# Payload: user_id, entry
entry_added = vocabulary_signals.signal('entry_added')

# Signal: Fired when an entry has been graded and saved
# Payload: user_id, entry, passed, previous_stage
entry_reviewed = vocabulary_signals.signal('entry_reviewed')

# Signal: Fired when an entry is removed by the user
# Payload: user_id, entry_id
entry_deleted = vocabulary_signals.signal('entry_deleted')

# Signal: Fired when all entries (and settings) of a user are wiped or replaced
# Payload: user_id, reason ('clear' or 'restore'), count
data_cleared = vocabulary_signals.signal('data_cleared')
