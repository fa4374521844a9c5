# modules/vocabulary/config.py

DEFAULT_SETTINGS = {
    'hideMeaningsByDefault': True,
}

STATUS_FILTERS = ('all', 'new', 'consolidating', 'long-term', 'due')

STORAGE_BACKENDS = ('sqlalchemy', 'json_file', 'memory')

BACKUP_VERSION = 1
